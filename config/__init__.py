"""Settings modules for the retail attendance service, chosen by ``APP_ENV``."""
import os

ENVIRONMENTS = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # Anything unrecognised runs with development settings
    env = os.getenv("APP_ENV", "development").strip().lower()
    return ENVIRONMENTS.get(env, "config.development")
