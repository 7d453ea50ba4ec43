import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

SESSION_LIFETIME_HOURS = float(os.getenv("SESSION_LIFETIME_HOURS", "8"))
GEOFENCE_RADIUS_METERS = float(os.getenv("GEOFENCE_RADIUS_METERS", "30000"))

DEFAULT_ENGAGEMENT_TARGET = int(os.getenv("DEFAULT_ENGAGEMENT_TARGET", "50"))
DEFAULT_CONVERSATION_TARGET = int(os.getenv("DEFAULT_CONVERSATION_TARGET", "30"))

# Demo stores, staff and stock are loaded on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
SEED_RANDOM_SEED = int(os.getenv("SEED_RANDOM_SEED")) if os.getenv("SEED_RANDOM_SEED") else None
