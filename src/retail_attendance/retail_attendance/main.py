from __future__ import annotations

import importlib
import logging
import os
import random
import time
from datetime import timedelta
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, g, request

from config import get_settings_module

from .database.bootstrap import seed_demo_data

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .inventory.controller import register as register_inventory
from .reports.controller import register as register_reports
from .stores.controller import register as register_stores
from .targets.controller import register as register_targets
from .users.controller import register as register_users

SETTING_KEYS = (
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "SESSION_LIFETIME_HOURS",
    "GEOFENCE_RADIUS_METERS",
    "DEFAULT_ENGAGEMENT_TARGET",
    "DEFAULT_CONVERSATION_TARGET",
    "AUTO_SEED_DB",
    "SEED_RANDOM_SEED",
    "SESSION_COOKIE_SECURE",
)


def _register_request_logging(app: Flask) -> None:
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop("request_started", None)
        if started is not None:
            elapsed_ms = (time.perf_counter() - started) * 1000
            app.logger.info("%s %s %s in %.0fms", request.method, request.path, response.status_code, elapsed_ms)
        return response


def create_app(
    *,
    container: Optional[Container] = None,
    settings_overrides: Optional[Mapping[str, Any]] = None,
) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    config = {key: getattr(settings, key) for key in SETTING_KEYS if hasattr(settings, key)}
    config.update(settings_overrides or {})

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("retail_attendance").setLevel(config.get("LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config.update(config)

    session_hours = float(app.config.get("SESSION_LIFETIME_HOURS", 8))
    app.permanent_session_lifetime = timedelta(hours=session_hours)

    if container is None:
        container = build_container(
            geofence_radius_meters=float(app.config.get("GEOFENCE_RADIUS_METERS", 30_000)),
            session_hours=session_hours,
            default_engagement_target=int(app.config.get("DEFAULT_ENGAGEMENT_TARGET", 50)),
            default_conversation_target=int(app.config.get("DEFAULT_CONVERSATION_TARGET", 30)),
        )
        if app.config.get("AUTO_SEED_DB"):
            seed = app.config.get("SEED_RANDOM_SEED")
            seed_demo_data(
                container,
                day=container.clock().date(),
                rng=random.Random(seed) if seed is not None else None,
            )

    app.logger.info("settings=%s", settings_module)
    app.extensions["retail_attendance"] = container

    _register_request_logging(app)
    register_users(app, container)
    register_stores(app, container)
    register_attendance(app, container)
    register_targets(app, container)
    register_inventory(app, container)
    register_reports(app, container)

    return app


def main() -> None:
    app = create_app()
    port = int(os.getenv("PORT", "5000"))
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=port, debug=bool(app.config.get("DEBUG", False)))


if __name__ == "__main__":
    main()
