from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import internal_error_response
from ..container import Container
from ..sessions.guards import SessionGuards


def register(app: Flask, container: Container) -> None:
    guards = SessionGuards(container.session_store, container.clock)

    @app.route("/admin/attendance", methods=["GET"], endpoint="admin_attendance")
    @guards.admin_required
    def admin_attendance():
        try:
            return jsonify([a.to_dict() for a in container.attendance_service.list_log()])
        except Exception:
            app.logger.exception("Failed to load attendance log")
            return internal_error_response()
