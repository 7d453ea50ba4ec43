from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, internal_error_response, json_body
from ..common.validators import parse_payload
from ..container import Container
from ..core.exceptions import DomainError
from ..sessions.guards import SessionGuards
from .schemas import UpdateTargetRequest


def register(app: Flask, container: Container) -> None:
    guards = SessionGuards(container.session_store, container.clock)

    @app.route("/targets/<int:target_id>", methods=["PUT"], endpoint="update_target")
    @guards.login_required
    def update_target(target_id: int):
        try:
            data = parse_payload(UpdateTargetRequest, json_body())
            target = container.target_service.update(target_id, data.changes())
            return jsonify(target.to_dict())
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Failed to update target %s", target_id)
            return internal_error_response()

    @app.route("/admin/targets", methods=["GET"], endpoint="admin_targets")
    @guards.admin_required
    def admin_targets():
        try:
            return jsonify([t.to_dict() for t in container.target_service.list_all()])
        except Exception:
            app.logger.exception("Failed to list targets")
            return internal_error_response()
