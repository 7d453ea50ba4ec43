from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, internal_error_response, json_body
from ..common.validators import parse_payload
from ..container import Container
from ..core.exceptions import DomainError
from ..sessions.guards import SessionGuards
from .schemas import UpdateInventoryRequest


def register(app: Flask, container: Container) -> None:
    guards = SessionGuards(container.session_store, container.clock)

    @app.route("/inventory/store/<int:store_id>", methods=["GET"], endpoint="store_inventory")
    @guards.login_required
    def store_inventory(store_id: int):
        try:
            rows = container.inventory_service.list_for_store(store_id)
            return jsonify([row.to_dict() for row in rows])
        except Exception:
            app.logger.exception("Failed to load inventory for store %s", store_id)
            return internal_error_response()

    @app.route("/inventory/<int:inventory_id>", methods=["PUT"], endpoint="update_inventory")
    @guards.login_required
    def update_inventory(inventory_id: int):
        try:
            data = parse_payload(UpdateInventoryRequest, json_body())
            item = container.inventory_service.record_closing_stock(inventory_id, data.closing_stock)
            return jsonify(item.to_dict())
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Failed to update inventory %s", inventory_id)
            return internal_error_response()

    @app.route("/brands", methods=["GET"], endpoint="brands")
    @guards.login_required
    def brands():
        try:
            return jsonify([b.to_dict() for b in container.inventory_service.list_brands()])
        except Exception:
            app.logger.exception("Failed to list brands")
            return internal_error_response()
