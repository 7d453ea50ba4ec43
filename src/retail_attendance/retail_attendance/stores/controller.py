from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, internal_error_response
from ..common.validators import parse_payload
from ..container import Container
from ..core.exceptions import DomainError
from ..sessions.guards import SessionGuards
from .schemas import StoreLookupQuery


def register(app: Flask, container: Container) -> None:
    guards = SessionGuards(container.session_store, container.clock)

    def _stores_json():
        try:
            return jsonify([s.to_dict() for s in container.store_service.list_stores()])
        except Exception:
            app.logger.exception("Failed to list stores")
            return internal_error_response()

    @app.route("/stores", methods=["GET"], endpoint="stores")
    def stores():
        if "latitude" not in request.args and "longitude" not in request.args:
            return _stores_json()
        # Position given: the store whose geofence contains it, if any.
        try:
            query = parse_payload(StoreLookupQuery, request.args.to_dict())
            store = container.store_service.find_by_coordinates(query.latitude, query.longitude)
            return jsonify([store.to_dict()] if store else [])
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Failed to look up store by coordinates")
            return internal_error_response()

    @app.route("/admin/stores", methods=["GET"], endpoint="admin_stores")
    @guards.admin_required
    def admin_stores():
        return _stores_json()
