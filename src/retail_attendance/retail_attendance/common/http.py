from __future__ import annotations

from flask import jsonify, request

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    LoginError,
    NotFoundError,
    ValidationError,
)


def status_for(error: DomainError) -> int:
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, AuthorizationError):
        return 403
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, ConflictError):
        return 409
    return 400


def error_response(error: DomainError):
    body: dict = {"message": str(error)}
    if isinstance(error, LoginError):
        body["reason"] = error.reason.value
    if isinstance(error, ValidationError) and error.errors:
        body["errors"] = error.errors
    return jsonify(body), status_for(error)


def internal_error_response():
    return jsonify({"message": "Internal server error"}), 500


def json_body(*, optional: bool = False):
    """Decoded JSON body, ``{}`` when optional and absent."""
    payload = request.get_json(silent=True)
    if payload is None and optional and not request.get_data():
        return {}
    return payload
