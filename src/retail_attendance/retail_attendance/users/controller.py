from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import error_response, internal_error_response, json_body
from ..common.validators import parse_payload
from ..container import Container
from ..core.exceptions import DomainError
from ..sessions.guards import SessionGuards
from .schemas import AdminLoginRequest, LogoutRequest, StaffLoginRequest


def register(app: Flask, container: Container) -> None:
    guards = SessionGuards(container.session_store, container.clock)

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        try:
            data = parse_payload(StaffLoginRequest, json_body())
            result = container.auth_service.staff_login(
                phone=data.phone,
                store_id=data.store_id,
                latitude=data.coordinates.latitude,
                longitude=data.coordinates.longitude,
                face_scan=data.face_scan,
                now=container.clock(),
            )
            guards.start(result.token)
            return jsonify(
                {
                    "user": result.user.to_dict(),
                    "store": result.store.to_dict(),
                    "attendance": result.attendance.to_dict(),
                    "target": result.target.to_dict(),
                    "inventory": [row.to_dict() for row in result.inventory],
                    "loginStatus": result.login_status.value,
                }
            )
        except DomainError as e:
            app.logger.info("Staff login refused: %s", e)
            return error_response(e)
        except Exception:
            app.logger.exception("Failed to login user")
            return internal_error_response()

    @app.route("/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        try:
            data = parse_payload(AdminLoginRequest, json_body())
            now = container.clock()
            result = container.auth_service.admin_login(phone=data.phone, password=data.password, now=now)
            guards.start(result.token)
            return jsonify(
                {
                    "user": result.user.to_dict(),
                    "stores": [s.to_dict() for s in container.store_service.list_stores()],
                    "attendance": [a.to_dict() for a in container.attendance_service.list_log()],
                    "summary": container.report_service.build_summary(day=now.date()).to_dict(),
                }
            )
        except DomainError as e:
            app.logger.info("Admin login refused: %s", e)
            return error_response(e)
        except Exception:
            app.logger.exception("Failed to login admin")
            return internal_error_response()

    @app.route("/logout", methods=["POST"], endpoint="logout")
    @guards.login_required
    def logout():
        try:
            data = parse_payload(LogoutRequest, json_body(optional=True))
            container.auth_service.logout(g.session_record, now=container.clock(), face_scan=data.face_scan)
            guards.end()
            return jsonify({"message": "Logged out successfully"})
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Failed to logout user")
            return internal_error_response()

    @app.route("/user/current", methods=["GET"], endpoint="current_user")
    @guards.login_required
    def current_user():
        try:
            current = container.auth_service.current_user(g.session_record, now=container.clock())
            return jsonify(
                {
                    "user": current.user.to_dict(),
                    "store": current.store.to_dict(),
                    "attendance": current.attendance.to_dict() if current.attendance else None,
                    "target": current.target.to_dict() if current.target else None,
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            app.logger.exception("Failed to load current user")
            return internal_error_response()
