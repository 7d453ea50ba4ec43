from __future__ import annotations

import csv
import io

from flask import Flask, jsonify

from ..common.http import internal_error_response
from ..container import Container
from ..sessions.guards import SessionGuards
from .service import INVENTORY_SHEET_COLUMNS


def register(app: Flask, container: Container) -> None:
    guards = SessionGuards(container.session_store, container.clock)

    def _write_report_csv(*, rows: list[dict], filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=INVENTORY_SHEET_COLUMNS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/admin/summary", methods=["GET"], endpoint="admin_summary")
    @guards.admin_required
    def admin_summary():
        try:
            summary = container.report_service.build_summary(day=container.clock().date())
            return jsonify(summary.to_dict())
        except Exception:
            app.logger.exception("Failed to build admin summary")
            return internal_error_response()

    @app.route("/admin/inventory", methods=["GET"], endpoint="admin_inventory")
    @guards.admin_required
    def admin_inventory():
        try:
            return jsonify([row.to_dict() for row in container.inventory_service.list_all()])
        except Exception:
            app.logger.exception("Failed to load inventory")
            return internal_error_response()

    @app.route("/admin/inventory.csv", methods=["GET"], endpoint="admin_inventory_csv")
    @guards.admin_required
    def admin_inventory_csv():
        try:
            rows = container.report_service.build_inventory_sheet()
            filename = f"StorePerformance_{container.clock().strftime('%Y-%m-%d')}.csv"
            return _write_report_csv(rows=rows, filename=filename)
        except Exception:
            app.logger.exception("Failed to export inventory")
            return internal_error_response()

    @app.route("/admin/performance", methods=["GET"], endpoint="admin_performance")
    @guards.admin_required
    def admin_performance():
        try:
            rows = container.report_service.build_store_performance(day=container.clock().date())
            return jsonify([p.to_dict() for p in rows])
        except Exception:
            app.logger.exception("Failed to build store performance")
            return internal_error_response()
