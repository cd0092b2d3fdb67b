from __future__ import annotations

from flask import Flask, Response, request

from ..billing.export import bill_message, csv_filename, share_link, statement_to_csv
from ..common.datetime_utils import now_local
from ..common.http import api_errors, fail, ok
from ..container import Container
from ..ledger.windows import Month


def _month_arg() -> Month:
    value = request.args.get("month")
    return Month.parse(value) if value else Month.of(now_local())


def register(app: Flask, container: Container) -> None:
    svc = container.report_service

    @app.route("/api/earnings", methods=["GET"], endpoint="reports_earnings")
    @api_errors
    def reports_earnings():
        return ok(svc.earnings())

    @app.route("/api/attendance", methods=["GET"], endpoint="reports_attendance")
    @api_errors
    def reports_attendance():
        month = _month_arg()
        grid = svc.attendance_grid(month)
        return ok(
            {
                "month": str(month),
                "label": month.label(),
                "previous": str(month.previous()),
                "next": str(month.next()),
                "days": grid.days,
                "rows": grid.rows,
                "totals": grid.totals,
                "skipped": grid.skipped,
            }
        )

    @app.route("/api/billing", methods=["GET"], endpoint="reports_billing")
    @api_errors
    def reports_billing():
        month = _month_arg()
        report = svc.billing_report(month)
        return ok(
            {
                "month": str(month),
                "label": month.label(),
                "bills": report.bills,
                "summary": report.summary,
                "skipped": report.skipped,
            }
        )

    @app.route("/api/billing/export.csv", methods=["GET"], endpoint="reports_billing_csv")
    @api_errors
    def reports_billing_csv():
        month = _month_arg()
        body = statement_to_csv(svc.billing_report(month))
        return Response(
            body,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={csv_filename(month)}"},
        )

    @app.route("/api/billing/message", methods=["GET"], endpoint="reports_billing_message")
    @api_errors
    def reports_billing_message():
        month = _month_arg()
        client = (request.args.get("client") or "").strip()
        if not client:
            return fail("client is required")

        bill = svc.client_bill(month, client)
        if not bill:
            return fail("No completed rides for this client in the selected month", 404)
        return ok({"message": bill_message(bill, month), "share_link": share_link(bill, month)})
