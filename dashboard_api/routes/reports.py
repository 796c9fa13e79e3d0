"""Report endpoints.

GET /report/overview                  aggregate stats across every company
GET /report/member/<member_id>        daily activity log for one member

Both accept optional ?startDate=YYYY-MM-DD&endDate=YYYY-MM-DD (inclusive).
"""

from __future__ import annotations

from flask import current_app, jsonify, request

from dashboard_api import get_dataset
from dashboard_api.services import report_service

from . import bp
from .helpers import error_response, invalid_date_response, parse_date_range


@bp.route("/report/overview", methods=["GET"])
def overview_report():
    """Summary report across all companies."""
    try:
        date_range, date_error = parse_date_range(request.args)
        if date_error:
            return invalid_date_response(date_error)

        current_app.logger.debug("Overview report requested (filter=%s)", date_range.as_dict() or None)
        report = report_service.build_overview_report(get_dataset(), date_range)
        return jsonify(report)
    except Exception:
        current_app.logger.exception("Error generating overview report")
        return error_response("Internal server error", "Failed to generate overview report", 500)


@bp.route("/report/member/<member_id>", methods=["GET"])
def member_report(member_id):
    """Daily activity log for a single member."""
    try:
        date_range, date_error = parse_date_range(request.args)
        if date_error:
            return invalid_date_response(date_error)

        member = report_service.find_member_by_id(get_dataset(), member_id)
        if member is None:
            return error_response("Member not found", f"Member with ID {member_id} does not exist", 404)

        current_app.logger.debug(
            "Member report requested for %s (filter=%s)", member_id, date_range.as_dict() or None
        )
        report = report_service.build_member_report(member, date_range)
        return jsonify(report)
    except Exception:
        current_app.logger.exception("Error generating member report for member_id=%s", member_id)
        return error_response("Internal server error", "Failed to generate member report", 500)
