"""Index and health endpoints."""

from __future__ import annotations

from flask import current_app, jsonify

from dashboard_api import AVAILABLE_ENDPOINTS, get_dataset
from dashboard_api.services.report_service import flatten_members
from dashboard_api.system import health

from . import bp

ENDPOINT_DESCRIPTIONS = {
    "GET /": "This help message",
    "GET /health": "Health check",
    "GET /report/overview": "Summary report across all companies (supports ?startDate&endDate)",
    "GET /report/member/:memberId": "Daily activity log for a member (supports ?startDate&endDate)",
}


@bp.route("/", methods=["GET"])
def index():
    """List endpoints and the members that can be queried."""
    members = [
        {"id": m.member_id, "name": m.name, "team": m.team_name}
        for m in flatten_members(get_dataset())
    ]
    return jsonify(
        {
            "message": "B2B SaaS Productivity Dashboard API",
            "version": current_app.config.get("APP_VERSION"),
            "endpoints": {route: ENDPOINT_DESCRIPTIONS.get(route, "") for route in AVAILABLE_ENDPOINTS},
            "availableMembers": members,
        }
    )


@bp.route("/health", methods=["GET"])
def health_check():
    snapshot = health.basic_health_snapshot(
        app_start_time=current_app.config["APP_START_TIME"],
        version=current_app.config.get("APP_VERSION"),
    )
    return jsonify(snapshot)
