"""Shared route helpers.

This module exists to keep route modules small and avoid duplicating the
query-string and error-envelope handling across report endpoints.

Intentionally **no Blueprint routes** should live here.
"""

from __future__ import annotations

from typing import Mapping, Optional, Tuple

from flask import jsonify

from dashboard_api.services.report_service import DateRange
from dashboard_api.utils.validation import is_valid_iso_date, validate_fields


# -----------------------------------------------------------------------------
# Dates
# -----------------------------------------------------------------------------

def parse_date_range(args: Mapping[str, str]) -> Tuple[Optional[DateRange], Optional[str]]:
    """Read startDate/endDate from query args.

    Only an empty value counts as absent; anything else must be strict YYYY-MM-DD.
    Returns: (date_range_or_None, error_message_or_None). Only the first
    invalid field is reported, startDate before endDate.
    """
    start = args.get("startDate") or None
    end = args.get("endDate") or None

    invalid = validate_fields(
        {
            "startDate": (start, is_valid_iso_date),
            "endDate": (end, is_valid_iso_date),
        }
    )
    if invalid:
        return None, f"{invalid[0]} must be in YYYY-MM-DD format"

    return DateRange(start=start, end=end), None


# -----------------------------------------------------------------------------
# JSON envelopes
# -----------------------------------------------------------------------------

def error_response(error: str, message: str, status: int):
    return jsonify({"error": error, "message": message}), status


def invalid_date_response(message: str):
    return error_response("Invalid date format", message, 400)
