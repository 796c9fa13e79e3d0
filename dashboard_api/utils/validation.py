import re
from datetime import date

# -----------------------------
# Dates (YYYY-MM-DD, UTC calendar days)
# -----------------------------

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def parse_iso_date(value: str | None) -> date | None:
    """
    Parse a strict YYYY-MM-DD string.
    Returns None for empty, malformed or impossible dates (e.g. 2024-02-30).
    No time part, no timezone offset.
    """
    if not value or not isinstance(value, str):
        return None
    if not ISO_DATE_RE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def is_valid_iso_date(value: str | None) -> bool:
    return parse_iso_date(value) is not None


def is_date_in_range(activity_date: str | None, start_date: str | None = None, end_date: str | None = None) -> bool:
    """
    Inclusive range check at day granularity.
    - unparseable activity date → excluded
    - missing bound → no constraint
    """
    act = parse_iso_date(activity_date)
    if act is None:
        return False

    start = parse_iso_date(start_date) if start_date else None
    end = parse_iso_date(end_date) if end_date else None

    if start and act < start:
        return False
    if end and act > end:
        return False
    return True


# -----------------------------
# Error helpers
# -----------------------------

def validate_fields(field_map: dict[str, tuple[str | None, callable]]):
    """
    field_map = {
        "startDate": (start_value, is_valid_iso_date),
        "endDate": (end_value, is_valid_iso_date),
    }

    Empty values are skipped. Returns the labels that failed, in order.
    """
    invalid = []
    for label, (value, validator) in field_map.items():
        if not value:
            continue
        try:
            if not validator(value):
                invalid.append(label)
        except Exception:
            invalid.append(label)
    return invalid
