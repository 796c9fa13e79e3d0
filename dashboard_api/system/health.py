"""
Process health metrics.

All functions in this module must be:
- Read-only
- Fast
- Safe to call in a request context

No shell commands. No subprocess. No network calls.
"""

from datetime import datetime, timezone
from typing import Dict, Optional
import sys
import time


def memory_usage() -> Optional[Dict[str, float]]:
    """
    Peak resident set size of this process, in MB.
    Returns None where `resource` is unavailable (Windows).
    """
    try:
        import resource
    except ImportError:
        return None
    try:
        peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    except (OSError, ValueError):
        return None
    # macOS reports bytes, Linux and the BSDs report KB
    divisor = 1024 * 1024 if sys.platform == "darwin" else 1024
    return {"peak_rss_mb": round(peak / divisor, 2)}


def uptime_seconds(start_time: float, *, now: Optional[float] = None) -> float:
    """
    Seconds since start_time, never negative.
    """
    now = time.time() if now is None else now
    return round(max(0.0, now - start_time), 3)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """
    ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-03-01T12:00:00.000Z
    """
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def basic_health_snapshot(
    *,
    app_start_time: float,
    version: Optional[str] = None,
) -> Dict[str, object]:
    """
    High-level health snapshot for GET /health.
    """
    snapshot: Dict[str, object] = {
        "status": "OK",
        "timestamp": utc_timestamp(),
        "uptime": uptime_seconds(app_start_time),
    }

    if version:
        snapshot["version"] = version

    memory = memory_usage()
    if memory:
        snapshot["memory"] = memory

    return snapshot
