import os


def _env_bool(name, default=False):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name, default):
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-me")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    DASHBOARD_HOST = os.environ.get("DASHBOARD_HOST", "127.0.0.1")
    DASHBOARD_PORT = _env_int("DASHBOARD_PORT", 3000)
    DASHBOARD_DEBUG = _env_bool("DASHBOARD_DEBUG", False)
