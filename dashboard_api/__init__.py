import logging
import time
from typing import Any, Mapping, Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import MethodNotAllowed, NotFound

from dotenv import load_dotenv
load_dotenv()

from .config import Config  # noqa: E402  (reads the environment populated above)
from .models import Dataset, build_sample_dataset  # noqa: E402

# Application version
APP_VERSION = "1.0.0"

# Process start, shared by every app created in this process
PROCESS_START_TIME = time.time()

DATASET_EXTENSION_KEY = "dashboard_dataset"

# Route listing used by the 404 handler and the index endpoint
AVAILABLE_ENDPOINTS = [
    "GET /",
    "GET /health",
    "GET /report/overview",
    "GET /report/member/:memberId",
]


def get_dataset() -> Dataset:
    """Return the dataset attached to the running app."""
    return current_app.extensions[DATASET_EXTENSION_KEY]


def _configure_logging(app: Flask) -> None:
    level = logging.getLevelName(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO
    # app.logger is the "dashboard_api" logger, parent of the service module loggers
    app.logger.setLevel(level)


def _register_error_handlers(app: Flask) -> None:
    def _route_not_found(error):
        return (
            jsonify(
                {
                    "error": "Not Found",
                    "message": f"Route {request.method} {request.full_path.rstrip('?')} not found",
                    "availableEndpoints": AVAILABLE_ENDPOINTS,
                }
            ),
            404,
        )

    # Wrong method on a known path is reported the same way as an unknown path
    app.register_error_handler(NotFound, _route_not_found)
    app.register_error_handler(MethodNotAllowed, _route_not_found)

    @app.errorhandler(500)
    def _internal_error(error):
        original = getattr(error, "original_exception", None) or error
        app.logger.error("Unhandled error: %r", original, exc_info=original)
        return (
            jsonify(
                {
                    "error": "Internal Server Error",
                    "message": "Something went wrong!",
                }
            ),
            500,
        )


def create_app(test_config: Optional[Mapping[str, Any]] = None, dataset: Optional[Dataset] = None):
    """Application factory for the productivity dashboard API.

    `test_config` overrides values from Config; `dataset` replaces the bundled
    sample data. The dataset is built once here and shared by every request.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.config.setdefault("APP_VERSION", APP_VERSION)
    app.config["APP_START_TIME"] = PROCESS_START_TIME

    # Keep keys in the order the reports build them
    app.json.sort_keys = False

    _configure_logging(app)

    app.extensions[DATASET_EXTENSION_KEY] = dataset if dataset is not None else build_sample_dataset()

    # Register blueprints
    from .routes import bp as main_bp

    app.register_blueprint(main_bp)

    _register_error_handlers(app)

    app.logger.debug(
        "Dashboard API %s ready with %d companies",
        app.config["APP_VERSION"],
        len(app.extensions[DATASET_EXTENSION_KEY]),
    )
    return app
