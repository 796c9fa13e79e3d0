"""Routes package.

This package defines the primary Flask blueprint (`bp`) and imports the split
route modules so their @bp.route decorators are registered.

NOTE: The Flask app factory and error handlers live in `dashboard_api/__init__.py`,
not inside the routes package.
"""

from flask import Blueprint

# Primary API blueprint
bp = Blueprint("main", __name__)

# Import route modules to register routes on the blueprint.
# These imports must come AFTER `bp` is defined.
from . import reports  # noqa: F401,E402
from . import system  # noqa: F401,E402
