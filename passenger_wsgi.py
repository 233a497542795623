"""Phusion Passenger WSGI entry point.

Passenger looks for a module-level ``application`` callable that conforms
to the WSGI spec (PEP 3333). Passenger owns the listening socket, so PORT
is only validated here, never bound.

Environment variables:
    NAME             - Name to greet (default: World).
    APP_ENV          - Set to "production" to enforce the Host allowlist.
    PERMITTED_HOSTS  - Comma-separated hostnames served in production.
"""

import sys
import os

# Ensure the package directory is on the path when Passenger runs this file
_here = os.path.dirname(os.path.abspath(__file__))
if _here not in sys.path:
    sys.path.insert(0, _here)

from greeter_service.app import create_app

# Passenger expects a module-level 'application' variable
application = create_app()
