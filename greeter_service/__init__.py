"""greeter-service - a minimal HTTP greeting server.

Usage::

    from greeter_service import load_config, serve

    serve(load_config())  # blocks; GET / answers "Hello World!"
"""

from .app import create_app
from .errors import GreeterError, StartupError
from .config import (
    GreeterConfig,
    Environment,
    load_config,
    BIND_HOST,
    DEFAULT_NAME,
    DEFAULT_PORT,
)
from .server import bind_listener, make_greeter_server, serve

__version__ = "1.0.0"
__all__ = [
    # Application
    "create_app",
    "serve",
    "make_greeter_server",
    "bind_listener",
    # Configuration
    "GreeterConfig",
    "Environment",
    "load_config",
    "BIND_HOST",
    "DEFAULT_NAME",
    "DEFAULT_PORT",
    # Errors
    "GreeterError",
    "StartupError",
]
