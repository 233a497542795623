"""HTTP listener for the greeter service.

The socket is bound here rather than inside Werkzeug so that bind failures
surface as :class:`StartupError` instead of Werkzeug's own process exit.
"""

import logging
import socket

from flask import Flask
from werkzeug.serving import BaseWSGIServer, make_server

from .app import create_app
from .config import GreeterConfig
from .errors import StartupError

logger = logging.getLogger(__name__)


def bind_listener(config: GreeterConfig) -> socket.socket:
    """Bind and listen on (bind_host, port).

    Raises:
        StartupError: If the address is in use or cannot be bound.
    """
    try:
        return socket.create_server((config.bind_host, config.port))
    except OSError as e:
        raise StartupError(
            f"Cannot listen on {config.bind_host}:{config.port}: {e.strerror or e}",
            setting="PORT",
        ) from e


def make_greeter_server(config: GreeterConfig, app: Flask | None = None) -> BaseWSGIServer:
    """Bind the listener and wrap it in a threaded Werkzeug server.

    Args:
        config: Resolved service configuration.
        app: Application to serve. If None, one is built from ``config``.

    Returns:
        A bound server; call ``serve_forever()`` to start handling requests.

    Raises:
        StartupError: If the listener cannot be bound.
    """
    if app is None:
        app = create_app(config)

    sock = bind_listener(config)
    try:
        server = make_server(
            config.bind_host,
            config.port,
            app,
            threaded=True,
            fd=sock.fileno(),
        )
    finally:
        # Werkzeug keeps its own duplicate of the descriptor
        sock.close()
    return server


def serve(config: GreeterConfig, app: Flask | None = None) -> None:
    """Serve until interrupted."""
    server = make_greeter_server(config, app)
    logger.info(
        "Greeter listening on http://%s:%d (%s)",
        config.bind_host,
        server.port,
        config.environment.value,
    )
    try:
        server.serve_forever()
    finally:
        server.server_close()
