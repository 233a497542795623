"""Flask application factory for the greeter service."""

import logging

from flask import Flask, request

from .config import GreeterConfig, load_config
from .middleware.hosts import register_host_authorization
from .routes.greeting import greeting_bp

logger = logging.getLogger(__name__)


def create_app(config: GreeterConfig | None = None, testing: bool = False) -> Flask:
    """Flask application factory.

    Args:
        config: Resolved configuration. If None, it is loaded from the
                environment (see :func:`greeter_service.config.load_config`).
        testing: Set Flask testing mode (disables error catching).

    Returns:
        Configured Flask application.

    Raises:
        StartupError: If the configuration cannot be loaded.
    """
    if config is None:
        config = load_config()

    app = Flask(__name__)
    app.config["TESTING"] = testing
    app.config["GREETER"] = config

    # -------------------------------------------------------------------------
    # Host authorization (disabled in development)
    # -------------------------------------------------------------------------
    register_host_authorization(app, config)

    # -------------------------------------------------------------------------
    # Request logging
    # -------------------------------------------------------------------------
    @app.after_request
    def log_request(response):
        logger.info("%s %s %d", request.method, request.path, response.status_code)
        return response

    app.register_blueprint(greeting_bp)

    return app
