"""Process entry point: ``python -m greeter_service``.

Environment variables:
    PORT             - Port to listen on (default: 3000)
    NAME             - Name to greet (default: World)
    APP_ENV          - development (default), test or production
    PERMITTED_HOSTS  - Host allowlist outside development
    LOG_LEVEL        - Logging level (default: INFO)
"""

import logging
import os
import sys

from .config import load_config
from .errors import StartupError
from .server import serve

logger = logging.getLogger("greeter_service")


def resolve_log_level(name: str) -> int | None:
    """Map a LOG_LEVEL name to a logging level, or None if it is unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def main() -> int:
    """Load configuration, bind and serve.

    Returns:
        Process exit status: 1 if the service could not start.
    """
    level_name = os.environ.get("LOG_LEVEL", "INFO")
    level = resolve_log_level(level_name)
    logging.basicConfig(
        level=logging.INFO if level is None else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if level is None:
        logger.warning("Unknown LOG_LEVEL %r, using INFO.", level_name)

    try:
        config = load_config()
        serve(config)
    except StartupError as e:
        logger.error("Startup failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
