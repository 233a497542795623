"""Configuration management for the greeter service.

All settings come from environment variables and are resolved once, at
startup, into an immutable :class:`GreeterConfig`.
"""

import enum
import logging
import os
from dataclasses import dataclass, field, asdict
from typing import Any, Mapping

from .errors import StartupError

logger = logging.getLogger(__name__)

BIND_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_NAME = "World"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_PERMITTED_HOSTS = ("localhost", ".localhost", ".test")

_MAX_PORT = 65535


class Environment(enum.Enum):
    """Runtime mode selected with APP_ENV."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass(frozen=True)
class GreeterConfig:
    """Settings for one run of the greeter service."""

    port: int = DEFAULT_PORT
    name: str = DEFAULT_NAME
    environment: Environment = Environment.DEVELOPMENT
    permitted_hosts: tuple[str, ...] = field(default=DEFAULT_PERMITTED_HOSTS)
    bind_host: str = BIND_HOST

    @property
    def host_authorization_enabled(self) -> bool:
        """Development mode accepts any Host header."""
        return self.environment is not Environment.DEVELOPMENT

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        data = asdict(self)
        data["environment"] = self.environment.value
        data["permitted_hosts"] = list(self.permitted_hosts)
        return data


def parse_port(value: str) -> int:
    """Parse a PORT value.

    Args:
        value: Raw environment value.

    Returns:
        Port number in 1..65535.

    Raises:
        StartupError: If the value is not a decimal integer in range.
    """
    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        raise StartupError(f"Invalid PORT {value!r}: expected a positive integer", setting="PORT")
    port = int(text)
    if not 1 <= port <= _MAX_PORT:
        raise StartupError(f"Invalid PORT {value!r}: must be between 1 and {_MAX_PORT}", setting="PORT")
    return port


def parse_environment(value: str) -> Environment:
    try:
        return Environment(value.strip().lower())
    except ValueError:
        logger.warning("Unknown APP_ENV %r - treating it as production.", value)
        return Environment.PRODUCTION


def parse_permitted_hosts(value: str) -> tuple[str, ...]:
    """Split a comma-separated host list, dropping blanks and lowercasing."""
    return tuple(h.strip().lower() for h in value.split(",") if h.strip())


def load_config(environ: Mapping[str, str] | None = None) -> GreeterConfig:
    """Build the service configuration from environment variables.

    Environment variables:
        PORT             - TCP port to listen on (default 3000).
        NAME             - Name to greet (default "World"). Requests re-read it.
        APP_ENV          - development (default), test or production.
        PERMITTED_HOSTS  - Comma-separated Host allowlist used outside
                           development (default "localhost,.localhost,.test").

    Args:
        environ: Mapping to read from. If None, uses os.environ.

    Returns:
        GreeterConfig instance.

    Raises:
        StartupError: If PORT is invalid.
    """
    if environ is None:
        environ = os.environ

    port = parse_port(environ.get("PORT", str(DEFAULT_PORT)))
    environment = parse_environment(environ.get("APP_ENV", DEFAULT_ENVIRONMENT))

    permitted_hosts = DEFAULT_PERMITTED_HOSTS
    if environ.get("PERMITTED_HOSTS"):
        permitted_hosts = parse_permitted_hosts(environ["PERMITTED_HOSTS"])

    return GreeterConfig(
        port=port,
        name=environ.get("NAME", DEFAULT_NAME),
        environment=environment,
        permitted_hosts=permitted_hosts,
    )
