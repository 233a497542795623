"""Host header authorization middleware for the greeter service."""

import ipaddress
import logging
import re

from flask import Flask, Response, request
from werkzeug.sansio.utils import host_is_trusted

from ..config import GreeterConfig

logger = logging.getLogger(__name__)

_REJECTION_BODY = "Host not permitted"
_HOST_HEADER_RE = re.compile(
    r"(?:\[(?P<ipv6>[^\]]*)\]|(?P<name>[^:\[\]]+))(?::(?P<port>\d*))?", re.ASCII
)


def register_host_authorization(app: Flask, config: GreeterConfig) -> None:
    """Attach the Host allowlist check to the Flask app via a before_request hook.

    Rules:
      - development mode: disabled, any Host header is accepted
      - IP literal hosts: accepted
      - ".example.com" entry: matches example.com and any subdomain
      - other entries: exact, case-insensitive match
      - missing or malformed Host header: rejected

    Args:
        app: Flask application instance.
        config: Resolved service configuration.
    """
    if not config.host_authorization_enabled:
        logger.info(
            "Running in development mode: host authorization is disabled, "
            "requests with any Host header are accepted."
        )
        return

    permitted = config.permitted_hosts

    @app.before_request
    def check_host():
        host_header = request.headers.get("Host", "")
        if is_permitted_host(host_header, permitted):
            return None

        logger.warning("Rejected request for %s with Host %r", request.path, host_header)
        return Response(_REJECTION_BODY, status=403, mimetype="text/plain")


def is_permitted_host(host_header: str, permitted_hosts) -> bool:
    """Check a raw Host header value against an allowlist.

    Args:
        host_header: Host header as sent by the client, possibly with a port.
        permitted_hosts: Iterable of allowed hostnames; a leading "." allows subdomains.

    Returns:
        True when the request may proceed. Malformed headers never pass.
    """
    host = split_host_header(host_header)
    if not host:
        return False

    if _is_ip_literal(host):
        return True

    try:
        return host_is_trusted(host.lower().rstrip("."), [h.lower() for h in permitted_hosts])
    except UnicodeError:
        # empty or oversized labels fail IDNA encoding
        return False


def split_host_header(host_header: str) -> str | None:
    """Return the host part of a Host header, without port or IPv6 brackets.

    Returns None when the header is not ``host``, ``host:port``,
    ``[ipv6]`` or ``[ipv6]:port``. A bracketed host must be an IPv6 address.
    """
    match = _HOST_HEADER_RE.fullmatch(host_header.strip())
    if match is None:
        return None

    ipv6 = match.group("ipv6")
    if ipv6 is not None:
        try:
            if ipaddress.ip_address(ipv6).version != 6:
                return None
        except ValueError:
            return None
        return ipv6
    return match.group("name")


def _is_ip_literal(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True
