"""GET / - plain-text greeting."""

import os

from flask import Blueprint, Response

from ..config import DEFAULT_NAME

greeting_bp = Blueprint("greeting", __name__)


def format_greeting(name: str) -> str:
    return f"Hello {name}!"


@greeting_bp.get("/")
def greet():
    """GET / - Greet the name in NAME, read fresh on every request."""
    name = os.environ.get("NAME", DEFAULT_NAME)
    return Response(format_greeting(name), status=200, mimetype="text/plain")
