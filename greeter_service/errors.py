"""Custom exception classes for the greeter service."""


class GreeterError(Exception):
    """Base exception class for greeter service errors."""

    pass


class StartupError(GreeterError):
    """The service cannot start: bad configuration or an unbindable address."""

    def __init__(self, message: str, setting: str | None = None):
        super().__init__(message)
        self.setting = setting
