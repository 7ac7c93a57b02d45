"""Exceptions raised by the dashboard store."""


class DashboardError(Exception):
    """Base class for store errors."""


class AuthenticationError(DashboardError):
    """Unknown username, inactive account or wrong password.

    The message is identical in every case so callers cannot tell which check failed.
    """

    def __init__(self, message: str = "Invalid username or password") -> None:
        super().__init__(message)
