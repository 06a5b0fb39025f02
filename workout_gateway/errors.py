"""Error taxonomy shared by the gateway's services and routes."""
from __future__ import annotations


class GatewayError(Exception):
    """Base class for failures that map onto an HTTP error response."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MissingField(GatewayError):
    """A required request field was absent or empty."""

    status_code = 400


class InvalidCategory(GatewayError):
    """The requested workout category is not in the catalog."""

    status_code = 400


class InvalidInput(GatewayError):
    """A numeric profile value was missing or not a number."""

    status_code = 400


class ServiceUnavailable(GatewayError):
    """The recommendation service could not be reached."""

    status_code = 503


class UpstreamError(GatewayError):
    """The recommendation service answered with an error status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message, status_code=status_code)


class InternalError(GatewayError):
    """Unexpected failure; details stay in the server log."""

    status_code = 500
