"""Public exceptions for the Courier SDK."""


class CourierError(Exception):
    """Base exception for all Courier SDK errors."""


class CourierValidationError(CourierError):
    """Invalid request descriptor (malformed payload, unknown method)."""


class CourierConfigError(CourierError):
    """Configuration error (malformed env vars, invalid settings)."""


class CourierTransportError(CourierError):
    """The request never completed a round trip with the remote server."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class CourierTimeoutError(CourierTransportError):
    """The request timed out before a response arrived."""
