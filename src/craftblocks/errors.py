"""
Custom exceptions raised by the craftblocks Python client.
"""


class CraftError(Exception):
    """Base exception for all errors raised by ``craftblocks``."""


class ConstructionError(CraftError, ValueError):
    """Raised when a request cannot be built from the given arguments. No I/O happened."""


class TransportError(CraftError):
    """Raised when the underlying HTTP transport failed before receiving a response."""


class APIError(CraftError):
    """
    Raised when the server responds with a status the operation does not accept.

    Attributes:
        status_code: HTTP status code returned by the server.
        message: ``message`` or ``error`` from a JSON error body, if any.
        body: Raw response body, kept for diagnostics.
    """

    def __init__(
        self,
        *,
        status_code: int,
        message: str | None = None,
        body: str = "",
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.body = body
        details = message or body or "API request failed"
        super().__init__(f"unexpected status {status_code}: {details}")

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500


class DecodeError(CraftError):
    """Raised when a response body does not match the shape the operation expects."""

    def __init__(self, message: str, *, body: str = "") -> None:
        self.body = body
        super().__init__(message)
