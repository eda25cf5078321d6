"""Custom exception hierarchy."""

from __future__ import annotations


class ClientError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(ClientError):
    """Client configuration is incomplete (e.g. missing credentials)."""

    pass


class TransportError(ClientError):
    """The HTTP exchange could not be completed.

    Raised for network failures and timeouts. The underlying aiohttp or
    asyncio exception is chained as ``__cause__``.
    """

    pass


class ResponseError(ClientError):
    """Remote API returned an error envelope.

    The envelope code takes priority over the HTTP status: a response carrying
    a non-empty ``Code`` is a failure even when the status is 200.
    """

    def __init__(
        self,
        code: str,
        message: str = "",
        *,
        request_id: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"{code} Error: {message}")
        self.code = code
        self.message = message
        self.request_id = request_id
        self.status_code = status_code


class StatusError(ClientError):
    """Transport succeeded but the HTTP status was not 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"returned status {status_code} instead of 200")
        self.status_code = status_code


class DecodeError(ClientError):
    """Response body does not decode into the requested shape."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class DestinationArityError(ClientError, ValueError):
    """Destinations violate the ``target, path, target, path`` pairing."""

    pass
