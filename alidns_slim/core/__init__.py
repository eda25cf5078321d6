"""Core components."""

from .enums import RecordType
from .exceptions import (
    ClientError,
    ConfigurationError,
    DecodeError,
    DestinationArityError,
    ResponseError,
    StatusError,
    TransportError,
)

__all__ = [
    "ClientError",
    "ConfigurationError",
    "DecodeError",
    "DestinationArityError",
    "RecordType",
    "ResponseError",
    "StatusError",
    "TransportError",
]
