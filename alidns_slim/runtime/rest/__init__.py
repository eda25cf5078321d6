"""REST runtime abstractions."""

from .http_client import HTTPClient, ResponseHook
from .signing import Signer, canonical_query, percent_encode, sign, string_to_sign
from .transport import RawResponse, RESTTransport, Transport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RawResponse",
    "ResponseHook",
    "Signer",
    "Transport",
    "canonical_query",
    "percent_encode",
    "sign",
    "string_to_sign",
]
