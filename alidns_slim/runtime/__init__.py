"""Runtime components: REST transport, signing and pagination."""

from .pagination import CounterPaths, PageState, PaginationResult, Paginator
from .rest import HTTPClient, RawResponse, RESTTransport, Signer, Transport

__all__ = [
    "CounterPaths",
    "HTTPClient",
    "PageState",
    "PaginationResult",
    "Paginator",
    "RESTTransport",
    "RawResponse",
    "Signer",
    "Transport",
]
