"""alidns-slim - signed-request client for Alibaba Cloud DNS with path-based extraction."""

from .connectors.alidns import (
    AliDNSClient,
    Domain,
    DomainRecord,
    add_domain_record,
    delete_domain_record,
    get_domain_record,
    get_domain_records,
    get_domains,
    merge,
    page,
    page_size,
    update_domain_record,
)
from .core import (
    ClientError,
    ConfigurationError,
    DecodeError,
    DestinationArityError,
    RecordType,
    ResponseError,
    StatusError,
    TransportError,
)
from .extraction import ListTarget, RawTarget, ScalarTarget, extract
from .runtime import CounterPaths, PaginationResult

__version__ = "0.1.0"

__all__ = [
    "AliDNSClient",
    "ClientError",
    "ConfigurationError",
    "CounterPaths",
    "DecodeError",
    "DestinationArityError",
    "Domain",
    "DomainRecord",
    "ListTarget",
    "PaginationResult",
    "RawTarget",
    "RecordType",
    "ResponseError",
    "ScalarTarget",
    "StatusError",
    "TransportError",
    "add_domain_record",
    "delete_domain_record",
    "extract",
    "get_domain_record",
    "get_domain_records",
    "get_domains",
    "merge",
    "page",
    "page_size",
    "update_domain_record",
]
