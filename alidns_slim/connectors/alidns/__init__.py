"""Alibaba Cloud DNS connector."""

from .actions import (
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
from .client import AliDNSClient, pair_destinations
from .schemas import Domain, DomainRecord, ResponseEnvelope

__all__ = [
    "AliDNSClient",
    "Domain",
    "DomainRecord",
    "ResponseEnvelope",
    "add_domain_record",
    "delete_domain_record",
    "get_domain_record",
    "get_domain_records",
    "get_domains",
    "merge",
    "page",
    "page_size",
    "pair_destinations",
    "update_domain_record",
]
