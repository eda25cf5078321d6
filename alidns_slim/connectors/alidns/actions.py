"""Query parameter builders for the DNS actions.

Every builder returns a fresh ``dict[str, str]`` and accepts trailing
overlays, which are merged in order with last-writer-wins per key:

    >>> get_domains(page_size(50))
    {'Action': 'DescribeDomains', 'PageSize': '50'}
    >>> merge({"PageSize": "10"}, {"PageSize": "20"}, {"PageNumber": "2"})
    {'PageSize': '20', 'PageNumber': '2'}
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

Params = dict[str, str]


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def merge(base: Mapping[str, Any], *overlays: Mapping[str, Any]) -> Params:
    """Merge ``overlays`` onto ``base``; later keys win. Inputs are not modified."""
    out: Params = {k: _to_str(v) for k, v in base.items()}
    for overlay in overlays:
        for key, value in overlay.items():
            out[key] = _to_str(value)
    return out


def get_domains(*overlays: Mapping[str, Any]) -> Params:
    """List domains (``DescribeDomains``, paged)."""
    return merge({"Action": "DescribeDomains"}, *overlays)


def get_domain_records(domain_name: str, *overlays: Mapping[str, Any]) -> Params:
    """List records of a domain (``DescribeDomainRecords``, paged)."""
    return merge({"Action": "DescribeDomainRecords", "DomainName": domain_name}, *overlays)


def get_domain_record(record_id: str, *overlays: Mapping[str, Any]) -> Params:
    return merge({"Action": "DescribeDomainRecordInfo", "RecordId": record_id}, *overlays)


def add_domain_record(
    rr: str, domain_name: str, record_type: Any, value: str, *overlays: Mapping[str, Any]
) -> Params:
    """Create a record; the response carries the new ``RecordId``."""
    return merge(
        {
            "Action": "AddDomainRecord",
            "RR": rr,
            "DomainName": domain_name,
            "Type": record_type,
            "Value": value,
        },
        *overlays,
    )


def update_domain_record(
    record_id: str, rr: str, record_type: Any, value: str, *overlays: Mapping[str, Any]
) -> Params:
    return merge(
        {
            "Action": "UpdateDomainRecord",
            "RecordId": record_id,
            "RR": rr,
            "Type": record_type,
            "Value": value,
        },
        *overlays,
    )


def delete_domain_record(record_id: str, *overlays: Mapping[str, Any]) -> Params:
    return merge({"Action": "DeleteDomainRecord", "RecordId": record_id}, *overlays)


def page(number: int, *overlays: Mapping[str, Any]) -> Params:
    return merge({"PageNumber": number}, *overlays)


def page_size(size: int, *overlays: Mapping[str, Any]) -> Params:
    return merge({"PageSize": size}, *overlays)
