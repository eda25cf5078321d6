"""Alibaba Cloud DNS raw response schemas.

Pydantic models for items returned inside listings and record lookups. They
can be used directly as element types for extraction targets, e.g.
``ListTarget(DomainRecord)`` with path ``DomainRecords.Record.*``.

Field aliases are the exact names returned by the API.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class DomainRecord(BaseModel):
    """A DNS record (``DescribeDomainRecords`` / ``DescribeDomainRecordInfo``)."""

    record_id: str = Field("", alias="RecordId", description="Record ID")
    domain_name: str = Field("", alias="DomainName", description="Domain name")
    rr: str = Field("", alias="RR", description="Host record")
    type: str = Field("", alias="Type", description="Record type")
    value: str = Field("", alias="Value", description="Record value")
    ttl: int | None = Field(None, alias="TTL", description="Time to live")
    line: str | None = Field(None, alias="Line", description="Resolution line")
    status: str | None = Field(None, alias="Status", description="ENABLE or DISABLE")
    priority: int | None = Field(None, alias="Priority", description="MX priority")
    locked: bool | None = Field(None, alias="Locked", description="Record is locked")

    model_config = {"populate_by_name": True}

    @property
    def fqdn(self) -> str:
        """Fully qualified name (``@`` is the apex)."""
        if not self.rr or self.rr == "@":
            return self.domain_name
        return f"{self.rr}.{self.domain_name}"


class Domain(BaseModel):
    """A domain entry from ``DescribeDomains``."""

    domain_id: str = Field("", alias="DomainId", description="Domain ID")
    domain_name: str = Field("", alias="DomainName", description="Domain name")
    record_count: int | None = Field(None, alias="RecordCount", description="Number of records")
    dns_servers: list[str] = Field(default_factory=list, alias="DnsServers")

    model_config = {"populate_by_name": True}

    @field_validator("dns_servers", mode="before")
    @classmethod
    def _unwrap_dns_servers(cls, v: Any) -> Any:
        # The API wraps the list: {"DnsServer": ["ns1...", "ns2..."]}
        if isinstance(v, dict):
            return v.get("DnsServer") or []
        return v


class ResponseEnvelope(BaseModel):
    """Top-level error fields present on failed calls.

    A non-empty ``Code`` marks the whole response as a failure, whatever the
    HTTP status.
    """

    code: str | None = Field(None, alias="Code")
    message: str | None = Field(None, alias="Message")
    request_id: str | None = Field(None, alias="RequestId")

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}
