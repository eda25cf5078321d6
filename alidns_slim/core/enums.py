"""Core enumerations for the DNS API vocabulary."""

from enum import Enum


class RecordType(str, Enum):
    """DNS record types accepted by the record actions.

    String enum so members can be placed directly into query parameters.
    """

    A = "A"
    AAAA = "AAAA"
    CNAME = "CNAME"
    MX = "MX"
    TXT = "TXT"
    NS = "NS"
    SRV = "SRV"
    CAA = "CAA"
    REDIRECT_URL = "REDIRECT_URL"
    FORWARD_URL = "FORWARD_URL"

    @classmethod
    def from_str(cls, value: str) -> "RecordType | None":
        """Look up a record type by its wire value (case-insensitive)."""
        try:
            return cls(value.upper())
        except ValueError:
            return None
