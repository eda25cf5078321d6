"""Request signing (HMAC-SHA1 over the canonical query string).

Signing steps:
    1. Add the common parameters (format, version, key id, timestamp, nonce...)
    2. Percent-encode every key and value (RFC 3986: space → ``%20``,
       ``*`` → ``%2A``, ``~`` kept) and join ``key=value`` pairs sorted by key
    3. String to sign: ``GET&%2F&`` + percent-encoded canonical query
    4. ``Signature`` = base64(HMAC-SHA1(secret + "&", string to sign))
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import string
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from urllib.parse import quote

SIGNATURE_KEY = "Signature"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_NONCE_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase


def percent_encode(value: str) -> str:
    return quote(value, safe="~")


def random_nonce(length: int = 64) -> str:
    return "".join(secrets.choice(_NONCE_ALPHABET) for _ in range(length))


def canonical_query(params: Mapping[str, str]) -> str:
    """Sorted, percent-encoded ``key=value`` pairs, excluding the signature."""
    return "&".join(
        f"{percent_encode(k)}={percent_encode(params[k])}"
        for k in sorted(params)
        if k != SIGNATURE_KEY
    )


def string_to_sign(params: Mapping[str, str], method: str = "GET") -> str:
    return f"{method}&{percent_encode('/')}&{percent_encode(canonical_query(params))}"


def sign(secret: str, params: Mapping[str, str], method: str = "GET") -> str:
    mac = hmac.new(f"{secret}&".encode(), string_to_sign(params, method).encode(), hashlib.sha1)
    return base64.b64encode(mac.digest()).decode()


class Signer:
    """Adds common parameters and the signature to a request's parameters.

    The clock and nonce factory are injectable so tests can produce
    deterministic signatures.
    """

    def __init__(
        self,
        access_key_id: str,
        access_key_secret: str,
        *,
        common_params: Mapping[str, str] | None = None,
        clock: Callable[[], datetime] | None = None,
        nonce: Callable[[], str] | None = None,
    ) -> None:
        self.access_key_id = access_key_id
        self._secret = access_key_secret
        self._common = dict(common_params or {})
        self._clock = clock or (lambda: datetime.now(UTC))
        self._nonce = nonce or random_nonce

    def __repr__(self) -> str:
        return f"Signer(access_key_id={self.access_key_id!r})"

    def signed_params(self, params: Mapping[str, str]) -> dict[str, str]:
        """Return a new dict with common parameters and ``Signature`` set.

        The caller's mapping is not modified.
        """
        out = dict(params)
        out.update(self._common)
        out["AccessKeyId"] = self.access_key_id
        out["Timestamp"] = self._clock().astimezone(UTC).strftime(TIMESTAMP_FORMAT)
        out["SignatureNonce"] = self._nonce()
        out[SIGNATURE_KEY] = sign(self._secret, out)
        return out
