"""Unit tests for request signing."""

from __future__ import annotations

import base64
import hashlib
import hmac
from datetime import UTC, datetime, timedelta, timezone

from alidns_slim.runtime.rest import Signer, canonical_query, percent_encode, sign, string_to_sign
from alidns_slim.runtime.rest.signing import random_nonce

FIXED_TIME = datetime(2016, 3, 24, 16, 41, 54, tzinfo=UTC)


def _signer(**kwargs) -> Signer:
    return Signer(
        "testid",
        "testsecret",
        common_params={"Format": "json", "Version": "2015-01-09"},
        clock=lambda: FIXED_TIME,
        nonce=lambda: "NONCE",
        **kwargs,
    )


class TestPercentEncode:
    def test_rfc3986_rules(self):
        assert percent_encode("a b") == "a%20b"
        assert percent_encode("a*b") == "a%2Ab"
        assert percent_encode("a~b") == "a~b"
        assert percent_encode("a/b+c=") == "a%2Fb%2Bc%3D"


class TestCanonicalQuery:
    def test_sorted_and_signature_excluded(self):
        params = {"b": "2", "a": "1", "Signature": "x"}
        assert canonical_query(params) == "a=1&b=2"

    def test_string_to_sign(self):
        assert string_to_sign({"a": "1", "b": "x y"}) == "GET&%2F&a%3D1%26b%3Dx%2520y"


class TestSign:
    def test_hmac_sha1_with_ampersand_key(self):
        params = {"Action": "DescribeDomains", "AccessKeyId": "testid"}
        expected = base64.b64encode(
            hmac.new(
                b"testsecret&",
                b"GET&%2F&AccessKeyId%3Dtestid%26Action%3DDescribeDomains",
                hashlib.sha1,
            ).digest()
        ).decode()
        assert sign("testsecret", params) == expected


class TestSigner:
    def test_adds_common_parameters(self):
        signed = _signer().signed_params({"Action": "DescribeDomains"})
        assert signed["Action"] == "DescribeDomains"
        assert signed["Format"] == "json"
        assert signed["Version"] == "2015-01-09"
        assert signed["AccessKeyId"] == "testid"
        assert signed["Timestamp"] == "2016-03-24T16:41:54Z"
        assert signed["SignatureNonce"] == "NONCE"

    def test_signature_covers_all_other_params(self):
        signed = _signer().signed_params({"Action": "DescribeDomains"})
        unsigned = {k: v for k, v in signed.items() if k != "Signature"}
        assert signed["Signature"] == sign("testsecret", unsigned)

    def test_timestamp_converted_to_utc(self):
        local = FIXED_TIME.astimezone(timezone(timedelta(hours=8)))
        signer = Signer("id", "secret", clock=lambda: local, nonce=lambda: "n")
        assert signer.signed_params({})["Timestamp"] == "2016-03-24T16:41:54Z"

    def test_caller_params_not_mutated(self):
        params = {"Action": "DescribeDomains"}
        _signer().signed_params(params)
        assert params == {"Action": "DescribeDomains"}

    def test_secret_not_in_repr(self):
        assert "testsecret" not in repr(_signer())


class TestNonce:
    def test_length_and_alphabet(self):
        nonce = random_nonce(64)
        assert len(nonce) == 64
        assert nonce.isalnum()

    def test_nonces_differ(self):
        assert random_nonce() != random_nonce()
