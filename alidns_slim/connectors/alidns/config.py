"""Shared Alibaba Cloud DNS constants.

This module centralizes the endpoint, protocol constants and pagination
counter paths so the client can stay small and focused.
"""

from __future__ import annotations

from alidns_slim.runtime.pagination import CounterPaths

BASE_URL = "https://alidns.aliyuncs.com/"
API_VERSION = "2015-01-09"
RESPONSE_FORMAT = "json"
SIGNATURE_METHOD = "HMAC-SHA1"
SIGNATURE_VERSION = "1.0"
NONCE_LENGTH = 64
DEFAULT_TIMEOUT = 30.0

# Credentials for from_env()
ENV_KEY_ID = "ALIDNS_KEY_ID"
ENV_KEY_SECRET = "ALIDNS_KEY_SECRET"

# Parameters sent with every request (besides key id, timestamp and nonce)
COMMON_PARAMS = {
    "Format": RESPONSE_FORMAT,
    "Version": API_VERSION,
    "SignatureMethod": SIGNATURE_METHOD,
    "SignatureVersion": SIGNATURE_VERSION,
}

# Paged listings report their counters at the top level of the response:
#   {"TotalCount": 7, "PageNumber": 1, "PageSize": 3, "Domains": {...}}
DEFAULT_COUNTER_PATHS = CounterPaths(
    page_number="PageNumber",
    total_count="TotalCount",
    page_size="PageSize",
)

SUCCESS_STATUS = 200
