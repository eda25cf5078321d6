"""Alibaba Cloud DNS client.

Every call signs the action parameters, issues one GET, checks the response
envelope and then extracts values into caller-supplied targets:

    names = ListTarget(str)
    async with AliDNSClient(key_id, secret) as client:
        await client.get_all(get_domains(page_size(50)), names, "Domains.Domain.*.DomainName")

Destinations are passed flat as ``target, path, target, path, ...``. ``get``
also accepts a single target on its own, bound to the whole document (or, for
a ``RawTarget``, to the raw body).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from alidns_slim.core.exceptions import (
    ConfigurationError,
    DecodeError,
    DestinationArityError,
    ResponseError,
    StatusError,
)
from alidns_slim.extraction import RawTarget, Target, extract, load_document
from alidns_slim.runtime.pagination import Binding, CounterPaths, PaginationResult, Paginator
from alidns_slim.runtime.rest import RawResponse, RESTTransport, Signer, Transport
from alidns_slim.runtime.rest.signing import random_nonce

from .actions import merge, page
from .config import (
    BASE_URL,
    COMMON_PARAMS,
    DEFAULT_COUNTER_PATHS,
    DEFAULT_TIMEOUT,
    ENV_KEY_ID,
    ENV_KEY_SECRET,
    NONCE_LENGTH,
    SUCCESS_STATUS,
)
from .schemas import ResponseEnvelope

logger = logging.getLogger(__name__)


def pair_destinations(dest: Sequence[Any], *, allow_single: bool = True) -> list[Binding]:
    """Group flat ``target, path, ...`` arguments into bindings.

    Raises:
        DestinationArityError: For an odd argument count (other than a lone
            target when ``allow_single``), a non-target in a target slot or a
            non-string in a path slot
    """
    if not dest:
        return []
    if len(dest) == 1:
        if not allow_single:
            raise DestinationArityError("dest size must not be 1")
        _check_target(dest[0], 0)
        return [(dest[0], "")]
    if len(dest) % 2:
        raise DestinationArityError(
            f"destinations must be (target, path) pairs, got {len(dest)} arguments"
        )
    bindings: list[Binding] = []
    for i in range(0, len(dest), 2):
        target, path = dest[i], dest[i + 1]
        _check_target(target, i)
        if not isinstance(path, str):
            raise DestinationArityError(
                f"argument {i + 1} must be a path string, got {type(path).__name__}"
            )
        if isinstance(target, RawTarget) and path:
            raise DestinationArityError("RawTarget receives the whole body; use an empty path")
        bindings.append((target, path))
    return bindings


def _check_target(target: Any, index: int) -> None:
    if not isinstance(target, Target):
        raise DestinationArityError(
            f"argument {index} must be a target, got {type(target).__name__}"
        )


def _probe_envelope(document: Any) -> ResponseEnvelope | None:
    if not isinstance(document, dict):
        return None
    try:
        return ResponseEnvelope.model_validate(document)
    except PydanticValidationError:
        return None


class AliDNSClient:
    """Signed-request client for the Alibaba Cloud DNS API.

    No per-call state is stored on the instance, so one client can serve
    independent calls concurrently.
    """

    def __init__(
        self,
        access_key_id: str,
        access_key_secret: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
        counter_paths: CounterPaths | None = None,
        signer: Signer | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            access_key_id: Access key ID
            access_key_secret: Access key secret (used only for signing)
            base_url: API endpoint
            timeout: Default total timeout per request in seconds
            transport: Optional transport (defaults to an aiohttp transport)
            counter_paths: Response paths of the pagination counters
            signer: Optional pre-built signer
        """
        self.base_url = base_url
        self.counter_paths = counter_paths or DEFAULT_COUNTER_PATHS
        self._signer = signer or Signer(
            access_key_id,
            access_key_secret,
            common_params=COMMON_PARAMS,
            nonce=lambda: random_nonce(NONCE_LENGTH),
        )
        self._transport: Transport = transport or RESTTransport(timeout=timeout)

    @classmethod
    def from_env(cls, **kwargs: Any) -> AliDNSClient:
        """Build a client from ``ALIDNS_KEY_ID`` / ``ALIDNS_KEY_SECRET``.

        Raises:
            ConfigurationError: If either variable is unset or empty
        """
        key_id = os.environ.get(ENV_KEY_ID, "")
        key_secret = os.environ.get(ENV_KEY_SECRET, "")
        if not key_id or not key_secret:
            raise ConfigurationError(f"Please set {ENV_KEY_ID} and {ENV_KEY_SECRET}")
        return cls(key_id, key_secret, **kwargs)

    async def get(
        self, params: Mapping[str, Any], *dest: Any, timeout: float | None = None
    ) -> None:
        """Get resources into destinations. For paged listings use ``get_all``.

        Raises:
            DestinationArityError: Before any request, for malformed destinations
            TransportError: If the HTTP exchange fails
            ResponseError: If the response carries an error code
            StatusError: If the status is not 200 and there is no error code
            DecodeError: If a reachable value does not fit its target's type
        """
        bindings = pair_destinations(dest, allow_single=True)
        await self._fetch_into(merge(params), bindings, timeout=timeout)

    async def do(
        self, params: Mapping[str, Any], *dest: Any, timeout: float | None = None
    ) -> None:
        """Alias of ``get``; use it to mark actions that change state."""
        await self.get(params, *dest, timeout=timeout)

    async def get_all(
        self, params: Mapping[str, Any], *dest: Any, timeout: float | None = None
    ) -> PaginationResult:
        """Get every page of a listing, appending into the destinations.

        ``ListTarget`` destinations accumulate page 1 items before page 2
        items and so on. The first failing page aborts the run; earlier pages
        stay in the targets.
        """
        bindings = pair_destinations(dest, allow_single=False)
        base = merge(params)
        paginator = Paginator(self.counter_paths, endpoint_id=base.get("Action", "unknown"))

        async def fetch_page(number: int, page_bindings: Sequence[Binding]) -> None:
            await self._fetch_into(merge(base, page(number)), page_bindings, timeout=timeout)

        return await paginator.run(fetch_page, bindings)

    async def _fetch_into(
        self,
        params: dict[str, str],
        bindings: Sequence[Binding],
        *,
        timeout: float | None,
    ) -> None:
        logger.debug(
            "request_sent",
            extra={"action": params.get("Action"), "page": params.get("PageNumber")},
        )
        signed = self._signer.signed_params(params)
        response = await self._transport.get(self.base_url, params=signed, timeout=timeout)

        document = self._check_response(response)
        for target, path in bindings:
            if isinstance(target, RawTarget):
                target.accept(response.body, True)
                continue
            if document is None:
                document = load_document(response.body)
            extract(document, target, path)

    def _check_response(self, response: RawResponse) -> Any:
        """Raise for error envelopes and bad statuses; return the decoded body.

        Returns ``None`` when the body is not JSON; decoding is then retried
        (and fails loudly) only if a target needs the document.
        """
        try:
            document = load_document(response.body)
        except DecodeError:
            document = None
        envelope = _probe_envelope(document)
        if envelope is not None and envelope.code:
            logger.warning(
                "response_error",
                extra={"code": envelope.code, "status": response.status},
            )
            raise ResponseError(
                envelope.code,
                envelope.message or "",
                request_id=envelope.request_id,
                status_code=response.status,
            )
        if response.status != SUCCESS_STATUS:
            logger.warning("response_error", extra={"code": None, "status": response.status})
            raise StatusError(response.status)
        return document

    async def close(self) -> None:
        """Close underlying resources."""
        await self._transport.close()

    async def __aenter__(self) -> AliDNSClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
