"""REST transport: executes a signed GET and hands back status and body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .http_client import HTTPClient, ResponseHook


@dataclass(frozen=True)
class RawResponse:
    status: int
    body: bytes


class Transport(Protocol):
    """What the client needs from a transport."""

    async def get(
        self, url: str, params: dict[str, str] | None = None, *, timeout: float | None = None
    ) -> RawResponse: ...

    async def close(self) -> None: ...


class RESTTransport:
    """Transport backed by an aiohttp ``HTTPClient``."""

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        *,
        timeout: float | None = None,
    ) -> RawResponse:
        status, body = await self._http.get_raw(url, params=params, timeout=timeout)
        return RawResponse(status=status, body=body)

    async def close(self) -> None:
        await self._http.close()
