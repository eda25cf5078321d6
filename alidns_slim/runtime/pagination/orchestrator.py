"""Page-by-page fetching driven by counters extracted from each response.

Pages are fetched strictly in sequence: the request for page N+1 depends on
the counters page N reported. After each page the current page number,
total count and page size are extracted with the same path engine that
serves the caller's targets. The run ends when:

- the total count or page size is zero/missing (``no_counters``),
- the reported page number did not reach the requested one
  (``page_not_advancing``), or
- the last page has been fetched (``all_pages``).

Any exception from a fetch aborts the run; targets keep what earlier pages
appended.
"""

from __future__ import annotations

import math
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any

from ...extraction import ScalarTarget, Target
from .telemetry import log_page_fetched, log_pagination_complete, log_pagination_error

Binding = tuple[Target[Any], str]
FetchPage = Callable[[int, Sequence[Binding]], Awaitable[None]]


@dataclass(frozen=True)
class CounterPaths:
    """Response paths of the pagination counters."""

    page_number: str = "PageNumber"
    total_count: str = "TotalCount"
    page_size: str = "PageSize"


@dataclass(frozen=True)
class PageState:
    current_page: int = 0
    total_count: int = 0
    page_size: int = 0

    @property
    def has_counters(self) -> bool:
        return self.total_count != 0 and self.page_size != 0

    @property
    def total_pages(self) -> int:
        if not self.has_counters:
            return 0
        return math.ceil(self.total_count / self.page_size)


@dataclass(frozen=True)
class PaginationResult:
    pages_fetched: int
    state: PageState
    reason: str


class Paginator:
    """Drives ``fetch_page`` until all pages are consumed.

    ``fetch_page(page_number, bindings)`` must fetch the 1-indexed page and
    extract every ``(target, path)`` binding from the response.
    """

    def __init__(
        self,
        counter_paths: CounterPaths | None = None,
        *,
        endpoint_id: str = "unknown",
    ) -> None:
        self.counter_paths = counter_paths or CounterPaths()
        self.endpoint_id = endpoint_id

    async def run(self, fetch_page: FetchPage, bindings: Sequence[Binding]) -> PaginationResult:
        paths = self.counter_paths
        state = PageState()
        total_pages = 1
        pages_fetched = 0
        reason = "all_pages"

        while state.current_page < total_pages:
            requested = state.current_page + 1
            page_number = ScalarTarget(int)
            total_count = ScalarTarget(int)
            page_size = ScalarTarget(int)
            try:
                await fetch_page(
                    requested,
                    [
                        *bindings,
                        (page_number, paths.page_number),
                        (total_count, paths.total_count),
                        (page_size, paths.page_size),
                    ],
                )
            except Exception as e:
                log_pagination_error(
                    endpoint_id=self.endpoint_id,
                    page_number=requested,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            pages_fetched += 1

            state = PageState(page_number.value, total_count.value, page_size.value)
            if not state.has_counters:
                reason = "no_counters"
                break
            total_pages = state.total_pages
            log_page_fetched(
                endpoint_id=self.endpoint_id,
                page_number=state.current_page,
                total_count=state.total_count,
                page_size=state.page_size,
                total_pages=total_pages,
            )
            if state.current_page < requested:
                reason = "page_not_advancing"
                break

        log_pagination_complete(
            endpoint_id=self.endpoint_id, pages_fetched=pages_fetched, reason=reason
        )
        return PaginationResult(pages_fetched=pages_fetched, state=state, reason=reason)
