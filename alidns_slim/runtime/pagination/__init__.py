"""Pagination orchestration."""

from .orchestrator import (
    Binding,
    CounterPaths,
    FetchPage,
    PageState,
    PaginationResult,
    Paginator,
)

__all__ = [
    "Binding",
    "CounterPaths",
    "FetchPage",
    "PageState",
    "PaginationResult",
    "Paginator",
]
