"""Structured logging for pagination runs.

Each helper emits one snake_case event with structured ``extra`` fields so
log pipelines can index them.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page_number: int,
    total_count: int,
    page_size: int,
    total_pages: int,
) -> None:
    """Log a completed page with the counters it reported."""
    logger.info(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page_number": page_number,
            "total_count": total_count,
            "page_size": page_size,
            "total_pages": total_pages,
        },
    )


def log_pagination_complete(*, endpoint_id: str, pages_fetched: int, reason: str) -> None:
    logger.info(
        "pagination_complete",
        extra={"endpoint_id": endpoint_id, "pages_fetched": pages_fetched, "reason": reason},
    )


def log_pagination_error(
    *,
    endpoint_id: str,
    page_number: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a fatal error that aborted the run.

    Pages fetched before the error keep their results in the caller's targets.
    """
    logger.error(
        "pagination_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_number": page_number,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
