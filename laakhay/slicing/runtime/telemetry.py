"""Structured logging for slicing operations.

This module provides telemetry hooks for sliced fetches, emitting
structured log records with the details in ``extra``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_slice_plan(
    *,
    slice_size: int,
    total_size: int,
    total_slices: int,
) -> None:
    """Log slice plan creation.

    Args:
        slice_size: Number of items requested per slice
        total_size: Total dataset size reported by the probe
        total_slices: Number of slices planned after the probe
    """
    logger.info(
        "slice_plan_created",
        extra={
            "slice_size": slice_size,
            "total_size": total_size,
            "total_slices": total_slices,
        },
    )


def log_slice_completed(
    *,
    offset: int,
    limit: int,
    rows_fetched: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single slice fetch."""
    logger.debug(
        "slice_completed",
        extra={
            "offset": offset,
            "limit": limit,
            "rows_fetched": rows_fetched,
            "latency_ms": latency_ms,
        },
    )


def log_slice_error(
    *,
    offset: int,
    limit: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log slice fetch error.

    Args:
        offset: Offset of the slice that failed
        limit: Limit of the slice that failed
        error_type: Type of error (e.g., "ClientResponseError")
        error_message: Error message
    """
    logger.error(
        "slice_error",
        extra={
            "offset": offset,
            "limit": limit,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_slice_fetch_complete(
    *,
    slice_size: int,
    pages_fetched: int,
    total_points: int,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a whole sliced fetch.

    Args:
        slice_size: Number of items requested per slice
        pages_fetched: Number of retriever calls, probe included
        total_points: Number of merged items
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "slice_fetch_complete",
        extra={
            "slice_size": slice_size,
            "pages_fetched": pages_fetched,
            "total_points": total_points,
            "total_latency_ms": total_latency_ms,
        },
    )
