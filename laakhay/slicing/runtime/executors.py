"""Slice execution logic for fetching and merging slices.

This module provides the SliceDataFetcher that probes a paginated source,
fans the remaining slices out concurrently and merges every page back in
offset order.
"""

from __future__ import annotations

import asyncio
import inspect
from time import perf_counter
from typing import Any

from ..core.exceptions import PageFormatError, SliceFetchError
from ..models import OffsetPage, PageRequest, ProcessingResult
from .definitions import PageRetriever, SlicePlan, SlicePolicy
from .planners import SlicePlanner
from .telemetry import log_slice_completed, log_slice_error, log_slice_fetch_complete


class SliceDataFetcher:
    """Fetches a paginated dataset in concurrent, fixed-size slices.

    The first slice is fetched on its own to learn the total size. The
    remaining slices are then fetched concurrently and merged after the
    probe's items in ascending offset order, whatever order they complete in.
    The first failing slice aborts the whole fetch. A failing probe
    re-raises the retriever's own exception untouched.
    """

    def __init__(self, policy: SlicePolicy | None = None) -> None:
        """Initialize slice fetcher.

        Args:
            policy: Optional fan-out policy (default: unbounded concurrency)
        """
        self._policy = policy or SlicePolicy()

    async def fetch(self, slice_size: int, page_retriever: PageRetriever) -> ProcessingResult[Any]:
        """Fetch the whole dataset behind ``page_retriever``.

        Args:
            slice_size: Number of items requested per page
            page_retriever: Callable returning the page for a PageRequest,
                either directly or as an awaitable

        Returns:
            ProcessingResult with every item in ascending offset order

        Raises:
            InvalidArgumentError: If slice_size is not positive
            Exception: Whatever the retriever raised for the probe, unchanged
            SliceFetchError: If any fanned-out fetch fails
        """
        planner = SlicePlanner(slice_size)
        fetch_start = perf_counter()

        probe_request = planner.probe_request()
        try:
            probe = await self._retrieve(page_retriever, probe_request)
        except Exception as e:
            log_slice_error(
                offset=probe_request.offset,
                limit=probe_request.limit,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        plans = planner.plan(probe.page_information)
        pages = await self._fan_out(plans, page_retriever)

        merged: list[Any] = list(probe.items)
        for page in pages:
            merged.extend(page.items)

        result: ProcessingResult[Any] = ProcessingResult(fetched_data=tuple(merged))
        log_slice_fetch_complete(
            slice_size=slice_size,
            pages_fetched=1 + len(plans),
            total_points=len(result),
            total_latency_ms=(perf_counter() - fetch_start) * 1000.0,
        )
        return result

    def fetch_sync(self, slice_size: int, page_retriever: PageRetriever) -> ProcessingResult[Any]:
        """Blocking variant of :meth:`fetch` for code without an event loop."""
        return asyncio.run(self.fetch(slice_size, page_retriever))

    async def _fan_out(
        self, plans: list[SlicePlan], page_retriever: PageRetriever
    ) -> list[OffsetPage[Any]]:
        """Fetch every planned slice concurrently.

        Pages are stored by plan index, so the returned list follows the
        planned-offset order regardless of completion order.
        """
        if not plans:
            return []

        max_concurrency = self._policy.max_concurrency
        semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None
        pages: list[OffsetPage[Any] | None] = [None] * len(plans)

        async def run(plan: SlicePlan) -> None:
            if semaphore is None:
                pages[plan.index] = await self._fetch_slice(plan, page_retriever)
                return
            async with semaphore:
                pages[plan.index] = await self._fetch_slice(plan, page_retriever)

        tasks = [asyncio.create_task(run(plan)) for plan in plans]
        try:
            await asyncio.gather(*tasks)
        finally:
            # Fail-fast: drop siblings still in flight
            for t in tasks:
                t.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        return [page for page in pages if page is not None]

    async def _fetch_slice(
        self, plan: SlicePlan, page_retriever: PageRetriever
    ) -> OffsetPage[Any]:
        slice_start = perf_counter()
        try:
            page = await self._retrieve(page_retriever, plan.request)
        except Exception as e:
            log_slice_error(
                offset=plan.offset,
                limit=plan.request.limit,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise SliceFetchError(
                f"Slice fetch failed at offset {plan.offset}: {e}",
                offset=plan.offset,
                limit=plan.request.limit,
            ) from e

        log_slice_completed(
            offset=plan.offset,
            limit=plan.request.limit,
            rows_fetched=len(page.items),
            latency_ms=(perf_counter() - slice_start) * 1000.0,
        )
        return page

    @staticmethod
    async def _retrieve(page_retriever: PageRetriever, request: PageRequest) -> OffsetPage[Any]:
        """Invoke the retriever, off the event loop if it is synchronous."""
        if inspect.iscoroutinefunction(page_retriever) or inspect.iscoroutinefunction(
            getattr(page_retriever, "__call__", None)
        ):
            page = await page_retriever(request)  # type: ignore[misc]
        else:
            page = await asyncio.to_thread(page_retriever, request)

        if inspect.isawaitable(page):
            page = await page
        if not isinstance(page, OffsetPage):
            raise PageFormatError(
                f"Retriever returned {type(page).__name__} instead of OffsetPage", payload=page
            )
        return page
