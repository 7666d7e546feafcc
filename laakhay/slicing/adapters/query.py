"""Page retrievers over in-process data sources."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Generic, TypeVar, Union

from ..models import OffsetPage, PageRequest

T = TypeVar("T")

logger = logging.getLogger(__name__)

ListAndCount = Callable[
    [int, int],
    Union[tuple[Sequence[Any], int], Awaitable[tuple[Sequence[Any], int]]],
]


class ListAndCountRetriever:
    """Adapts a ``(offset, limit) -> (items, total)`` query into a page retriever.

    Typical sources are repository ``list_and_count`` style calls. Synchronous
    queries run in a worker thread so concurrent slices do not block the loop.
    """

    def __init__(self, query: ListAndCount) -> None:
        self._query = query

    async def __call__(self, request: PageRequest) -> OffsetPage[Any]:
        if inspect.iscoroutinefunction(self._query):
            result = await self._query(request.offset, request.limit)  # type: ignore[misc]
        else:
            result = await asyncio.to_thread(self._query, request.offset, request.limit)
        if inspect.isawaitable(result):
            result = await result

        items, total = result
        logger.info(
            "%d items fetched with offset %d and limit %d",
            len(items),
            request.offset,
            request.limit,
        )
        return OffsetPage.of(items, request.offset, len(items), total)


class SequencePageRetriever(Generic[T]):
    """Serves pages out of an in-memory sequence."""

    def __init__(self, data: Sequence[T]) -> None:
        self._data = data

    def __call__(self, request: PageRequest) -> OffsetPage[T]:
        window = list(self._data[request.offset : request.offset + request.limit])
        return OffsetPage.of(window, request.offset, len(window), len(self._data))
