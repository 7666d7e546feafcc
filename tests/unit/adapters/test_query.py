"""Unit tests for in-process page retrievers."""

from __future__ import annotations

import pytest

from laakhay.slicing.adapters import ListAndCountRetriever, SequencePageRetriever
from laakhay.slicing.models import PageRequest
from laakhay.slicing.runtime import SliceDataFetcher

ROWS = [{"id": i} for i in range(23)]


def list_and_count(offset: int, limit: int):
    return ROWS[offset : offset + limit], len(ROWS)


class TestListAndCountRetriever:
    """Test ListAndCountRetriever adaptation."""

    @pytest.mark.asyncio
    async def test_sync_query(self):
        retriever = ListAndCountRetriever(list_and_count)

        page = await retriever(PageRequest(offset=20, limit=10))

        assert page.items == tuple(ROWS[20:])
        assert page.page_information.offset == 20
        assert page.page_information.page_size == 3
        assert page.page_information.total_size == 23
        assert not page.page_information.has_next

    @pytest.mark.asyncio
    async def test_async_query(self):
        async def query(offset: int, limit: int):
            return list_and_count(offset, limit)

        page = await ListAndCountRetriever(query)(PageRequest(offset=0, limit=10))

        assert page.items == tuple(ROWS[:10])
        assert page.page_information.has_next

    @pytest.mark.asyncio
    async def test_logs_fetched_count(self, caplog):
        retriever = ListAndCountRetriever(list_and_count)

        with caplog.at_level("INFO", logger="laakhay.slicing.adapters.query"):
            await retriever(PageRequest(offset=10, limit=10))

        assert "10 items fetched with offset 10 and limit 10" in caplog.messages

    @pytest.mark.asyncio
    async def test_full_fetch(self):
        result = await SliceDataFetcher().fetch(5, ListAndCountRetriever(list_and_count))

        assert result.fetched_data == tuple(ROWS)


class TestSequencePageRetriever:
    """Test SequencePageRetriever windows."""

    def test_window(self):
        page = SequencePageRetriever(list(range(10)))(PageRequest(offset=4, limit=3))

        assert page.items == (4, 5, 6)
        assert page.page_information.total_size == 10
        assert page.page_information.has_next

    def test_offset_at_end_is_empty(self):
        page = SequencePageRetriever(list(range(10)))(PageRequest(offset=10, limit=3))

        assert page.items == ()
        assert not page.page_information.has_next
