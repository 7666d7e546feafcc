"""Page retriever backed by an offset-paginated HTTP endpoint."""

from __future__ import annotations

import logging
from typing import Any

from ..core.exceptions import PageFormatError
from ..models import OffsetPage, PageRequest
from ..runtime.definitions import PageHint
from ..utils.http import HTTPClient

logger = logging.getLogger(__name__)


class HTTPPageRetriever:
    """Fetches pages with ``GET path?offset=..&limit=..``.

    The response body must be a JSON object holding the page items and the
    total number of items, under the field names given by ``hint``.
    """

    def __init__(
        self,
        client: HTTPClient,
        path: str,
        hint: PageHint | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._client = client
        self._path = path
        self._hint = hint or PageHint()
        self._headers = headers

    def build_query(self, request: PageRequest) -> dict[str, Any]:
        query: dict[str, Any] = dict(self._hint.extra_params or {})
        query[self._hint.offset_param] = request.offset
        query[self._hint.limit_param] = request.limit
        return query

    async def __call__(self, request: PageRequest) -> OffsetPage[Any]:
        payload = await self._client.get(
            self._path, params=self.build_query(request), headers=self._headers
        )
        page = self.parse(payload, request)
        logger.debug(
            "%d items fetched from %s with offset %d and limit %d",
            len(page.items),
            self._path,
            request.offset,
            request.limit,
        )
        return page

    def parse(self, payload: Any, request: PageRequest) -> OffsetPage[Any]:
        """Map a decoded response body to a page.

        Raises:
            PageFormatError: If the body lacks the items or total field
        """
        if not isinstance(payload, dict):
            raise PageFormatError(
                f"Expected a JSON object, got {type(payload).__name__}", payload=payload
            )
        items = payload.get(self._hint.items_field)
        if not isinstance(items, list):
            raise PageFormatError(
                f"Response has no '{self._hint.items_field}' list", payload=payload
            )
        total = payload.get(self._hint.total_field)
        if isinstance(total, bool) or not isinstance(total, int):
            raise PageFormatError(
                f"Response has no integer '{self._hint.total_field}'", payload=payload
            )
        return OffsetPage.of(items, request.offset, len(items), total)
