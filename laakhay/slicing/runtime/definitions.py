"""Slicing metadata definitions and policy structures.

This module defines the data structures used to configure and describe a
sliced fetch: the fetch policy, per-slice plans, response hints for
adapters and the page retriever contract.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar, Union

from ..core.exceptions import InvalidArgumentError
from ..models import OffsetPage, PageRequest

T = TypeVar("T")

DEFAULT_SLICE_SIZE = 100

# Sync retrievers are dispatched to a worker thread, async ones are awaited
PageRetriever = Callable[
    [PageRequest], Union[OffsetPage[Any], Awaitable[OffsetPage[Any]]]
]


@dataclass(frozen=True)
class SlicePolicy:
    """Fan-out policy for a sliced fetch.

    Attributes:
        max_concurrency: Maximum number of slices fetched at once (None = unbounded)
    """

    max_concurrency: int | None = None

    def __post_init__(self) -> None:
        """Validate policy configuration."""
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise InvalidArgumentError("max_concurrency must be at least 1")


@dataclass(frozen=True)
class SlicePlan:
    """Plan for a single fanned-out slice.

    Attributes:
        index: Zero-based position in the planned-offset sequence
        request: Page request to issue for this slice
    """

    index: int
    request: PageRequest

    @property
    def offset(self) -> int:
        return self.request.offset


@dataclass(frozen=True)
class PageHint:
    """Hints for how to request and read paginated HTTP responses.

    Attributes:
        offset_param: Query parameter name for the offset
        limit_param: Query parameter name for the limit
        items_field: Field in the response body holding the items
        total_field: Field in the response body holding the total size
        extra_params: Static query parameters sent with every request
    """

    offset_param: str = "offset"
    limit_param: str = "limit"
    items_field: str = "items"
    total_field: str = "total"
    extra_params: dict[str, Any] | None = None
