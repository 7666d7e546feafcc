"""Offset pagination models.

Architecture:
    A fetch is a conversation of ``PageRequest`` -> ``OffsetPage`` exchanges
    with a page retriever. ``OffsetInformation`` carries the pagination
    metadata of a single page and ``ProcessingResult`` holds the merged
    dataset once every slice has been fetched.

Design Decisions:
    - Pydantic v2 frozen models: values are request-scoped and never mutated
    - Tuples for items: frozen=True alone would leave a list field mutable
    - ``has_next`` is a computed field so it can never disagree with the
      offset, page size and total size it is derived from
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

T = TypeVar("T")


class PageRequest(BaseModel):
    """Single fetch unit: ``limit`` items starting at ``offset``."""

    offset: int = Field(..., ge=0)
    limit: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)

    @property
    def page_number(self) -> int:
        """Zero-based page number for page-oriented backends."""
        return self.offset // self.limit

    @property
    def has_previous(self) -> bool:
        return self.offset > 0

    def next(self) -> PageRequest:
        return PageRequest(offset=self.offset + self.limit, limit=self.limit)

    def first(self) -> PageRequest:
        return PageRequest(offset=0, limit=self.limit)

    def previous_or_first(self) -> PageRequest:
        """Request for the preceding window, clamped at offset 0."""
        return PageRequest(offset=max(self.offset - self.limit, 0), limit=self.limit)


class OffsetInformation(BaseModel):
    """Pagination metadata returned alongside a page of items."""

    offset: int = Field(..., ge=0)
    page_size: int = Field(..., ge=0)
    total_size: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next(self) -> bool:
        """True when items remain past this page."""
        return (self.offset + self.page_size) < self.total_size


class OffsetPage(BaseModel, Generic[T]):
    """One page of items plus its pagination metadata."""

    items: tuple[T, ...] = Field(default_factory=tuple)
    page_information: OffsetInformation

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("items", mode="before")
    @classmethod
    def _default_items(cls, v: Any) -> Any:
        return () if v is None else v

    @classmethod
    def of(
        cls, items: Iterable[T] | None, offset: int, size: int, total_size: int
    ) -> OffsetPage[T]:
        """Build a page from items and raw pagination values.

        Args:
            items: Items in this page (None is treated as no items)
            offset: Offset of the first item
            size: Number of items the page covers
            total_size: Total number of items in the dataset

        Returns:
            OffsetPage with derived ``has_next``
        """
        return cls(
            items=tuple(items) if items is not None else (),
            page_information=OffsetInformation(
                offset=offset, page_size=size, total_size=total_size
            ),
        )

    @classmethod
    def empty(cls, offset: int) -> OffsetPage[T]:
        """Empty page at ``offset`` with no further data."""
        return cls.of((), offset, 0, 0)


class ProcessingResult(BaseModel, Generic[T]):
    """Merged dataset in ascending-offset order.

    ``fetched_data`` is a tuple so the merged dataset cannot be altered
    after the fetch.
    """

    fetched_data: tuple[T, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __len__(self) -> int:
        return len(self.fetched_data)
