"""Data models for offset pagination.

All models are immutable Pydantic v2 models (frozen=True).
"""

from .pagination import OffsetInformation, OffsetPage, PageRequest, ProcessingResult

__all__ = [
    "OffsetInformation",
    "OffsetPage",
    "PageRequest",
    "ProcessingResult",
]
