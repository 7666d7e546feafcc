"""Core components."""

from .exceptions import (
    InvalidArgumentError,
    PageFormatError,
    SliceFetchError,
    SlicingError,
)

__all__ = [
    "SlicingError",
    "InvalidArgumentError",
    "SliceFetchError",
    "PageFormatError",
]
