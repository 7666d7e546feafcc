"""Laakhay Slicing - concurrent offset-paginated data fetching."""

from .adapters import HTTPPageRetriever, ListAndCountRetriever, SequencePageRetriever
from .core import (
    InvalidArgumentError,
    PageFormatError,
    SliceFetchError,
    SlicingError,
)
from .models import OffsetInformation, OffsetPage, PageRequest, ProcessingResult
from .runtime import (
    DEFAULT_SLICE_SIZE,
    PageHint,
    PageRetriever,
    SliceDataFetcher,
    SlicePlan,
    SlicePlanner,
    SlicePolicy,
    arithmetic_sequence,
)
from .utils import HTTPClient

__version__ = "0.1.0"

__all__ = [
    # Runtime
    "SliceDataFetcher",
    "SlicePlanner",
    "SlicePlan",
    "SlicePolicy",
    "PageHint",
    "PageRetriever",
    "DEFAULT_SLICE_SIZE",
    "arithmetic_sequence",
    # Models
    "PageRequest",
    "OffsetInformation",
    "OffsetPage",
    "ProcessingResult",
    # Adapters
    "HTTPClient",
    "HTTPPageRetriever",
    "ListAndCountRetriever",
    "SequencePageRetriever",
    # Exceptions
    "SlicingError",
    "InvalidArgumentError",
    "SliceFetchError",
    "PageFormatError",
]
