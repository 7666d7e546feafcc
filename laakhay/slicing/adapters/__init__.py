"""Page retriever adapters for concrete data sources."""

from .http import HTTPPageRetriever
from .query import ListAndCountRetriever, SequencePageRetriever

__all__ = [
    "HTTPPageRetriever",
    "ListAndCountRetriever",
    "SequencePageRetriever",
]
