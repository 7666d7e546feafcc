"""Slicing runtime for offset-paginated sources.

Architecture:
    The runtime consists of:
    - definitions.py: Policy, per-slice plan and response hint structures
    - planners.py: Offset sequence generation and slice planning
    - executors.py: Probe, concurrent fan-out and ordered merge
    - telemetry.py: Structured logging

Usage:
    A SliceDataFetcher is given a slice size and a page retriever. It probes
    offset 0 to learn the total size, plans the remaining offsets and
    fetches them concurrently, returning every item in offset order.
"""

from __future__ import annotations

from .definitions import (
    DEFAULT_SLICE_SIZE,
    PageHint,
    PageRetriever,
    SlicePlan,
    SlicePolicy,
)
from .executors import SliceDataFetcher
from .planners import SlicePlanner, arithmetic_sequence

__all__ = [
    "DEFAULT_SLICE_SIZE",
    "PageHint",
    "PageRetriever",
    "SlicePlan",
    "SlicePolicy",
    "SlicePlanner",
    "SliceDataFetcher",
    "arithmetic_sequence",
]
