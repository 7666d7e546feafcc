"""Custom exception hierarchy.

A failing probe fetch is not wrapped: the retriever's own exception reaches
the caller as raised. Only fanned-out slices are wrapped, so their offset
travels with the error.
"""

from __future__ import annotations


class SlicingError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidArgumentError(SlicingError, ValueError):
    """Malformed input to the sequence generator, planner or policy.

    Always raised before any page is fetched.
    """

    pass


class SliceFetchError(SlicingError):
    """A page retrieval failed while fetching a fanned-out slice.

    The originating exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, offset: int, limit: int) -> None:
        super().__init__(message)
        self.offset = offset
        self.limit = limit


class PageFormatError(SlicingError):
    """Payload could not be mapped to a page."""

    def __init__(self, message: str, payload: object | None = None) -> None:
        super().__init__(message)
        self.payload = payload
