"""Slice planning logic.

This module provides the arithmetic offset sequence and the SlicePlanner
that turns a probe page's pagination metadata into the remaining slices.
"""

from __future__ import annotations

from ..core.exceptions import InvalidArgumentError
from ..models import OffsetInformation, PageRequest
from .definitions import SlicePlan
from .telemetry import log_slice_plan


def arithmetic_sequence(start_offset: int, length: int, step: int) -> list[int]:
    """Offsets from ``start_offset`` to ``length`` in increments of ``step``.

    The last element is clamped to ``length``, so the result always ends
    with exactly ``length`` and never overshoots.

    Args:
        start_offset: First offset of the sequence
        length: Upper bound, always the last element
        step: Distance between consecutive offsets

    Returns:
        ``ceil((length - start_offset) / step) + 1`` non-decreasing offsets

    Raises:
        InvalidArgumentError: If step is not positive or start_offset > length

    Examples:
        >>> arithmetic_sequence(0, 5, 2)
        [0, 2, 4, 5]
        >>> arithmetic_sequence(3, 3, 10)
        [3]
    """
    if step <= 0:
        raise InvalidArgumentError("step must be greater than 0")
    if start_offset > length:
        raise InvalidArgumentError("start_offset must be less than or equal to length")

    partitions = -(-(length - start_offset) // step)
    return [min(start_offset + i * step, length) for i in range(partitions + 1)]


class SlicePlanner:
    """Plans the slices that follow a probe fetch.

    The probe always covers ``[0, slice_size)``; every other slice starts one
    slice further on, up to and including the dataset's total size.
    """

    def __init__(self, slice_size: int) -> None:
        if slice_size < 1:
            raise InvalidArgumentError("slice_size must be at least 1")
        self._slice_size = slice_size

    @property
    def slice_size(self) -> int:
        return self._slice_size

    def probe_request(self) -> PageRequest:
        return PageRequest(offset=0, limit=self._slice_size)

    def plan(self, page_information: OffsetInformation) -> list[SlicePlan]:
        """Plan the remaining slices from the probe's pagination metadata.

        Args:
            page_information: Pagination metadata of the probe page

        Returns:
            Slice plans in ascending offset order (empty if nothing remains)
        """
        if not page_information.has_next:
            plans: list[SlicePlan] = []
        else:
            offsets = arithmetic_sequence(
                self._slice_size, page_information.total_size, self._slice_size
            )
            plans = [
                SlicePlan(index=i, request=PageRequest(offset=offset, limit=self._slice_size))
                for i, offset in enumerate(offsets)
            ]

        log_slice_plan(
            slice_size=self._slice_size,
            total_size=page_information.total_size,
            total_slices=len(plans),
        )
        return plans
