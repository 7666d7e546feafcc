"""Unit tests for slicing policy structures."""

from __future__ import annotations

import pytest

from laakhay.slicing.core import InvalidArgumentError
from laakhay.slicing.models import PageRequest
from laakhay.slicing.runtime import PageHint, SlicePlan, SlicePolicy


def test_slice_policy_defaults_to_unbounded():
    assert SlicePolicy().max_concurrency is None


def test_slice_policy_rejects_zero_concurrency():
    with pytest.raises(InvalidArgumentError, match="max_concurrency"):
        SlicePolicy(max_concurrency=0)


def test_slice_plan_exposes_offset():
    plan = SlicePlan(index=2, request=PageRequest(offset=40, limit=20))
    assert plan.offset == 40


def test_page_hint_defaults():
    hint = PageHint()
    assert (hint.offset_param, hint.limit_param) == ("offset", "limit")
    assert (hint.items_field, hint.total_field) == ("items", "total")
    assert hint.extra_params is None
