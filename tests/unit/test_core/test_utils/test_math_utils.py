"""
Unit tests for shared numerical helpers.
"""
# 说明：to_finite_float / first_valid / clamp_positive 的单元测试。

import math

import numpy as np

from histlib.core.utils import clamp_positive, first_valid, to_finite_float


def test_to_finite_float_filters_invalid_scalars() -> None:
    assert to_finite_float(3) == 3.0
    assert to_finite_float(np.float32(1.5)) == 1.5
    assert to_finite_float("2.5") == 2.5
    for bad in (None, True, math.nan, math.inf, "x", object()):
        assert to_finite_float(bad) is None


def test_first_valid_respects_order_and_is_lazy() -> None:
    calls = []

    def candidate(value):
        def compute():
            calls.append(value)
            return value
        return compute

    assert first_valid([candidate(0.0), candidate(math.nan), candidate(2.0), candidate(3.0)]) == 2.0
    # 命中后不再计算后续候选
    assert len(calls) == 3
    assert calls[-1] == 2.0


def test_first_valid_returns_none_when_nothing_qualifies() -> None:
    assert first_valid([0.0, -1.0, math.inf]) is None


def test_clamp_positive() -> None:
    assert clamp_positive(0.5, floor=1e-3) == 0.5
    assert clamp_positive(1e-9, floor=1e-3) == 1e-3
    assert clamp_positive(-2.0, floor=1e-3) == 1.0
    assert clamp_positive(math.nan, floor=1e-3, fallback=4.0) == 4.0
