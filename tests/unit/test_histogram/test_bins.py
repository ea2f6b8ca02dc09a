"""
Unit tests for public bin construction.
"""
# 说明：build_bins / slot_bounds 的单元测试。
# 覆盖：
# - 下溢 / 上溢槽位的无穷端点、中心与回退宽度
# - percent / density 计算
# - 累积度量仅在请求时填充，且按输出顺序累加

import math

import pytest

from histlib.histogram import build_bins, slot_bounds

EDGES = (1.0, 4.0, 7.0, 10.0)


def _build(measure="count", underflow=True, overflow=True, samples=None):
    counts = [1.0, 2.0, 3.0, 4.0, 5.0][: 3 + int(underflow) + int(overflow)]
    items = [[i] for i in range(len(counts))]
    return build_bins(counts, items, EDGES, 3.0, underflow, overflow, 15.0, measure, samples=samples)


def test_slot_bounds_layout() -> None:
    assert slot_bounds(0, 5, EDGES, True, True) == (-math.inf, 1.0)
    assert slot_bounds(1, 5, EDGES, True, True) == (1.0, 4.0)
    assert slot_bounds(4, 5, EDGES, True, True) == (10.0, math.inf)
    assert slot_bounds(2, 3, EDGES, False, False) == (7.0, 10.0)


def test_overflow_slots_have_infinite_bounds_and_fallback_width() -> None:
    bins = _build()
    first, last = bins[0], bins[-1]
    assert first.start == -math.inf and first.end == 1.0
    assert first.center == 1.0
    assert first.width == 3.0
    assert last.start == 10.0 and last.end == math.inf
    assert last.center == 10.0
    assert [b.index for b in bins] == [0, 1, 2, 3, 4]


def test_percent_and_density() -> None:
    bins = _build()
    middle = bins[2]
    assert middle.center == 5.5
    assert middle.percent == pytest.approx(100.0 * 3.0 / 15.0)
    assert middle.density == pytest.approx(3.0 / (15.0 * 3.0))
    assert sum(b.percent for b in bins) == pytest.approx(100.0)


def test_cumulative_fields_only_for_cumulative_measures() -> None:
    plain = _build("percent")
    assert all(b.cumulative_count is None for b in plain)

    cumulative = _build("cumulative-count")
    running = [b.cumulative_count for b in cumulative]
    assert running == [1.0, 3.0, 6.0, 10.0, 15.0]
    assert cumulative[-1].cumulative_percent == pytest.approx(100.0)
    assert cumulative[-1].cumulative_density == pytest.approx(1.0)


def test_items_and_samples_are_attached() -> None:
    samples = [("a",), (), ("b", "c")]
    bins = _build(underflow=False, overflow=False, samples=samples)
    assert [b.items for b in bins] == [(0,), (1,), (2,)]
    assert bins[2].sample == ("b", "c")
    assert _build()[0].sample is None
