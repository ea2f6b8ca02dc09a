"""
Unit tests for bin width selection and edge construction.
"""
# 说明：分箱规划器的单元测试。
# 覆盖：
# - auto 模式下 fd -> scott -> sturges 的回退顺序与最终回退
# - binWidth / binCount 模式与宽度钳制
# - MAX_BINS 上限与告警；宽度低于浮点分辨率时的放大与告警
# - binCount 为非有限值时的回退
# - 边界构造：均匀间距、最后一个边界钉在 d1

import math

import pytest

from histlib.histogram import (
    MAX_BINS,
    WIDTH_EPS,
    AutoBinning,
    FixedCountBinning,
    FixedWidthBinning,
    build_edges,
    choose_bin_width,
    compute_binning_plan,
    tentative_bin_count,
)


def test_fd_rule_is_preferred() -> None:
    # n = 8 -> n^(-1/3) = 0.5；fd = 2·2·0.5
    assert choose_bin_width(10.0, 8, 2.0, 1.0, AutoBinning("fd")) == pytest.approx(2.0)


def test_fd_falls_back_to_scott_then_sturges() -> None:
    assert choose_bin_width(10.0, 8, 0.0, 1.0, AutoBinning("fd")) == pytest.approx(1.75)
    # sturges：10 / ceil(log2(8) + 1) = 10 / 4
    assert choose_bin_width(10.0, 8, 0.0, 0.0, AutoBinning("fd")) == pytest.approx(2.5)


def test_scott_rule_prefers_scott_then_fd() -> None:
    assert choose_bin_width(10.0, 8, 2.0, 1.0, AutoBinning("scott")) == pytest.approx(1.75)
    assert choose_bin_width(10.0, 8, 2.0, 0.0, AutoBinning("scott")) == pytest.approx(2.0)


def test_sturges_rule_never_falls_back_to_other_rules() -> None:
    assert choose_bin_width(10.0, 8, 2.0, 1.0, AutoBinning("sturges")) == pytest.approx(2.5)
    # 跨度为 0：sturges 候选无效，回退为 1
    assert choose_bin_width(0.0, 8, 2.0, 1.0, AutoBinning("sturges")) == 1.0


def test_default_strategy_is_fd() -> None:
    assert choose_bin_width(10.0, 8, 2.0, 1.0, None) == pytest.approx(2.0)


def test_fixed_width_is_clamped() -> None:
    assert choose_bin_width(10.0, 5, 0.0, 0.0, FixedWidthBinning(3.0)) == 3.0
    assert choose_bin_width(10.0, 5, 0.0, 0.0, FixedWidthBinning(math.nan)) == 1.0
    assert choose_bin_width(10.0, 5, 0.0, 0.0, FixedWidthBinning(-2.0)) == 1.0
    assert choose_bin_width(10.0, 5, 0.0, 0.0, FixedWidthBinning(1e-300)) == WIDTH_EPS


def test_fixed_count_floors_and_guards() -> None:
    assert choose_bin_width(10.0, 5, 0.0, 0.0, FixedCountBinning(4.9)) == pytest.approx(2.5)
    assert choose_bin_width(10.0, 5, 0.0, 0.0, FixedCountBinning(0.2)) == pytest.approx(10.0)
    assert choose_bin_width(10.0, 5, 0.0, 0.0, FixedCountBinning(-math.inf)) == pytest.approx(10.0)


def test_non_finite_bin_count_falls_back_to_unit_width() -> None:
    # range / inf = 0，与非法宽度一样回退到 1
    assert choose_bin_width(10.0, 5, 0.0, 0.0, FixedCountBinning(math.inf)) == 1.0
    assert choose_bin_width(10.0, 5, 0.0, 0.0, FixedCountBinning(math.nan)) == 1.0


def test_tentative_bin_count_absorbs_float_noise() -> None:
    # 0.3 / 0.1 = 2.9999999999999996
    assert tentative_bin_count(0.3, 0.1) == 3
    assert tentative_bin_count(10.0, 4.0) == 3
    assert tentative_bin_count(1.0, 5.0) == 1
    assert tentative_bin_count(math.inf, 1.0) is None


def test_build_edges_pins_last_edge() -> None:
    assert build_edges(1.0, 10.0, 3.0) == (1.0, 4.0, 7.0, 10.0)
    assert build_edges(0.0, 10.0, 3.0) == (0.0, 3.0, 6.0, 9.0, 10.0)
    assert build_edges(0.0, 1.0, 5.0) == (0.0, 1.0)


def test_bin_count_strategy_yields_exact_count() -> None:
    plan = compute_binning_plan(0.1, 0.8, 20, 0.2, 0.2, FixedCountBinning(7))
    assert plan.bin_count == 7
    assert plan.edges[-1] == 0.8
    assert all(b > a for a, b in zip(plan.edges, plan.edges[1:]))
    assert plan.warnings == ()


def test_bin_count_above_ceiling_is_capped_with_warning() -> None:
    plan = compute_binning_plan(0.0, 1.0, 10, 0.5, 0.3, FixedCountBinning(50_000))
    assert plan.bin_count == MAX_BINS
    assert plan.bin_width == pytest.approx(1.0 / MAX_BINS)
    assert len(plan.warnings) == 1
    assert "MAX_BINS" in plan.warnings[0]


def test_sub_epsilon_width_is_capped() -> None:
    plan = compute_binning_plan(-5.0, 5.0, 3, 1.0, 1.0, FixedWidthBinning(1e-20))
    assert plan.bin_count == MAX_BINS
    # 先按浮点分辨率放大宽度，再按 MAX_BINS 放大，两次修正各有一条告警
    assert len(plan.warnings) == 2
    assert "floating-point resolution" in plan.warnings[0]
    assert "MAX_BINS" in plan.warnings[1]


def test_edges_stay_distinct_at_large_magnitude() -> None:
    low = 1e6
    high = 1e6 + 3 * math.ulp(1e6)
    plan = compute_binning_plan(low, high, 2, 0.0, 0.0, None)
    assert plan.bin_count >= 1
    assert all(b > a for a, b in zip(plan.edges, plan.edges[1:]))
    assert len(plan.warnings) == 1
    assert "floating-point resolution" in plan.warnings[0]


def test_resolution_floor_reports_widened_bin_count() -> None:
    # 1e16 附近相邻浮点数间距为 2，50_000 个分箱无法区分
    plan = compute_binning_plan(1e16, 1e16 + 100, 2, 50.0, 50.0, FixedCountBinning(50_000))
    assert plan.bin_width == 4.0
    assert plan.bin_count == 25
    assert len(plan.warnings) == 1
    assert "0.002" in plan.warnings[0]
    assert "4.0" in plan.warnings[0]


def test_representable_width_has_no_resolution_warning() -> None:
    plan = compute_binning_plan(1e6, 1e6 + 10, 10, 2.0, 2.0, FixedWidthBinning(1.0))
    assert plan.bin_count == 10
    assert plan.warnings == ()
