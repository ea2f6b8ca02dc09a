"""
Unit tests for weighted summary statistics.
"""
# 说明：quantile 与 summarize 的单元测试。
# 覆盖：
# - quantile：线性插值分位数与边界 p=0 / p=1
# - summarize：加权均值、总体方差、非加权 IQR 与极值

import pytest

from histlib.core.data import quantile, summarize


def test_quantile_linear_interpolation() -> None:
    values = [1.0, 3.0, 5.0, 7.0]
    assert quantile(values, 0.0) == 1.0
    assert quantile(values, 1.0) == 7.0
    assert quantile(values, 0.5) == pytest.approx(4.0)
    assert quantile(values, 0.25) == pytest.approx(2.5)


def test_quantile_rejects_empty_and_out_of_range() -> None:
    with pytest.raises(ValueError):
        quantile([], 0.5)
    with pytest.raises(ValueError):
        quantile([1.0], 1.5)


def test_weighted_mean_is_exact() -> None:
    summary = summarize([1.0, 2.0, 3.0], [1.0, 2.0, 1.0])
    assert summary.mean == 2.0
    assert summary.total_weight == 4.0
    # 总体方差：(1·1 + 4·2 + 9·1) / 4 - 2² = 0.5
    assert summary.variance == pytest.approx(0.5)
    assert summary.sd == pytest.approx(0.5 ** 0.5)


def test_extrema_and_iqr_are_unweighted() -> None:
    summary = summarize([9.0, 1.0, 5.0, 3.0, 7.0], [100.0, 1.0, 1.0, 1.0, 1.0])
    assert summary.min == 1.0
    assert summary.max == 9.0
    # 排序后 [1,3,5,7,9]：Q1 = 3，Q3 = 7
    assert summary.iqr == pytest.approx(4.0)


def test_single_point_has_zero_spread() -> None:
    summary = summarize([5.0], [1.0])
    assert summary.min == summary.max == 5.0
    assert summary.variance == 0.0
    assert summary.iqr == 0.0


def test_variance_clamped_at_zero_for_constant_values() -> None:
    summary = summarize([0.1] * 7, [0.3] * 7)
    assert summary.variance >= 0.0


def test_summarize_rejects_empty_input() -> None:
    with pytest.raises(ValueError):
        summarize([], [])
