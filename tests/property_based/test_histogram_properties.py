"""
Property-based tests for the weighted histogram pipeline.
"""
# 说明：直方图流程的属性测试。
# 覆盖：
# - 守恒：启用两端溢出槽位时各分箱计数之和等于总权重
# - 百分比：观测全部落在域内时 percent 之和约为 100
# - 累积计数单调不减且末尾等于总权重
# - 分箱数不超过 MAX_BINS，边界严格递增且末端等于 d1
# - 加权统计量位于 [min, max] 之间

import numpy as np
import pytest
from hypothesis import HealthCheck, given, settings, strategies as st

from histlib.histogram import MAX_BINS, compute_histogram

from strategies import binning_selectors, weighted_observations


def _weight_fn(weights):
    return lambda record, index: weights[index]


@settings(max_examples=60, suppress_health_check=[HealthCheck.too_slow])
@given(weighted_observations(), binning_selectors(), st.sampled_from(["closed-left", "closed-right"]))
def test_conservation_with_full_capture(observations, binning, edge_rule):
    values, weights = observations
    result = compute_histogram(values, weight=_weight_fn(weights), binning=binning,
                               edge_rule=edge_rule, overflow=True)
    total = sum(b.count for b in result.bins)
    assert total == pytest.approx(result.stats.total_weight, rel=1e-9)
    assert result.stats.total_weight == pytest.approx(float(np.sum(weights)), rel=1e-9)


@settings(max_examples=60, suppress_health_check=[HealthCheck.too_slow])
@given(weighted_observations(), binning_selectors())
def test_percent_sums_to_hundred_inside_observed_domain(observations, binning):
    values, weights = observations
    result = compute_histogram(values, weight=_weight_fn(weights), binning=binning,
                               edge_rule="closed-right")
    assert sum(b.percent for b in result.bins) == pytest.approx(100.0, rel=1e-9)


@settings(max_examples=60, suppress_health_check=[HealthCheck.too_slow])
@given(weighted_observations(), binning_selectors())
def test_cumulative_count_is_monotone(observations, binning):
    values, weights = observations
    result = compute_histogram(values, weight=_weight_fn(weights), binning=binning,
                               overflow=True, measure="cumulative-count")
    running = [b.cumulative_count for b in result.bins]
    assert all(later >= earlier for earlier, later in zip(running, running[1:]))
    assert running[-1] == pytest.approx(result.stats.total_weight, rel=1e-9)


@settings(max_examples=60, suppress_health_check=[HealthCheck.too_slow])
@given(weighted_observations(), binning_selectors())
def test_bin_layout_is_well_formed(observations, binning):
    values, _ = observations
    result = compute_histogram(values, binning=binning)
    assert 1 <= len(result.bins) <= MAX_BINS
    d0, d1 = result.domain
    assert d0 < d1
    assert result.bins[0].start == d0
    assert result.bins[-1].end == d1
    for left, right in zip(result.bins, result.bins[1:]):
        assert left.end == right.start
        assert right.start > left.start


@settings(max_examples=60)
@given(weighted_observations())
def test_weighted_stats_are_bounded(observations):
    values, weights = observations
    stats = compute_histogram(values, weight=_weight_fn(weights)).stats
    assert stats.min <= stats.mean + 1e-6 * max(1.0, abs(stats.mean))
    assert stats.mean <= stats.max + 1e-6 * max(1.0, abs(stats.mean))
    assert stats.variance >= 0.0
    assert stats.iqr >= 0.0
    assert stats.n == len(values)
