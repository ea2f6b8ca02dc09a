"""
Weighted histogram orchestration.

Responsibilities
  - Sequence extraction, summary statistics, domain resolution, binning,
    accumulation and bin construction for a single call.
  - Concatenate each stage's warnings in call order.
  - Return a well-formed empty result instead of failing when no valid
    observation remains or when no weight is left to normalise by.

Usage Context
  - ``compute_histogram(values)`` for plain numbers, or with ``x`` /
    ``weight`` accessors for records. Every call is independent; nothing
    is cached between calls and no global state is written.
"""
# 说明：加权直方图的编排入口。
# 职责：
# - 依次调用 抽取 -> 统计 -> 域解析 -> 分箱规划 -> 累加 -> 构建分箱
# - 各阶段返回各自的告警列表，由此处按调用顺序拼接
# - 两个空结果出口：抽取后无有效观测；过滤后总权重为零（含分类阶段全部被丢弃）
# - 数据质量问题只产生告警，不抛异常；只有内部不变量被破坏时才抛 HistogramError

from __future__ import annotations

import math
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from histlib.core.data.domain import resolve_domain
from histlib.core.data.extraction import extract_observations
from histlib.core.data.statistics import summarize
from histlib.core.utils.config import get_config
from histlib.core.utils.logging import get_logger
from histlib.core.utils.param_validation import ensure_type

from .assign import Accumulation, accumulate
from .binning import compute_binning_plan
from .bins import build_bins
from .types import HistogramConfig, HistogramResult, HistogramStats

logger = get_logger(__name__)

NO_VALID_DATA = "No valid data"
ZERO_WEIGHT_WARNING = "Total weight is zero after filtering; returning empty histogram."
NOTHING_RETAINED_WARNING = (
    "Every observation fell outside the domain and no underflow/overflow slot captured it; "
    "returning empty histogram."
)


def empty_result(warnings: Sequence[str] = ()) -> HistogramResult:
    """Explicitly empty result: no bins, domain [0, 1], all-zero stats."""
    return HistogramResult(
        bins=(),
        domain=(0.0, 1.0),
        bin_width=1.0,
        stats=HistogramStats.empty(),
        warnings=(NO_VALID_DATA, *warnings),
    )


def _resolve_config(config: Optional[HistogramConfig], options: Any) -> HistogramConfig:
    if config is None:
        return HistogramConfig(**options)
    ensure_type(config, (HistogramConfig,), label="config")
    return config.replace(**options) if options else config


def _collect_samples(
    records: Sequence[Any],
    accumulation: Accumulation,
    sample_size: int,
) -> Optional[List[Tuple[Any, ...]]]:
    # 每个分箱按输入顺序保留前 sample_size 条源记录
    if sample_size <= 0:
        return None
    return [tuple(records[int(i)] for i in slot[:sample_size]) for slot in accumulation.items]


def _report(result: HistogramResult) -> HistogramResult:
    logger.debug(
        "histogram computed: n=%d domain=%s bin_width=%g bins=%d",
        result.stats.n,
        result.domain,
        result.bin_width,
        len(result.bins),
    )
    if get_config().log_warnings:
        for warning in result.warnings:
            logger.warning("histogram: %s", warning)
    return result


def compute_histogram(
    data: Union[Sequence[Any], np.ndarray],
    config: Optional[HistogramConfig] = None,
    **options: Any,
) -> HistogramResult:
    """
    Compute a weighted histogram and summary statistics for ``data``.

    ``options`` are ``HistogramConfig`` fields; when ``config`` is given
    they override its values.
    """
    cfg = _resolve_config(config, options)
    records = data if isinstance(data, (Sequence, np.ndarray)) else list(data)

    observations = extract_observations(records, x=cfg.x, weight=cfg.weight)
    warnings: List[str] = list(observations.warnings)
    if observations.is_empty:
        return _report(empty_result(warnings))

    summary = summarize(observations.values, observations.weights)

    d0, d1, domain_warnings = resolve_domain(cfg.domain, summary.min, summary.max)
    warnings.extend(domain_warnings)

    plan = compute_binning_plan(d0, d1, len(observations), summary.iqr, summary.sd, cfg.binning)
    warnings.extend(plan.warnings)

    capture = cfg.overflow
    accumulation = accumulate(
        observations.values,
        observations.weights,
        plan.edges,
        cfg.edge_rule,
        capture.underflow,
        capture.overflow,
        indices=observations.indices,
        width=plan.bin_width,
    )

    total_weight = summary.total_weight
    if not (math.isfinite(total_weight) and total_weight > 0):
        warnings.append(ZERO_WEIGHT_WARNING)
        return _report(empty_result(warnings))
    if not accumulation.retained_weight > 0:
        warnings.append(NOTHING_RETAINED_WARNING)
        return _report(empty_result(warnings))

    bins = build_bins(
        accumulation.counts,
        accumulation.items,
        plan.edges,
        plan.bin_width,
        capture.underflow,
        capture.overflow,
        total_weight,
        cfg.measure,
        samples=_collect_samples(records, accumulation, cfg.sample_size),
    )

    return _report(
        HistogramResult(
            bins=bins,
            domain=(d0, d1),
            bin_width=plan.bin_width,
            stats=HistogramStats(
                n=len(observations),
                total_weight=total_weight,
                min=summary.min,
                max=summary.max,
                mean=summary.mean,
                variance=summary.variance,
                sd=summary.sd,
                iqr=summary.iqr,
            ),
            warnings=tuple(warnings),
        )
    )
