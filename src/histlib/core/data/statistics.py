"""
Weighted summary statistics for observation sets.

Responsibilities:
    * single pass weighted min/max/mean/population variance
    * unweighted interquartile range via linear-interpolation quantiles
"""
# 说明：观测集的加权描述统计。
# 职责：
# - quantile：对升序数组做线性插值分位数（pos = (n-1)·p）
# - summarize：一次遍历得到加权均值 / 总体方差（按权重归一），再排序一次得到非加权 IQR
# 约定：
# - min / max 为非加权极值
# - 方差下限钳制为 0，吸收浮点相消误差
# - 空输入不可调用 summarize，由编排层提前返回空结果

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]


@dataclass(frozen=True)
class Summary:
    min: float
    max: float
    mean: float
    variance: float
    sd: float
    iqr: float
    total_weight: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def quantile(sorted_values: ArrayLike, p: float) -> float:
    """Return the ``p`` quantile of an ascending, non-empty array."""
    # 线性插值：在 floor(pos) 与 ceil(pos) 两个次序统计量之间插值
    if len(sorted_values) == 0:
        raise ValueError("quantile of empty input")
    if not 0.0 <= p <= 1.0:
        raise ValueError("p must lie in [0, 1]")
    pos = (len(sorted_values) - 1) * p
    lo = math.floor(pos)
    hi = math.ceil(pos)
    low_value = float(sorted_values[lo])
    if lo == hi:
        return low_value
    return low_value + (float(sorted_values[hi]) - low_value) * (pos - lo)


def summarize(values: ArrayLike, weights: ArrayLike) -> Summary:
    """Compute weighted moments plus the unweighted IQR of ``values``."""
    xs = np.asarray(values, dtype=np.float64)
    ws = np.asarray(weights, dtype=np.float64)
    if xs.size == 0:
        raise ValueError("summarize requires at least one value")
    if xs.shape != ws.shape:
        raise ValueError("values and weights must have the same length")

    total_weight = float(np.sum(ws))
    weighted_sum = float(np.sum(xs * ws))
    weighted_sumsq = float(np.sum(xs * xs * ws))
    mean = weighted_sum / total_weight
    variance = max(0.0, weighted_sumsq / total_weight - mean * mean)

    ordered = np.sort(xs)
    iqr = max(0.0, quantile(ordered, 0.75) - quantile(ordered, 0.25))

    return Summary(
        min=float(ordered[0]),
        max=float(ordered[-1]),
        mean=mean,
        variance=variance,
        sd=math.sqrt(variance),
        iqr=iqr,
        total_weight=total_weight,
    )
