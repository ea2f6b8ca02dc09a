"""
Conversion of per-slot aggregates into public ``HistogramBin`` objects.
"""
# 说明：将槽位累加结果转换为公共分箱对象。
# 职责：
# - 内部槽位使用相邻边界；启用下溢 / 上溢时首尾槽位的边界延伸到 ±∞
# - percent = 100·count / totalWeight；density = count / (totalWeight·width)
# - 宽度非有限或非正时回退为 max(h, WIDTH_EPS)（覆盖无穷宽的溢出槽位）
# - 请求累积度量时按输出顺序累加 cumulative_count / percent / density

from __future__ import annotations

import math
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from .constants import WIDTH_EPS
from .types import HistogramBin, HistogramMeasure


def slot_bounds(slot: int, size: int, edges: Sequence[float], underflow: bool, overflow: bool) -> Tuple[float, float]:
    """Return ``(start, end)`` of emitted slot ``slot`` out of ``size``."""
    if underflow and slot == 0:
        return -math.inf, float(edges[0])
    if overflow and slot == size - 1:
        return float(edges[-1]), math.inf
    j = slot - (1 if underflow else 0)
    return float(edges[j]), float(edges[j + 1])


def _center(start: float, end: float) -> float:
    if math.isfinite(start) and math.isfinite(end):
        return (start + end) / 2.0
    return start if math.isfinite(start) else end


def build_bins(
    counts: Union[Sequence[float], np.ndarray],
    items: Sequence[Sequence[int]],
    edges: Sequence[float],
    bin_width: float,
    underflow: bool,
    overflow: bool,
    total_weight: float,
    measure: Union[str, HistogramMeasure] = HistogramMeasure.COUNT,
    samples: Optional[Sequence[Tuple[Any, ...]]] = None,
) -> Tuple[HistogramBin, ...]:
    """Build the ordered, immutable bin sequence for one computation."""
    cumulative = HistogramMeasure(measure).is_cumulative
    fallback_width = max(bin_width, WIDTH_EPS)
    size = len(counts)
    bins: List[HistogramBin] = []
    running = 0.0

    for slot in range(size):
        start, end = slot_bounds(slot, size, edges, underflow, overflow)
        width = end - start
        if not (math.isfinite(width) and width > 0):
            width = fallback_width

        count = float(counts[slot])
        running += count
        extra = {}
        if cumulative:
            extra = {
                "cumulative_count": running,
                "cumulative_percent": running / total_weight * 100.0,
                "cumulative_density": running / total_weight,
            }

        bins.append(
            HistogramBin(
                index=slot,
                start=start,
                end=end,
                center=_center(start, end),
                width=width,
                count=count,
                percent=count / total_weight * 100.0,
                density=count / (total_weight * width),
                items=tuple(int(i) for i in items[slot]),
                sample=samples[slot] if samples is not None else None,
                **extra,
            )
        )
    return tuple(bins)
