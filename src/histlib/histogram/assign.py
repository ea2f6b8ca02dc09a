"""
Classification of observations into uniform bins and weighted accumulation.

Responsibilities
  - Map every value to a bin index, ``-1`` (underflow) or ``k`` (overflow)
    under the selected edge rule.
  - Sum weights per emitted slot and record the contributing source
    indices, optionally with dedicated underflow/overflow slots.

Limitations
  - Observations classified as underflow/overflow are dropped entirely
    when the matching slot is disabled. Percentages downstream still use
    the total weight of every valid observation, so in-range bins can sum
    to less than 100% in that case.
"""
# 说明：将观测分类到均匀分箱并做加权累加。
# 职责：
# - classify：idx = floor((x - start) / h)；idx < 0 为下溢，idx ≥ k 为上溢
# - h 使用分箱规划给出的宽度；最后一个边界被钉在 d1 时，d1 与 start + k·h 之间的值仍属于分箱 k-1
# - idx ≥ k 时：右闭规则下等于 d1 或距 start + k·h 不超过 RIGHT_CLOSED_EPS 的值并入 k-1
# - 因浮点漂移落到 k 但仍低于 d1 的值并入 k-1
# - accumulate：按槽位求加权计数并保留原始输入下标；未启用的下溢 / 上溢槽位直接丢弃对应观测

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .constants import RIGHT_CLOSED_EPS
from .exceptions import EdgeLayoutError
from .types import EdgeRule

ArrayLike = Union[Sequence[float], np.ndarray]

UNDERFLOW = -1


@dataclass(frozen=True)
class Accumulation:
    """Per-slot weighted counts and contributing source indices."""

    counts: np.ndarray
    items: Tuple[np.ndarray, ...]

    @property
    def retained_weight(self) -> float:
        return float(np.sum(self.counts))


def _check_edges(edges: ArrayLike) -> np.ndarray:
    arr = np.asarray(edges, dtype=np.float64)
    if arr.ndim != 1 or arr.shape[0] < 2:
        raise EdgeLayoutError("edges must contain at least two entries")
    if not arr[1] > arr[0]:
        raise EdgeLayoutError("edges must be strictly increasing")
    return arr


def _resolve_width(edge_arr: np.ndarray, width: Optional[float]) -> float:
    h = float(edge_arr[1] - edge_arr[0]) if width is None else float(width)
    if not (np.isfinite(h) and h > 0):
        raise EdgeLayoutError(f"bin width must be positive and finite, got {h!r}")
    return h


def classify(
    values: ArrayLike,
    edges: ArrayLike,
    rule: Union[str, EdgeRule] = EdgeRule.CLOSED_RIGHT,
    width: Optional[float] = None,
) -> np.ndarray:
    """
    Return the bin index of each value against ``edges``.

    The index is ``floor((x - start) / width)``; ``-1`` marks underflow and
    ``k = len(edges) - 1`` marks overflow. ``width`` is the planned bin
    width and defaults to the first edge spacing. A pinned final edge can
    sit below ``start + k * width``; values in between stay in bin ``k-1``.
    """
    edge_arr = _check_edges(edges)
    rule = EdgeRule(rule)
    h = _resolve_width(edge_arr, width)
    xs = np.asarray(values, dtype=np.float64)
    k = edge_arr.shape[0] - 1
    start = edge_arr[0]

    with np.errstate(over="ignore", invalid="ignore"):
        raw = np.floor((xs - start) / h)
    idx = np.where(raw < 0, UNDERFLOW, np.minimum(raw, k)).astype(np.int64)

    # 只有 idx ≥ k 的值才可能被并回 k-1
    fold = xs < edge_arr[-1]
    if rule is EdgeRule.CLOSED_RIGHT:
        fold |= np.abs(xs - (start + k * h)) < RIGHT_CLOSED_EPS
        fold |= xs == edge_arr[-1]
    return np.where((idx >= k) & fold, k - 1, idx)


def accumulate(
    values: ArrayLike,
    weights: ArrayLike,
    edges: ArrayLike,
    rule: Union[str, EdgeRule] = EdgeRule.CLOSED_RIGHT,
    underflow: bool = False,
    overflow: bool = False,
    *,
    indices: Optional[ArrayLike] = None,
    width: Optional[float] = None,
) -> Accumulation:
    """
    Sum ``weights`` into ``k + underflow + overflow`` slots.

    Slot 0 is the underflow slot when enabled, the last slot is the
    overflow slot when enabled. ``indices`` maps observation positions
    back to the original input; positions are used when omitted.
    ``width`` is the planned bin width passed through to ``classify``.
    """
    edge_arr = _check_edges(edges)
    xs = np.asarray(values, dtype=np.float64)
    ws = np.asarray(weights, dtype=np.float64)
    if xs.shape != ws.shape:
        raise ValueError("values and weights must have the same length")
    source = np.arange(xs.shape[0]) if indices is None else np.asarray(indices, dtype=np.int64)

    k = edge_arr.shape[0] - 1
    offset = 1 if underflow else 0
    size = k + offset + (1 if overflow else 0)

    bins = classify(xs, edge_arr, rule, width)
    slots = bins + offset
    if underflow:
        slots = np.where(bins == UNDERFLOW, 0, slots)
    else:
        slots = np.where(bins == UNDERFLOW, -1, slots)
    if not overflow:
        slots = np.where(bins == k, -1, slots)

    keep = slots >= 0
    kept_slots = slots[keep]
    counts = np.bincount(kept_slots, weights=ws[keep], minlength=size).astype(np.float64)

    # 稳定排序保证每个槽位内的下标保持输入顺序
    order = np.argsort(kept_slots, kind="stable")
    sorted_slots = kept_slots[order]
    contributors = source[keep][order]
    bounds = np.searchsorted(sorted_slots, np.arange(size + 1), side="left")
    items = tuple(contributors[bounds[i]:bounds[i + 1]] for i in range(size))
    return Accumulation(counts=counts, items=items)
