"""
Bin width selection and edge construction.

Responsibilities
  - Choose a bin width from an auto rule (Freedman-Diaconis, Scott or
    Sturges with a fallback chain), a fixed width or a fixed count.
  - Enforce the MAX_BINS ceiling and report the adjustment as a warning.
  - Emit uniformly spaced edges whose final edge equals the domain bound.

Limitations
  - Widths are always clamped to at least machine epsilon; a requested
    non-finite or non-positive width falls back to 1.
"""
# 说明：分箱宽度选择与边界构造。
# 职责：
# - auto 模式：计算 fd / scott / sturges 三个候选宽度，按子规则决定的优先级取第一个正且有限的值
# - binWidth / binCount 模式：直接使用调用方宽度或 range / floor(binCount)
# - 分箱数超过 MAX_BINS 时放大宽度并给出告警
# - 最后一个边界强制等于 d1，避免浮点漂移造成缝隙或重叠

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from histlib.core.utils.math_utils import clamp_positive, first_valid

from .constants import BIN_COUNT_RTOL, MAX_BINS, WIDTH_EPS
from .types import AutoBinning, AutoRule, BinningStrategy, FixedCountBinning, FixedWidthBinning

Candidate = Callable[[], float]


@dataclass(frozen=True)
class BinningPlan:
    bin_width: float
    edges: Tuple[float, ...]
    warnings: Tuple[str, ...] = ()

    @property
    def bin_count(self) -> int:
        return len(self.edges) - 1


def clamp_width(width: float) -> float:
    """Clamp a proposed width to a strictly positive finite value."""
    return clamp_positive(width, floor=WIDTH_EPS, fallback=1.0)


def _rule_candidates(span: float, n: int, iqr: float, sd: float) -> Dict[AutoRule, Candidate]:
    safe_n = max(1, n)
    n_root = 1.0 / np.cbrt(safe_n)
    return {
        AutoRule.FD: lambda: 2.0 * iqr * n_root,
        AutoRule.SCOTT: lambda: 3.5 * sd * n_root,
        AutoRule.STURGES: lambda: span / max(1, math.ceil(math.log2(safe_n) + 1)),
    }


# 各子规则的候选优先级；sturges 不回退
RULE_PRIORITY: Dict[AutoRule, Tuple[AutoRule, ...]] = {
    AutoRule.FD: (AutoRule.FD, AutoRule.SCOTT, AutoRule.STURGES),
    AutoRule.SCOTT: (AutoRule.SCOTT, AutoRule.FD, AutoRule.STURGES),
    AutoRule.STURGES: (AutoRule.STURGES,),
}


def auto_bin_width(span: float, n: int, iqr: float, sd: float, rule: AutoRule = AutoRule.FD) -> float:
    candidates = _rule_candidates(span, n, iqr, sd)
    chosen = first_valid(candidates[name] for name in RULE_PRIORITY[rule])
    if chosen is None:
        chosen = span if span != 0 else 1.0
    return clamp_width(chosen)


def choose_bin_width(span: float, n: int, iqr: float, sd: float, strategy: Optional[BinningStrategy]) -> float:
    """Return the bin width requested by ``strategy`` for a span of ``span``."""
    if strategy is None:
        strategy = AutoBinning()
    if isinstance(strategy, AutoBinning):
        return auto_bin_width(span, n, iqr, sd, strategy.rule)
    if isinstance(strategy, FixedWidthBinning):
        return clamp_width(strategy.bin_width)
    if isinstance(strategy, FixedCountBinning):
        count = strategy.bin_count
        # nan / +inf 得到 range / inf = 0，与非法宽度一样回退到 1；-inf 按 1 个分箱处理
        if math.isnan(count) or count == math.inf:
            return clamp_width(0.0)
        k = max(1, math.floor(count)) if math.isfinite(count) else 1
        return clamp_width(span / k)
    raise TypeError(f"unsupported binning strategy {strategy!r}")


def tentative_bin_count(span: float, width: float) -> Optional[int]:
    """
    Number of bins of ``width`` needed to cover ``span``.

    Ratios within ``BIN_COUNT_RTOL`` of an integer are rounded so that a
    width derived from ``span / k`` yields exactly ``k`` bins. Returns
    ``None`` when the ratio is not finite.
    """
    ratio = span / width
    if not math.isfinite(ratio):
        return None
    nearest = round(ratio)
    if nearest >= 1 and abs(ratio - nearest) <= BIN_COUNT_RTOL * nearest:
        return int(nearest)
    return max(1, math.ceil(ratio))


def build_edges(start: float, end: float, width: float, bin_count: Optional[int] = None) -> Tuple[float, ...]:
    """Uniform edges from ``start`` with the final edge pinned to ``end``."""
    k = bin_count if bin_count is not None else tentative_bin_count(end - start, width)
    if k is None or k < 1:
        k = 1
    edges = start + np.arange(k + 1, dtype=np.float64) * width
    edges[k] = end
    return tuple(float(edge) for edge in edges)


def resolution_floor(d0: float, d1: float) -> float:
    """Smallest width that still separates consecutive edges around the domain."""
    # 大数量级下 WIDTH_EPS 小于相邻浮点数间距，边界会塌缩为同一值
    magnitude = max(abs(d0), abs(d1))
    return max(WIDTH_EPS, 2.0 * float(np.spacing(magnitude)))


def compute_binning_plan(
    d0: float,
    d1: float,
    n: int,
    iqr: float,
    sd: float,
    strategy: Optional[BinningStrategy],
) -> BinningPlan:
    warnings: List[str] = []
    span = d1 - d0

    floor = resolution_floor(d0, d1)
    width = clamp_width(choose_bin_width(span, n, iqr, sd, strategy))
    if width < floor:
        warnings.append(
            f"Bin width {width} is below the floating-point resolution of the domain; "
            f"increasing bin width to {floor}."
        )
        width = floor
    k = tentative_bin_count(span, width)
    if k is None or k > MAX_BINS:
        requested = "unbounded" if k is None else str(k)
        adjusted = max(floor, clamp_width(span / MAX_BINS))
        warnings.append(
            f"Bin count ({requested}) exceeds MAX_BINS ({MAX_BINS}); "
            f"increasing bin width from {width} to {adjusted}."
        )
        width = adjusted
        k = min(MAX_BINS, tentative_bin_count(span, width) or MAX_BINS)

    return BinningPlan(bin_width=width, edges=build_edges(d0, d1, width, k), warnings=tuple(warnings))

