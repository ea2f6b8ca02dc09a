"""
Domain resolution for histogram computations.

Responsibilities:
    * pick the numeric span to cover from a caller domain or observed data
    * recover from non-finite, reversed and zero-width domains with warnings
"""
# 说明：直方图的数值域解析。
# 职责：
# - 未提供 domain 时使用观测 min / max
# - 端点非有限：丢弃调用方 domain，回退到观测 min / max 并告警
# - 端点反序：交换并告警
# - 零宽度：按 eps（0 点为 1，否则 |d0|·1e-6）对称扩展并告警
# 约定：从不失败，总是返回严格递增区间

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from histlib.core.utils.math_utils import to_finite_float

NON_FINITE_DOMAIN_WARNING = "Provided domain contains non-finite values; falling back to observed min/max."
REVERSED_DOMAIN_WARNING = "Provided domain was reversed; it has been normalized to [min, max]."
ZERO_WIDTH_DOMAIN_WARNING = "Zero-width domain encountered; expanded symmetrically by a small epsilon."


def resolve_domain(
    domain: Optional[Sequence[float]],
    observed_min: float,
    observed_max: float,
) -> Tuple[float, float, List[str]]:
    """Return a strictly increasing ``(d0, d1, warnings)`` triple."""
    warnings: List[str] = []
    if domain is None:
        d0, d1 = float(observed_min), float(observed_max)
    else:
        lower = to_finite_float(domain[0])
        upper = to_finite_float(domain[1])
        if lower is None or upper is None:
            warnings.append(NON_FINITE_DOMAIN_WARNING)
            d0, d1 = float(observed_min), float(observed_max)
        else:
            d0, d1 = lower, upper
        if d0 > d1:
            warnings.append(REVERSED_DOMAIN_WARNING)
            d0, d1 = d1, d0

    if d0 == d1:
        eps = 1.0 if d0 == 0 else abs(d0) * 1e-6
        warnings.append(ZERO_WIDTH_DOMAIN_WARNING)
        d0, d1 = d0 - eps, d1 + eps
        if not d0 < d1:
            # 次正规数时 eps 会下溢为 0，退而取相邻可表示浮点数
            d0 = float(np.nextafter(d0, -math.inf))
            d1 = float(np.nextafter(d1, math.inf))

    return d0, d1, warnings
