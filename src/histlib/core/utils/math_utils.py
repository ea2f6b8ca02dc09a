"""
Numerical utilities shared across the library.

Responsibilities
  - Decide finiteness of arbitrary Python / numpy scalars without raising.
  - Evaluate ordered candidate computations and return the first valid one.
  - Clamp proposed widths into a strictly positive finite range.

Usage Context
  - Used by extraction and binning where degenerate inputs must be absorbed
    rather than propagated as NaN or infinity.
"""
# 说明：库内共享的数值工具函数集合。
# 职责：
# - to_finite_float：把任意标量安全地转为有限浮点数（失败返回 None，不抛错）
# - first_valid：按顺序求值候选计算，返回第一个满足条件的结果（优先级回退链）
# - clamp_positive：把宽度钳制为严格正且有限的值

from __future__ import annotations

import math
from numbers import Real
from typing import Callable, Iterable, Optional, Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]
Candidate = Union[float, Callable[[], float]]


def to_finite_float(value: object) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None`` when it is not one."""
    if value is None or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (Real, np.number)):
        numeric = float(value)
    else:
        try:
            numeric = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
    return numeric if math.isfinite(numeric) else None


def is_positive_finite(value: float) -> bool:
    return math.isfinite(value) and value > 0


def first_valid(
    candidates: Iterable[Candidate],
    predicate: Callable[[float], bool] = is_positive_finite,
) -> Optional[float]:
    """
    Return the first candidate satisfying ``predicate``.

    Candidates may be plain numbers or zero-argument callables; callables
    are only evaluated when every earlier candidate was rejected.
    """
    # 优先级回退链：顺序即优先级，便于审计与独立测试
    for candidate in candidates:
        value = candidate() if callable(candidate) else candidate
        if value is None:
            continue
        value = float(value)
        if predicate(value):
            return value
    return None


def clamp_positive(value: float, *, floor: float, fallback: float = 1.0) -> float:
    # 非有限或非正值回退为 fallback，再与下限 floor 取最大值
    return max(floor, value if is_positive_finite(value) else fallback)
