"""
Observation extraction from heterogeneous input records.

Responsibilities:
    * resolve a numeric value and a weight for every input record
    * drop records whose value is missing/non-finite or whose weight is not
      strictly positive and finite, without raising
    * remember the position of every kept record in the original input
"""
# 说明：从任意输入记录中抽取数值与权重，构造并行的观测序列。
# 职责：
# - 数值型输入且未提供访问器时走快速路径（numpy 向量化过滤）
# - 非数值输入且未提供访问器时给出告警，并返回空序列
# - 单条记录的数值为空 / 非有限，或权重非有限 / ≤0 时整条丢弃（不计零、不抛错）
# - 保留每条观测在原始输入中的下标，供分箱 items 回溯源数据

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from histlib.core.utils.math_utils import to_finite_float
from histlib.core.utils.param_validation import ParamValidationError, ensure

Accessor = Callable[[Any, int], Any]
ValueSource = Union[None, str, Accessor]
WeightSource = Union[None, float, str, Accessor]

NON_NUMERIC_WARNING = "Non-numeric data provided without an accessor 'x'. All items will be ignored."


@dataclass(frozen=True)
class Observations:
    """Parallel value/weight arrays plus the source index of each observation."""

    values: np.ndarray
    weights: np.ndarray
    indices: np.ndarray
    warnings: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return int(self.values.shape[0])

    @property
    def is_empty(self) -> bool:
        return len(self) == 0


def _field_getter(name: str) -> Accessor:
    # 字段访问器：Mapping 记录按键取值，其它对象按属性取值；缺失视为 None
    def getter(record: Any, index: int) -> Any:
        if isinstance(record, Mapping):
            return record.get(name)
        return getattr(record, name, None)

    return getter


def _resolve_value_accessor(x: ValueSource) -> Optional[Accessor]:
    if x is None:
        return None
    if isinstance(x, str):
        return _field_getter(x)
    ensure(callable(x), "x must be a field name or a callable accessor")
    return x


def _resolve_weight(weight: WeightSource) -> Union[float, Accessor]:
    # 权重来源：None -> 1；数值常量；字段名；可调用访问器
    if weight is None:
        return 1.0
    if isinstance(weight, Real) and not isinstance(weight, bool):
        return float(weight)
    if isinstance(weight, str):
        return _field_getter(weight)
    if callable(weight):
        return weight
    raise ParamValidationError("weight must be a number, a field name or a callable accessor")


def _is_number(value: Any) -> bool:
    return isinstance(value, (Real, np.number)) and not isinstance(value, (bool, np.bool_))


def _freeze(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


def _build(values: Any, weights: Any, indices: Any, warnings: List[str]) -> Observations:
    return Observations(
        values=_freeze(np.asarray(values, dtype=np.float64)),
        weights=_freeze(np.asarray(weights, dtype=np.float64)),
        indices=_freeze(np.asarray(indices, dtype=np.int64)),
        warnings=tuple(warnings),
    )


def _constant_weight_warning(weight: float) -> List[str]:
    if np.isfinite(weight) and weight > 0:
        return []
    return [f"Constant weight {weight!r} is not a positive finite number; all items will be ignored."]


def _extract_array(array: np.ndarray, weight: float) -> Observations:
    # 快速路径：一维数值数组 + 常量权重，完全向量化
    ensure(array.ndim == 1, "numeric array input must be one-dimensional")
    values = array.astype(np.float64, copy=False)
    warnings = _constant_weight_warning(weight)
    if warnings:
        return _build([], [], [], warnings)
    mask = np.isfinite(values)
    indices = np.flatnonzero(mask)
    kept = values[mask].copy()
    return _build(kept, np.full(kept.shape, weight, dtype=np.float64), indices, warnings)


def extract_observations(
    data: Union[Sequence[Any], np.ndarray],
    *,
    x: ValueSource = None,
    weight: WeightSource = None,
) -> Observations:
    """
    Turn raw input records into parallel value/weight arrays.

    Individual malformed records are dropped silently; only the
    "non-numeric data without accessor" situation produces a warning.
    """
    accessor = _resolve_value_accessor(x)
    weight_source = _resolve_weight(weight)

    if (
        accessor is None
        and isinstance(data, np.ndarray)
        and data.dtype.kind in "iuf"
        and not callable(weight_source)
    ):
        return _extract_array(data, weight_source)  # type: ignore[arg-type]

    records = data if isinstance(data, (Sequence, np.ndarray)) else list(data)
    warnings: List[str] = []

    if accessor is None and len(records) > 0 and not _is_number(records[0]):
        warnings.append(NON_NUMERIC_WARNING)
        return _build([], [], [], warnings)

    if not callable(weight_source):
        warnings.extend(_constant_weight_warning(weight_source))
        if warnings:
            return _build([], [], [], warnings)

    values: List[float] = []
    weights: List[float] = []
    indices: List[int] = []
    for index, record in enumerate(records):
        value = to_finite_float(accessor(record, index) if accessor is not None else record)
        if value is None:
            continue
        if callable(weight_source):
            resolved = to_finite_float(weight_source(record, index))
        else:
            resolved = weight_source
        if resolved is None or resolved <= 0:
            continue
        values.append(value)
        weights.append(resolved)
        indices.append(index)

    return _build(values, weights, indices, warnings)
