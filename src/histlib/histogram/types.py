"""
Value types for the histogram pipeline.

Responsibilities
  - Model the binning selector, edge rule, measure and overflow selector
    as closed variants with explicit normalisation of caller input.
  - Hold the immutable public result: bins, stats and warnings.

Usage Context
  - Build a ``HistogramConfig`` (or pass keyword options to
    ``compute_histogram``) and consume the returned ``HistogramResult``.

Limitations
  - Results are read-only snapshots; nothing links one computation's bins
    to another's.
"""
# 说明：直方图流程使用的值类型。
# 职责：
# - 分箱策略（auto / binWidth / binCount）建模为带标签的变体，每个分支显式匹配
# - 边界规则、度量、溢出选择器统一在构造时规范化，非法取值抛 ParamValidationError
# - 公共结果（分箱、统计量、告警）全部为不可变快照

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from histlib.core.data.extraction import ValueSource, WeightSource
from histlib.core.utils.config import get_config
from histlib.core.utils.param_validation import (
    ParamValidationError,
    ensure,
    ensure_choice,
    ensure_type,
)


class EdgeRule(str, Enum):
    """Which side of each bin interval is closed."""

    CLOSED_LEFT = "closed-left"
    CLOSED_RIGHT = "closed-right"


class AutoRule(str, Enum):
    FD = "fd"
    SCOTT = "scott"
    STURGES = "sturges"


class HistogramMeasure(str, Enum):
    COUNT = "count"
    PERCENT = "percent"
    DENSITY = "density"
    CUMULATIVE_COUNT = "cumulative-count"
    CUMULATIVE_PERCENT = "cumulative-percent"
    CUMULATIVE_DENSITY = "cumulative-density"

    @property
    def is_cumulative(self) -> bool:
        return self.value.startswith("cumulative")

    @property
    def base(self) -> "HistogramMeasure":
        """Non-cumulative counterpart of this measure."""
        if not self.is_cumulative:
            return self
        return HistogramMeasure(self.value[len("cumulative-"):])


def _ensure_number(value: Any, label: str) -> float:
    # 数值型参数：允许 nan / inf（由分箱规划器兜底），但拒绝非数值类型
    ensure(
        isinstance(value, (Real, np.number)) and not isinstance(value, (bool, np.bool_)),
        f"{label} must be a number",
    )
    return float(value)


@dataclass(frozen=True)
class AutoBinning:
    """Rule-based bin width with a fallback chain."""

    rule: AutoRule = AutoRule.FD

    def __post_init__(self) -> None:
        object.__setattr__(self, "rule", ensure_choice(self.rule, AutoRule, label="rule"))


@dataclass(frozen=True)
class FixedWidthBinning:
    bin_width: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "bin_width", _ensure_number(self.bin_width, "bin_width"))


@dataclass(frozen=True)
class FixedCountBinning:
    bin_count: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "bin_count", _ensure_number(self.bin_count, "bin_count"))


BinningStrategy = Union[AutoBinning, FixedWidthBinning, FixedCountBinning]


def parse_binning(value: Any) -> BinningStrategy:
    """
    Normalise a binning selector.

    Accepts a strategy instance, ``None`` (auto with the configured default
    rule), an auto rule name, ``"auto"``, or a mapping in the
    ``{"mode": ..., "rule"|"binWidth"|"binCount": ...}`` form.
    """
    if isinstance(value, (AutoBinning, FixedWidthBinning, FixedCountBinning)):
        return value
    if value is None or value == "auto":
        return AutoBinning(rule=get_config().default_auto_rule)
    if isinstance(value, (str, AutoRule)):
        return AutoBinning(rule=value)
    ensure_type(value, (Mapping,), label="binning")
    mode = value.get("mode", "auto")
    if mode == "auto":
        return AutoBinning(rule=value.get("rule") or get_config().default_auto_rule)
    if mode == "binWidth":
        ensure("binWidth" in value, "binWidth mode requires a 'binWidth' entry")
        return FixedWidthBinning(bin_width=value["binWidth"])
    if mode == "binCount":
        ensure("binCount" in value, "binCount mode requires a 'binCount' entry")
        return FixedCountBinning(bin_count=value["binCount"])
    raise ParamValidationError(f"unknown binning mode {mode!r}")


@dataclass(frozen=True)
class OverflowCapture:
    """Whether out-of-domain observations get their own end slots."""

    underflow: bool = False
    overflow: bool = False

    @property
    def extra_slots(self) -> int:
        return int(self.underflow) + int(self.overflow)

    @classmethod
    def resolve(cls, value: Any) -> "OverflowCapture":
        # bool 同时作用于两端；Mapping 可分别设置 underflow / overflow
        if isinstance(value, cls):
            return value
        if value is None:
            return cls()
        if isinstance(value, (bool, np.bool_)):
            return cls(underflow=bool(value), overflow=bool(value))
        ensure_type(value, (Mapping,), label="overflow")
        unknown = set(value) - {"underflow", "overflow"}
        ensure(not unknown, f"unknown overflow keys: {sorted(unknown)}")
        return cls(underflow=bool(value.get("underflow")), overflow=bool(value.get("overflow")))


@dataclass(frozen=True)
class HistogramConfig:
    """
    Complete description of one histogram computation.

    - x: field name or ``(record, index) -> number`` accessor; ``None``
      treats records as numbers.
    - weight: constant, field name or ``(record, index) -> number``.
    - domain: optional ``(d0, d1)`` span; defaults to the observed range.
    - binning: strategy variant or a selector accepted by ``parse_binning``.
    - edge_rule: ``closed-left`` or ``closed-right``.
    - overflow: ``bool`` or ``{"underflow": bool, "overflow": bool}``.
      Disabled slots drop out-of-domain observations from every bin while
      percentages still use the total weight of all valid observations.
    - measure: selects whether cumulative fields are populated.
    - sample_size: number of source records kept per bin (0 disables).
    """

    x: ValueSource = None
    weight: WeightSource = None
    domain: Optional[Tuple[Any, Any]] = None
    binning: Any = None
    edge_rule: Any = None
    overflow: Any = None
    measure: Any = HistogramMeasure.COUNT
    sample_size: int = 0

    def __post_init__(self) -> None:
        config = get_config()
        if self.domain is not None:
            ensure(
                isinstance(self.domain, (Sequence, np.ndarray))
                and not isinstance(self.domain, str)
                and len(self.domain) == 2,
                "domain must be a (d0, d1) pair",
            )
            object.__setattr__(self, "domain", (self.domain[0], self.domain[1]))
        object.__setattr__(self, "binning", parse_binning(self.binning))
        edge_rule = self.edge_rule if self.edge_rule is not None else config.default_edge_rule
        object.__setattr__(self, "edge_rule", ensure_choice(edge_rule, EdgeRule, label="edge_rule"))
        object.__setattr__(self, "overflow", OverflowCapture.resolve(self.overflow))
        measure = self.measure if self.measure is not None else HistogramMeasure.COUNT
        object.__setattr__(self, "measure", ensure_choice(measure, HistogramMeasure, label="measure"))
        ensure(
            isinstance(self.sample_size, int) and not isinstance(self.sample_size, bool) and self.sample_size >= 0,
            "sample_size must be a non-negative integer",
        )

    def replace(self, **changes: Any) -> "HistogramConfig":
        """Return a copy with ``changes`` applied (unknown keys raise)."""
        names = {f.name for f in fields(self)}
        unknown = set(changes) - names
        ensure(not unknown, f"unknown histogram options: {sorted(unknown)}")
        current = {name: getattr(self, name) for name in names}
        current.update(changes)
        return HistogramConfig(**current)


@dataclass(frozen=True)
class HistogramBin:
    """One emitted slot; ``start``/``end`` are infinite for overflow slots."""

    index: int
    start: float
    end: float
    center: float
    width: float
    count: float
    percent: float
    density: float
    items: Tuple[int, ...] = ()
    cumulative_count: Optional[float] = None
    cumulative_percent: Optional[float] = None
    cumulative_density: Optional[float] = None
    sample: Optional[Tuple[Any, ...]] = None

    def value(self, measure: Union[str, HistogramMeasure] = HistogramMeasure.COUNT) -> float:
        """Value a renderer would plot for ``measure``."""
        # 累积字段未填充时回退到对应的非累积度量
        measure = ensure_choice(measure, HistogramMeasure, label="measure")
        if measure.is_cumulative:
            cumulative = getattr(self, measure.value.replace("-", "_"))
            if cumulative is not None:
                return cumulative
            measure = measure.base
        return getattr(self, measure.value)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "index": self.index,
            "start": self.start,
            "end": self.end,
            "center": self.center,
            "width": self.width,
            "count": self.count,
            "percent": self.percent,
            "density": self.density,
            "items": list(self.items),
        }
        if self.cumulative_count is not None:
            payload["cumulative_count"] = self.cumulative_count
            payload["cumulative_percent"] = self.cumulative_percent
            payload["cumulative_density"] = self.cumulative_density
        if self.sample is not None:
            payload["sample"] = list(self.sample)
        return payload


@dataclass(frozen=True)
class HistogramStats:
    n: int
    total_weight: float
    min: float
    max: float
    mean: float
    variance: float
    sd: float
    iqr: float

    @classmethod
    def empty(cls) -> "HistogramStats":
        return cls(n=0, total_weight=0.0, min=0.0, max=0.0, mean=0.0, variance=0.0, sd=0.0, iqr=0.0)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class HistogramResult:
    bins: Tuple[HistogramBin, ...]
    domain: Tuple[float, float]
    bin_width: float
    stats: HistogramStats
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.bins

    def values(self, measure: Union[str, HistogramMeasure] = HistogramMeasure.COUNT) -> List[float]:
        return [b.value(measure) for b in self.bins]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bins": [b.to_dict() for b in self.bins],
            "domain": list(self.domain),
            "bin_width": self.bin_width,
            "stats": self.stats.to_dict(),
            "warnings": list(self.warnings),
        }
