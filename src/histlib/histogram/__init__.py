"""Weighted histogram engine: binning, classification and orchestration."""

from .constants import (
    MAX_BINS,
    RIGHT_CLOSED_EPS,
    WIDTH_EPS,
)
from .exceptions import (
    EdgeLayoutError,
    HistogramError,
)
from .types import (
    AutoBinning,
    AutoRule,
    BinningStrategy,
    EdgeRule,
    FixedCountBinning,
    FixedWidthBinning,
    HistogramBin,
    HistogramConfig,
    HistogramMeasure,
    HistogramResult,
    HistogramStats,
    OverflowCapture,
    parse_binning,
)
from .binning import (
    BinningPlan,
    auto_bin_width,
    build_edges,
    choose_bin_width,
    clamp_width,
    compute_binning_plan,
    tentative_bin_count,
)
from .assign import (
    Accumulation,
    UNDERFLOW,
    accumulate,
    classify,
)
from .bins import (
    build_bins,
    slot_bounds,
)
from .engine import (
    NO_VALID_DATA,
    compute_histogram,
    empty_result,
)

__all__ = [
    "MAX_BINS",
    "RIGHT_CLOSED_EPS",
    "WIDTH_EPS",
    "EdgeLayoutError",
    "HistogramError",
    "AutoBinning",
    "AutoRule",
    "BinningStrategy",
    "EdgeRule",
    "FixedCountBinning",
    "FixedWidthBinning",
    "HistogramBin",
    "HistogramConfig",
    "HistogramMeasure",
    "HistogramResult",
    "HistogramStats",
    "OverflowCapture",
    "parse_binning",
    "BinningPlan",
    "auto_bin_width",
    "build_edges",
    "choose_bin_width",
    "clamp_width",
    "compute_binning_plan",
    "tentative_bin_count",
    "Accumulation",
    "UNDERFLOW",
    "accumulate",
    "classify",
    "build_bins",
    "slot_bounds",
    "NO_VALID_DATA",
    "compute_histogram",
    "empty_result",
]
