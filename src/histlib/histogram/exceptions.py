"""
Exception hierarchy for internal histogram invariant violations.

Data quality issues never raise; they are reported as result warnings.
"""


class HistogramError(RuntimeError):
    """Base class for structural errors inside the histogram pipeline."""


class EdgeLayoutError(HistogramError):
    """Raised when an edge sequence violates the planner's guarantees."""
