"""Core data abstractions: extraction, summary statistics and domains."""

from .extraction import (
    Observations,
    extract_observations,
    NON_NUMERIC_WARNING,
)
from .statistics import (
    Summary,
    quantile,
    summarize,
)
from .domain import (
    resolve_domain,
    NON_FINITE_DOMAIN_WARNING,
    REVERSED_DOMAIN_WARNING,
    ZERO_WIDTH_DOMAIN_WARNING,
)

__all__ = [
    "Observations",
    "extract_observations",
    "NON_NUMERIC_WARNING",
    "Summary",
    "quantile",
    "summarize",
    "resolve_domain",
    "NON_FINITE_DOMAIN_WARNING",
    "REVERSED_DOMAIN_WARNING",
    "ZERO_WIDTH_DOMAIN_WARNING",
]
