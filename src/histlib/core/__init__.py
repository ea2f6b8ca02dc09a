"""Entry point for the core library components."""

from __future__ import annotations

from .data import (
    Observations,
    Summary,
    extract_observations,
    quantile,
    resolve_domain,
    summarize,
)
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
)

__all__: list[str] = [
    "Observations",
    "Summary",
    "extract_observations",
    "quantile",
    "resolve_domain",
    "summarize",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
