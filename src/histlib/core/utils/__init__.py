"""Shared utility helpers used across the library."""

from .math_utils import (
    to_finite_float,
    is_positive_finite,
    first_valid,
    clamp_positive,
)
from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .serialization import (
    serialize_to_json,
    deserialize_from_json,
    strip_fields,
)
from .logging import (
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_type,
    ensure_choice,
    ParamValidationError,
)

__all__ = [
    "to_finite_float",
    "is_positive_finite",
    "first_valid",
    "clamp_positive",
    "RuntimeConfig",
    "get_config",
    "configure",
    "serialize_to_json",
    "deserialize_from_json",
    "strip_fields",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_type",
    "ensure_choice",
    "ParamValidationError",
]
