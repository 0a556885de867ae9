r"""Core defaults and validation shared by the builder and executors."""

from __future__ import annotations

__all__ = [
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_TIME_UNIT",
    "validate_callable",
    "validate_delay",
    "validate_delay_range",
    "validate_max_attempts",
]

from aretry.core.config import (
    DEFAULT_INITIAL_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    DEFAULT_TIME_UNIT,
)
from aretry.core.validation import (
    validate_callable,
    validate_delay,
    validate_delay_range,
    validate_max_attempts,
)
