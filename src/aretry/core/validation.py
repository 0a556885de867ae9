r"""Parameter validation utilities for retry policies.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before a policy is built or executed.
"""

from __future__ import annotations

__all__ = [
    "validate_callable",
    "validate_delay",
    "validate_delay_range",
    "validate_max_attempts",
]

import math
from typing import Any


def validate_max_attempts(max_attempts: int) -> None:
    """Validate the attempt budget.

    Args:
        max_attempts: Maximum number of attempts. Must be >= 0. A value
            of 0 means the operation is never invoked.

    Raises:
        TypeError: If max_attempts is not an integer. Booleans are
            rejected too.
        ValueError: If max_attempts is negative.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_max_attempts
        >>> validate_max_attempts(3)
        >>> validate_max_attempts(0)
        >>> validate_max_attempts(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be >= 0, got -1

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {type(max_attempts).__name__}"
        raise TypeError(msg)
    if max_attempts < 0:
        msg = f"max_attempts must be >= 0, got {max_attempts}"
        raise ValueError(msg)


def validate_delay(delay: float, name: str = "delay") -> None:
    """Validate a delay value.

    Args:
        delay: The delay to check. Must be >= 0 and not NaN.
        name: The parameter name used in the error message.

    Raises:
        ValueError: If delay is negative or NaN.
    """
    if math.isnan(delay) or delay < 0:
        msg = f"{name} must be >= 0, got {delay}"
        raise ValueError(msg)


def validate_delay_range(initial_delay: float, max_delay: float) -> None:
    """Validate a pair of initial and maximum delays.

    Args:
        initial_delay: The starting delay. Must be >= 0.
        max_delay: The delay ceiling. Must be >= initial_delay.

    Raises:
        ValueError: If either delay is negative or if max_delay is
            smaller than initial_delay.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_delay_range
        >>> validate_delay_range(1.0, 8.0)
        >>> validate_delay_range(2.0, 2.0)
        >>> validate_delay_range(4.0, 1.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_delay must be >= initial_delay, got 1.0 < 4.0

        ```
    """
    validate_delay(initial_delay, name="initial_delay")
    validate_delay(max_delay, name="max_delay")
    if max_delay < initial_delay:
        msg = f"max_delay must be >= initial_delay, got {max_delay} < {initial_delay}"
        raise ValueError(msg)


def validate_callable(func: Any, name: str) -> None:
    """Validate that a required function argument is present and
    callable.

    Args:
        func: The object to check.
        name: The parameter name used in the error message.

    Raises:
        ValueError: If func is None.
        TypeError: If func is not callable.
    """
    if func is None:
        msg = f"{name} must not be None"
        raise ValueError(msg)
    if not callable(func):
        msg = f"{name} must be callable, got {type(func).__name__}"
        raise TypeError(msg)
