r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import math

from aretry.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Doubles the delay after every retry, clamped to ``max_delay``. Once the
    ceiling is reached, every remaining retry waits ``max_delay``.
    Starting from ``d0``, the sequence is ``d0, min(2 * d0, max_delay),
    min(4 * d0, max_delay), ...``.

    Args:
        max_delay: The delay ceiling in seconds. Defaults to no ceiling.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(max_delay=5.0)
        >>> backoff.calculate(1.0)
        2.0
        >>> backoff.calculate(2.0)
        4.0
        >>> backoff.calculate(4.0)  # Would be 8.0, but capped
        5.0
        >>> backoff.calculate(5.0)
        5.0

        ```
    """

    def __init__(self, max_delay: float = math.inf) -> None:
        if math.isnan(max_delay) or max_delay < 0:
            msg = f"max_delay must be non-negative, got {max_delay}"
            raise ValueError(msg)

        self.max_delay = max_delay

    def calculate(self, previous_delay: float) -> float:
        """Calculate exponential backoff delay.

        Args:
            previous_delay: The delay applied before the current retry.

        Returns:
            Twice the previous delay, capped at max_delay.
        """
        return min(previous_delay * 2, self.max_delay)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_delay={self.max_delay})"
