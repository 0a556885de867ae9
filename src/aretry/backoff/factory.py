r"""Creation of the backoff strategy matching a delay growth mode."""

from __future__ import annotations

__all__ = ["create_backoff"]

import math

from aretry.backoff.base import BaseBackoffStrategy, DelayGrowth
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.exponential import ExponentialBackoff


def create_backoff(
    delay_growth: DelayGrowth, max_delay: float = math.inf
) -> BaseBackoffStrategy:
    """Create the backoff strategy for a delay growth mode.

    Args:
        delay_growth: How the delay evolves between attempts.
        max_delay: The ceiling used by exponential growth. Ignored for
            constant delays.

    Returns:
        The backoff strategy.

    Example:
        ```pycon
        >>> from aretry.backoff import DelayGrowth, create_backoff
        >>> create_backoff(DelayGrowth.CONSTANT)
        ConstantBackoff()
        >>> create_backoff(DelayGrowth.EXPONENTIAL, max_delay=8.0)
        ExponentialBackoff(max_delay=8.0)

        ```
    """
    if delay_growth is DelayGrowth.EXPONENTIAL:
        return ExponentialBackoff(max_delay=max_delay)
    return ConstantBackoff()
