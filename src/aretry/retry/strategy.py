r"""Retry strategy for applying backoff delays.

This module provides the RetryStrategy class that waits between
attempts and derives the next delay from the backoff strategy.
"""

from __future__ import annotations

__all__ = ["RetryStrategy"]

from typing import TYPE_CHECKING

from aretry.utils.sleep import CancellationToken

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffStrategy


class RetryStrategy:
    """Strategy for waiting between attempts.

    This class combines a stateless backoff strategy with the
    cancellation token of one execution. The current delay is owned by
    the caller and passed in on every call.

    Args:
        backoff: The backoff strategy deriving successive delays.
        token: The cancellation token of the execution. A fresh token is
            created if not provided.

    Attributes:
        backoff: The backoff strategy deriving successive delays.
        token: The cancellation token used for sleeping.
    """

    def __init__(
        self,
        backoff: BaseBackoffStrategy,
        token: CancellationToken | None = None,
    ) -> None:
        self.backoff = backoff
        self.token = token if token is not None else CancellationToken()

    def next_delay(self, previous_delay: float, *, first_attempt: bool = False) -> float:
        """Wait before an attempt and compute the delay for the next one.

        Args:
            previous_delay: The current delay in seconds.
            first_attempt: Whether the upcoming attempt is the first one,
                in which case nothing happens.

        Returns:
            The delay in seconds to apply before the following attempt.

        Raises:
            SleepInterruptedError: If the token is cancelled before or
                during the wait.
        """
        if first_attempt:
            return previous_delay
        self.token.sleep(previous_delay)
        return self.backoff.calculate(previous_delay)
