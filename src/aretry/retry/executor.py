r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs the attempt loop
of a retry policy on the calling thread.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from aretry.backoff.factory import create_backoff
from aretry.exceptions import SleepInterruptedError
from aretry.outcome import Accepted
from aretry.retry.decider import OutcomeClassifier
from aretry.retry.manager import FailureHookManager
from aretry.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from aretry.retry.config import RetryPolicy
    from aretry.utils.sleep import CancellationToken

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryExecutor(Generic[T]):
    """Executes an operation with automatic retry logic.

    The executor orchestrates the following components:
    - OutcomeClassifier: Judges every attempt
    - FailureHookManager: Invokes user-defined hooks after failed attempts
    - RetryStrategy: Waits between attempts and grows the delay

    The executor keeps no state between executions: the attempt counter
    and the current delay are local to ``execute``, so one executor (and
    one policy) can serve several concurrent executions.

    Args:
        policy: The retry policy to execute.

    Attributes:
        policy: The retry policy to execute.
        backoff: Backoff strategy derived from the policy.
        classifier: Outcome classifier built from the rejection
            predicates.
        hooks: Manager for the failure hooks.

    Example:
        ```pycon
        >>> from aretry.retry import RetryExecutor, RetryPolicy
        >>> values = iter([None, 3, 7])
        >>> policy = RetryPolicy(
        ...     operation=lambda: next(values),
        ...     max_attempts=5,
        ...     rejection_predicates=(lambda value: value < 5,),
        ... )
        >>> RetryExecutor(policy).execute()
        7

        ```
    """

    def __init__(self, policy: RetryPolicy[T]) -> None:
        self.policy = policy
        self.backoff = create_backoff(policy.delay_growth, policy.max_delay)
        self.classifier: OutcomeClassifier[T] = OutcomeClassifier(policy.rejection_predicates)
        self.hooks: FailureHookManager[T] = FailureHookManager(policy.failure_hooks)

    def execute(self, token: CancellationToken | None = None) -> T | None:
        """Run the attempt loop until an attempt is accepted or the
        attempt budget is exhausted.

        Attempts are strictly sequential: an attempt starts only after the
        previous one was classified and its failure hooks returned.
        Exceptions raised by the operation are handed to the hooks as
        ``Errored`` outcomes and never re-raised.

        Args:
            token: Optional cancellation token. Cancelling it interrupts a
                pending backoff delay and prevents further attempts.

        Returns:
            The first accepted value, or ``None`` if every attempt failed,
            the budget is 0, or the execution was cancelled.
        """
        strategy = RetryStrategy(self.backoff, token)
        attempts = 0
        delay = self.policy.initial_delay
        while attempts < self.policy.max_attempts:
            try:
                delay = strategy.next_delay(delay, first_attempt=attempts == 0)
            except SleepInterruptedError:
                logger.debug(f"Retry cancelled after {attempts} attempt(s)")
                return None

            outcome = self.classifier.attempt(self.policy.operation)
            if isinstance(outcome, Accepted):
                logger.debug(f"Attempt {attempts + 1} succeeded")
                return outcome.value

            logger.debug(f"Attempt {attempts + 1} failed: {outcome}")
            self.hooks.on_failure(outcome, attempt=attempts)
            attempts += 1

        logger.debug(f"Retry exhausted after {attempts} attempt(s)")
        return None
