r"""Immutable retry policy consumed by the retry executors.

This module provides the ``RetryPolicy`` dataclass that holds every
setting of a retry execution. Policies are usually produced by the
staged builder returned by ``aretry.new_retry``, but they can also be
created directly.
"""

from __future__ import annotations

__all__ = ["DelayGrowth", "RetryPolicy"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from aretry.backoff.base import DelayGrowth
from aretry.core.config import DEFAULT_INITIAL_DELAY, DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_DELAY
from aretry.core.validation import (
    validate_callable,
    validate_delay_range,
    validate_max_attempts,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import Outcome

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy(Generic[T]):
    """Configuration of a retry execution.

    A policy is immutable once created and keeps no state between runs,
    so the same policy can be executed several times, including
    concurrently.

    Args:
        operation: The zero-argument function to retry. It returns a
            value, returns ``None`` (an empty result) or raises.
        max_attempts: Maximum number of attempts. Must be >= 0. A value
            of 0 means the operation is never invoked.
        initial_delay: Delay in seconds before the first retry. Must be
            >= 0.
        max_delay: Ceiling in seconds for exponentially growing delays.
            Must be >= initial_delay.
        delay_growth: Whether the delay stays constant or doubles after
            every retry.
        rejection_predicates: Functions marking an otherwise successful
            value as a failure. A value is rejected when any predicate
            returns ``True``.
        failure_hooks: Functions called, in order, with the outcome of
            every unsuccessful attempt.

    Raises:
        ValueError: If a numeric setting is out of range or the
            operation is ``None``.
        TypeError: If the operation, a predicate or a hook is not
            callable.

    Example:
        ```pycon
        >>> from aretry.retry import RetryPolicy
        >>> policy = RetryPolicy(operation=lambda: 42, max_attempts=3)
        >>> policy.max_attempts
        3
        >>> merged = policy.merge(max_attempts=5)
        >>> merged.max_attempts
        5
        >>> policy.max_attempts  # Original unchanged
        3

        ```
    """

    operation: Callable[[], T | None]
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    initial_delay: float = DEFAULT_INITIAL_DELAY
    max_delay: float = DEFAULT_MAX_DELAY
    delay_growth: DelayGrowth = DelayGrowth.CONSTANT
    rejection_predicates: tuple[Callable[[T], bool], ...] = ()
    failure_hooks: tuple[Callable[[Outcome[T]], None], ...] = ()

    def __post_init__(self) -> None:
        """Validate the policy and freeze its function collections.

        Raises:
            ValueError: If any parameter fails validation.
            TypeError: If a function parameter is not callable.
        """
        validate_callable(self.operation, name="operation")
        validate_max_attempts(self.max_attempts)
        validate_delay_range(self.initial_delay, self.max_delay)
        if not isinstance(self.delay_growth, DelayGrowth):
            msg = f"delay_growth must be a DelayGrowth, got {type(self.delay_growth).__name__}"
            raise TypeError(msg)

        # Lists are accepted but stored as tuples to keep the policy immutable
        object.__setattr__(self, "rejection_predicates", tuple(self.rejection_predicates))
        object.__setattr__(self, "failure_hooks", tuple(self.failure_hooks))
        for predicate in self.rejection_predicates:
            validate_callable(predicate, name="rejection predicate")
        for hook in self.failure_hooks:
            validate_callable(hook, name="failure hook")

    def merge(self, **overrides: Any) -> RetryPolicy[T]:
        """Create a new policy with specified settings overridden.

        Only non-None override values are applied, and the new policy is
        validated like any other.

        Args:
            **overrides: Keyword arguments for settings to override.

        Returns:
            A new RetryPolicy instance with overrides applied.

        Example:
            ```pycon
            >>> from aretry.backoff import DelayGrowth
            >>> from aretry.retry import RetryPolicy
            >>> policy = RetryPolicy(operation=lambda: 42, initial_delay=0.5)
            >>> policy.merge(delay_growth=DelayGrowth.EXPONENTIAL, max_delay=4.0).max_delay
            4.0

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
