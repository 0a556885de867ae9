r"""Staged builder for retry policies.

This module provides ``new_retry``, the entry point of the builder, and
the ``RetryBuilder`` class implementing every builder stage.

Example:
    ```pycon
    >>> from aretry import new_retry
    >>> values = iter([None, 120, 480, 950])
    >>> new_retry(lambda: next(values)).max_times(5).timeout().increasing().from_(
    ...     1
    ... ).up_to(4).millis().fail_when(lambda number: number > 900).or_().fail_when(
    ...     lambda number: number < 400
    ... ).ignore_failures().do_sync()
    480

    ```
"""

from __future__ import annotations

__all__ = ["RetryBuilder", "new_retry"]

from typing import TYPE_CHECKING, Generic, TypeVar

from aretry.backoff.base import DelayGrowth
from aretry.builder.steps import (
    FailureActionStep,
    PerformStep,
    TimesStep,
    TimeoutValueIncreasingStep,
    TimeoutValueWithTypeStep,
    TimeUnitWithMaxStep,
)
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
from aretry.exceptions import BuilderStateError
from aretry.retry.config import RetryPolicy
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.manager import empty_hook, error_hook, rejected_hook
from aretry.units import TimeUnit

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import Outcome
    from aretry.retry.executor_async import RetryFuture

T = TypeVar("T")


def new_retry(operation: Callable[[], T | None]) -> TimesStep[T]:
    """Start building a retry policy for an operation.

    Args:
        operation: The zero-argument function to retry. It returns a
            value, returns ``None`` (an empty result) or raises.

    Returns:
        The first stage of the builder.

    Raises:
        ValueError: If the operation is ``None``.
        TypeError: If the operation is not callable.

    Example:
        ```pycon
        >>> from aretry import new_retry
        >>> new_retry(lambda: "ok").max_times(3).do_sync()
        'ok'

        ```
    """
    validate_callable(operation, name="operation")
    return RetryBuilder(operation)


class RetryBuilder(
    TimesStep[T],
    TimeoutValueWithTypeStep[T],
    TimeoutValueIncreasingStep[T],
    TimeUnitWithMaxStep[T],
    FailureActionStep[T],
    PerformStep[T],
    Generic[T],
):
    """Mutable builder implementing every stage of the retry builder.

    The methods return the narrower stage types, which guide the caller
    through the stages. Skipping a stage keeps its defaults: unbounded
    attempts, no delay, only errors and ``None`` results fail, and no
    failure hooks. Delay values are expressed in milliseconds unless
    another unit is chosen.

    Prefer ``new_retry`` over instantiating this class directly.

    Args:
        operation: The zero-argument function to retry.

    Raises:
        ValueError: If the operation is ``None``.
        TypeError: If the operation is not callable.
    """

    def __init__(self, operation: Callable[[], T | None]) -> None:
        validate_callable(operation, name="operation")
        self._operation = operation
        self._max_attempts = DEFAULT_MAX_ATTEMPTS
        self._delay_value = DEFAULT_INITIAL_DELAY
        self._max_delay_value = DEFAULT_MAX_DELAY
        self._time_unit = DEFAULT_TIME_UNIT
        self._delay_growth = DelayGrowth.CONSTANT
        self._predicates: list[Callable[[T], bool]] = []
        self._hooks: list[Callable[[Outcome[T]], None]] = []

    # Attempts

    def max_times(self, times: int) -> RetryBuilder[T]:
        """Set the maximum number of attempts.

        Args:
            times: The attempt budget. A value of 0 means the operation
                is never invoked.

        Returns:
            The builder.

        Raises:
            TypeError: If times is not an integer.
            ValueError: If times is negative.
        """
        validate_max_attempts(times)
        self._max_attempts = times
        return self

    def until_complete(self) -> RetryBuilder[T]:
        """Retry until an attempt is accepted."""
        self._max_attempts = DEFAULT_MAX_ATTEMPTS
        return self

    # Delay

    def timeout(self) -> RetryBuilder[T]:
        """Start configuring the delay between attempts."""
        return self

    def no_timeout(self) -> RetryBuilder[T]:
        """Reset the delay to none between attempts."""
        self._delay_value = DEFAULT_INITIAL_DELAY
        self._max_delay_value = DEFAULT_MAX_DELAY
        self._delay_growth = DelayGrowth.CONSTANT
        return self

    def increasing(self) -> RetryBuilder[T]:
        """Double the delay after every retry."""
        self._delay_growth = DelayGrowth.EXPONENTIAL
        return self

    def for_(self, value: float) -> RetryBuilder[T]:
        """Set the delay value, expressed in the unit chosen next.

        Args:
            value: The delay before the first retry.

        Returns:
            The builder.

        Raises:
            ValueError: If the value is negative or NaN.
        """
        validate_delay(value, name="delay")
        self._delay_value = value
        return self

    def from_(self, value: float) -> RetryBuilder[T]:
        """Set the initial value of a doubling delay.

        Raises:
            ValueError: If the value is negative or NaN.
        """
        return self.for_(value)

    def up_to(self, value: float) -> RetryBuilder[T]:
        """Cap the doubling delay, in the same unit as the start value.

        Args:
            value: The delay ceiling.

        Returns:
            The builder.

        Raises:
            ValueError: If the value is NaN or smaller than the start
                value.
        """
        validate_delay_range(self._delay_value, value)
        self._max_delay_value = value
        return self

    def unbounded(self) -> RetryBuilder[T]:
        """Remove the ceiling of the doubling delay."""
        self._max_delay_value = DEFAULT_MAX_DELAY
        return self

    def nanos(self) -> RetryBuilder[T]:
        """Express the delay values in nanoseconds."""
        return self.of(TimeUnit.NANOSECONDS)

    def micros(self) -> RetryBuilder[T]:
        """Express the delay values in microseconds."""
        return self.of(TimeUnit.MICROSECONDS)

    def millis(self) -> RetryBuilder[T]:
        """Express the delay values in milliseconds."""
        return self.of(TimeUnit.MILLISECONDS)

    def seconds(self) -> RetryBuilder[T]:
        """Express the delay values in seconds."""
        return self.of(TimeUnit.SECONDS)

    def minutes(self) -> RetryBuilder[T]:
        """Express the delay values in minutes."""
        return self.of(TimeUnit.MINUTES)

    def hours(self) -> RetryBuilder[T]:
        """Express the delay values in hours."""
        return self.of(TimeUnit.HOURS)

    def of(self, unit: TimeUnit | str) -> RetryBuilder[T]:
        """Express the delay values in the given unit.

        Args:
            unit: A ``TimeUnit`` or its case-insensitive name, for
                example ``"seconds"``.

        Returns:
            The builder.

        Raises:
            ValueError: If the unit is ``None`` or an unknown name.
            TypeError: If the unit is neither a ``TimeUnit`` nor a string.
        """
        self._time_unit = TimeUnit.parse(unit)
        return self

    # Failure condition

    def fail_error_only(self) -> RetryBuilder[T]:
        """Only treat raised exceptions and ``None`` results as
        failures."""
        return self

    def fail_when(self, predicate: Callable[[T], bool]) -> RetryBuilder[T]:
        """Treat a value as a failure when the predicate returns
        ``True``.

        Predicates registered through ``or_()`` are combined with OR.
        """
        validate_callable(predicate, name="predicate")
        self._predicates.append(predicate)
        return self

    def or_(self) -> RetryBuilder[T]:
        """Chain another failure predicate.

        Raises:
            BuilderStateError: If no failure predicate is registered yet.
        """
        if not self._predicates:
            msg = "or_() requires a failure predicate registered with fail_when()"
            raise BuilderStateError(msg)
        return self

    # Failure action

    def ignore_failures(self) -> RetryBuilder[T]:
        """Register no failure hook."""
        return self

    def on_fail(self, hook: Callable[[Outcome[T]], None]) -> RetryBuilder[T]:
        """Call the hook with the outcome of every failed attempt.

        Hooks run in registration order. An exception raised by a hook
        is logged and does not stop the retries.
        """
        validate_callable(hook, name="hook")
        self._hooks.append(hook)
        return self

    def on_error(self, hook: Callable[[Exception], None]) -> RetryBuilder[T]:
        """Call the hook with the exception of every attempt that
        raised."""
        validate_callable(hook, name="hook")
        return self.on_fail(error_hook(hook))

    def on_empty(self, hook: Callable[[], None]) -> RetryBuilder[T]:
        """Call the hook for every attempt that returned ``None``."""
        validate_callable(hook, name="hook")
        return self.on_fail(empty_hook(hook))

    def on_rejected(self, hook: Callable[[T], None]) -> RetryBuilder[T]:
        """Call the hook with every value rejected by a failure
        predicate."""
        validate_callable(hook, name="hook")
        return self.on_fail(rejected_hook(hook))

    def and_(self) -> RetryBuilder[T]:
        """Chain another failure hook.

        Raises:
            BuilderStateError: If no failure hook is registered yet.
        """
        if not self._hooks:
            msg = "and_() requires a failure hook registered with on_fail()"
            raise BuilderStateError(msg)
        return self

    # Perform

    def build(self) -> RetryPolicy[T]:
        """Return the immutable policy for the current configuration.

        Delay values are converted to seconds with the chosen unit.
        Later changes to the builder do not affect the returned policy.
        """
        return RetryPolicy(
            operation=self._operation,
            max_attempts=self._max_attempts,
            initial_delay=self._time_unit.to_seconds(self._delay_value),
            max_delay=self._time_unit.to_seconds(self._max_delay_value),
            delay_growth=self._delay_growth,
            rejection_predicates=tuple(self._predicates),
            failure_hooks=tuple(self._hooks),
        )

    def do_sync(self) -> T | None:
        """Run the retries on the calling thread.

        Returns:
            The first accepted value, or ``None`` if every attempt
            failed.
        """
        return RetryExecutor(self.build()).execute()

    def do_async(self) -> RetryFuture[T]:
        """Run the retries on a dedicated background thread.

        Returns:
            The future of the retry result. It can be cancelled and
            awaited.
        """
        return AsyncRetryExecutor(self.build()).submit()
