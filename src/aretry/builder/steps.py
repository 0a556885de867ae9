r"""Stages of the retry builder.

Each stage is a protocol exposing only the methods that are valid at
that point of the configuration, so a type checker rejects invalid call
orders such as registering a failure predicate before choosing a delay.
The stages, in order:

1. attempts: ``max_times(n)`` or ``until_complete()``
2. delay: ``timeout()`` followed by a value and a unit, or
   ``no_timeout()``
3. failure condition: ``fail_error_only()`` or ``fail_when(...)``,
   chained with ``or_()``
4. failure action: ``ignore_failures()`` or ``on_fail(...)``, chained
   with ``and_()``
5. perform: ``do_sync()``, ``do_async()`` or ``build()``

Every stage extends the stages after it, so any of them can be skipped
to keep its default.
"""

from __future__ import annotations

__all__ = [
    "AdditionalFailureActionStep",
    "AdditionalFailureConditionStep",
    "FailureActionNoBacktrackStep",
    "FailureActionStep",
    "FailureConditionStep",
    "PerformNoBacktrackStep",
    "PerformStep",
    "TimeUnitStep",
    "TimeUnitWithMaxStep",
    "TimeoutStep",
    "TimeoutValueIncreasingStep",
    "TimeoutValueStep",
    "TimeoutValueWithTypeStep",
    "TimesStep",
]

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import Outcome
    from aretry.retry.config import RetryPolicy
    from aretry.retry.executor_async import RetryFuture
    from aretry.units import TimeUnit

T = TypeVar("T")


class PerformNoBacktrackStep(Protocol[T]):
    """Final stage: run the retries or build the policy."""

    def do_sync(self) -> T | None:
        """Run the retries on the calling thread.

        Returns:
            The first accepted value, or ``None`` if every attempt
            failed.
        """
        ...

    def do_async(self) -> RetryFuture[T]:
        """Run the retries on a dedicated background thread.

        Returns:
            The future of the retry result.
        """
        ...

    def build(self) -> RetryPolicy[T]:
        """Return the immutable policy for the configured options."""
        ...


class PerformStep(PerformNoBacktrackStep[T], Protocol[T]):
    """Final stage, also allowing another failure hook to be chained."""

    def and_(self) -> AdditionalFailureActionStep[T]:
        """Register another failure hook after the previous ones.

        Raises:
            BuilderStateError: If no failure hook is registered yet.
        """
        ...


class AdditionalFailureActionStep(Protocol[T]):
    """Stage registering a failure hook."""

    def on_fail(self, hook: Callable[[Outcome[T]], None]) -> PerformStep[T]:
        """Call the hook with the outcome of every failed attempt."""
        ...

    def on_error(self, hook: Callable[[Exception], None]) -> PerformStep[T]:
        """Call the hook with the exception of every attempt that
        raised."""
        ...

    def on_empty(self, hook: Callable[[], None]) -> PerformStep[T]:
        """Call the hook for every attempt that returned ``None``."""
        ...

    def on_rejected(self, hook: Callable[[T], None]) -> PerformStep[T]:
        """Call the hook with every value rejected by a failure
        predicate."""
        ...


class FailureActionNoBacktrackStep(
    AdditionalFailureActionStep[T], PerformNoBacktrackStep[T], Protocol[T]
):
    """Stage choosing what happens after a failed attempt."""

    def ignore_failures(self) -> PerformNoBacktrackStep[T]:
        """Do nothing special when an attempt fails."""
        ...


class FailureActionStep(FailureActionNoBacktrackStep[T], Protocol[T]):
    """Failure action stage, also allowing another failure predicate to be
    chained."""

    def or_(self) -> AdditionalFailureConditionStep[T]:
        """Register another failure predicate, OR'ed with the previous
        ones.

        Raises:
            BuilderStateError: If no failure predicate is registered yet.
        """
        ...


class AdditionalFailureConditionStep(Protocol[T]):
    """Stage registering a failure predicate."""

    def fail_when(self, predicate: Callable[[T], bool]) -> FailureActionStep[T]:
        """Treat a value as a failure when the predicate returns
        ``True``.

        ``None`` results are failures before any predicate is tested,
        so predicates never receive ``None``.
        """
        ...


class FailureConditionStep(
    AdditionalFailureConditionStep[T], FailureActionNoBacktrackStep[T], Protocol[T]
):
    """Stage choosing which successful results count as failures."""

    def fail_error_only(self) -> FailureActionNoBacktrackStep[T]:
        """Only treat raised exceptions and ``None`` results as
        failures."""
        ...


class TimeUnitStep(Protocol[T]):
    """Stage choosing the unit of the delay values."""

    def nanos(self) -> FailureConditionStep[T]:
        """Express the delay values in nanoseconds."""
        ...

    def micros(self) -> FailureConditionStep[T]:
        """Express the delay values in microseconds."""
        ...

    def millis(self) -> FailureConditionStep[T]:
        """Express the delay values in milliseconds (the default)."""
        ...

    def seconds(self) -> FailureConditionStep[T]:
        """Express the delay values in seconds."""
        ...

    def minutes(self) -> FailureConditionStep[T]:
        """Express the delay values in minutes."""
        ...

    def hours(self) -> FailureConditionStep[T]:
        """Express the delay values in hours."""
        ...

    def of(self, unit: TimeUnit | str) -> FailureConditionStep[T]:
        """Express the delay values in the given unit."""
        ...


class TimeUnitWithMaxStep(TimeUnitStep[T], Protocol[T]):
    """Unit stage of a doubling delay, also allowing a ceiling."""

    def up_to(self, value: float) -> TimeUnitStep[T]:
        """Cap the growing delay at the given value.

        Raises:
            ValueError: If the value is smaller than the initial delay.
        """
        ...

    def unbounded(self) -> TimeUnitStep[T]:
        """Let the delay grow without a ceiling."""
        ...


class TimeoutValueIncreasingStep(Protocol[T]):
    """Stage setting the start value of a doubling delay."""

    def from_(self, value: float) -> TimeUnitWithMaxStep[T]:
        """Set the initial value of the doubling delay.

        Raises:
            ValueError: If the value is negative.
        """
        ...


class TimeoutValueStep(Protocol[T]):
    """Stage setting a constant delay value."""

    def for_(self, value: float) -> TimeUnitStep[T]:
        """Set the constant delay value.

        Raises:
            ValueError: If the value is negative.
        """
        ...


class TimeoutValueWithTypeStep(TimeoutValueStep[T], Protocol[T]):
    """Stage choosing between a constant and a doubling delay."""

    def increasing(self) -> TimeoutValueIncreasingStep[T]:
        """Make the delay double after every retry."""
        ...


class TimeoutStep(FailureConditionStep[T], Protocol[T]):
    """Stage configuring the delay between attempts."""

    def timeout(self) -> TimeoutValueWithTypeStep[T]:
        """Start configuring the delay between attempts."""
        ...

    def no_timeout(self) -> FailureConditionStep[T]:
        """Retry without any delay between attempts."""
        ...


class TimesStep(TimeoutStep[T], Protocol[T]):
    """First stage, returned by ``new_retry``: the attempt budget."""

    def max_times(self, times: int) -> TimeoutStep[T]:
        """Set the maximum number of attempts.

        Raises:
            ValueError: If times is negative.
        """
        ...

    def until_complete(self) -> TimeoutStep[T]:
        """Retry until an attempt is accepted, without a budget."""
        ...
