r"""Failure hook manager for unsuccessful attempts.

This module provides the FailureHookManager class that runs user-defined
hooks after every unsuccessful attempt, plus adapters that restrict a
hook to a single kind of failure.
"""

from __future__ import annotations

__all__ = ["FailureHookManager", "empty_hook", "error_hook", "rejected_hook"]

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from aretry.outcome import Empty, Errored, RejectedValue

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from aretry.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class FailureHookManager(Generic[T]):
    """Runs failure hooks after unsuccessful attempts.

    Hooks run synchronously in registration order. An exception raised
    by a hook is logged and suppressed, so a misbehaving hook can neither
    abort the retry loop nor prevent the remaining hooks from running.

    Attributes:
        hooks: The failure hooks, in invocation order.
    """

    def __init__(self, hooks: Sequence[Callable[[Outcome[T]], None]] = ()) -> None:
        """Initialize failure hook manager.

        Args:
            hooks: The failure hooks, in invocation order.
        """
        self.hooks = tuple(hooks)

    def on_failure(self, outcome: Outcome[T], attempt: int) -> None:
        """Invoke every hook with the outcome of a failed attempt.

        Args:
            outcome: The outcome of the unsuccessful attempt.
            attempt: The attempt number (0-indexed), used in log messages.
        """
        for hook in self.hooks:
            try:
                hook(outcome)
            except Exception:
                logger.warning(
                    f"Failure hook {hook!r} raised on attempt {attempt + 1}, ignoring it",
                    exc_info=True,
                )


def error_hook(action: Callable[[Exception], None]) -> Callable[[Outcome[T]], None]:
    """Create a failure hook that only reacts to raised exceptions.

    Args:
        action: Function called with the exception of every ``Errored``
            outcome.

    Returns:
        The failure hook.
    """

    def hook(outcome: Outcome[T]) -> None:
        if isinstance(outcome, Errored):
            action(outcome.error)

    return hook


def empty_hook(action: Callable[[], None]) -> Callable[[Outcome[T]], None]:
    """Create a failure hook that only reacts to ``None`` results.

    Args:
        action: Function called without arguments for every ``Empty``
            outcome.

    Returns:
        The failure hook.
    """

    def hook(outcome: Outcome[T]) -> None:
        if isinstance(outcome, Empty):
            action()

    return hook


def rejected_hook(action: Callable[[T], None]) -> Callable[[Outcome[T]], None]:
    """Create a failure hook that only reacts to rejected values.

    Args:
        action: Function called with the value of every
            ``RejectedValue`` outcome.

    Returns:
        The failure hook.
    """

    def hook(outcome: Outcome[T]) -> None:
        if isinstance(outcome, RejectedValue):
            action(outcome.value)

    return hook
