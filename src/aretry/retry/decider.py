r"""Outcome classification for retry attempts.

This module provides the OutcomeClassifier class that invokes the
retried operation and decides which outcome variant the attempt
produced.
"""

from __future__ import annotations

__all__ = ["OutcomeClassifier"]

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from aretry.outcome import Accepted, Empty, Errored, RejectedValue

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from aretry.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class OutcomeClassifier(Generic[T]):
    """Classifies the result of an attempt into an outcome.

    The rules, in order:

    - a raised exception gives ``Errored``
    - a ``None`` result gives ``Empty``
    - a value rejected by any predicate gives ``RejectedValue``
    - any other value gives ``Accepted``

    Args:
        rejection_predicates: Functions marking a value as a failure.

    Example:
        ```pycon
        >>> from aretry.retry import OutcomeClassifier
        >>> classifier = OutcomeClassifier([lambda value: value < 0])
        >>> classifier.classify(value=3)
        Accepted(value=3)
        >>> classifier.classify(value=-3)
        RejectedValue(value=-3)
        >>> classifier.classify(value=None)
        Empty()

        ```
    """

    def __init__(self, rejection_predicates: Sequence[Callable[[T], bool]] = ()) -> None:
        self.rejection_predicates = tuple(rejection_predicates)

    def attempt(self, operation: Callable[[], T | None]) -> Outcome[T]:
        """Invoke the operation once and classify the attempt.

        Args:
            operation: The zero-argument function to invoke.

        Returns:
            The outcome of the attempt. Exceptions raised by the
            operation are captured in an ``Errored`` outcome.
        """
        try:
            value = operation()
        except Exception as exc:
            logger.debug(f"Operation raised {type(exc).__name__}: {exc}")
            return Errored(exc)
        return self.classify(value=value)

    def classify(self, value: T | None = None, error: Exception | None = None) -> Outcome[T]:
        """Classify the result of an attempt.

        Args:
            value: The value returned by the operation, if any.
            error: The exception raised by the operation, if any. When
                set, the value is ignored.

        Returns:
            The outcome of the attempt. A predicate that raises makes
            the attempt ``Errored`` with the predicate's exception.
        """
        if error is not None:
            return Errored(error)
        if value is None:
            return Empty()
        try:
            rejected = self.is_rejected(value)
        except Exception as exc:
            logger.debug(f"Rejection predicate raised {type(exc).__name__}: {exc}")
            return Errored(exc)
        if rejected:
            return RejectedValue(value)
        return Accepted(value)

    def is_rejected(self, value: T) -> bool:
        """Indicate whether any rejection predicate marks the value as a
        failure.

        Args:
            value: The value to test.

        Returns:
            ``True`` if a predicate returns ``True``, otherwise ``False``.
            Without predicates, no value is rejected.
        """
        return any(predicate(value) for predicate in self.rejection_predicates)
