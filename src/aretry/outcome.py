r"""Outcome types describing the result of a single attempt.

Every attempt is classified into exactly one of four variants:

- ``Accepted``: the operation returned a value that no rejection
  predicate marked as a failure. This is the only successful variant.
- ``RejectedValue``: the operation returned a value, but a rejection
  predicate marked it as a failure.
- ``Errored``: the operation raised an exception.
- ``Empty``: the operation returned ``None`` without raising.

Failure hooks receive the unsuccessful variants and can branch on the
failure kind without classifying the attempt again.

Example:
    ```pycon
    >>> from aretry.outcome import Accepted, Empty, Errored
    >>> Accepted(42).is_failure
    False
    >>> Errored(ValueError("boom")).is_failure
    True
    >>> Empty() == Empty()
    True

    ```
"""

from __future__ import annotations

__all__ = ["Accepted", "Empty", "Errored", "Outcome", "RejectedValue"]

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Accepted(Generic[T]):
    """Attempt that produced an accepted value.

    Attributes:
        value: The value returned by the operation.
    """

    value: T

    @property
    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class RejectedValue(Generic[T]):
    """Attempt whose value was marked as a failure by a rejection
    predicate.

    Attributes:
        value: The value returned by the operation.
    """

    value: T

    @property
    def is_failure(self) -> bool:
        return True


@dataclass(frozen=True)
class Errored:
    """Attempt during which the operation raised an exception.

    Attributes:
        error: The exception raised by the operation.
    """

    error: Exception

    @property
    def is_failure(self) -> bool:
        return True


@dataclass(frozen=True)
class Empty:
    """Attempt during which the operation returned ``None`` without
    raising."""

    @property
    def is_failure(self) -> bool:
        return True


Outcome = Union[Accepted[T], RejectedValue[T], Errored, Empty]
