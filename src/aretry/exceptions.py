r"""Exceptions raised by the retry builder and executor."""

from __future__ import annotations

__all__ = ["AretryError", "BuilderStateError", "SleepInterruptedError"]


class AretryError(Exception):
    """Base class for all errors defined by aretry."""


class BuilderStateError(AretryError, RuntimeError):
    """Raised when a builder method is called in a state that does not
    support it.

    For example, chaining with ``or_()`` before any failure predicate
    was registered, or with ``and_()`` before any failure hook was
    registered.
    """


class SleepInterruptedError(AretryError):
    """Raised by a cancellable sleep when its token is cancelled.

    The retry executor catches this error and reports exhaustion, so it
    never reaches the caller of ``do_sync()`` or ``do_async()``.
    """
