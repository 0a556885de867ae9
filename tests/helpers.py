r"""Shared test helpers for retried operations.

This module contains operations with scripted behavior used across
multiple test files.
"""

from __future__ import annotations

__all__ = [
    "AlwaysRaising",
    "FlakyOperation",
    "ScriptedOperation",
    "sleep_durations",
]

import threading
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable
    from unittest.mock import Mock


class ScriptedOperation:
    """Operation replaying a script of results.

    Every call consumes the next item of the script: exceptions are
    raised, other items are returned. Once the script is exhausted, the
    last item is replayed.
    """

    def __init__(self, script: Iterable[Any]) -> None:
        self.script = list(script)
        self.calls = 0
        self.call_times: list[float] = []
        self._lock = threading.Lock()

    def __call__(self) -> Any:
        with self._lock:
            item = self.script[min(self.calls, len(self.script) - 1)]
            self.calls += 1
            self.call_times.append(time.monotonic())
        if isinstance(item, BaseException):
            raise item
        return item

    def gaps(self) -> list[float]:
        """Return the elapsed time between consecutive calls."""
        return [later - earlier for earlier, later in zip(self.call_times, self.call_times[1:])]


class FlakyOperation(ScriptedOperation):
    """Operation that raises ``failures`` times, then returns
    ``value``."""

    def __init__(self, failures: int, value: Any = "success") -> None:
        super().__init__([RuntimeError(f"failure {i + 1}") for i in range(failures)] + [value])
        self.value = value


class AlwaysRaising(ScriptedOperation):
    """Operation that raises on every call."""

    def __init__(self, error: Exception | None = None) -> None:
        super().__init__([error if error is not None else ConnectionError("unavailable")])


def sleep_durations(mock_sleep: Mock) -> list[float]:
    """Return the durations passed to a patched CancellationToken.sleep."""
    return [call.args[1] for call in mock_sleep.call_args_list]
