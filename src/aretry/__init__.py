r"""aretry - Retry policies built step by step.

This package retries an arbitrary fallible operation until it succeeds,
its attempt budget is exhausted, or caller-defined failure criteria
reject every attempt. A staged builder walks through the configuration
in a fixed order, while letting every stage be skipped to keep its
default.

Key Features:
    - Bounded or unbounded attempt budgets
    - Constant delays, or delays doubling up to a ceiling
    - Failure predicates combined with OR, on top of errors and ``None``
      results
    - Failure hooks receiving a typed outcome (rejected value, error or
      empty result)
    - Synchronous execution, or execution on a dedicated background
      thread returning a cancellable, awaitable future

Example:
    ```pycon
    >>> from aretry import new_retry
    >>> attempts = []
    >>> def flaky() -> int:
    ...     attempts.append(1)
    ...     if len(attempts) < 3:
    ...         raise ConnectionError("not yet")
    ...     return len(attempts)
    ...
    >>> new_retry(flaky).max_times(5).timeout().for_(1).millis().fail_error_only().on_error(
    ...     lambda error: print(f"failed: {error}")
    ... ).do_sync()
    failed: not yet
    failed: not yet
    3

    ```
"""

from __future__ import annotations

__all__ = [
    "Accepted",
    "AretryError",
    "AsyncRetryExecutor",
    "BuilderStateError",
    "CancellationToken",
    "DelayGrowth",
    "Empty",
    "Errored",
    "Outcome",
    "RejectedValue",
    "RetryBuilder",
    "RetryExecutor",
    "RetryFuture",
    "RetryPolicy",
    "TimeUnit",
    "__version__",
    "new_retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.backoff import DelayGrowth
from aretry.builder import RetryBuilder, new_retry
from aretry.exceptions import AretryError, BuilderStateError
from aretry.outcome import Accepted, Empty, Errored, Outcome, RejectedValue
from aretry.retry import AsyncRetryExecutor, RetryExecutor, RetryFuture, RetryPolicy
from aretry.units import TimeUnit
from aretry.utils import CancellationToken

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
