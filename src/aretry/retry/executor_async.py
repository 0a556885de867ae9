r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs a retry
policy on a dedicated background thread, and the RetryFuture handle it
returns.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "RetryFuture"]

import asyncio
import itertools
import logging
import threading
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from aretry.retry.executor import RetryExecutor
from aretry.utils.sleep import CancellationToken

if TYPE_CHECKING:
    from collections.abc import Generator

    from aretry.retry.config import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")

_worker_ids = itertools.count(1)


class RetryFuture(Future, Generic[T]):
    """Future of a retry execution running in the background.

    The future resolves to the same value as a synchronous execution:
    the first accepted value, or ``None``.

    Cancelling the future also cancels its token. A future cancelled
    before its worker starts never invokes the operation. A future that
    is already running cannot be marked as cancelled, but its execution
    stops at the next backoff delay and resolves to ``None``; an
    operation call already in progress is not interrupted.

    The future can be awaited from asyncio code.

    Args:
        token: The cancellation token of the execution. A fresh token is
            created if not provided.

    Attributes:
        token: The cancellation token of the execution.
    """

    def __init__(self, token: CancellationToken | None = None) -> None:
        super().__init__()
        self.token = token if token is not None else CancellationToken()

    def cancel(self) -> bool:
        """Request cancellation of the retry execution.

        Returns:
            ``True`` if the execution had not started and is now
            cancelled, ``False`` if it is running or already finished.
        """
        self.token.cancel()
        return super().cancel()

    def __await__(self) -> Generator[Any, None, T | None]:
        return asyncio.wrap_future(self).__await__()


class AsyncRetryExecutor(Generic[T]):
    """Executes a retry policy on a dedicated background thread.

    Every call to ``submit`` starts a new daemon thread: retry sequences
    may be long-lived, so they do not share a pool where they could
    starve each other. Executions are independent; each one starts with
    a fresh attempt counter, delay and cancellation token.

    Args:
        policy: The retry policy to execute.

    Attributes:
        policy: The retry policy to execute.

    Example:
        ```pycon
        >>> from aretry.retry import AsyncRetryExecutor, RetryPolicy
        >>> policy = RetryPolicy(operation=lambda: "done", max_attempts=3)
        >>> future = AsyncRetryExecutor(policy).submit()
        >>> future.result(timeout=5)
        'done'

        ```
    """

    def __init__(self, policy: RetryPolicy[T]) -> None:
        self.policy = policy

    def submit(self) -> RetryFuture[T]:
        """Start an execution of the policy in the background.

        Returns:
            The future of the execution.
        """
        future: RetryFuture[T] = RetryFuture()
        thread = threading.Thread(
            target=self._run,
            args=(future,),
            name=f"aretry-worker-{next(_worker_ids)}",
            daemon=True,
        )
        thread.start()
        return future

    def _run(self, future: RetryFuture[T]) -> None:
        if not future.set_running_or_notify_cancel():
            logger.debug("Retry execution cancelled before it started")
            return
        try:
            result = RetryExecutor(self.policy).execute(future.token)
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)
