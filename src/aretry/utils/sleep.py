r"""Cancellable sleep used between retry attempts.

This module provides the cancellation token that each retry execution
owns. Sleeping through the token returns early as soon as the token is
cancelled, which lets an asynchronous execution stop during a backoff
delay instead of waiting for it to elapse.
"""

from __future__ import annotations

__all__ = ["CancellationToken"]

import logging
import threading

from aretry.exceptions import SleepInterruptedError

logger: logging.Logger = logging.getLogger(__name__)


class CancellationToken:
    """Cancellation flag with an interruptible sleep.

    Example:
        ```pycon
        >>> from aretry.utils.sleep import CancellationToken
        >>> token = CancellationToken()
        >>> token.cancelled
        False
        >>> token.sleep(0.01)
        >>> token.cancel()
        >>> token.cancelled
        True
        >>> token.sleep(10.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aretry.exceptions.SleepInterruptedError: sleep interrupted by cancellation

        ```
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        """Indicate whether the token has been cancelled."""
        return self._event.is_set()

    def cancel(self) -> None:
        """Cancel the token and wake up any pending sleep."""
        self._event.set()

    def sleep(self, seconds: float) -> None:
        """Sleep for a number of seconds unless the token is cancelled.

        Args:
            seconds: The sleep duration. Durations that cannot be
                represented by a timed wait (for example ``math.inf``)
                block until the token is cancelled.

        Raises:
            SleepInterruptedError: If the token is cancelled before or
                during the sleep.
        """
        msg = "sleep interrupted by cancellation"
        if self._event.is_set():
            raise SleepInterruptedError(msg)
        if seconds <= 0:
            return
        logger.debug(f"Waiting {seconds:.3f}s before retry")
        timeout = seconds if seconds < threading.TIMEOUT_MAX else None
        if self._event.wait(timeout=timeout):
            raise SleepInterruptedError(msg)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(cancelled={self.cancelled})"
