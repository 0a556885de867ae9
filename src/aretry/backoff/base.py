r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "DelayGrowth"]

from abc import ABC, abstractmethod
from enum import Enum


class DelayGrowth(Enum):
    """How the delay between attempts evolves over a retry sequence."""

    CONSTANT = "constant"
    EXPONENTIAL = "exponential"


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy derives the delay to apply before the retry after
    next from the delay that is about to be applied. Strategies are
    stateless: the current delay is owned by the retry loop.
    """

    @abstractmethod
    def calculate(self, previous_delay: float) -> float:
        """Calculate the delay that follows a given delay.

        Args:
            previous_delay: The delay in seconds applied before the
                current retry.

        Returns:
            The delay in seconds to apply before the next retry.
        """
