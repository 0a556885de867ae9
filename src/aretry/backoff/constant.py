r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from aretry.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Keeps the same delay for every retry, so the whole sequence uses the
    initial delay of the policy.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff()
        >>> backoff.calculate(2.5)
        2.5
        >>> backoff.calculate(backoff.calculate(2.5))
        2.5

        ```
    """

    def calculate(self, previous_delay: float) -> float:
        """Calculate constant backoff delay.

        Args:
            previous_delay: The delay applied before the current retry.

        Returns:
            The same delay.
        """
        return previous_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
