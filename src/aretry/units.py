r"""Time units used to express backoff delays."""

from __future__ import annotations

__all__ = ["TimeUnit"]

from enum import Enum


class TimeUnit(Enum):
    """Unit of a delay value, valued by its length in seconds.

    Example:
        ```pycon
        >>> from aretry.units import TimeUnit
        >>> TimeUnit.MINUTES.to_seconds(2)
        120.0
        >>> TimeUnit.parse("minutes")
        <TimeUnit.MINUTES: 60.0>

        ```
    """

    NANOSECONDS = 1e-9
    MICROSECONDS = 1e-6
    MILLISECONDS = 1e-3
    SECONDS = 1.0
    MINUTES = 60.0
    HOURS = 3600.0

    def to_seconds(self, amount: float) -> float:
        """Convert an amount expressed in this unit to seconds.

        Args:
            amount: The amount of this unit.

        Returns:
            The equivalent number of seconds.
        """
        return amount * self.value

    @classmethod
    def parse(cls, unit: TimeUnit | str | None) -> TimeUnit:
        """Resolve a unit given as a ``TimeUnit`` or as its name.

        Args:
            unit: The unit, or its case-insensitive name.

        Returns:
            The matching ``TimeUnit``.

        Raises:
            ValueError: If the unit is ``None`` or an unknown name.
            TypeError: If the unit is neither a ``TimeUnit`` nor a string.
        """
        if unit is None:
            msg = "unit must not be None"
            raise ValueError(msg)
        if isinstance(unit, cls):
            return unit
        if not isinstance(unit, str):
            msg = f"unit must be a TimeUnit or a unit name, got {type(unit).__name__}"
            raise TypeError(msg)
        try:
            return cls[unit.upper()]
        except KeyError:
            names = ", ".join(member.name.lower() for member in cls)
            msg = f"unknown time unit {unit!r}, expected one of: {names}"
            raise ValueError(msg) from None
