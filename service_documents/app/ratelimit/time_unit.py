"""
Time units for expressing the rate window.
"""

from enum import Enum
from typing import Union

from shared.errors import ConstructionError


class TimeUnit(str, Enum):
    """Granularity of the rate window."""

    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    @classmethod
    def parse(cls, value: Union["TimeUnit", str]) -> "TimeUnit":
        """Resolve a unit from an enum member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConstructionError(
                f"Unknown time unit: {value!r}",
                details={"time_unit": str(value), "allowed": [unit.value for unit in cls]}
            )

    def to_seconds(self, amount: float = 1) -> float:
        """Convert ``amount`` of this unit to seconds."""
        return amount * _SECONDS_PER_UNIT[self]


_SECONDS_PER_UNIT = {
    TimeUnit.MILLISECONDS: 0.001,
    TimeUnit.SECONDS: 1.0,
    TimeUnit.MINUTES: 60.0,
    TimeUnit.HOURS: 3600.0,
    TimeUnit.DAYS: 86400.0,
}
