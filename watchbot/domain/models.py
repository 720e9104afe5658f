"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class Uptime:
    """Whole days, hours and minutes of a running duration (floored)."""

    days: int
    hours: int
    minutes: int

    @classmethod
    def from_seconds(cls, total: float) -> "Uptime":
        return cls(
            days=int(total // SECONDS_PER_DAY),
            hours=int((total % SECONDS_PER_DAY) // SECONDS_PER_HOUR),
            minutes=int((total % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE),
        )

    def describe(self) -> str:
        return f"{self.days} days, {self.hours} hours, and {self.minutes} minutes"
