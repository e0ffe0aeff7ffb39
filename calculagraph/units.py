"""Time units and the Duration value produced by a timed call."""

from dataclasses import dataclass
from enum import Enum


class TimeUnit(Enum):
    """Resolution a measured duration is reported in."""

    NANOSECONDS = ("ns", 1)
    MICROSECONDS = ("us", 1_000)
    MILLISECONDS = ("ms", 1_000_000)
    SECONDS = ("s", 1_000_000_000)

    def __init__(self, suffix: str, nanoseconds: int) -> None:
        self.suffix = suffix
        self.nanoseconds = nanoseconds

    def convert(self, nanoseconds: int) -> int:
        """Truncate a nanosecond count to whole units."""
        return nanoseconds // self.nanoseconds

    def __str__(self) -> str:
        return self.suffix


@dataclass(frozen=True)
class Duration:
    """Elapsed time between two instants, in nanoseconds."""

    nanoseconds: int

    def __post_init__(self) -> None:
        if self.nanoseconds < 0:
            raise ValueError(f"Duration cannot be negative, got {self.nanoseconds}ns")

    def in_unit(self, unit: TimeUnit) -> int:
        return unit.convert(self.nanoseconds)

    def as_nanos(self) -> int:
        return self.nanoseconds

    def as_micros(self) -> int:
        return self.in_unit(TimeUnit.MICROSECONDS)

    def as_millis(self) -> int:
        return self.in_unit(TimeUnit.MILLISECONDS)

    def as_secs(self) -> int:
        return self.in_unit(TimeUnit.SECONDS)
