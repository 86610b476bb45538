"""Query-time descriptors: which hours of each day to forecast."""

import re
from dataclasses import dataclass
from datetime import time

from metcast.errors import TimeRangeError

_TIME_RANGE_RE = re.compile(
    r"^(0?[0-9]|1[0-9]|2[0-3]):(0?[0-9]|1[0-9]|2[0-4]):(0?[0-9]|1[0-9]|2[0-4])$"
)


@dataclass(frozen=True)
class TimeRange:
    start: int
    step: int
    count: int

    def __post_init__(self):
        if self.start + self.step * max(self.count - 1, 0) >= 24:
            raise TimeRangeError("this time range overlaps the next day")

    @classmethod
    def parse(cls, text: str) -> "TimeRange":
        """Parse ``start:step:count`` where every field is an hour number."""
        m = _TIME_RANGE_RE.match(text.strip())
        if m is None:
            raise TimeRangeError(
                f"invalid time range {text!r}: expected start:step:count"
            )
        start, step, count = (int(g) for g in m.groups())
        return cls(start=start, step=step, count=count)

    def times(self) -> list[time]:
        return [time(self.start + i * self.step) for i in range(self.count)]

    def __str__(self) -> str:
        return f"{self.start}:{self.step}:{self.count}"
