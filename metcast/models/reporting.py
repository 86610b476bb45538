"""Report models: resampled forecasts ready for rendering."""

from dataclasses import dataclass, field
from datetime import date

from metcast.models.common import UnitSystem
from metcast.models.forecast import TimeStep
from metcast.models.location import Location


@dataclass
class DayReport:
    date: date
    times: list[TimeStep] = field(default_factory=list)


@dataclass
class ForecastReport:
    location: Location
    units: UnitSystem = UnitSystem.METRIC
    days: list[DayReport] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.days
