"""Forecast data models: per-step records grouped by day."""

from dataclasses import dataclass, field, replace
from datetime import date, time


@dataclass
class ForecastRecord:
    status: str = ""
    precipitation_chance: float = 0.0  # percent
    temperature: float = 0.0
    feels_like_temperature: float = 0.0
    wind_speed: float = 0.0
    wind_direction: str = ""  # compass label
    wind_gust: float = 0.0
    visibility: float = 0.0
    humidity: float = 0.0  # percent
    uv_index: float = 0.0

    @classmethod
    def blank(cls) -> "ForecastRecord":
        """A record with every numeric field zero and every label empty."""
        return cls()

    def copy(self) -> "ForecastRecord":
        return replace(self)


@dataclass(frozen=True)
class TimeStep:
    time: time
    forecast: ForecastRecord


@dataclass
class DayForecast:
    date: date
    steps: list[TimeStep] = field(default_factory=list)

    @property
    def times(self) -> list[time]:
        return [s.time for s in self.steps]
