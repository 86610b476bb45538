"""Mixer: answers arbitrary time-of-day queries against one day's forecast steps."""

import bisect
from collections.abc import Iterable, Iterator
from datetime import time

from metcast.models.forecast import ForecastRecord, TimeStep

# Fields blended as (1 - frac) * a + frac * b
LERP_FIELDS = (
    "precipitation_chance",
    "temperature",
    "feels_like_temperature",
    "wind_speed",
    "wind_gust",
    "visibility",
    "humidity",
)


def _minutes(t: time) -> int:
    return t.hour * 60 + t.minute


def lerp(a: float, b: float, frac: float) -> float:
    return (1.0 - frac) * a + frac * b


def blend(a: ForecastRecord, b: ForecastRecord, frac: float) -> ForecastRecord:
    """Blend two observed records, ``frac`` of the way from ``a`` to ``b``."""
    mixed = ForecastRecord(
        # Worsening trend wins
        status=b.status if b.precipitation_chance > a.precipitation_chance else a.status,
        wind_direction=a.wind_direction,
        uv_index=max(a.uv_index, b.uv_index),
    )
    for name in LERP_FIELDS:
        setattr(mixed, name, lerp(getattr(a, name), getattr(b, name), frac))
    return mixed


class Mixer:
    """Linear interpolation over a sparse, irregular series of forecast steps.

    Never extrapolates: queries before the first or after the last observed
    step have no answer. When two steps share a time, the first one given
    wins exact-match lookups. Queries between times are bracketed by the
    nearest neighbours, so the last duplicate of the earlier time and the
    first duplicate of the later time are the ones blended.
    """

    def __init__(self, steps: Iterable[TimeStep]):
        self.steps = sorted(steps, key=lambda s: s.time)
        self._keys = [_minutes(s.time) for s in self.steps]

    def __len__(self) -> int:
        return len(self.steps)

    def resample(self, query: time) -> ForecastRecord | None:
        """Forecast for ``query``, or None if it lies outside the observed range."""
        key = _minutes(query)
        idx = bisect.bisect_left(self._keys, key)
        if idx < len(self._keys) and self._keys[idx] == key:
            return self.steps[idx].forecast.copy()
        if idx == 0 or idx == len(self._keys):
            return None

        a, b = self.steps[idx - 1], self.steps[idx]
        a_key, b_key = self._keys[idx - 1], self._keys[idx]
        frac = (key - a_key) / (b_key - a_key)
        return blend(a.forecast, b.forecast, frac)

    def resample_many(self, queries: Iterable[time]) -> Iterator[TimeStep]:
        """Yield a step for each query time that falls inside the observed range."""
        for query in queries:
            forecast = self.resample(query)
            if forecast is None:
                continue
            yield TimeStep(query, forecast)
