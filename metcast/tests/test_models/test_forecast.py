"""Tests for forecast records, locations and unit conversion."""

from datetime import date, time

import pytest

from metcast.models.common import UnitSystem, convert_speed, convert_temperature
from metcast.models.forecast import DayForecast, ForecastRecord, TimeStep
from metcast.models.location import Location, LocationMatch, MatchKind


class TestForecastRecord:
    def test_blank_defaults(self):
        r = ForecastRecord.blank()
        assert r.status == ""
        assert r.wind_direction == ""
        for name in (
            "precipitation_chance", "temperature", "feels_like_temperature",
            "wind_speed", "wind_gust", "visibility", "humidity", "uv_index",
        ):
            assert getattr(r, name) == 0.0

    def test_blank_is_fresh_instance(self):
        a = ForecastRecord.blank()
        a.temperature = 5.0
        assert ForecastRecord.blank().temperature == 0.0

    def test_copy_is_independent(self):
        a = ForecastRecord(status="Cloudy", temperature=3.0)
        b = a.copy()
        b.temperature = 9.0
        assert a == ForecastRecord(status="Cloudy", temperature=3.0)


class TestDayForecast:
    def test_times(self):
        day = DayForecast(
            date(2026, 10, 18),
            [TimeStep(time(12), ForecastRecord()), TimeStep(time(9), ForecastRecord())],
        )
        assert day.times == [time(12), time(9)]


class TestUnits:
    def test_metric_temperature_unchanged(self):
        assert convert_temperature(12.5, UnitSystem.METRIC) == 12.5

    def test_fahrenheit(self):
        assert convert_temperature(100.0, UnitSystem.CUSTOMARY) == pytest.approx(212.0)
        assert convert_temperature(-40.0, UnitSystem.CUSTOMARY) == pytest.approx(-40.0)

    @pytest.mark.parametrize("celsius", [-12.3, 0.0, 4.7, 21.0, 37.9])
    def test_fahrenheit_inverts(self, celsius: float):
        fahrenheit = convert_temperature(celsius, UnitSystem.CUSTOMARY)
        assert (fahrenheit - 32.0) / 1.8 == pytest.approx(celsius)

    def test_speed(self):
        assert convert_speed(10.0, UnitSystem.METRIC) == pytest.approx(36.0)
        assert convert_speed(10.0, UnitSystem.CUSTOMARY) == pytest.approx(22.37)


class TestLocation:
    def test_from_json_missing_fields(self):
        loc = Location.from_json({"name": "Devon"})
        assert loc.area is None
        assert loc.geohash is None

    def test_label(self):
        assert Location("Exeter", "Devon").label == "Exeter (Devon)"
        assert Location("Exeter").label == "Exeter (N/A)"


class TestLocationMatch:
    def test_found(self):
        loc = Location("Exeter", "Devon", "gcj2x8gt5")
        match = LocationMatch.found(loc)
        assert match.kind == MatchKind.FOUND
        assert match.location == loc

    def test_ambiguous_has_no_location(self):
        match = LocationMatch.ambiguous([Location("A"), Location("B")])
        assert match.kind == MatchKind.AMBIGUOUS
        assert match.location is None
        assert len(match.candidates) == 2

    def test_not_found(self):
        match = LocationMatch.not_found()
        assert match.kind == MatchKind.NOT_FOUND
        assert match.candidates == []
