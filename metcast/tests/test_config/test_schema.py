"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from metcast.config.schema import (
    HomeConfig,
    LoggingConfig,
    MetcastConfig,
    OutputConfig,
    QueryConfig,
)
from metcast.models.common import UnitSystem


class TestMetcastConfig:
    def test_defaults(self):
        config = MetcastConfig()
        assert config.source.base_url == "https://www.metoffice.gov.uk"
        assert config.query.day == 0
        assert config.query.count == 1
        assert config.output.units == UnitSystem.METRIC
        assert config.home.is_set is False

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            MetcastConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            OutputConfig(colour=True)


class TestQueryConfig:
    def test_parsed_time_range(self):
        tr = QueryConfig(time_range="6:3:4").parsed_time_range()
        assert (tr.start, tr.step, tr.count) == (6, 3, 4)

    def test_time_range_must_stay_in_day(self):
        with pytest.raises(ValidationError, match="next day"):
            QueryConfig(time_range="12:6:3")

    def test_negative_day_rejected(self):
        with pytest.raises(ValidationError):
            QueryConfig(day=-1)


class TestOutputConfig:
    def test_units_from_string(self):
        assert OutputConfig(units="customary").units == UnitSystem.CUSTOMARY

    def test_bad_units(self):
        with pytest.raises(ValidationError):
            OutputConfig(units="imperial")


class TestHomeConfig:
    def test_is_set(self):
        assert HomeConfig(latitude=50.7, longitude=-3.5).is_set is True
        assert HomeConfig(latitude=50.7).is_set is False

    def test_latitude_bounds(self):
        with pytest.raises(ValidationError):
            HomeConfig(latitude=91.0, longitude=0.0)


class TestLoggingConfig:
    def test_level_normalised(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="chatty")
