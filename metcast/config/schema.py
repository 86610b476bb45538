"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

from metcast.models.common import UnitSystem
from metcast.models.query import TimeRange

MET_OFFICE_BASE_URL = "https://www.metoffice.gov.uk"
DEFAULT_USER_AGENT = "metcast/0.1.0"


class SourceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = MET_OFFICE_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT


class HttpConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timeout_seconds: float = Field(default=30.0, gt=0.0)


class QueryConfig(BaseModel):
    model_config = {"extra": "forbid"}

    day: int = Field(default=0, ge=0)
    count: int = Field(default=1, ge=1)
    time_range: str = "0:4:6"

    @field_validator("time_range")
    @classmethod
    def _valid_time_range(cls, v: str) -> str:
        TimeRange.parse(v)
        return v

    def parsed_time_range(self) -> TimeRange:
        return TimeRange.parse(self.time_range)


class OutputConfig(BaseModel):
    model_config = {"extra": "forbid"}

    units: UnitSystem = UnitSystem.METRIC
    extra: bool = False
    ascii: bool = False
    json_output: bool = False


class HomeConfig(BaseModel):
    """Coordinates used when no location term is given."""

    model_config = {"extra": "forbid"}

    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)

    @property
    def is_set(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return v


class MetcastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    source: SourceConfig = SourceConfig()
    http: HttpConfig = HttpConfig()
    query: QueryConfig = QueryConfig()
    output: OutputConfig = OutputConfig()
    home: HomeConfig = HomeConfig()
    logging: LoggingConfig = LoggingConfig()
