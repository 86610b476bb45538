"""Forecast pipeline: resolve, fetch, extract and resample for one location."""

import logging

import httpx

from metcast.config.schema import MetcastConfig
from metcast.errors import ForecastFetchError, LocationTooBroad
from metcast.ingest.extractor import extract
from metcast.ingest.location_resolver import Chooser, LocationResolver
from metcast.ingest.metoffice_client import MetOfficeClient
from metcast.models.forecast import DayForecast
from metcast.models.location import Location
from metcast.models.query import TimeRange
from metcast.models.reporting import DayReport, ForecastReport
from metcast.resample.mixer import Mixer

logger = logging.getLogger(__name__)


def resample_days(
    days: list[DayForecast], day: int, count: int, time_range: TimeRange
) -> list[DayReport]:
    """Skip ``day`` days, take ``count``, and resample each onto the query times.

    Query times outside a day's observed steps are dropped.
    """
    queries = time_range.times()
    reports: list[DayReport] = []
    for forecast in days[day:day + count]:
        mixer = Mixer(forecast.steps)
        reports.append(DayReport(forecast.date, list(mixer.resample_many(queries))))
    return reports


class ForecastPipeline:
    def __init__(
        self,
        config: MetcastConfig,
        client: MetOfficeClient | None = None,
        chooser: Chooser | None = None,
    ):
        self.config = config
        self.client = client
        self.chooser = chooser

    def _make_client(self) -> MetOfficeClient:
        return MetOfficeClient(
            base_url=self.config.source.base_url,
            user_agent=self.config.source.user_agent,
            timeout=self.config.http.timeout_seconds,
        )

    def run(self, term: str | None, non_interactive: bool = False) -> ForecastReport:
        """Produce the resampled forecast report for a location term.

        A blank term means the configured home coordinates.
        """
        owns_client = self.client is None
        client = self.client or self._make_client()
        try:
            return self._run(client, term, non_interactive)
        finally:
            if owns_client:
                client.close()

    def _run(
        self, client: MetOfficeClient, term: str | None, non_interactive: bool
    ) -> ForecastReport:
        query = self.config.query
        units = self.config.output.units
        resolver = LocationResolver(client, self.config.home, self.chooser)

        try:
            location = resolver.resolve(term, non_interactive=non_interactive)
        except httpx.HTTPError as e:
            raise ForecastFetchError("Location lookup failed") from e

        geohash = _require_geohash(location)
        logger.info("Getting forecast for %s", location.label)

        try:
            html = client.get_forecast_page(geohash)
        except httpx.HTTPError as e:
            raise ForecastFetchError(f"Forecast download failed for {location.label}") from e

        days = extract(html, units)
        logger.info("Extracted %d days for %s", len(days), location.label)

        return ForecastReport(
            location=location,
            units=units,
            days=resample_days(
                days, query.day, query.count, query.parsed_time_range()
            ),
        )


def _require_geohash(location: Location) -> str:
    if not location.geohash:
        raise LocationTooBroad(
            "That location is too broad, please pick a more specific location."
        )
    return location.geohash
