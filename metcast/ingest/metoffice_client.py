"""Met Office client: location search, nearest locations, forecast pages.

One request per call. Failures are not retried; httpx errors propagate to
the caller and replies that are not the expected JSON raise ForecastFetchError.
"""

import logging
from urllib.parse import quote

import httpx

from metcast.config.schema import DEFAULT_USER_AGENT, MET_OFFICE_BASE_URL
from metcast.errors import ForecastFetchError
from metcast.models.location import Location

logger = logging.getLogger(__name__)


class MetOfficeClient:
    def __init__(
        self,
        base_url: str = MET_OFFICE_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._client = httpx.Client(
            headers={"User-Agent": user_agent},
            timeout=timeout,
            follow_redirects=True,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "MetOfficeClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def search_locations(self, term: str) -> list[Location]:
        """Search locations by free-text term or postcode district."""
        url = (
            f"{self.base_url}/plain-rest-services/location-search/"
            f"{quote(term, safe='')}/"
        )
        resp = self._client.get(url, params={"filter": ""})
        resp.raise_for_status()
        raw = _json(resp)
        if not isinstance(raw, list) or not all(isinstance(r, dict) for r in raw):
            raise ForecastFetchError(
                f"Location search returned {type(raw).__name__}, expected a list"
            )
        results = [Location.from_json(r) for r in raw]
        logger.info("Location search %r returned %d results", term, len(results))
        return results

    def nearest_locations(
        self, latitude: float, longitude: float
    ) -> list[tuple[Location, float]]:
        """Locations near a coordinate, each paired with its distance."""
        resp = self._client.get(
            f"{self.base_url}/plain-rest-services/nearest-locations",
            params={"latitude": latitude, "longitude": longitude},
        )
        resp.raise_for_status()
        raw = _json(resp)
        if not isinstance(raw, dict):
            raise ForecastFetchError(
                f"Nearest locations returned {type(raw).__name__}, expected an object"
            )
        entries = raw.get("locationResults")
        if entries is None:
            return []
        try:
            return [
                (Location.from_json(e["result"]), float(e.get("distance", 0.0)))
                for e in entries
            ]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ForecastFetchError("Nearest locations reply is malformed") from e

    def get_forecast_page(self, geohash: str) -> str:
        """Fetch the raw forecast page HTML for a location geohash."""
        url = f"{self.base_url}/weather/forecast/{geohash}"
        resp = self._client.get(url)
        resp.raise_for_status()
        logger.info("Fetched forecast page for %s (%d bytes)", geohash, len(resp.text))
        return resp.text


def _json(resp: httpx.Response):
    try:
        return resp.json()
    except ValueError as e:
        raise ForecastFetchError(
            f"{resp.url} did not return JSON (status {resp.status_code})"
        ) from e
