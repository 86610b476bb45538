"""Resolve a search term (or home coordinates) to a single forecastable location."""

import logging
import re
from collections.abc import Callable

from metcast.config.schema import HomeConfig
from metcast.errors import CurrentLocationUnavailable, LocationNotFound
from metcast.ingest.metoffice_client import MetOfficeClient
from metcast.models.location import Location, LocationMatch, MatchKind

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
# UK postcode: outward code, optional inward code
_POSTCODE_RE = re.compile(r"^([a-zA-Z]{1,2}[0-9][a-zA-Z0-9]?) ?([0-9][a-zA-Z]{0,2})?$")

Chooser = Callable[[list[Location]], Location]

NOT_FOUND_MESSAGE = (
    "That location could not be found: perhaps there is a typo, "
    "or your location services are off."
)


def clean_term(term: str) -> str:
    """Normalise a search term.

    Whitespace is collapsed and the term lowercased. Postcodes are cut down to
    their upper-cased outward code, which is what the search service matches.
    """
    cleaned = _WHITESPACE_RE.sub(" ", term.strip()).lower()
    m = _POSTCODE_RE.match(cleaned)
    if m is not None:
        return m.group(1).upper()
    return cleaned


def classify_results(results: list[Location], cleaned: str) -> LocationMatch:
    """Decide whether search results name exactly one location.

    Several results are still a match when exactly one of them has the
    searched name.
    """
    if not results:
        return LocationMatch.not_found()
    if len(results) == 1:
        return LocationMatch.found(results[0])

    same = [loc for loc in results if loc.name.strip().lower() == cleaned]
    if len(same) == 1:
        return LocationMatch.found(same[0])
    return LocationMatch.ambiguous(results)


def closest(entries: list[tuple[Location, float]]) -> LocationMatch:
    if not entries:
        return LocationMatch.not_found()
    location, _ = min(entries, key=lambda e: e[1])
    return LocationMatch.found(location)


class LocationResolver:
    def __init__(
        self,
        client: MetOfficeClient,
        home: HomeConfig | None = None,
        chooser: Chooser | None = None,
    ):
        self.client = client
        self.home = home or HomeConfig()
        self.chooser = chooser

    def search(self, term: str | None) -> LocationMatch:
        if term is None or not term.strip():
            if not self.home.is_set:
                raise CurrentLocationUnavailable(
                    "No location given and no home coordinates configured"
                )
            logger.info(
                "Looking up nearest location to %.4f, %.4f",
                self.home.latitude, self.home.longitude,
            )
            return closest(
                self.client.nearest_locations(self.home.latitude, self.home.longitude)
            )

        cleaned = clean_term(term)
        return classify_results(self.client.search_locations(cleaned), cleaned)

    def resolve(self, term: str | None, non_interactive: bool = False) -> Location:
        """Resolve to one location, asking the chooser when the term is ambiguous.

        Ambiguous terms are rejected when non-interactive or when no chooser
        is available.
        """
        match = self.search(term)

        if match.kind == MatchKind.FOUND:
            return match.location
        if match.kind == MatchKind.AMBIGUOUS:
            if non_interactive or self.chooser is None:
                logger.warning(
                    "Rejecting ambiguous location %r (%d candidates)",
                    term, len(match.candidates),
                )
            else:
                return self.chooser(match.candidates)
        raise LocationNotFound(NOT_FOUND_MESSAGE)
