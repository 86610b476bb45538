"""Exception hierarchy for location resolution, fetching and extraction."""


class MetcastError(Exception):
    """Base class for every failure metcast reports to the caller."""


class ExtractionError(MetcastError):
    """The forecast page could not be turned into day forecasts."""


class MalformedDate(ExtractionError):
    pass


class MalformedTime(ExtractionError):
    pass


class MissingRequiredAttribute(ExtractionError):
    def __init__(self, attribute: str, field: str):
        super().__init__(f"can't find {attribute} in {field}")
        self.attribute = attribute
        self.field = field


class NumericParseFailure(ExtractionError):
    def __init__(self, field: str, text: str):
        super().__init__(f"can't parse {text!r} as a number in {field}")
        self.field = field
        self.text = text


class SelectorCompilationFailure(ExtractionError):
    def __init__(self, selector: str):
        super().__init__(f"can't parse selector {selector!r}")
        self.selector = selector


class ForecastFetchError(MetcastError):
    """A network or HTTP failure while talking to the forecast service."""


class LocationError(MetcastError):
    pass


class LocationNotFound(LocationError):
    pass


class LocationTooBroad(LocationError):
    pass


class CurrentLocationUnavailable(LocationError):
    pass


class TimeRangeError(MetcastError, ValueError):
    pass
