"""Forecast page extractor: turns a Met Office forecast page into day forecasts.

Each ``.forecast-day`` block lays its data out as table rows, one row per
field. Every row is selected on its own and written into the step records by
position, so the Nth cell of every row belongs to the Nth time header.
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, time

import soupsieve
from bs4 import BeautifulSoup, Tag

from metcast.errors import (
    MalformedDate,
    MalformedTime,
    MissingRequiredAttribute,
    NumericParseFailure,
    SelectorCompilationFailure,
)
from metcast.models.common import UnitSystem, convert_speed, convert_temperature
from metcast.models.forecast import DayForecast, ForecastRecord, TimeStep

logger = logging.getLogger(__name__)

DAY_SELECTOR = ".forecast-day"
TIME_SELECTOR = '.step-time > th[scope="col"]'

# Shown instead of a percentage when the chance is too small to measure
BELOW_THRESHOLD_MARKERS = ("<5", "&lt;5")


@dataclass(frozen=True)
class FieldSpec:
    attr: str  # ForecastRecord attribute
    selector: str
    label: str  # row name used in error messages
    source: str | None  # node attribute to read; None reads the cell text
    parse: Callable[[str, str, UnitSystem], float | str]


def _text(value: str, label: str, units: UnitSystem) -> str:
    return value


def _number(value: str, label: str, units: UnitSystem) -> float:
    try:
        result = float(value)
    except ValueError as e:
        raise NumericParseFailure(label, value) from e
    # float() also takes "nan", "inf" and digit separators
    if "_" in value or not math.isfinite(result):
        raise NumericParseFailure(label, value)
    return result


def _temperature(value: str, label: str, units: UnitSystem) -> float:
    return convert_temperature(_number(value, label, units), units)


def _speed(value: str, label: str, units: UnitSystem) -> float:
    return convert_speed(_number(value, label, units), units)


def _percent(value: str, label: str, units: UnitSystem) -> float:
    text = value.strip()
    if not text.endswith("%"):
        return 0.0
    text = text[:-1].strip()
    if text in BELOW_THRESHOLD_MARKERS:
        return 0.0
    return _number(text, label, units)


FIELDS: list[FieldSpec] = [
    FieldSpec("status", ".step-symbol > td > img", "step-symbol", "title", _text),
    FieldSpec("precipitation_chance", ".step-pop > td", "step-pop", None, _percent),
    FieldSpec("temperature", ".step-temp > td > div", "step-temp", "data-value", _temperature),
    FieldSpec(
        "feels_like_temperature", ".step-feels-like > td", "step-feels-like",
        "data-value", _temperature,
    ),
    FieldSpec(
        "wind_speed", ".step-wind > td > div > .speed", "step-wind-speed",
        "data-value", _speed,
    ),
    FieldSpec(
        "wind_direction", ".step-wind > td > div > .direction",
        "step-wind-direction", "data-value", _text,
    ),
    FieldSpec(
        "wind_gust", ".step-wind-gust > td > .gust", "step-wind-gust",
        "data-value", _speed,
    ),
    FieldSpec(
        "visibility", ".step-visibility > td > .visibility", "step-visibility",
        "data-value", _number,
    ),
    FieldSpec("humidity", ".step-humidity > td", "step-humidity", None, _percent),
    FieldSpec("uv_index", ".step-uv > td", "step-uv", "data-value", _number),
]


def compile_selector(selector: str) -> soupsieve.SoupSieve:
    try:
        return soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise SelectorCompilationFailure(selector) from e


def extract(html: str, units: UnitSystem = UnitSystem.METRIC) -> list[DayForecast]:
    """Extract every forecast day from a forecast page, in document order.

    Temperatures and wind speeds are converted to ``units`` here, so every
    consumer sees values already in the requested unit system.

    Raises an ExtractionError subclass if any day is unusable; no partial
    result is returned.
    """
    day_sel = compile_selector(DAY_SELECTOR)
    time_sel = compile_selector(TIME_SELECTOR)
    field_sels = [(spec, compile_selector(spec.selector)) for spec in FIELDS]

    doc = BeautifulSoup(html, "html.parser")

    days: list[DayForecast] = []
    for day in day_sel.select(doc):
        forecast_date = _parse_day_id(day)
        times = [_parse_step_time(node) for node in time_sel.select(day)]

        records = [ForecastRecord.blank() for _ in times]
        for spec, sel in field_sels:
            nodes = sel.select(day)
            if len(nodes) != len(records):
                logger.debug(
                    "%s: %s has %d cells for %d steps",
                    forecast_date, spec.label, len(nodes), len(records),
                )
            for record, node in zip(records, nodes):
                raw = _read(node, spec)
                setattr(record, spec.attr, spec.parse(raw, spec.label, units))

        days.append(
            DayForecast(
                date=forecast_date,
                steps=[TimeStep(t, r) for t, r in zip(times, records)],
            )
        )

    logger.debug("Extracted %d forecast days", len(days))
    return days


def _read(node: Tag, spec: FieldSpec) -> str:
    if spec.source is None:
        return node.get_text()
    value = node.get(spec.source)
    if value is None:
        raise MissingRequiredAttribute(spec.source, spec.label)
    return str(value)


def _parse_day_id(node: Tag) -> date:
    day_id = node.get("id")
    if day_id is None:
        raise MalformedDate("can't find id of forecast-day")
    try:
        return datetime.strptime(str(day_id), "%Y-%m-%d").date()
    except ValueError as e:
        raise MalformedDate(f"forecast-day id {day_id!r} is not a YYYY-MM-DD date") from e


def _parse_step_time(node: Tag) -> time:
    data_time = node.get("data-time")
    if data_time is None:
        raise MissingRequiredAttribute("data-time", "step-time")
    try:
        return datetime.strptime(str(data_time), "%H:%M").time()
    except ValueError as e:
        raise MalformedTime(f"step-time {data_time!r} is not an HH:MM time") from e
