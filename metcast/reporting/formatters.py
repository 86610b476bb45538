"""Output formatters for forecast reports and failures."""

import json
from dataclasses import asdict

from metcast.models.common import UnitSystem
from metcast.models.forecast import ForecastRecord
from metcast.models.reporting import ForecastReport

# status label -> (glyph, ascii code)
STATUS_SYMBOLS: dict[str, tuple[str, str]] = {
    "Cloudy": ("☁", "CL"),
    "Overcast": ("☁", "CL"),
    "Light shower (night)": ("🌧", "SH"),
    "Light shower (day)": ("🌧", "SH"),
    "Heavy shower (day)": ("🌧", "SH"),
    "Heavy shower (night)": ("🌧", "SH"),
    "Partly cloudy (night)": ("🌥", "PC"),
    "Partly cloudy (day)": ("🌥", "PC"),
    "Sunny day": ("☀", "SU"),
    "Clear night": ("☾", "CN"),
    "Light snow": ("☃", "SN"),
    "Heavy snow": ("☃", "SN"),
    "Sunny intervals": ("🌤", "PC"),
    "Heavy rain": ("☂", "RA"),
    "Light rain": ("☂", "RA"),
    "Sleet": ("🌨", "SL"),
    "Thunder shower (night)": ("☈", "TH"),
    "Thunder shower (day)": ("☈", "TH"),
}


def status_symbol(status: str, ascii: bool = False) -> str:
    """Short symbol for a status label; unknown labels pass through."""
    symbols = STATUS_SYMBOLS.get(status)
    if symbols is None:
        return status
    return symbols[1] if ascii else symbols[0]


def _temp(value: float, units: UnitSystem) -> str:
    return f"{value:.1f}{'f' if units == UnitSystem.CUSTOMARY else 'C'}"


def _speed(value: float, units: UnitSystem) -> str:
    return f"{value:.1f}{'mph' if units == UnitSystem.CUSTOMARY else 'kph'}"


def _rows(
    forecasts: list[ForecastRecord], units: UnitSystem, extra: bool, ascii: bool
) -> list[tuple[str, list[str]]]:
    rows = [
        ("Status", [status_symbol(f.status, ascii) for f in forecasts]),
        ("Precipitation", [f"{f.precipitation_chance:g}%" for f in forecasts]),
        ("Temperature", [_temp(f.temperature, units) for f in forecasts]),
        ("Feels Like", [_temp(f.feels_like_temperature, units) for f in forecasts]),
    ]
    if extra:
        rows += [
            ("Wind Speed", [_speed(f.wind_speed, units) for f in forecasts]),
            ("Wind Direction", [f.wind_direction for f in forecasts]),
            ("Wind Gust", [_speed(f.wind_gust, units) for f in forecasts]),
            ("Visibility", [f"{f.visibility:g}" for f in forecasts]),
            ("Humidity", [f"{f.humidity:g}%" for f in forecasts]),
            ("UV Index", [f"{f.uv_index:g}" for f in forecasts]),
        ]
    return rows


def format_table(
    header: list[str], rows: list[tuple[str, list[str]]], ascii: bool = False
) -> str:
    """Render a label column plus one column per time step."""
    all_rows = [header] + [[label] + cells for label, cells in rows]
    widths = [max(len(r[i]) for r in all_rows) for i in range(len(header))]
    sep = " | " if ascii else " │ "
    rule_char = "-" if ascii else "─"

    def line(cells: list[str]) -> str:
        return sep.join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    rule = rule_char * (sum(widths) + len(sep) * (len(widths) - 1))
    return "\n".join([line(all_rows[0]), rule] + [line(r) for r in all_rows[1:]])


def format_report_text(
    report: ForecastReport, extra: bool = False, ascii: bool = False
) -> str:
    """Plain text tables, one per day."""
    lines = [f"Forecast for {report.location.label}"]
    if report.is_empty:
        lines.append("No applicable data available.")

    for day in report.days:
        header = ["Time"] + [s.time.strftime("%H:%M") for s in day.times]
        rows = _rows([s.forecast for s in day.times], report.units, extra, ascii)
        lines.append(f"{day.date.day:>2} {day.date:%B %Y}")
        lines.append(format_table(header, rows, ascii))
    return "\n".join(lines)


def report_to_dict(report: ForecastReport) -> dict:
    return {
        "location": asdict(report.location),
        "units": report.units.value,
        "data": [
            {
                "date": day.date.isoformat(),
                "times": [
                    {"time": s.time.isoformat(), "forecast": asdict(s.forecast)}
                    for s in day.times
                ],
            }
            for day in report.days
        ],
    }


def format_report_json(report: ForecastReport) -> str:
    """JSON report for programmatic consumption."""
    return json.dumps(report_to_dict(report))


def error_chain(error: BaseException) -> list[str]:
    """Messages of an exception and each exception that caused it."""
    chain: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(str(current) or type(current).__name__)
        current = current.__cause__ or current.__context__
    return chain


def format_error_text(error: BaseException) -> str:
    lines = ["Error: "]
    for i, message in enumerate(error_chain(error)):
        lines.append(f"  {i}: {message}")
    return "\n".join(lines)


def format_error_json(error: BaseException) -> str:
    chain = error_chain(error)
    return json.dumps({"error": {"message": chain[0], "chain": chain}})
