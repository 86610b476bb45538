"""CLI entry point for metcast."""

import argparse
import logging
import sys

from pydantic import ValidationError

from metcast import __version__
from metcast.config.loader import get_config_value, load_config
from metcast.config.schema import MetcastConfig
from metcast.errors import MetcastError
from metcast.models.common import UnitSystem
from metcast.models.location import Location
from metcast.models.query import TimeRange
from metcast.pipeline.forecast_pipeline import ForecastPipeline
from metcast.reporting.formatters import (
    format_error_json,
    format_error_text,
    format_report_json,
    format_report_text,
)

DEFAULT_CONFIG = "metcast.yaml"

logger = logging.getLogger(__name__)


def _time_range(value: str) -> str:
    try:
        TimeRange.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return value


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError("must be zero or positive")
    return n


def _positive(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metcast",
        description="Met Office forecasts resampled onto the hours you care about",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress to stderr"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc = sub.add_parser("forecast", help="Show the forecast for a location")
    fc.add_argument(
        "location", nargs="?", default=None,
        help="Location to forecast. Blank means the configured home coordinates",
    )
    fc.add_argument(
        "-d", "--day", type=_non_negative, default=None,
        help="Day to start forecasting, relative to today (0 is today)",
    )
    fc.add_argument(
        "-c", "--count", type=_positive, default=None,
        help="Number of days to forecast",
    )
    fc.add_argument(
        "-t", "--time-range", type=_time_range, default=None,
        help="Hours to forecast as start:step:count, e.g. 0:4:6",
    )
    fc.add_argument(
        "-j", "--json", action="store_true", default=None,
        help="Output forecast data and errors as JSON",
    )
    fc.add_argument(
        "-n", "--non-interactive", action="store_true",
        help="Reject ambiguous locations instead of asking",
    )
    fc.add_argument(
        "-e", "--extra", action="store_true", default=None,
        help="Show wind, visibility, humidity and UV rows",
    )
    fc.add_argument(
        "-f", "--freedom-units", action="store_true", default=None,
        help="Use degrees Fahrenheit and mph instead of Celsius and km/h",
    )
    fc.add_argument(
        "-a", "--ascii", action="store_true", default=None,
        help="Plain ASCII output, status shown as two-letter codes",
    )

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. query.time_range")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except (ValidationError, OSError) as e:
        print(f"Error: invalid config {args.config}: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def apply_overrides(config: MetcastConfig, args: argparse.Namespace) -> MetcastConfig:
    """Layer command-line flags over the loaded config."""
    query = {
        k: v for k, v in (
            ("day", args.day), ("count", args.count), ("time_range", args.time_range),
        )
        if v is not None
    }
    output = {
        k: v for k, v in (
            ("extra", args.extra), ("ascii", args.ascii), ("json_output", args.json),
        )
        if v is not None
    }
    if args.freedom_units:
        output["units"] = UnitSystem.CUSTOMARY
    return config.model_copy(
        update={
            "query": config.query.model_copy(update=query),
            "output": config.output.model_copy(update=output),
        }
    )


def prompt_choice(candidates: list[Location]) -> Location:
    """Ask on stderr which of several candidate locations was meant."""
    print(
        "That location is ambiguous - please pick one of the following",
        file=sys.stderr,
    )
    for i, loc in enumerate(candidates, start=1):
        print(f"  {i}. {loc.label}", file=sys.stderr)
    while True:
        print(f"Choice [1-{len(candidates)}, default 1]: ", end="", file=sys.stderr, flush=True)
        answer = sys.stdin.readline()
        if not answer:
            raise EOFError("no location chosen")
        answer = answer.strip()
        if not answer:
            return candidates[0]
        if answer.isdigit() and 1 <= int(answer) <= len(candidates):
            return candidates[int(answer) - 1]
        print("Please enter one of the numbers shown.", file=sys.stderr)


def _cmd_forecast(config: MetcastConfig, args) -> int:
    config = apply_overrides(config, args)
    output = config.output
    chooser = None if args.non_interactive else prompt_choice
    pipeline = ForecastPipeline(config, chooser=chooser)

    try:
        report = pipeline.run(args.location, non_interactive=args.non_interactive)
    except (MetcastError, EOFError) as e:
        logger.debug("Forecast failed", exc_info=True)
        if output.json_output:
            print(format_error_json(e))
        else:
            print(format_error_text(e))
        return 1

    if output.json_output:
        print(format_report_json(report))
    else:
        print(format_report_text(report, extra=output.extra, ascii=output.ascii))
    return 0


def _cmd_config(config: MetcastConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e}")
            return 1
        print(value)
        return 0
    else:
        print("Use: config show | config get key")
        return 1


if __name__ == "__main__":
    sys.exit(main())
