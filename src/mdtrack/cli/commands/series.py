"""Series command for mdtrack CLI."""

import asyncio
import csv
import datetime
import io
import json

from ...core.config import Config
from ...core.dates import DayCalendar
from ...core.exceptions import MDTrackError
from ...core.instrumentation import configure_tracing, shutdown_tracing
from ...core.types import OutputFormat
from ...datasets import DatasetCollection
from ...query import parse_query_spec
from ...services import TrackingService
from ...sources import FileSystemConfig, FileSystemSource


def add_series_arguments(parser) -> None:
    """Add arguments for the series command.

    Args:
        parser: Argument parser for the command.
    """
    parser.add_argument("path", help="Directory of dated markdown notes")
    parser.add_argument(
        "-q",
        "--query",
        action="append",
        required=True,
        dest="queries",
        metavar="TYPE:TARGET",
        help="Query such as tag:exercise, frontmatter:weight, wiki:Gym, text:'(?<value>\\d+) km'",
    )
    parser.add_argument("--start", help="First day of the series (in --date-format)")
    parser.add_argument("--end", help="Last day of the series (in --date-format)")
    parser.add_argument("--date-format", help="Date format of note names (default: YYYY-MM-DD)")
    parser.add_argument("--prefix", help="Text before the date in note names")
    parser.add_argument("--suffix", help="Text after the date in note names")
    parser.add_argument(
        "-g",
        "--glob",
        action="append",
        dest="globs",
        help="File glob pattern, repeatable; prefix with ! to exclude (default: **/*.md)",
    )
    parser.add_argument("--weight", type=float, help="Value counted per match (default: 1.0)")
    parser.add_argument("--ignore-attached-value", action="store_true")
    parser.add_argument("--ignore-zero-value", action="store_true")
    parser.add_argument("--accum", action="store_true", help="Output running totals")
    parser.add_argument("--penalty", type=float, help="Value used for days without data")
    parser.add_argument(
        "-f",
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.JSON.value,
        help="Output format (default: json)",
    )


def handle_series(args, config: Config) -> None:
    """Handle series command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    print(asyncio.run(_handle_series_async(args, config)))


def _parse_day(text: str | None, calendar: DayCalendar) -> datetime.date | None:
    if not text:
        return None
    parsed = calendar.parse(text)
    if parsed is None:
        raise MDTrackError(f"Date {text!r} does not match format {calendar.date_format!r}")
    return parsed


async def _handle_series_async(args, config: Config) -> str:
    """Async handler for series.

    Returns:
        The formatted output.
    """
    settings = config.source
    if args.date_format:
        settings.date_format = args.date_format
    if args.prefix is not None:
        settings.date_prefix = args.prefix
    if args.suffix is not None:
        settings.date_suffix = args.suffix
    if args.globs:
        settings.glob_patterns = args.globs

    calendar = DayCalendar(settings.date_format)
    weight = args.weight if args.weight is not None else config.tracking.default_weight
    queries = [
        parse_query_spec(
            spec,
            id=index,
            weight=weight,
            ignore_attached_value=args.ignore_attached_value,
            ignore_zero_value=args.ignore_zero_value,
            accumulate=args.accum,
            penalty=args.penalty,
            name=spec,
        )
        for index, spec in enumerate(args.queries)
    ]

    source = FileSystemSource(FileSystemConfig.from_settings(args.path, settings), calendar)
    service = TrackingService(source, calendar=calendar, settings=config.tracking)

    configure_tracing(config.tracing)
    try:
        result = await service.track(
            queries,
            start=_parse_day(args.start, calendar),
            end=_parse_day(args.end, calendar),
        )
    finally:
        shutdown_tracing()

    if OutputFormat(args.format) is OutputFormat.CSV:
        return format_csv(result.datasets, calendar)
    return format_json(result.datasets, calendar)


def format_json(datasets: DatasetCollection, calendar: DayCalendar) -> str:
    """Render a collection as JSON: the dates plus one entry per dataset."""
    payload = {
        "dates": [calendar.format(day) for day in datasets.dates],
        "datasets": [
            {
                "id": dataset.id,
                "name": dataset.name,
                "type": dataset.query.type.value,
                "target": dataset.query.target,
                "values": dataset.values,
                "y_min": dataset.y_min,
                "y_max": dataset.y_max,
                "not_null": dataset.length_not_null,
            }
            for dataset in datasets
        ],
    }
    return json.dumps(payload, indent=2)


def format_csv(datasets: DatasetCollection, calendar: DayCalendar) -> str:
    """Render a collection as CSV: one row per day, one column per dataset."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["date", *datasets.names])
    columns = [dataset.values for dataset in datasets]
    for index, day in enumerate(datasets.dates):
        row = [calendar.format(day)]
        for values in columns:
            value = values[index]
            row.append("" if value is None else f"{value:g}")
        writer.writerow(row)
    return buffer.getvalue().rstrip("\n")
