"""
Command-line interface for bugwatch.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date

import uvicorn
from pydantic import ValidationError

from bugwatch import __version__
from bugwatch.config import get_settings
from bugwatch.core import build_activity_report
from bugwatch.flows.refresh import refresh_activity
from bugwatch.schemas import ActivityReport, Location


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bugwatch",
        description="Weather-based insect activity predictions for insect spotters",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'predict' command - one-off prediction
    predict_parser = subparsers.add_parser("predict", help="Predict insect activity")
    predict_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    predict_parser.add_argument("--lon", type=float, default=None, help="Longitude")
    predict_parser.add_argument(
        "--month",
        type=int,
        choices=range(1, 13),
        metavar="{1..12}",
        default=None,
        help="Month to use for the season (default: current month)",
    )
    predict_parser.add_argument("--json", action="store_true", help="Print the report as JSON")

    subparsers.add_parser("info", help="Show application info")

    # 'refresh' command - fetch weather and cache the report
    subparsers.add_parser("refresh", help="Fetch weather and update the cached report")

    # 'serve' command - run the HTTP API
    serve_parser = subparsers.add_parser("serve", help="Serve the HTTP API")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def format_report(report: ActivityReport) -> str:
    """Render a report as plain text."""
    w = report.weather
    p = report.insect_activity
    lines = [
        f"Location:    {w.location}",
        f"Weather:     {w.condition}, {w.temperature:.1f}°C, "
        f"{w.humidity:.0f}% humidity, wind {w.wind_speed:.1f} m/s",
        f"Overall:     {p.overall}",
        f"Flying:      {p.flying}",
        f"Seasonal:    {p.seasonal.activity} ({', '.join(p.seasonal.insects)})",
        "",
        "Recommendations:",
    ]
    lines.extend(f"  - {line}" for line in p.recommendations)
    return "\n".join(lines)


def cmd_predict(args: argparse.Namespace) -> int:
    """Handle the 'predict' command."""
    settings = get_settings()
    lat = args.lat if args.lat is not None else settings.lat
    lon = args.lon if args.lon is not None else settings.lon

    try:
        Location(lat=lat, lon=lon)
    except ValidationError:
        print(
            "Error: latitude must be between -90 and 90, longitude between -180 and 180",
            file=sys.stderr,
        )
        return 1

    today = date.today()
    if args.month is not None:
        today = today.replace(month=args.month, day=1)

    report = build_activity_report(lat, lon, today=today)
    if args.json:
        print(json.dumps(report.model_dump(mode="json", by_alias=True), indent=2))
    else:
        print(format_report(report))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Weather source: {settings.weather_source}")
    print(f"Weather API key: {'set' if settings.weather_api_key else 'not set'}")
    return 0


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Handle the 'refresh' command."""
    settings = get_settings()
    print(f"Refreshing insect activity for ({settings.lat}, {settings.lon})...")
    refresh_activity(lat=settings.lat, lon=settings.lon)
    print("Done.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: run the API with uvicorn."""
    settings = get_settings()
    host = args.host if args.host is not None else settings.api_host
    port = args.port if args.port is not None else settings.api_port

    print(f"Serving API on http://{host}:{port}/ (Ctrl+C to stop)")
    uvicorn.run("bugwatch.api:app", host=host, port=port, log_level=settings.log_level.lower())
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    level = logging.DEBUG if args.debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "predict": cmd_predict,
        "info": cmd_info,
        "refresh": cmd_refresh,
        "serve": cmd_serve,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
