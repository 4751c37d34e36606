"""Command line front-end: ``amlich s2l 2024-02-10`` prints the conversion as JSON."""

import argparse
import sys

import orjson

from .config import LOG_LEVEL
from .log import setup_logging
from .lunar import today
from .tool import CONVERSION_TYPES, date_conversion_tool


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amlich",
        description="Convert between Solar (Dương lịch) and Lunar (Âm lịch) dates.",
    )
    parser.add_argument("conversion_type", choices=CONVERSION_TYPES, help="s2l = Solar->Lunar, l2s = Lunar->Solar")
    parser.add_argument(
        "date",
        nargs="?",
        default=None,
        help="Date in YYYY-MM-DD (defaults to today for s2l)",
    )
    parser.add_argument("--leap-month", action="store_true", help="Lunar date lies in the leap month (l2s only)")
    parser.add_argument("--log-level", default=None, help="structlog level, e.g. DEBUG")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.date is None and args.conversion_type == "l2s":
        parser.error("a lunar date is required for l2s")
    setup_logging(args.log_level or LOG_LEVEL)

    date = args.date or today().isoformat()
    response = date_conversion_tool(args.conversion_type, date, leap_month=args.leap_month)
    sys.stdout.write(orjson.dumps(response, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")
    return 1 if "error" in response else 0
