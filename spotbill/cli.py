from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import canon, engine, formats, summary, transform
from .config import BillConfig, SourceConfig, default_config
from .exceptions import BillError
from .tariffs import load_tariff

logger = logging.getLogger(__name__)


def _delimiter(value: str) -> str:
    if value in ("\\t", "tab"):
        return "\t"
    if len(value) != 1:
        raise argparse.ArgumentTypeError("delimiter must be a single character")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spotbill",
        description="Check a spot-priced electricity bill against hourly consumption.",
    )
    parser.add_argument(
        "-j",
        "--json",
        choices=canon.JSON_VIEWS,
        default=None,
        help="Print one view as JSON instead of the summary.",
    )
    parser.add_argument("--spotfile", type=Path, help="Spot price CSV file.")
    parser.add_argument(
        "--sf-delimiter",
        type=_delimiter,
        default=canon.SPOT_DELIMITER,
        help="Spot price file delimiter (default: %(default)r).",
    )
    parser.add_argument("--consfile", type=Path, help="Consumption CSV file.")
    parser.add_argument(
        "--cf-delimiter",
        type=_delimiter,
        default=canon.CONSUMPTION_DELIMITER,
        help="Consumption file delimiter (default: %(default)r).",
    )
    parser.add_argument(
        "--tariff", type=Path, help="JSON file overriding the default tariff."
    )
    parser.add_argument(
        "--export", type=Path, help="Write the reconciled hourly dataset as CSV."
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _config_from_args(args: argparse.Namespace) -> BillConfig:
    base = default_config()
    return BillConfig(
        spot=SourceConfig(base.spot.fields, args.sf_delimiter),
        consumption=SourceConfig(base.consumption.fields, args.cf_delimiter),
        tariff=load_tariff(args.tariff) if args.tariff else base.tariff,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.spotfile is None or args.consfile is None:
        print("Mandatory spotfile or consumption file missing.", file=sys.stderr)
        return 2
    for path in (args.spotfile, args.consfile):
        if not path.is_file():
            print(f"File not found: {path}", file=sys.stderr)
            return 2

    try:
        report = engine.check_bill_files(
            args.spotfile, args.consfile, config=_config_from_args(args)
        )
    except BillError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not report.complete:
        print(
            f"Warning: input stopped on a parse error, totals cover "
            f"{report.totals.days} day(s).",
            file=sys.stderr,
        )

    if args.export:
        frame = transform.aligned_frame(
            report.consumption.consumption, report.spot.prices
        )
        frame.to_csv(args.export, index=False, float_format="%.3f")
        logger.info("Wrote %d row(s) to %s", len(frame), args.export)

    if args.json == "consumption":
        print(formats.to_json(formats.render_day_hour_map(report.consumption.consumption)))
    elif args.json == "spot":
        print(formats.to_json(formats.render_day_hour_map(report.spot.prices)))
    elif args.json == "totals":
        print(formats.to_json(formats.render_totals(report.totals)))
    else:
        print(summary.summarise(report.totals))
    return 0
