# ============================================
# File: src/trip_hotspots/cli.py
# Description:
#   Command line entry point: ingest one trip file, print the
#   busiest zones and (zone, hour) slots, optionally write CSVs.
# ============================================

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from .config import (
    DEFAULT_HEADER_TOKEN,
    DEFAULT_TOP_K,
    LAYOUT_DATETIME,
    TIMESTAMP_LAYOUTS,
    ParserConfig,
)
from .pipeline import analyze_file, format_report, write_reports


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="trip-hotspots",
        description="Rank the busiest pickup zones and (zone, hour) slots of a trip file.",
    )
    parser.add_argument("input", type=Path, help="Comma separated trip file.")
    parser.add_argument(
        "--top-zones",
        type=int,
        default=DEFAULT_TOP_K,
        help=f"Number of zones to report (default: {DEFAULT_TOP_K}).",
    )
    parser.add_argument(
        "--top-slots",
        type=int,
        default=DEFAULT_TOP_K,
        help=f"Number of (zone, hour) slots to report (default: {DEFAULT_TOP_K}).",
    )
    parser.add_argument(
        "--layout",
        choices=TIMESTAMP_LAYOUTS,
        default=LAYOUT_DATETIME,
        help=(
            "Pickup timestamp layout (default: datetime, e.g. 2024-01-01 08:15:00). "
            "auto tries datetime then clock per line and can misparse files "
            "that mix both dialects."
        ),
    )
    header = parser.add_mutually_exclusive_group()
    header.add_argument(
        "--header-token",
        default=DEFAULT_HEADER_TOKEN,
        help=f"Skip the first line when it contains this token (default: {DEFAULT_HEADER_TOKEN}).",
    )
    header.add_argument(
        "--no-header",
        dest="header_token",
        action="store_const",
        const=None,
        help="Treat the first line as data.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Also write the rankings as CSV files into this folder.",
    )
    parser.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Show a progress bar while reading the input.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    config = ParserConfig(layout=args.layout)

    print(f"[trip_hotspots] Input : {args.input}")
    aggregator = analyze_file(
        args.input,
        config=config,
        header_token=args.header_token,
        progress=args.progress,
    )

    stats = aggregator.stats
    if stats.files_failed:
        raise SystemExit(f"Could not read {args.input}. No trips ingested.")

    print(
        f"[trip_hotspots] Read {stats.lines_read} lines: "
        f"{stats.records_ingested} trips, {stats.lines_rejected} rejected, "
        f"{stats.header_skipped} header."
    )
    print()
    print(format_report(aggregator, args.top_zones, args.top_slots))

    if args.output_dir is not None:
        print()
        write_reports(aggregator, args.output_dir, args.top_zones, args.top_slots)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
