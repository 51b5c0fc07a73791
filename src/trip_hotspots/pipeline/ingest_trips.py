# ============================================
# File: src/trip_hotspots/pipeline/ingest_trips.py
# Description:
#   Stream trip lines from a text file (or any iterable of lines)
#   into a TripAggregator.
#
#   - the first line is skipped when it contains the header token
#     (default "TripID"); otherwise it is parsed as data
#   - malformed lines are dropped and counted in aggregator.stats
#   - a file that cannot be opened leaves the tallies untouched
#   - lines end at "\n" only; a stray "\r" stays inside its record
# ============================================

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from tqdm import tqdm

from ..config import DEFAULT_HEADER_TOKEN, DEFAULT_PARSER_CONFIG, ParserConfig
from .aggregate_trips import TripAggregator


def is_header(line: str, header_token: Optional[str]) -> bool:
    return bool(header_token) and header_token in line


def ingest_lines(
    aggregator: TripAggregator,
    lines: Iterable[str],
    header_token: Optional[str] = DEFAULT_HEADER_TOKEN,
) -> None:
    """
    Fold lines into the aggregator, one parse-then-record step per line.

    header_token=None disables header detection.
    """
    stats = aggregator.stats
    first_line = True

    for line in lines:
        stats.lines_read += 1
        if first_line:
            first_line = False
            if is_header(line, header_token):
                stats.header_skipped += 1
                continue
        aggregator.process_line(line)


def ingest_file(
    aggregator: TripAggregator,
    path: str | Path,
    header_token: Optional[str] = DEFAULT_HEADER_TOKEN,
    progress: bool = False,
) -> None:
    """
    Ingest every line of the file at path.

    If the file cannot be opened this is a no-op apart from
    aggregator.stats.files_failed.
    """
    path = Path(path)
    try:
        handle = path.open("r", encoding="utf-8", errors="replace", newline="\n")
    except OSError:
        aggregator.stats.files_failed += 1
        return

    with handle:
        lines: Iterable[str] = handle
        if progress:
            lines = tqdm(handle, unit="lines", desc=path.name, leave=False)
        ingest_lines(aggregator, lines, header_token=header_token)

    aggregator.stats.files_ingested += 1


def analyze_file(
    path: str | Path,
    config: ParserConfig = DEFAULT_PARSER_CONFIG,
    header_token: Optional[str] = DEFAULT_HEADER_TOKEN,
    progress: bool = False,
) -> TripAggregator:
    """Build a fresh aggregator from one trip file."""
    aggregator = TripAggregator(config)
    ingest_file(aggregator, path, header_token=header_token, progress=progress)
    return aggregator
