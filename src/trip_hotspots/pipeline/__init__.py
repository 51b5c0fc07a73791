# ============================================
# File: src/trip_hotspots/pipeline/__init__.py
# Description:
#   Public functions of the trip_hotspots pipeline.
#
#   Stages:
#     - parse_trip_lines : raw line -> (zone, hour)
#     - aggregate_trips  : tallies + top-k rankings
#     - ingest_trips     : file / line stream -> aggregator
#     - build_reports    : rankings -> DataFrame / CSV / text
# ============================================

from __future__ import annotations

from .aggregate_trips import IngestStats, SlotCount, TripAggregator, ZoneCount
from .build_reports import format_report, slots_frame, write_reports, zones_frame
from .ingest_trips import analyze_file, ingest_file, ingest_lines
from .parse_trip_lines import (
    ParsedTrip,
    parse_hour,
    parse_hour_clock,
    parse_hour_datetime,
    parse_trip_line,
)

__all__ = [
    "IngestStats",
    "ParsedTrip",
    "SlotCount",
    "TripAggregator",
    "ZoneCount",
    "analyze_file",
    "format_report",
    "ingest_file",
    "ingest_lines",
    "parse_hour",
    "parse_hour_clock",
    "parse_hour_datetime",
    "parse_trip_line",
    "slots_frame",
    "write_reports",
    "zones_frame",
]
