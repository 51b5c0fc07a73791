# ============================================
# File: src/trip_hotspots/pipeline/build_reports.py
# Description:
#   Turn the aggregator rankings into DataFrames, CSV files
#   and a plain-text summary:
#
#     1) top_pickup_zones.csv : rank, zone, trips
#     2) top_busy_slots.csv   : rank, zone, hour, trips
# ============================================

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Sequence

import pandas as pd

from ..config import DEFAULT_OUTPUT_DIR, DEFAULT_TOP_K
from .aggregate_trips import SlotCount, TripAggregator, ZoneCount

ZONE_COLUMNS = ["rank", "zone", "trips"]
SLOT_COLUMNS = ["rank", "zone", "hour", "trips"]

ZONES_FILE = "top_pickup_zones.csv"
SLOTS_FILE = "top_busy_slots.csv"


def zones_frame(rows: Sequence[ZoneCount]) -> pd.DataFrame:
    records = [
        {"rank": rank, "zone": row.zone, "trips": int(row.count)}
        for rank, row in enumerate(rows, start=1)
    ]
    return pd.DataFrame(records, columns=ZONE_COLUMNS)


def slots_frame(rows: Sequence[SlotCount]) -> pd.DataFrame:
    records = [
        {"rank": rank, "zone": row.zone, "hour": int(row.hour), "trips": int(row.count)}
        for rank, row in enumerate(rows, start=1)
    ]
    return pd.DataFrame(records, columns=SLOT_COLUMNS)


def write_reports(
    aggregator: TripAggregator,
    output_dir: Optional[str | Path] = None,
    top_zones: int = DEFAULT_TOP_K,
    top_slots: int = DEFAULT_TOP_K,
) -> Dict[str, Path]:
    """
    Write both rankings as CSV under output_dir (default:
    data/processed/trip_hotspots).

    Returns a dict with the paths of the files written.
    """
    out_dir = Path(output_dir) if output_dir is not None else DEFAULT_OUTPUT_DIR
    out_dir.mkdir(parents=True, exist_ok=True)

    zones_path = out_dir / ZONES_FILE
    slots_path = out_dir / SLOTS_FILE

    print(f"[build_reports] Writing {zones_path}")
    zones_frame(aggregator.top_zones(top_zones)).to_csv(zones_path, index=False)

    print(f"[build_reports] Writing {slots_path}")
    slots_frame(aggregator.top_busy_slots(top_slots)).to_csv(slots_path, index=False)

    return {
        "top_zones": zones_path,
        "top_slots": slots_path,
    }


def format_report(
    aggregator: TripAggregator,
    top_zones: int = DEFAULT_TOP_K,
    top_slots: int = DEFAULT_TOP_K,
) -> str:
    lines = [f"Top {top_zones} pickup zones:"]
    zones = aggregator.top_zones(top_zones)
    if not zones:
        lines.append("  (no trips)")
    for rank, row in enumerate(zones, start=1):
        lines.append(f"  {rank}. {row.zone} -> {row.count} trips")

    lines.append("")
    lines.append(f"Top {top_slots} busy slots (zone, hour):")
    slots = aggregator.top_busy_slots(top_slots)
    if not slots:
        lines.append("  (no trips)")
    for rank, row in enumerate(slots, start=1):
        lines.append(f"  {rank}. {row.zone} @ {row.hour:02d}:00 -> {row.count} trips")

    return "\n".join(lines)
