# ============================================
# File: src/trip_hotspots/config.py
# Description:
#   Default paths, report sizes and the parser configuration
#   shared by the pipeline stages and the command line.
# ============================================

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_OUTPUT_DIR = Path("data/processed/trip_hotspots")

# First line of the trip files, e.g. "TripID,PickupZoneID,DropoffZoneID,..."
DEFAULT_HEADER_TOKEN = "TripID"

DEFAULT_TOP_K = 10
HOURS_PER_DAY = 24

LAYOUT_DATETIME = "datetime"  # "YYYY-MM-DD HH:MM:SS"
LAYOUT_CLOCK = "clock"  # "<date> HH:MM"
LAYOUT_AUTO = "auto"
TIMESTAMP_LAYOUTS = (LAYOUT_DATETIME, LAYOUT_CLOCK, LAYOUT_AUTO)


@dataclass(frozen=True)
class ParserConfig:
    """
    Fixed field layout of one trip record.

    Attributes:
        delimiter: field separator, no quoting support.
        zone_field: index of the pickup zone field.
        timestamp_field: index of the pickup timestamp field.
        min_fields: records with fewer fields are rejected.
        layout: timestamp dialect, one of TIMESTAMP_LAYOUTS.
    """

    delimiter: str = ","
    zone_field: int = 1
    timestamp_field: int = 3
    min_fields: int = 6
    layout: str = LAYOUT_DATETIME

    def __post_init__(self) -> None:
        if not self.delimiter:
            raise ValueError("delimiter must be a non-empty string")
        if self.layout not in TIMESTAMP_LAYOUTS:
            raise ValueError(
                f"Unknown timestamp layout {self.layout!r} "
                f"(expected one of: {', '.join(TIMESTAMP_LAYOUTS)})"
            )
        if self.min_fields <= max(self.zone_field, self.timestamp_field):
            raise ValueError(
                "min_fields must cover both the zone and the timestamp field"
            )


DEFAULT_PARSER_CONFIG = ParserConfig()
