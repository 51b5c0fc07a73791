# ============================================
# File: src/trip_hotspots/pipeline/aggregate_trips.py
# Description:
#   In-memory tallies of parsed trips and the top-k rankings
#   built on them:
#
#   1) zone tally  : pickup zone -> trip count
#   2) slot tally  : pickup zone -> 24 hourly trip counts
#
#   Both tallies are updated together by record(), so for every
#   zone sum(slot_counts[zone]) == zone_counts[zone].
# ============================================

from __future__ import annotations

from collections import defaultdict
from dataclasses import asdict, dataclass
from typing import Dict, List

from ..config import DEFAULT_PARSER_CONFIG, HOURS_PER_DAY, ParserConfig
from .parse_trip_lines import parse_trip_line


@dataclass(frozen=True)
class ZoneCount:
    zone: str
    count: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SlotCount:
    zone: str
    hour: int
    count: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class IngestStats:
    """Counters for one aggregator's ingestion passes."""

    lines_read: int = 0
    header_skipped: int = 0
    records_ingested: int = 0
    lines_rejected: int = 0
    files_ingested: int = 0
    files_failed: int = 0

    def to_dict(self) -> dict:
        return {
            "lines_read": self.lines_read,
            "header_skipped": self.header_skipped,
            "records_ingested": self.records_ingested,
            "lines_rejected": self.lines_rejected,
            "files_ingested": self.files_ingested,
            "files_failed": self.files_failed,
        }


class TripAggregator:
    """
    Per-zone and per-(zone, hour) trip counts for one ingestion session.

    Not thread-safe: callers feeding one aggregator from several threads
    must serialize record().
    """

    def __init__(self, config: ParserConfig = DEFAULT_PARSER_CONFIG) -> None:
        self.config = config
        self.zone_counts: Dict[str, int] = defaultdict(int)
        self.slot_counts: Dict[str, List[int]] = defaultdict(
            lambda: [0] * HOURS_PER_DAY
        )
        self.stats = IngestStats()

    def __len__(self) -> int:
        return len(self.zone_counts)

    @property
    def total_trips(self) -> int:
        return sum(self.zone_counts.values())

    def record(self, zone: str, hour: int) -> None:
        if not 0 <= hour < HOURS_PER_DAY:
            raise ValueError(f"hour must be in [0, {HOURS_PER_DAY - 1}], got {hour}")

        self.zone_counts[zone] += 1
        self.slot_counts[zone][hour] += 1

    def process_line(self, line: str) -> bool:
        """Parse one raw line and record it. Returns False if it was rejected."""
        parsed = parse_trip_line(line, self.config)
        if parsed is None:
            self.stats.lines_rejected += 1
            return False

        self.record(parsed.zone, parsed.hour)
        self.stats.records_ingested += 1
        return True

    # ------------------ read-only views ------------------
    # never insert missing zones into the tallies

    def zone_count(self, zone: str) -> int:
        return self.zone_counts.get(zone, 0)

    def hourly_counts(self, zone: str) -> List[int]:
        hours = self.slot_counts.get(zone)
        if hours is None:
            return [0] * HOURS_PER_DAY
        return list(hours)

    def top_zones(self, k: int) -> List[ZoneCount]:
        """
        Up to k zones ordered by trip count (desc), then zone name (asc).
        """
        if k <= 0:
            return []

        rows = [ZoneCount(zone, count) for zone, count in self.zone_counts.items()]
        rows.sort(key=lambda row: (-row.count, row.zone))
        return rows[:k]

    def top_busy_slots(self, k: int) -> List[SlotCount]:
        """
        Up to k (zone, hour) slots with at least one trip, ordered by
        trip count (desc), then zone (asc), then hour (asc).
        """
        if k <= 0:
            return []

        rows: List[SlotCount] = []
        for zone, hours in self.slot_counts.items():
            for hour, count in enumerate(hours):
                if count > 0:
                    rows.append(SlotCount(zone, hour, count))

        rows.sort(key=lambda row: (-row.count, row.zone, row.hour))
        return rows[:k]
