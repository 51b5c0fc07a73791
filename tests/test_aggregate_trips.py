from __future__ import annotations

import random

import pytest

from trip_hotspots.pipeline.aggregate_trips import SlotCount, TripAggregator, ZoneCount

SCENARIO = [
    "1,ZoneA,X,2024-01-01 08:15:00,Y,Z",
    "2,ZoneA,X,2024-01-01 08:45:00,Y,Z",
    "3,ZoneB,X,2024-01-01 09:05:00,Y,Z",
]


def _aggregate(lines: list[str]) -> TripAggregator:
    aggregator = TripAggregator()
    for line in lines:
        aggregator.process_line(line)
    return aggregator


def test_end_to_end_scenario() -> None:
    aggregator = _aggregate(SCENARIO)

    assert aggregator.top_zones(2) == [ZoneCount("ZoneA", 2), ZoneCount("ZoneB", 1)]
    assert aggregator.top_busy_slots(3) == [
        SlotCount("ZoneA", 8, 2),
        SlotCount("ZoneB", 9, 1),
    ]


def test_record_updates_both_tallies() -> None:
    aggregator = TripAggregator()
    aggregator.record("Z1", 5)
    aggregator.record("Z1", 5)
    aggregator.record("Z1", 23)

    assert aggregator.zone_count("Z1") == 3
    hours = aggregator.hourly_counts("Z1")
    assert hours[5] == 2
    assert hours[23] == 1
    assert sum(hours) == 3
    assert len(aggregator) == 1
    assert aggregator.total_trips == 3


def test_record_rejects_out_of_range_hour() -> None:
    aggregator = TripAggregator()
    with pytest.raises(ValueError):
        aggregator.record("Z1", 24)
    with pytest.raises(ValueError):
        aggregator.record("Z1", -1)
    assert aggregator.zone_counts == {}
    assert aggregator.slot_counts == {}


def test_hourly_counts_is_a_copy() -> None:
    aggregator = TripAggregator()
    aggregator.record("Z1", 1)
    aggregator.hourly_counts("Z1")[1] = 100
    assert aggregator.hourly_counts("Z1")[1] == 1
    assert aggregator.hourly_counts("missing") == [0] * 24


def test_lookups_do_not_insert_missing_zones() -> None:
    aggregator = TripAggregator()
    aggregator.record("Z1", 4)

    assert aggregator.zone_count("Z2") == 0
    assert aggregator.hourly_counts("Z2") == [0] * 24

    assert set(aggregator.zone_counts) == {"Z1"}
    assert set(aggregator.slot_counts) == {"Z1"}
    assert len(aggregator) == 1
    assert aggregator.top_zones(10) == [ZoneCount("Z1", 1)]
    assert aggregator.top_busy_slots(10) == [SlotCount("Z1", 4, 1)]


def test_ties_break_on_zone_then_hour() -> None:
    aggregator = TripAggregator()
    for zone, hour in [("b", 3), ("a", 7), ("a", 2), ("c", 1), ("c", 1)]:
        aggregator.record(zone, hour)

    assert aggregator.top_zones(10) == [
        ZoneCount("a", 2),
        ZoneCount("c", 2),
        ZoneCount("b", 1),
    ]
    assert aggregator.top_busy_slots(10) == [
        SlotCount("c", 1, 2),
        SlotCount("a", 2, 1),
        SlotCount("a", 7, 1),
        SlotCount("b", 3, 1),
    ]


@pytest.mark.parametrize("k", [0, -1, -100])
def test_non_positive_k_returns_empty(k: int) -> None:
    aggregator = _aggregate(SCENARIO)
    assert aggregator.top_zones(k) == []
    assert aggregator.top_busy_slots(k) == []


def test_truncation_is_prefix_of_full_ranking() -> None:
    aggregator = TripAggregator()
    for index in range(30):
        for _ in range(index % 7 + 1):
            aggregator.record(f"zone-{index:02d}", index % 24)

    full = aggregator.top_zones(1000)
    assert len(full) == 30
    for k in range(0, 35):
        prefix = aggregator.top_zones(k)
        assert len(prefix) == min(k, 30)
        assert prefix == full[:k]


def test_rankings_are_idempotent_and_read_only() -> None:
    aggregator = _aggregate(SCENARIO)
    zone_snapshot = dict(aggregator.zone_counts)

    assert aggregator.top_zones(5) == aggregator.top_zones(5)
    assert aggregator.top_busy_slots(5) == aggregator.top_busy_slots(5)
    assert aggregator.zone_counts == zone_snapshot


def test_zone_counts_match_slot_counts() -> None:
    rng = random.Random(7)
    aggregator = TripAggregator()
    for _ in range(500):
        aggregator.record(rng.choice("ABCDE"), rng.randrange(24))

    slot_totals: dict[str, int] = {}
    for row in aggregator.top_busy_slots(10_000):
        slot_totals[row.zone] = slot_totals.get(row.zone, 0) + row.count

    assert {row.zone: row.count for row in aggregator.top_zones(10_000)} == slot_totals


def test_shuffled_input_gives_same_ranking() -> None:
    lines = [
        f"{i},Zone{i % 4},X,2024-03-0{i % 9 + 1} {i % 3 + 10:02d}:00:00,Y,Z"
        for i in range(60)
    ]
    shuffled = list(lines)
    random.Random(3).shuffle(shuffled)

    first = _aggregate(lines)
    second = _aggregate(shuffled)

    assert first.top_zones(10) == second.top_zones(10)
    assert first.top_busy_slots(50) == second.top_busy_slots(50)


@pytest.mark.parametrize(
    "line",
    [
        "1,ZoneA,X,2024-01-01 08:15:00,Y",
        ",,x,2024-01-01 10:00:00,,",
        "1,ZoneA,X,2024-01-01 25:00:00,Y,Z",
        "1,ZoneA,X,2024-01-01 aa:00:00,Y,Z",
        "1,ZoneA,X,2024-01-01x08:15:00,Y,Z",
    ],
)
def test_malformed_line_leaves_tallies_untouched(line: str) -> None:
    aggregator = _aggregate(SCENARIO)
    zones_before = aggregator.top_zones(10)
    slots_before = aggregator.top_busy_slots(10)

    assert aggregator.process_line(line) is False

    assert aggregator.top_zones(10) == zones_before
    assert aggregator.top_busy_slots(10) == slots_before
    assert aggregator.stats.lines_rejected == 1
    assert aggregator.stats.records_ingested == 3


def test_report_rows_to_dict() -> None:
    assert ZoneCount("A", 3).to_dict() == {"zone": "A", "count": 3}
    assert SlotCount("A", 4, 3).to_dict() == {"zone": "A", "hour": 4, "count": 3}
