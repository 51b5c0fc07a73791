# ============================================
# File: src/trip_hotspots/pipeline/parse_trip_lines.py
# Description:
#   Extract (pickup zone, pickup hour) from one raw trip line.
#
#   Record layout (comma separated, no quoting):
#     TripID,PickupZone,DropoffZone,PickupTime,...
#
#   Two timestamp dialects are supported, chosen by ParserConfig.layout:
#     - "datetime": 2024-01-01 08:15:00 (hour at offsets 11-12)
#     - "clock"   : <date> 08:15       (hour = first token after a space)
#     - "auto"    : "datetime" first, then "clock"
#
#   Malformed lines are rejected by returning None, never by raising.
# ============================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import (
    DEFAULT_PARSER_CONFIG,
    HOURS_PER_DAY,
    LAYOUT_CLOCK,
    LAYOUT_DATETIME,
    ParserConfig,
)

# Only these are stripped; other unicode whitespace is kept as data.
FIELD_WHITESPACE = " \t\r\n"
ASCII_DIGITS = "0123456789"


@dataclass(frozen=True)
class ParsedTrip:
    zone: str
    hour: int


def trim_field(text: str) -> str:
    return text.strip(FIELD_WHITESPACE)


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and ch in ASCII_DIGITS


def _two_digit_hour(tens: str, ones: str) -> Optional[int]:
    if not (_is_digit(tens) and _is_digit(ones)):
        return None
    hour = int(tens) * 10 + int(ones)
    if hour >= HOURS_PER_DAY:
        return None
    return hour


def parse_hour_datetime(timestamp: str) -> Optional[int]:
    """
    Hour of a "YYYY-MM-DD HH:MM:SS" timestamp, or None.

    Only the structure around the hour is checked: a space at offset 10,
    a colon at offset 13 and two ASCII digits in between.
    """
    if len(timestamp) < 16:
        return None
    if timestamp[10] != " " or timestamp[13] != ":":
        return None
    return _two_digit_hour(timestamp[11], timestamp[12])


def parse_hour_clock(timestamp: str) -> Optional[int]:
    """
    Hour of the "HH:MM" token following the first space, or None.
    """
    space = timestamp.find(" ")
    if space < 0 or len(timestamp) - space - 1 < 3:
        return None

    clock = trim_field(timestamp[space + 1 :])
    if len(clock) < 5 or clock[2] != ":":
        return None
    return _two_digit_hour(clock[0], clock[1])


def parse_hour(timestamp: str, layout: str = LAYOUT_DATETIME) -> Optional[int]:
    if layout == LAYOUT_DATETIME:
        return parse_hour_datetime(timestamp)
    if layout == LAYOUT_CLOCK:
        return parse_hour_clock(timestamp)

    hour = parse_hour_datetime(timestamp)
    if hour is None:
        hour = parse_hour_clock(timestamp)
    return hour


def parse_trip_line(
    line: str,
    config: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> Optional[ParsedTrip]:
    """
    Parse one raw record into a ParsedTrip.

    Returns None when the line has too few fields, an empty zone,
    an empty timestamp, or a timestamp whose hour cannot be read
    under the configured layout.
    """
    fields = line.split(config.delimiter)
    if len(fields) < config.min_fields:
        return None

    zone = trim_field(fields[config.zone_field])
    if not zone:
        return None

    timestamp = trim_field(fields[config.timestamp_field])
    if not timestamp:
        return None

    hour = parse_hour(timestamp, config.layout)
    if hour is None:
        return None

    return ParsedTrip(zone=zone, hour=hour)
