# srcomp_client/timestamps.py
"""
Timestamp normalization for time-bearing payloads.

The API sends every time as an ISO-8601 string with a UTC offset. These helpers
return copies of Match, Period and Current payloads with those strings replaced
by datetimes; every other key is passed through untouched.

Unparseable or missing timestamps become None rather than raising. The API is
trusted, so a bad value degrades that one field instead of failing the whole
response.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

V = TypeVar("V")
R = TypeVar("R")

MATCH_LIST_KEYS = ("matches", "staging_matches", "shepherding_matches")
PERIOD_TIME_KEYS = ("start_time", "end_time", "max_end_time")


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 string into a datetime, keeping its offset.

    Strings without an offset give a naive datetime (no zone is assumed).
    Values which are already datetimes are returned as-is. A missing value
    (None) gives None silently; anything else that does not parse gives None
    with a warning.
    """
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        logger.warning("Expected an ISO-8601 string, got %r", value)
        return None
    try:
        return isoparse(value)
    except (ValueError, OverflowError) as e:
        logger.warning("Unparseable timestamp %r: %s", value, e)
        return None


def map_values(mapping: Mapping[str, V], fn: Callable[[V], R]) -> Dict[str, R]:
    """Return a new dict with fn applied to every value; keys are kept as-is."""
    return {key: fn(value) for key, value in mapping.items()}


def _window(window: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        **window,
        "start": parse_timestamp(window.get("start")),
        "end": parse_timestamp(window.get("end")),
    }


def normalize_match(match: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Convert the times block of a match payload.

    game.start/end, slot.start/end, staging.opens/closes/signal_teams and every
    entry of staging.signal_shepherds are parsed. Non-time fields (arena, num,
    teams, type, scores, ...) are shared with the input, not copied.
    """
    times = match["times"]
    staging = times["staging"]
    return {
        **match,
        "times": {
            **times,
            "game": _window(times["game"]),
            "slot": _window(times["slot"]),
            "staging": {
                **staging,
                "opens": parse_timestamp(staging.get("opens")),
                "closes": parse_timestamp(staging.get("closes")),
                "signal_teams": parse_timestamp(staging.get("signal_teams")),
                "signal_shepherds": map_values(staging.get("signal_shepherds") or {}, parse_timestamp),
            },
        },
    }


def normalize_period(period: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert start_time, end_time and max_end_time of a period payload."""
    out = dict(period)
    for key in PERIOD_TIME_KEYS:
        out[key] = parse_timestamp(period.get(key))
    return out


def normalize_current(current: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert the current time and every match in the three match lists."""
    out = dict(current)
    for key in MATCH_LIST_KEYS:
        out[key] = [normalize_match(m) for m in current[key]]
    out["time"] = parse_timestamp(current.get("time"))
    return out
