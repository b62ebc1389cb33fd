from __future__ import annotations

import datetime
from datetime import timedelta
from zoneinfo import ZoneInfo

from .const import (
    ROUNDING_MODES,
    ROUNDING_NEAREST_MINUTE,
    ROUNDING_NONE,
    TIME_FORMAT_12H,
    TIME_FORMAT_24H,
    TIME_FORMATS,
    UNAVAILABLE_GLYPH,
)
from .errors import InputInvalidError


def _round_half_up(dt: datetime.datetime) -> datetime.datetime:
    if dt.second >= 30:
        dt += timedelta(minutes=1)
    return dt.replace(second=0, microsecond=0)


def round_time(value: datetime.datetime | None, rounding: str = ROUNDING_NEAREST_MINUTE):
    """Round to the nearest minute (30s rounds up), or pass through for "none"."""
    if rounding not in ROUNDING_MODES:
        raise InputInvalidError(f"Unknown rounding mode {rounding!r}")
    if not value:
        return value
    if rounding == ROUNDING_NONE:
        return value
    return _round_half_up(value)


def format_zman(
    value,
    time_zone: str | None = None,
    time_format: str = TIME_FORMAT_12H,
    rounding: str = ROUNDING_NEAREST_MINUTE,
    fallback: str = UNAVAILABLE_GLYPH,
) -> str:
    """
    Render a zman for display.

    ``value`` may be a datetime, None or an ``Unavailable`` member; anything
    without an instant renders as ``fallback``. Seconds are shown only
    when rounding is "none".
    """
    if time_format not in TIME_FORMATS:
        raise InputInvalidError(f"Unknown time format {time_format!r}")
    if not isinstance(value, datetime.datetime):
        return fallback

    if time_zone and value.tzinfo is not None:
        value = value.astimezone(ZoneInfo(time_zone))
    dt_local = round_time(value, rounding)
    seconds = f":{dt_local.second:02d}" if rounding == ROUNDING_NONE else ""

    if time_format == TIME_FORMAT_24H:
        return f"{dt_local.hour:02d}:{dt_local.minute:02d}{seconds}"

    hour = dt_local.hour % 12 or 12
    ampm = "AM" if dt_local.hour < 12 else "PM"
    return f"{hour}:{dt_local.minute:02d}{seconds} {ampm}"
