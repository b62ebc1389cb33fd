# tests/test_formatting.py

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from siddurcal.const import ROUNDING_NONE, TIME_FORMAT_24H
from siddurcal.errors import InputInvalidError
from siddurcal.formatting import format_zman, round_time
from siddurcal.zman_engine import Unavailable

NY = ZoneInfo("America/New_York")


def test_twelve_hour_rounds_to_nearest_minute():
    assert format_zman(datetime(2024, 6, 21, 5, 24, 31, tzinfo=NY)) == "5:25 AM"
    assert format_zman(datetime(2024, 6, 21, 5, 24, 29, tzinfo=NY)) == "5:24 AM"
    assert format_zman(datetime(2024, 6, 21, 20, 30, 0, tzinfo=NY)) == "8:30 PM"


def test_noon_and_midnight():
    assert format_zman(datetime(2024, 6, 21, 12, 0, tzinfo=NY)) == "12:00 PM"
    assert format_zman(datetime(2024, 6, 21, 0, 5, tzinfo=NY)) == "12:05 AM"


def test_rounding_carries_into_next_hour():
    assert format_zman(datetime(2024, 6, 21, 11, 59, 45, tzinfo=NY)) == "12:00 PM"


def test_twenty_four_hour():
    value = datetime(2024, 6, 21, 5, 24, 31, tzinfo=NY)
    assert format_zman(value, time_format=TIME_FORMAT_24H) == "05:25"
    assert format_zman(value, time_format=TIME_FORMAT_24H, rounding=ROUNDING_NONE) == "05:24:31"


def test_exact_seconds():
    assert format_zman(datetime(2024, 6, 21, 5, 24, 31, tzinfo=NY), rounding=ROUNDING_NONE) == "5:24:31 AM"


def test_converts_to_requested_zone():
    utc_noon = datetime(2024, 6, 21, 12, 0, tzinfo=timezone.utc)
    assert format_zman(utc_noon, "America/New_York") == "8:00 AM"


@pytest.mark.parametrize("value", [None, Unavailable.ALWAYS_ABOVE, Unavailable.ALWAYS_BELOW, Unavailable.DEPENDENT])
def test_unavailable_renders_placeholder(value):
    assert format_zman(value) == "—"
    assert format_zman(value, fallback="n/a") == "n/a"


def test_round_time():
    value = datetime(2024, 6, 21, 5, 24, 30, 500, tzinfo=NY)
    assert round_time(value) == datetime(2024, 6, 21, 5, 25, tzinfo=NY)
    assert round_time(value, ROUNDING_NONE) is value
    assert round_time(None) is None


def test_bad_options():
    value = datetime(2024, 6, 21, 5, 24, tzinfo=NY)
    with pytest.raises(InputInvalidError):
        format_zman(value, time_format="13h")
    with pytest.raises(InputInvalidError):
        round_time(value, "nearestHour")
