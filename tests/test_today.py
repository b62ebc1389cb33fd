# tests/test_today.py

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from conftest import no_events

from siddurcal.catalog import load_catalog
from siddurcal.config import validate_settings
from siddurcal.today import build_today_summary, hebrew_calendar_summary

NEW_YORK = {"latitude": 40.7128, "longitude": -74.006, "time_zone": "America/New_York"}


def test_hebrew_calendar_summary():
    assert hebrew_calendar_summary(date(2023, 9, 16)) == {"hebrew_date": "א׳ תשרי 5784", "parashah": "Bereshit"}


def test_weekday_summary():
    summary = build_today_summary(date(2024, 6, 18), validate_settings(NEW_YORK), load_catalog(), no_events)
    assert summary.date == date(2024, 6, 18)
    assert summary.gregorian_label == "Tuesday, June 18, 2024"
    assert summary.hebrew_date.month_name == "Sivan"
    assert summary.zmanim.sunrise < summary.zmanim.sunset
    assert not summary.context.is_shabbat
    assert "daily" in [c.category.id for c in summary.outline]
    assert "shabbat" not in [c.category.id for c in summary.outline]


def test_motzaei_shabbat_uses_nightfall():
    tz = ZoneInfo("America/New_York")
    settings = validate_settings(NEW_YORK)
    before = build_today_summary(datetime(2024, 6, 22, 19, 0, tzinfo=tz), settings, load_catalog(), no_events)
    after = build_today_summary(datetime(2024, 6, 22, 23, 0, tzinfo=tz), settings, load_catalog(), no_events)
    assert not before.context.is_motzaei_shabbat
    assert after.context.is_motzaei_shabbat
    assert "shabbat-havdalah" in [s.service.id for c in after.outline for s in c.services]


def test_without_location():
    summary = build_today_summary(date(2024, 6, 18), validate_settings({"latitude": None}), load_catalog(), no_events)
    assert summary.zmanim is None
    assert summary.outline


def test_without_catalog():
    summary = build_today_summary(date(2024, 6, 18), validate_settings(NEW_YORK), None, no_events)
    assert summary.outline == ()


def test_utc_moment_is_read_on_the_location_clock():
    settings = validate_settings(NEW_YORK)
    # 03:30 UTC Saturday is 23:30 Friday in New York
    friday_night = build_today_summary(datetime(2024, 6, 22, 3, 30, tzinfo=timezone.utc), settings, load_catalog(), no_events)
    assert friday_night.date == date(2024, 6, 21)
    assert friday_night.context.date == friday_night.date
    assert not friday_night.context.is_shabbat
    assert not friday_night.context.is_motzaei_shabbat
    assert "shabbat-havdalah" not in [s.service.id for c in friday_night.outline for s in c.services]

    saturday_night = build_today_summary(datetime(2024, 6, 23, 2, 0, tzinfo=timezone.utc), settings, load_catalog(), no_events)
    assert saturday_night.context.date == date(2024, 6, 22)
    assert saturday_night.context.is_motzaei_shabbat
