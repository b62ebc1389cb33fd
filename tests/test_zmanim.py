# tests/test_zmanim.py

from datetime import date, datetime, timedelta

import pytest
from zmanim.util.geo_location import GeoLocation as ZmanimGeoLocation
from zmanim.zmanim_calendar import ZmanimCalendar

from siddurcal import solar
from siddurcal.const import DAY_LENGTH_MA, TWILIGHT_DEGREES, TWILIGHT_FIXED_MINUTES
from siddurcal.errors import InputInvalidError
from siddurcal.zman_engine import (
    GeoLocation,
    TwilightPreference,
    Unavailable,
    ZmanimPrefs,
    compute_zmanim,
)

NEW_YORK = GeoLocation(40.7128, -74.006, "America/New_York")
JERUSALEM = GeoLocation(31.778, 35.2354, "Asia/Jerusalem")
LONGYEARBYEN = GeoLocation(78.2232, 15.6267, "Arctic/Longyearbyen")


def minutes_apart(a: datetime, b: datetime) -> float:
    return abs((a - b).total_seconds()) / 60


def test_chronological_order():
    z = compute_zmanim(date(2024, 6, 21), NEW_YORK)
    order = [
        z.alos, z.sunrise, z.sof_zman_shema_magen_avraham, z.sof_zman_shema_gra,
        z.sof_zman_tefillah_magen_avraham, z.sof_zman_tefillah_gra, z.chatzot, z.mincha_gedola, z.mincha_ketana,
        z.plag_hamincha, z.candle_lighting, z.sunset, z.tzes,
    ]
    assert all(isinstance(t, datetime) for t in order)
    assert order == sorted(order)
    assert z.unavailable() == []


def test_times_are_local():
    z = compute_zmanim(date(2024, 6, 21), NEW_YORK)
    assert z.day == date(2024, 6, 21)
    for value in z.times().values():
        assert value.utcoffset() == timedelta(hours=-4)
        assert value.date() == date(2024, 6, 21)


def test_fixed_offsets():
    z = compute_zmanim(date(2024, 6, 21), NEW_YORK)
    assert z.sunrise - z.alos == timedelta(minutes=72)
    assert z.tzes - z.sunset == timedelta(minutes=72)
    assert z.sunset - z.candle_lighting == timedelta(minutes=18)


def test_gra_shema_is_quarter_day():
    z = compute_zmanim(date(2024, 3, 1), JERUSALEM)
    quarter = (z.sunset - z.sunrise) / 4
    assert minutes_apart(z.sof_zman_shema_gra, z.sunrise + quarter) < 0.01
    # MA day is 144 minutes longer and starts 72 earlier, so its shema is 36 minutes earlier
    assert minutes_apart(z.sof_zman_shema_gra - timedelta(minutes=36), z.sof_zman_shema_magen_avraham) < 0.01


def test_chatzot_is_midpoint():
    z = compute_zmanim(date(2024, 9, 10), NEW_YORK)
    midpoint = z.sunrise + (z.sunset - z.sunrise) / 2
    assert minutes_apart(z.chatzot, midpoint) < 1


def test_equator_equinox_day_is_about_twelve_hours():
    z = compute_zmanim(date(2024, 3, 20), GeoLocation(0, 0, "UTC"))
    day_length = (z.sunset - z.sunrise).total_seconds() / 3600
    assert day_length == pytest.approx(12.1, abs=0.1)


def test_sunrise_and_sunset_follow_zmanim_calendar():
    d = date(2024, 6, 21)
    loc = ZmanimGeoLocation("New York", 40.7128, -74.006, "America/New_York", elevation=0)
    calendar = ZmanimCalendar(geo_location=loc, date=d)
    ours = compute_zmanim(d, NEW_YORK)
    assert ours.sunrise == calendar.sunrise()
    assert ours.sunset == calendar.sunset()
    assert minutes_apart(ours.chatzot, calendar.chatzos()) < 0.01


@pytest.mark.parametrize("d", [date(2024, 1, 15), date(2024, 4, 1), date(2024, 12, 21)])
def test_jerusalem_against_astral(d):
    astral = pytest.importorskip("astral")
    astral_sun = pytest.importorskip("astral.sun")
    observer = astral.Observer(latitude=JERUSALEM.latitude, longitude=JERUSALEM.longitude)
    expected = astral_sun.sun(observer, date=d, tzinfo=JERUSALEM.tz)
    ours = compute_zmanim(d, JERUSALEM)
    assert minutes_apart(ours.sunrise, expected["sunrise"]) < 3
    assert minutes_apart(ours.sunset, expected["sunset"]) < 3
    assert minutes_apart(ours.chatzot, expected["noon"]) < 3


def test_degree_twilight():
    prefs = ZmanimPrefs(
        dawn=TwilightPreference(TWILIGHT_DEGREES, 16.1),
        nightfall=TwilightPreference(TWILIGHT_DEGREES, 8.5),
    )
    z = compute_zmanim(date(2024, 3, 20), NEW_YORK, prefs)
    assert 60 < (z.sunrise - z.alos).total_seconds() / 60 < 90
    assert 25 < (z.tzes - z.sunset).total_seconds() / 60 < 55


def test_magen_avraham_day_length_model():
    gra = compute_zmanim(date(2024, 6, 21), NEW_YORK)
    ma = compute_zmanim(date(2024, 6, 21), NEW_YORK, ZmanimPrefs(day_length_model=DAY_LENGTH_MA))
    assert ma.plag_hamincha > gra.plag_hamincha
    assert ma.sunrise == gra.sunrise


def test_polar_day():
    z = compute_zmanim(date(2024, 6, 21), LONGYEARBYEN)
    assert z.sunrise is Unavailable.ALWAYS_ABOVE
    assert z.sunset is Unavailable.ALWAYS_ABOVE
    assert isinstance(z.chatzot, datetime)
    assert z.alos is Unavailable.DEPENDENT
    assert z.sof_zman_shema_gra is Unavailable.DEPENDENT
    assert z.candle_lighting is Unavailable.DEPENDENT
    assert not z.sunrise
    assert "sunrise" in z.unavailable()


def test_polar_night():
    z = compute_zmanim(date(2024, 12, 21), LONGYEARBYEN)
    assert z.sunrise is Unavailable.ALWAYS_BELOW
    assert z.plag_hamincha is Unavailable.DEPENDENT
    assert isinstance(z.chatzot, datetime)


def test_classify_missing_crossing():
    assert solar.classify(90, 20, solar.SUNRISE_ALTITUDE) is solar.SunState.ALWAYS_ABOVE
    assert solar.classify(90, -20, solar.SUNRISE_ALTITUDE) is solar.SunState.ALWAYS_BELOW
    assert solar.classify(-78, -23.4, solar.SUNRISE_ALTITUDE) is solar.SunState.ALWAYS_ABOVE
    # the sun can stay above the horizon yet never reach 18 degrees of depression
    assert solar.classify(60, 23.4, -18) is solar.SunState.ALWAYS_ABOVE


def test_polar_chatzot_falls_on_local_day():
    z = compute_zmanim(date(2024, 6, 21), LONGYEARBYEN)
    assert z.chatzot.date() == date(2024, 6, 21)
    assert 11 <= z.chatzot.hour <= 13


@pytest.mark.parametrize("location", [
    GeoLocation(-13.83, -171.76, "Pacific/Apia"),
    GeoLocation(1.87, -157.4, "Pacific/Kiritimati"),
    GeoLocation(-14.28, -170.7, "Pacific/Pago_Pago"),
    GeoLocation(-36.85, 174.76, "Pacific/Auckland"),
])
def test_date_line_zones_stay_on_the_local_day(location):
    d = date(2024, 6, 21)
    z = compute_zmanim(d, location)
    assert z.day == d
    for value in z.times().values():
        assert value.date() == d
    assert z.sunrise < z.chatzot < z.sunset


def test_missing_location_returns_none():
    assert compute_zmanim(date(2024, 6, 21), None) is None


@pytest.mark.parametrize("lat,lon,tz", [
    (91, 0, "UTC"),
    (0, -181, "UTC"),
    (float("nan"), 0, "UTC"),
    ("40", 0, "UTC"),
    (0, 0, "Not/AZone"),
])
def test_invalid_location(lat, lon, tz):
    with pytest.raises(InputInvalidError):
        GeoLocation(lat, lon, tz)


def test_invalid_preferences():
    with pytest.raises(InputInvalidError):
        TwilightPreference("sunset-ish", 10)
    with pytest.raises(InputInvalidError):
        ZmanimPrefs(day_length_model="baal hatanya")
    with pytest.raises(InputInvalidError):
        compute_zmanim("2024-06-21", NEW_YORK)
    assert TwilightPreference(TWILIGHT_FIXED_MINUTES, 90).value == 90
