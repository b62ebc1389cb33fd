"""
Sun events for one local calendar day.

Rise, set and twilight come from the zmanim library's NOAA calculator.
When the library finds no crossing (polar day or night) it returns None;
``classify`` then decides which way the sun missed the altitude from the
declination against the latitude, and ``solar_noon`` supplies the transit
so chatzot is still reported.

Instants are aware datetimes; conversion to the location's zone happens
in the caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from zoneinfo import ZoneInfo

from zmanim.util.geo_location import GeoLocation as ZmanimGeoLocation
from zmanim.zmanim_calendar import ZmanimCalendar

DAY_SECONDS = 86400
J1970 = 2440588
J2000 = 2451545
J0 = 0.0009

RAD = math.pi / 180
OBLIQUITY = RAD * 23.4397
PERIHELION = RAD * 102.9372

# Sun's upper limb at the horizon with standard refraction
SUNRISE_ALTITUDE = -0.833


class SunState(Enum):
    NORMAL = "normal"
    ALWAYS_ABOVE = "always_above"   # never descends to the altitude that day
    ALWAYS_BELOW = "always_below"   # never climbs to the altitude that day


@dataclass(frozen=True)
class SolarEvents:
    """Rise and set at one altitude. Both are None unless the state is NORMAL."""

    transit: datetime
    rise: datetime | None
    set: datetime | None
    state: SunState


def _create_geo(latitude: float, longitude: float, time_zone: str) -> ZmanimGeoLocation:
    return ZmanimGeoLocation(
        name="siddurcal",
        latitude=latitude,
        longitude=longitude,
        time_zone=time_zone,
        elevation=0,
    )


def local_noon(day: date, time_zone: str) -> datetime:
    """Noon on the wall clock of ``time_zone``; anchors the transit search."""
    return datetime(day.year, day.month, day.day, 12, tzinfo=ZoneInfo(time_zone))


def declination(moment: datetime) -> float:
    """Solar declination in degrees, low-precision J2000 series."""
    days = moment.timestamp() / DAY_SECONDS - 0.5 + J1970 - J2000
    mean_anomaly = RAD * (357.5291 + 0.98560028 * days)
    center = RAD * (
        1.9148 * math.sin(mean_anomaly)
        + 0.02 * math.sin(2 * mean_anomaly)
        + 0.0003 * math.sin(3 * mean_anomaly)
    )
    ecliptic_lon = mean_anomaly + center + PERIHELION + math.pi
    return math.degrees(math.asin(math.sin(OBLIQUITY) * math.sin(ecliptic_lon)))


def solar_noon(day: date, longitude: float, time_zone: str) -> datetime:
    """Transit nearest local noon, as an aware UTC datetime."""
    lw = RAD * -longitude
    days = local_noon(day, time_zone).timestamp() / DAY_SECONDS - 0.5 + J1970 - J2000
    n = round(days - J0 - lw / (2 * math.pi))
    ds = n + J0 + lw / (2 * math.pi)

    mean_anomaly = RAD * (357.5291 + 0.98560028 * ds)
    center = RAD * (1.9148 * math.sin(mean_anomaly) + 0.02 * math.sin(2 * mean_anomaly))
    ecliptic_lon = mean_anomaly + center + PERIHELION + math.pi
    transit = J2000 + ds + 0.0053 * math.sin(mean_anomaly) - 0.0069 * math.sin(2 * ecliptic_lon)
    return datetime.fromtimestamp((transit + 0.5 - J1970) * DAY_SECONDS, tz=timezone.utc)


def classify(latitude: float, decl: float, altitude: float) -> SunState:
    """
    Which way the sun misses ``altitude`` (degrees) on a day with no crossing.

    The sun's altitude swings between ``|lat + dec| - 90`` at lower
    culmination and ``90 - |lat - dec|`` at transit.
    """
    lowest = abs(latitude + decl) - 90
    highest = 90 - abs(latitude - decl)
    if lowest >= altitude:
        return SunState.ALWAYS_ABOVE
    if highest <= altitude:
        return SunState.ALWAYS_BELOW
    # borderline day the library could not resolve: summer side stays up
    return SunState.ALWAYS_ABOVE if latitude * decl > 0 else SunState.ALWAYS_BELOW


def solar_event_times(
    day: date,
    latitude: float,
    longitude: float,
    time_zone: str,
    depression: float | None = None,
) -> SolarEvents:
    """
    Transit and the rise/set pair for the local calendar ``day``.

    Without ``depression`` the pair is sunrise and sunset. Otherwise it is
    the morning and evening moments the sun's centre is ``depression``
    degrees below the geometric horizon.
    """
    calendar = ZmanimCalendar(geo_location=_create_geo(latitude, longitude, time_zone), date=day)
    if depression is None:
        rise, set_ = calendar.sunrise(), calendar.sunset()
        altitude = SUNRISE_ALTITUDE
    else:
        zenith = calendar.GEOMETRIC_ZENITH + depression
        rise = calendar.sunrise_offset_by_degrees(zenith)
        set_ = calendar.sunset_offset_by_degrees(zenith)
        altitude = -depression

    transit = calendar.sun_transit() if depression is None else None
    if transit is None:
        transit = solar_noon(day, longitude, time_zone)

    if rise is None or set_ is None:
        state = classify(latitude, declination(transit), altitude)
        return SolarEvents(transit=transit, rise=None, set=None, state=state)
    return SolarEvents(transit=transit, rise=rise, set=set_, state=SunState.NORMAL)


def day_fraction(start: datetime, end: datetime, hours: float) -> datetime:
    """Point ``hours`` halachic hours (1/12 of start→end) after ``start``."""
    return start + timedelta(seconds=(end - start).total_seconds() * hours / 12)
