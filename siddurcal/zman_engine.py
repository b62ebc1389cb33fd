from __future__ import annotations

import datetime
import logging
import math
from dataclasses import dataclass, field, fields
from datetime import timedelta
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from . import solar
from .const import (
    DAY_LENGTH_GRA,
    DAY_LENGTH_MODELS,
    TWILIGHT_DEGREES,
    TWILIGHT_FIXED_MINUTES,
    TWILIGHT_TYPES,
)
from .errors import InputInvalidError

_LOGGER = logging.getLogger(__name__)

# Offsets in halachic hours from the start of the halachic day
SHEMA_HOURS = 3
TEFILLAH_HOURS = 4
MINCHA_GEDOLA_HOURS = 6.5
MINCHA_KETANA_HOURS = 9.5
PLAG_HOURS = 10.75


class Unavailable(Enum):
    """Why a zman has no instant. Falsy, so ``if result.sunrise:`` reads naturally."""

    ALWAYS_ABOVE = "always_above"
    ALWAYS_BELOW = "always_below"
    DEPENDENT = "dependent"     # derived from an endpoint that is unavailable

    def __bool__(self) -> bool:
        return False


_STATE_SENTINEL = {
    solar.SunState.ALWAYS_ABOVE: Unavailable.ALWAYS_ABOVE,
    solar.SunState.ALWAYS_BELOW: Unavailable.ALWAYS_BELOW,
}


def _check_number(name: str, value, low: float, high: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InputInvalidError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or not low <= value <= high:
        raise InputInvalidError(f"{name} {value!r} is outside [{low}, {high}]")
    return float(value)


def _check_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as err:
        raise InputInvalidError(f"Unknown time zone {name!r}") from err


@dataclass(frozen=True)
class GeoLocation:
    latitude: float
    longitude: float
    time_zone: str

    def __post_init__(self):
        _check_number("Latitude", self.latitude, -90, 90)
        _check_number("Longitude", self.longitude, -180, 180)
        _check_zone(self.time_zone)

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.time_zone)


@dataclass(frozen=True)
class TwilightPreference:
    type: str
    value: float

    def __post_init__(self):
        if self.type not in TWILIGHT_TYPES:
            raise InputInvalidError(f"Unknown twilight type {self.type!r}")
        _check_number("Twilight value", self.value, -180, 180)


@dataclass(frozen=True)
class ZmanimPrefs:
    day_length_model: str = DAY_LENGTH_GRA
    dawn: TwilightPreference = field(default_factory=lambda: TwilightPreference(TWILIGHT_FIXED_MINUTES, 72))
    nightfall: TwilightPreference = field(default_factory=lambda: TwilightPreference(TWILIGHT_FIXED_MINUTES, 72))
    candle_lighting_offset: int = 18

    def __post_init__(self):
        if self.day_length_model not in DAY_LENGTH_MODELS:
            raise InputInvalidError(f"Unknown day length model {self.day_length_model!r}")
        _check_number("Candle lighting offset", self.candle_lighting_offset, -180, 180)


ZmanTime = datetime.datetime | Unavailable


@dataclass(frozen=True)
class ZmanimResult:
    day: datetime.date
    alos: ZmanTime
    sunrise: ZmanTime
    sof_zman_shema_gra: ZmanTime
    sof_zman_shema_magen_avraham: ZmanTime
    sof_zman_tefillah_gra: ZmanTime
    sof_zman_tefillah_magen_avraham: ZmanTime
    chatzot: ZmanTime
    mincha_gedola: ZmanTime
    mincha_ketana: ZmanTime
    plag_hamincha: ZmanTime
    sunset: ZmanTime
    tzes: ZmanTime
    candle_lighting: ZmanTime

    def times(self) -> dict[str, ZmanTime]:
        """Named zmanim in chronological display order."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "day"}

    def unavailable(self) -> list[str]:
        return [name for name, value in self.times().items() if isinstance(value, Unavailable)]


def _local_day(value, tz: ZoneInfo) -> datetime.date:
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            return value.astimezone(tz).date()
        return value.date()
    if isinstance(value, datetime.date):
        return value
    raise InputInvalidError(f"Expected a date, got {type(value).__name__}")


def _solar_pair(events: solar.SolarEvents) -> tuple[ZmanTime, ZmanTime]:
    if events.state is solar.SunState.NORMAL:
        return events.rise, events.set
    sentinel = _STATE_SENTINEL[events.state]
    return sentinel, sentinel


def _twilight(
    pref: TwilightPreference,
    anchor: ZmanTime,
    day: datetime.date,
    location: GeoLocation,
    morning: bool,
) -> ZmanTime:
    if pref.type == TWILIGHT_FIXED_MINUTES:
        if not anchor:
            return Unavailable.DEPENDENT
        minutes = abs(pref.value)
        return anchor - timedelta(minutes=minutes) if morning else anchor + timedelta(minutes=minutes)

    # TWILIGHT_DEGREES: its own crossing, independent of sunrise/sunset
    events = solar.solar_event_times(
        day, location.latitude, location.longitude, location.time_zone, depression=abs(pref.value),
    )
    dawn, dusk = _solar_pair(events)
    return dawn if morning else dusk


def _at(start: ZmanTime, end: ZmanTime, hours: float) -> ZmanTime:
    if not start or not end:
        return Unavailable.DEPENDENT
    return solar.day_fraction(start, end, hours)


def compute_zmanim(
    day: datetime.date,
    location: GeoLocation | None,
    prefs: ZmanimPrefs | None = None,
) -> ZmanimResult | None:
    """
    Zmanim for the local calendar day ``day`` at ``location``.

    Returns None when no location is configured. Polar days and nights
    never raise: the affected fields hold an ``Unavailable`` member and
    everything derived from them holds ``Unavailable.DEPENDENT``.
    Instants are aware datetimes in the location's time zone.
    """
    if location is None:
        _LOGGER.debug("No location configured; skipping zmanim")
        return None
    if not isinstance(location, GeoLocation):
        raise InputInvalidError(f"Expected a GeoLocation, got {type(location).__name__}")
    prefs = prefs or ZmanimPrefs()

    tz = location.tz
    local_day = _local_day(day, tz)

    events = solar.solar_event_times(local_day, location.latitude, location.longitude, location.time_zone)
    sunrise, sunset = _solar_pair(events)
    if events.state is not solar.SunState.NORMAL:
        _LOGGER.debug("Sun is %s on %s at %s", events.state.value, local_day, location)

    alos = _twilight(prefs.dawn, sunrise, local_day, location, morning=True)
    tzes = _twilight(prefs.nightfall, sunset, local_day, location, morning=False)

    if prefs.day_length_model == DAY_LENGTH_GRA:
        day_start, day_end = sunrise, sunset
    else:
        day_start, day_end = alos, tzes

    candle_lighting = (
        sunset - timedelta(minutes=abs(prefs.candle_lighting_offset)) if sunset else Unavailable.DEPENDENT
    )

    def local(value: ZmanTime) -> ZmanTime:
        return value.astimezone(tz) if value else value

    return ZmanimResult(
        day=local_day,
        alos=local(alos),
        sunrise=local(sunrise),
        sof_zman_shema_gra=local(_at(sunrise, sunset, SHEMA_HOURS)),
        sof_zman_shema_magen_avraham=local(_at(alos, tzes, SHEMA_HOURS)),
        sof_zman_tefillah_gra=local(_at(sunrise, sunset, TEFILLAH_HOURS)),
        sof_zman_tefillah_magen_avraham=local(_at(alos, tzes, TEFILLAH_HOURS)),
        chatzot=local(events.transit),
        mincha_gedola=local(_at(day_start, day_end, MINCHA_GEDOLA_HOURS)),
        mincha_ketana=local(_at(day_start, day_end, MINCHA_KETANA_HOURS)),
        plag_hamincha=local(_at(day_start, day_end, PLAG_HOURS)),
        sunset=local(sunset),
        tzes=local(tzes),
        candle_lighting=local(candle_lighting),
    )
