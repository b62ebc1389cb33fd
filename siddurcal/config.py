"""
User settings for siddurcal.

Settings are plain dictionaries validated with voluptuous. ``options``
override ``data``, which overrides the defaults below, the same layering
a config entry uses for its initial data and later option edits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import voluptuous as vol
from timezonefinder import TimezoneFinder

from .const import (
    ALL_TRADITIONS,
    DAY_LENGTH_GRA,
    DAY_LENGTH_MODELS,
    DIASPORA,
    LOCALITIES,
    MODE_BASIC,
    ROUNDING_MODES,
    ROUNDING_NEAREST_MINUTE,
    SIDDUR_MODES,
    TIME_FORMAT_12H,
    TIME_FORMATS,
    TRADITION_ASHKENAZ,
    TWILIGHT_FIXED_MINUTES,
    TWILIGHT_TYPES,
)
from .errors import InputInvalidError
from .zman_engine import GeoLocation, TwilightPreference, ZmanimPrefs

_LOGGER = logging.getLogger(__name__)

CONF_LATITUDE = "latitude"
CONF_LONGITUDE = "longitude"
CONF_TIME_ZONE = "time_zone"
CONF_DAY_LENGTH_MODEL = "day_length_model"
CONF_DAWN_TYPE = "dawn_type"
CONF_DAWN_VALUE = "dawn_value"
CONF_NIGHTFALL_TYPE = "nightfall_type"
CONF_NIGHTFALL_VALUE = "nightfall_value"
CONF_CANDLE_LIGHTING_OFFSET = "candle_lighting_offset"
CONF_ROUNDING = "rounding"
CONF_TIME_FORMAT = "time_format"
CONF_TRADITION = "tradition"
CONF_SIDDUR_MODE = "siddur_mode"
CONF_SHOW_ONLY_APPLICABLE = "show_only_applicable"
CONF_PARSHA_CYCLE = "parsha_cycle"
CONF_HAS_MINYAN = "has_minyan"
CONF_IS_MOURNER = "is_mourner"

# Manual location defaults to New York
DEFAULT_LATITUDE = 40.7128
DEFAULT_LONGITUDE = -74.006
DEFAULT_TIME_ZONE = None
DEFAULT_DAY_LENGTH_MODEL = DAY_LENGTH_GRA
DEFAULT_DAWN_TYPE = TWILIGHT_FIXED_MINUTES
DEFAULT_DAWN_VALUE = 72
DEFAULT_NIGHTFALL_TYPE = TWILIGHT_FIXED_MINUTES
DEFAULT_NIGHTFALL_VALUE = 72
DEFAULT_CANDLE_LIGHTING_OFFSET = 18
DEFAULT_ROUNDING = ROUNDING_NEAREST_MINUTE
DEFAULT_TIME_FORMAT = TIME_FORMAT_12H
DEFAULT_TRADITION = TRADITION_ASHKENAZ
DEFAULT_SIDDUR_MODE = MODE_BASIC
DEFAULT_SHOW_ONLY_APPLICABLE = True
DEFAULT_PARSHA_CYCLE = DIASPORA
DEFAULT_HAS_MINYAN = False
DEFAULT_IS_MOURNER = False

DEFAULTS = {
    CONF_LATITUDE: DEFAULT_LATITUDE,
    CONF_LONGITUDE: DEFAULT_LONGITUDE,
    CONF_TIME_ZONE: DEFAULT_TIME_ZONE,
    CONF_DAY_LENGTH_MODEL: DEFAULT_DAY_LENGTH_MODEL,
    CONF_DAWN_TYPE: DEFAULT_DAWN_TYPE,
    CONF_DAWN_VALUE: DEFAULT_DAWN_VALUE,
    CONF_NIGHTFALL_TYPE: DEFAULT_NIGHTFALL_TYPE,
    CONF_NIGHTFALL_VALUE: DEFAULT_NIGHTFALL_VALUE,
    CONF_CANDLE_LIGHTING_OFFSET: DEFAULT_CANDLE_LIGHTING_OFFSET,
    CONF_ROUNDING: DEFAULT_ROUNDING,
    CONF_TIME_FORMAT: DEFAULT_TIME_FORMAT,
    CONF_TRADITION: DEFAULT_TRADITION,
    CONF_SIDDUR_MODE: DEFAULT_SIDDUR_MODE,
    CONF_SHOW_ONLY_APPLICABLE: DEFAULT_SHOW_ONLY_APPLICABLE,
    CONF_PARSHA_CYCLE: DEFAULT_PARSHA_CYCLE,
    CONF_HAS_MINYAN: DEFAULT_HAS_MINYAN,
    CONF_IS_MOURNER: DEFAULT_IS_MOURNER,
}

_COORD = vol.Any(None, vol.All(vol.Coerce(float), vol.Range(min=-180, max=180)))

SETTINGS_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_LATITUDE): vol.Any(None, vol.All(vol.Coerce(float), vol.Range(min=-90, max=90))),
        vol.Required(CONF_LONGITUDE): _COORD,
        vol.Required(CONF_TIME_ZONE): vol.Any(None, vol.All(str, vol.Length(min=1))),
        vol.Required(CONF_DAY_LENGTH_MODEL): vol.In(DAY_LENGTH_MODELS),
        vol.Required(CONF_DAWN_TYPE): vol.In(TWILIGHT_TYPES),
        vol.Required(CONF_DAWN_VALUE): vol.All(vol.Coerce(float), vol.Range(min=0, max=180)),
        vol.Required(CONF_NIGHTFALL_TYPE): vol.In(TWILIGHT_TYPES),
        vol.Required(CONF_NIGHTFALL_VALUE): vol.All(vol.Coerce(float), vol.Range(min=0, max=180)),
        vol.Required(CONF_CANDLE_LIGHTING_OFFSET): vol.All(vol.Coerce(int), vol.Range(min=0, max=120)),
        vol.Required(CONF_ROUNDING): vol.In(ROUNDING_MODES),
        vol.Required(CONF_TIME_FORMAT): vol.In(TIME_FORMATS),
        vol.Required(CONF_TRADITION): vol.In(ALL_TRADITIONS),
        vol.Required(CONF_SIDDUR_MODE): vol.In(SIDDUR_MODES),
        vol.Required(CONF_SHOW_ONLY_APPLICABLE): bool,
        vol.Required(CONF_PARSHA_CYCLE): vol.In(LOCALITIES),
        vol.Required(CONF_HAS_MINYAN): bool,
        vol.Required(CONF_IS_MOURNER): bool,
    }
)


def resolve_time_zone(lat: float, lon: float) -> str:
    """IANA zone for a coordinate, or "UTC" when the lookup finds nothing."""
    try:
        tzname = TimezoneFinder().timezone_at(lng=lon, lat=lat)
    except ValueError:
        _LOGGER.warning("Timezone lookup failed for %s, %s; using UTC", lat, lon, exc_info=True)
        return "UTC"
    if not tzname:
        _LOGGER.warning("No timezone found for %s, %s; using UTC", lat, lon)
        return "UTC"
    return tzname


@dataclass(frozen=True)
class Settings:
    latitude: float | None
    longitude: float | None
    time_zone: str | None
    day_length_model: str
    dawn_type: str
    dawn_value: float
    nightfall_type: str
    nightfall_value: float
    candle_lighting_offset: int
    rounding: str
    time_format: str
    tradition: str
    siddur_mode: str
    show_only_applicable: bool
    parsha_cycle: str
    has_minyan: bool
    is_mourner: bool

    def location(self) -> GeoLocation | None:
        """None until both coordinates are set."""
        if self.latitude is None or self.longitude is None:
            return None
        tzname = self.time_zone or resolve_time_zone(self.latitude, self.longitude)
        return GeoLocation(self.latitude, self.longitude, tzname)

    def zmanim_prefs(self) -> ZmanimPrefs:
        return ZmanimPrefs(
            day_length_model=self.day_length_model,
            dawn=TwilightPreference(self.dawn_type, self.dawn_value),
            nightfall=TwilightPreference(self.nightfall_type, self.nightfall_value),
            candle_lighting_offset=self.candle_lighting_offset,
        )


def validate_settings(data: dict | None = None, options: dict | None = None) -> Settings:
    initial = data or {}
    opts = options or {}

    merged = {key: opts.get(key, initial.get(key, default)) for key, default in DEFAULTS.items()}
    ignored = (initial.keys() | opts.keys()) - DEFAULTS.keys()
    if ignored:
        _LOGGER.debug("Ignoring unknown settings: %s", sorted(ignored))

    try:
        valid = SETTINGS_SCHEMA(merged)
    except vol.Invalid as err:
        raise InputInvalidError(f"Invalid settings: {err}") from err
    return Settings(**valid)
