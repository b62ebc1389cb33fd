# tests/test_config.py

import logging

import pytest

from siddurcal import config
from siddurcal.config import validate_settings
from siddurcal.const import DAY_LENGTH_GRA, ISRAEL, MODE_BASIC, MODE_FULL, TRADITION_ASHKENAZ, TWILIGHT_DEGREES
from siddurcal.errors import InputInvalidError
from siddurcal.zman_engine import GeoLocation


def test_defaults():
    settings = validate_settings()
    assert settings.latitude == pytest.approx(40.7128)
    assert settings.longitude == pytest.approx(-74.006)
    assert settings.day_length_model == DAY_LENGTH_GRA
    assert settings.dawn_value == 72
    assert settings.candle_lighting_offset == 18
    assert settings.rounding == "nearestMinute"
    assert settings.time_format == "12h"
    assert settings.tradition == TRADITION_ASHKENAZ
    assert settings.siddur_mode == MODE_BASIC
    assert settings.show_only_applicable is True
    assert settings.has_minyan is False
    assert settings.is_mourner is False


def test_options_override_data():
    settings = validate_settings(
        {"siddur_mode": MODE_FULL, "candle_lighting_offset": 40, "parsha_cycle": ISRAEL},
        {"candle_lighting_offset": 30},
    )
    assert settings.siddur_mode == MODE_FULL
    assert settings.candle_lighting_offset == 30
    assert settings.parsha_cycle == ISRAEL


def test_unknown_keys_are_ignored():
    assert validate_settings({"strip_nikud": True}) == validate_settings()


@pytest.mark.parametrize("data", [
    {"tradition": "chabad"},
    {"latitude": 95},
    {"longitude": "west"},
    {"time_format": "13h"},
    {"dawn_type": "sunrise"},
    {"has_minyan": "sometimes"},
])
def test_invalid_settings(data):
    with pytest.raises(InputInvalidError):
        validate_settings(data)


def test_location_and_prefs():
    settings = validate_settings({"latitude": 31.778, "longitude": 35.2354, "time_zone": "Asia/Jerusalem",
                                  "dawn_type": TWILIGHT_DEGREES, "dawn_value": 16.1})
    assert settings.location() == GeoLocation(31.778, 35.2354, "Asia/Jerusalem")
    prefs = settings.zmanim_prefs()
    assert prefs.dawn.type == TWILIGHT_DEGREES
    assert prefs.dawn.value == pytest.approx(16.1)
    assert prefs.candle_lighting_offset == 18


def test_missing_coordinates_mean_no_location():
    assert validate_settings({"latitude": None}).location() is None
    assert validate_settings(options={"longitude": None}).location() is None


def test_time_zone_lookup():
    pytest.importorskip("timezonefinder")
    assert config.resolve_time_zone(40.7128, -74.006) == "America/New_York"
    assert validate_settings().location().time_zone == "America/New_York"


def test_time_zone_fallback(monkeypatch, caplog):
    class NoZone:
        def timezone_at(self, lng, lat):
            return None

    monkeypatch.setattr(config, "TimezoneFinder", NoZone)
    with caplog.at_level(logging.WARNING, logger="siddurcal.config"):
        assert config.resolve_time_zone(0.0, -160.0) == "UTC"
    assert "using UTC" in caplog.text
