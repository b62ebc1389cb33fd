from __future__ import annotations

import logging

from .applicability import (
    SiddurApplicability,
    SiddurFilterContext,
    create_filter_context,
    evaluate_applicability,
    filter_by_mode,
)
from .catalog import SiddurCatalog, build_catalog, load_catalog
from .config import Settings, validate_settings
from .const import DOMAIN
from .errors import CalendarArithmeticError, CatalogError, InputInvalidError, SiddurCalError
from .hebrew_calendar import HebrewDate, gregorian_to_hebrew, hebrew_to_gregorian
from .navigation import SiddurNavigation, build_navigation, get_today_siddur_outline
from .parsha import parsha_for_shabbat, weekday_parasha
from .today import build_today_summary
from .zman_engine import GeoLocation, TwilightPreference, Unavailable, ZmanimPrefs, compute_zmanim

_LOGGER = logging.getLogger(__name__)

__all__ = [
    "DOMAIN",
    "CalendarArithmeticError",
    "CatalogError",
    "GeoLocation",
    "HebrewDate",
    "InputInvalidError",
    "Settings",
    "SiddurApplicability",
    "SiddurCalError",
    "SiddurCatalog",
    "SiddurFilterContext",
    "SiddurNavigation",
    "TwilightPreference",
    "Unavailable",
    "ZmanimPrefs",
    "build_catalog",
    "build_navigation",
    "build_today_summary",
    "compute_zmanim",
    "create_filter_context",
    "evaluate_applicability",
    "filter_by_mode",
    "get_today_siddur_outline",
    "gregorian_to_hebrew",
    "hebrew_to_gregorian",
    "load_catalog",
    "parsha_for_shabbat",
    "validate_settings",
    "weekday_parasha",
]
