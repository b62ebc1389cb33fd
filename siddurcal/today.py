from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass

from . import hebrew_calendar as hc
from .applicability import _DEFAULT_SOURCE, SiddurFilterContext, create_filter_context
from .catalog import SiddurCatalog
from .config import Settings
from .errors import InputInvalidError
from .events import EventSource
from .navigation import NavigationCategory, get_today_siddur_outline
from .parsha import weekday_parasha
from .zman_engine import ZmanimResult, compute_zmanim

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TodaySummary:
    date: datetime.date
    gregorian_label: str
    hebrew_date: hc.HebrewDate
    parashah: str
    zmanim: ZmanimResult | None       # None until a location is configured
    context: SiddurFilterContext
    outline: tuple[NavigationCategory, ...]


def hebrew_calendar_summary(day: datetime.date) -> dict[str, str]:
    """Hebrew date label and approximate weekly portion for the dashboard header."""
    hd = hc.gregorian_to_hebrew(day)
    return {"hebrew_date": hd.label, "parashah": weekday_parasha(day)}


def build_today_summary(
    moment: datetime.date,
    settings: Settings,
    catalog: SiddurCatalog | None,
    event_source: EventSource | None = _DEFAULT_SOURCE,
) -> TodaySummary:
    """
    Everything the "today" view shows, computed from explicit arguments.

    When ``moment`` carries a time of day, that day's nightfall decides
    Motzaei Shabbat. An aware ``moment`` is first moved to the configured
    location's zone, so zmanim and the filter context describe the same day.
    """
    location = settings.location()
    if location is not None and isinstance(moment, datetime.datetime) and moment.tzinfo is not None:
        moment = moment.astimezone(location.tz)
    zmanim = compute_zmanim(moment, location, settings.zmanim_prefs())
    day = zmanim.day if zmanim else _plain_date(moment)

    nightfall = None
    if zmanim and isinstance(zmanim.tzes, datetime.datetime):
        nightfall = zmanim.tzes

    context = create_filter_context(
        moment,
        settings.parsha_cycle,
        settings.has_minyan,
        settings.is_mourner,
        event_source=event_source,
        nightfall=nightfall,
        tz=location.tz if location is not None else None,
    )
    outline = get_today_siddur_outline(catalog, settings.tradition, settings.siddur_mode, context)

    header = hebrew_calendar_summary(day)
    summary = TodaySummary(
        date=day,
        gregorian_label=f"{day:%A, %B} {day.day}, {day.year}",
        hebrew_date=hc.gregorian_to_hebrew(day),
        parashah=header["parashah"],
        zmanim=zmanim,
        context=context,
        outline=outline,
    )
    _LOGGER.debug("Today summary for %s: %d outline categories", day, len(outline))
    return summary


def _plain_date(moment) -> datetime.date:
    if isinstance(moment, datetime.datetime):
        return moment.date()
    if isinstance(moment, datetime.date):
        return moment
    raise InputInvalidError(f"Expected a date, got {type(moment).__name__}")
