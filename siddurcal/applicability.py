from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field
from datetime import date
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from . import hebrew_calendar as hc
from .const import (
    BOTH,
    DIASPORA,
    IMPORTANCE_CORE,
    IMPORTANCE_LEVELS,
    ISRAEL,
    LOCALITIES,
    MODE_FULL,
    OMER_DAYS,
    SIDDUR_MODES,
    WEEKDAY_KEYS,
)
from .errors import InputInvalidError
from .events import (
    DEFAULT_KEYWORDS,
    EventFlags,
    EventKeywordTable,
    EventSource,
    PyluachEventSource,
    describe,
)

_LOGGER = logging.getLogger(__name__)

# Motzaei Shabbat cutoff when no nightfall instant is supplied
DEFAULT_MOTZAEI_HOUR = 18

_TRI_STATE_FLAGS = ("shabbat", "rosh_chodesh", "omer", "motzaei_shabbat")
_SET_FIELDS = ("holidays", "fast_days", "weekdays")


@dataclass(frozen=True)
class SiddurApplicability:
    """
    When a catalog entry applies. ``None`` and empty sets impose no constraint.

    kaddish_type, amidah_section, pesukei_section and torah_reading_context
    are descriptive tags only; evaluate_applicability() ignores them.
    """

    shabbat: bool | None = None
    rosh_chodesh: bool | None = None
    omer: bool | None = None
    motzaei_shabbat: bool | None = None
    holidays: frozenset[str] = frozenset()
    fast_days: frozenset[str] = frozenset()
    weekdays: frozenset[str] = frozenset()
    diaspora_or_israel: str = BOTH
    requires_minyan: bool = False
    mourner_only: bool = False
    kaddish_type: str | None = None
    amidah_section: str | None = None
    pesukei_section: str | None = None
    torah_reading_context: str | None = None

    def __post_init__(self):
        for name in _TRI_STATE_FLAGS:
            if getattr(self, name) not in (None, True, False):
                raise InputInvalidError(f"{name} must be True, False or None")
        for name in _SET_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str):
                raise InputInvalidError(f"{name} must be a collection of keys, not a string")
            object.__setattr__(self, name, frozenset(value))
        unknown = self.weekdays - set(WEEKDAY_KEYS)
        if unknown:
            raise InputInvalidError(f"Unknown weekday keys {sorted(unknown)}")
        if self.diaspora_or_israel not in LOCALITIES + (BOTH,):
            raise InputInvalidError(f"Unknown locality {self.diaspora_or_israel!r}")

    def tags(self) -> dict[str, str]:
        """Descriptive tags that are set, by name."""
        names = ("kaddish_type", "amidah_section", "pesukei_section", "torah_reading_context")
        return {name: getattr(self, name) for name in names if getattr(self, name) is not None}


ALWAYS_APPLICABLE = SiddurApplicability()


@dataclass(frozen=True)
class SiddurFilterContext:
    date: date
    weekday: int                     # Sunday=0 … Saturday=6
    weekday_key: str
    is_shabbat: bool
    is_motzaei_shabbat: bool
    is_rosh_chodesh: bool
    is_omer: bool
    omer_day: int | None
    holidays_today: frozenset[str] = field(default_factory=frozenset)
    fast_days_today: frozenset[str] = field(default_factory=frozenset)
    diaspora_or_israel: str = DIASPORA
    has_minyan: bool = False
    is_mourner: bool = False
    hebrew_date: hc.HebrewDate | None = None


def _tri_state(required: bool | None, actual: bool) -> bool:
    return required is None or required == actual


def evaluate_applicability(rule: SiddurApplicability, context: SiddurFilterContext) -> bool:
    """True when every dimension of ``rule`` is satisfied by ``context``."""
    if not _tri_state(rule.shabbat, context.is_shabbat):
        return False
    if not _tri_state(rule.rosh_chodesh, context.is_rosh_chodesh):
        return False
    if not _tri_state(rule.omer, context.is_omer):
        return False
    if not _tri_state(rule.motzaei_shabbat, context.is_motzaei_shabbat):
        return False

    # any one listed key suffices within a dimension
    if rule.holidays and rule.holidays.isdisjoint(context.holidays_today):
        return False
    if rule.fast_days and rule.fast_days.isdisjoint(context.fast_days_today):
        return False
    if rule.weekdays and context.weekday_key not in rule.weekdays:
        return False

    if rule.diaspora_or_israel != BOTH and rule.diaspora_or_israel != context.diaspora_or_israel:
        return False
    if rule.requires_minyan and not context.has_minyan:
        return False
    if rule.mourner_only and not context.is_mourner:
        return False
    return True


def filter_by_mode(importance: str, mode: str) -> bool:
    """Mode "full" shows everything; "basic" shows only core entries."""
    if mode not in SIDDUR_MODES:
        raise InputInvalidError(f"Unknown siddur mode {mode!r}")
    if importance not in IMPORTANCE_LEVELS:
        raise InputInvalidError(f"Unknown importance {importance!r}")
    if mode == MODE_FULL:
        return True
    return importance == IMPORTANCE_CORE


def _is_motzaei_shabbat(moment, nightfall) -> bool:
    if not isinstance(moment, datetime.datetime) or moment.weekday() != 5:
        return False
    if not isinstance(nightfall, datetime.datetime):
        return moment.hour >= DEFAULT_MOTZAEI_HOUR
    if moment.tzinfo is not None and nightfall.tzinfo is not None:
        return moment >= nightfall
    # compare wall-clock times when either side is naive
    return moment.replace(tzinfo=None) >= nightfall.replace(tzinfo=None)


def _omer_fallback(hd: hc.HebrewDate) -> int | None:
    """Day of the Omer counted from the civil date of 16 Nisan (day 1) to 5 Sivan (day 49)."""
    start = hc.hebrew_to_absolute(hd.year, hc.nisan_month(hd.year), 16)
    diff = hd.absolute - start
    if 0 <= diff < OMER_DAYS:
        return diff + 1
    return None


_DEFAULT_SOURCE = PyluachEventSource()


def _zone(tz) -> datetime.tzinfo:
    if isinstance(tz, datetime.tzinfo):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as err:
        raise InputInvalidError(f"Unknown time zone {tz!r}") from err


def create_filter_context(
    moment: date,
    diaspora_or_israel: str,
    has_minyan: bool = False,
    is_mourner: bool = False,
    *,
    event_source: EventSource | None = _DEFAULT_SOURCE,
    keywords: EventKeywordTable = DEFAULT_KEYWORDS,
    nightfall: datetime.datetime | None = None,
    tz: str | datetime.tzinfo | None = None,
) -> SiddurFilterContext:
    """
    Evaluate the facts of one day for applicability checks.

    ``moment`` is a date or a datetime; only a datetime on Saturday at or
    after ``nightfall`` (18:00 when not given) is Motzaei Shabbat. An aware
    datetime is read on the wall clock of ``tz`` when one is given, so the
    day, weekday and cutoff are all local.
    Holidays, fasts and the Omer come from ``event_source``. If the source
    raises, the failure is logged and the context keeps only what can be
    derived locally: weekday, Shabbat, Rosh Chodesh and the Omer count.
    Pass ``event_source=None`` to skip the lookup entirely.
    """
    if diaspora_or_israel not in LOCALITIES:
        raise InputInvalidError(f"Unknown locality {diaspora_or_israel!r}")
    if isinstance(moment, datetime.datetime):
        if tz is not None and moment.tzinfo is not None:
            moment = moment.astimezone(_zone(tz))
        day = moment.date()
    elif isinstance(moment, date):
        day = moment
    else:
        raise InputInvalidError(f"Expected a date, got {type(moment).__name__}")

    weekday = hc.weekday_index(day)
    hd = hc.gregorian_to_hebrew(day)

    holidays: list[str] = []
    fast_days: list[str] = []
    omer_day: int | None = None

    if event_source is not None:
        flags = EventFlags(israel=diaspora_or_israel == ISRAEL)
        try:
            for event in event_source(day, day, flags):
                desc = describe(event)
                if not desc:
                    continue
                holiday = keywords.detect_holiday(desc)
                if holiday and holiday not in holidays:
                    holidays.append(holiday)
                fast = keywords.detect_fast_day(desc)
                if fast and fast not in fast_days:
                    fast_days.append(fast)
                found = keywords.detect_omer(desc)
                if found is not None:
                    omer_day = found
        except Exception:
            _LOGGER.warning("Calendar event source failed for %s; using local facts only", day, exc_info=True)
            holidays, fast_days, omer_day = [], [], None

    if omer_day is None:
        omer_day = _omer_fallback(hd)

    context = SiddurFilterContext(
        date=day,
        weekday=weekday,
        weekday_key=WEEKDAY_KEYS[weekday],
        is_shabbat=weekday == 6,
        is_motzaei_shabbat=_is_motzaei_shabbat(moment, nightfall),
        is_rosh_chodesh=hc.is_rosh_chodesh(hd),
        is_omer=omer_day is not None,
        omer_day=omer_day,
        holidays_today=frozenset(holidays),
        fast_days_today=frozenset(fast_days),
        diaspora_or_israel=diaspora_or_israel,
        has_minyan=bool(has_minyan),
        is_mourner=bool(is_mourner),
        hebrew_date=hd,
    )
    _LOGGER.debug("Filter context for %s: %s", day, context)
    return context
