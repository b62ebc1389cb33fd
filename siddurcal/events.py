"""
Calendar events feeding the siddur filter context.

An event source is any callable ``(start, end, flags) -> iterable`` whose
items are ``CalendarEvent`` records or plain description strings. The
bundled ``PyluachEventSource`` reads festivals and fasts from pyluach.

Descriptions are mapped to holiday and fast-day keys through an
``EventKeywordTable``: an ordered list of (keyword, key) pairs matched
case-insensitively as substrings, first match wins. Longer phrases come
before the words they contain ("purim katan" before "purim").
"""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Iterable

from pyluach.hebrewcal import HebrewDate as PHebrewDate

from .const import OMER_DAYS

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarEvent:
    date: date
    description: str


@dataclass(frozen=True)
class EventFlags:
    """What the caller wants from an event source for the queried range."""

    israel: bool = False
    yomtov: bool = True
    chol_hamoed: bool = True
    fasts: bool = True
    omer: bool = True


EventSource = Callable[[date, date, EventFlags], Iterable["CalendarEvent | str"]]


HOLIDAY_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("rosh hashanah", "rosh_hashanah"),
    ("rosh hashana", "rosh_hashanah"),
    ("yom kippur", "yom_kippur"),
    ("pesach sheni", "pesach_sheni"),
    ("pesach", "pesach"),
    ("passover", "pesach"),
    ("shavuot", "shavuot"),
    ("shavuos", "shavuot"),
    ("sukkot", "sukkot"),
    ("succos", "sukkot"),
    ("shemini atzeret", "shemini_atzeret"),
    ("shmini atzeres", "shemini_atzeret"),
    ("simchat torah", "simchat_torah"),
    ("simchas torah", "simchat_torah"),
    ("chanukah", "chanukah"),
    ("chanuka", "chanukah"),
    ("hanukkah", "chanukah"),
    ("purim katan", "purim_katan"),
    ("purim", "purim"),
)

FAST_DAY_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("tzom gedaliah", "tzom_gedaliah"),
    ("tzom gedalia", "tzom_gedaliah"),
    ("gedaliah", "tzom_gedaliah"),
    ("asarah b'tevet", "asara_btevet"),
    ("10 tevet", "asara_btevet"),
    ("10 of teves", "asara_btevet"),
    ("fast of esther", "taanit_esther"),
    ("ta'anit esther", "taanit_esther"),
    ("taanis esther", "taanit_esther"),
    ("shivah asar b'tammuz", "shivah_asar_btammuz"),
    ("17 tammuz", "shivah_asar_btammuz"),
    ("17 of tamuz", "shivah_asar_btammuz"),
    ("tisha b'av", "tisha_bav"),
    ("tish'a b'av", "tisha_bav"),
    ("9 of av", "tisha_bav"),
    ("ta'anit bechorot", "taanit_bechorot"),
    ("fast of the firstborn", "taanit_bechorot"),
)

OMER_PATTERN = re.compile(r"([0-9]{1,2})[^0-9]*day of the omer", re.IGNORECASE)
LAG_BAOMER_PATTERN = re.compile(r"lag b'?a?'?omer", re.IGNORECASE)
LAG_BAOMER_DAY = 33


def _first_match(table: tuple[tuple[str, str], ...], description: str) -> str | None:
    normalized = description.lower()
    for keyword, key in table:
        if keyword in normalized:
            return key
    return None


@dataclass(frozen=True)
class EventKeywordTable:
    holidays: tuple[tuple[str, str], ...] = HOLIDAY_KEYWORDS
    fast_days: tuple[tuple[str, str], ...] = FAST_DAY_KEYWORDS
    omer_pattern: re.Pattern[str] = OMER_PATTERN
    lag_baomer_pattern: re.Pattern[str] = LAG_BAOMER_PATTERN

    def detect_holiday(self, description: str) -> str | None:
        return _first_match(self.holidays, description)

    def detect_fast_day(self, description: str) -> str | None:
        return _first_match(self.fast_days, description)

    def detect_omer(self, description: str) -> int | None:
        match = self.omer_pattern.search(description)
        if match:
            day = int(match.group(1))
            return day if 1 <= day <= OMER_DAYS else None
        if self.lag_baomer_pattern.search(description):
            return LAG_BAOMER_DAY
        return None

    def extended(
        self,
        holidays: Iterable[tuple[str, str]] = (),
        fast_days: Iterable[tuple[str, str]] = (),
    ) -> "EventKeywordTable":
        """Copy with extra pairs checked before the existing ones."""
        return EventKeywordTable(
            holidays=tuple(holidays) + self.holidays,
            fast_days=tuple(fast_days) + self.fast_days,
            omer_pattern=self.omer_pattern,
            lag_baomer_pattern=self.lag_baomer_pattern,
        )


DEFAULT_KEYWORDS = EventKeywordTable()


def describe(event) -> str:
    """Text of an event record; accepts CalendarEvent, strings and hebcal-style objects."""
    if isinstance(event, str):
        return event
    if isinstance(event, CalendarEvent):
        return event.description
    getter = getattr(event, "description", None) or getattr(event, "get_desc", None)
    if callable(getter):
        return str(getter())
    return str(getter or "")


def _omer_count(hd: PHebrewDate) -> int | None:
    # pyluach numbers months from Nisan
    diff = int(hd.jd - PHebrewDate(hd.year, 1, 16).jd)
    return diff + 1 if 0 <= diff < OMER_DAYS else None


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


class PyluachEventSource:
    """Offline festival and fast-day events via pyluach."""

    def __call__(self, start: date, end: date, flags: EventFlags) -> list[CalendarEvent]:
        events: list[CalendarEvent] = []
        current = start
        while current <= end:
            hd = PHebrewDate.from_pydate(current)
            if flags.yomtov:
                name = hd.festival(israel=flags.israel, include_working_days=flags.chol_hamoed)
                if name:
                    events.append(CalendarEvent(current, name))
            if flags.fasts:
                name = hd.fast_day()
                if name:
                    events.append(CalendarEvent(current, name))
            if flags.omer:
                count = _omer_count(hd)
                if count:
                    events.append(CalendarEvent(current, f"{_ordinal(count)} day of the Omer"))
            current += timedelta(days=1)
        _LOGGER.debug("pyluach events %s..%s: %s", start, end, [e.description for e in events])
        return events


@dataclass(frozen=True)
class UpcomingHoliday:
    id: str
    name: str
    days_away: int


def get_upcoming_holiday(day: date, holidays: Iterable[dict]) -> UpcomingHoliday | None:
    """
    Nearest dated holiday on or after ``day``.

    ``holidays`` are records like ``{"id": "purim", "names": {"en": "Purim"},
    "dates": ["2025-03-14"]}``; records without dates are skipped.
    """
    if isinstance(day, datetime.datetime):
        day = day.date()
    closest: UpcomingHoliday | None = None
    for holiday in holidays:
        for iso in holiday.get("dates") or ():
            diff = (date.fromisoformat(iso[:10]) - day).days
            if diff >= 0 and (closest is None or diff < closest.days_away):
                closest = UpcomingHoliday(holiday["id"], holiday.get("names", {}).get("en", holiday["id"]), diff)
    return closest
