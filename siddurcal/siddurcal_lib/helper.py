# siddurcal/siddurcal_lib/helper.py

"""
Display helpers on top of the arithmetic calendar: Hebrew numerals and
Rosh Chodesh lookups for the upcoming month.
"""

from __future__ import annotations

import datetime
import logging

from .. import hebrew_calendar as hc

_LOGGER = logging.getLogger(__name__)

_LETTERS = [
    (400, "ת"), (300, "ש"), (200, "ר"), (100, "ק"),
    (90,  "צ"),  (80,  "פ"),  (70,  "ע"),  (60,  "ס"),  (50,  "נ"),
    (40,  "מ"),  (30,  "ל"),  (20,  "כ"),  (10,  "י"),
    (9,   "ט"),  (8,   "ח"),  (7,   "ז"),  (6,   "ו"),  (5,   "ה"),
    (4,   "ד"),  (3,   "ג"),  (2,   "ב"),  (1,   "א"),
]

GERESH = "׳"
GERSHAYIM = "״"


class RoshChodesh:
    def __init__(self, month: str, days: list[str], gdays: list[datetime.date] | None = None):
        self.month = month            # name of the month being announced, e.g. "Av"
        self.days = days              # Hebrew weekday names, e.g. ["Yom Shabbat", "Yom Rishon"]
        self.gdays = gdays or []      # Gregorian dates of those days

    @property
    def text(self) -> str:
        return " & ".join(self.days)


def _letters_for(num: int) -> str:
    result = ""
    for value, letter in _LETTERS:
        while num >= value:
            result += letter
            num -= value
    return result


def int_to_hebrew(num: int) -> str:
    """
    Convert a positive integer into Hebrew letters with geresh/gershayim.
    E.g. 5 → 'ה׳', 15 → 'ט״ו', 100 → 'ק׳', 115 → 'קט״ו'.
    Thousands are dropped, so 5784 renders as 'תשפ״ד'.
    """
    if num <= 0:
        raise ValueError(f"Cannot write {num} in Hebrew numerals")
    if num >= 1000:
        num %= 1000

    # 15 and 16 are written 9+6 and 9+7
    tail = num % 100
    if tail in (15, 16):
        result = _letters_for(num - tail) + ("טו" if tail == 15 else "טז")
    else:
        result = _letters_for(num)

    if len(result) > 1:
        return f"{result[:-1]}{GERSHAYIM}{result[-1]}"
    return f"{result}{GERESH}"


def format_hebrew_date(hd: hc.HebrewDate) -> str:
    """Hebrew-lettered day, month and year, e.g. 'א׳ תשרי תשפ״ד'."""
    return f"{int_to_hebrew(hd.day)} {hc.month_name(hd.year, hd.month, hebrew=True)} {int_to_hebrew(hd.year)}"


def _next_month(year: int, month: int) -> tuple[int, int]:
    if month == hc.months_in_year(year):    # Elul → Tishrei
        return year + 1, 1
    return year, month + 1


def rosh_chodesh_days(today: datetime.date) -> RoshChodesh:
    """
    Rosh Chodesh days announcing the month after the one containing 'today'.
    - If the current month has 30 days: include its 30th.
    - Include the 1st of the next month.
    Tishrei has no Rosh Chodesh announcement, so its days list is empty.
    """
    hd = hc.gregorian_to_hebrew(today)
    ny, nm = _next_month(hd.year, hd.month)
    name = hc.month_name(ny, nm)

    if nm == 1:
        return RoshChodesh(name, [], [])

    gdays: list[datetime.date] = []
    if hd.month_length == 30:
        gdays.append(hc.hebrew_date_to_gregorian(hd.year, hd.month, 30))
    gdays.append(hc.hebrew_date_to_gregorian(ny, nm, 1))

    _LOGGER.debug("Rosh Chodesh %s falls on %s", name, gdays)
    return RoshChodesh(name, [hc.hebrew_weekday(g) for g in gdays], gdays)
