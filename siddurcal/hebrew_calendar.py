"""
Arithmetic Hebrew calendar.

Pure date math on the fixed 19-year cycle: molad of Tishrei, the
postponement rules for Rosh Hashanah, month lengths and conversion
between Gregorian dates and Hebrew dates.

Months are numbered from Tishrei (1) so that a Hebrew year is a single
run of months:

    common year: Tishrei .. Adar (6), Nisan (7) .. Elul (12)
    leap year:   Tishrei .. Adar I (6), Adar II (7), Nisan (8) .. Elul (13)

Absolute day numbers are Julian Day Numbers (2000-01-01 == 2451545).
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from datetime import date, timedelta

from .errors import CalendarArithmeticError, InputInvalidError

# JDN of the day before 1 Tishrei AM 1
HEBREW_EPOCH = 347997

# JDN minus proleptic Gregorian ordinal (date.toordinal())
JDN_ORDINAL_OFFSET = 1721425

VALID_YEAR_LENGTHS = frozenset({353, 354, 355, 383, 384, 385})

PARTS_PER_HOUR = 1080
MONTH_DAYS = 29

COMMON_MONTH_NAMES = (
    "Tishrei", "Cheshvan", "Kislev", "Tevet", "Shevat", "Adar",
    "Nisan", "Iyar", "Sivan", "Tammuz", "Av", "Elul",
)
LEAP_MONTH_NAMES = (
    "Tishrei", "Cheshvan", "Kislev", "Tevet", "Shevat", "Adar I", "Adar II",
    "Nisan", "Iyar", "Sivan", "Tammuz", "Av", "Elul",
)
COMMON_MONTH_NAMES_HE = (
    "תשרי", "חשון", "כסלו", "טבת", "שבט", "אדר",
    "ניסן", "אייר", "סיון", "תמוז", "אב", "אלול",
)
LEAP_MONTH_NAMES_HE = (
    "תשרי", "חשון", "כסלו", "טבת", "שבט", "אדר א׳", "אדר ב׳",
    "ניסן", "אייר", "סיון", "תמוז", "אב", "אלול",
)

# Cheshvan and Kislev (None) depend on the year type
_COMMON_LENGTHS = (30, None, None, 29, 30, 29, 30, 29, 30, 29, 30, 29)
_LEAP_LENGTHS = (30, None, None, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29)

# Sunday first, matching weekday_index()
HEBREW_WEEKDAYS = (
    "Yom Rishon",
    "Yom Sheni",
    "Yom Shlishi",
    "Yom Revi'i",
    "Yom Chamishi",
    "Yom Shishi",
    "Yom Shabbat",
)


def is_leap_year(year: int) -> bool:
    """Years 3, 6, 8, 11, 14, 17 and 19 of each 19-year cycle are leap."""
    return (7 * year + 1) % 19 < 7


def months_in_year(year: int) -> int:
    return 13 if is_leap_year(year) else 12


def nisan_month(year: int) -> int:
    """Month number of Nisan in the given year."""
    return 8 if is_leap_year(year) else 7


def lunar_months_before(year: int) -> int:
    """Count of lunar months from the epoch to Tishrei of ``year``."""
    return (235 * year - 234) // 19


def months_elapsed(year: int) -> int:
    """
    Days from the epoch to Rosh Hashanah of ``year``.

    Starts from the molad of Tishrei and applies the postponements in
    their traditional order: molad zaken (noon or later), GaTaRaD,
    BeTUTaKPaT, then Lo ADU Rosh.
    """
    months = lunar_months_before(year)
    parts = 204 + 793 * (months % PARTS_PER_HOUR)
    hours = 5 + 12 * months + 793 * (months // PARTS_PER_HOUR) + parts // PARTS_PER_HOUR
    day = 1 + MONTH_DAYS * months + hours // 24
    parts = PARTS_PER_HOUR * (hours % 24) + parts % PARTS_PER_HOUR

    # day % 7: 0=Sun, 1=Mon, 2=Tue, 3=Wed, 5=Fri
    if (
        parts >= 18 * PARTS_PER_HOUR
        or (day % 7 == 2 and parts >= 9 * PARTS_PER_HOUR + 204 and not is_leap_year(year))
        or (day % 7 == 1 and parts >= 15 * PARTS_PER_HOUR + 589 and is_leap_year(year - 1))
    ):
        day += 1

    if day % 7 in (0, 3, 5):
        day += 1

    return day


def rosh_hashanah_absolute(year: int) -> int:
    """JDN of 1 Tishrei of ``year``."""
    return HEBREW_EPOCH + months_elapsed(year)


def days_in_hebrew_year(year: int) -> int:
    length = rosh_hashanah_absolute(year + 1) - rosh_hashanah_absolute(year)
    if length not in VALID_YEAR_LENGTHS:
        raise CalendarArithmeticError(f"Hebrew year {year} has impossible length {length}")
    return length


def _month_lengths(year: int) -> tuple[int, ...]:
    year_length = days_in_hebrew_year(year)
    cheshvan = 30 if year_length % 10 == 5 else 29   # complete year
    kislev = 29 if year_length % 10 == 3 else 30     # deficient year
    pattern = _LEAP_LENGTHS if is_leap_year(year) else _COMMON_LENGTHS
    return (pattern[0], cheshvan, kislev) + pattern[3:]


def _check_month(year: int, month: int) -> None:
    if not isinstance(month, int) or not 1 <= month <= months_in_year(year):
        raise InputInvalidError(f"Month {month!r} is out of range for Hebrew year {year}")


def days_in_hebrew_month(year: int, month: int) -> int:
    """Return 29 or 30 for ``month`` (Tishrei = 1) of ``year``."""
    _check_month(year, month)
    return _month_lengths(year)[month - 1]


def month_name(year: int, month: int, hebrew: bool = False) -> str:
    _check_month(year, month)
    if is_leap_year(year):
        names = LEAP_MONTH_NAMES_HE if hebrew else LEAP_MONTH_NAMES
    else:
        names = COMMON_MONTH_NAMES_HE if hebrew else COMMON_MONTH_NAMES
    return names[month - 1]


@dataclass(frozen=True)
class HebrewDate:
    year: int
    month: int
    month_name: str
    day: int
    is_leap_year: bool

    @property
    def absolute(self) -> int:
        return hebrew_to_absolute(self.year, self.month, self.day)

    @property
    def month_length(self) -> int:
        return days_in_hebrew_month(self.year, self.month)

    @property
    def label(self) -> str:
        """Display label, e.g. ``א׳ תשרי 5784``."""
        from .siddurcal_lib.helper import int_to_hebrew

        return f"{int_to_hebrew(self.day)} {month_name(self.year, self.month, hebrew=True)} {self.year}"

    def __str__(self) -> str:
        return f"{self.day} {self.month_name} {self.year}"


def _as_date(value) -> date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InputInvalidError(f"Expected a date, got {type(value).__name__}")


def gregorian_to_jdn(value: date) -> int:
    return _as_date(value).toordinal() + JDN_ORDINAL_OFFSET


def jdn_to_gregorian(jdn: int) -> date:
    if isinstance(jdn, bool) or not isinstance(jdn, int):
        raise InputInvalidError(f"Absolute day number must be an int, got {jdn!r}")
    try:
        return date.fromordinal(jdn - JDN_ORDINAL_OFFSET)
    except (ValueError, OverflowError) as err:
        raise InputInvalidError(f"Absolute day {jdn} is outside the supported date range") from err


def _year_containing(jdn: int) -> int:
    # Estimate from the mean year, then walk; each loop is monotonic in year
    year = int((jdn - HEBREW_EPOCH) / 365.246822) + 1
    while rosh_hashanah_absolute(year) > jdn:
        year -= 1
    while rosh_hashanah_absolute(year + 1) <= jdn:
        year += 1
    return year


def gregorian_to_hebrew(value: date) -> HebrewDate:
    """Convert a Gregorian date (or the date part of a datetime)."""
    jdn = gregorian_to_jdn(value)
    year = _year_containing(jdn)
    remaining = jdn - rosh_hashanah_absolute(year)

    month = 1
    for length in _month_lengths(year):
        if remaining < length:
            break
        remaining -= length
        month += 1

    return HebrewDate(
        year=year,
        month=month,
        month_name=month_name(year, month),
        day=remaining + 1,
        is_leap_year=is_leap_year(year),
    )


def hebrew_to_absolute(year: int, month: int, day: int) -> int:
    """JDN of the given Hebrew date; rejects days past the end of the month."""
    if not isinstance(year, int) or year < 1:
        raise InputInvalidError(f"Hebrew year must be a positive int, got {year!r}")
    _check_month(year, month)
    lengths = _month_lengths(year)
    if not isinstance(day, int) or not 1 <= day <= lengths[month - 1]:
        raise InputInvalidError(
            f"Day {day!r} is out of range for {month_name(year, month)} {year}"
        )
    return rosh_hashanah_absolute(year) + sum(lengths[: month - 1]) + day - 1


def hebrew_to_gregorian(absolute: int) -> date:
    """Gregorian date of an absolute day number."""
    return jdn_to_gregorian(absolute)


def hebrew_date_to_gregorian(year: int, month: int, day: int) -> date:
    return jdn_to_gregorian(hebrew_to_absolute(year, month, day))


def is_rosh_chodesh(hd: HebrewDate) -> bool:
    """Day 1 of any month, or day 30 of a 30-day month."""
    return hd.day == 1 or hd.day == 30


def weekday_index(value: date) -> int:
    """Sunday=0 … Saturday=6."""
    return (_as_date(value).weekday() + 1) % 7  # Python: Monday=0 … Sunday=6


def hebrew_weekday(value: date) -> str:
    return HEBREW_WEEKDAYS[weekday_index(value)]


def is_shabbat(value: date) -> bool:
    return _as_date(value).weekday() == 5


def is_erev_shabbat(value: date) -> bool:
    return _as_date(value).weekday() == 4


def upcoming_shabbat(value: date) -> date:
    """Return the upcoming Shabbat for ``value`` (inclusive)."""
    g = _as_date(value)
    return g + timedelta(days=(5 - g.weekday()) % 7)
