from __future__ import annotations

import logging
from datetime import date

from pyluach import dates, parshios

from . import hebrew_calendar as hc
from .const import DIASPORA, ISRAEL
from .errors import InputInvalidError

_LOGGER = logging.getLogger(__name__)

PARASHOT = (
    # Bereshit
    "Bereshit", "Noach", "Lech-Lecha", "Vayera", "Chayei Sarah", "Toldot",
    "Vayetzei", "Vayishlach", "Vayeshev", "Miketz", "Vayigash", "Vayechi",
    # Shemot
    "Shemot", "Vaera", "Bo", "Beshalach", "Yitro", "Mishpatim",
    "Terumah", "Tetzaveh", "Ki Tisa", "Vayakhel", "Pekudei",
    # Vayikra
    "Vayikra", "Tzav", "Shmini", "Tazria", "Metzora", "Achrei Mot",
    "Kedoshim", "Emor", "Behar", "Bechukotai",
    # Bamidbar
    "Bamidbar", "Naso", "Beha'alotcha", "Shlach", "Korach", "Chukat",
    "Balak", "Pinchas", "Matot", "Masei",
    # Devarim
    "Devarim", "Vaetchanan", "Eikev", "Re'eh", "Shoftim", "Ki Tetze",
    "Ki Tavo", "Nitzavim", "Vayelech", "Ha'Azinu", "Vezot Haberachah",
)


def weekday_parasha(day: date) -> str:
    """
    Approximate weekly portion for the Shabbat on or after ``day``.

    Counts whole weeks from Rosh Hashanah of that Shabbat's Hebrew year
    and indexes the 54-portion cycle. Doubled portions and the
    Israel/diaspora split are not modelled; use parsha_for_shabbat()
    for the actual reading.
    """
    shabbat = hc.upcoming_shabbat(day)
    year = hc.gregorian_to_hebrew(shabbat).year
    weeks = (hc.gregorian_to_jdn(shabbat) - hc.rosh_hashanah_absolute(year)) // 7
    return PARASHOT[weeks % len(PARASHOT)]


def parsha_for_shabbat(day: date, cycle: str = DIASPORA, hebrew: bool = False) -> str | None:
    """
    Actual Torah reading for the Shabbat on or after ``day``.

    Returns "Parashat Vayakhel-Pekudei" style labels (or "פרשת …" when
    ``hebrew``), or None when a festival reading displaces the portion.
    """
    if cycle not in (DIASPORA, ISRAEL):
        raise InputInvalidError(f"Unknown parsha cycle {cycle!r}")

    shabbat = hc.upcoming_shabbat(day)
    greg = dates.GregorianDate(shabbat.year, shabbat.month, shabbat.day)
    name = parshios.getparsha_string(greg, israel=cycle == ISRAEL, hebrew=hebrew)
    if not name:
        _LOGGER.debug("No weekly portion on %s (%s)", shabbat, cycle)
        return None

    # Join double parshiyos with a hyphen
    combined = name.replace(", ", "-").strip()
    prefix = "פרשת" if hebrew else "Parashat"
    return f"{prefix} {combined}"
