from datetime import date

import pytest

from siddurcal import hebrew_calendar as hc
from siddurcal.applicability import SiddurFilterContext
from siddurcal.const import DIASPORA, WEEKDAY_KEYS


def make_context(day: date, **overrides) -> SiddurFilterContext:
    """Filter context with locally derived facts and no calendar events."""
    weekday = hc.weekday_index(day)
    hd = hc.gregorian_to_hebrew(day)
    values = dict(
        date=day,
        weekday=weekday,
        weekday_key=WEEKDAY_KEYS[weekday],
        is_shabbat=weekday == 6,
        is_motzaei_shabbat=False,
        is_rosh_chodesh=hc.is_rosh_chodesh(hd),
        is_omer=False,
        omer_day=None,
        diaspora_or_israel=DIASPORA,
        hebrew_date=hd,
    )
    values.update(overrides)
    return SiddurFilterContext(**values)


@pytest.fixture
def tuesday():
    # 12 Sivan 5784, an ordinary weekday
    return make_context(date(2024, 6, 18))


@pytest.fixture
def saturday():
    return make_context(date(2024, 6, 22))


def no_events(start, end, flags):
    return []
