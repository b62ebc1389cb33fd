# tests/test_context.py

import logging
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from conftest import no_events

from siddurcal.applicability import create_filter_context
from siddurcal.const import DIASPORA, ISRAEL
from siddurcal.errors import InputInvalidError
from siddurcal.events import DEFAULT_KEYWORDS, CalendarEvent


def source_of(*descriptions):
    def source(start, end, flags):
        return list(descriptions)
    return source


def failing_source(start, end, flags):
    raise RuntimeError("calendar service unavailable")


def test_local_facts():
    ctx = create_filter_context(date(2024, 4, 9), DIASPORA, event_source=no_events)
    assert ctx.date == date(2024, 4, 9)
    assert ctx.weekday == 2
    assert ctx.weekday_key == "tue"
    assert ctx.is_rosh_chodesh
    assert not ctx.is_shabbat
    assert not ctx.is_omer
    assert ctx.hebrew_date.month_name == "Nisan"


def test_holidays_and_fasts_from_source():
    ctx = create_filter_context(
        date(2024, 10, 6),
        DIASPORA,
        event_source=source_of("Tzom Gedaliah", CalendarEvent(date(2024, 10, 6), "Erev Something")),
    )
    assert ctx.fast_days_today == {"tzom_gedaliah"}
    assert ctx.holidays_today == frozenset()


def test_longer_keyword_wins():
    ctx = create_filter_context(date(2024, 2, 23), DIASPORA, event_source=source_of("Purim Katan"))
    assert ctx.holidays_today == {"purim_katan"}


def test_omer_from_source_and_fallback():
    ctx = create_filter_context(date(2024, 5, 26), DIASPORA, event_source=source_of("Lag BaOmer"))
    assert ctx.omer_day == 33
    assert "lag" not in " ".join(ctx.holidays_today)

    # 16 Nisan 5784 is day 1, 5 Sivan is day 49
    assert create_filter_context(date(2024, 4, 24), DIASPORA, event_source=no_events).omer_day == 1
    assert create_filter_context(date(2024, 4, 27), DIASPORA, event_source=no_events).omer_day == 4
    assert create_filter_context(date(2024, 6, 11), DIASPORA, event_source=no_events).omer_day == 49
    assert create_filter_context(date(2024, 6, 12), DIASPORA, event_source=no_events).omer_day is None
    assert create_filter_context(date(2024, 4, 23), DIASPORA, event_source=no_events).omer_day is None


def test_failing_source_is_absorbed(caplog):
    with caplog.at_level(logging.WARNING, logger="siddurcal.applicability"):
        ctx = create_filter_context(date(2024, 4, 27), DIASPORA, event_source=failing_source)
    assert ctx.holidays_today == frozenset()
    assert ctx.fast_days_today == frozenset()
    assert ctx.is_shabbat
    assert ctx.omer_day == 4
    assert "event source failed" in caplog.text


def test_partial_results_are_discarded_on_failure():
    def flaky(start, end, flags):
        yield "Pesach"
        raise RuntimeError("dropped connection")

    ctx = create_filter_context(date(2024, 4, 27), DIASPORA, event_source=flaky)
    assert ctx.holidays_today == frozenset()


def test_locality_reaches_source():
    seen = []

    def recording(start, end, flags):
        seen.append((start, end, flags.israel))
        return []

    create_filter_context(date(2024, 4, 30), ISRAEL, event_source=recording)
    create_filter_context(datetime(2024, 4, 30, 9, 0), DIASPORA, event_source=recording)
    assert seen == [(date(2024, 4, 30), date(2024, 4, 30), True), (date(2024, 4, 30), date(2024, 4, 30), False)]


def test_extended_keywords():
    keywords = DEFAULT_KEYWORDS.extended(holidays=[("yom haatzmaut", "yom_haatzmaut")])
    ctx = create_filter_context(
        date(2024, 5, 14), ISRAEL, event_source=source_of("Yom HaAtzmaut"), keywords=keywords,
    )
    assert ctx.holidays_today == {"yom_haatzmaut"}


def test_minyan_and_mourner_flags():
    ctx = create_filter_context(date(2024, 6, 18), DIASPORA, True, True, event_source=no_events)
    assert ctx.has_minyan and ctx.is_mourner
    assert ctx.diaspora_or_israel == DIASPORA


class TestMotzaeiShabbat:
    saturday = date(2024, 6, 22)

    def test_plain_date_is_never_motzaei(self):
        assert not create_filter_context(self.saturday, DIASPORA, event_source=no_events).is_motzaei_shabbat

    def test_default_cutoff(self):
        before = datetime(2024, 6, 22, 17, 59)
        after = datetime(2024, 6, 22, 18, 0)
        assert not create_filter_context(before, DIASPORA, event_source=no_events).is_motzaei_shabbat
        assert create_filter_context(after, DIASPORA, event_source=no_events).is_motzaei_shabbat

    def test_nightfall(self):
        tz = ZoneInfo("America/New_York")
        nightfall = datetime(2024, 6, 22, 21, 43, tzinfo=tz)
        early = create_filter_context(nightfall - timedelta(minutes=5), DIASPORA, event_source=no_events, nightfall=nightfall)
        late = create_filter_context(nightfall + timedelta(minutes=1), DIASPORA, event_source=no_events, nightfall=nightfall)
        assert not early.is_motzaei_shabbat
        assert late.is_motzaei_shabbat
        assert late.is_shabbat

    def test_friday_night_is_not_motzaei(self):
        ctx = create_filter_context(datetime(2024, 6, 21, 22, 0), DIASPORA, event_source=no_events)
        assert not ctx.is_motzaei_shabbat

    def test_aware_moment_uses_local_clock(self):
        late_friday = datetime(2024, 6, 22, 3, 30, tzinfo=timezone.utc)
        ctx = create_filter_context(late_friday, DIASPORA, event_source=no_events, tz="America/New_York")
        assert ctx.date == date(2024, 6, 21)
        assert ctx.weekday_key == "fri"
        assert not ctx.is_shabbat
        assert not ctx.is_motzaei_shabbat
        assert create_filter_context(late_friday, DIASPORA, event_source=no_events).date == date(2024, 6, 22)

    def test_unknown_zone(self):
        with pytest.raises(InputInvalidError):
            create_filter_context(datetime(2024, 6, 22, 3, 30, tzinfo=timezone.utc), DIASPORA,
                                  event_source=no_events, tz="Not/AZone")


def test_pyluach_source():
    pytest.importorskip("pyluach")
    first_day = create_filter_context(date(2024, 4, 23), DIASPORA)
    assert "pesach" in first_day.holidays_today
    # 22 Nisan is yom tov only outside Israel
    assert "pesach" in create_filter_context(date(2024, 4, 30), DIASPORA).holidays_today
    assert "pesach" not in create_filter_context(date(2024, 4, 30), ISRAEL).holidays_today


@pytest.mark.parametrize("moment,locality", [
    ("2024-06-18", DIASPORA),
    (date(2024, 6, 18), "moon"),
])
def test_invalid_arguments(moment, locality):
    with pytest.raises(InputInvalidError):
        create_filter_context(moment, locality, event_source=no_events)
