# tests/test_navigation.py

import logging
from datetime import date

import pytest
from conftest import make_context

from siddurcal.catalog import build_catalog, load_catalog
from siddurcal.const import MODE_BASIC, MODE_FULL, TRADITION_ASHKENAZ, TRADITION_SEFARD
from siddurcal.errors import InputInvalidError
from siddurcal.navigation import SiddurNavigation, build_navigation, get_today_siddur_outline


def small_catalog(**extra):
    data = {
        "categories": [
            {"id": "daily", "title": "Daily", "order": 1},
            {"id": "shabbat", "title": "Shabbat", "order": 2, "applicability": {"shabbat": True}},
            {"id": "empty", "title": "Nothing inside", "order": 0},
        ],
        "services": [
            {"id": "mincha", "category_id": "daily", "title": "Mincha", "order": 20},
            {"id": "shacharit", "category_id": "daily", "title": "Shacharit", "order": 10},
            {"id": "kabbalat", "category_id": "shabbat", "title": "Kabbalat Shabbat", "order": 10},
            {"id": "bare", "category_id": "daily", "title": "No buckets", "order": 30},
        ],
        "buckets": [
            {"id": "shacharit-main", "service_id": "shacharit", "title": "Main", "order": 10},
            {"id": "shacharit-extra", "service_id": "shacharit", "title": "Extras", "order": 20},
            {"id": "mincha-main", "service_id": "mincha", "title": "Main", "order": 10},
            {"id": "kabbalat-psalms", "service_id": "kabbalat", "title": "Psalms", "order": 10},
            {"id": "hollow", "service_id": "mincha", "title": "No items", "order": 20},
        ],
        "items": [
            {"id": "ashrei", "bucket_id": "mincha-main", "title": "Ashrei", "order": 10},
            {"id": "modeh-ani", "bucket_id": "shacharit-main", "title": "Modeh Ani", "order": 10},
            {"id": "birchot", "bucket_id": "shacharit-main", "title": "Birchot", "order": 10},
            {"id": "netilat", "bucket_id": "shacharit-main", "title": "Netilat", "order": 5},
            {"id": "tefillin", "bucket_id": "shacharit-main", "title": "Tefillin", "order": 30,
             "applicability": {"shabbat": False}},
            {"id": "korbanot", "bucket_id": "shacharit-extra", "title": "Korbanot", "order": 10,
             "importance": "extended"},
            {"id": "sefard-only", "bucket_id": "shacharit-extra", "title": "Hodu first", "order": 20,
             "nusach": ["sefard"]},
            {"id": "lecha-dodi", "bucket_id": "kabbalat-psalms", "title": "Lecha Dodi", "order": 10},
        ],
    }
    for level, entries in extra.items():
        data[level] = data[level] + entries
    return build_catalog(data)


def ids(nodes, attr):
    return [getattr(node, attr).id for node in nodes]


def test_weekday_tree(tuesday):
    nav = build_navigation(small_catalog(), TRADITION_ASHKENAZ, MODE_BASIC, True, tuesday)
    assert ids(nav.categories, "category") == ["daily"]
    daily = nav.category_map["daily"]
    assert ids(daily.services, "service") == ["shacharit", "mincha"]
    assert ids(nav.service_map["shacharit"].buckets, "bucket") == ["shacharit-main"]
    assert ids(nav.bucket_map["shacharit-main"].items, "item") == ["netilat", "modeh-ani", "birchot", "tefillin"]


def test_empty_containers_are_pruned(tuesday):
    nav = build_navigation(small_catalog(), TRADITION_ASHKENAZ, MODE_FULL, False, tuesday)
    assert "empty" not in nav.category_map
    assert "bare" not in nav.service_map
    assert "hollow" not in nav.bucket_map
    for category in nav.categories:
        assert category.services
        for service in category.services:
            assert service.buckets
            for bucket in service.buckets:
                assert bucket.items


def test_mode_and_tradition_filters(tuesday):
    basic = build_navigation(small_catalog(), TRADITION_ASHKENAZ, MODE_BASIC, False, tuesday)
    full = build_navigation(small_catalog(), TRADITION_ASHKENAZ, MODE_FULL, False, tuesday)
    sefard = build_navigation(small_catalog(), TRADITION_SEFARD, MODE_FULL, False, tuesday)
    assert "korbanot" not in basic.item_map
    assert "korbanot" in full.item_map
    assert "sefard-only" not in full.item_map
    assert "sefard-only" in sefard.item_map


def test_not_applicable_entries_are_annotated(tuesday):
    nav = build_navigation(small_catalog(), TRADITION_ASHKENAZ, MODE_BASIC, False, tuesday)
    assert "shabbat" in nav.category_map
    assert not nav.category_map["shabbat"].applicable_today
    assert nav.item_map["tefillin"].applicable_today
    assert nav.category_map["daily"].applicable_today


def test_shabbat_tree(saturday):
    nav = build_navigation(small_catalog(), TRADITION_ASHKENAZ, MODE_BASIC, True, saturday)
    assert ids(nav.categories, "category") == ["daily", "shabbat"]
    assert "tefillin" not in nav.item_map
    assert "lecha-dodi" in nav.item_map


def test_orphans_are_dropped(tuesday, caplog):
    catalog = small_catalog(
        items=[
            {"id": "stray", "bucket_id": "nowhere", "title": "Stray", "order": 1},
            {"id": "lost-item", "bucket_id": "lost-main", "title": "Lost item", "order": 1},
        ],
        services=[{"id": "lost", "category_id": "missing", "title": "Lost", "order": 1}],
        buckets=[{"id": "lost-main", "service_id": "lost", "title": "Main", "order": 1}],
    )
    with caplog.at_level(logging.DEBUG, logger="siddurcal.navigation"):
        nav = build_navigation(catalog, TRADITION_ASHKENAZ, MODE_FULL, False, tuesday)
    assert "stray" not in nav.item_map
    assert "lost" not in nav.service_map
    assert "lost-item" not in nav.item_map
    assert "nowhere" in caplog.text
    assert "missing" in caplog.text


def test_idempotent(tuesday):
    catalog = small_catalog()
    first = build_navigation(catalog, TRADITION_ASHKENAZ, MODE_FULL, True, tuesday)
    second = build_navigation(catalog, TRADITION_ASHKENAZ, MODE_FULL, True, tuesday)
    assert first == second
    assert [n.item.id for n in first.iter_items()] == [n.item.id for n in second.iter_items()]


def test_maps_match_tree(tuesday):
    nav = build_navigation(small_catalog(), TRADITION_ASHKENAZ, MODE_FULL, False, tuesday)
    assert set(nav.item_map) == {n.item.id for n in nav.iter_items()}
    for bucket_id, bucket in nav.bucket_map.items():
        assert bucket.bucket.id == bucket_id


def test_empty_and_missing_catalog(tuesday):
    assert build_navigation(build_catalog({}), TRADITION_ASHKENAZ, MODE_BASIC, True, tuesday) == SiddurNavigation()
    assert build_navigation(None, TRADITION_ASHKENAZ, MODE_BASIC, True, tuesday).categories == ()


def test_invalid_arguments(tuesday):
    with pytest.raises(InputInvalidError):
        build_navigation(small_catalog(), "chabad", MODE_BASIC, True, tuesday)
    with pytest.raises(InputInvalidError):
        build_navigation(small_catalog(), TRADITION_ASHKENAZ, "everything", True, tuesday)
    with pytest.raises(InputInvalidError):
        build_navigation(None, TRADITION_ASHKENAZ, "everything", True, tuesday)


def test_today_outline(saturday):
    catalog = small_catalog()
    outline = get_today_siddur_outline(catalog, TRADITION_ASHKENAZ, MODE_BASIC, saturday)
    assert outline == build_navigation(catalog, TRADITION_ASHKENAZ, MODE_BASIC, True, saturday).categories


class TestBundledCatalog:
    catalog = load_catalog()

    def test_weekday(self, tuesday):
        nav = build_navigation(self.catalog, TRADITION_ASHKENAZ, MODE_BASIC, True, tuesday)
        assert "daily" in nav.category_map
        assert "shabbat" not in nav.category_map
        amidah = nav.bucket_map["daily-shacharit-weekday-amidah"]
        assert len(amidah.items) == 21
        assert amidah.items[0].item.id == "daily-shacharit-amidah-opening"
        assert amidah.items[1].item.id == "daily-shacharit-1-avot"
        assert amidah.items[-1].item.id == "daily-shacharit-amidah-conclusion"

    def test_shabbat(self, saturday):
        nav = build_navigation(self.catalog, TRADITION_ASHKENAZ, MODE_BASIC, True, saturday)
        assert "shabbat" in nav.category_map
        assert "daily-shacharit" not in nav.service_map
        assert "daily-mincha-1-avot" not in nav.item_map

    def test_fast_day(self):
        fast = make_context(date(2024, 7, 23), fast_days_today=frozenset({"shivah_asar_btammuz"}), has_minyan=True)
        quiet = make_context(date(2024, 7, 30), has_minyan=True)
        fast_nav = build_navigation(self.catalog, TRADITION_ASHKENAZ, MODE_FULL, True, fast)
        quiet_nav = build_navigation(self.catalog, TRADITION_ASHKENAZ, MODE_FULL, True, quiet)
        assert "daily-torah-fast-day" in fast_nav.item_map
        assert "daily-torah-fast-day" not in quiet_nav.item_map
        assert len(list(fast_nav.iter_items())) > len(list(quiet_nav.iter_items()))

    def test_every_listed_node_is_applicable(self, tuesday):
        nav = build_navigation(self.catalog, TRADITION_ASHKENAZ, MODE_FULL, True, tuesday)
        for category in nav.categories:
            assert category.applicable_today
            for service in category.services:
                assert service.applicable_today
                for bucket in service.buckets:
                    assert bucket.applicable_today
                    assert all(item.applicable_today for item in bucket.items)
