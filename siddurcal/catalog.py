from __future__ import annotations

import logging
from dataclasses import dataclass

import voluptuous as vol

from .applicability import ALWAYS_APPLICABLE, SiddurApplicability
from .const import (
    ALL_TRADITIONS,
    BOTH,
    IMPORTANCE_CORE,
    IMPORTANCE_LEVELS,
    LOCALITIES,
    WEEKDAY_KEYS,
)
from .errors import CatalogError

_LOGGER = logging.getLogger(__name__)

_TRI_STATE = vol.Any(None, bool)

APPLICABILITY_SCHEMA = vol.Schema(
    {
        vol.Optional("shabbat"): _TRI_STATE,
        vol.Optional("rosh_chodesh"): _TRI_STATE,
        vol.Optional("omer"): _TRI_STATE,
        vol.Optional("motzaei_shabbat"): _TRI_STATE,
        vol.Optional("holidays"): [str],
        vol.Optional("fast_days"): [str],
        vol.Optional("weekdays"): [vol.In(WEEKDAY_KEYS)],
        vol.Optional("diaspora_or_israel"): vol.In(LOCALITIES + (BOTH,)),
        vol.Optional("requires_minyan"): bool,
        vol.Optional("mourner_only"): bool,
        vol.Optional("kaddish_type"): vol.Any(None, str),
        vol.Optional("amidah_section"): vol.Any(None, str),
        vol.Optional("pesukei_section"): vol.Any(None, str),
        vol.Optional("torah_reading_context"): vol.Any(None, str),
    }
)

_ENTRY_FIELDS = {
    vol.Required("id"): vol.All(str, vol.Length(min=1)),
    vol.Required("title"): str,
    vol.Required("order"): int,
    vol.Optional("description", default=""): str,
    vol.Optional("importance", default=IMPORTANCE_CORE): vol.In(IMPORTANCE_LEVELS),
    vol.Optional("nusach", default=list(ALL_TRADITIONS)): [vol.In(ALL_TRADITIONS)],
    vol.Optional("applicability", default=dict): APPLICABILITY_SCHEMA,
    vol.Optional("notes", default=None): vol.Any(None, str),
}

CATEGORY_SCHEMA = vol.Schema(_ENTRY_FIELDS)
SERVICE_SCHEMA = vol.Schema({**_ENTRY_FIELDS, vol.Required("category_id"): str})
BUCKET_SCHEMA = vol.Schema({**_ENTRY_FIELDS, vol.Required("service_id"): str})
ITEM_SCHEMA = vol.Schema(
    {
        **_ENTRY_FIELDS,
        vol.Required("bucket_id"): str,
        vol.Optional("outline", default=list): [str],
        vol.Optional("tags", default=list): [str],
    }
)

CATALOG_SCHEMA = vol.Schema(
    {
        vol.Optional("categories", default=list): [CATEGORY_SCHEMA],
        vol.Optional("services", default=list): [SERVICE_SCHEMA],
        vol.Optional("buckets", default=list): [BUCKET_SCHEMA],
        vol.Optional("items", default=list): [ITEM_SCHEMA],
    }
)


@dataclass(frozen=True, kw_only=True)
class CatalogEntry:
    id: str
    title: str
    order: int
    description: str = ""
    importance: str = IMPORTANCE_CORE
    nusach: frozenset[str] = frozenset(ALL_TRADITIONS)
    applicability: SiddurApplicability = ALWAYS_APPLICABLE
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class CategoryEntry(CatalogEntry):
    pass


@dataclass(frozen=True, kw_only=True)
class ServiceEntry(CatalogEntry):
    category_id: str


@dataclass(frozen=True, kw_only=True)
class BucketEntry(CatalogEntry):
    service_id: str


@dataclass(frozen=True, kw_only=True)
class ItemEntry(CatalogEntry):
    bucket_id: str
    outline: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class SiddurCatalog:
    categories: tuple[CategoryEntry, ...] = ()
    services: tuple[ServiceEntry, ...] = ()
    buckets: tuple[BucketEntry, ...] = ()
    items: tuple[ItemEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.categories) + len(self.services) + len(self.buckets) + len(self.items)


def _entry(cls, raw: dict):
    data = dict(raw)
    data["nusach"] = frozenset(data["nusach"])
    data["applicability"] = SiddurApplicability(**data["applicability"])
    if cls is ItemEntry:
        data["outline"] = tuple(data["outline"])
        data["tags"] = tuple(data["tags"])
    return cls(**data)


def _check_unique(level: str, entries) -> None:
    seen: set[str] = set()
    for entry in entries:
        if entry.id in seen:
            raise CatalogError(f"Duplicate {level} id {entry.id!r}")
        seen.add(entry.id)


def build_catalog(data: dict) -> SiddurCatalog:
    """
    Validate raw catalog data and build immutable entries.

    Structural problems (missing fields, wrong types, unknown traditions,
    duplicate ids) raise CatalogError. Parent ids are not checked here;
    navigation drops orphaned branches.
    """
    try:
        valid = CATALOG_SCHEMA(data)
    except vol.Invalid as err:
        raise CatalogError(f"Invalid siddur catalog: {err}") from err

    catalog = SiddurCatalog(
        categories=tuple(_entry(CategoryEntry, raw) for raw in valid["categories"]),
        services=tuple(_entry(ServiceEntry, raw) for raw in valid["services"]),
        buckets=tuple(_entry(BucketEntry, raw) for raw in valid["buckets"]),
        items=tuple(_entry(ItemEntry, raw) for raw in valid["items"]),
    )
    for level in ("categories", "services", "buckets", "items"):
        _check_unique(level, getattr(catalog, level))

    _LOGGER.debug(
        "Loaded siddur catalog: %d categories, %d services, %d buckets, %d items",
        len(catalog.categories), len(catalog.services), len(catalog.buckets), len(catalog.items),
    )
    return catalog


def load_catalog() -> SiddurCatalog:
    """The bundled placeholder catalog."""
    from .data.siddur_catalog import SIDDUR_CATALOG

    return build_catalog(SIDDUR_CATALOG)
