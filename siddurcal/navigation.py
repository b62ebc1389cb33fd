"""
Category → service → bucket → item tree for browsing the siddur.

Every level is filtered by tradition and mode. When
``show_only_applicable`` is set, each level is also filtered by its own
applicability. Containers without surviving children are pruned, and
entries pointing at a parent id that is not in the catalog are dropped
with their whole branch. Siblings are ordered by ``order`` with ties kept
in catalog order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .applicability import SiddurFilterContext, evaluate_applicability, filter_by_mode
from .catalog import (
    BucketEntry,
    CatalogEntry,
    CategoryEntry,
    ItemEntry,
    ServiceEntry,
    SiddurCatalog,
)
from .const import ALL_TRADITIONS, IMPORTANCE_CORE
from .errors import InputInvalidError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationItem:
    item: ItemEntry
    applicable_today: bool


@dataclass(frozen=True)
class NavigationBucket:
    bucket: BucketEntry
    applicable_today: bool
    items: tuple[NavigationItem, ...]


@dataclass(frozen=True)
class NavigationService:
    service: ServiceEntry
    applicable_today: bool
    buckets: tuple[NavigationBucket, ...]


@dataclass(frozen=True)
class NavigationCategory:
    category: CategoryEntry
    applicable_today: bool
    services: tuple[NavigationService, ...]


@dataclass(frozen=True)
class SiddurNavigation:
    categories: tuple[NavigationCategory, ...] = ()
    category_map: dict[str, NavigationCategory] = field(default_factory=dict)
    service_map: dict[str, NavigationService] = field(default_factory=dict)
    bucket_map: dict[str, NavigationBucket] = field(default_factory=dict)
    item_map: dict[str, NavigationItem] = field(default_factory=dict)

    def iter_items(self):
        for category in self.categories:
            for service in category.services:
                for bucket in service.buckets:
                    yield from bucket.items


def _by_order(nodes: list, entry_of) -> tuple:
    # sorted() is stable, so equal orders keep catalog order
    return tuple(sorted(nodes, key=lambda node: entry_of(node).order))


def _drop_orphans(level: str, grouped: dict[str, list], known: set[str]) -> None:
    for parent_id in grouped.keys() - known:
        _LOGGER.debug("Dropping %d %s under unknown parent %r", len(grouped[parent_id]), level, parent_id)


def build_navigation(
    catalog: SiddurCatalog | None,
    tradition: str,
    mode: str,
    show_only_applicable: bool,
    context: SiddurFilterContext,
) -> SiddurNavigation:
    if tradition not in ALL_TRADITIONS:
        raise InputInvalidError(f"Unknown tradition {tradition!r}")
    if not catalog:
        filter_by_mode(IMPORTANCE_CORE, mode)   # still reject a bad mode
        return SiddurNavigation()

    def admit(entry: CatalogEntry) -> tuple[bool, bool]:
        """(passes filters, applicable today)"""
        if tradition not in entry.nusach or not filter_by_mode(entry.importance, mode):
            return False, False
        applicable = evaluate_applicability(entry.applicability, context)
        return applicable or not show_only_applicable, applicable

    items_by_bucket: dict[str, list[NavigationItem]] = {}
    for item in catalog.items:
        keep, applicable = admit(item)
        if keep:
            items_by_bucket.setdefault(item.bucket_id, []).append(NavigationItem(item, applicable))
    _drop_orphans("items", items_by_bucket, {b.id for b in catalog.buckets})

    buckets_by_service: dict[str, list[NavigationBucket]] = {}
    for bucket in catalog.buckets:
        items = items_by_bucket.get(bucket.id)
        if not items:
            continue
        keep, applicable = admit(bucket)
        if keep:
            node = NavigationBucket(bucket, applicable, _by_order(items, lambda n: n.item))
            buckets_by_service.setdefault(bucket.service_id, []).append(node)
    _drop_orphans("buckets", buckets_by_service, {s.id for s in catalog.services})

    services_by_category: dict[str, list[NavigationService]] = {}
    for service in catalog.services:
        buckets = buckets_by_service.get(service.id)
        if not buckets:
            continue
        keep, applicable = admit(service)
        if keep:
            node = NavigationService(service, applicable, _by_order(buckets, lambda n: n.bucket))
            services_by_category.setdefault(service.category_id, []).append(node)
    _drop_orphans("services", services_by_category, {c.id for c in catalog.categories})

    categories: list[NavigationCategory] = []
    for category in catalog.categories:
        services = services_by_category.get(category.id)
        if not services:
            continue
        keep, applicable = admit(category)
        if keep:
            categories.append(NavigationCategory(category, applicable, _by_order(services, lambda n: n.service)))

    ordered = _by_order(categories, lambda n: n.category)
    category_map, service_map, bucket_map, item_map = {}, {}, {}, {}
    for category in ordered:
        category_map[category.category.id] = category
        for service in category.services:
            service_map[service.service.id] = service
            for bucket in service.buckets:
                bucket_map[bucket.bucket.id] = bucket
                for item in bucket.items:
                    item_map[item.item.id] = item

    nav = SiddurNavigation(ordered, category_map, service_map, bucket_map, item_map)

    _LOGGER.debug(
        "Navigation for %s/%s on %s: %d categories, %d items",
        tradition, mode, context.date, len(nav.categories), len(nav.item_map),
    )
    return nav


def get_today_siddur_outline(
    catalog: SiddurCatalog | None,
    tradition: str,
    mode: str,
    context: SiddurFilterContext,
) -> tuple[NavigationCategory, ...]:
    """Only what applies today."""
    return build_navigation(catalog, tradition, mode, True, context).categories
