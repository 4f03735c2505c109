"""
Catalog models — product records and the per-platform change log.

A ProductRecord describes one product's lifetime: the release it first
shipped in, the release it was withdrawn or renamed at, and which
platforms offer it.  ProductCatalog is the per-platform view the
resolver works on: two read-only mappings from release to the products
added or removed at that release.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from mpm_installer.core.models.platform import Platform
from mpm_installer.core.models.release import Release

ALL_PLATFORMS: frozenset[Platform] = frozenset(Platform)


@dataclass(frozen=True)
class ProductRecord:
    """One installable product and its availability.

    ``added_on`` overrides ``added`` for platforms that got the product
    at a different release (e.g. Linux support arriving later than
    Windows).
    """

    product: str
    added: str = "R2017b"
    removed: str | None = None
    platforms: frozenset[Platform] = ALL_PLATFORMS
    added_on: Mapping[Platform, str] = field(default_factory=dict)

    def added_release(self, platform: Platform) -> Release:
        return Release.parse(self.added_on.get(platform, self.added))

    def removed_release(self) -> Release | None:
        return Release.parse(self.removed) if self.removed else None


@dataclass(frozen=True)
class ProductCatalog:
    """Per-platform addition and removal tables, keyed by release."""

    platform: Platform
    additions: Mapping[Release, frozenset[str]]
    removals: Mapping[Release, frozenset[str]]

    @classmethod
    def from_records(
        cls,
        platform: Platform,
        records: Iterable[ProductRecord],
        *,
        excluded: Iterable[str] = (),
    ) -> ProductCatalog:
        """Build the read-only tables for one platform.

        Args:
            platform: Platform to build for.
            records: Product records; those not offered on the
                platform are skipped.
            excluded: Product names to leave out on this platform
                even when their record lists it.
        """
        skip = set(excluded)
        additions: dict[Release, set[str]] = {}
        removals: dict[Release, set[str]] = {}

        for record in records:
            if platform not in record.platforms or record.product in skip:
                continue
            additions.setdefault(record.added_release(platform), set()).add(record.product)
            removed = record.removed_release()
            if removed is not None:
                removals.setdefault(removed, set()).add(record.product)

        return cls(
            platform=platform,
            additions=_freeze(additions),
            removals=_freeze(removals),
        )


def _freeze(table: dict[Release, set[str]]) -> Mapping[Release, frozenset[str]]:
    return MappingProxyType({release: frozenset(products) for release, products in table.items()})
