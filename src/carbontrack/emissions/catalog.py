"""Emission factor catalog and resolution.

Resolution order for (category, subcategory, region):
1. Only active factors with an exact category and subcategory match
2. With a region: factors for that country, or factors with no country
3. Region match DESC, then version DESC
4. Deterministic tiebreak for duplicate catalog rows: factor value ASC, id ASC
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from carbontrack.emissions.schemas import ActivityCategory, EmissionFactor, Region
from carbontrack.emissions.seed import FACTOR_SEED_DATA
from carbontrack.errors import FactorNotFoundError
from carbontrack.stores import FactorSource

logger = structlog.get_logger()


def _country(region: str | Region | None) -> str | None:
    if region is None:
        return None
    if isinstance(region, Region):
        return region.country
    return region or None


def rank_candidates(
    factors: Iterable[EmissionFactor],
    country: str | None = None,
) -> list[EmissionFactor]:
    """Order candidate factors best-first for the requested country.

    Factors pinned to a different country are dropped when a country is given.
    """
    if country is None:
        candidates = list(factors)
    else:
        candidates = [f for f in factors if f.country is None or f.country == country]

    def sort_key(f: EmissionFactor) -> tuple[int, int, float, str]:
        region_match = 1 if country is not None and f.country == country else 0
        return (-region_match, -f.version, f.factor.value, f.id)

    return sorted(candidates, key=sort_key)


class FactorCatalog:
    """In-memory set of emission factors, injected wherever factors are resolved."""

    def __init__(self, factors: Iterable[EmissionFactor] = ()) -> None:
        self._factors: dict[str, EmissionFactor] = {}
        for factor in factors:
            self.add(factor)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> FactorCatalog:
        """Build a catalog from plain mappings (seed files, fixtures)."""
        return cls(EmissionFactor.model_validate(r) for r in records)

    def __len__(self) -> int:
        return len(self._factors)

    def __iter__(self):
        return iter(self._factors.values())

    def add(self, factor: EmissionFactor) -> EmissionFactor:
        self._factors[factor.id] = factor
        return factor

    def get(self, factor_id: str) -> EmissionFactor | None:
        return self._factors.get(factor_id)

    def deactivate(self, factor_id: str) -> EmissionFactor | None:
        """Mark a factor inactive. Returns the updated factor, or None if unknown."""
        factor = self._factors.get(factor_id)
        if factor is None:
            return None
        updated = factor.model_copy(update={"is_active": False})
        self._factors[factor_id] = updated
        return updated

    def active_factors(
        self,
        category: ActivityCategory | str,
        subcategory: str | None = None,
    ) -> list[EmissionFactor]:
        """All active factors of a category, optionally narrowed to a subcategory."""
        category = ActivityCategory(category)
        return [
            f for f in self._factors.values()
            if f.is_active
            and f.category == category
            and (subcategory is None or f.subcategory == subcategory)
        ]

    def find(
        self,
        category: ActivityCategory | str,
        subcategory: str,
        region: str | Region | None = None,
    ) -> EmissionFactor | None:
        """Best matching active factor, or None."""
        return find_factor(self, category, subcategory, region)

    def resolve(
        self,
        category: ActivityCategory | str,
        subcategory: str,
        region: str | Region | None = None,
    ) -> EmissionFactor:
        return resolve_factor(self, category, subcategory, region)

    def category_factors(self, category: ActivityCategory | str) -> list[EmissionFactor]:
        """Active factors of one category, sorted by subcategory then name."""
        return sorted(self.active_factors(category), key=lambda f: (f.subcategory, f.name))

    def categories(self) -> dict[str, list[str]]:
        """Category -> sorted distinct subcategories over the active set."""
        result: dict[str, set[str]] = {}
        for f in self._factors.values():
            if f.is_active:
                result.setdefault(f.category.value, set()).add(f.subcategory)
        return {cat: sorted(subs) for cat, subs in sorted(result.items())}


def find_factor(
    source: FactorSource,
    category: ActivityCategory | str,
    subcategory: str,
    region: str | Region | None = None,
) -> EmissionFactor | None:
    """Best matching active factor from any factor source, or None."""
    ranked = rank_candidates(source.active_factors(category, subcategory), _country(region))
    if not ranked:
        return None
    return ranked[0]


def resolve_factor(
    source: FactorSource,
    category: ActivityCategory | str,
    subcategory: str,
    region: str | Region | None = None,
) -> EmissionFactor:
    """Resolve the canonical factor for an activity.

    Raises:
        FactorNotFoundError: If no active factor matches category and subcategory.
    """
    country = _country(region)
    factor = find_factor(source, category, subcategory, country)
    if factor is None:
        category_value = ActivityCategory(category).value
        logger.warning(
            "factor_not_found",
            category=category_value,
            subcategory=subcategory,
            region=country,
        )
        raise FactorNotFoundError(category_value, subcategory, country)

    logger.debug(
        "factor_resolved",
        factor_id=factor.id,
        category=factor.category.value,
        subcategory=subcategory,
        region=country,
        factor_region=factor.country,
        version=factor.version,
    )
    return factor


def default_catalog() -> FactorCatalog:
    """Catalog pre-populated with the bundled seed factors."""
    return FactorCatalog.from_records(FACTOR_SEED_DATA)
