"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from carbontrack.challenges.schemas import Challenge, ChallengeGoal
from carbontrack.config import get_settings
from carbontrack.emissions.catalog import FactorCatalog
from carbontrack.emissions.schemas import EmissionFactor, FactorValue, Region
from carbontrack.stores import InMemoryActivityStore, InMemoryChallengeStore, InMemoryUserStore
from carbontrack.users.schemas import User


def make_factor(
    factor_id: str,
    category: str = "transport",
    subcategory: str = "car",
    value: float = 0.2,
    per_unit: str = "km",
    country: str | None = None,
    version: int = 1,
    is_active: bool = True,
) -> EmissionFactor:
    """Build an emission factor with sensible defaults."""
    return EmissionFactor(
        id=factor_id,
        category=category,
        subcategory=subcategory,
        name=f"{category}/{subcategory} {factor_id}",
        factor=FactorValue(value=value, per_unit=per_unit),
        region=Region(country=country) if country else None,
        version=version,
        is_active=is_active,
    )


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from the host environment and cached settings."""
    monkeypatch.delenv("CARBONTRACK_STRICT_UNIT_CONVERSION", raising=False)
    monkeypatch.delenv("CARBONTRACK_LOG_FORMAT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def catalog() -> FactorCatalog:
    """Small catalog covering every resolution path."""
    return FactorCatalog([
        make_factor("car-global", value=0.2, per_unit="km"),
        make_factor("car-us", value=0.25, per_unit="km", country="US"),
        make_factor("electricity-global", "energy", "electricity", value=0.5, per_unit="kWh"),
        make_factor("electricity-us-v1", "energy", "electricity", value=0.9, per_unit="kWh", country="US"),
        make_factor("electricity-us-v2", "energy", "electricity", value=0.8, per_unit="kWh", country="US", version=2),
        make_factor("beef", "food", "beef", value=13.3, per_unit="kg"),
        make_factor("fuel-petrol", "transport", "car_petrol", value=2.31, per_unit="L"),
    ])


@pytest.fixture
def users() -> InMemoryUserStore:
    return InMemoryUserStore([
        User(id="alice", username="alice"),
        User(id="bob", username="bob", country="US"),
    ])


@pytest.fixture
def activities() -> InMemoryActivityStore:
    return InMemoryActivityStore()


@pytest.fixture
def challenges() -> InMemoryChallengeStore:
    return InMemoryChallengeStore([
        Challenge(id="car-free", title="30-Day Car-Free", goal=ChallengeGoal(target=100, unit="km")),
        Challenge(
            id="solo",
            title="Solo sprint",
            goal=ChallengeGoal(target=10, unit="kg CO2e"),
            max_participants=1,
        ),
    ])


@pytest.fixture
def factor_factory():
    """Expose make_factor to tests that build their own catalogs."""
    return make_factor
