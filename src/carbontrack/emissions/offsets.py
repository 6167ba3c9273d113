"""Carbon offset options and cost quotes."""

from __future__ import annotations

import structlog
from pydantic import BaseModel

from carbontrack.config import get_settings
from carbontrack.stores import UserStore
from carbontrack.users.schemas import UserStats
from carbontrack.users.stats import apply_user_stats_delta

logger = structlog.get_logger()


class OffsetOption(BaseModel):
    slug: str
    name: str
    description: str
    cost_per_ton: float
    effectiveness: str
    duration: str


class OffsetQuote(BaseModel):
    emissions: float
    offset_type: str
    cost_per_ton: float
    total_cost: float


OFFSET_OPTIONS: list[OffsetOption] = [
    OffsetOption(
        slug="tree-planting",
        name="Tree Planting",
        description="Plant trees to absorb CO2",
        cost_per_ton=25,
        effectiveness="High",
        duration="20-50 years",
    ),
    OffsetOption(
        slug="renewable-energy",
        name="Renewable Energy",
        description="Support renewable energy projects",
        cost_per_ton=15,
        effectiveness="High",
        duration="Immediate",
    ),
    OffsetOption(
        slug="ocean-conservation",
        name="Ocean Conservation",
        description="Protect marine ecosystems",
        cost_per_ton=30,
        effectiveness="Medium",
        duration="Ongoing",
    ),
]

_COST_BY_SLUG: dict[str, float] = {o.slug: o.cost_per_ton for o in OFFSET_OPTIONS}


def quote_offset_cost(emissions: float, offset_type: str) -> OffsetQuote:
    """Price offsetting ``emissions`` tonnes of CO2e with the given option.

    Unknown option slugs are priced at the configured default cost per ton.
    """
    cost_per_ton = _COST_BY_SLUG.get(offset_type, get_settings().default_offset_cost_per_ton)
    return OffsetQuote(
        emissions=emissions,
        offset_type=offset_type,
        cost_per_ton=cost_per_ton,
        total_cost=round(emissions * cost_per_ton, 2),
    )


def record_offset(users: UserStore, user_id: str, offset_amount: float) -> UserStats:
    """Credit an applied offset to the user's stats. The streak is untouched."""
    stats = apply_user_stats_delta(users, user_id, 0.0, offset_amount)
    logger.info("offset_recorded", user_id=user_id, offset=offset_amount, net_emissions=stats.net_emissions)
    return stats
