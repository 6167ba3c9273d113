"""Activity lifecycle business logic.

Every change to an activity's emissions produces exactly one stats delta:
- record: +total_emissions, and the activity counts towards the streak
- update: new_total - old_total, only when category/subcategory/quantity/unit change
- remove: -total_emissions
so a user's total_emissions always equals the sum over their stored activities.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timedelta, timezone

import structlog

from carbontrack.activities.schemas import (
    Activity,
    ActivityUpdate,
    CategoryEmissions,
    EmissionsSummary,
    SummaryPeriod,
)
from carbontrack.config import get_settings
from carbontrack.emissions.calculator import calculate_emissions
from carbontrack.emissions.schemas import ActivityInput
from carbontrack.errors import ActivityNotFoundError, UserNotFoundError
from carbontrack.stores import ActivityStore, FactorSource, UserStore
from carbontrack.users.schemas import User
from carbontrack.users.stats import apply_user_stats_delta, as_utc

logger = structlog.get_logger()

_COPY_THROUGH_FIELDS = ("title", "description", "date", "location", "metadata", "tags", "notes")
_CLEARABLE_FIELDS = frozenset({"description", "location", "notes"})


def _get_activity(activities: ActivityStore, activity_id: str) -> Activity:
    activity = activities.get(activity_id)
    if activity is None:
        raise ActivityNotFoundError(activity_id)
    return activity


def _factor_region(region: str | None, location_country: str | None, owner: User | None) -> str | None:
    """Explicit region, then the activity location's country, then the owner's country."""
    if region:
        return region
    if location_country:
        return location_country
    return owner.country if owner is not None else None


def record_activity(
    factors: FactorSource,
    users: UserStore,
    activities: ActivityStore,
    user_id: str,
    activity_input: ActivityInput,
) -> Activity:
    """Compute and store a new activity, then credit it to the user's stats.

    The factor region falls back to the location's country, then the user's.

    Raises:
        UserNotFoundError: If the user does not exist.
        FactorNotFoundError: If no factor matches; nothing is stored.
    """
    user = users.get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)

    location_country = (activity_input.location or {}).get("country")
    region = _factor_region(activity_input.region, location_country, user)
    if region != activity_input.region:
        activity_input = activity_input.model_copy(update={"region": region})

    result = calculate_emissions(factors, activity_input)

    activity = Activity(
        user_id=user_id,
        category=activity_input.category,
        subcategory=activity_input.subcategory,
        title=activity_input.title or activity_input.subcategory,
        description=activity_input.description,
        date=activity_input.date or datetime.now(timezone.utc),
        quantity=activity_input.quantity,
        unit=activity_input.unit,
        emission_factor=result.factor_used.factor.value,
        factor_id=result.factor_used.id,
        total_emissions=result.total_emissions,
        location=activity_input.location,
        metadata=activity_input.metadata,
        tags=activity_input.tags,
        notes=activity_input.notes,
    )
    activities.save(activity)

    apply_user_stats_delta(
        users,
        user_id,
        result.total_emissions,
        0.0,
        activity.date,
        count_activity=True,
    )
    logger.info(
        "activity_recorded",
        activity_id=activity.id,
        user_id=user_id,
        category=activity.category.value,
        subcategory=activity.subcategory,
        total_emissions=activity.total_emissions,
    )
    return activity


def update_activity(
    factors: FactorSource,
    users: UserStore,
    activities: ActivityStore,
    activity_id: str,
    changes: ActivityUpdate,
) -> Activity:
    """Apply an edit, recomputing emissions when an emission-relevant field changed.

    Raises:
        ActivityNotFoundError: If the activity does not exist.
        FactorNotFoundError: If the edited category/subcategory has no factor;
            neither the activity nor the stats are modified.
    """
    activity = _get_activity(activities, activity_id)
    emissions_diff = 0.0

    if changes.changes_emissions():
        location = changes.location if "location" in changes.model_fields_set else activity.location
        region = _factor_region(
            changes.region,
            location.country if location is not None else None,
            users.get(activity.user_id),
        )

        recomputed = calculate_emissions(
            factors,
            ActivityInput(
                category=changes.category or activity.category,
                subcategory=changes.subcategory or activity.subcategory,
                quantity=changes.quantity if changes.quantity is not None else activity.quantity,
                unit=changes.unit or activity.unit,
                region=region,
            ),
        )
        emissions_diff = recomputed.total_emissions - activity.total_emissions

        activity.category = recomputed.factor_used.category
        activity.subcategory = recomputed.factor_used.subcategory
        activity.quantity = changes.quantity if changes.quantity is not None else activity.quantity
        activity.unit = changes.unit or activity.unit
        activity.emission_factor = recomputed.factor_used.factor.value
        activity.factor_id = recomputed.factor_used.id
        activity.total_emissions = recomputed.total_emissions

    for field in _COPY_THROUGH_FIELDS:
        if field in changes.model_fields_set:
            value = getattr(changes, field)
            if value is not None or field in _CLEARABLE_FIELDS:
                setattr(activity, field, value)

    activities.save(activity)

    if emissions_diff != 0:
        apply_user_stats_delta(users, activity.user_id, emissions_diff)

    logger.info(
        "activity_updated",
        activity_id=activity.id,
        user_id=activity.user_id,
        emissions_diff=emissions_diff,
    )
    return activity


def remove_activity(users: UserStore, activities: ActivityStore, activity_id: str) -> Activity:
    """Delete an activity and reverse its emissions from the owner's stats."""
    activity = _get_activity(activities, activity_id)

    apply_user_stats_delta(users, activity.user_id, -activity.total_emissions)
    activities.delete(activity_id)

    logger.info(
        "activity_removed",
        activity_id=activity_id,
        user_id=activity.user_id,
        total_emissions=activity.total_emissions,
    )
    return activity


def purge_user_activities(users: UserStore, activities: ActivityStore, user_id: str) -> int:
    """Remove every activity of a user (account deletion). Returns the count removed."""
    removed = 0
    for activity in activities.list_for_user(user_id):
        remove_activity(users, activities, activity.id)
        removed += 1
    logger.info("user_activities_purged", user_id=user_id, removed=removed)
    return removed


def summarize_emissions(
    activities: list[Activity],
    start: datetime | None = None,
    end: datetime | None = None,
) -> EmissionsSummary:
    """Total emissions and per-category breakdown for activities dated in [start, end].

    Defaults to the last ``summary_default_days`` days up to now. Naive datetimes
    are taken as UTC.
    """
    end = datetime.now(timezone.utc) if end is None else as_utc(end)
    if start is None:
        start = end - timedelta(days=get_settings().summary_default_days)
    else:
        start = as_utc(start)

    in_period = [a for a in activities if start <= as_utc(a.date) <= end]
    total = sum(a.total_emissions for a in in_period)

    by_category: dict[str, float] = defaultdict(float)
    for a in in_period:
        by_category[a.category.value] += a.total_emissions

    breakdown = [
        CategoryEmissions(
            category=category,
            emissions=emissions,
            percentage=(emissions / total * 100) if total else 0.0,
        )
        for category, emissions in by_category.items()
    ]

    return EmissionsSummary(
        period=SummaryPeriod(start=start, end=end),
        total_emissions=total,
        activity_count=len(in_period),
        category_breakdown=breakdown,
    )
