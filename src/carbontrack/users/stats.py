"""User stats aggregation: emission/offset totals and the daily activity streak.

Rules:
- Deltas are applied as-is; totals are never clamped, so the sum of every
  delta ever applied equals the current total
- net_emissions = total_emissions - total_offset, always recomputed
- Only activity-creation events move the streak; edits and deletes adjust totals only
- Streak days are whole UTC calendar days between the activity and the last one:
  0 -> unchanged, 1 -> +1, more -> reset to 1
"""

from __future__ import annotations

from datetime import date, datetime, timezone

import structlog

from carbontrack.errors import UserNotFoundError
from carbontrack.stores import UserStore
from carbontrack.users.schemas import UserStats

logger = structlog.get_logger()


def as_utc(dt: datetime) -> datetime:
    """``dt`` as an aware UTC datetime. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_day(dt: datetime) -> date:
    """Calendar day of ``dt`` in UTC."""
    return as_utc(dt).date()


def next_streak(streak_days: int, last_activity: datetime | None, activity_date: datetime) -> int:
    """Streak length after an activity on ``activity_date``."""
    if last_activity is None:
        return 1

    diff_days = abs((utc_day(activity_date) - utc_day(last_activity)).days)
    if diff_days == 0:
        return streak_days
    if diff_days == 1:
        return streak_days + 1
    return 1


def apply_delta(
    stats: UserStats,
    emissions_delta: float,
    offset_delta: float = 0.0,
    activity_date: datetime | None = None,
    *,
    count_activity: bool = False,
) -> UserStats:
    """Return new stats with the deltas applied.

    With ``count_activity`` the activity is treated as a new occurrence and the
    streak and last activity date are updated. A backdated activity (a day
    before the last activity day) is counted in the totals only.
    """
    streak_days = stats.streak_days
    last_activity = stats.last_activity_date

    if count_activity:
        if activity_date is None:
            activity_date = datetime.now(timezone.utc)
        if last_activity is None or utc_day(activity_date) >= utc_day(last_activity):
            streak_days = next_streak(streak_days, last_activity, activity_date)
            last_activity = activity_date

    return UserStats(
        total_emissions=stats.total_emissions + emissions_delta,
        total_offset=stats.total_offset + offset_delta,
        streak_days=streak_days,
        last_activity_date=last_activity,
    )


def apply_user_stats_delta(
    users: UserStore,
    user_id: str,
    emissions_delta: float,
    offset_delta: float = 0.0,
    activity_date: datetime | None = None,
    *,
    count_activity: bool = False,
) -> UserStats:
    """Load a user, apply the deltas to its stats and save it.

    Raises:
        UserNotFoundError: If the user does not exist.
    """
    user = users.get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)

    previous_streak = user.stats.streak_days
    user.stats = apply_delta(
        user.stats,
        emissions_delta,
        offset_delta,
        activity_date,
        count_activity=count_activity,
    )
    users.save(user)

    if user.stats.streak_days != previous_streak:
        logger.info(
            "streak_updated",
            user_id=user_id,
            streak_days=user.stats.streak_days,
            previous=previous_streak,
        )
    return user.stats
