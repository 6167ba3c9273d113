"""Challenge participation, progress and leaderboard ranking.

Rules:
- max_participants == 0 means unlimited
- Joining twice is a successful no-op, checked before capacity
- progress is non-negative; percentage = current / target * 100 clamped to 0..100
- completed is one-way: once set, lower progress never clears it or completed_at
- Leaderboard ranks are distinct 1..n: score DESC, ties keep participant order
"""

from __future__ import annotations

from datetime import datetime, timezone

import structlog

from carbontrack.challenges.schemas import Challenge, JoinResult, LeaderboardEntry, Participant
from carbontrack.errors import ChallengeFullError, InvalidProgressError, NotParticipantError

logger = structlog.get_logger()


def is_full(challenge: Challenge) -> bool:
    return challenge.max_participants > 0 and challenge.current_participants >= challenge.max_participants


def progress_percentage(current: float, target: float) -> float:
    return max(0.0, min(current / target * 100, 100.0))


def join(challenge: Challenge, user_id: str, now: datetime | None = None) -> JoinResult:
    """Add a participant with zero progress.

    Raises:
        ChallengeFullError: If the challenge is at capacity.
    """
    if challenge.find_participant(user_id) is not None:
        return JoinResult(challenge=challenge, already_joined=True)

    if is_full(challenge):
        raise ChallengeFullError(challenge.id, challenge.max_participants)

    if now is None:
        now = datetime.now(timezone.utc)

    challenge.participants.append(Participant(user_id=user_id, joined_at=now))
    challenge.current_participants += 1
    return JoinResult(challenge=challenge)


def leave(challenge: Challenge, user_id: str) -> Challenge:
    """Remove a participant and its leaderboard entry.

    Raises:
        NotParticipantError: If the user is not participating.
    """
    if challenge.find_participant(user_id) is None:
        raise NotParticipantError(challenge.id, user_id)

    challenge.participants = [p for p in challenge.participants if p.user_id != user_id]
    challenge.leaderboard = [e for e in challenge.leaderboard if e.user_id != user_id]
    challenge.current_participants = max(challenge.current_participants - 1, 0)
    return challenge


def update_progress(
    challenge: Challenge,
    user_id: str,
    new_current: float,
    now: datetime | None = None,
) -> Challenge:
    """Set a participant's progress and flip completion on first reaching 100%.

    Raises:
        NotParticipantError: If the user is not participating.
        InvalidProgressError: If ``new_current`` is negative.
    """
    participant = challenge.find_participant(user_id)
    if participant is None:
        raise NotParticipantError(challenge.id, user_id)
    if new_current < 0:
        raise InvalidProgressError(challenge.id, user_id, new_current)

    progress = participant.progress
    progress.current = new_current
    progress.percentage = progress_percentage(new_current, challenge.goal.target)

    if progress.percentage >= 100 and not progress.completed:
        progress.completed = True
        progress.completed_at = now or datetime.now(timezone.utc)
        logger.info("challenge_completed", challenge_id=challenge.id, user_id=user_id)

    return challenge


def recompute_leaderboard(challenge: Challenge, now: datetime | None = None) -> Challenge:
    """Rebuild the leaderboard from participant progress."""
    if now is None:
        now = datetime.now(timezone.utc)

    # sorted() is stable, so equal scores keep participant order
    ranked = sorted(challenge.participants, key=lambda p: -p.progress.current)
    challenge.leaderboard = [
        LeaderboardEntry(
            user_id=p.user_id,
            score=p.progress.current,
            rank=idx + 1,
            last_updated=now,
        )
        for idx, p in enumerate(ranked)
    ]
    return challenge


def participant_rank(challenge: Challenge, user_id: str) -> LeaderboardEntry | None:
    """The user's current leaderboard entry, if ranked."""
    for entry in challenge.leaderboard:
        if entry.user_id == user_id:
            return entry
    return None
