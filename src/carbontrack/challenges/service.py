"""Store-backed challenge operations.

Each call is one read-modify-write of a single challenge record; the store is
expected to serialize writers per challenge.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from carbontrack.challenges import progress
from carbontrack.challenges.schemas import Challenge, JoinResult
from carbontrack.errors import ChallengeNotFoundError
from carbontrack.stores import ChallengeStore

logger = structlog.get_logger()


def get_challenge(challenges: ChallengeStore, challenge_id: str) -> Challenge:
    challenge = challenges.get(challenge_id)
    if challenge is None:
        raise ChallengeNotFoundError(challenge_id)
    return challenge


def join_challenge(
    challenges: ChallengeStore,
    challenge_id: str,
    user_id: str,
    now: datetime | None = None,
) -> JoinResult:
    """Join a challenge. Re-joining returns ``already_joined=True`` without saving."""
    challenge = get_challenge(challenges, challenge_id)
    result = progress.join(challenge, user_id, now)
    if result.already_joined:
        return result

    challenges.save(challenge)
    logger.info(
        "challenge_joined",
        challenge_id=challenge_id,
        user_id=user_id,
        participants=challenge.current_participants,
    )
    return result


def leave_challenge(challenges: ChallengeStore, challenge_id: str, user_id: str) -> Challenge:
    challenge = progress.leave(get_challenge(challenges, challenge_id), user_id)
    challenges.save(challenge)
    logger.info("challenge_left", challenge_id=challenge_id, user_id=user_id)
    return challenge


def update_challenge_progress(
    challenges: ChallengeStore,
    challenge_id: str,
    user_id: str,
    new_current: float,
    now: datetime | None = None,
) -> Challenge:
    challenge = progress.update_progress(get_challenge(challenges, challenge_id), user_id, new_current, now)
    challenges.save(challenge)
    return challenge


def recompute_leaderboard(
    challenges: ChallengeStore,
    challenge_id: str,
    now: datetime | None = None,
) -> Challenge:
    challenge = progress.recompute_leaderboard(get_challenge(challenges, challenge_id), now)
    challenges.save(challenge)
    logger.debug("leaderboard_recomputed", challenge_id=challenge_id, entries=len(challenge.leaderboard))
    return challenge
