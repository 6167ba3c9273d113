"""Store-backed challenge operations."""

from datetime import datetime, timezone

import pytest

from carbontrack.challenges.service import (
    join_challenge,
    leave_challenge,
    recompute_leaderboard,
    update_challenge_progress,
)
from carbontrack.errors import ChallengeFullError, ChallengeNotFoundError, NotParticipantError

NOW = datetime(2026, 3, 2, 12, 0, 0, tzinfo=timezone.utc)


class TestChallengeService:
    """Each operation reads, applies and saves one challenge."""

    def test_join_persists(self, challenges):
        result = join_challenge(challenges, "car-free", "alice", NOW)
        assert result.already_joined is False
        assert challenges.get("car-free").current_participants == 1

    def test_join_twice_reports_already_joined(self, challenges):
        join_challenge(challenges, "car-free", "alice", NOW)
        result = join_challenge(challenges, "car-free", "alice", NOW)
        assert result.already_joined is True
        assert challenges.get("car-free").current_participants == 1

    def test_join_full(self, challenges):
        join_challenge(challenges, "solo", "alice", NOW)
        with pytest.raises(ChallengeFullError):
            join_challenge(challenges, "solo", "bob", NOW)
        assert challenges.get("solo").current_participants == 1

    def test_unknown_challenge(self, challenges):
        with pytest.raises(ChallengeNotFoundError):
            join_challenge(challenges, "nope", "alice", NOW)

    def test_progress_and_leaderboard_persist(self, challenges):
        for uid in ("alice", "bob"):
            join_challenge(challenges, "car-free", uid, NOW)
        update_challenge_progress(challenges, "car-free", "alice", 40, NOW)
        update_challenge_progress(challenges, "car-free", "bob", 100, NOW)

        recompute_leaderboard(challenges, "car-free", NOW)

        stored = challenges.get("car-free")
        assert [(e.user_id, e.rank) for e in stored.leaderboard] == [("bob", 1), ("alice", 2)]
        assert stored.find_participant("bob").progress.completed is True

    def test_progress_for_non_participant(self, challenges):
        with pytest.raises(NotParticipantError):
            update_challenge_progress(challenges, "car-free", "ghost", 5, NOW)

    def test_leave_persists(self, challenges):
        join_challenge(challenges, "car-free", "alice", NOW)
        leave_challenge(challenges, "car-free", "alice")
        stored = challenges.get("car-free")
        assert stored.current_participants == 0
        assert stored.participants == []
