"""Pydantic models for challenges, their participants and leaderboards."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChallengeStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class ChallengeGoal(BaseModel):
    target: float = Field(gt=0)
    unit: str
    description: str | None = None


class ChallengeDuration(BaseModel):
    start_date: datetime
    end_date: datetime


class ParticipantProgress(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    current: float = Field(default=0.0, ge=0)
    percentage: float = 0.0
    completed: bool = False
    completed_at: datetime | None = None


class Participant(BaseModel):
    user_id: str
    joined_at: datetime = Field(default_factory=_utcnow)
    progress: ParticipantProgress = Field(default_factory=ParticipantProgress)


class LeaderboardEntry(BaseModel):
    user_id: str
    score: float
    rank: int
    last_updated: datetime


class Challenge(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    title: str = Field(max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    goal: ChallengeGoal
    duration: ChallengeDuration | None = None
    status: ChallengeStatus = ChallengeStatus.ACTIVE
    max_participants: int = Field(default=0, ge=0)  # 0 = unlimited
    current_participants: int = 0
    participants: list[Participant] = Field(default_factory=list)
    leaderboard: list[LeaderboardEntry] = Field(default_factory=list)

    def find_participant(self, user_id: str) -> Participant | None:
        for p in self.participants:
            if p.user_id == user_id:
                return p
        return None


class JoinResult(BaseModel):
    """Outcome of a join. ``already_joined`` marks the idempotent no-op."""

    challenge: Challenge
    already_joined: bool = False
