"""Pydantic models for users and their running emission stats."""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator


class UserStats(BaseModel):
    """Running totals embedded in a user record.

    ``net_emissions`` is derived from the two totals on every construction.
    """

    total_emissions: float = 0.0
    total_offset: float = 0.0
    net_emissions: float = 0.0
    streak_days: int = 0
    last_activity_date: datetime | None = None

    @model_validator(mode="after")
    def _derive_net(self) -> UserStats:
        self.net_emissions = self.total_emissions - self.total_offset
        return self


class User(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    username: str = Field(min_length=3, max_length=30)
    country: str | None = None
    stats: UserStats = Field(default_factory=UserStats)
