"""Pydantic models for logged activities and emission summaries."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field

from carbontrack.emissions.schemas import ActivityCategory


class ActivityLocation(BaseModel):
    country: str | None = None
    city: str | None = None
    lat: float | None = None
    lng: float | None = None


class Activity(BaseModel):
    """A logged activity with the emissions computed at its last save."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    user_id: str
    category: ActivityCategory
    subcategory: str
    title: str = Field(max_length=100)
    description: str | None = Field(default=None, max_length=500)
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    quantity: float = Field(ge=0)
    unit: str
    emission_factor: float = Field(ge=0)
    factor_id: str | None = None
    total_emissions: float = Field(ge=0)
    location: ActivityLocation | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    notes: str | None = Field(default=None, max_length=1000)


class ActivityUpdate(BaseModel):
    """Partial activity edit. Unset fields keep their stored value."""

    category: ActivityCategory | None = None
    subcategory: str | None = None
    quantity: float | None = Field(default=None, ge=0)
    unit: str | None = None
    region: str | None = None
    title: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    date: datetime | None = None
    location: ActivityLocation | None = None
    metadata: dict[str, Any] | None = None
    tags: list[str] | None = None
    notes: str | None = Field(default=None, max_length=1000)

    def changes_emissions(self) -> bool:
        """True if the edit touches a field that determines total_emissions."""
        return bool({"category", "subcategory", "quantity", "unit"} & self.model_fields_set)


# ── Summaries ──


class SummaryPeriod(BaseModel):
    start: datetime
    end: datetime


class CategoryEmissions(BaseModel):
    category: str
    emissions: float
    percentage: float


class EmissionsSummary(BaseModel):
    period: SummaryPeriod
    total_emissions: float
    activity_count: int
    category_breakdown: list[CategoryEmissions]
