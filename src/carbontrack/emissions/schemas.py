"""Pydantic models for emission factors and calculation results."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field


class ActivityCategory(str, Enum):
    TRANSPORT = "transport"
    ENERGY = "energy"
    FOOD = "food"
    SHOPPING = "shopping"
    WASTE = "waste"
    OTHER = "other"


class Reliability(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# ── Factor ──


class FactorValue(BaseModel):
    value: float = Field(ge=0)
    unit: str = "kg CO2e"
    per_unit: str


class Region(BaseModel):
    country: str | None = None
    state: str | None = None
    city: str | None = None


class FactorSource(BaseModel):
    name: str | None = None
    url: str | None = None
    year: int | None = None
    reliability: Reliability = Reliability.MEDIUM


class FactorConditions(BaseModel):
    min_value: float | None = None
    max_value: float | None = None
    unit: str | None = None
    notes: str | None = None


class EmissionFactor(BaseModel):
    """A conversion constant from an activity quantity to kg CO2e."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    category: ActivityCategory
    subcategory: str
    name: str
    description: str | None = Field(default=None, max_length=500)
    factor: FactorValue
    region: Region | None = None
    source: FactorSource = Field(default_factory=FactorSource)
    conditions: FactorConditions | None = None
    tags: list[str] = Field(default_factory=list)
    version: int = 1
    is_active: bool = True

    @property
    def country(self) -> str | None:
        return self.region.country if self.region else None


# ── Calculation ──


class ActivityInput(BaseModel):
    """The fields of an activity that determine its emissions."""

    category: ActivityCategory
    subcategory: str
    quantity: float = Field(ge=0)
    unit: str
    region: str | None = None
    title: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    date: datetime | None = None
    location: dict[str, Any] | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    notes: str | None = Field(default=None, max_length=1000)


class EmissionsResult(BaseModel):
    total_emissions: float
    factor_used: EmissionFactor
