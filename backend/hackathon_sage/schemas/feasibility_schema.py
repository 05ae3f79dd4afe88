"""Feasibility report schema - strict output contract.

Returned by the feasibility agent and serialized with camelCase keys
for the input form's results panel.
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Priority = Literal["must-have", "should-have", "nice-to-have"]
FeasibilityLevel = Literal["high", "moderate", "low"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Technology(_CamelModel):
    """A recommended tool or framework."""

    name: str
    category: str
    difficulty: int = Field(..., ge=1, le=5, description="Display weight, 1 (easy) to 5 (hard)")
    setup_time_hours: float = Field(..., ge=0.0)
    description: str


class Feature(_CamelModel):
    """A prioritized feature with its complexity-adjusted estimate."""

    name: str
    priority: Priority
    description: str
    estimated_hours: int = Field(..., ge=0)


class TimelineStage(_CamelModel):
    name: str
    description: str
    estimated_hours: int = Field(..., ge=0)
    start_percentage: int = Field(..., ge=0, le=100)
    end_percentage: int = Field(..., ge=0, le=100)


class FeasibilityResults(_CamelModel):
    """Complete feasibility report - every field derives from the idea."""

    recommended_technologies: List[Technology] = Field(
        ..., description="At most six technologies, unique by name"
    )
    features: List[Feature] = Field(
        ..., description="Feature list in catalog order"
    )
    mvp_scope: str = Field(
        ..., description="HTML fragment listing the must-have features"
    )
    total_time_hours: int = Field(
        ..., ge=0, description="Adjusted person-hours for the whole project"
    )
    timeline_stages: List[TimelineStage] = Field(
        ..., min_length=3, max_length=3, description="Setup, development and finalization phases"
    )
    feasibility_score: int = Field(..., ge=0, le=100)
    feasibility_level: FeasibilityLevel = Field(
        ..., description="high (>= 80), moderate (>= 50) or low"
    )
    advice: str
