"""Pydantic schemas for the input form options endpoint."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .idea_schema import Complexity


class LabeledOption(BaseModel):
    """A selectable value with its display label."""

    id: str
    label: str


class NumericRange(BaseModel):
    min: int
    max: int
    step: int


class FormDefaults(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    complexity: Complexity
    team_size: int
    duration_hours: int
    category: str
    target_platform: List[str]


class EstimatorOptions(BaseModel):
    """Everything the input form needs to render its controls."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    categories: List[LabeledOption] = Field(..., description="Project categories in display order")
    platforms: List[LabeledOption] = Field(..., description="Target platform checkboxes")
    complexity_levels: List[str]
    team_size: NumericRange
    duration_hours: NumericRange
    defaults: FormDefaults
