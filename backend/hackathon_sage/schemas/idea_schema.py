from __future__ import annotations

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..constants import (
    DEFAULT_CATEGORY,
    DEFAULT_COMPLEXITY,
    DEFAULT_DURATION_HOURS,
    DEFAULT_TARGET_PLATFORMS,
    DEFAULT_TEAM_SIZE,
    DURATION_MAX_HOURS,
    DURATION_MIN_HOURS,
    DURATION_STEP_HOURS,
    TEAM_SIZE_MAX,
    TEAM_SIZE_MIN,
)

Complexity = Literal["beginner", "intermediate", "advanced"]


class HackathonIdea(BaseModel):
    """Hackathon project idea as submitted by the input form.

    Immutable once built. ``category`` and ``target_platform`` are not
    restricted to the known taxonomy: unknown values simply match no
    lookup table and produce shorter technology lists.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "title": "AI Study Buddy",
                "description": "A chat assistant that quizzes students on their lecture notes.",
                "complexity": "intermediate",
                "teamSize": 3,
                "durationHours": 24,
                "category": "ai-ml",
                "targetPlatform": ["web"],
            }
        },
    )

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=5000)
    complexity: Complexity = DEFAULT_COMPLEXITY
    team_size: int = Field(
        DEFAULT_TEAM_SIZE,
        ge=TEAM_SIZE_MIN,
        le=TEAM_SIZE_MAX,
        strict=True,
        description="Number of people on the team",
    )
    duration_hours: int = Field(
        DEFAULT_DURATION_HOURS,
        ge=DURATION_MIN_HOURS,
        le=DURATION_MAX_HOURS,
        strict=True,
        description="Hackathon length in hours, in steps of 6",
    )
    category: str = Field(DEFAULT_CATEGORY, min_length=1, max_length=50)
    target_platform: Tuple[str, ...] = Field(
        default=tuple(DEFAULT_TARGET_PLATFORMS),
        description="Platform tags (web, mobile, desktop, iot, ar-vr)",
    )

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped

    @field_validator("duration_hours")
    @classmethod
    def duration_on_step(cls, v: int) -> int:
        if v % DURATION_STEP_HOURS != 0:
            raise ValueError(f"must be a multiple of {DURATION_STEP_HOURS} hours")
        return v

    @field_validator("category")
    @classmethod
    def normalize_category(cls, v: str) -> str:
        normalized = v.strip().lower()
        if not normalized:
            raise ValueError("must not be blank")
        return normalized

    @field_validator("target_platform")
    @classmethod
    def dedupe_platforms(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        # Checkbox set semantics; keep first occurrence order
        seen: list[str] = []
        for tag in v:
            tag = tag.strip().lower()
            if tag and tag not in seen:
                seen.append(tag)
        return tuple(seen)
