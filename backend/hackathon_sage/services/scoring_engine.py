"""Deterministic Scoring Engine.

Turns the selected features and technologies into an adjusted total of
person-hours, then grades that total against the hackathon duration and
team make-up with fixed penalty formulas.

Rules
-----
- NO API calls
- NO randomness
- Rounding is always half-up (``floor(x + 0.5)``), never banker's rounding
- Pure deterministic math
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..constants import (
    COMPLEXITY_TIME_MODIFIERS,
    LEVEL_HIGH_THRESHOLD,
    LEVEL_MODERATE_THRESHOLD,
    MAX_OVERAGE_PENALTY,
    MAX_SCOPE_PENALTY,
    MAX_TEAM_PENALTY,
    MUST_HAVE_ALLOWANCE,
    SCOPE_PENALTY_PER_FEATURE,
    TEAM_COMPLEXITY_DIVISORS,
)
from ..schemas.feasibility_schema import Feature, Technology
from ..schemas.idea_schema import HackathonIdea


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (2.5 -> 3, 6.5 -> 7)."""
    return int(math.floor(value + 0.5))


def _clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    """Clamp *value* to [lo, hi]."""
    return max(lo, min(hi, value))


def team_size_modifier(team_size: int) -> float:
    """Diminishing-returns factor: 1.0 for a solo hacker, ~0.79 for eight."""
    return 1 - (math.log(team_size) / 10)


def compute_total_hours(
    idea: HackathonIdea,
    features: Sequence[Feature],
    technologies: Sequence[Technology],
) -> int:
    """Adjusted person-hours for the whole project.

    Raw hours (features + setup) are scaled by the complexity modifier,
    then by the team-size modifier, and rounded once at the end.
    """
    feature_hours = sum(f.estimated_hours for f in features)
    setup_hours = sum(t.setup_time_hours for t in technologies)
    total_raw_hours = feature_hours + setup_hours

    adjusted = total_raw_hours * COMPLEXITY_TIME_MODIFIERS[idea.complexity]
    return round_half_up(adjusted * team_size_modifier(idea.team_size))


@dataclass(frozen=True)
class ScoreBreakdown:
    """Individual penalties, each already clamped to its own cap."""

    overage_penalty: int
    team_penalty: int
    scope_penalty: int

    @property
    def total_penalty(self) -> int:
        return self.overage_penalty + self.team_penalty + self.scope_penalty

    @property
    def score(self) -> int:
        return int(_clamp(100 - self.total_penalty))


def compute_score_breakdown(
    idea: HackathonIdea,
    total_time_hours: int,
    features: Sequence[Feature],
) -> ScoreBreakdown:
    """Compute the three independent penalties."""

    # 1. Time overage - project needs longer than the hackathon lasts
    overage_penalty = 0
    if total_time_hours > idea.duration_hours:
        overage = (total_time_hours - idea.duration_hours) / idea.duration_hours
        overage_penalty = min(MAX_OVERAGE_PENALTY, round_half_up(overage * 100))

    # 2. Team too small for the chosen complexity
    team_penalty = 0
    ratio = idea.team_size / TEAM_COMPLEXITY_DIVISORS[idea.complexity]
    if ratio < 1:
        team_penalty = min(MAX_TEAM_PENALTY, round_half_up((1 - ratio) * 50))

    # 3. Too many must-haves to scope an MVP
    scope_penalty = 0
    must_have_count = sum(1 for f in features if f.priority == "must-have")
    if must_have_count > MUST_HAVE_ALLOWANCE:
        scope_penalty = min(
            MAX_SCOPE_PENALTY,
            (must_have_count - MUST_HAVE_ALLOWANCE) * SCOPE_PENALTY_PER_FEATURE,
        )

    return ScoreBreakdown(
        overage_penalty=overage_penalty,
        team_penalty=team_penalty,
        scope_penalty=scope_penalty,
    )


def compute_feasibility_score(
    idea: HackathonIdea,
    total_time_hours: int,
    features: Sequence[Feature],
) -> int:
    """Feasibility score, an integer clamped to 0-100."""
    return compute_score_breakdown(idea, total_time_hours, features).score


def feasibility_level(score: int) -> str:
    """Three-band grade of a score: high, moderate or low."""
    if score >= LEVEL_HIGH_THRESHOLD:
        return "high"
    if score >= LEVEL_MODERATE_THRESHOLD:
        return "moderate"
    return "low"
