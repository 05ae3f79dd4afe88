"""Feasibility decision rules: deterministic, no LLM, no randomness.

Each rule inspects the idea (and the output of earlier rules) to produce
one part of the feasibility report. Rules are applied sequentially by
the estimation graph; none of them reads the output of a later rule.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from ...constants import (
    ADVICE_AMBITIOUS_THRESHOLD,
    ADVICE_CHALLENGING_THRESHOLD,
    ADVICE_FEASIBLE_THRESHOLD,
    DEVELOPMENT_PERCENTAGE,
    FEATURE_HOUR_MULTIPLIERS,
    MAX_TECHNOLOGIES,
    SETUP_PERCENTAGE,
)
from ...schemas.feasibility_schema import Feature, Technology, TimelineStage
from ...schemas.idea_schema import HackathonIdea
from ...services.scoring_engine import round_half_up
from .catalog import (
    ADVANCED_FEATURES,
    BASELINE_FEATURES,
    CATEGORY_FEATURES,
    CATEGORY_TECHNOLOGIES,
    COMMON_TECHNOLOGIES,
    DELIVERY_FEATURES,
    MOBILE_TOOLING_TECHNOLOGY,
    TIMELINE_STAGE_TEXT,
    TYPED_LANGUAGE_TECHNOLOGY,
    WEB_STYLING_TECHNOLOGY,
)


# ── Technologies ──────────────────────────────────────────────────────

def decide_technologies(idea: HackathonIdea) -> List[Technology]:
    """Recommend at most six technologies for the idea."""
    candidates: List[Dict] = []

    # Unknown categories (and "other") have no base list
    candidates.extend(CATEGORY_TECHNOLOGIES.get(idea.category, []))

    candidates.extend(COMMON_TECHNOLOGIES)

    if "web" in idea.target_platform:
        candidates.append(WEB_STYLING_TECHNOLOGY)

    if "mobile" in idea.target_platform and "mobile" not in idea.category:
        candidates.append(MOBILE_TOOLING_TECHNOLOGY)

    if idea.complexity == "advanced":
        candidates.append(TYPED_LANGUAGE_TECHNOLOGY)

    unique: Dict[str, Technology] = {}
    for entry in candidates:
        if entry["name"] not in unique:
            unique[entry["name"]] = Technology(**entry)

    return list(unique.values())[:MAX_TECHNOLOGIES]


# ── Features ──────────────────────────────────────────────────────────

def decide_features(
    idea: HackathonIdea,
    technologies: Sequence[Technology],
) -> List[Feature]:
    """Build the prioritized feature list with complexity-adjusted hours.

    ``technologies`` is part of the signature for callers that group
    features by stack; the selection itself does not depend on it.
    """
    entries: List[Dict] = []

    entries.extend(BASELINE_FEATURES)
    entries.extend(CATEGORY_FEATURES.get(idea.category, []))
    entries.extend(DELIVERY_FEATURES)

    if idea.complexity == "advanced":
        entries.extend(ADVANCED_FEATURES)

    # One rounding pass over the assembled list
    multiplier = FEATURE_HOUR_MULTIPLIERS[idea.complexity]
    return [
        Feature(**{**entry, "estimated_hours": round_half_up(entry["estimated_hours"] * multiplier)})
        for entry in entries
    ]


# ── Timeline ──────────────────────────────────────────────────────────

def decide_timeline(
    total_hours: int,
    features: Sequence[Feature],
) -> List[TimelineStage]:
    """Split the total into setup / development / finalization phases.

    Percent boundaries stay at 0, 15, 75 and 100; only the hours are
    rounded, and the last phase absorbs the rounding remainder.
    """
    setup_hours = round_half_up(total_hours * (SETUP_PERCENTAGE / 100))
    development_hours = round_half_up(total_hours * (DEVELOPMENT_PERCENTAGE / 100))
    finalizing_hours = total_hours - setup_hours - development_hours

    development_end = SETUP_PERCENTAGE + DEVELOPMENT_PERCENTAGE
    bounds = [
        (setup_hours, 0, SETUP_PERCENTAGE),
        (development_hours, SETUP_PERCENTAGE, development_end),
        (finalizing_hours, development_end, 100),
    ]

    return [
        TimelineStage(
            name=text["name"],
            description=text["description"],
            estimated_hours=hours,
            start_percentage=start,
            end_percentage=end,
        )
        for text, (hours, start, end) in zip(TIMELINE_STAGE_TEXT, bounds)
    ]


# ── Narrative ─────────────────────────────────────────────────────────

def suggested_core_feature_count(team_size: int) -> int:
    """One core functionality per extra teammate, between 1 and 3."""
    return min(3, max(1, team_size - 1))


def decide_advice(score: int, idea: HackathonIdea) -> str:
    """Pick the advice tier for *score*."""
    if score >= ADVICE_FEASIBLE_THRESHOLD:
        return (
            "This project is feasible within your hackathon timeframe. "
            "Focus on building a solid MVP and leave time for testing and presentation prep."
        )
    if score >= ADVICE_AMBITIOUS_THRESHOLD:
        return (
            "This project is ambitious but doable. Consider simplifying some features or "
            f"focusing on just {suggested_core_feature_count(idea.team_size)} core "
            "functionalities to ensure completion."
        )
    if score >= ADVICE_CHALLENGING_THRESHOLD:
        return (
            f"This project may be challenging to complete in {idea.duration_hours} hours. "
            "Consider reducing scope significantly or adding more team members with relevant expertise."
        )
    return (
        f"This project is very ambitious for a {idea.duration_hours}-hour hackathon. "
        "Consider pivoting to a simpler concept or extending your timeline if possible."
    )


def decide_mvp_scope(features: Sequence[Feature]) -> str:
    """HTML summary of the must-have features, in feature-list order."""
    must_haves = [f for f in features if f.priority == "must-have"]

    parts: List[str] = [
        "<p>For a successful hackathon project, focus on these "
        f"<strong>{len(must_haves)} core components</strong>:</p>",
        "<ul>",
    ]
    # Catalog text only, never user input
    for feature in must_haves:
        parts.append(f"<li><strong>{feature.name}</strong>: {feature.description}</li>")
    parts.append("</ul>")
    parts.append(
        "<p>If time permits, consider adding 'should-have' features "
        "after completing these core components.</p>"
    )

    return "".join(parts)
