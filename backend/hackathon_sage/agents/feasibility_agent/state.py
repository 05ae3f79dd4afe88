from typing import List, Optional, TypedDict

from ...schemas.feasibility_schema import Feature, Technology, TimelineStage
from ...schemas.idea_schema import HackathonIdea
from ...services.scoring_engine import ScoreBreakdown


class EstimationState(TypedDict):
    idea: HackathonIdea

    # Selectors
    technologies: Optional[List[Technology]]
    features: Optional[List[Feature]]

    # Aggregate time (feeds timeline and scorer)
    total_time_hours: Optional[int]
    timeline_stages: Optional[List[TimelineStage]]

    # Scorer
    score_breakdown: Optional[ScoreBreakdown]
    feasibility_score: Optional[int]

    # Narrative
    feasibility_level: Optional[str]
    advice: Optional[str]
    mvp_scope: Optional[str]


def initial_state(idea: HackathonIdea) -> EstimationState:
    """Fresh state for one analysis; nothing carries over between calls."""
    return {
        "idea": idea,
        "technologies": None,
        "features": None,
        "total_time_hours": None,
        "timeline_stages": None,
        "score_breakdown": None,
        "feasibility_score": None,
        "feasibility_level": None,
        "advice": None,
        "mvp_scope": None,
    }
