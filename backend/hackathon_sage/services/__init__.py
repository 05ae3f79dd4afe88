
from .scoring_engine import (
    ScoreBreakdown,
    compute_feasibility_score,
    compute_score_breakdown,
    compute_total_hours,
    feasibility_level,
    round_half_up,
)

__all__ = [
    "ScoreBreakdown",
    "compute_feasibility_score",
    "compute_score_breakdown",
    "compute_total_hours",
    "feasibility_level",
    "round_half_up",
]
