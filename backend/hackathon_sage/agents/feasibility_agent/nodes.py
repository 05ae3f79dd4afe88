"""
Estimation graph nodes.

Each node reads the keys written by earlier nodes and returns only the
keys it owns. All nodes are synchronous and side-effect free apart from
timing logs.
"""

from ...services.scoring_engine import (
    compute_score_breakdown,
    compute_total_hours,
    feasibility_level,
)
from .rules import (
    decide_advice,
    decide_features,
    decide_mvp_scope,
    decide_technologies,
    decide_timeline,
)
from .state import EstimationState
from .timing import sync_timer


def select_technologies(state: EstimationState) -> dict:
    with sync_timer("select_technologies"):
        return {"technologies": decide_technologies(state["idea"])}


def select_features(state: EstimationState) -> dict:
    with sync_timer("select_features"):
        return {"features": decide_features(state["idea"], state["technologies"])}


def aggregate_hours(state: EstimationState) -> dict:
    with sync_timer("aggregate_hours"):
        total = compute_total_hours(
            state["idea"], state["features"], state["technologies"]
        )
        return {"total_time_hours": total}


def build_timeline(state: EstimationState) -> dict:
    with sync_timer("build_timeline"):
        stages = decide_timeline(state["total_time_hours"], state["features"])
        return {"timeline_stages": stages}


def score_feasibility(state: EstimationState) -> dict:
    with sync_timer("score_feasibility"):
        breakdown = compute_score_breakdown(
            state["idea"], state["total_time_hours"], state["features"]
        )
        return {
            "score_breakdown": breakdown,
            "feasibility_score": breakdown.score,
        }


def write_narrative(state: EstimationState) -> dict:
    with sync_timer("write_narrative"):
        score = state["feasibility_score"]
        return {
            "feasibility_level": feasibility_level(score),
            "advice": decide_advice(score, state["idea"]),
            "mvp_scope": decide_mvp_scope(state["features"]),
        }
