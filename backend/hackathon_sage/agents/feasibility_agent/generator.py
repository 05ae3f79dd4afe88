"""Feasibility Generator Agent: deterministic feasibility report generation.

Consumes a submitted hackathon idea and runs the estimation graph.
No LLM calls, no randomness. The only asynchronous part is the simulated
analysis delay in front of the graph, which a real remote call can
replace without touching the rules.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from ... import config
from ...schemas.feasibility_schema import FeasibilityResults
from ...schemas.idea_schema import HackathonIdea
from .graph import estimation_graph
from .state import EstimationState, initial_state
from .timing import async_timer, sync_timer


def _to_results(state: EstimationState) -> FeasibilityResults:
    return FeasibilityResults(
        recommended_technologies=state["technologies"],
        features=state["features"],
        mvp_scope=state["mvp_scope"],
        total_time_hours=state["total_time_hours"],
        timeline_stages=state["timeline_stages"],
        feasibility_score=state["feasibility_score"],
        feasibility_level=state["feasibility_level"],
        advice=state["advice"],
    )


def _log_start(idea: HackathonIdea) -> None:
    print(f"🛠️ [ESTIMATE] Analyzing idea={idea.title!r} category={idea.category}")


def _log_result(idea: HackathonIdea, state: EstimationState) -> None:
    breakdown = state["score_breakdown"]
    print(
        f"✅ [ESTIMATE] Report ready: total={state['total_time_hours']}h "
        f"of {idea.duration_hours}h, score={state['feasibility_score']} "
        f"(overage=-{breakdown.overage_penalty}, team=-{breakdown.team_penalty}, "
        f"scope=-{breakdown.scope_penalty})"
    )


def generate_feasibility_report(idea: HackathonIdea) -> FeasibilityResults:
    """Run the estimation pipeline synchronously, without the delay."""
    _log_start(idea)

    with sync_timer("estimation_graph", "GRAPH"):
        state = estimation_graph.invoke(initial_state(idea))

    _log_result(idea, state)
    return _to_results(state)


async def analyze_feasibility(
    idea: HackathonIdea,
    delay_seconds: Optional[float] = None,
) -> FeasibilityResults:
    """Analyze an idea behind the simulated remote-call delay.

    Parameters
    ----------
    idea : HackathonIdea
        The submitted idea.
    delay_seconds : float, optional
        Latency to simulate before the analysis starts. Defaults to
        ``config.ANALYSIS_DELAY_SECONDS``.

    Not cancellable from the caller's side; the delay always completes.
    """
    delay = config.ANALYSIS_DELAY_SECONDS if delay_seconds is None else delay_seconds
    _log_start(idea)

    async with async_timer("analyze_feasibility"):
        await asyncio.sleep(delay)
        state = await estimation_graph.ainvoke(initial_state(idea))

    _log_result(idea, state)
    return _to_results(state)
