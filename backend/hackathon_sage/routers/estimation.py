"""
Estimation Router with Timing Instrumentation

Handles the /estimate endpoints: idea analysis and the input form options.
"""

import time

from fastapi import APIRouter, HTTPException, status

from ..agents.feasibility_agent import analyze_feasibility
from ..agents.feasibility_agent.timing import log_timing
from ..constants import (
    CATEGORY_LABELS,
    COMPLEXITY_LEVELS,
    DEFAULT_CATEGORY,
    DEFAULT_COMPLEXITY,
    DEFAULT_DURATION_HOURS,
    DEFAULT_TARGET_PLATFORMS,
    DEFAULT_TEAM_SIZE,
    DURATION_MAX_HOURS,
    DURATION_MIN_HOURS,
    DURATION_STEP_HOURS,
    PLATFORM_LABELS,
    TEAM_SIZE_MAX,
    TEAM_SIZE_MIN,
)
from ..schemas.feasibility_schema import FeasibilityResults
from ..schemas.idea_schema import HackathonIdea
from ..schemas.options_schema import (
    EstimatorOptions,
    FormDefaults,
    LabeledOption,
    NumericRange,
)

router = APIRouter(
    prefix="/estimate",
    tags=["Estimation"],
    responses={
        500: {"description": "Internal server error during analysis"}
    }
)


@router.post(
    "",
    response_model=FeasibilityResults,
    status_code=status.HTTP_200_OK,
    summary="Estimate Hackathon Idea Feasibility",
    response_description="Technologies, features, timeline, score and advice",
)
async def estimate_idea(idea: HackathonIdea) -> FeasibilityResults:
    """
    Analyze a hackathon idea and return its feasibility report.

    One analysis per request; the simulated delay is part of the response time.
    """
    start_time = time.perf_counter()
    log_timing("estimate_endpoint", "START")

    try:
        results = await analyze_feasibility(idea)
    except Exception as e:
        total_duration = (time.perf_counter() - start_time) * 1000
        log_timing("estimate_endpoint", f"ERROR after {total_duration:.0f}ms - {str(e)[:100]}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Analysis failed: {str(e)}"
        )

    total_duration = (time.perf_counter() - start_time) * 1000
    log_timing("estimate_endpoint", "END", total_duration)

    return results


@router.get(
    "/options",
    response_model=EstimatorOptions,
    summary="Input Form Options",
    description="Categories, platforms, complexity levels, slider bounds and defaults",
)
async def estimator_options() -> EstimatorOptions:
    """Everything the input form needs to render its controls."""
    return EstimatorOptions(
        categories=[LabeledOption(id=k, label=v) for k, v in CATEGORY_LABELS.items()],
        platforms=[LabeledOption(id=k, label=v) for k, v in PLATFORM_LABELS.items()],
        complexity_levels=list(COMPLEXITY_LEVELS),
        team_size=NumericRange(min=TEAM_SIZE_MIN, max=TEAM_SIZE_MAX, step=1),
        duration_hours=NumericRange(
            min=DURATION_MIN_HOURS, max=DURATION_MAX_HOURS, step=DURATION_STEP_HOURS
        ),
        defaults=FormDefaults(
            complexity=DEFAULT_COMPLEXITY,
            team_size=DEFAULT_TEAM_SIZE,
            duration_hours=DEFAULT_DURATION_HOURS,
            category=DEFAULT_CATEGORY,
            target_platform=list(DEFAULT_TARGET_PLATFORMS),
        ),
    )


@router.get(
    "/health",
    summary="Health Check",
    description="Check if the estimation service is running",
    response_description="Health status"
)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "healthy", "service": "feasibility-estimator"}
