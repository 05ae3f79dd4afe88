# Schemas package
from .idea_schema import HackathonIdea
from .feasibility_schema import FeasibilityResults, Feature, Technology, TimelineStage
from .options_schema import EstimatorOptions

__all__ = [
    "HackathonIdea",
    "Technology",
    "Feature",
    "TimelineStage",
    "FeasibilityResults",
    "EstimatorOptions",
]
