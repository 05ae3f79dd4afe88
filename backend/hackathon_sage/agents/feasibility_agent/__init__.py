from .generator import analyze_feasibility, generate_feasibility_report
from .graph import estimation_graph
from .state import EstimationState

__all__ = [
    "analyze_feasibility",
    "generate_feasibility_report",
    "estimation_graph",
    "EstimationState",
]
