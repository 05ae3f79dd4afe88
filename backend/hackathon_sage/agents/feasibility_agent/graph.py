from langgraph.graph import END, START, StateGraph

from .nodes import (
    aggregate_hours,
    build_timeline,
    score_feasibility,
    select_features,
    select_technologies,
    write_narrative,
)
from .state import EstimationState
from .timing import log_timing


def create_estimation_graph() -> StateGraph:
    """
    Create the estimation pipeline graph.

    Structure:
    START -> select_technologies
          -> select_features
          -> aggregate_hours
          -> build_timeline
          -> score_feasibility
          -> write_narrative
          -> END

    Strictly sequential: every node only depends on nodes before it.
    """
    log_timing("graph", "Creating estimation graph")

    graph = StateGraph(EstimationState)

    graph.add_node("select_technologies", select_technologies)
    graph.add_node("select_features", select_features)
    graph.add_node("aggregate_hours", aggregate_hours)
    graph.add_node("build_timeline", build_timeline)
    graph.add_node("score_feasibility", score_feasibility)
    graph.add_node("write_narrative", write_narrative)

    graph.add_edge(START, "select_technologies")
    graph.add_edge("select_technologies", "select_features")
    graph.add_edge("select_features", "aggregate_hours")
    graph.add_edge("aggregate_hours", "build_timeline")
    graph.add_edge("build_timeline", "score_feasibility")
    graph.add_edge("score_feasibility", "write_narrative")
    graph.add_edge("write_narrative", END)

    return graph


estimation_graph = create_estimation_graph().compile()
