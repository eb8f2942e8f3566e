from langgraph.graph import StateGraph, END
from pipeline.state import AnalysisState
from pipeline.nodes import (
    node_read_upload,
    node_generate,
    node_cleanup,
    format_response,
)


def route_on_error(next_node):
    """
    Router factory: continue to `next_node` unless a node recorded an error.

    On error the upload is left on disk unless the request asked for
    cleanup on failure.
    """

    def route(state):
        if state.get("error") is None:
            return next_node
        if state.get("cleanup_on_error"):
            return "cleanup"
        return END

    return route


def build_graph():
    workflow = StateGraph(AnalysisState)

    workflow.add_node("read_upload", node_read_upload)
    workflow.add_node("generate", node_generate)
    workflow.add_node("cleanup", node_cleanup)
    workflow.add_node("format_response", format_response)

    workflow.set_entry_point("read_upload")

    workflow.add_conditional_edges(
        "read_upload",
        route_on_error("generate"),
        {"generate": "generate", "cleanup": "cleanup", END: END},
    )
    workflow.add_conditional_edges(
        "generate",
        route_on_error("cleanup"),
        {"cleanup": "cleanup", END: END},
    )

    # format_response is a no-op when the state carries an error
    workflow.add_edge("cleanup", "format_response")
    workflow.add_edge("format_response", END)

    return workflow.compile()


pipeline = build_graph()
