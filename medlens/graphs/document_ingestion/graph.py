"""LangGraph workflow definition for document ingestion."""

from langgraph.graph import StateGraph, START, END

from medlens.graphs.document_ingestion.state import DocumentIngestionState
from medlens.graphs.document_ingestion.nodes import (
    normalize_response,
    assemble_document,
    generate_alerts,
    finish,
    route_after_assemble,
)


def build_document_ingestion_graph() -> StateGraph:
    """Build the document ingestion workflow graph."""

    graph = StateGraph(DocumentIngestionState)

    # Add all nodes
    graph.add_node("normalize_response", normalize_response)
    graph.add_node("assemble_document", assemble_document)
    graph.add_node("generate_alerts", generate_alerts)
    graph.add_node("finish", finish)

    # Start -> Normalize -> Assemble
    graph.add_edge(START, "normalize_response")
    graph.add_edge("normalize_response", "assemble_document")

    # Assemble -> (Generate Alerts | Finish)
    graph.add_conditional_edges(
        "assemble_document",
        route_after_assemble,
        {
            "generate_alerts": "generate_alerts",
            "finish": "finish",
        }
    )

    graph.add_edge("generate_alerts", END)
    graph.add_edge("finish", END)

    return graph


# No checkpointer: the workflow never pauses for input
document_ingestion_graph = build_document_ingestion_graph().compile()
