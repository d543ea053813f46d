"""Document ingestion workflow."""

from medlens.graphs.document_ingestion.graph import document_ingestion_graph
from medlens.graphs.document_ingestion.state import DocumentIngestionState

__all__ = ["document_ingestion_graph", "DocumentIngestionState"]
