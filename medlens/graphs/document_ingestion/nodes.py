"""LangGraph nodes for the document ingestion workflow."""

from typing import Literal

from medlens.core.logging import logger
from medlens.graphs.document_ingestion.state import DocumentIngestionState
from medlens.models.document import DocumentType
from medlens.services.alert_service import compute_alerts
from medlens.services.document_service import build_document
from medlens.services.extraction_normalizer import normalize_extraction


# ============ NODE 1: NORMALIZE RESPONSE ============

def normalize_response(state: DocumentIngestionState) -> dict:
    """
    Decode the extraction response into typed records.

    MalformedExtractionError is not caught here; it aborts the workflow and
    reaches the caller unchanged.
    """
    extraction = normalize_extraction(state["raw_response"])

    warnings = []
    if extraction.document_type == DocumentType.LAB_REPORT and not extraction.lab_results:
        warnings.append("Lab report contained no lab results")

    return {"extraction": extraction, "warnings": warnings}


# ============ NODE 2: ASSEMBLE DOCUMENT ============

def assemble_document(state: DocumentIngestionState) -> dict:
    """Wrap the normalized extraction into a new document."""
    document = build_document(state["extraction"])
    logger.info(f"Assembled document {document.id}: '{document.title}' ({document.date})")
    return {"document": document}


# ============ NODE 3: GENERATE ALERTS ============

def generate_alerts(state: DocumentIngestionState) -> dict:
    """Raise alerts for the document's abnormal results."""
    alerts = compute_alerts(state["document"])
    return {"alerts": alerts, "status": "completed"}


# ============ ROUTING FUNCTIONS ============

def route_after_assemble(state: DocumentIngestionState) -> Literal["generate_alerts", "finish"]:
    """Only documents with lab results can raise alerts."""
    if state["document"].lab_results:
        return "generate_alerts"
    return "finish"


def finish(state: DocumentIngestionState) -> dict:
    """Complete a document that raised no alerts."""
    return {"alerts": [], "status": "completed"}
