"""Ingestion of extraction responses into a record store."""

from medlens.core.logging import logger
from medlens.graphs.document_ingestion import document_ingestion_graph
from medlens.schemas.records import IngestionResult
from medlens.services.extraction_normalizer import RawExtraction
from medlens.store import HealthRecordStore


def ingest_document(store: HealthRecordStore, raw_response: RawExtraction) -> IngestionResult:
    """
    Run the ingestion workflow and commit its output to the store.

    The document and its alerts are added only after the whole workflow
    succeeded. MalformedExtractionError propagates and leaves the store
    untouched.
    """
    initial_state = {
        "raw_response": raw_response,
        "extraction": None,
        "document": None,
        "alerts": [],
        "status": "processing",
        "warnings": [],
    }

    result = document_ingestion_graph.invoke(initial_state)

    document = result["document"]
    alerts = result.get("alerts", [])

    store.add_document(document)
    store.add_alerts(alerts)

    for warning in result.get("warnings", []):
        logger.warning(f"Document {document.id}: {warning}")

    return IngestionResult(
        document=document,
        alerts=alerts,
        warnings=result.get("warnings", []),
    )
