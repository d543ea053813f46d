"""Document ingestion and management endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from medlens.core.logging import logger
from medlens.dependencies import get_store
from medlens.models.document import DocumentType, MedicalDocument
from medlens.schemas.extraction import ExtractDocumentRequest
from medlens.schemas.records import DocumentListResponse, IngestionResult
from medlens.services.ingestion_service import ingest_document
from medlens.shared.exceptions import (
    MalformedExtractionError,
    NotFoundException,
    RecordNotFoundError,
    UnprocessableDocumentException,
)
from medlens.store import HealthRecordStore

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.post("/extract", response_model=IngestionResult)
async def extract_document(
    request: ExtractDocumentRequest,
    store: HealthRecordStore = Depends(get_store),
):
    """
    Normalize an extraction response and store the resulting document.

    - **raw_response**: the model's reply, as text (fenced JSON is fine) or as a JSON object

    Returns the stored document and the alerts raised by its lab results.
    Responds 422 with `retryable: true` when the reply holds no JSON object.
    """
    try:
        return ingest_document(store, request.raw_response)
    except MalformedExtractionError as e:
        logger.warning(f"Rejected unreadable extraction: {e}")
        raise UnprocessableDocumentException()


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    document_type: Optional[DocumentType] = Query(None, alias="type", description="Only documents of this type"),
    store: HealthRecordStore = Depends(get_store),
):
    """List stored documents, newest first."""
    documents = store.get_documents_by_type(document_type) if document_type else store.documents
    return DocumentListResponse(documents=documents, total=len(documents))


@router.get("/{document_id}", response_model=MedicalDocument)
async def get_document(
    document_id: str,
    store: HealthRecordStore = Depends(get_store),
):
    """Get one stored document with its extracted data."""
    try:
        return store.get_document(document_id)
    except RecordNotFoundError as e:
        raise NotFoundException(str(e))


@router.delete("/{document_id}")
async def delete_document(
    document_id: str,
    store: HealthRecordStore = Depends(get_store),
):
    """Delete a document and its lab results. Alerts it raised are kept."""
    try:
        store.remove_document(document_id)
    except RecordNotFoundError as e:
        raise NotFoundException(str(e))
    return {"deleted": document_id}
