"""Pydantic schemas for extraction decoding and API requests/responses."""

from medlens.schemas.extraction import (
    ExtractDocumentRequest,
    ExtractionPayload,
    LabResultPayload,
    NormalizedExtraction,
)
from medlens.schemas.records import (
    AlertCountResponse,
    AlertListResponse,
    DocumentListResponse,
    IngestionResult,
    TimelineResponse,
    TrendListResponse,
)

__all__ = [
    "ExtractDocumentRequest",
    "ExtractionPayload",
    "LabResultPayload",
    "NormalizedExtraction",
    "AlertCountResponse",
    "AlertListResponse",
    "DocumentListResponse",
    "IngestionResult",
    "TimelineResponse",
    "TrendListResponse",
]
