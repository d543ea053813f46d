"""Business logic services."""

from medlens.services.extraction_normalizer import extract_json_object, normalize_extraction
from medlens.services.trend_service import classify_trend, compute_trends
from medlens.services.alert_service import compute_alerts
from medlens.services.timeline_service import build_timeline
from medlens.services.document_service import build_document

__all__ = [
    "extract_json_object",
    "normalize_extraction",
    "classify_trend",
    "compute_trends",
    "compute_alerts",
    "build_timeline",
    "build_document",
]
