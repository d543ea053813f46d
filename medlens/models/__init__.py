"""Domain models for medical documents and their derived views."""

from medlens.models.lab_result import LabCategory, LabObservation, LabStatus, ReferenceRange
from medlens.models.document import (
    DocumentType,
    ExtractedData,
    MedicalDocument,
    StructuredMedicalData,
)
from medlens.models.trend import LabTrend, TrendDataPoint, TrendStatus
from medlens.models.alert import AlertType, HealthAlert
from medlens.models.timeline import TimelineEvent

__all__ = [
    "LabCategory",
    "LabObservation",
    "LabStatus",
    "ReferenceRange",
    "DocumentType",
    "ExtractedData",
    "MedicalDocument",
    "StructuredMedicalData",
    "LabTrend",
    "TrendDataPoint",
    "TrendStatus",
    "AlertType",
    "HealthAlert",
    "TimelineEvent",
]
