"""Demo lab reports for a first-run dashboard."""

from datetime import datetime
from typing import List

from medlens.core.logging import logger
from medlens.models.document import (
    DocumentType,
    ExtractedData,
    MedicalDocument,
    StructuredMedicalData,
)
from medlens.models.lab_result import LabCategory, LabObservation, LabStatus, ReferenceRange
from medlens.store import HealthRecordStore

PROVIDER = "Dr. Sarah Chen"
FACILITY = "HealthFirst Medical Center"

# (id, test name, value, unit, status, category, low, high, range text)
_LAB_ROWS = {
    "demo-1": [
        ("l1", "Glucose, Fasting", 102, "mg/dL", "high", "metabolic", 70, 100, "70-100 mg/dL"),
        ("l2", "Hemoglobin A1c", 5.8, "%", "high", "metabolic", 4, 5.6, "<5.7%"),
        ("l3", "Total Cholesterol", 210, "mg/dL", "high", "lipid", 0, 200, "<200 mg/dL"),
        ("l4", "LDL Cholesterol", 135, "mg/dL", "high", "lipid", 0, 100, "<100 mg/dL"),
        ("l5", "HDL Cholesterol", 48, "mg/dL", "normal", "lipid", 40, 999, ">40 mg/dL"),
        ("l6", "Creatinine", 0.95, "mg/dL", "normal", "kidney", 0.7, 1.3, "0.7-1.3 mg/dL"),
    ],
    "demo-2": [
        ("l7", "Glucose, Fasting", 95, "mg/dL", "normal", "metabolic", 70, 100, "70-100 mg/dL"),
        ("l8", "Hemoglobin A1c", 5.5, "%", "normal", "metabolic", 4, 5.6, "<5.7%"),
        ("l9", "Total Cholesterol", 198, "mg/dL", "normal", "lipid", 0, 200, "<200 mg/dL"),
        ("l10", "LDL Cholesterol", 118, "mg/dL", "high", "lipid", 0, 100, "<100 mg/dL"),
    ],
    "demo-3": [
        ("l11", "Glucose, Fasting", 108, "mg/dL", "high", "metabolic", 70, 100, "70-100 mg/dL"),
        ("l12", "Hemoglobin A1c", 6.0, "%", "high", "metabolic", 4, 5.6, "<5.7%"),
        ("l13", "Total Cholesterol", 225, "mg/dL", "high", "lipid", 0, 200, "<200 mg/dL"),
        ("l14", "LDL Cholesterol", 145, "mg/dL", "high", "lipid", 0, 100, "<100 mg/dL"),
    ],
}

# (id, title, date, confidence, created at)
_DOCUMENT_ROWS = [
    ("demo-1", "Annual Physical - Lab Results", "2025-12-15", 0.94, "2025-12-15T10:30:00+00:00"),
    ("demo-2", "Follow-up Labs - Metabolic Panel", "2025-09-20", 0.92, "2025-09-20T14:15:00+00:00"),
    ("demo-3", "Quarterly Check - Lipid Panel", "2025-06-10", 0.91, "2025-06-10T09:00:00+00:00"),
]


def _observation(row) -> LabObservation:
    obs_id, name, value, unit, status, category, low, high, text = row
    return LabObservation(
        id=obs_id,
        test_name=name,
        value=float(value),
        unit=unit,
        reference_range=ReferenceRange(low=low, high=high, text=text),
        status=LabStatus(status),
        category=LabCategory(category),
    )


def demo_documents() -> List[MedicalDocument]:
    """Three lipid/metabolic lab reports, newest first."""
    documents = []
    for doc_id, title, date, confidence, created_at in _DOCUMENT_ROWS:
        timestamp = datetime.fromisoformat(created_at)
        documents.append(MedicalDocument(
            id=doc_id,
            type=DocumentType.LAB_REPORT,
            title=title,
            date=date,
            provider=PROVIDER,
            facility=FACILITY,
            extracted_data=ExtractedData(
                structured_data=StructuredMedicalData(
                    lab_results=[_observation(row) for row in _LAB_ROWS[doc_id]],
                ),
                confidence=confidence,
            ),
            created_at=timestamp,
            updated_at=timestamp,
        ))
    return documents


def load_demo_data(store: HealthRecordStore) -> bool:
    """
    Seed an empty store with the demo documents.

    Returns:
        True if the store was seeded, False if it already held documents
    """
    if store.documents:
        return False

    # Oldest first so the newest ends up at the front of the store
    for document in reversed(demo_documents()):
        store.add_document(document)

    logger.info(f"Loaded {len(store.documents)} demo documents")
    return True
