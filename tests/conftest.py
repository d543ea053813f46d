"""Shared fixtures for the MedLens test suite."""

import uuid

import pytest

from medlens.models.document import (
    DocumentType,
    ExtractedData,
    MedicalDocument,
    StructuredMedicalData,
)
from medlens.models.lab_result import LabCategory, LabObservation, LabStatus, ReferenceRange
from medlens.store import HealthRecordStore


def observation(
    test_name,
    value,
    status="normal",
    unit="mg/dL",
    category="other",
    reference_range=None,
):
    """Build a lab observation with a fresh id."""
    return LabObservation(
        id=str(uuid.uuid4()),
        test_name=test_name,
        value=value,
        unit=unit,
        reference_range=ReferenceRange(**reference_range) if reference_range else None,
        status=LabStatus(status),
        category=LabCategory(category),
    )


def document(date, lab_results=(), doc_type=DocumentType.LAB_REPORT, title="Lab Results", **structured):
    """Build a document dated ``date`` owning ``lab_results``."""
    return MedicalDocument(
        id=str(uuid.uuid4()),
        type=doc_type,
        title=title,
        date=date,
        extracted_data=ExtractedData(
            structured_data=StructuredMedicalData(lab_results=list(lab_results), **structured),
            confidence=0.92,
        ),
    )


@pytest.fixture
def make_observation():
    return observation


@pytest.fixture
def make_document():
    return document


@pytest.fixture
def store() -> HealthRecordStore:
    return HealthRecordStore()


@pytest.fixture
def ldl_documents():
    """Three LDL readings, all flagged high: 145, 118, 135."""
    return [
        document("2025-12-15", [observation("LDL Cholesterol", 135.0, "high", category="lipid")]),
        document("2025-06-10", [observation("LDL Cholesterol", 145.0, "high", category="lipid")]),
        document("2025-09-20", [observation("LDL Cholesterol", 118.0, "high", category="lipid")]),
    ]
