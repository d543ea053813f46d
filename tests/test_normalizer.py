"""
Tests for extraction response normalization.

Covers JSON recovery from fenced or prose-wrapped responses, the lenient
field coercion, and the defaults applied to missing fields.
"""

import json
from datetime import date

import pytest

from medlens.core.parsing import coerce_text, parse_float_prefix, parse_lab_value
from medlens.models.document import DiagnosisStatus, DocumentType, ImagingModality
from medlens.models.lab_result import LabCategory, LabStatus
from medlens.services.extraction_normalizer import extract_json_object, normalize_extraction
from medlens.shared.exceptions import MalformedExtractionError


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def lab_payload():
    """A minimal lab report response."""
    return {
        "documentType": "lab_report",
        "title": "Lipid Panel",
        "date": "2025-12-15",
        "provider": "Dr. Sarah Chen",
        "labResults": [
            {
                "id": "model-chosen-id",
                "testName": "LDL Cholesterol",
                "value": "142 mg/dL",
                "unit": "mg/dL",
                "referenceRange": {"low": 0, "high": "100", "text": "<100 mg/dL"},
                "status": "high",
                "category": "lipid",
            },
            {
                "testName": "Troponin",
                "value": "trace",
                "unit": "ng/mL",
                "status": "bogus",
                "category": "blood",
            },
        ],
    }


# ============================================================================
# JSON RECOVERY
# ============================================================================

def test_fenced_json_is_recovered():
    """A response wrapped in a json code fence parses as the inner object."""
    text = '```json\n{"title": "X"}\n```'
    assert extract_json_object(text) == {"title": "X"}


def test_json_surrounded_by_prose_is_recovered():
    text = 'Here is the extraction: {"title": "X", "labResults": []} Hope this helps!'
    assert extract_json_object(text) == {"title": "X", "labResults": []}


def test_prose_without_object_raises():
    with pytest.raises(MalformedExtractionError):
        normalize_extraction("I could not read this document, sorry.")


@pytest.mark.parametrize("text", ["", "   ", "[1, 2, 3]", "{not json}"])
def test_unrecoverable_text_raises(text):
    with pytest.raises(MalformedExtractionError):
        extract_json_object(text)


def test_malformed_error_keeps_truncated_raw_text():
    raw = "no json " * 200
    with pytest.raises(MalformedExtractionError) as exc_info:
        normalize_extraction(raw)
    assert len(exc_info.value.raw) == 500


def test_unsupported_input_type_raises():
    with pytest.raises(MalformedExtractionError):
        normalize_extraction(42)


# ============================================================================
# FIELD COERCION
# ============================================================================

def test_lab_results_are_coerced(lab_payload):
    result = normalize_extraction(json.dumps(lab_payload))

    ldl, troponin = result.lab_results
    assert ldl.value == 142.0
    assert ldl.status == LabStatus.HIGH
    assert ldl.category == LabCategory.LIPID

    assert troponin.value == "trace"
    assert troponin.status == LabStatus.UNKNOWN
    assert troponin.category == LabCategory.OTHER


def test_status_match_is_exact():
    result = normalize_extraction({"labResults": [{"testName": "K", "value": 4, "status": "HIGH"}]})
    assert result.lab_results[0].status == LabStatus.UNKNOWN


def test_reference_range_bounds(lab_payload):
    """A zero bound is kept; an unparseable bound is left out."""
    lab_payload["labResults"][1]["referenceRange"] = {"low": "n/a", "high": "0.04"}
    result = normalize_extraction(lab_payload)

    ldl_range = result.lab_results[0].reference_range
    assert ldl_range.low == 0.0
    assert ldl_range.high == 100.0
    assert ldl_range.text == "<100 mg/dL"

    troponin_range = result.lab_results[1].reference_range
    assert troponin_range.low is None
    assert troponin_range.high == 0.04


def test_observation_ids_are_fresh(lab_payload):
    first = normalize_extraction(lab_payload)
    second = normalize_extraction(lab_payload)

    ids = [r.id for r in first.lab_results] + [r.id for r in second.lab_results]
    assert "model-chosen-id" not in ids
    assert len(set(ids)) == 4


def test_unknown_document_type_is_other():
    result = normalize_extraction({"documentType": "x-ray report"})
    assert result.document_type == DocumentType.OTHER


def test_supplementary_records_are_coerced():
    result = normalize_extraction({
        "documentType": "discharge_summary",
        "patientInfo": {"name": "Jane Doe", "dateOfBirth": "1980-02-01"},
        "medications": [{"name": "Atorvastatin", "dosage": "20mg"}, "not a record"],
        "diagnoses": [{"name": "Hyperlipidemia", "severity": "extreme", "status": "chronic"}],
        "vitals": [{"type": "heart_rate", "value": "72 bpm", "unit": "bpm"}],
        "imagingFindings": [{"modality": "pet", "bodyPart": "chest", "findings": "clear"}],
        "recommendations": ["Repeat lipid panel in 3 months", None, ""],
    })
    data = result.extracted_data.structured_data

    assert data.patient_info.name == "Jane Doe"
    assert data.patient_info.date_of_birth == "1980-02-01"
    assert [m.name for m in data.medications] == ["Atorvastatin"]
    assert data.diagnoses[0].severity is None
    assert data.diagnoses[0].status == DiagnosisStatus.CHRONIC
    assert data.vitals[0].value == 72.0
    assert data.imaging_findings[0].modality == ImagingModality.OTHER
    assert data.recommendations == ["Repeat lipid panel in 3 months"]


# ============================================================================
# DEFAULTS
# ============================================================================

def test_missing_fields_get_defaults():
    result = normalize_extraction(
        {"labResults": [{"value": 5}]},
        today=date(2026, 1, 2),
    )

    assert result.title == "Medical Document"
    assert result.date == "2026-01-02"
    assert result.document_type == DocumentType.OTHER
    assert result.lab_results[0].test_name == "Unknown Test"

    data = result.extracted_data.structured_data
    assert data.medications == []
    assert data.diagnoses == []
    assert data.vitals == []
    assert data.procedures == []
    assert data.imaging_findings == []
    assert data.recommendations == []


def test_confidence_is_constant():
    assert normalize_extraction({}).confidence == 0.92
    assert normalize_extraction({}, confidence=0.5).confidence == 0.5


def test_bytes_input_is_decoded():
    result = normalize_extraction(b'```json\n{"title": "Scan"}\n```')
    assert result.title == "Scan"


# ============================================================================
# PARSING HELPERS
# ============================================================================

@pytest.mark.parametrize("raw, expected", [
    ("142", 142.0),
    ("  142 mg/dL", 142.0),
    ("5.8%", 5.8),
    (".5", 0.5),
    ("-3", -3.0),
    ("1e3", 1000.0),
    (0, 0.0),
    ("<5.7", None),
    ("trace", None),
    ("Infinity", None),
    (True, None),
    (None, None),
])
def test_parse_float_prefix(raw, expected):
    assert parse_float_prefix(raw) == expected


def test_parse_lab_value_keeps_text():
    assert parse_lab_value("negative") == "negative"
    assert parse_lab_value(7) == 7.0
    assert parse_lab_value(None) == ""


def test_coerce_text():
    assert coerce_text(None) == ""
    assert coerce_text(False) == "false"
    assert coerce_text(3) == "3"
    assert coerce_text({"a": 1}) == '{"a": 1}'


# ============================================================================
# OUT-OF-RANGE NUMBERS
# ============================================================================

HUGE_INTEGER = "1" + "0" * 400


def test_huge_integer_value_falls_back_to_text():
    """An integer too large for a float is kept as its digits."""
    raw = '{"labResults": [{"testName": "X", "value": ' + HUGE_INTEGER + ', "status": "high"}]}'
    (result,) = normalize_extraction(raw).lab_results

    assert result.value == HUGE_INTEGER
    assert result.status == LabStatus.HIGH


def test_huge_integer_bound_is_dropped():
    raw = (
        '{"labResults": [{"testName": "X", "value": 5, '
        '"referenceRange": {"low": ' + HUGE_INTEGER + ', "high": 10}}]}'
    )
    (result,) = normalize_extraction(raw).lab_results

    assert result.reference_range.low is None
    assert result.reference_range.high == 10.0


def test_non_finite_numbers_are_kept_as_text():
    """JSON 1e999 decodes to inf; it is treated like the string "1e999"."""
    raw = '{"labResults": [{"testName": "X", "value": 1e999}, {"testName": "Y", "value": "1e999"}]}'
    values = [r.value for r in normalize_extraction(raw).lab_results]

    assert values == ["inf", "1e999"]
    assert parse_lab_value(float("nan")) == "nan"
    assert parse_float_prefix(float("inf")) is None
