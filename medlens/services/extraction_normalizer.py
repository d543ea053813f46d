"""Normalization of document extraction responses into typed records."""

import json
import re
import uuid
from datetime import date as date_type
from typing import Optional, Union

from medlens.config import settings
from medlens.core.logging import logger
from medlens.models.document import ExtractedData, StructuredMedicalData
from medlens.models.lab_result import LabObservation, ReferenceRange
from medlens.schemas.extraction import (
    ExtractionPayload,
    LabResultPayload,
    NormalizedExtraction,
)
from medlens.shared.exceptions import MalformedExtractionError

_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)

RawExtraction = Union[str, bytes, dict]


def _load_object(text: str) -> Optional[dict]:
    """Parse text as JSON, accepting only an object."""
    try:
        parsed = json.loads(text)
    except ValueError:
        # JSONDecodeError, or an integer literal past the int conversion limit
        return None
    return parsed if isinstance(parsed, dict) else None


def extract_json_object(text: str) -> dict:
    """
    Recover the JSON object from a model response.

    Models often wrap their answer in markdown fences or surround it with
    prose. Tried in order:
    1. the text as-is
    2. the text with every fence marker removed
    3. the outermost ``{ ... }`` span (first opening to last closing brace)

    Raises:
        MalformedExtractionError: if no strategy yields a JSON object
    """
    if not text or not text.strip():
        raise MalformedExtractionError("Empty extraction response", raw=text)

    # Strategy 1: Try parsing the text directly
    parsed = _load_object(text.strip())
    if parsed is not None:
        return parsed

    # Strategy 2: Remove markdown code fences
    parsed = _load_object(_FENCE.sub("", text).strip())
    if parsed is not None:
        return parsed

    # Strategy 3: Outermost curly braces
    start_idx = text.find("{")
    end_idx = text.rfind("}")
    if start_idx != -1 and end_idx > start_idx:
        parsed = _load_object(text[start_idx:end_idx + 1])
        if parsed is not None:
            logger.debug("Recovered extraction JSON from surrounding text")
            return parsed

    logger.warning(f"No JSON object in extraction response: {text[:200]!r}")
    raise MalformedExtractionError(raw=text)


def _to_observation(lab: LabResultPayload) -> LabObservation:
    reference_range = None
    if lab.reference_range is not None:
        reference_range = ReferenceRange(
            low=lab.reference_range.low,
            high=lab.reference_range.high,
            text=lab.reference_range.text,
        )

    # Identity is assigned here, never taken from the model
    return LabObservation(
        id=str(uuid.uuid4()),
        test_name=lab.test_name,
        value=lab.value,
        unit=lab.unit,
        reference_range=reference_range,
        status=lab.status,
        category=lab.category,
    )


def normalize_extraction(
    raw: RawExtraction,
    *,
    today: Optional[date_type] = None,
    confidence: Optional[float] = None,
) -> NormalizedExtraction:
    """
    Convert an untrusted extraction response into a typed record.

    Args:
        raw: Model response text (possibly fenced or wrapped in prose),
            its bytes, or an already-decoded JSON object
        today: Date used when the response carries no document date
        confidence: Overrides the configured extraction confidence

    Returns:
        NormalizedExtraction with every enumerable field in its domain

    Raises:
        MalformedExtractionError: if no JSON object can be recovered
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")

    if isinstance(raw, dict):
        data = raw
    elif isinstance(raw, str):
        data = extract_json_object(raw)
    else:
        raise MalformedExtractionError(f"Unsupported extraction input: {type(raw).__name__}")

    payload = ExtractionPayload.model_validate(data)

    lab_results = [_to_observation(lab) for lab in payload.lab_results]

    structured = StructuredMedicalData(
        patient_info=payload.patient_info,
        lab_results=lab_results,
        medications=payload.medications,
        diagnoses=payload.diagnoses,
        vitals=payload.vitals,
        procedures=payload.procedures,
        imaging_findings=payload.imaging_findings,
        recommendations=payload.recommendations,
    )

    document_date = payload.date or (today or date_type.today()).isoformat()

    result = NormalizedExtraction(
        document_type=payload.document_type,
        title=payload.title or settings.DEFAULT_DOCUMENT_TITLE,
        date=document_date,
        provider=payload.provider,
        facility=payload.facility,
        extracted_data=ExtractedData(
            raw_text=payload.raw_text,
            structured_data=structured,
            confidence=settings.EXTRACTION_CONFIDENCE if confidence is None else confidence,
        ),
    )

    logger.info(
        f"Normalized {result.document_type.value} extraction '{result.title}' "
        f"with {len(lab_results)} lab results"
    )
    return result
