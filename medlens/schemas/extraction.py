"""
Pydantic schemas for decoding document extraction responses.

The payload schemas below are the single place where untrusted model output
is mapped onto closed-world types. Every validator coerces instead of failing,
so a decoded payload is always complete.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from medlens.core.parsing import (
    coerce_enum,
    coerce_list,
    coerce_optional_text,
    coerce_records,
    coerce_text,
    parse_float_prefix,
    parse_lab_value,
)
from medlens.models.document import (
    Diagnosis,
    DocumentType,
    ExtractedData,
    ImagingFinding,
    Medication,
    PatientInfo,
    Procedure,
    VitalSign,
)
from medlens.models.lab_result import LabCategory, LabObservation, LabStatus


class _Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ReferenceRangePayload(_Payload):
    """Reference range as returned by the model. Unparseable bounds are dropped."""
    low: Optional[float] = None
    high: Optional[float] = None
    text: str = ""

    @field_validator("low", "high", mode="before")
    @classmethod
    def _bound(cls, v):
        return parse_float_prefix(v)

    @field_validator("text", mode="before")
    @classmethod
    def _text(cls, v):
        return coerce_text(v)


class LabResultPayload(_Payload):
    """One lab result as returned by the model. Any id it carries is ignored."""
    test_name: str = "Unknown Test"
    value: Union[float, str] = ""
    unit: str = ""
    reference_range: Optional[ReferenceRangePayload] = None
    status: LabStatus = LabStatus.UNKNOWN
    category: LabCategory = LabCategory.OTHER

    @field_validator("test_name", mode="before")
    @classmethod
    def _test_name(cls, v):
        return coerce_text(v) or "Unknown Test"

    @field_validator("value", mode="before")
    @classmethod
    def _value(cls, v):
        return parse_lab_value(v)

    @field_validator("unit", mode="before")
    @classmethod
    def _unit(cls, v):
        return coerce_text(v)

    @field_validator("reference_range", mode="before")
    @classmethod
    def _reference_range(cls, v):
        return v if isinstance(v, dict) else None

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, v):
        return coerce_enum(v, LabStatus, LabStatus.UNKNOWN)

    @field_validator("category", mode="before")
    @classmethod
    def _category(cls, v):
        return coerce_enum(v, LabCategory, LabCategory.OTHER)


class ExtractionPayload(_Payload):
    """Top-level extraction response. Absent list fields decode to empty lists."""
    document_type: DocumentType = DocumentType.OTHER
    title: str = ""
    date: Optional[str] = None
    provider: Optional[str] = None
    facility: Optional[str] = None
    patient_info: Optional[PatientInfo] = None
    lab_results: List[LabResultPayload] = Field(default_factory=list)
    medications: List[Medication] = Field(default_factory=list)
    diagnoses: List[Diagnosis] = Field(default_factory=list)
    vitals: List[VitalSign] = Field(default_factory=list)
    procedures: List[Procedure] = Field(default_factory=list)
    imaging_findings: List[ImagingFinding] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    raw_text: str = ""

    @field_validator("document_type", mode="before")
    @classmethod
    def _document_type(cls, v):
        return coerce_enum(v, DocumentType, DocumentType.OTHER)

    @field_validator("title", "raw_text", mode="before")
    @classmethod
    def _text(cls, v):
        return coerce_text(v)

    @field_validator("date", "provider", "facility", mode="before")
    @classmethod
    def _optional_text(cls, v):
        return coerce_optional_text(v)

    @field_validator("patient_info", mode="before")
    @classmethod
    def _patient_info(cls, v):
        return v if isinstance(v, dict) else None

    @field_validator(
        "lab_results", "medications", "diagnoses", "vitals", "procedures", "imaging_findings",
        mode="before",
    )
    @classmethod
    def _records(cls, v):
        return coerce_records(v)

    @field_validator("recommendations", mode="before")
    @classmethod
    def _recommendations(cls, v):
        return [coerce_text(item) for item in coerce_list(v) if coerce_text(item)]


class NormalizedExtraction(BaseModel):
    """Strictly-typed result of normalizing one extraction response."""
    document_type: DocumentType
    title: str
    date: str
    provider: Optional[str] = None
    facility: Optional[str] = None
    extracted_data: ExtractedData

    @property
    def lab_results(self) -> List[LabObservation]:
        return self.extracted_data.structured_data.lab_results

    @property
    def confidence(self) -> float:
        return self.extracted_data.confidence


# ============ API SCHEMAS ============

class ExtractDocumentRequest(BaseModel):
    """Request to normalize and store one extraction response."""
    raw_response: Union[str, dict] = Field(
        description="Model output: response text (may be fenced) or the decoded JSON object"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "raw_response": "```json\n{\"documentType\": \"lab_report\", \"title\": \"Lipid Panel\", "
                                "\"date\": \"2025-12-15\", \"labResults\": [{\"testName\": \"LDL Cholesterol\", "
                                "\"value\": \"135\", \"unit\": \"mg/dL\", \"status\": \"high\", "
                                "\"category\": \"lipid\"}]}\n```"
            }
        }
    )