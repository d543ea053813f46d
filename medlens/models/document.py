"""Medical document models."""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from medlens.core.parsing import (
    coerce_enum,
    coerce_optional_text,
    coerce_text,
    parse_lab_value,
)
from medlens.models.lab_result import LabObservation
from medlens.shared.models import TimestampMixin


class DocumentType(str, Enum):
    """Kind of uploaded medical document."""
    LAB_REPORT = "lab_report"
    DISCHARGE_SUMMARY = "discharge_summary"
    IMAGING = "imaging"
    PRESCRIPTION = "prescription"
    OTHER = "other"


class DiagnosisSeverity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class DiagnosisStatus(str, Enum):
    ACTIVE = "active"
    RESOLVED = "resolved"
    CHRONIC = "chronic"


class VitalType(str, Enum):
    BLOOD_PRESSURE = "blood_pressure"
    HEART_RATE = "heart_rate"
    TEMPERATURE = "temperature"
    WEIGHT = "weight"
    HEIGHT = "height"
    BMI = "bmi"
    OXYGEN_SATURATION = "oxygen_saturation"
    RESPIRATORY_RATE = "respiratory_rate"


class ImagingModality(str, Enum):
    XRAY = "xray"
    CT = "ct"
    MRI = "mri"
    ULTRASOUND = "ultrasound"
    OTHER = "other"


class ExtractedRecord(BaseModel):
    """
    Base for the loosely-specified records a model extracts next to lab results.

    Accepts both the model's camelCase keys and snake_case field names, and
    ignores keys it does not know.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ============ SUPPLEMENTARY RECORDS ============

class PatientInfo(ExtractedRecord):
    name: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    mrn: Optional[str] = None               # Medical Record Number

    @field_validator("name", "date_of_birth", "gender", "mrn", mode="before")
    @classmethod
    def _optional_text(cls, v):
        return coerce_optional_text(v)


class Medication(ExtractedRecord):
    name: str = ""
    dosage: Optional[str] = None
    frequency: Optional[str] = None
    route: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    prescriber: Optional[str] = None
    instructions: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, v):
        return coerce_text(v)

    @field_validator(
        "dosage", "frequency", "route", "start_date", "end_date", "prescriber", "instructions",
        mode="before",
    )
    @classmethod
    def _optional_text(cls, v):
        return coerce_optional_text(v)


class Diagnosis(ExtractedRecord):
    name: str = ""
    icd_code: Optional[str] = None
    severity: Optional[DiagnosisSeverity] = None
    status: Optional[DiagnosisStatus] = None
    diagnosed_date: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, v):
        return coerce_text(v)

    @field_validator("icd_code", "diagnosed_date", mode="before")
    @classmethod
    def _optional_text(cls, v):
        return coerce_optional_text(v)

    @field_validator("severity", mode="before")
    @classmethod
    def _severity(cls, v):
        return coerce_enum(v, DiagnosisSeverity, None)

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, v):
        return coerce_enum(v, DiagnosisStatus, None)


class VitalSign(ExtractedRecord):
    type: Optional[VitalType] = None
    value: Union[float, str] = ""
    unit: str = ""
    measured_at: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def _type(cls, v):
        return coerce_enum(v, VitalType, None)

    @field_validator("value", mode="before")
    @classmethod
    def _value(cls, v):
        return parse_lab_value(v)

    @field_validator("unit", mode="before")
    @classmethod
    def _unit(cls, v):
        return coerce_text(v)

    @field_validator("measured_at", mode="before")
    @classmethod
    def _optional_text(cls, v):
        return coerce_optional_text(v)


class Procedure(ExtractedRecord):
    name: str = ""
    date: Optional[str] = None
    provider: Optional[str] = None
    findings: Optional[str] = None
    cpt_code: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, v):
        return coerce_text(v)

    @field_validator("date", "provider", "findings", "cpt_code", mode="before")
    @classmethod
    def _optional_text(cls, v):
        return coerce_optional_text(v)


class ImagingFinding(ExtractedRecord):
    modality: ImagingModality = ImagingModality.OTHER
    body_part: str = ""
    findings: str = ""
    impression: Optional[str] = None
    date: Optional[str] = None

    @field_validator("modality", mode="before")
    @classmethod
    def _modality(cls, v):
        return coerce_enum(v, ImagingModality, ImagingModality.OTHER)

    @field_validator("body_part", "findings", mode="before")
    @classmethod
    def _text(cls, v):
        return coerce_text(v)

    @field_validator("impression", "date", mode="before")
    @classmethod
    def _optional_text(cls, v):
        return coerce_optional_text(v)


# ============ DOCUMENT ============

class StructuredMedicalData(BaseModel):
    """Everything extracted from one document. List fields are always present."""
    patient_info: Optional[PatientInfo] = None
    lab_results: List[LabObservation] = Field(default_factory=list)
    medications: List[Medication] = Field(default_factory=list)
    diagnoses: List[Diagnosis] = Field(default_factory=list)
    vitals: List[VitalSign] = Field(default_factory=list)
    procedures: List[Procedure] = Field(default_factory=list)
    imaging_findings: List[ImagingFinding] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class ExtractedData(BaseModel):
    raw_text: str = ""
    structured_data: StructuredMedicalData = Field(default_factory=StructuredMedicalData)
    confidence: float


class MedicalDocument(TimestampMixin):
    """One uploaded and extracted source document. Owns its lab observations."""
    id: str
    type: DocumentType = DocumentType.OTHER
    title: str
    date: str                           # Clinical date (YYYY-MM-DD), the time axis for trends
    provider: Optional[str] = None
    facility: Optional[str] = None
    extracted_data: ExtractedData

    @property
    def lab_results(self) -> List[LabObservation]:
        return self.extracted_data.structured_data.lab_results
