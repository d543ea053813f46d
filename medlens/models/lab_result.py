"""Lab observation models."""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class LabStatus(str, Enum):
    """Interpretation flag of a single lab result."""
    NORMAL = "normal"
    LOW = "low"
    HIGH = "high"
    CRITICAL = "critical"
    UNKNOWN = "unknown"


class LabCategory(str, Enum):
    """Panel a lab test belongs to."""
    METABOLIC = "metabolic"
    LIPID = "lipid"
    CBC = "cbc"
    THYROID = "thyroid"
    LIVER = "liver"
    KIDNEY = "kidney"
    CARDIAC = "cardiac"
    INFLAMMATORY = "inflammatory"
    VITAMIN = "vitamin"
    HORMONE = "hormone"
    OTHER = "other"


class ReferenceRange(BaseModel):
    """Reference range as printed on the report. Missing bounds mean "no bound"."""

    model_config = ConfigDict(frozen=True)

    low: Optional[float] = None
    high: Optional[float] = None
    text: str = ""


class LabObservation(BaseModel):
    """One measured test result tied to one source document."""

    model_config = ConfigDict(frozen=True)

    id: str
    test_name: str                      # Display name, grouping uses the lower-cased form
    value: Union[float, str]            # Numeric when parseable, otherwise the original text
    unit: str = ""
    reference_range: Optional[ReferenceRange] = None
    status: LabStatus = LabStatus.UNKNOWN
    category: LabCategory = LabCategory.OTHER

    @property
    def is_abnormal(self) -> bool:
        return self.status != LabStatus.NORMAL

    @property
    def display_value(self) -> str:
        """Value as shown in alerts and summaries (no trailing ``.0`` on whole numbers)."""
        return format_lab_value(self.value)


def format_lab_value(value: Union[float, str]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
