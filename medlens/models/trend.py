"""Derived lab trend models. Recomputed on demand, never persisted."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from medlens.models.lab_result import LabCategory, LabStatus


class TrendStatus(str, Enum):
    """Direction of the latest change in a lab series."""
    IMPROVING = "improving"
    WORSENING = "worsening"
    STABLE = "stable"
    UNKNOWN = "unknown"


class TrendDataPoint(BaseModel):
    """Single numeric reading in a trend series."""
    date: str
    value: float
    status: LabStatus


class TrendReferenceRange(BaseModel):
    low: Optional[float] = None
    high: Optional[float] = None


class LabTrend(BaseModel):
    """Time series of one test across all documents."""

    # Taken from the chronologically first observation of the group
    test_name: str
    category: LabCategory
    unit: str

    # Sorted ascending by date, numeric observations only
    data_points: List[TrendDataPoint] = Field(default_factory=list)
    current_status: TrendStatus = TrendStatus.UNKNOWN
    reference_range: Optional[TrendReferenceRange] = None

    # True when the merged observations were reported in more than one unit
    has_mixed_units: bool = False

    @property
    def latest(self) -> TrendDataPoint:
        return self.data_points[-1]
