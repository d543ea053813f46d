"""Health alert model."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from medlens.models.lab_result import LabObservation
from medlens.shared.models import utc_now


class AlertType(str, Enum):
    """Severity of a health alert."""
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class HealthAlert(BaseModel):
    """Notice for one abnormal or critical observation. Only ``dismissed`` changes after creation."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(frozen=True)
    type: AlertType = Field(frozen=True)
    title: str = Field(frozen=True)
    message: str = Field(frozen=True)
    related_lab_result: Optional[LabObservation] = Field(default=None, frozen=True)
    document_id: Optional[str] = Field(default=None, frozen=True)
    created_at: datetime = Field(default_factory=utc_now, frozen=True)
    dismissed: bool = False
