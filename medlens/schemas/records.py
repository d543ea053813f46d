"""Pydantic schemas for record store API responses."""

from typing import List

from pydantic import BaseModel, Field

from medlens.models.alert import HealthAlert
from medlens.models.document import MedicalDocument
from medlens.models.timeline import TimelineEvent
from medlens.models.trend import LabTrend


class IngestionResult(BaseModel):
    """A newly stored document and the alerts it raised."""
    document: MedicalDocument
    alerts: List[HealthAlert] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class DocumentListResponse(BaseModel):
    documents: List[MedicalDocument]
    total: int


class AlertListResponse(BaseModel):
    alerts: List[HealthAlert]
    total: int


class AlertCountResponse(BaseModel):
    """Number of alerts the user has not dismissed."""
    count: int


class TrendListResponse(BaseModel):
    trends: List[LabTrend]
    total: int


class TimelineResponse(BaseModel):
    events: List[TimelineEvent]
    total: int
