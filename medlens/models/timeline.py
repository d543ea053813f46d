"""Timeline event model."""

from typing import List

from pydantic import BaseModel, Field

from medlens.models.document import DocumentType


class TimelineEvent(BaseModel):
    """One document as shown on the health timeline."""
    id: str
    document_id: str
    date: str
    type: DocumentType
    title: str
    summary: str
    highlights: List[str] = Field(default_factory=list)
