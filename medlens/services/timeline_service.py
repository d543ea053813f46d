"""Health timeline built from stored documents."""

from typing import Iterable, List

from medlens.models.document import DocumentType, MedicalDocument
from medlens.models.timeline import TimelineEvent
from medlens.core.parsing import document_date_key

MAX_HIGHLIGHTS = 3


def summarize_document(document: MedicalDocument) -> TimelineEvent:
    """Summary line and highlights for one document, by document type."""
    structured = document.extracted_data.structured_data
    highlights: List[str] = []

    if document.type == DocumentType.LAB_REPORT:
        # Anything not explicitly normal counts, including unknown status
        abnormal = [r for r in structured.lab_results if r.is_abnormal]
        summary = f"{len(structured.lab_results)} tests performed"
        if abnormal:
            summary += f", {len(abnormal)} abnormal"
        highlights = [
            f"{r.test_name}: {r.display_value} {r.unit}"
            for r in abnormal[:MAX_HIGHLIGHTS]
        ]
    elif document.type == DocumentType.IMAGING:
        findings = structured.imaging_findings
        summary = (findings[0].impression if findings else None) or "Imaging study"
    elif document.type == DocumentType.PRESCRIPTION:
        summary = f"{len(structured.medications)} medication(s) prescribed"
        highlights = [m.name for m in structured.medications[:MAX_HIGHLIGHTS]]
    else:
        summary = document.title

    return TimelineEvent(
        id=document.id,
        document_id=document.id,
        date=document.date,
        type=document.type,
        title=document.title,
        summary=summary,
        highlights=highlights,
    )


def build_timeline(documents: Iterable[MedicalDocument]) -> List[TimelineEvent]:
    """Timeline events, most recent clinical date first."""
    events = [summarize_document(document) for document in documents]
    events.sort(key=lambda event: document_date_key(event.date), reverse=True)
    return events
