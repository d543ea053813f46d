"""Assembly of stored documents from normalized extractions."""

import uuid

from medlens.models.document import MedicalDocument
from medlens.schemas.extraction import NormalizedExtraction


def build_document(extraction: NormalizedExtraction) -> MedicalDocument:
    """Wrap a normalized extraction into a new document with its own id."""
    return MedicalDocument(
        id=str(uuid.uuid4()),
        type=extraction.document_type,
        title=extraction.title,
        date=extraction.date,
        provider=extraction.provider,
        facility=extraction.facility,
        extracted_data=extraction.extracted_data,
    )
