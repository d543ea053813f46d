"""LangGraph state schema for the document ingestion workflow."""

from typing import TypedDict, Annotated, Optional, List, Union
from operator import add

from medlens.models.alert import HealthAlert
from medlens.models.document import MedicalDocument
from medlens.schemas.extraction import NormalizedExtraction


class DocumentIngestionState(TypedDict):
    """State schema for the document ingestion workflow."""

    # Input - the extraction collaborator's response
    raw_response: Union[str, bytes, dict]

    # Normalizer output
    extraction: Optional[NormalizedExtraction]

    # Assembled document and the alerts it raised
    document: Optional[MedicalDocument]
    alerts: List[HealthAlert]

    status: str  # "processing", "completed"

    # Notes accumulated along the way (using add operator)
    warnings: Annotated[List[str], add]
