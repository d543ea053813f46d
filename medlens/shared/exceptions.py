from typing import Optional

from fastapi import HTTPException, status


# ==================== Domain Errors ====================

class MedLensError(Exception):
    """Base class for errors raised by the records core."""


class MalformedExtractionError(MedLensError):
    """
    No JSON object could be recovered from an extraction response.

    This is the only failure the normalizer raises; every field-level problem
    is resolved by a fallback value instead.
    """

    def __init__(self, message: str = "No JSON object found in extraction response", raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw[:500] if raw else raw


class RecordNotFoundError(MedLensError):
    """A document or alert id is not present in the record store."""

    def __init__(self, kind: str, record_id: str):
        super().__init__(f"{kind} not found: {record_id}")
        self.kind = kind
        self.record_id = record_id


# ==================== HTTP Errors ====================

class NotFoundException(HTTPException):
    """Exception for resource not found."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class UnprocessableDocumentException(HTTPException):
    """The uploaded document could not be read; the client may retry."""

    def __init__(self, message: str = "Could not read this document. Please try again with a clearer photo."):
        super().__init__(
            status_code=422,
            detail={"message": message, "retryable": True},
        )
