from datetime import datetime, timezone

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


class TimestampMixin(BaseModel):
    """Mixin for adding timestamp fields to records."""

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def update_timestamp(self):
        """Update the updated_at timestamp."""
        self.updated_at = utc_now()
