"""
In-memory health record store.

Holds one user's documents and alerts. The store is owned by its caller and
passed explicitly to whatever needs it; there is no module-level instance in
the core. Persistence and UI notification hook in through ``subscribe``.

Derived views (trends, timeline) are recomputed from the current documents on
every call.
"""

from enum import Enum
from typing import Callable, List, Optional

from medlens.core.logging import logger
from medlens.models.alert import HealthAlert
from medlens.models.document import DocumentType, MedicalDocument
from medlens.models.timeline import TimelineEvent
from medlens.models.trend import LabTrend
from medlens.services.timeline_service import build_timeline
from medlens.services.trend_service import compute_trends
from medlens.shared.exceptions import RecordNotFoundError


class StoreEvent(str, Enum):
    """Kind of change a store listener is notified about."""
    DOCUMENT_ADDED = "document_added"
    DOCUMENT_UPDATED = "document_updated"
    DOCUMENT_REMOVED = "document_removed"
    ALERTS_ADDED = "alerts_added"
    ALERT_DISMISSED = "alert_dismissed"


StoreListener = Callable[[StoreEvent, "HealthRecordStore"], None]


class HealthRecordStore:
    """Documents and alerts for one user, newest first."""

    def __init__(
        self,
        documents: Optional[List[MedicalDocument]] = None,
        alerts: Optional[List[HealthAlert]] = None,
    ):
        self._documents: List[MedicalDocument] = list(documents or [])
        self._alerts: List[HealthAlert] = list(alerts or [])
        self._listeners: List[StoreListener] = []

    # ==================== Observers ====================

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """
        Register a listener called after every change.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: StoreEvent) -> None:
        for listener in list(self._listeners):
            listener(event, self)

    # ==================== Documents ====================

    @property
    def documents(self) -> List[MedicalDocument]:
        return list(self._documents)

    def get_document(self, document_id: str) -> MedicalDocument:
        for document in self._documents:
            if document.id == document_id:
                return document
        raise RecordNotFoundError("Document", document_id)

    def add_document(self, document: MedicalDocument) -> None:
        self._documents.insert(0, document)
        logger.info(f"Added document {document.id} ({document.type.value}, {document.date})")
        self._notify(StoreEvent.DOCUMENT_ADDED)

    def update_document(self, document_id: str, **changes) -> MedicalDocument:
        """
        Replace fields of a stored document.

        Observations are immutable; pass a new ``extracted_data`` to change them.
        """
        for index, document in enumerate(self._documents):
            if document.id == document_id:
                updated = document.model_copy(update=changes)
                updated.update_timestamp()
                self._documents[index] = updated
                self._notify(StoreEvent.DOCUMENT_UPDATED)
                return updated
        raise RecordNotFoundError("Document", document_id)

    def remove_document(self, document_id: str) -> None:
        """Delete a document and the observations it owns. Its alerts are kept."""
        document = self.get_document(document_id)
        self._documents.remove(document)
        logger.info(f"Removed document {document_id}")
        self._notify(StoreEvent.DOCUMENT_REMOVED)

    def get_documents_by_type(self, document_type: DocumentType) -> List[MedicalDocument]:
        return [document for document in self._documents if document.type == document_type]

    # ==================== Alerts ====================

    @property
    def alerts(self) -> List[HealthAlert]:
        return list(self._alerts)

    def add_alert(self, alert: HealthAlert) -> None:
        self.add_alerts([alert])

    def add_alerts(self, alerts: List[HealthAlert]) -> None:
        if not alerts:
            return
        self._alerts = list(alerts) + self._alerts
        self._notify(StoreEvent.ALERTS_ADDED)

    def dismiss_alert(self, alert_id: str) -> HealthAlert:
        for alert in self._alerts:
            if alert.id == alert_id:
                alert.dismissed = True
                self._notify(StoreEvent.ALERT_DISMISSED)
                return alert
        raise RecordNotFoundError("Alert", alert_id)

    def get_alert_count(self) -> int:
        """Number of alerts not yet dismissed."""
        return sum(1 for alert in self._alerts if not alert.dismissed)

    # ==================== Derived views ====================

    def get_lab_trends(self) -> List[LabTrend]:
        return compute_trends(self._documents)

    def get_timeline(self) -> List[TimelineEvent]:
        return build_timeline(self._documents)
