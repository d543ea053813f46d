"""Health alert generation for abnormal lab results."""

import uuid
from typing import List

from medlens.core.logging import logger
from medlens.models.alert import AlertType, HealthAlert
from medlens.models.document import MedicalDocument
from medlens.models.lab_result import LabObservation, LabStatus


def _critical_alert(document_id: str, result: LabObservation) -> HealthAlert:
    return HealthAlert(
        id=str(uuid.uuid4()),
        type=AlertType.CRITICAL,
        title=f"Critical: {result.test_name}",
        message=(
            f"Your {result.test_name} level of {result.display_value} {result.unit} "
            f"requires immediate attention."
        ),
        related_lab_result=result,
        document_id=document_id,
    )


def _warning_alert(document_id: str, result: LabObservation) -> HealthAlert:
    is_high = result.status == LabStatus.HIGH
    return HealthAlert(
        id=str(uuid.uuid4()),
        type=AlertType.WARNING,
        title=f"{result.test_name} {'Elevated' if is_high else 'Low'}",
        message=(
            f"Your {result.test_name} is {result.display_value} {result.unit}, "
            f"which is {'above' if is_high else 'below'} normal."
        ),
        related_lab_result=result,
        document_id=document_id,
    )


def compute_alerts(document: MedicalDocument) -> List[HealthAlert]:
    """
    Raise alerts for one document's critical and out-of-range results.

    Every call creates new alerts with fresh ids; processing the same
    document twice yields two independent sets.
    """
    alerts = []

    for result in document.lab_results:
        if result.status == LabStatus.CRITICAL:
            alerts.append(_critical_alert(document.id, result))
        elif result.status in (LabStatus.HIGH, LabStatus.LOW):
            alerts.append(_warning_alert(document.id, result))

    if alerts:
        logger.info(f"Generated {len(alerts)} alerts for document {document.id}")

    return alerts
