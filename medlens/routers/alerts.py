"""Health alert endpoints."""

from fastapi import APIRouter, Depends, Query

from medlens.dependencies import get_store
from medlens.models.alert import HealthAlert
from medlens.schemas.records import AlertCountResponse, AlertListResponse
from medlens.shared.exceptions import NotFoundException, RecordNotFoundError
from medlens.store import HealthRecordStore

router = APIRouter(prefix="/alerts", tags=["Alerts"])


# NOTE: /count is defined before /{alert_id} routes so it is not captured as an id

@router.get("/count", response_model=AlertCountResponse)
async def get_alert_count(store: HealthRecordStore = Depends(get_store)):
    """Number of alerts not yet dismissed."""
    return AlertCountResponse(count=store.get_alert_count())


@router.get("", response_model=AlertListResponse)
async def list_alerts(
    include_dismissed: bool = Query(False),
    store: HealthRecordStore = Depends(get_store),
):
    """List alerts, newest first."""
    alerts = store.alerts
    if not include_dismissed:
        alerts = [alert for alert in alerts if not alert.dismissed]
    return AlertListResponse(alerts=alerts, total=len(alerts))


@router.post("/{alert_id}/dismiss", response_model=HealthAlert)
async def dismiss_alert(
    alert_id: str,
    store: HealthRecordStore = Depends(get_store),
):
    """Mark an alert as dismissed."""
    try:
        return store.dismiss_alert(alert_id)
    except RecordNotFoundError as e:
        raise NotFoundException(str(e))
