"""Derived views: lab trends and the health timeline."""

from fastapi import APIRouter, Depends

from medlens.dependencies import get_store
from medlens.schemas.records import TimelineResponse, TrendListResponse
from medlens.store import HealthRecordStore

router = APIRouter(tags=["Insights"])


@router.get("/trends", response_model=TrendListResponse)
async def get_trends(store: HealthRecordStore = Depends(get_store)):
    """Lab trends recomputed from every stored document."""
    trends = store.get_lab_trends()
    return TrendListResponse(trends=trends, total=len(trends))


@router.get("/timeline", response_model=TimelineResponse)
async def get_timeline(store: HealthRecordStore = Depends(get_store)):
    """Documents as timeline events, most recent first."""
    events = store.get_timeline()
    return TimelineResponse(events=events, total=len(events))
