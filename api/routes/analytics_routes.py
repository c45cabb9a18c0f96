# api/routes/analytics_routes.py
from typing import Dict

from fastapi import APIRouter

from services.analytics_service import AnalyticsService


router = APIRouter(prefix="/api/analytics", tags=["analytics"])
analytics_service = AnalyticsService()


@router.get("", response_model=Dict,
            summary="Get analytics",
            description="Returns the latest stored snapshot, or computes one if none exists")
async def get_analytics():
    """Latest daily analytics snapshot.

    Returns:
        dict: Violation count, fines, active officers and breakdowns
    """
    return analytics_service.get_current().model_dump()


@router.get("/refresh", response_model=Dict,
            summary="Refresh analytics",
            description="Recomputes today's analytics and stores a new snapshot")
async def refresh_analytics():
    """Force recalculation of today's analytics."""
    return analytics_service.refresh().model_dump()
