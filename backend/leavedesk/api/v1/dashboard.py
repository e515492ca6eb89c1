from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from leavedesk.core.database import get_db
from leavedesk.core.permissions import require_configured_level
from leavedesk.schemas.statistics import DashboardStatistics
from leavedesk.services.statistics_service import StatisticsService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get("/statistics", response_model=DashboardStatistics)
async def get_statistics(
    claims: Optional[dict] = Depends(require_configured_level("STATISTICS_GUARD")),
    db: Session = Depends(get_db)
):
    """Request counts per category and status, plus the user count"""
    service = StatisticsService(db)
    return service.get_statistics()
