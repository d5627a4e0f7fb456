"""Read-only activity (audit) log endpoints."""

from datetime import datetime, timezone
from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from hms.application.schemas.activity_log import ActivityLogResponse, ActivityLogStatsResponse
from hms.application.services import ActivityLogService
from hms.infrastructure.dependencies import get_activity_log_service

router = APIRouter(prefix="/activity-logs", tags=["Activity Logs"])

PeriodParam = Literal["today", "week", "month", "all"]


@router.get("", response_model=list[ActivityLogResponse])
async def list_activity_logs(
    period: PeriodParam = Query("today", description="Time window"),
    action: str | None = Query(None, description="Substring match on the action name"),
    user_id: str | None = Query(None, description="Only entries by this user"),
    limit: int = Query(100, ge=1, le=1000),
    service: ActivityLogService = Depends(get_activity_log_service),
) -> list[ActivityLogResponse]:
    """Audit entries in the window, newest first, details decoded."""
    return await service.list_logs(period, action=action, user_id=user_id, limit=limit)


@router.get("/stats", response_model=ActivityLogStatsResponse)
async def activity_log_stats(
    service: ActivityLogService = Depends(get_activity_log_service),
) -> ActivityLogStatsResponse:
    return await service.get_stats()


@router.get("/export", response_class=PlainTextResponse)
async def export_activity_logs(
    period: PeriodParam = Query("today"),
    action: str | None = Query(None),
    user_id: str | None = Query(None),
    limit: int = Query(100, ge=1, le=1000),
    service: ActivityLogService = Depends(get_activity_log_service),
) -> PlainTextResponse:
    """Download the filtered entries as CSV."""
    content = await service.export_csv(period, action=action, user_id=user_id, limit=limit)
    filename = f"activity_logs_{period}_{datetime.now(timezone.utc):%Y-%m-%d}.csv"
    return PlainTextResponse(
        content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
