"""Read side of the activity log: period windows, stats and CSV export."""

import csv
import io
import json
import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any, Literal

from hms.application.interfaces import ActivityLogRepository
from hms.application.schemas.activity_log import ActivityLogResponse, ActivityLogStatsResponse
from hms.domain.entities import ActivityLog

logger = logging.getLogger(__name__)

Period = Literal["today", "week", "month", "all"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def decode_details(raw: str | None) -> Any:
    """Decode a stored details string; non-JSON text is returned as-is."""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


class ActivityLogService:
    """Queries audit entries. Writing is ActivityLogger's job."""

    def __init__(
        self,
        repository: ActivityLogRepository,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._repository = repository
        self._clock = clock

    def period_start(self, period: Period) -> datetime | None:
        """Start of the window for ``period`` (weeks start on Sunday); None for "all"."""
        now = self._clock()
        day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        if period == "today":
            return day_start
        if period == "week":
            # weekday(): Monday=0 ... Sunday=6
            return day_start - timedelta(days=(day_start.weekday() + 1) % 7)
        if period == "month":
            return day_start.replace(day=1)
        if period == "all":
            return None
        raise ValueError(f"Unknown period '{period}'")

    async def list_logs(
        self,
        period: Period = "today",
        *,
        action: str | None = None,
        user_id: str | None = None,
        limit: int = 100,
    ) -> list[ActivityLogResponse]:
        logs = await self._repository.get_all(
            since=self.period_start(period),
            until=self._clock(),
            action=action,
            user_id=user_id,
            limit=limit,
        )
        return [self._to_response(log) for log in logs]

    async def get_stats(self) -> ActivityLogStatsResponse:
        return ActivityLogStatsResponse(
            total=await self._repository.count(),
            today=await self._repository.count(since=self.period_start("today")),
            this_week=await self._repository.count(since=self.period_start("week")),
            this_month=await self._repository.count(since=self.period_start("month")),
        )

    async def export_csv(
        self,
        period: Period = "today",
        *,
        action: str | None = None,
        user_id: str | None = None,
        limit: int = 100,
    ) -> str:
        """Render the listed entries as CSV (Timestamp, Action, User, Details)."""
        logs = await self.list_logs(period, action=action, user_id=user_id, limit=limit)

        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(["Timestamp", "Action", "User", "Details"])
        for log in logs:
            writer.writerow([
                log.created_at.strftime("%Y-%m-%d %H:%M:%S"),
                log.action,
                log.user_id or "Unknown",
                json.dumps(log.details if log.details is not None else {}, default=str),
            ])

        logger.info("Exported %d activity log entries (period=%s)", len(logs), period)
        return buffer.getvalue()

    @staticmethod
    def _to_response(log: ActivityLog) -> ActivityLogResponse:
        return ActivityLogResponse(
            id=log.id,
            action=log.action,
            details=decode_details(log.details),
            user_id=log.user_id,
            created_at=log.created_at,
        )
