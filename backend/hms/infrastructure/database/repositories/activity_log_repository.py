"""Concrete repository for activity logs backed by SQLAlchemy."""

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hms.application.interfaces import ActivityLogRepository
from hms.domain.entities import ActivityLog
from hms.infrastructure.database.models import ActivityLogModel
from hms.infrastructure.database.repositories.errors import translate_store_errors

_TABLE = ActivityLogModel.__tablename__


class SQLAlchemyActivityLogRepository(ActivityLogRepository):
    """Implements the ActivityLogRepository port using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ActivityLogModel) -> ActivityLog:
        """Map ORM model → domain entity."""
        return ActivityLog(
            id=model.id,
            action=model.action,
            details=model.details,
            user_id=model.user_id,
            created_at=model.created_at,
        )

    def _to_model(self, entity: ActivityLog) -> ActivityLogModel:
        """Map domain entity → ORM model."""
        return ActivityLogModel(
            action=entity.action,
            details=entity.details,
            user_id=entity.user_id,
            created_at=entity.created_at,
        )

    async def create(self, log: ActivityLog) -> ActivityLog:
        model = self._to_model(log)
        # Savepoint: a rejected audit row must not roll back the audited mutation.
        with translate_store_errors("insert", _TABLE):
            async with self._session.begin_nested():
                self._session.add(model)
        return self._to_entity(model)

    async def get_all(
        self,
        *,
        since: datetime | None = None,
        until: datetime | None = None,
        action: str | None = None,
        user_id: str | None = None,
        limit: int = 100,
    ) -> list[ActivityLog]:
        stmt = select(ActivityLogModel)

        if since is not None:
            stmt = stmt.where(ActivityLogModel.created_at >= since)
        if until is not None:
            stmt = stmt.where(ActivityLogModel.created_at <= until)
        if action:
            stmt = stmt.where(ActivityLogModel.action.ilike(f"%{action}%"))
        if user_id is not None:
            stmt = stmt.where(ActivityLogModel.user_id == user_id)

        stmt = stmt.order_by(ActivityLogModel.created_at.desc()).limit(limit)
        with translate_store_errors("select", _TABLE):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(self, *, since: datetime | None = None) -> int:
        stmt = select(func.count()).select_from(ActivityLogModel)
        if since is not None:
            stmt = stmt.where(ActivityLogModel.created_at >= since)
        with translate_store_errors("select", _TABLE):
            result = await self._session.execute(stmt)
        return int(result.scalar_one())
