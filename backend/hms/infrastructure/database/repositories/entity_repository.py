"""Generic SQLAlchemy repository for the mutable hospital entities."""

from dataclasses import fields
from typing import Any, ClassVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from hms.application.interfaces.entity_repository import EntityRepository, EntityT
from hms.infrastructure.database.base import Base
from hms.infrastructure.database.repositories.errors import translate_store_errors


class SQLAlchemyEntityRepository(EntityRepository[EntityT]):
    """Implements the EntityRepository port using SQLAlchemy async sessions.

    Entities are dataclasses whose field names match the ORM columns, so the
    mapping in both directions is by name. Writes run inside a SAVEPOINT: a
    rejected write is rolled back on its own and the request's session stays
    usable (the failure is reported to the caller as a result, not raised
    through the request).
    """

    entity_cls: ClassVar[type]
    model_cls: ClassVar[type[Base]]
    order_column: ClassVar[str] = "created_at"
    order_descending: ClassVar[bool] = False

    def __init__(self, session: AsyncSession):
        self._session = session

    @property
    def _table(self) -> str:
        return self.model_cls.__tablename__

    def _to_entity(self, model: Base) -> EntityT:
        """Map ORM model → domain entity."""
        return self.entity_cls(
            **{f.name: getattr(model, f.name) for f in fields(self.entity_cls)}
        )

    def _to_model(self, entity: EntityT) -> Base:
        """Map domain entity → ORM model (for creation)."""
        return self.model_cls(
            **{f.name: getattr(entity, f.name) for f in fields(self.entity_cls)}
        )

    async def get_by_id(self, entity_id: str) -> EntityT | None:
        with translate_store_errors("select", self._table):
            result = await self._session.get(self.model_cls, entity_id)
        return self._to_entity(result) if result else None

    async def get_all(self, *, skip: int = 0, limit: int = 100) -> list[EntityT]:
        column = getattr(self.model_cls, self.order_column)
        stmt = (
            select(self.model_cls)
            .order_by(column.desc() if self.order_descending else column.asc())
            .offset(skip)
            .limit(limit)
        )
        with translate_store_errors("select", self._table):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, entity: EntityT) -> EntityT:
        model = self._to_model(entity)
        with translate_store_errors("insert", self._table):
            async with self._session.begin_nested():
                self._session.add(model)
        return self._to_entity(model)

    async def update(self, entity_id: str, changes: dict[str, Any]) -> EntityT | None:
        unknown = [key for key in changes if not hasattr(self.model_cls, key)]
        if unknown:
            raise ValueError(f"Unknown {self._table} columns: {', '.join(sorted(unknown))}")

        with translate_store_errors("update", self._table):
            model = await self._session.get(self.model_cls, entity_id)
            if model is None:
                return None
            async with self._session.begin_nested():
                for key, value in changes.items():
                    setattr(model, key, value)
        return self._to_entity(model)

    async def delete(self, entity_id: str) -> bool:
        stmt = delete(self.model_cls).where(self.model_cls.id == entity_id)
        with translate_store_errors("delete", self._table):
            async with self._session.begin_nested():
                result = await self._session.execute(stmt)
        return result.rowcount > 0
