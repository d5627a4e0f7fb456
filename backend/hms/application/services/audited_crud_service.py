"""Generic audited CRUD use cases: every successful mutation writes one audit entry."""

import logging
from datetime import datetime, timezone
from typing import Any, ClassVar, Generic, TypeVar

from hms.application.interfaces import EntityRepository
from hms.application.services.activity_logger import ActivityLogger
from hms.application.services.operation_result import OperationResult
from hms.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class AuditedCrudService(Generic[EntityT]):
    """Base service for a mutable entity type. Depends on the repository port (DI).

    Subclasses only describe the entity:

    - ``table_name``: recorded in every audit entry.
    - ``label``: human wording used in audit text and error log prefixes.
    - ``entity_type``: name used in ``EntityNotFoundError``.
    - ``name_field``: attribute that holds the display name.

    Every operation returns an ``OperationResult``; store failures are logged
    with a fixed "Error <verb> <label>:" prefix and returned, never raised.
    Audit failures are handled inside ``ActivityLogger`` and never affect the
    result.
    """

    table_name: ClassVar[str]
    label: ClassVar[str]
    entity_type: ClassVar[str]
    name_field: ClassVar[str]

    def __init__(self, repository: EntityRepository[EntityT], activity_logger: ActivityLogger):
        self._repository = repository
        self._activity_logger = activity_logger

    async def create(self, entity: EntityT, user_id: str | None = None) -> OperationResult[EntityT]:
        try:
            created = await self._repository.create(entity)
        except Exception as exc:
            return self._fail(f"creating {self.label}", exc)

        await self._audit(
            "create",
            created.id,
            f"Created {self.label}: {getattr(created, self.name_field)}",
            user_id,
        )
        return OperationResult.success(created)

    async def list_all(self, *, skip: int = 0, limit: int = 100) -> OperationResult[list[EntityT]]:
        try:
            items = await self._repository.get_all(skip=skip, limit=limit)
        except Exception as exc:
            return self._fail(f"fetching {self.label}s", exc)
        return OperationResult.success(items)

    async def get_by_id(self, entity_id: str) -> OperationResult[EntityT]:
        try:
            entity = await self._repository.get_by_id(entity_id)
        except Exception as exc:
            return self._fail(f"fetching {self.label}", exc)
        if entity is None:
            return self._fail(f"fetching {self.label}", EntityNotFoundError(self.entity_type, entity_id))
        return OperationResult.success(entity)

    async def update(
        self, entity_id: str, updates: dict[str, Any], user_id: str | None = None
    ) -> OperationResult[EntityT]:
        changes = {**updates, "updated_at": datetime.now(timezone.utc)}
        try:
            updated = await self._repository.update(entity_id, changes)
        except Exception as exc:
            return self._fail(f"updating {self.label}", exc)
        if updated is None:
            return self._fail(f"updating {self.label}", EntityNotFoundError(self.entity_type, entity_id))

        name = updates.get(self.name_field) or f"ID: {entity_id}"
        await self._audit("update", entity_id, f"Updated {self.label}: {name}", user_id)
        return OperationResult.success(updated)

    async def delete(self, entity_id: str, user_id: str | None = None) -> OperationResult[None]:
        # Looked up first only to name the record in the audit entry.
        existing = await self.get_by_id(entity_id)

        try:
            await self._repository.delete(entity_id)
        except Exception as exc:
            return self._fail(f"deleting {self.label}", exc)

        if existing.data is not None:
            await self._audit(
                "delete",
                entity_id,
                f"Deleted {self.label}: {getattr(existing.data, self.name_field)}",
                user_id,
            )
        return OperationResult.success()

    async def _audit(
        self, action: str, record_id: str, description: str, user_id: str | None
    ) -> None:
        await self._activity_logger.log_activity(
            action,
            {
                "table_name": self.table_name,
                "record_id": record_id,
                "description": description,
            },
            user_id=user_id,
        )

    def _fail(self, what: str, exc: Exception) -> OperationResult[Any]:
        logger.error("Error %s: %s", what, exc)
        return OperationResult.failure(exc)


class ActivatableCrudService(AuditedCrudService[EntityT]):
    """Audited CRUD for entities that carry a boolean active flag.

    ``active_field`` names the flag flipped by ``toggle_status``.
    """

    active_field: ClassVar[str]

    async def toggle_status(
        self, entity_id: str, current_status: bool, user_id: str | None = None
    ) -> OperationResult[EntityT]:
        changes = {
            self.active_field: not current_status,
            "updated_at": datetime.now(timezone.utc),
        }
        try:
            updated = await self._repository.update(entity_id, changes)
        except Exception as exc:
            return self._fail(f"toggling {self.label} status", exc)
        if updated is None:
            return self._fail(
                f"toggling {self.label} status", EntityNotFoundError(self.entity_type, entity_id)
            )

        verb = "Deactivated" if current_status else "Activated"
        await self._audit(
            "update",
            entity_id,
            f"{verb} {self.label}: {getattr(updated, self.name_field)}",
            user_id,
        )
        return OperationResult.success(updated)
