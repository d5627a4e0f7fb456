"""Abstract repository interface (port) shared by all mutable hospital entities."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

EntityT = TypeVar("EntityT")


class EntityRepository(ABC, Generic[EntityT]):
    """Port for entity persistence: implemented in the infrastructure layer.

    Implementations raise ``StoreError`` (or a subclass) when the store
    rejects an operation; "no such row" is signalled by ``None`` / ``False``.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: str) -> EntityT | None:
        """Retrieve a single entity by its UUID."""
        ...

    @abstractmethod
    async def get_all(self, *, skip: int = 0, limit: int = 100) -> list[EntityT]:
        """Retrieve a page of entities in the repository's natural order."""
        ...

    @abstractmethod
    async def create(self, entity: EntityT) -> EntityT:
        """Insert a new entity and return the stored row."""
        ...

    @abstractmethod
    async def update(self, entity_id: str, changes: dict[str, Any]) -> EntityT | None:
        """Apply ``changes`` to the row and return it, or None if it does not exist."""
        ...

    @abstractmethod
    async def delete(self, entity_id: str) -> bool:
        """Delete a row. Returns True if deleted, False if not found."""
        ...
