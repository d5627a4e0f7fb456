"""Abstract repository interface for the activity (audit) log."""

from abc import ABC, abstractmethod
from datetime import datetime

from hms.domain.entities import ActivityLog


class ActivityLogRepository(ABC):
    """Port: append-only persistence for audit entries."""

    @abstractmethod
    async def create(self, log: ActivityLog) -> ActivityLog:
        """Persist a new entry.

        Returns:
            The created entry with its assigned ID.
        """
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        since: datetime | None = None,
        until: datetime | None = None,
        action: str | None = None,
        user_id: str | None = None,
        limit: int = 100,
    ) -> list[ActivityLog]:
        """Retrieve entries, most recent first.

        ``action`` is a case-insensitive substring filter.
        """
        ...

    @abstractmethod
    async def count(self, *, since: datetime | None = None) -> int:
        """Count entries created at or after ``since`` (all entries if None)."""
        ...
