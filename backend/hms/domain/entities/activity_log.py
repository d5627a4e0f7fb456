"""Domain entity for one audited mutation event."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class ActivityLog:
    """An append-only audit entry.

    ``details`` holds the JSON-encoded structured payload exactly as stored;
    readers decode it. ``user_id`` is None when no acting user could be
    resolved.
    """

    action: str
    details: str | None = None
    user_id: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
