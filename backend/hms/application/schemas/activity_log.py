"""Pydantic DTOs for reading the activity log."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class ActivityLogResponse(BaseModel):
    """An audit entry with its ``details`` decoded back to structured form."""

    id: int | None
    action: str
    details: Any = None
    user_id: str | None
    created_at: datetime


class ActivityLogStatsResponse(BaseModel):
    total: int
    today: int
    this_week: int
    this_month: int
