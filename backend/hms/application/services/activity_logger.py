"""Best-effort audit recorder, the single entry point for writing activity logs.

Failures inside ``log_activity`` are logged as a warning and never reach the
caller.
"""

import json
import logging
from typing import Any

from hms.application.interfaces import ActivityLogRepository, CurrentUserProvider
from hms.domain.entities import ActivityLog

logger = logging.getLogger(__name__)


class ActivityLogger:
    """Persists one ActivityLog entry per audited action.

    Usage:
        activity_logger = ActivityLogger(log_repository, user_provider)
        await activity_logger.log_activity(
            "patient.create",
            {"full_name": "Amina Juma", "linked_user": False},
        )
    """

    def __init__(
        self,
        log_repository: ActivityLogRepository,
        user_provider: CurrentUserProvider | None = None,
    ):
        self._repo = log_repository
        self._user_provider = user_provider

    async def log_activity(
        self,
        action: str,
        details: dict[str, Any] | None = None,
        *,
        user_id: str | None = None,
    ) -> ActivityLog | None:
        """Record ``action`` with optional structured ``details``. Never raises.

        Args:
            action: Short action name ("create", "update", "billing.payment.received"...).
            details: Arbitrary JSON-serializable data, stored as JSON text.
            user_id: Acting user. When omitted, the current user provider is
                     asked; if it cannot resolve anyone the entry has no user.

        Returns:
            The persisted entry, or None if recording failed.
        """
        try:
            if user_id is None and self._user_provider is not None:
                user_id = await self._user_provider.get_current_user_id()

            entry = ActivityLog(
                action=action,
                details=json.dumps(details, default=str) if details is not None else None,
                user_id=user_id or None,
            )
            saved = await self._repo.create(entry)
        except Exception as exc:
            logger.warning("Failed to log activity %s: %s", action, exc)
            return None

        logger.debug("Activity [%s] user=%s id=%s", action, saved.user_id, saved.id)
        return saved
