"""Port for resolving the authenticated user behind the current request."""

from abc import ABC, abstractmethod


class CurrentUserProvider(ABC):
    """Auth collaborator: authentication itself happens outside this backend."""

    @abstractmethod
    async def get_current_user_id(self) -> str | None:
        """Return the acting user's id, or None when nobody is signed in."""
        ...
