"""CurrentUserProvider backed by a header set by the authenticating gateway."""

from collections.abc import Mapping

from hms.application.interfaces import CurrentUserProvider


class HeaderUserProvider(CurrentUserProvider):
    """Reads the acting user's id from request headers.

    Authentication happens upstream; this only trusts the forwarded id. A
    missing or blank header means "no authenticated user".
    """

    def __init__(self, headers: Mapping[str, str], header_name: str = "X-User-Id"):
        self._headers = headers
        self._header_name = header_name

    async def get_current_user_id(self) -> str | None:
        value = self._headers.get(self._header_name)
        if value is None:
            return None
        return value.strip() or None
