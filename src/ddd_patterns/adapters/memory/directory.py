"""UserDirectory — dict-backed user lookup that falls back to a guest."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ddd_patterns.null_object.user import NULL_USER, AuthenticatedUser
from ddd_patterns.ports.repository import IUserDirectory

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ddd_patterns.null_object.user import IUser

logger = logging.getLogger("ddd_patterns.adapters")

DEFAULT_USERS: dict[str, str] = {
    "123": "Taro Yamada",
    "456": "Hanako Suzuki",
}


class UserDirectory(IUserDirectory):
    """In-memory implementation of ``IUserDirectory``.

    Maps user ids to display names. Unknown ids resolve to the shared
    :data:`~ddd_patterns.null_object.user.NULL_USER`.
    """

    def __init__(self, users: Mapping[str, str] | None = None) -> None:
        self._names: dict[str, str] = dict(DEFAULT_USERS if users is None else users)

    async def find_by_id(self, user_id: str) -> IUser:
        name = self._names.get(user_id)
        if name is None:
            logger.debug("User %s not found, returning guest", user_id)
            return NULL_USER
        return AuthenticatedUser(id=user_id, name=name)

    # ── Test helpers ─────────────────────────────────────────────

    def register(self, user_id: str, name: str) -> None:
        self._names[user_id] = name

    def __len__(self) -> int:
        return len(self._names)
