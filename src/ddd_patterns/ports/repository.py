"""Repository protocols for the user-facing demos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..null_object.user import IUser
    from ..permissions.account import Account


@runtime_checkable
class IUserDirectory(Protocol):
    """
    Read-only lookup of users.

    ``find_by_id`` never answers ``None``: a miss yields a guest user.
    """

    async def find_by_id(self, user_id: str) -> IUser: ...


@runtime_checkable
class IAccountRepository(Protocol):
    """
    Storage for :class:`~ddd_patterns.permissions.account.Account`.

    Implementations persist a plain record and rebuild the account (policy
    included) on load.
    """

    async def save(self, account: Account) -> str: ...

    async def find_by_id(self, account_id: str) -> Account | None: ...

    async def get_or_raise(self, account_id: str) -> Account: ...

    async def delete(self, account_id: str) -> str: ...

    async def list_all(self) -> list[Account]: ...
