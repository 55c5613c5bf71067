"""Users, with a guest stand-in for "no such user"."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.value_object import ValueObject

GUEST_ID = "GUEST"


@runtime_checkable
class IUser(Protocol):
    """What callers may ask of any user, found or not."""

    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def is_guest(self) -> bool: ...

    def can_edit(self, resource_id: str) -> bool: ...

    def greet(self) -> str: ...


class AuthenticatedUser(ValueObject):
    """A user that exists in the directory."""

    id: str
    name: str

    @property
    def is_guest(self) -> bool:
        return False

    def can_edit(self, resource_id: str) -> bool:  # noqa: ARG002
        return True

    def greet(self) -> str:
        return f"hello {self.name}"


class GuestUser(ValueObject):
    """Null Object for :class:`IUser`.

    Returned instead of ``None`` when a lookup misses, so call sites can
    use the result without checking for absence. It never gets write
    access.
    """

    id: str = GUEST_ID
    name: str = "Guest"

    @property
    def is_guest(self) -> bool:
        return True

    def can_edit(self, resource_id: str) -> bool:  # noqa: ARG002
        return False

    def greet(self) -> str:
        return "not logged in"


NULL_USER = GuestUser()
