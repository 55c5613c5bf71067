"""Permission policies selected by role.

Every plan or role satisfies the same :class:`IPermissionPolicy` contract,
so an account can swap one policy for another without the account changing.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from typing_extensions import assert_never

from ..domain.value_object import ValueObject


class Role(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"


@runtime_checkable
class IPermissionPolicy(Protocol):
    """Contract every role policy must honour."""

    def can_delete_user(self, target_user_id: str, current_user_id: str) -> bool: ...

    def can_view_audit_log(self) -> bool: ...


class AdminPolicy(ValueObject):
    """Administrators may do everything."""

    def can_delete_user(
        self,
        target_user_id: str,  # noqa: ARG002
        current_user_id: str,  # noqa: ARG002
    ) -> bool:
        return True

    def can_view_audit_log(self) -> bool:
        return True


class MemberPolicy(ValueObject):
    """Members may only delete themselves and cannot read the audit log."""

    def can_delete_user(self, target_user_id: str, current_user_id: str) -> bool:
        return target_user_id == current_user_id

    def can_view_audit_log(self) -> bool:
        return False


def policy_for(role: Role) -> IPermissionPolicy:
    """Return the policy for *role*.

    Adding a member to :class:`Role` without a branch here fails type
    checking at the ``assert_never`` call.
    """
    if role is Role.ADMIN:
        return AdminPolicy()
    if role is Role.MEMBER:
        return MemberPolicy()
    assert_never(role)
