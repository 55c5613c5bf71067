"""Policy-based permissions: roles, policies and the Account aggregate."""

from __future__ import annotations

from .account import Account, AccountDeleted
from .policy import AdminPolicy, IPermissionPolicy, MemberPolicy, Role, policy_for

__all__ = [
    "Account",
    "AccountDeleted",
    "AdminPolicy",
    "IPermissionPolicy",
    "MemberPolicy",
    "Role",
    "policy_for",
]
