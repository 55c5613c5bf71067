"""Account aggregate that delegates authorization to its policy."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import PrivateAttr

from ..domain.aggregate import AggregateRoot
from ..domain.events import DomainEvent
from ..primitives.exceptions import PermissionDeniedError
from .policy import IPermissionPolicy, Role, policy_for

logger = logging.getLogger("ddd_patterns.permissions")


class AccountDeleted(DomainEvent):
    """Raised by an account after it deleted another (or its own) user."""

    deleted_user_id: str
    aggregate_type: str | None = "Account"


class Account(AggregateRoot[str]):
    """A user account with a role and a role-specific permission policy.

    The policy is a strategy injected at construction time. It never needs
    the account itself, which keeps the dependency one-way. When no policy
    is given the one matching ``role`` is looked up on every use, so a copy
    with a different role (``model_copy(update={"role": ...})``) follows the
    new role. An injected policy is kept as is, copies included.

    Usage::

        admin = Account(id="u1", name="Alice", role=Role.ADMIN)
        admin.delete_user("u99")  # True
    """

    name: str
    role: Role
    _policy: IPermissionPolicy | None = PrivateAttr(default=None)

    def __init__(self, policy: IPermissionPolicy | None = None, **data: Any) -> None:
        super().__init__(**data)
        self._policy = policy

    @property
    def policy(self) -> IPermissionPolicy:
        if self._policy is not None:
            return self._policy
        return policy_for(self.role)

    def can_delete_user(self, target_user_id: str) -> bool:
        return self.policy.can_delete_user(target_user_id, self.id)

    def can_view_audit_log(self) -> bool:
        return self.policy.can_view_audit_log()

    def delete_user(self, target_user_id: str) -> bool:
        """Delete *target_user_id* if the policy allows it.

        Returns whether the deletion happened. A successful deletion records
        an :class:`AccountDeleted` event.
        """
        if not self.can_delete_user(target_user_id):
            logger.info(
                "[Deny] User %s is NOT allowed to delete user %s.",
                self.name,
                target_user_id,
            )
            return False

        logger.info("[Success] User %s deleted user %s.", self.name, target_user_id)
        self.add_event(
            AccountDeleted(aggregate_id=self.id, deleted_user_id=target_user_id)
        )
        return True

    def ensure_can_delete(self, target_user_id: str) -> None:
        """Raise :class:`PermissionDeniedError` unless deletion is allowed."""
        if not self.can_delete_user(target_user_id):
            raise PermissionDeniedError(self.id, "delete user", target_user_id)
