"""AccountRepository — dict-backed account storage with policy re-binding."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ddd_patterns.permissions.account import Account
from ddd_patterns.permissions.policy import Role
from ddd_patterns.ports.repository import IAccountRepository
from ddd_patterns.primitives.exceptions import EntityNotFoundError, UnknownRoleError

logger = logging.getLogger("ddd_patterns.adapters")


@dataclass(frozen=True)
class AccountRecord:
    """Stored shape of an account. The role is a bare string tag."""

    id: str
    name: str
    role: str


class AccountRepository(IAccountRepository):
    """In-memory implementation of ``IAccountRepository``.

    Only records are stored. Loading maps the role tag back onto
    :class:`Role` and attaches the matching policy, so the policy object
    itself never needs to be persisted.
    """

    def __init__(self) -> None:
        self._records: dict[str, AccountRecord] = {}

    async def save(self, account: Account) -> str:
        self._records[account.id] = self.to_record(account)
        logger.debug("Saved account %s (%s)", account.id, account.role.value)
        return account.id

    async def find_by_id(self, account_id: str) -> Account | None:
        record = self._records.get(account_id)
        if record is None:
            return None
        return self.to_domain(record)

    async def get_or_raise(self, account_id: str) -> Account:
        account = await self.find_by_id(account_id)
        if account is None:
            raise EntityNotFoundError("Account", account_id)
        return account

    async def delete(self, account_id: str) -> str:
        self._records.pop(account_id, None)
        return account_id

    async def list_all(self) -> list[Account]:
        return [self.to_domain(record) for record in self._records.values()]

    # ── Mapping ──────────────────────────────────────────────────

    @staticmethod
    def to_record(account: Account) -> AccountRecord:
        return AccountRecord(id=account.id, name=account.name, role=account.role.value)

    @staticmethod
    def to_domain(record: AccountRecord) -> Account:
        """Rebuild an account, selecting its policy from the role tag.

        Raises:
            UnknownRoleError: the tag is not a :class:`Role` value.
        """
        try:
            role = Role(record.role)
        except ValueError:
            raise UnknownRoleError(record.role) from None
        return Account(id=record.id, name=record.name, role=role)

    # ── Test helpers ─────────────────────────────────────────────

    def put_record(self, record: AccountRecord) -> None:
        """Store a raw record, bypassing the domain mapping."""
        self._records[record.id] = record

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
