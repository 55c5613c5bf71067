"""Tests for the in-memory AccountRepository."""

from __future__ import annotations

import pytest

from ddd_patterns.adapters.memory.accounts import AccountRecord, AccountRepository
from ddd_patterns.permissions.account import Account
from ddd_patterns.permissions.policy import AdminPolicy, MemberPolicy, Role
from ddd_patterns.ports.repository import IAccountRepository
from ddd_patterns.primitives.exceptions import EntityNotFoundError, UnknownRoleError


@pytest.mark.asyncio
class TestAccountRepository:
    """Save/load round trips and policy re-binding."""

    @pytest.fixture
    def repo(self) -> AccountRepository:
        """Create fresh repository for each test."""
        return AccountRepository()

    async def test_satisfies_port(self, repo: AccountRepository) -> None:
        assert isinstance(repo, IAccountRepository)

    async def test_save_returns_id(self, repo: AccountRepository) -> None:
        account = Account(id="u1", name="Alice", role=Role.ADMIN)

        assert await repo.save(account) == "u1"
        assert len(repo) == 1

    async def test_reload_rebinds_policy_from_role(
        self, repo: AccountRepository
    ) -> None:
        await repo.save(Account(id="u1", name="Alice(Admin)", role=Role.ADMIN))
        await repo.save(Account(id="u2", name="Bob(Member)", role=Role.MEMBER))

        admin = await repo.find_by_id("u1")
        member = await repo.find_by_id("u2")

        assert admin is not None
        assert member is not None
        assert isinstance(admin.policy, AdminPolicy)
        assert isinstance(member.policy, MemberPolicy)
        assert admin.delete_user("u99") is True
        assert member.delete_user("u99") is False
        assert member.delete_user("u2") is True
        assert admin.role is Role.ADMIN
        assert member.role is Role.MEMBER

    async def test_reload_returns_fresh_instance(
        self, repo: AccountRepository
    ) -> None:
        account = Account(id="u1", name="Alice", role=Role.ADMIN)
        account.delete_user("u9")
        await repo.save(account)

        loaded = await repo.find_by_id("u1")

        assert loaded is not None
        assert loaded is not account
        assert loaded.collect_events() == []

    async def test_only_role_tag_is_stored(self, repo: AccountRepository) -> None:
        # A custom policy is not persisted; reload falls back to the role's.
        await repo.save(
            Account(policy=AdminPolicy(), id="u3", name="Carol", role=Role.MEMBER)
        )

        loaded = await repo.find_by_id("u3")

        assert loaded is not None
        assert isinstance(loaded.policy, MemberPolicy)

    async def test_missing_id_returns_none(self, repo: AccountRepository) -> None:
        assert await repo.find_by_id("nope") is None

    async def test_get_or_raise(self, repo: AccountRepository) -> None:
        await repo.save(Account(id="u1", name="Alice", role=Role.ADMIN))

        assert (await repo.get_or_raise("u1")).id == "u1"
        with pytest.raises(EntityNotFoundError, match="Account with id='nope'"):
            await repo.get_or_raise("nope")

    async def test_unknown_role_tag_raises(self, repo: AccountRepository) -> None:
        repo.put_record(AccountRecord(id="u9", name="Mallory", role="owner"))

        with pytest.raises(UnknownRoleError) as exc_info:
            await repo.find_by_id("u9")

        assert exc_info.value.role == "owner"

    async def test_delete(self, repo: AccountRepository) -> None:
        await repo.save(Account(id="u1", name="Alice", role=Role.ADMIN))

        assert await repo.delete("u1") == "u1"
        assert await repo.find_by_id("u1") is None
        assert await repo.delete("u1") == "u1"

    async def test_list_all(self, repo: AccountRepository) -> None:
        await repo.save(Account(id="u1", name="Alice", role=Role.ADMIN))
        await repo.save(Account(id="u2", name="Bob", role=Role.MEMBER))

        accounts = await repo.list_all()

        assert sorted(a.id for a in accounts) == ["u1", "u2"]

    async def test_clear(self, repo: AccountRepository) -> None:
        await repo.save(Account(id="u1", name="Alice", role=Role.ADMIN))
        repo.clear()

        assert len(repo) == 0


def test_record_mapping() -> None:
    account = Account(id="u1", name="Alice", role=Role.ADMIN)

    record = AccountRepository.to_record(account)

    assert record == AccountRecord(id="u1", name="Alice", role="admin")
    assert AccountRepository.to_domain(record).model_dump() == account.model_dump()
