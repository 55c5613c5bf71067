#!/usr/bin/env python
"""Demo: role policies survive a save/load round trip.

Only the role tag is stored. The repository rebuilds the policy from it
when an account is loaded.
"""

from __future__ import annotations

import asyncio
import logging

from ddd_patterns import (
    Account,
    AccountRepository,
    AdminPolicy,
    MemberPolicy,
    Role,
)

# ─── Main ─────────────────────────────────────────────────────────


async def main(repo: AccountRepository | None = None) -> AccountRepository:
    repo = repo or AccountRepository()

    print("=== 1. Create and save ===")
    await repo.save(
        Account(policy=AdminPolicy(), id="u1", name="Alice(Admin)", role=Role.ADMIN)
    )
    await repo.save(
        Account(policy=MemberPolicy(), id="u2", name="Bob(Member)", role=Role.MEMBER)
    )
    print("Save complete.\n")

    print("=== 2. Reload and check behaviour ===")
    admin = await repo.get_or_raise("u1")
    member = await repo.get_or_raise("u2")

    print("--- A. Delete someone else ---")
    admin.delete_user("u99")
    member.delete_user("u99")

    print("\n--- B. Delete yourself ---")
    member.delete_user("u2")

    print("\n--- C. Roles ---")
    print(f"User {admin.id} is {admin.role.value}")
    print(f"User {member.id} is {member.role.value}")
    return repo


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
