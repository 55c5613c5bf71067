#!/usr/bin/env python
"""Demo: guests and silent notifiers stand in for "nothing"."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ddd_patterns import EmailNotifier, SilentNotifier, TaskOwner, UserDirectory

if TYPE_CHECKING:
    from ddd_patterns import IUserDirectory

# ─── Users ────────────────────────────────────────────────────────


async def show_users(directory: IUserDirectory) -> None:
    for user_id in ("123", "999"):
        user = await directory.find_by_id(user_id)
        print(f"  {user_id}: {user.greet()}")
        print(f"  can edit doc-1: {user.can_edit('doc-1')}")


# ─── Notifiers ────────────────────────────────────────────────────


def show_notifiers() -> list[TaskOwner]:
    owners = [
        TaskOwner("Alice", EmailNotifier("alice@example.com")),
        TaskOwner("Bob", SilentNotifier()),
    ]
    for owner in owners:
        owner.complete_task("Report")
    return owners


# ─── Main ─────────────────────────────────────────────────────────


async def main(directory: IUserDirectory | None = None) -> None:
    print("=== User lookup ===")
    await show_users(directory or UserDirectory())

    print("\n=== Task completion ===")
    show_notifiers()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
