"""Adapters: in-memory implementations of the ports."""

from __future__ import annotations

from .memory import (
    DEFAULT_USERS,
    AccountRecord,
    AccountRepository,
    InMemoryNotifier,
    UserDirectory,
)

__all__ = [
    "DEFAULT_USERS",
    "AccountRecord",
    "AccountRepository",
    "InMemoryNotifier",
    "UserDirectory",
]
