"""Ports: protocols implemented by adapters."""

from __future__ import annotations

from .repository import IAccountRepository, IUserDirectory

__all__ = [
    "IAccountRepository",
    "IUserDirectory",
]
