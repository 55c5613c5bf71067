"""Null Object: guest users and silent notifiers."""

from __future__ import annotations

from .notification import EmailNotifier, INotifier, SilentNotifier, TaskOwner
from .user import GUEST_ID, NULL_USER, AuthenticatedUser, GuestUser, IUser

__all__ = [
    "GUEST_ID",
    "NULL_USER",
    "AuthenticatedUser",
    "EmailNotifier",
    "GuestUser",
    "INotifier",
    "IUser",
    "SilentNotifier",
    "TaskOwner",
]
