from .accounts import AccountRecord, AccountRepository
from .directory import DEFAULT_USERS, UserDirectory
from .notifier import InMemoryNotifier

__all__ = [
    "DEFAULT_USERS",
    "AccountRecord",
    "AccountRepository",
    "InMemoryNotifier",
    "UserDirectory",
]
