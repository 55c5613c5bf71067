"""ddd-patterns — small, runnable illustrations of object-oriented patterns.

Active Object (cooperative command queue), Null Object (guest users and
silent notifiers) and Policy/Strategy (role-based permissions with an
in-memory repository).
"""

from __future__ import annotations

# ── Active Object ────────────────────────────────────────────────
from .active_object import (
    ActiveObjectEngine,
    EngineOptions,
    ICommand,
    TimedCommand,
    TimedProgress,
    TimedState,
    Transition,
    advance,
)

# ── Adapters ─────────────────────────────────────────────────────
from .adapters import (
    AccountRecord,
    AccountRepository,
    InMemoryNotifier,
    UserDirectory,
)

# ── Domain ───────────────────────────────────────────────────────
from .domain import AggregateRoot, DomainEvent, ValueObject

# ── Null Object ──────────────────────────────────────────────────
from .null_object import (
    NULL_USER,
    AuthenticatedUser,
    EmailNotifier,
    GuestUser,
    INotifier,
    IUser,
    SilentNotifier,
    TaskOwner,
)

# ── Permissions ──────────────────────────────────────────────────
from .permissions import (
    Account,
    AccountDeleted,
    AdminPolicy,
    IPermissionPolicy,
    MemberPolicy,
    Role,
    policy_for,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IAccountRepository, IUserDirectory

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    DomainError,
    EngineError,
    EntityNotFoundError,
    IClock,
    ManualClock,
    NotFoundError,
    PatternsError,
    PermissionDeniedError,
    StepLimitExceededError,
    SystemClock,
    UnknownRoleError,
)

__all__: list[str] = [
    # Active Object
    "ActiveObjectEngine",
    "EngineOptions",
    "ICommand",
    "TimedCommand",
    "TimedProgress",
    "TimedState",
    "Transition",
    "advance",
    # Null Object
    "NULL_USER",
    "AuthenticatedUser",
    "EmailNotifier",
    "GuestUser",
    "INotifier",
    "IUser",
    "SilentNotifier",
    "TaskOwner",
    # Permissions
    "Account",
    "AccountDeleted",
    "AdminPolicy",
    "IPermissionPolicy",
    "MemberPolicy",
    "Role",
    "policy_for",
    # Domain
    "AggregateRoot",
    "DomainEvent",
    "ValueObject",
    # Ports
    "IAccountRepository",
    "IUserDirectory",
    # Primitives
    "PatternsError",
    "DomainError",
    "NotFoundError",
    "EntityNotFoundError",
    "PermissionDeniedError",
    "UnknownRoleError",
    "EngineError",
    "StepLimitExceededError",
    "IClock",
    "SystemClock",
    "ManualClock",
    # Adapters
    "AccountRecord",
    "AccountRepository",
    "InMemoryNotifier",
    "UserDirectory",
]
