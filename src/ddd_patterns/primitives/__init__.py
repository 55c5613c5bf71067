"""Primitives: exceptions, clocks."""

from __future__ import annotations

from .clock import IClock, ManualClock, SystemClock
from .exceptions import (
    DomainError,
    EngineError,
    EntityNotFoundError,
    NotFoundError,
    PatternsError,
    PermissionDeniedError,
    StepLimitExceededError,
    UnknownRoleError,
)

__all__ = [
    "DomainError",
    "EngineError",
    "EntityNotFoundError",
    "IClock",
    "ManualClock",
    "NotFoundError",
    "PatternsError",
    "PermissionDeniedError",
    "StepLimitExceededError",
    "SystemClock",
    "UnknownRoleError",
]
