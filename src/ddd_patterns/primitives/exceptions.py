"""Domain and scheduler exceptions for ddd-patterns."""

from __future__ import annotations


class PatternsError(Exception):
    """Root exception for the entire ddd-patterns package."""


class DomainError(PatternsError):
    """Base class for all domain-related errors."""


class NotFoundError(DomainError):
    """Raised when an aggregate or resource is not found."""


class EntityNotFoundError(NotFoundError):
    """Raised when a specific entity cannot be found by ID."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id={entity_id!r} not found")


class PermissionDeniedError(DomainError):
    """Raised when a policy refuses an action for the acting account."""

    def __init__(
        self, actor_id: str, action: str, target_id: str | None = None
    ) -> None:
        self.actor_id = actor_id
        self.action = action
        self.target_id = target_id
        msg = f"{actor_id!r} is not allowed to {action}"
        if target_id is not None:
            msg += f" {target_id!r}"
        super().__init__(msg)


class UnknownRoleError(DomainError):
    """Raised when a stored role tag is outside the known role set."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"Unknown role: {role!r}")


class EngineError(PatternsError):
    """Base class for command scheduler errors."""


class StepLimitExceededError(EngineError):
    """Raised when a drain exceeds the configured step budget.

    The engine keeps the commands that were still queued, so the caller can
    inspect or clear them.
    """

    def __init__(self, limit: int, pending: int) -> None:
        self.limit = limit
        self.pending = pending
        super().__init__(
            f"Engine exceeded {limit} steps with {pending} command(s) still pending"
        )
