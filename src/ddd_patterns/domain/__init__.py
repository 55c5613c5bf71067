"""Domain primitives: aggregates, events, value objects."""

from __future__ import annotations

from .aggregate import AggregateRoot
from .events import DomainEvent
from .value_object import ValueObject

__all__: list[str] = [
    "AggregateRoot",
    "DomainEvent",
    "ValueObject",
]
