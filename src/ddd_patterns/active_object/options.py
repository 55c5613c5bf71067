"""EngineOptions — typed configuration for ActiveObjectEngine."""

from __future__ import annotations

from pydantic import Field

from ..domain.value_object import ValueObject


class EngineOptions(ValueObject):
    """Engine configuration.

    Attributes:
        name: Label used in log lines, useful when several engines coexist.
        max_steps: Upper bound on steps per ``run()``. ``None`` means the
            drain only stops once the queue is empty.
    """

    name: str = "engine"
    max_steps: int | None = Field(default=None, gt=0)
