"""Active Object: cooperative command queue and timed commands."""

from __future__ import annotations

from .command import ICommand
from .engine import ActiveObjectEngine
from .options import EngineOptions
from .timed import TimedCommand, TimedProgress, TimedState, Transition, advance

__all__ = [
    "ActiveObjectEngine",
    "EngineOptions",
    "ICommand",
    "TimedCommand",
    "TimedProgress",
    "TimedState",
    "Transition",
    "advance",
]
