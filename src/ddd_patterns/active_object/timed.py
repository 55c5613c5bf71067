"""TimedCommand — a non-blocking delay expressed as a three-state machine.

The decision logic lives in :func:`advance`, a pure function of the current
progress and a clock reading. :class:`TimedCommand` only reads the clock,
applies the transition and carries out what it asks for (re-enqueue and/or
fire the terminal action).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from typing_extensions import assert_never

from ..primitives.clock import SystemClock
from .command import ICommand

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..primitives.clock import IClock
    from .engine import ActiveObjectEngine

logger = logging.getLogger("ddd_patterns.active_object")


class TimedState(str, Enum):
    UNSTARTED = "unstarted"
    WAITING = "waiting"
    DONE = "done"


@dataclass(frozen=True)
class TimedProgress:
    """Immutable snapshot of a timed command.

    ``started_at_ms`` is ``None`` exactly while the state is UNSTARTED.
    """

    state: TimedState = TimedState.UNSTARTED
    started_at_ms: float | None = None

    @property
    def started(self) -> bool:
        return self.state is not TimedState.UNSTARTED


@dataclass(frozen=True)
class Transition:
    """Result of :func:`advance`: the next progress plus what to do."""

    progress: TimedProgress
    requeue: bool = False
    fire: bool = False


def advance(progress: TimedProgress, now_ms: float, duration_ms: float) -> Transition:
    """Compute the next state of a timed command.

    - UNSTARTED: record *now_ms* as the start and ask to be re-queued.
    - WAITING: keep waiting while ``now_ms - start < duration_ms``, otherwise
      move to DONE and ask for the terminal action.
    - DONE: absorbing, nothing happens.
    """
    state = progress.state
    if state is TimedState.UNSTARTED:
        return Transition(
            TimedProgress(TimedState.WAITING, started_at_ms=now_ms), requeue=True
        )
    if state is TimedState.WAITING:
        started_at = progress.started_at_ms
        if started_at is None:
            raise ValueError("WAITING progress must carry a start timestamp")
        if now_ms - started_at < duration_ms:
            return Transition(progress, requeue=True)
        return Transition(
            TimedProgress(TimedState.DONE, started_at_ms=started_at), fire=True
        )
    if state is TimedState.DONE:
        return Transition(progress)
    assert_never(state)


class TimedCommand(ICommand):
    """Command that completes once ``duration_ms`` has elapsed since its
    first step.

    Args:
        duration_ms: Delay before the terminal action, in milliseconds.
        engine: Engine the command re-enqueues itself on while waiting.
        clock: Time source, :class:`SystemClock` by default.
        on_done: Terminal action, called once with the command. Defaults to
            an INFO log line.
    """

    def __init__(
        self,
        duration_ms: float,
        engine: ActiveObjectEngine,
        *,
        clock: IClock | None = None,
        on_done: Callable[[TimedCommand], None] | None = None,
    ) -> None:
        if duration_ms < 0:
            raise ValueError("duration_ms must be non-negative")
        self._duration_ms = duration_ms
        self._engine = engine
        self._clock = clock or SystemClock()
        self._on_done = on_done
        self._progress = TimedProgress()
        self.steps = 0
        self.completed_at_ms: float | None = None

    @property
    def duration_ms(self) -> float:
        return self._duration_ms

    @property
    def progress(self) -> TimedProgress:
        return self._progress

    @property
    def state(self) -> TimedState:
        return self._progress.state

    @property
    def started(self) -> bool:
        return self._progress.started

    @property
    def started_at_ms(self) -> float | None:
        return self._progress.started_at_ms

    @property
    def done(self) -> bool:
        return self._progress.state is TimedState.DONE

    def step(self) -> None:
        now = self._clock.now_ms()
        self.steps += 1
        transition = advance(self._progress, now, self._duration_ms)
        self._progress = transition.progress
        if transition.requeue:
            self._engine.enqueue(self)
        if transition.fire:
            self.completed_at_ms = now
            self._complete()

    def _complete(self) -> None:
        if self._on_done is not None:
            self._on_done(self)
            return
        logger.info("Command executed (waited %gms)", self._duration_ms)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(duration_ms={self._duration_ms!r}, "
            f"state={self._progress.state.value!r})"
        )
