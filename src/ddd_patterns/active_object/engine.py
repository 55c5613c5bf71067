"""ActiveObjectEngine — single-threaded cooperative command scheduler."""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import TYPE_CHECKING

from ..primitives.exceptions import StepLimitExceededError
from .options import EngineOptions

if TYPE_CHECKING:
    from .command import ICommand

logger = logging.getLogger("ddd_patterns.active_object")


class ActiveObjectEngine:
    """Drains a FIFO queue of commands, one ``step()`` at a time.

    Commands that are not finished put themselves back on the queue, so the
    number of iterations of :meth:`run` is driven by the commands, not by the
    initial queue length. Nothing here sleeps or spawns threads; a command
    that is waiting simply returns and is visited again on a later turn.

    Usage::

        engine = ActiveObjectEngine()
        engine.enqueue(TimedCommand(1000, engine))
        engine.enqueue(TimedCommand(3000, engine))
        engine.run()
    """

    def __init__(self, options: EngineOptions | None = None) -> None:
        self._options = options or EngineOptions()
        self._commands: deque[ICommand] = deque()

    @property
    def options(self) -> EngineOptions:
        return self._options

    @property
    def pending(self) -> int:
        """Number of queued slots (a command queued twice counts twice)."""
        return len(self._commands)

    def enqueue(self, command: ICommand) -> None:
        """Append *command* to the tail of the queue."""
        self._commands.append(command)

    def run(self) -> int:
        """Drain the queue and return the number of steps executed.

        Commands enqueued during the drain (including re-enqueues) are
        processed in the same call, in arrival order.

        Raises:
            StepLimitExceededError: ``options.max_steps`` was reached while
                commands were still pending.
            Exception: whatever a command's ``step()`` raised. The drain
                stops and the remaining commands stay queued.
        """
        if not self._commands:
            logger.debug("%s: nothing to run", self._options.name)
            return 0

        limit = self._options.max_steps
        steps = 0
        logger.info(
            "%s: draining %d pending command(s)",
            self._options.name,
            len(self._commands),
        )
        start = time.perf_counter()
        while self._commands:
            if limit is not None and steps >= limit:
                logger.warning(
                    "%s: step limit %d reached with %d pending",
                    self._options.name,
                    limit,
                    len(self._commands),
                )
                raise StepLimitExceededError(limit, len(self._commands))
            command = self._commands.popleft()
            steps += 1
            try:
                command.step()
            except Exception:
                logger.exception(
                    "%s: %s failed on step %d",
                    self._options.name,
                    type(command).__name__,
                    steps,
                )
                raise

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "%s: drained %d step(s) in %.2fms", self._options.name, steps, elapsed
        )
        return steps

    # ── Test helpers ─────────────────────────────────────────────

    def clear(self) -> None:
        self._commands.clear()

    def __len__(self) -> int:
        return len(self._commands)
