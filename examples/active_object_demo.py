#!/usr/bin/env python
"""Demo: two timed commands sharing one cooperative engine.

The one-second and three-second commands interleave on a single thread.
``run()`` returns once both have fired.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ddd_patterns import ActiveObjectEngine, TimedCommand

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ddd_patterns import IClock

# ─── Main ─────────────────────────────────────────────────────────


def main(
    durations_ms: Sequence[float] = (1000, 3000),
    clock: IClock | None = None,
) -> ActiveObjectEngine:
    engine = ActiveObjectEngine()
    for duration in durations_ms:
        engine.enqueue(TimedCommand(duration, engine, clock=clock))

    print("Start")
    steps = engine.run()
    print(f"All done ({steps} steps)")
    return engine


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
