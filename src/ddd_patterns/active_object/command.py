"""ICommand — the unit of work driven by the engine."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ICommand(Protocol):
    """
    A re-entrant unit of work.

    ``step()`` is called once per turn at the head of the queue. The command
    itself decides whether it is finished; to be visited again it enqueues
    itself on its engine before returning.
    """

    def step(self) -> None: ...
