"""Notifiers, including one that deliberately does nothing."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger("ddd_patterns.null_object")


@runtime_checkable
class INotifier(Protocol):
    """Protocol for delivering a plain-text message to someone."""

    def send(self, message: str) -> None: ...


class EmailNotifier(INotifier):
    """Development notifier that logs the e-mail it would send."""

    def __init__(self, email: str) -> None:
        self.email = email

    def send(self, message: str) -> None:
        logger.info("Sending to %s: %s", self.email, message)


class SilentNotifier(INotifier):
    """Null Object for :class:`INotifier`.

    Accepts every message and delivers none of them, so owners without a
    channel need no special casing.
    """

    def send(self, message: str) -> None:
        logger.debug("Notification skipped: %s", message)


class TaskOwner:
    """Someone who completes tasks and is told about it via a notifier."""

    def __init__(self, name: str, notifier: INotifier) -> None:
        self.name = name
        self._notifier = notifier

    @property
    def notifier(self) -> INotifier:
        return self._notifier

    def complete_task(self, task_name: str) -> None:
        self._notifier.send(f"{task_name} completed")
