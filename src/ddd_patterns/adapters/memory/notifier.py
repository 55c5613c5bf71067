"""In-memory notifier for test assertions."""

from __future__ import annotations

from ddd_patterns.null_object.notification import INotifier


class InMemoryNotifier(INotifier):
    """
    Test double (Fake) that stores messages in a list for assertions.
    """

    def __init__(self) -> None:
        self.sent_messages: list[str] = []

    def send(self, message: str) -> None:
        self.sent_messages.append(message)

    def assert_sent(self, message: str, count: int = 1) -> None:
        """Helper for test assertions."""
        matches = [m for m in self.sent_messages if m == message]
        if len(matches) != count:
            raise AssertionError(
                f"Expected {count} message(s) {message!r}, but found {len(matches)}."
            )

    def clear(self) -> None:
        """Clear all sent messages."""
        self.sent_messages.clear()
