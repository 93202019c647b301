"""
User-Facing Notifications.

Repositories report service-side failures to the user through an injected
``Notifier`` (the equivalent of an error toast).  Rendering is left to the
host application; two headless implementations are provided.
"""

from __future__ import annotations

from typing import Protocol

from moneyflow.logger import StructuredLogger


class Notifier(Protocol):
    """Receives user-facing error messages."""

    def error(self, message: str) -> None: ...


class LoggingNotifier:
    """Writes user-facing messages to a dedicated logger at WARNING level."""

    def __init__(self, logger: StructuredLogger) -> None:
        self._logger = logger

    def error(self, message: str) -> None:
        self._logger.warning(message, extra={"notification": "error"})


class CollectingNotifier:
    """Keeps user-facing messages in memory until they are drained."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def error(self, message: str) -> None:
        self.messages.append(message)

    def drain(self) -> list[str]:
        """Return all pending messages and clear the buffer."""
        pending, self.messages = self.messages, []
        return pending
