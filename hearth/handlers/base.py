"""Base handler class for intent handlers."""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from hearth.models.command import HandlerResult
from hearth.models.household import HouseholdState

logger = logging.getLogger(__name__)


class BaseHandler(ABC):
    """Base class for all intent handlers.

    A handler owns one domain of the household. ``_interpret`` either claims
    the command, mutating ``state`` in place and returning a ``HandlerResult``, or
    returns ``None`` so the dispatcher can try the next handler.
    """

    def __init__(self, handler_id: str, display_name: str):
        self.handler_id = handler_id
        self.display_name = display_name
        self._last_command: str = ""
        self._last_reply: str = ""
        self._last_run: datetime | None = None
        self._handled_count = 0

    @property
    def info(self) -> dict[str, Any]:
        """Get handler info for the API."""
        return {
            "handler_id": self.handler_id,
            "display_name": self.display_name,
            "handled_count": self._handled_count,
            "last_command": self._last_command,
            "last_reply": self._last_reply,
            "last_run": self._last_run.isoformat() if self._last_run else None,
        }

    def handle(self, state: HouseholdState, command: str) -> HandlerResult | None:
        """Try to claim a normalized (trimmed, lowercased) command."""
        result = self._interpret(state, command)
        if result is not None:
            self._record(command, result.reply)
        return result

    @abstractmethod
    def _interpret(self, state: HouseholdState, command: str) -> HandlerResult | None:
        """Interpret a command for this domain. Override in subclasses."""

    @abstractmethod
    def summarize(self, state: HouseholdState) -> str:
        """One-line summary of this domain for the full status report."""

    def _record(self, command: str, reply: str) -> None:
        """Record the last command this handler claimed."""
        self._last_command = command
        self._last_reply = reply
        self._last_run = datetime.now()
        self._handled_count += 1
        logger.debug(f"Handler {self.handler_id} claimed: {command!r}")
