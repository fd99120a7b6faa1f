"""Command dispatcher: routes a raw utterance through the intent handlers.

Handlers are probed in a fixed order and the first one to claim the command
wins. The order is load-bearing for ambiguous input, e.g. "turn off the
thermostat" is claimed by the light handler because it is asked first.
"""

import logging
from typing import Any

from config import settings
from hearth.handlers import (
    BaseHandler,
    LightHandler,
    MusicHandler,
    ReminderHandler,
    SecurityHandler,
    ThermostatHandler,
)
from hearth.models.command import CommandRecord, CommandResponse, HandlerResult
from hearth.state.store import StateStore

logger = logging.getLogger(__name__)

EMPTY_COMMAND_REPLY = "Please say something so I can help."
RESET_REPLY = "I've reset the smart home to its default configuration."
UNKNOWN_COMMAND_REPLY = (
    "I'm not sure how to handle that yet. Try asking about lights, thermostat, "
    "music, security, or reminders."
)


def default_handlers() -> list[BaseHandler]:
    return [
        LightHandler(),
        ThermostatHandler(),
        MusicHandler(),
        SecurityHandler(),
        ReminderHandler(),
    ]


class CommandDispatcher:
    """Interprets commands against a ``StateStore``.

    Not safe for concurrent callers: one command is fully applied before the
    next one should start.
    """

    def __init__(
        self,
        store: StateStore | None = None,
        handlers: list[BaseHandler] | None = None,
        history_limit: int | None = None,
    ):
        self.store = store or StateStore()
        self._handlers = handlers if handlers is not None else default_handlers()
        self._history_limit = history_limit or settings.history_limit
        self._history: list[CommandRecord] = []

    @property
    def handlers(self) -> list[BaseHandler]:
        return list(self._handlers)

    @property
    def history(self) -> list[CommandRecord]:
        return list(self._history)

    def process_command(self, raw_command: str) -> CommandResponse:
        """Interpret ``raw_command`` and apply it to the household state."""
        command = raw_command.strip().lower()

        if not command:
            self.store.touch()
            return CommandResponse(reply=EMPTY_COMMAND_REPLY, state=self.store.snapshot())

        logger.info(f"Processing command: {command!r}")
        handled_by, result = self._dispatch(command)
        logger.debug(f"Command {command!r} handled by {handled_by}")

        self.store.touch()
        self._remember(command, handled_by, result)
        return CommandResponse(
            reply=result.reply,
            actions=result.actions,
            state=self.store.snapshot(),
        )

    def build_status_report(self) -> str:
        """One line per domain, joined into a single reply."""
        state = self.store.state
        return " ".join(handler.summarize(state) for handler in self._handlers)

    def get_all_handler_info(self) -> list[dict[str, Any]]:
        return [handler.info for handler in self._handlers]

    def _dispatch(self, command: str) -> tuple[str, HandlerResult]:
        for handler in self._handlers:
            result = handler.handle(self.store.state, command)
            if result is not None:
                return handler.handler_id, result

        # "reset everything" must reset rather than report, so reset is
        # checked before the status keywords.
        if "reset" in command:
            self.store.reset()
            return "reset", HandlerResult(
                reply=RESET_REPLY, actions=["Reset environment to defaults"]
            )

        if "status" in command or "everything" in command:
            return "status", HandlerResult(reply=self.build_status_report())

        logger.info(f"No handler matched command: {command!r}")
        return "unknown", HandlerResult(reply=UNKNOWN_COMMAND_REPLY)

    def _remember(self, command: str, handled_by: str, result: HandlerResult) -> None:
        self._history.append(
            CommandRecord(
                command=command,
                handled_by=handled_by,
                reply=result.reply,
                action_count=len(result.actions),
            )
        )
        if len(self._history) > self._history_limit:
            self._history = self._history[-self._history_limit:]


# Singleton
dispatcher = CommandDispatcher()
