"""Reminder handler: add, list and complete tasks."""

import re

from hearth.handlers.base import BaseHandler
from hearth.models.command import HandlerResult
from hearth.models.household import HouseholdState, Task

DEFAULT_TITLE = "General task"

_CONNECTOR_RE = re.compile(r"^(?:to|for|about)\s+")
_COMPLETE_RE = re.compile(r"complete (.+)")
_DONE_WITH_RE = re.compile(r"done with (.+)")


def capitalize(value: str) -> str:
    """Uppercase the first character only."""
    return value[:1].upper() + value[1:]


def extract_title(command: str) -> str:
    """Everything after the last "reminder", minus a leading connector word."""
    tail = command.rsplit("reminder", 1)[-1].strip()
    # "reminders to ..." leaves a stray "s" behind the split.
    if tail.startswith("s "):
        tail = tail[2:]
    tail = _CONNECTOR_RE.sub("", tail).strip()
    return capitalize(tail) if tail else DEFAULT_TITLE


class ReminderHandler(BaseHandler):
    """Manages the household task list."""

    def __init__(self):
        super().__init__("reminders", "Reminders")

    def _interpret(self, state: HouseholdState, command: str) -> HandlerResult | None:
        if "add" in command and "reminder" in command:
            task = Task(title=extract_title(command))
            state.tasks.append(task)
            return HandlerResult(
                reply=f"Reminder added for {task.title}.",
                actions=[f"Created reminder: {task.title}"],
            )

        if "list" in command and "reminder" in command:
            if not state.tasks:
                return HandlerResult(reply="You have no reminders right now.")
            active = [task for task in state.tasks if not task.completed]
            if not active:
                return HandlerResult(reply="All of your reminders are complete.")
            summary = " ".join(f"• {task.title}" for task in active)
            return HandlerResult(reply=f"Here are your active reminders: {summary}")

        # Always answers, even when nothing matches the query.
        if "complete" in command or "done with" in command:
            match = _COMPLETE_RE.search(command) or _DONE_WITH_RE.search(command)
            if match:
                task = self._find_task(state, match.group(1).strip())
                if task:
                    task.completed = True
                    return HandlerResult(
                        reply=f"Marked {task.title} as complete.",
                        actions=[f"Completed reminder: {task.title}"],
                    )
            return HandlerResult(reply="I couldn't find a matching reminder to complete.")

        return None

    def summarize(self, state: HouseholdState) -> str:
        active = sum(1 for task in state.tasks if not task.completed)
        return f"Reminders: {active} active."

    @staticmethod
    def _find_task(state: HouseholdState, query: str) -> Task | None:
        query = query.lower()
        for task in state.tasks:
            if query in task.title.lower():
                return task
        return None
