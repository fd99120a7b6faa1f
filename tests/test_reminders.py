import uuid

import pytest

from hearth.handlers.reminders import ReminderHandler, capitalize, extract_title


@pytest.fixture
def handler():
    return ReminderHandler()


def test_capitalize_only_first_letter():
    assert capitalize("water the PLANTS") == "Water the PLANTS"
    assert capitalize("") == ""


@pytest.mark.parametrize(
    "command, title",
    [
        ("add a reminder to water the plants", "Water the plants"),
        ("add reminder call mom", "Call mom"),
        ("add a reminder about the reminder letters", "Letters"),
        ("add a reminder", "General task"),
    ],
)
def test_extract_title(command, title):
    assert extract_title(command) == title


def test_add_reminder(handler, state):
    result = handler.handle(state, "add a reminder to water the plants")

    assert result.reply == "Reminder added for Water the plants."
    assert result.actions == ["Created reminder: Water the plants"]
    assert len(state.tasks) == 1
    task = state.tasks[0]
    assert task.title == "Water the plants"
    assert task.completed is False
    uuid.UUID(task.id)


def test_ids_are_unique(handler, state):
    handler.handle(state, "add a reminder to water the plants")
    handler.handle(state, "add a reminder to water the plants")
    assert state.tasks[0].id != state.tasks[1].id


def test_list_without_reminders(handler, state):
    result = handler.handle(state, "list my reminders")
    assert result.reply == "You have no reminders right now."


def test_list_shows_only_incomplete(handler, state):
    handler.handle(state, "add a reminder to water the plants")
    handler.handle(state, "add a reminder to call mom")
    handler.handle(state, "complete water the plants")

    result = handler.handle(state, "list my reminders")

    assert result.reply == "Here are your active reminders: • Call mom"
    assert result.actions == []


def test_list_when_everything_is_done(handler, state):
    handler.handle(state, "add a reminder to call mom")
    handler.handle(state, "done with call")
    assert handler.handle(state, "list reminders").reply == "All of your reminders are complete."


def test_complete_marks_first_match(handler, state):
    handler.handle(state, "add a reminder to water the plants")
    handler.handle(state, "add a reminder to water the lawn")

    result = handler.handle(state, "complete water the")

    assert result.reply == "Marked Water the plants as complete."
    assert result.actions == ["Completed reminder: Water the plants"]
    assert [task.completed for task in state.tasks] == [True, False]


def test_done_with_is_case_insensitive(handler, state):
    handler.handle(state, "add a reminder to call mom")
    handler.handle(state, "i'm done with CALL".lower())
    assert state.tasks[0].completed is True


def test_complete_without_match_still_answers(handler, state):
    result = handler.handle(state, "complete the taxes")
    assert result.reply == "I couldn't find a matching reminder to complete."
    assert result.actions == []


def test_unrelated_command_is_declined(handler, state):
    assert handler.handle(state, "play some jazz") is None
