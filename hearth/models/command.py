"""Pydantic models for command handling results."""

from datetime import datetime

from pydantic import BaseModel, Field

from hearth.models.household import HouseholdState


class HandlerResult(BaseModel):
    """What a handler returns when it claims a command."""
    reply: str
    actions: list[str] = []


class CommandResponse(BaseModel):
    """Result of a single processed command."""
    reply: str
    actions: list[str] = []
    state: HouseholdState


class CommandRecord(BaseModel):
    """An entry in the dispatcher's command history."""
    command: str
    handled_by: str
    reply: str
    action_count: int = 0
    timestamp: datetime = Field(default_factory=datetime.now)
