"""Pydantic models for the simulated household.

Every model exposes ``snapshot()`` which rebuilds an independent copy field by
field. Responses handed to callers are always built from snapshots so nothing
outside the engine can reach the live state.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field


class ThermostatMode(str, Enum):
    COOL = "cool"
    HEAT = "heat"
    ECO = "eco"
    OFF = "off"


class SecurityMode(str, Enum):
    HOME = "home"
    AWAY = "away"


def clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


class Light(BaseModel):
    """A dimmable light in one room."""
    location: str
    on: bool = False
    brightness: int = Field(default=0, ge=0, le=100)

    def snapshot(self) -> "Light":
        return Light(location=self.location, on=self.on, brightness=self.brightness)


class Thermostat(BaseModel):
    """Single whole-house thermostat, Fahrenheit."""
    MIN_TEMP_F: ClassVar[int] = 55
    MAX_TEMP_F: ClassVar[int] = 85

    temperature: int = Field(default=72, ge=55, le=85)
    mode: ThermostatMode = ThermostatMode.ECO

    def snapshot(self) -> "Thermostat":
        return Thermostat(temperature=self.temperature, mode=self.mode)


class Music(BaseModel):
    """Speaker state. ``track`` is kept while paused."""
    playing: bool = False
    track: str | None = None
    volume: int = Field(default=45, ge=0, le=100)

    def snapshot(self) -> "Music":
        return Music(playing=self.playing, track=self.track, volume=self.volume)


class Security(BaseModel):
    armed: bool = False
    mode: SecurityMode = SecurityMode.HOME

    def snapshot(self) -> "Security":
        return Security(armed=self.armed, mode=self.mode)


class Task(BaseModel):
    """A reminder. Tasks are completed, never deleted."""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str
    completed: bool = False

    def snapshot(self) -> "Task":
        return Task(id=self.id, title=self.title, completed=self.completed)


def default_lights() -> dict[str, Light]:
    return {
        "living": Light(location="living room", brightness=40),
        "kitchen": Light(location="kitchen", brightness=50),
        "bedroom": Light(location="bedroom", brightness=25),
    }


class HouseholdState(BaseModel):
    """Root aggregate holding every domain of the household."""
    lights: dict[str, Light] = Field(default_factory=default_lights)
    thermostat: Thermostat = Field(default_factory=Thermostat)
    music: Music = Field(default_factory=Music)
    security: Security = Field(default_factory=Security)
    tasks: list[Task] = []
    # Serialized in camelCase for the conversational frontend.
    last_updated: datetime = Field(
        default_factory=datetime.now, serialization_alias="lastUpdated"
    )

    def snapshot(self) -> "HouseholdState":
        return HouseholdState(
            lights={key: light.snapshot() for key, light in self.lights.items()},
            thermostat=self.thermostat.snapshot(),
            music=self.music.snapshot(),
            security=self.security.snapshot(),
            tasks=[task.snapshot() for task in self.tasks],
            last_updated=self.last_updated,
        )
