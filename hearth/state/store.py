"""In-memory household state store.

Holds the single live ``HouseholdState`` for the process. Handlers receive
the live object and mutate it in place; everything leaving the engine goes
through ``snapshot()``. Nothing is persisted, a restart starts from defaults.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from hearth.models.household import (
    HouseholdState,
    Light,
    Music,
    Security,
    Thermostat,
)

logger = logging.getLogger(__name__)


class HouseholdConfigError(Exception):
    """Raised when the household defaults file cannot be used."""


def parse_household_config(config: dict[str, Any]) -> HouseholdState:
    """Build a default ``HouseholdState`` from a parsed YAML mapping.

    Sections that are missing fall back to the model defaults.
    """
    if not isinstance(config, dict):
        raise HouseholdConfigError("Household config must be a mapping")

    state = HouseholdState()
    try:
        lights = config.get("lights")
        if lights:
            state.lights = {
                room_key: Light(**room_data)
                for room_key, room_data in lights.items()
            }
        if "thermostat" in config:
            state.thermostat = Thermostat(**(config["thermostat"] or {}))
        if "music" in config:
            state.music = Music(**(config["music"] or {}))
        if "security" in config:
            state.security = Security(**(config["security"] or {}))
    except (ValidationError, TypeError, AttributeError) as e:
        raise HouseholdConfigError(f"Invalid household config: {e}") from e
    return state


class StateStore:
    """Owns the canonical household state."""

    def __init__(self, defaults: HouseholdState | None = None):
        self._defaults = defaults.snapshot() if defaults else HouseholdState()
        self._state = self._defaults.snapshot()

    @property
    def state(self) -> HouseholdState:
        """The live state. Only handlers and the dispatcher should mutate it."""
        return self._state

    @property
    def defaults(self) -> HouseholdState:
        return self._defaults.snapshot()

    def snapshot(self) -> HouseholdState:
        return self._state.snapshot()

    def touch(self) -> datetime:
        self._state.last_updated = datetime.now()
        return self._state.last_updated

    def reset(self) -> None:
        """Restore the default household. Tasks are emptied."""
        self._state = self._defaults.snapshot()
        self._state.tasks = []
        logger.info("Household state reset to defaults")

    def load_defaults_from_yaml(self, config_path: str) -> None:
        """Load default household definitions from YAML and apply them."""
        path = Path(config_path)
        if not path.exists():
            logger.error(f"Household config not found: {config_path}")
            return

        try:
            with open(path) as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise HouseholdConfigError(f"Could not read {config_path}: {e}") from e

        self._defaults = parse_household_config(config)
        self._state = self._defaults.snapshot()
        logger.info(
            f"Loaded household defaults from {config_path} "
            f"({len(self._defaults.lights)} lights)"
        )
