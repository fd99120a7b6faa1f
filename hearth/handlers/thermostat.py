"""Thermostat handler: target temperature and mode."""

import re

from hearth.handlers.base import BaseHandler
from hearth.models.command import HandlerResult
from hearth.models.household import HouseholdState, Thermostat, ThermostatMode, clamp

# Any two consecutive digits count as a target temperature.
_TEMPERATURE_RE = re.compile(r"(\d{2})(?:\s?degrees|°)?")


class ThermostatHandler(BaseHandler):
    """Controls the whole-house thermostat."""

    def __init__(self):
        super().__init__("thermostat", "Thermostat")

    def _interpret(self, state: HouseholdState, command: str) -> HandlerResult | None:
        thermostat = state.thermostat

        # A number wins over any mode keyword in the same utterance.
        match = _TEMPERATURE_RE.search(command)
        if match:
            target = clamp(int(match.group(1)), Thermostat.MIN_TEMP_F, Thermostat.MAX_TEMP_F)
            thermostat.temperature = target
            return HandlerResult(
                reply=f"Setting the thermostat to {target} degrees Fahrenheit.",
                actions=[f"Set thermostat to {target}°F"],
            )

        if "cool" in command or "ac" in command:
            thermostat.mode = ThermostatMode.COOL
            return HandlerResult(
                reply="Switching the thermostat to cooling mode.",
                actions=["Thermostat set to cooling mode"],
            )

        if "heat" in command or "heating" in command:
            thermostat.mode = ThermostatMode.HEAT
            return HandlerResult(
                reply="Switching the thermostat to heating mode.",
                actions=["Thermostat set to heating mode"],
            )

        if "eco" in command or "energy saver" in command:
            thermostat.mode = ThermostatMode.ECO
            return HandlerResult(
                reply="Thermostat is now in eco mode.",
                actions=["Thermostat set to eco mode"],
            )

        if "turn off" in command and "thermostat" in command:
            thermostat.mode = ThermostatMode.OFF
            return HandlerResult(
                reply="Turning the thermostat off.",
                actions=["Thermostat turned off"],
            )

        if "temperature" in command or "thermostat" in command:
            return HandlerResult(
                reply=(
                    f"The thermostat is set to {thermostat.temperature} degrees "
                    f"in {thermostat.mode.value} mode."
                )
            )

        return None

    def summarize(self, state: HouseholdState) -> str:
        thermostat = state.thermostat
        return f"Thermostat: {thermostat.temperature}°F in {thermostat.mode.value} mode."
