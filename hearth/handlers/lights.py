"""Light handler: on/off, exact levels, dimming and brightening."""

import re

from hearth.handlers.base import BaseHandler
from hearth.models.command import HandlerResult
from hearth.models.household import HouseholdState, Light, clamp

# Phrase -> room key. Order matters: the first alias contained in the command
# wins, so "living" is checked before "living room" and "bedroom" before "bed".
LIGHT_ALIASES: dict[str, str] = {
    "living": "living",
    "living room": "living",
    "lounge": "living",
    "kitchen": "kitchen",
    "cook": "kitchen",
    "bedroom": "bedroom",
    "bed": "bedroom",
    "master": "bedroom",
}

BRIGHTNESS_STEP = 20
TURN_ON_FLOOR = 60

_PERCENT_RE = re.compile(r"(\d+)\s?%")
_PERCENT_WORD_RE = re.compile(r"(\d+)\s?(?:percent|brightness)")


def identify_room(command: str) -> str | None:
    """Return the room key of the first alias found in ``command``."""
    for alias, room_key in LIGHT_ALIASES.items():
        if alias in command:
            return room_key
    return None


def _requested_level(command: str) -> int | None:
    match = _PERCENT_RE.search(command) or _PERCENT_WORD_RE.search(command)
    if not match:
        return None
    return clamp(int(match.group(1)), 0, 100)


class LightHandler(BaseHandler):
    """Controls the per-room lights."""

    def __init__(self):
        super().__init__("lights", "Lighting")

    def _interpret(self, state: HouseholdState, command: str) -> HandlerResult | None:
        room_key = identify_room(command)
        target = state.lights.get(room_key) if room_key else None
        actions: list[str] = []

        if "turn on" in command or "switch on" in command:
            if target:
                target.on = True
                target.brightness = max(target.brightness, TURN_ON_FLOOR)
                actions.append(f"Turned on {target.location} lights")
                return HandlerResult(
                    reply=f"Turning on the {target.location} lights.", actions=actions
                )
            self._set_all(state, True, actions)
            return HandlerResult(reply="Turning on all configured lights.", actions=actions)

        if "turn off" in command or "switch off" in command:
            if target:
                target.on = False
                actions.append(f"Turned off {target.location} lights")
                return HandlerResult(
                    reply=f"Turning off the {target.location} lights.", actions=actions
                )
            self._set_all(state, False, actions)
            return HandlerResult(reply="Turning off every light in the home.", actions=actions)

        # An exact level without a room is ambiguous; fall through to the
        # relative intents below.
        level = _requested_level(command)
        if level is not None and target:
            target.brightness = level
            target.on = level > 0
            actions.append(f"Adjusted {target.location} brightness to {level}%")
            return HandlerResult(
                reply=f"Setting the {target.location} lights to {level}% brightness.",
                actions=actions,
            )

        if "dim" in command or "lower" in command:
            if target:
                target.brightness = clamp(target.brightness - BRIGHTNESS_STEP, 0, 100)
                target.on = target.brightness > 0
                actions.append(
                    f"Dimmed {target.location} lights to {target.brightness}% brightness"
                )
                return HandlerResult(
                    reply=f"Dimming the {target.location} lights.", actions=actions
                )
            self._adjust_all(state, -BRIGHTNESS_STEP, actions)
            return HandlerResult(reply="Dimming the house lights.", actions=actions)

        if "brighten" in command or "increase" in command:
            if target:
                target.brightness = clamp(target.brightness + BRIGHTNESS_STEP, 0, 100)
                target.on = True
                actions.append(
                    f"Brightened {target.location} lights to {target.brightness}% brightness"
                )
                return HandlerResult(
                    reply=f"Brightening the {target.location} lights.", actions=actions
                )
            self._adjust_all(state, BRIGHTNESS_STEP, actions)
            return HandlerResult(
                reply="Brightening the lights across the home.", actions=actions
            )

        if "status" in command and "light" in command:
            summary = "; ".join(
                f"{light.location}: {_on_off(light)} at {light.brightness}%"
                for light in state.lights.values()
            )
            return HandlerResult(reply=f"Here is the lighting summary: {summary}.")

        return None

    def summarize(self, state: HouseholdState) -> str:
        summary = "; ".join(
            f"{light.location} lights {_on_off(light)} at {light.brightness}%"
            for light in state.lights.values()
        )
        return f"Lighting: {summary}."

    @staticmethod
    def _set_all(state: HouseholdState, on: bool, actions: list[str]) -> None:
        for light in state.lights.values():
            light.on = on
            actions.append(f"{'Activated' if on else 'Deactivated'} {light.location} lights")

    @staticmethod
    def _adjust_all(state: HouseholdState, delta: int, actions: list[str]) -> None:
        for light in state.lights.values():
            light.brightness = clamp(light.brightness + delta, 0, 100)
            # Dimming leaves lights that are already off switched off.
            if light.on or delta > 0:
                light.on = light.brightness > 0
            actions.append(f"Set {light.location} brightness to {light.brightness}%")


def _on_off(light: Light) -> str:
    return "on" if light.on else "off"
