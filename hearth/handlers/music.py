"""Music handler: playback, volume and now-playing queries."""

import re

from hearth.handlers.base import BaseHandler
from hearth.models.command import HandlerResult
from hearth.models.household import HouseholdState, clamp

VOLUME_STEP = 10
DEFAULT_TRACK = "playlist"

_PLAY_RE = re.compile(r"play (.+)")


def extract_track(command: str) -> str:
    """Pull the track name out of a "play ..." command."""
    match = _PLAY_RE.search(command)
    if not match:
        return DEFAULT_TRACK
    track = match.group(1).replace("music", "", 1).strip()
    return track or DEFAULT_TRACK


class MusicHandler(BaseHandler):
    """Controls the whole-home speakers."""

    def __init__(self):
        super().__init__("music", "Music")

    def _interpret(self, state: HouseholdState, command: str) -> HandlerResult | None:
        music = state.music

        # "what's playing" contains "play", so queries are matched first.
        if "music status" in command or "what's playing" in command:
            if not music.playing or not music.track:
                return HandlerResult(reply="Nothing is currently playing.")
            return HandlerResult(
                reply=f"Currently playing {music.track} at {music.volume}% volume."
            )

        if "play" in command:
            track = extract_track(command)
            music.playing = True
            music.track = track
            return HandlerResult(
                reply=f"Starting {track} on the smart speakers.",
                actions=[f"Now playing {track}"],
            )

        if "pause" in command or "stop" in command:
            # The track is kept so the speakers remember what was on.
            music.playing = False
            reply = (
                f"Pausing {music.track}."
                if music.track
                else "Pausing playback on the smart speakers."
            )
            return HandlerResult(reply=reply, actions=["Paused the speakers"])

        if "skip" in command:
            return HandlerResult(
                reply="Skipping to the next track.",
                actions=["Skipped to the next track"],
            )

        if "volume up" in command or "louder" in command:
            music.volume = clamp(music.volume + VOLUME_STEP, 0, 100)
            return HandlerResult(
                reply="Turning the music up.",
                actions=[f"Increased speaker volume to {music.volume}%"],
            )

        if "volume down" in command or "quieter" in command:
            music.volume = clamp(music.volume - VOLUME_STEP, 0, 100)
            return HandlerResult(
                reply="Lowering the music volume.",
                actions=[f"Lowered speaker volume to {music.volume}%"],
            )

        return None

    def summarize(self, state: HouseholdState) -> str:
        music = state.music
        if music.playing:
            return f"Music: Playing {music.track} at {music.volume}%."
        return "Music: Idle."
