"""
Sound names and the audio collaborator the game core talks to.

The core only ever calls play_sound(name); assets.AudioPlayer implements it
with pygame, NullAudio and RecordingAudio stand in for headless runs.
"""

from typing import List, Protocol


HIT = 'hit'      # bullet hits an orb
GET = 'get'      # player catches fire-ammo
HURT = 'hurt'    # player hit by an orb
SHOOT = 'shoot'  # bullet fired

ALL_SOUNDS = (HIT, GET, HURT, SHOOT)


class SoundPlayer(Protocol):
    """Anything that can play a named sound, fire and forget."""

    def play_sound(self, name: str) -> None:
        ...


class NullAudio:
    """Plays nothing."""

    def play_sound(self, name: str) -> None:
        pass


class RecordingAudio:
    """Remembers every sound requested, in order. Used by tests and replays."""

    def __init__(self):
        self.played: List[str] = []

    def play_sound(self, name: str) -> None:
        self.played.append(name)

    def count(self, name: str) -> int:
        return self.played.count(name)

    def clear(self) -> None:
        self.played.clear()
