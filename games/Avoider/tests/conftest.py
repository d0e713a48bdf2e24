"""Pytest fixtures for the Avoider game tests."""
import random
from types import SimpleNamespace

import pytest

from avoider import logging as avoider_logging
from avoider.games.game_state import GameState
from avoider.games.input.input_event import InputEvent, InputEventType
from avoider.games.input.input_state import InputState
from avoider.logging import LogLevel
from games.Avoider.config import GameConsts
from games.Avoider.entities import FIRE_AMMO, ORB, make_npc
from games.Avoider.session import GameSession
from games.Avoider.sounds import RecordingAudio

# Spawn chance so small nothing appears unless a test asks for it
NEVER = 10 ** 9


@pytest.fixture
def consts():
    """Default constants with random spawning and the speed ramp switched off."""
    return GameConsts.from_env(
        orb_spawn_ratio=NEVER,
        ammo_spawn_ratio=NEVER,
        npc_speed_increase_amount=0.0,
        show_bounding_boxes=False,
        audio_enabled=False,
    )


@pytest.fixture
def session(consts):
    """Fresh session in INIT with a seeded random source."""
    return GameSession(consts, rng=random.Random(1234))


@pytest.fixture
def playing(session):
    """Session already in PLAY, player in the middle of the field."""
    session.reset()
    session.state = GameState.PLAY
    session.player.body.move_to(425.0, 400.0)
    session.player.body.hold_position()
    return session


@pytest.fixture
def inputs():
    return InputState()


@pytest.fixture
def audio():
    return RecordingAudio()


def _press(inputs: InputState, code: str) -> None:
    inputs.apply(InputEvent(InputEventType.KEY_DOWN, code=code))


def _release(inputs: InputState, code: str) -> None:
    inputs.apply(InputEvent(InputEventType.KEY_UP, code=code))


@pytest.fixture
def keys():
    """Key helpers: keys.press(inputs, code) and keys.release(inputs, code)."""
    return SimpleNamespace(press=_press, release=_release)


@pytest.fixture
def npcs(consts):
    """NPC factories: npcs.orb(x, y) and npcs.ammo(x, y)."""
    return SimpleNamespace(
        orb=lambda x, y: make_npc(consts.sprite(ORB), x, y),
        ammo=lambda x, y: make_npc(consts.sprite(FIRE_AMMO), x, y),
    )


@pytest.fixture(autouse=True)
def log_at_info(monkeypatch):
    """Pin logging to INFO so warnings show up in captured output."""
    monkeypatch.setitem(avoider_logging._config, 'default_level', LogLevel.INFO)
    monkeypatch.setitem(avoider_logging._config, 'module_levels', {})
