"""Game and play state enums for Avoider.

The two enums are orthogonal: GameState is the top-level mode of a session,
PlayState is the player's sub-state while a round is running. Both are
closed sets; handlers dispatch on them explicitly.
"""
from enum import Enum


class GameState(Enum):
    """Top-level session states.

    States:
        INIT: Splash screen. The session is reset every frame until the
            play key is pressed.
        PLAY: Active gameplay.
        PAUSE: Gameplay frozen. The pause key resumes with a shield,
            the reset key returns to INIT.
        WIN: Game ended in victory. Nothing transitions here yet; the
            reset key returns to INIT.
        LOSE: The player was hit. The reset key either revives (lives
            left) or returns to INIT (no lives left).

    Usage:
        from avoider.games.game_state import GameState

        if session.state is GameState.PLAY:
            ...
    """
    INIT = "init"
    PLAY = "play"
    PAUSE = "pause"
    WIN = "win"
    LOSE = "lose"


class PlayState(Enum):
    """Player sub-states during PLAY.

    The value doubles as the player sprite sheet frame index.

    States:
        AVOID: No ammo, dodge only.
        SHIELD: Invulnerable for a few seconds after resume or revive.
        SHOOT: Has ammo, fire input spawns bullets.
        SUPER: Reserved power-up state.
        DEATH: Hit by a hazard.
    """
    AVOID = 0
    SHIELD = 1
    SHOOT = 2
    SUPER = 3
    DEATH = 4
