"""
GameSession - the single mutable aggregate for one Avoider session.

Holds score, lives and ammo, the player, the NPC and projectile collections,
the timers and both state enums. Created once at startup; reset() runs every
frame while the session sits in INIT.
"""

import random
from typing import Optional

from avoider.games.game_state import GameState, PlayState
from avoider.games.timer import Timer, TimerMode
from avoider.logging import get_logger

from games.Avoider.collection import EntityCollection
from games.Avoider.config import GameConsts
from games.Avoider.entities import Player, make_player

log = get_logger('session')

SHIELD_TIMER = 'shieldTimer'
GAME_CLOCK = 'gameClock'


class GameSession:
    """Everything the state machine reads and mutates.

    Attributes:
        consts: Immutable game constants
        state: Top-level GameState
        play_state: PlayState of the player while playing
        score: Points earned this game
        lives: Lives remaining (never negative)
        ammo: Bullets available (never negative)
        player: The one Player of this session
        projectiles: Bullets in flight
        npcs: Falling orbs and fire-ammo pickups
        shield_timer: Countdown for the post-revive/resume shield
        game_clock: Count-up clock shown in the HUD, restarted on every death
        play_time: Seconds spent in PLAY this game, drives the difficulty ramp
        npc_speed_multiplier: Difficulty ramp applied to NPC speeds
        rng: Random source for spawning

    Examples:
        >>> session = GameSession(GameConsts.from_env(), rng=random.Random(42))
        >>> session.state
        <GameState.INIT: 'init'>
        >>> session.lives
        5
    """

    def __init__(self, consts: GameConsts, rng: Optional[random.Random] = None):
        self.consts = consts
        self.rng = rng if rng is not None else random.Random()
        self.player: Player = make_player(consts)
        self.state = GameState.INIT
        self.play_state = PlayState.AVOID
        self.score = 0
        self._lives = consts.lives_start
        self._ammo = 0
        self.projectiles = EntityCollection()
        self.npcs = EntityCollection()
        self.shield_timer = Timer(SHIELD_TIMER, consts.shield_time, TimerMode.COUNTDOWN)
        self.game_clock = Timer(GAME_CLOCK, 0.0, TimerMode.COUNTUP)
        self.npc_speed_multiplier = 1.0
        self.play_time = 0.0
        self._next_ramp_at = consts.npc_speed_increase_interval

    @property
    def lives(self) -> int:
        return self._lives

    @lives.setter
    def lives(self, value: int) -> None:
        self._lives = max(0, int(value))

    @property
    def ammo(self) -> int:
        return self._ammo

    @ammo.setter
    def ammo(self, value: int) -> None:
        self._ammo = max(0, int(value))

    @property
    def play_state(self) -> PlayState:
        return self._play_state

    @play_state.setter
    def play_state(self, value: PlayState) -> None:
        # The player sprite frame follows the play state
        self._play_state = value
        self.player.body.animation_state = value.value

    def add_score(self, points: int) -> None:
        self.score += points

    def lose_life(self) -> None:
        self.lives = self._lives - 1

    def add_ammo(self, amount: int) -> None:
        self.ammo = self._ammo + amount

    def spend_ammo(self) -> bool:
        """Use one bullet. Returns False (and changes nothing) when empty."""
        if self._ammo <= 0:
            return False
        self._ammo -= 1
        return True

    def start_shield(self) -> None:
        """Enter SHIELD and restart the shield countdown."""
        self.play_state = PlayState.SHIELD
        self.shield_timer.reset(self.consts.shield_time, TimerMode.COUNTDOWN, False)

    def tick_clock(self, delta: float) -> None:
        """Advance the game clock and apply the difficulty ramp."""
        if not self.game_clock.active:
            self.game_clock.start()
        self.game_clock.update(delta)
        self.play_time += delta
        amount = self.consts.npc_speed_increase_amount
        if amount <= 0:
            return
        while self.play_time >= self._next_ramp_at:
            self.npc_speed_multiplier += amount
            self._next_ramp_at += self.consts.npc_speed_increase_interval
            log.debug("NPC speed multiplier now %.2f", self.npc_speed_multiplier)

    def restart_clock(self) -> None:
        """Zero the HUD clock. It starts again on the next PLAY frame."""
        # start() zeroes elapsed time
        self.game_clock.start()
        self.game_clock.stop()

    def clear_entities(self) -> None:
        self.npcs.clear()
        self.projectiles.clear()

    def reset(self) -> None:
        """Start a fresh game: full lives, nothing on screen."""
        self.score = 0
        self.lives = self.consts.lives_start
        self.ammo = 0
        self.clear_entities()
        self.play_state = PlayState.AVOID
        self.shield_timer.stop()
        self.player.cooldown.stop()
        self.restart_clock()
        self.npc_speed_multiplier = 1.0
        self.play_time = 0.0
        self._next_ramp_at = self.consts.npc_speed_increase_interval

    def __repr__(self) -> str:
        return (f"GameSession(state={self.state.value}, play_state={self.play_state.name}, "
                f"score={self.score}, lives={self.lives}, ammo={self.ammo}, "
                f"npcs={len(self.npcs)}, projectiles={len(self.projectiles)})")
