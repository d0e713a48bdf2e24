"""
Avoider game state machine.

update_game_states() runs once per fixed step and dispatches on the session's
GameState:

    INIT  --play key-->            PLAY
    PLAY  --pause key (no shield)--> PAUSE
    PLAY  --hit by orb-->          LOSE
    PAUSE --pause key-->           PLAY (shielded)
    PAUSE --reset key-->           INIT
    LOSE  --reset key, lives left--> PLAY (shielded)
    LOSE  --reset key, no lives-->   INIT
    WIN   --reset key-->           INIT

Nothing currently leads into WIN.
"""

from typing import Callable, Dict

from avoider.games.game_state import GameState, PlayState
from avoider.games.input.input_state import InputState
from avoider.logging import get_logger

from games.Avoider.entities import advance
from games.Avoider.hits import resolve_player_hits, resolve_projectile_hits
from games.Avoider.player import update_player
from games.Avoider.session import GameSession
from games.Avoider.sounds import SoundPlayer
from games.Avoider.spawner import update_npcs

log = get_logger('state_machine')

_warned_states = set()


def update_projectiles(session: GameSession, delta: float) -> int:
    """Move bullets up and drop the ones that left the play field.

    A bullet is gone once its bottom edge is above the HUD strip.

    Returns:
        Number of bullets removed
    """
    top = session.consts.hud_buffer
    for projectile in session.projectiles:
        advance(projectile, delta)
        if projectile.pos_y + projectile.half_height < top:
            projectile.kill()
    return session.projectiles.remove_dead()


def handle_init(session: GameSession, inputs: InputState, audio: SoundPlayer, delta: float) -> None:
    session.reset()
    if inputs.is_key_pressed(session.consts.play_key):
        session.state = GameState.PLAY
        log.info("Game started")


def handle_play(session: GameSession, inputs: InputState, audio: SoundPlayer, delta: float) -> None:
    consts = session.consts
    player = session.player

    if inputs.is_key_pressed(consts.pause_key) and session.play_state is not PlayState.SHIELD:
        player.body.hold_position()
        session.state = GameState.PAUSE
        log.info("Game paused")
        return

    session.tick_clock(delta)

    update_player(player, session, inputs, audio, delta)

    if session.shield_timer.update(delta):
        session.play_state = PlayState.AVOID
        log.debug("Shield expired")

    update_npcs(session.npcs, consts, delta, session.rng, session.npc_speed_multiplier)
    update_projectiles(session, delta)
    resolve_projectile_hits(session, audio)

    if session.play_state is not PlayState.SHIELD:
        resolve_player_hits(session, audio)
    # Snapshot every frame: a safe or shielded position for pause, the
    # death position when just hit
    player.body.hold_position()


def handle_pause(session: GameSession, inputs: InputState, audio: SoundPlayer, delta: float) -> None:
    consts = session.consts
    # Reset wins over a resume pressed on the same frame
    if inputs.is_key_down(consts.reset_key):
        session.state = GameState.INIT
        log.info("Game abandoned from pause")
        return
    if inputs.is_key_pressed(consts.pause_key):
        session.player.body.restore_held_position()
        session.start_shield()
        session.state = GameState.PLAY
        log.info("Game resumed")


def handle_win(session: GameSession, inputs: InputState, audio: SoundPlayer, delta: float) -> None:
    if inputs.is_key_down(session.consts.reset_key):
        session.state = GameState.INIT


def handle_lose(session: GameSession, inputs: InputState, audio: SoundPlayer, delta: float) -> None:
    session.player.body.restore_held_position()
    # The HUD clock shows time since the last (re)spawn
    session.restart_clock()
    if not inputs.is_key_down(session.consts.reset_key):
        return

    if session.lives <= 0:
        session.state = GameState.INIT
        log.info("Game over, final score %d", session.score)
        return

    session.ammo = 0
    session.clear_entities()
    session.state = GameState.PLAY
    session.start_shield()
    log.info("Revived with %d lives", session.lives)


STATE_HANDLERS: Dict[GameState, Callable[[GameSession, InputState, SoundPlayer, float], None]] = {
    GameState.INIT: handle_init,
    GameState.PLAY: handle_play,
    GameState.PAUSE: handle_pause,
    GameState.WIN: handle_win,
    GameState.LOSE: handle_lose,
}


def update_game_states(session: GameSession, inputs: InputState, audio: SoundPlayer,
                       delta: float) -> None:
    """Advance the session by one step.

    Args:
        session: The game session to mutate
        inputs: Input state for this frame
        audio: Where sound effects go
        delta: Seconds for this step (non-negative)

    Raises:
        ValueError: If delta is negative
    """
    if delta < 0:
        raise ValueError(f"delta must be non-negative, got {delta}")

    handler = STATE_HANDLERS.get(session.state)
    if handler is None:
        if session.state not in _warned_states:
            _warned_states.add(session.state)
            log.debug("No handler for state %r, skipping", session.state)
        return
    handler(session, inputs, audio, delta)
