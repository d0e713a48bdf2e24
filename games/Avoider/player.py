"""
Player behavior: shooting, keeping on screen, per-frame update.

The player's position itself is driven by the pointer (see controller);
these functions handle what happens once it is there.
"""

from avoider.games.game_state import PlayState
from avoider.games.input.input_state import InputState
from avoider.games.timer import TimerMode
from avoider.logging import get_logger

from games.Avoider import sounds
from games.Avoider.config import GameConsts
from games.Avoider.entities import Entity, Player, make_projectile
from games.Avoider.session import GameSession
from games.Avoider.sounds import SoundPlayer

log = get_logger('player')


def fire_requested(inputs: InputState, consts: GameConsts) -> bool:
    """Fire input this frame: pointer held, or play key newly pressed."""
    return inputs.pointer_down or inputs.is_key_pressed(consts.play_key)


def try_shoot(player: Player, session: GameSession, inputs: InputState,
              audio: SoundPlayer) -> bool:
    """Fire one bullet if the player is allowed to.

    Checks, in order: play state is SHOOT; ammo left (running dry drops the
    player back to AVOID); cooldown finished; fire input present.

    Returns:
        True if a bullet was spawned
    """
    if session.play_state is not PlayState.SHOOT:
        return False
    if session.ammo <= 0:
        session.play_state = PlayState.AVOID
        return False
    if player.cooldown.active:
        return False
    if not fire_requested(inputs, session.consts):
        return False

    consts = session.consts
    bullet_def = consts.sprite('bullet')
    body = player.body
    y = body.pos_y - body.half_height - consts.bullet_spawn_gap - bullet_def.height / 2
    session.projectiles.add(make_projectile(bullet_def, body.pos_x, y))
    session.spend_ammo()
    player.cooldown.reset(consts.shoot_cooldown, TimerMode.COUNTDOWN, False)
    audio.play_sound(sounds.SHOOT)
    log.debug("Shot fired at (%.1f, %.1f), ammo left %d", body.pos_x, y, session.ammo)
    return True


def enforce_bounds(body: Entity, consts: GameConsts) -> None:
    """Clamp the body so its whole box stays inside the play field.

    The play field is [0, width] x [hud_buffer, height]. Idempotent.
    """
    min_x = body.half_width
    max_x = consts.screen_width - body.half_width
    min_y = consts.hud_buffer + body.half_height
    max_y = consts.screen_height - body.half_height
    body.pos_x = min(max(body.pos_x, min_x), max_x)
    body.pos_y = min(max(body.pos_y, min_y), max_y)


def update_player(player: Player, session: GameSession, inputs: InputState,
                  audio: SoundPlayer, delta: float) -> None:
    """One PLAY frame for the player: cooldown tick, bounds clamp, shoot attempt."""
    player.cooldown.update(delta)
    enforce_bounds(player.body, session.consts)
    try_shoot(player, session, inputs, audio)
