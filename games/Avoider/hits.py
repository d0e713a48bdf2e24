"""
Hit resolution: bullets against NPCs, and the player against NPCs.
"""

from avoider.games.game_state import GameState, PlayState
from avoider.logging import get_logger

from games.Avoider import sounds
from games.Avoider.collision import overlaps
from games.Avoider.session import GameSession
from games.Avoider.sounds import SoundPlayer

log = get_logger('hits')


def resolve_projectile_hits(session: GameSession, audio: SoundPlayer) -> int:
    """Match every bullet against the NPCs.

    A bullet destroys at most one NPC. Both are removed, the hit sound plays
    and the score goes up. Any NPC counts, pickups included.

    Returns:
        Number of hits this frame
    """
    hits = 0
    for projectile in session.projectiles:
        for npc in session.npcs:
            if not npc.alive:
                continue
            if overlaps(projectile, npc):
                audio.play_sound(sounds.HIT)
                projectile.kill()
                npc.kill()
                session.add_score(session.consts.score_increase)
                hits += 1
                break
    if hits:
        session.projectiles.remove_dead()
        session.npcs.remove_dead()
        log.debug("%d projectile hit(s), score %d", hits, session.score)
    return hits


def resolve_player_hits(session: GameSession, audio: SoundPlayer) -> bool:
    """Check the player against every NPC.

    Fire-ammo is collected (ammo up, SHOOT). A hazard costs a life, ends the
    round (DEATH / LOSE) and stops the scan.

    Returns:
        True if the player is still safe, False if hit by a hazard
    """
    body = session.player.body
    for npc in session.npcs:
        if not overlaps(body, npc):
            continue
        session.npcs.remove(npc)
        if npc.is_pickup:
            audio.play_sound(sounds.GET)
            session.add_ammo(session.consts.ammo_amount)
            session.play_state = PlayState.SHOOT
            log.debug("Picked up %s, ammo %d", npc.name, session.ammo)
            continue

        audio.play_sound(sounds.HURT)
        session.lose_life()
        session.play_state = PlayState.DEATH
        session.state = GameState.LOSE
        log.info("Player hit by %s, %d lives left", npc.name, session.lives)
        return False
    return True
