"""
NPC spawning, movement and culling.

Each PLAY frame the spawner independently rolls for a new orb and a new
fire-ammo pickup, moves every NPC down and drops the ones that fell off the
bottom of the screen. Candidate spawn positions that overlap an existing NPC
are re-rolled a few times in a lane that narrows with every retry.
"""

import random
from typing import Optional

from avoider.logging import get_logger

from games.Avoider.collection import EntityCollection
from games.Avoider.collision import overlaps_any
from games.Avoider.config import GameConsts, SpriteDef
from games.Avoider.entities import Entity, FIRE_AMMO, ORB, advance, make_npc

log = get_logger('spawner')


def should_spawn(rng: random.Random, ratio: int) -> bool:
    """Roll a 1-in-ratio chance."""
    return rng.randrange(ratio) == 0


def spawn_range(consts: GameConsts, attempt: int = 0) -> tuple:
    """X range for a spawn attempt.

    Attempt 0 uses the full lane [left buffer, width - right buffer]; retry k
    scales both buffers by k + 1 so the lane narrows every retry. An inverted
    range collapses to its midpoint.
    """
    k = attempt + 1
    low = consts.spawn_buffer_left * k
    high = consts.screen_width - consts.spawn_buffer_right * k
    if low > high:
        mid = (low + high) / 2
        return (mid, mid)
    return (low, high)


def place_npc(sprite: SpriteDef, npcs: EntityCollection, consts: GameConsts,
              rng: random.Random) -> Entity:
    """Create an NPC at a spawn position, avoiding existing NPCs if possible.

    The last candidate is accepted even if it still overlaps.
    """
    npc = None
    for attempt in range(consts.spawn_retries + 1):
        low, high = spawn_range(consts, attempt)
        x = rng.uniform(low, high)
        npc = make_npc(sprite, x, consts.spawn_y)
        if not overlaps_any(npc, npcs):
            break
        log.trace("Spawn of %s at x=%.1f overlaps, retry %d", sprite.name, x, attempt + 1)
    return npc


def spawn_npcs(npcs: EntityCollection, consts: GameConsts, rng: random.Random) -> int:
    """Roll for an orb and a fire-ammo pickup. Returns how many spawned."""
    spawned = 0
    for name, ratio in ((ORB, consts.orb_spawn_ratio), (FIRE_AMMO, consts.ammo_spawn_ratio)):
        if should_spawn(rng, ratio):
            npc = place_npc(consts.sprite(name), npcs, consts, rng)
            npcs.add(npc)
            spawned += 1
            log.trace("Spawned %s at (%.1f, %.1f)", npc.name, npc.pos_x, npc.pos_y)
    return spawned


def advance_npcs(npcs: EntityCollection, delta: float, multiplier: float = 1.0) -> None:
    for npc in npcs:
        advance(npc, delta, multiplier)


def cull_npcs(npcs: EntityCollection, consts: GameConsts) -> int:
    """Remove NPCs that are dead or below the bottom cull line."""
    limit = consts.screen_height + consts.npc_cull_margin
    for npc in npcs:
        if npc.pos_y > limit:
            npc.kill()
    return npcs.remove_dead()


def update_npcs(npcs: EntityCollection, consts: GameConsts, delta: float,
                rng: Optional[random.Random] = None, multiplier: float = 1.0) -> None:
    """One frame of NPC handling: spawn, move, cull."""
    if rng is None:
        rng = random.Random()
    spawn_npcs(npcs, consts, rng)
    advance_npcs(npcs, delta, multiplier)
    removed = cull_npcs(npcs, consts)
    if removed:
        log.trace("Culled %d NPCs, %d remain", removed, len(npcs))
