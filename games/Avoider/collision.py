"""
Axis-aligned collision detection between entities.

Hitboxes are the entity's box shrunk by its collision margin on every side
(and optionally scaled). Overlap is strict: boxes that only touch do not
collide.
"""

from typing import Iterable, Optional

from avoider.logging import get_logger
from models import Hitbox

from games.Avoider.entities import Entity

log = get_logger('collision')


def hitbox(entity: Entity, scale: float = 1.0, margin: Optional[float] = None) -> Hitbox:
    """Compute an entity's margin-adjusted hitbox.

    Args:
        entity: The entity
        scale: Multiplier applied to the half extents before the margin
        margin: Pixels removed from each side (default: entity.collision_margin)

    Returns:
        Hitbox centered on the entity. Half extents never go below zero.
    """
    if margin is None:
        margin = entity.collision_margin
    half_w = max(0.0, entity.half_width * scale - margin)
    half_h = max(0.0, entity.half_height * scale - margin)
    return Hitbox(
        left=entity.pos_x - half_w,
        top=entity.pos_y - half_h,
        right=entity.pos_x + half_w,
        bottom=entity.pos_y + half_h,
    )


def overlaps(a: Entity, b: Entity) -> bool:
    """True if the two entities' hitboxes overlap. Symmetric.

    Anything that isn't an Entity never collides.
    """
    if not isinstance(a, Entity) or not isinstance(b, Entity):
        log.debug("overlaps() called with non-entities: %s, %s",
                  type(a).__name__, type(b).__name__)
        return False
    return hitbox(a).overlaps(hitbox(b))


def overlaps_any(candidate: Entity, others: Iterable[Entity]) -> bool:
    """True if candidate overlaps any entity in others (itself excluded)."""
    if others is None:
        return False
    for other in others:
        if other is not candidate and overlaps(candidate, other):
            return True
    return False
