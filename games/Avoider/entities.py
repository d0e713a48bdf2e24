"""
Game entities for Avoider.

Every on-screen object is one Entity tagged with an EntityKind. Behavior that
differs per kind lives in free functions (advance(), the spawner, the player
module) that dispatch on the tag instead of in a class hierarchy.

Classes:
    EntityKind: PLAYER, PROJECTILE, NPC or BACKDROP
    Entity: Position, size, speed and state of one object
    Player: The player's body plus its shoot cooldown

Functions:
    make_player, make_npc, make_projectile, make_backdrop: Factories
    advance: Move an entity along its kind's direction
"""

from dataclasses import dataclass, field
from enum import Enum

from avoider.games.timer import Timer
from avoider.logging import get_logger
from models import Point2D

from games.Avoider.config import GameConsts, SpriteDef

log = get_logger('entities')


class EntityKind(Enum):
    """What an entity is, which decides how it moves."""
    PLAYER = "player"
    PROJECTILE = "projectile"  # moves up
    NPC = "npc"                # moves down
    BACKDROP = "backdrop"      # never moves


# NPC names
ORB = 'orb'
FIRE_AMMO = 'fireAmmo'
HAZARD_NAMES = frozenset({ORB})
PICKUP_NAMES = frozenset({FIRE_AMMO})

SHOOT_COOLDOWN_TIMER = 'shootCooldownTimer'


@dataclass
class Entity:
    """A single game object. Position is the center point.

    Attributes:
        name: Sprite name ('orb', 'fireAmmo', 'bullet', 'player', ...)
        kind: EntityKind tag
        width: Width in pixels (>= 0)
        height: Height in pixels (>= 0)
        pos_x: Center x
        pos_y: Center y
        speed: Pixels per second along the kind's direction
        collision_margin: Pixels shaved off each side of the hitbox (>= 0)
        animation_state: Sprite sheet frame index
        alive: False marks the entity for removal
        held_x: Snapshot x used while paused or dead
        held_y: Snapshot y used while paused or dead

    Raises:
        ValueError: If width, height or collision_margin is negative
    """
    name: str
    kind: EntityKind
    width: float
    height: float
    pos_x: float = 0.0
    pos_y: float = 0.0
    speed: float = 0.0
    collision_margin: float = 0.0
    animation_state: int = 0
    alive: bool = True
    held_x: float = 0.0
    held_y: float = 0.0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Entity '{self.name}' size must be non-negative, got {self.width}x{self.height}"
            )
        if self.collision_margin < 0:
            raise ValueError(
                f"Entity '{self.name}' collision margin must be non-negative, "
                f"got {self.collision_margin}"
            )

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    @property
    def position(self) -> Point2D:
        return Point2D(x=self.pos_x, y=self.pos_y)

    @property
    def held_position(self) -> Point2D:
        return Point2D(x=self.held_x, y=self.held_y)

    def move_to(self, x: float, y: float) -> None:
        self.pos_x = x
        self.pos_y = y

    def hold_position(self) -> None:
        """Snapshot the current position."""
        self.held_x = self.pos_x
        self.held_y = self.pos_y

    def restore_held_position(self) -> None:
        """Move back to the last snapshot."""
        self.pos_x = self.held_x
        self.pos_y = self.held_y

    def kill(self) -> None:
        self.alive = False

    @property
    def is_hazard(self) -> bool:
        return self.kind is EntityKind.NPC and self.name in HAZARD_NAMES

    @property
    def is_pickup(self) -> bool:
        return self.kind is EntityKind.NPC and self.name in PICKUP_NAMES


@dataclass
class Player:
    """The player: a PLAYER-kind body plus the shoot cooldown timer."""
    body: Entity
    cooldown: Timer = field(default_factory=lambda: Timer(SHOOT_COOLDOWN_TIMER))

    def __post_init__(self):
        if self.body.kind is not EntityKind.PLAYER:
            raise ValueError(f"Player body must be a PLAYER entity, got {self.body.kind.value}")


def _from_sprite(sprite: SpriteDef, kind: EntityKind, x: float, y: float) -> Entity:
    return Entity(
        name=sprite.name,
        kind=kind,
        width=sprite.width,
        height=sprite.height,
        pos_x=x,
        pos_y=y,
        speed=sprite.speed,
        collision_margin=sprite.collision_margin,
    )


def make_player(consts: GameConsts) -> Player:
    """Create the player centered horizontally, resting on the bottom edge."""
    sprite = consts.sprite('player')
    body = _from_sprite(sprite, EntityKind.PLAYER,
                        consts.screen_width / 2,
                        consts.screen_height - sprite.height / 2)
    body.hold_position()
    return Player(body=body)


def make_npc(sprite: SpriteDef, x: float, y: float) -> Entity:
    """Create a falling NPC (orb hazard or fireAmmo pickup)."""
    return _from_sprite(sprite, EntityKind.NPC, x, y)


def make_projectile(sprite: SpriteDef, x: float, y: float) -> Entity:
    """Create a bullet travelling up."""
    return _from_sprite(sprite, EntityKind.PROJECTILE, x, y)


def make_backdrop(sprite: SpriteDef, consts: GameConsts) -> Entity:
    """Create a billboard centered on the screen."""
    return _from_sprite(sprite, EntityKind.BACKDROP,
                        consts.screen_width / 2, consts.screen_height / 2)


def advance(entity: Entity, delta: float, multiplier: float = 1.0) -> None:
    """Move an entity for one frame along its kind's direction.

    NPCs fall, projectiles rise, players and backdrops stay put (the player
    is moved by the pointer, not by speed).
    """
    if entity.kind is EntityKind.NPC:
        entity.pos_y += entity.speed * multiplier * delta
    elif entity.kind is EntityKind.PROJECTILE:
        entity.pos_y -= entity.speed * multiplier * delta
