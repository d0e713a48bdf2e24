"""
Tests for Avoider entities.

Tests cover:
- Entity validation and geometry helpers
- Held position snapshot / restore
- Factories
- advance() direction per kind
"""

import pytest

from games.Avoider.entities import (
    Entity,
    EntityKind,
    Player,
    advance,
    make_backdrop,
    make_npc,
    make_player,
    make_projectile,
)


class TestEntity:
    """Test the Entity dataclass."""

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError, match="size"):
            Entity('orb', EntityKind.NPC, width=-1, height=10)

    def test_negative_margin_rejected(self):
        with pytest.raises(ValueError, match="margin"):
            Entity('orb', EntityKind.NPC, width=10, height=10, collision_margin=-2)

    def test_half_extents(self):
        entity = Entity('player', EntityKind.PLAYER, width=32, height=29)
        assert entity.half_width == 16
        assert entity.half_height == 14.5

    def test_hold_and_restore(self):
        """Test restore_held_position returns to the snapshot."""
        entity = Entity('player', EntityKind.PLAYER, width=32, height=29, pos_x=100, pos_y=200)
        entity.hold_position()
        entity.move_to(300, 400)
        assert entity.position.as_tuple == (300, 400)
        entity.restore_held_position()
        assert entity.position.as_tuple == (100, 200)
        assert entity.held_position.as_tuple == (100, 200)

    def test_kill(self):
        entity = Entity('orb', EntityKind.NPC, width=29, height=29)
        assert entity.alive
        entity.kill()
        assert not entity.alive

    def test_hazard_and_pickup(self, consts):
        """Test orbs are hazards and fire-ammo is a pickup."""
        orb = make_npc(consts.sprite('orb'), 0, 0)
        ammo = make_npc(consts.sprite('fireAmmo'), 0, 0)
        assert orb.is_hazard and not orb.is_pickup
        assert ammo.is_pickup and not ammo.is_hazard

    def test_bullet_is_neither(self, consts):
        """Test only NPCs can be hazards or pickups."""
        bullet = make_projectile(consts.sprite('bullet'), 0, 0)
        assert not bullet.is_hazard
        assert not bullet.is_pickup


class TestFactories:
    """Test entity factories."""

    def test_player_starts_bottom_center(self, consts):
        player = make_player(consts)
        body = player.body
        assert body.kind is EntityKind.PLAYER
        assert body.pos_x == consts.screen_width / 2
        assert body.pos_y == consts.screen_height - body.height / 2
        assert body.held_position == body.position

    def test_player_cooldown_idle(self, consts):
        """Test a new player can shoot straight away."""
        assert not make_player(consts).cooldown.active

    def test_player_requires_player_body(self):
        body = Entity('orb', EntityKind.NPC, width=29, height=29)
        with pytest.raises(ValueError, match="PLAYER"):
            Player(body=body)

    def test_npc_copies_sprite(self, consts):
        sprite = consts.sprite('orb')
        npc = make_npc(sprite, 50, 0)
        assert npc.kind is EntityKind.NPC
        assert (npc.width, npc.height) == (sprite.width, sprite.height)
        assert npc.speed == sprite.speed
        assert npc.collision_margin == sprite.collision_margin

    def test_backdrop_centered(self, consts):
        backdrop = make_backdrop(consts.sprite('splash'), consts)
        assert backdrop.kind is EntityKind.BACKDROP
        assert backdrop.position.as_tuple == (consts.screen_width / 2, consts.screen_height / 2)


class TestAdvance:
    """Test movement per entity kind."""

    def test_npc_falls(self, consts):
        npc = make_npc(consts.sprite('orb'), 100, 0)
        advance(npc, 0.5)
        assert npc.pos_y == pytest.approx(npc.speed * 0.5)

    def test_projectile_rises(self, consts):
        bullet = make_projectile(consts.sprite('bullet'), 100, 500)
        advance(bullet, 0.1)
        assert bullet.pos_y == pytest.approx(500 - bullet.speed * 0.1)

    def test_multiplier_scales_speed(self, consts):
        npc = make_npc(consts.sprite('orb'), 100, 0)
        advance(npc, 1.0, multiplier=1.5)
        assert npc.pos_y == pytest.approx(npc.speed * 1.5)

    def test_player_and_backdrop_stay(self, consts):
        body = make_player(consts).body
        backdrop = make_backdrop(consts.sprite('pause'), consts)
        before = (body.position, backdrop.position)
        advance(body, 1.0)
        advance(backdrop, 1.0)
        assert (body.position, backdrop.position) == before

    def test_zero_delta(self, consts):
        npc = make_npc(consts.sprite('orb'), 100, 10)
        advance(npc, 0.0)
        assert npc.pos_y == 10
