"""
Pygame rendering for Avoider.

Drawing is split into named layers rendered in order: background and
billboards, game objects, text/HUD, and (when enabled) debug hitboxes. Layers
only read the session; they never change game state.

Missing images degrade to colored placeholder rectangles, so the game is
playable without any art on disk.
"""

from typing import Callable, List, Optional, Tuple

import pygame

from avoider.games.game_state import GameState
from avoider.logging import get_logger

from games.Avoider import config
from games.Avoider.assets import ImageBank
from games.Avoider.collision import hitbox
from games.Avoider.entities import Entity
from games.Avoider.session import GameSession

log = get_logger('renderer')

# Text layout, as fractions of the screen size
INIT_TEXT_Y = (0.70, 0.75, 0.80, 0.85)
HUD_AMMO_X = 0.20
HUD_LIVES_X = 0.70
HUD_Y = 0.07
HUD_SCORE_Y = 0.095
HUD_CLOCK_Y = 0.05
MESSAGE_Y = 0.65
BILLBOARD_Y = 0.35

BILLBOARDS = {
    GameState.INIT: 'splash',
    GameState.PAUSE: 'pause',
    GameState.LOSE: 'die',
}


class RenderLayer:
    """A named drawing step.

    Attributes:
        name: Shown in logs when the layer fails
        draw: Callable taking (surface, session)
        enabled: Disabled layers are skipped
    """

    def __init__(self, name: str, draw: Callable[[pygame.Surface, GameSession], None],
                 enabled: bool = True):
        self.name = name
        self.draw = draw
        self.enabled = enabled

    def render(self, surface: pygame.Surface, session: GameSession) -> None:
        if self.enabled:
            self.draw(surface, session)

    def __repr__(self) -> str:
        return f"RenderLayer({self.name!r}, enabled={self.enabled})"


class Renderer:
    """Draws a GameSession onto a pygame surface.

    Examples:
        >>> renderer = Renderer(screen, consts, ImageBank(consts))
        >>> for layer in renderer.layers:
        ...     layer.render(screen, session)
    """

    def __init__(self, surface: pygame.Surface, consts: config.GameConsts,
                 images: ImageBank, font: Optional[pygame.font.Font] = None):
        self.surface = surface
        self.consts = consts
        self.images = images
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(consts.font_name, consts.font_size, bold=consts.font_bold)
        self.font = font
        self.layers: List[RenderLayer] = [
            RenderLayer('background', self.draw_background),
            RenderLayer('objects', self.draw_objects),
            RenderLayer('text', self.draw_text),
            RenderLayer('hitboxes', self.draw_hitboxes, enabled=consts.show_bounding_boxes),
        ]

    def set_show_hitboxes(self, show: bool) -> None:
        self.layers[-1].enabled = show
        log.debug("Hitbox overlay %s", "on" if show else "off")

    def render(self, session: GameSession) -> None:
        """Draw every layer in order. A failing layer propagates its error."""
        for layer in self.layers:
            layer.render(self.surface, session)

    # ------------------------------------------------------------------
    # Layers
    # ------------------------------------------------------------------

    def draw_background(self, surface: pygame.Surface, session: GameSession) -> None:
        surface.fill(config.BACKGROUND_COLOR.as_rgb_tuple)
        background = self.images.get_image('background')
        if background is not None:
            if background.get_size() != surface.get_size():
                background = pygame.transform.scale(background, surface.get_size())
            surface.blit(background, (0, 0))

        board = BILLBOARDS.get(session.state)
        if board is not None and board in self.consts.sprites:
            sprite = self.consts.sprite(board)
            center = (self.consts.screen_width / 2, self.consts.screen_height * BILLBOARD_Y)
            self._blit_centered(surface, board, center, (sprite.width, sprite.height))

    def draw_objects(self, surface: pygame.Surface, session: GameSession) -> None:
        if session.state is GameState.INIT:
            return
        for npc in session.npcs:
            self.draw_entity(surface, npc)
        for projectile in session.projectiles:
            self.draw_entity(surface, projectile)

        body = session.player.body
        if session.state in (GameState.PAUSE, GameState.LOSE):
            center = (body.held_x, body.held_y)
        else:
            center = (body.pos_x, body.pos_y)
        self.draw_player(surface, body, center)

    def draw_text(self, surface: pygame.Surface, session: GameSession) -> None:
        w, h = self.consts.screen_width, self.consts.screen_height
        state = session.state
        text_color = config.TEXT_COLOR.as_rgb_tuple

        if state is GameState.INIT:
            for text, y in zip(config.INIT_TEXTS, INIT_TEXT_Y):
                self.center_text(surface, text, h * y, text_color)
        elif state is GameState.PLAY:
            color = config.HUD_TEXT_COLOR.as_rgb_tuple
            self.center_text(surface, f"{config.HUD_SCORE}{session.score}", h * HUD_SCORE_Y, color)
            self.put_text(surface, f"{config.HUD_AMMO}{session.ammo}", (w * HUD_AMMO_X, h * HUD_Y), color)
            self.put_text(surface, f"{config.HUD_LIVES}{session.lives}", (w * HUD_LIVES_X, h * HUD_Y), color)
            self.center_text(surface, f"{config.HUD_CLOCK}{session.game_clock.formatted}",
                             h * HUD_CLOCK_Y, color)
        elif state is GameState.PAUSE:
            self.center_text(surface, config.PAUSE_TEXT, h * MESSAGE_Y, text_color)
        elif state is GameState.WIN:
            self.center_text(surface, config.WIN_TEXT, h * MESSAGE_Y, text_color)
        elif state is GameState.LOSE:
            text = config.LOST_TEXT if session.lives <= 0 else config.DIED_TEXT
            self.center_text(surface, text, h * MESSAGE_Y, text_color)

    def draw_hitboxes(self, surface: pygame.Surface, session: GameSession) -> None:
        entities: List[Entity] = list(session.npcs) + list(session.projectiles)
        if session.state is not GameState.INIT:
            entities.append(session.player.body)
        for entity in entities:
            box = hitbox(entity)
            rect = pygame.Rect(round(box.left), round(box.top),
                               max(1, round(box.width)), max(1, round(box.height)))
            pygame.draw.rect(surface, config.HITBOX_COLOR.as_rgb_tuple, rect, 1)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def draw_entity(self, surface: pygame.Surface, entity: Entity) -> None:
        self._blit_centered(surface, entity.name, (entity.pos_x, entity.pos_y),
                            (entity.width, entity.height))

    def draw_player(self, surface: pygame.Surface, body: Entity,
                    center: Tuple[float, float]) -> None:
        """Draw the ship, picking the sprite sheet frame from animation_state."""
        sheet = self.images.get_image(body.name)
        size = (int(body.width), int(body.height))
        if sheet is None:
            self._placeholder(surface, body.name, center, size)
            return

        frame_x = body.animation_state * size[0]
        if frame_x + size[0] <= sheet.get_width() and size[1] <= sheet.get_height():
            frame = sheet.subsurface(pygame.Rect(frame_x, 0, size[0], size[1]))
        else:
            frame = pygame.transform.scale(sheet, size)
        surface.blit(frame, frame.get_rect(center=(round(center[0]), round(center[1]))))

    def put_text(self, surface: pygame.Surface, text: str, pos: Tuple[float, float],
                 color: Tuple[int, int, int]) -> pygame.Rect:
        rendered = self.font.render(text, True, color)
        return surface.blit(rendered, (round(pos[0]), round(pos[1])))

    def center_text(self, surface: pygame.Surface, text: str, y: float,
                    color: Tuple[int, int, int]) -> pygame.Rect:
        """Draw text centered horizontally with its center at y."""
        rendered = self.font.render(text, True, color)
        rect = rendered.get_rect(center=(surface.get_width() // 2, round(y)))
        return surface.blit(rendered, rect)

    def _blit_centered(self, surface: pygame.Surface, name: str,
                       center: Tuple[float, float], size: Tuple[float, float]) -> None:
        size = (int(size[0]), int(size[1]))
        image = self.images.get_image(name)
        if image is None:
            self._placeholder(surface, name, center, size)
            return
        if image.get_size() != size:
            image = pygame.transform.scale(image, size)
        surface.blit(image, image.get_rect(center=(round(center[0]), round(center[1]))))

    def _placeholder(self, surface: pygame.Surface, name: str,
                     center: Tuple[float, float], size: Tuple[int, int]) -> None:
        color = config.PLACEHOLDER_COLORS.get(name, config.PLACEHOLDER_COLOR).as_rgb_tuple
        rect = pygame.Rect(0, 0, max(1, size[0]), max(1, size[1]))
        rect.center = (round(center[0]), round(center[1]))
        if name in ('orb', 'fireAmmo', 'bullet'):
            pygame.draw.ellipse(surface, color, rect)
        else:
            pygame.draw.rect(surface, color, rect)
