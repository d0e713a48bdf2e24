"""
Avoider - Configuration loader.

Loads settings from the .env file next to this module, with defaults matching
the classic game. Module-level constants are bundled into a frozen GameConsts
model that the game core receives explicitly.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models import Color, Resolution

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)

ASSETS_DIR = Path(__file__).parent / 'assets'


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_str(key: str, default: str) -> str:
    """Get string from environment."""
    return os.getenv(key, default)


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 850)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 600)
FPS = _get_int('FPS', 60)
HUD_BUFFER = _get_int('HUD_BUFFER', 60)  # pixels reserved for the HUD strip at the top

# Speeds (pixels per second)
BULLET_SPEED = _get_float('BULLET_SPEED', 550.0)
ORB_SPEED = _get_float('ORB_SPEED', 200.0)
AMMO_SPEED = _get_float('AMMO_SPEED', 150.0)

# Times (seconds)
SHIELD_TIME = _get_float('SHIELD_TIME', 3.0)
SHOOT_COOLDOWN = _get_float('SHOOT_COOLDOWN', 0.2)

# Amounts
AMMO_AMOUNT = _get_int('AMMO_AMOUNT', 3)  # ammo per fireAmmo pickup
SCORE_INCREASE = _get_int('SCORE_INCREASE', 10)  # points per orb shot down
GAME_LIVES_START_AMOUNT = _get_int('GAME_LIVES_START_AMOUNT', 5)
BULLET_SPAWN_GAP = _get_float('BULLET_SPAWN_GAP', 0.0)  # gap between ship nose and bullet

# Spawning (1 in N chance per frame)
ORB_SPAWN_RATIO = _get_int('ORB_SPAWN_RATIO', 20)
AMMO_SPAWN_RATIO = _get_int('AMMO_SPAWN_RATIO', 99)
SPAWN_BUFFER_LEFT = _get_float('SPAWN_BUFFER_LEFT', 20.0)
SPAWN_BUFFER_RIGHT = _get_float('SPAWN_BUFFER_RIGHT', 10.0)
SPAWN_Y = _get_float('SPAWN_Y', 0.0)
SPAWN_RETRIES = _get_int('SPAWN_RETRIES', 3)
NPC_CULL_MARGIN = _get_float('NPC_CULL_MARGIN', 60.0)  # below the screen bottom

# Difficulty ramp (0 amount disables)
NPC_SPEED_INCREASE_INTERVAL = _get_float('NPC_SPEED_INCREASE_INTERVAL', 10.0)
NPC_SPEED_INCREASE_AMOUNT = _get_float('NPC_SPEED_INCREASE_AMOUNT', 0.2)

# Keys (DOM-style codes)
PLAY_KEY = _get_str('PLAY_KEY', 'Space')
RESET_KEY = _get_str('RESET_KEY', 'Space')
PAUSE_KEY = _get_str('PAUSE_KEY', 'ControlLeft')

# Audio
AUDIO_ENABLED = _get_bool('AUDIO_ENABLED', True)
SOUND_POOL_SIZE = _get_int('SOUND_POOL_SIZE', 5)  # channels per sound
VOLUME = _get_float('VOLUME', 1.0)

# Text
FONT_NAME = _get_str('FONT_NAME', 'centurygothic')
FONT_SIZE = _get_int('FONT_SIZE', 22)  # ~17pt
FONT_BOLD = _get_bool('FONT_BOLD', True)

# Debug
SHOW_BOUNDING_BOXES = _get_bool('SHOW_BOUNDING_BOXES', False)

# Game loop
FIXED_STEP = 1.0 / 60.0
MAX_FRAME_TIME = 0.25

# Colors
BACKGROUND_COLOR = Color(r=5, g=5, b=20)
TEXT_COLOR = Color(r=255, g=255, b=255)
HUD_TEXT_COLOR = Color(r=255, g=0, b=0)
HITBOX_COLOR = Color(r=255, g=0, b=255)
PLACEHOLDER_COLOR = Color(r=200, g=200, b=200)
PLACEHOLDER_COLORS = {
    'player': Color(r=0, g=200, b=255),
    'orb': Color(r=180, g=60, b=255),
    'fireAmmo': Color(r=255, g=140, b=0),
    'bullet': Color(r=255, g=255, b=80),
    'splash': Color(r=40, g=40, b=90),
    'pause': Color(r=40, g=90, b=40),
    'die': Color(r=90, g=30, b=30),
}

# Game texts
INIT_TEXTS = (
    "Shoot the Orbs!!!",
    "Catch the Fire Balls for Ammo",
    "Use Space-Bar or Mouse-Btn to Fire",
    "Press Space-Bar to Start",
)
HUD_SCORE = "Score: "
HUD_AMMO = "Ammo: "
HUD_LIVES = "Lives: "
HUD_CLOCK = "Clock: "
PAUSE_TEXT = "PRESS  CTRL  TO  RESUME  GAME"
WIN_TEXT = "PRESS  ENTER  TO  PLAY  AGAIN"
LOST_TEXT = "YOU  LOST,  SPACE-BAR  TO  RETRY"
DIED_TEXT = "YOU  DIED,  SPACE-BAR  TO  REVIVE"


class SpriteDef(BaseModel):
    """Size, speed and art for one kind of sprite.

    Attributes:
        name: Sprite name, also the image/sound lookup key
        width: Sprite width in pixels
        height: Sprite height in pixels
        speed: Movement speed in pixels per second (0 for static sprites)
        collision_margin: Pixels shaved off each side of the hitbox
        image_file: File under assets/sprites, or None for no art
    """
    name: str
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    speed: float = Field(0.0, ge=0)
    collision_margin: float = Field(0.0, ge=0)
    image_file: Optional[str] = None

    model_config = ConfigDict(frozen=True)


def _default_sprites() -> Dict[str, SpriteDef]:
    return {
        'player': SpriteDef(name='player', width=32, height=29,
                            collision_margin=4, image_file='ships.png'),
        'orb': SpriteDef(name='orb', width=29, height=29, speed=ORB_SPEED,
                         collision_margin=4, image_file='orb.png'),
        'fireAmmo': SpriteDef(name='fireAmmo', width=20, height=20, speed=AMMO_SPEED,
                              image_file='fire.png'),
        'bullet': SpriteDef(name='bullet', width=12, height=12, speed=BULLET_SPEED,
                            image_file='bullet.png'),
        'background': SpriteDef(name='background', width=SCREEN_WIDTH, height=SCREEN_HEIGHT,
                                image_file='stars.png'),
        'splash': SpriteDef(name='splash', width=400, height=100, image_file='splash.png'),
        'pause': SpriteDef(name='pause', width=400, height=100, image_file='pause.png'),
        'die': SpriteDef(name='die', width=400, height=100, image_file='die.png'),
    }


SOUND_FILES = {
    'hit': 'hit.wav',
    'get': 'get.wav',
    'hurt': 'hurt.wav',
    'shoot': 'shoot.wav',
}


class GameConsts(BaseModel):
    """Immutable bundle of every tunable the game core reads.

    Build one with GameConsts.from_env() (module constants, themselves read
    from .env) and pass it into the session. Tests construct it directly and
    override only what they need.

    Examples:
        >>> consts = GameConsts.from_env()
        >>> consts.screen_width, consts.screen_height
        (850, 600)
        >>> quiet = consts.with_overrides(orb_spawn_ratio=1000)
    """
    screen_width: int = Field(SCREEN_WIDTH, gt=0)
    screen_height: int = Field(SCREEN_HEIGHT, gt=0)
    hud_buffer: float = Field(HUD_BUFFER, ge=0)

    bullet_speed: float = Field(BULLET_SPEED, ge=0)
    shield_time: float = Field(SHIELD_TIME, ge=0)
    shoot_cooldown: float = Field(SHOOT_COOLDOWN, ge=0)

    ammo_amount: int = Field(AMMO_AMOUNT, ge=0)
    score_increase: int = SCORE_INCREASE
    lives_start: int = Field(GAME_LIVES_START_AMOUNT, ge=1)
    bullet_spawn_gap: float = Field(BULLET_SPAWN_GAP, ge=0)

    orb_spawn_ratio: int = Field(ORB_SPAWN_RATIO, ge=1)
    ammo_spawn_ratio: int = Field(AMMO_SPAWN_RATIO, ge=1)
    spawn_buffer_left: float = Field(SPAWN_BUFFER_LEFT, ge=0)
    spawn_buffer_right: float = Field(SPAWN_BUFFER_RIGHT, ge=0)
    spawn_y: float = SPAWN_Y
    spawn_retries: int = Field(SPAWN_RETRIES, ge=0)
    npc_cull_margin: float = Field(NPC_CULL_MARGIN, ge=0)

    npc_speed_increase_interval: float = Field(NPC_SPEED_INCREASE_INTERVAL, gt=0)
    npc_speed_increase_amount: float = Field(NPC_SPEED_INCREASE_AMOUNT, ge=0)

    play_key: str = PLAY_KEY
    reset_key: str = RESET_KEY
    pause_key: str = PAUSE_KEY

    audio_enabled: bool = AUDIO_ENABLED
    sound_pool_size: int = Field(SOUND_POOL_SIZE, ge=1)
    volume: float = Field(VOLUME, ge=0, le=1)

    font_name: str = FONT_NAME
    font_size: int = Field(FONT_SIZE, gt=0)
    font_bold: bool = FONT_BOLD

    show_bounding_boxes: bool = SHOW_BOUNDING_BOXES
    fixed_step: float = Field(FIXED_STEP, gt=0)
    max_frame_time: float = Field(MAX_FRAME_TIME, gt=0)

    sprites: Dict[str, SpriteDef] = Field(default_factory=_default_sprites)

    model_config = ConfigDict(frozen=True)

    @field_validator('play_key', 'reset_key', 'pause_key')
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Validate key codes are non-empty."""
        if not v.strip():
            raise ValueError('Key code must not be empty')
        return v

    @model_validator(mode='after')
    def validate_layout(self) -> 'GameConsts':
        """Validate the spawn lane and HUD strip fit on screen."""
        if self.spawn_buffer_left + self.spawn_buffer_right > self.screen_width:
            raise ValueError(
                f'Spawn buffers ({self.spawn_buffer_left} + {self.spawn_buffer_right}) '
                f'exceed screen width {self.screen_width}'
            )
        if self.hud_buffer >= self.screen_height:
            raise ValueError(
                f'HUD buffer {self.hud_buffer} must be smaller than screen height {self.screen_height}'
            )
        for required in ('player', 'orb', 'fireAmmo', 'bullet'):
            if required not in self.sprites:
                raise ValueError(f"Missing sprite definition '{required}'")
        return self

    @property
    def resolution(self) -> Resolution:
        return Resolution(width=self.screen_width, height=self.screen_height)

    def sprite(self, name: str) -> SpriteDef:
        """Look up a sprite definition by name."""
        return self.sprites[name]

    def with_overrides(self, **overrides) -> 'GameConsts':
        """Return a validated copy with some fields replaced."""
        data = self.model_dump()
        data.update(overrides)
        return GameConsts(**data)

    @classmethod
    def from_env(cls, difficulty: Optional[str] = None, **overrides) -> 'GameConsts':
        """Build constants from the module settings (loaded from .env).

        Args:
            difficulty: Optional preset name from DIFFICULTY_PRESETS
            **overrides: Field values that win over everything else
        """
        data = {}
        if difficulty is not None:
            data.update(get_difficulty_preset(difficulty).as_overrides())
        data.update(overrides)
        return cls(**data)


# Difficulty Presets
@dataclass
class DifficultyPreset:
    """Difficulty preset for spawn density and speed ramp."""
    name: str
    orb_spawn_ratio: int          # 1 in N frames spawns an orb
    ammo_spawn_ratio: int         # 1 in N frames spawns fire-ammo
    orb_speed: float              # pixels per second
    speed_increase_amount: float  # multiplier growth per ramp interval
    lives: int

    def as_overrides(self) -> dict:
        """Translate the preset into GameConsts field overrides."""
        sprites = _default_sprites()
        sprites['orb'] = sprites['orb'].model_copy(update={'speed': self.orb_speed})
        return {
            'orb_spawn_ratio': self.orb_spawn_ratio,
            'ammo_spawn_ratio': self.ammo_spawn_ratio,
            'npc_speed_increase_amount': self.speed_increase_amount,
            'lives_start': self.lives,
            'sprites': sprites,
        }


DIFFICULTY_PRESETS = {
    'easy': DifficultyPreset(
        name='easy',
        orb_spawn_ratio=40,
        ammo_spawn_ratio=60,
        orb_speed=150.0,
        speed_increase_amount=0.1,
        lives=7,
    ),
    'normal': DifficultyPreset(
        name='normal',
        orb_spawn_ratio=ORB_SPAWN_RATIO,
        ammo_spawn_ratio=AMMO_SPAWN_RATIO,
        orb_speed=ORB_SPEED,
        speed_increase_amount=NPC_SPEED_INCREASE_AMOUNT,
        lives=GAME_LIVES_START_AMOUNT,
    ),
    'hard': DifficultyPreset(
        name='hard',
        orb_spawn_ratio=10,
        ammo_spawn_ratio=120,
        orb_speed=260.0,
        speed_increase_amount=0.3,
        lives=3,
    ),
}


def get_difficulty_preset(name: str) -> DifficultyPreset:
    """Look up a difficulty preset.

    Raises:
        ValueError: If the name is unknown
    """
    if name not in DIFFICULTY_PRESETS:
        raise ValueError(
            f"Unknown difficulty '{name}', expected one of {sorted(DIFFICULTY_PRESETS)}"
        )
    return DIFFICULTY_PRESETS[name]
