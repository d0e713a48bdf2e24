"""
Image and sound assets for Avoider.

ImageBank loads sprite images lazily and remembers failures, so a missing
file produces one warning and the renderer falls back to a placeholder.
AudioPlayer plays sound effects over a small round-robin pool of mixer
channels per sound. Missing sound files are replaced by generated tones;
when the mixer itself is unavailable audio is switched off.

Classes:
    ImageBank: Sprite image cache
    AudioPlayer: Pooled sound effects (implements SoundPlayer)
"""

from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import pygame

from avoider.logging import get_logger

from games.Avoider import sounds
from games.Avoider.config import ASSETS_DIR, SOUND_FILES, GameConsts

log = get_logger('assets')

SAMPLE_RATE = 22050

# Placeholder tones: (start Hz, end Hz, seconds, amplitude)
TONES = {
    sounds.HIT: (880.0, 440.0, 0.12, 0.3),
    sounds.GET: (523.25, 1046.5, 0.15, 0.3),
    sounds.HURT: (220.0, 110.0, 0.3, 0.35),
    sounds.SHOOT: (1200.0, 900.0, 0.06, 0.2),
}


class ImageBank:
    """Lazily loaded sprite images, keyed by sprite name.

    Examples:
        >>> bank = ImageBank(GameConsts.from_env())
        >>> bank.get_image('orb')  # Surface, or None if the file is missing
    """

    def __init__(self, consts: GameConsts, sprites_dir: Optional[Path] = None):
        self.consts = consts
        self.sprites_dir = Path(sprites_dir) if sprites_dir else ASSETS_DIR / 'sprites'
        self._images: Dict[str, Optional[pygame.Surface]] = {}

    def get_image(self, name: str) -> Optional[pygame.Surface]:
        """Return the image for a sprite, or None if it can't be loaded."""
        if name not in self._images:
            self._images[name] = self._load(name)
        return self._images[name]

    def preload(self) -> int:
        """Load every sprite with an image file. Returns how many loaded."""
        return sum(1 for name in self.consts.sprites if self.get_image(name) is not None)

    def _load(self, name: str) -> Optional[pygame.Surface]:
        sprite = self.consts.sprites.get(name)
        if sprite is None:
            log.warning("Unknown image '%s'", name)
            return None
        if sprite.image_file is None:
            return None

        path = self.sprites_dir / sprite.image_file
        if not path.exists():
            log.warning("Image file not found for '%s': %s", name, path)
            return None
        try:
            image = pygame.image.load(str(path))
        except pygame.error as e:
            log.warning("Could not load image '%s' from %s: %s", name, path, e)
            return None

        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        log.debug("Loaded image '%s' (%dx%d)", name, image.get_width(), image.get_height())
        return image


def generate_tone(start_hz: float, end_hz: float, duration: float,
                  amplitude: float) -> np.ndarray:
    """Build a 16-bit stereo frequency sweep with a short fade in and out."""
    num_samples = max(1, int(SAMPLE_RATE * duration))
    frequencies = np.linspace(start_hz, end_hz, num_samples)
    phase = np.cumsum(2.0 * np.pi * frequencies / SAMPLE_RATE)
    wave = np.sin(phase)

    envelope = np.ones(num_samples)
    fade_samples = max(1, int(num_samples * 0.1))
    envelope[:fade_samples] = np.linspace(0, 1, fade_samples)
    envelope[-fade_samples:] = np.linspace(1, 0, fade_samples)
    wave *= envelope

    wave = (wave * 32767 * amplitude).astype(np.int16)
    return np.column_stack((wave, wave))


class AudioPlayer:
    """Fire-and-forget sound effects over a channel pool per sound.

    Each sound owns `sound_pool_size` mixer channels used round-robin, so
    rapid repeats overlap instead of cutting each other off.

    Attributes:
        enabled: False when audio is switched off or the mixer failed

    Examples:
        >>> audio = AudioPlayer(GameConsts.from_env())
        >>> audio.play_sound('shoot')
    """

    def __init__(self, consts: GameConsts, sounds_dir: Optional[Path] = None):
        self.consts = consts
        self.sounds_dir = Path(sounds_dir) if sounds_dir else ASSETS_DIR / 'sounds'
        self.enabled = consts.audio_enabled
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._channels: Dict[str, List[pygame.mixer.Channel]] = {}
        self._next: Dict[str, int] = {}

        if self.enabled:
            self._init_audio()

    def _init_audio(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            log.warning("Audio initialization failed, sound disabled: %s", e)
            self.enabled = False
            return

        names = list(SOUND_FILES)
        pool = self.consts.sound_pool_size
        pygame.mixer.set_num_channels(len(names) * pool)
        for i, name in enumerate(names):
            sound = self._load(name)
            if sound is None:
                continue
            sound.set_volume(self.consts.volume)
            self._sounds[name] = sound
            self._channels[name] = [pygame.mixer.Channel(i * pool + j) for j in range(pool)]
            self._next[name] = 0

    def _load(self, name: str) -> Optional[pygame.mixer.Sound]:
        path = self.sounds_dir / SOUND_FILES[name]
        if path.exists():
            try:
                return pygame.mixer.Sound(str(path))
            except pygame.error as e:
                log.warning("Could not load sound '%s' from %s: %s", name, path, e)
        else:
            log.warning("Sound file not found for '%s': %s, using generated tone", name, path)

        if name not in TONES:
            return None
        try:
            return pygame.sndarray.make_sound(generate_tone(*TONES[name]))
        except (pygame.error, ValueError) as e:
            log.warning("Could not generate tone for '%s': %s", name, e)
            return None

    @property
    def loaded_sounds(self) -> List[str]:
        return sorted(self._sounds)

    def play_sound(self, name: str) -> None:
        """Play a sound on the next channel of its pool."""
        if not self.enabled:
            return
        sound = self._sounds.get(name)
        if sound is None:
            log.warning("Unknown sound '%s'", name)
            return
        channels = self._channels[name]
        index = self._next[name]
        self._next[name] = (index + 1) % len(channels)
        channels[index].play(sound)

    def stop_all(self) -> None:
        if self.enabled:
            pygame.mixer.stop()
