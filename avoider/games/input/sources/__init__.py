"""Input sources: pygame keyboard/mouse and a scripted headless source."""

from avoider.games.input.sources.base import InputSource
from avoider.games.input.sources.scripted import ScriptedInputSource

__all__ = ['InputSource', 'ScriptedInputSource']
