"""
Game-facing building blocks: state enums, timers and input handling.
"""

from avoider.games.game_state import GameState, PlayState
from avoider.games.timer import Timer, TimerMode

__all__ = ['GameState', 'PlayState', 'Timer', 'TimerMode']
