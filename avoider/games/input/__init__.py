"""
Input abstraction layer for Avoider.

Sources (pygame, scripted) produce InputEvents; the InputManager folds them
into an InputState that game logic queries.
"""

from avoider.games.input.input_event import InputEvent, InputEventType
from avoider.games.input.input_manager import InputManager
from avoider.games.input.input_state import InputState

__all__ = ['InputEvent', 'InputEventType', 'InputManager', 'InputState']
