"""
Avoider framework.

Shared pieces used by the games: leveled logging, game/play state enums,
frame-driven timers and the input abstraction layer.
"""

from avoider.logging import get_logger

__all__ = ['get_logger']
