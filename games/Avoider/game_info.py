"""
Avoider - Game Info

This file defines the game's metadata, its CLI arguments and the factory
function for creating game sessions.
"""

import random

# Game metadata
NAME = "Avoider"
DESCRIPTION = "Dodge the falling orbs, catch fire balls for ammo and shoot back."
VERSION = "1.0.0"
AUTHOR = "Avoider Team"

# CLI argument definitions (used by main.py)
ARGUMENTS = [
    {
        'name': '--width',
        'type': int,
        'default': None,
        'help': 'Window width in pixels (default: SCREEN_WIDTH from .env)'
    },
    {
        'name': '--height',
        'type': int,
        'default': None,
        'help': 'Window height in pixels (default: SCREEN_HEIGHT from .env)'
    },
    {
        'name': '--difficulty',
        'type': str,
        'default': None,
        'choices': ['easy', 'normal', 'hard'],
        'help': 'Difficulty preset for spawn density and speed ramp'
    },
    {
        'name': '--seed',
        'type': int,
        'default': None,
        'help': 'Random seed for reproducible spawns'
    },
]


def get_game_mode(**kwargs):
    """
    Factory function to create a GameSession.

    Args:
        **kwargs: Game configuration options
            - width: Screen width override
            - height: Screen height override
            - difficulty: Preset name ('easy', 'normal', 'hard')
            - seed: Random seed
            - show_hitboxes: Draw debug hitboxes
            - mute: Disable audio

    Returns:
        GameSession instance in the INIT state
    """
    from games.Avoider.config import GameConsts
    from games.Avoider.session import GameSession

    overrides = {}
    if kwargs.get('width'):
        overrides['screen_width'] = kwargs['width']
    if kwargs.get('height'):
        overrides['screen_height'] = kwargs['height']
    if kwargs.get('show_hitboxes'):
        overrides['show_bounding_boxes'] = True
    if kwargs.get('mute'):
        overrides['audio_enabled'] = False

    consts = GameConsts.from_env(difficulty=kwargs.get('difficulty'), **overrides)
    seed = kwargs.get('seed')
    rng = random.Random(seed) if seed is not None else random.Random()
    return GameSession(consts, rng=rng)
