"""
Shared models for the Avoider project.

This package provides the Pydantic data models used across the framework
and the game:
- Primitives: Basic geometric and color types (Point2D, Resolution, Color, Hitbox)

Usage:
    >>> from models import Point2D, Hitbox
    >>> from models.primitives import Color
"""

from .primitives import (
    Point2D,
    Resolution,
    Color,
    Hitbox,
)

__all__ = [
    'Point2D',
    'Resolution',
    'Color',
    'Hitbox',
]
