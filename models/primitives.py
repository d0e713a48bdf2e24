"""
Shared primitive data types for the game.

This module provides the basic geometric and color types used by the
Avoider framework and game: points, resolutions, colors and axis-aligned
hitboxes.
"""

from pydantic import BaseModel, Field, field_validator, model_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point for positions and offsets.

    Attributes:
        x: X coordinate (horizontal, grows right)
        y: Y coordinate (vertical, grows down)

    Examples:
        >>> pos = Point2D(x=425.0, y=300.0)
        >>> pos.as_tuple
        (425.0, 300.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    @computed_field
    @property
    def as_tuple(self) -> Tuple[float, float]:
        """Return the point as an (x, y) tuple."""
        return (self.x, self.y)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Screen resolution.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> screen = Resolution(width=850, height=600)
        >>> screen.center.x, screen.center.y
        (425.0, 300.0)
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    @property
    def center(self) -> Point2D:
        """Center of the screen."""
        return Point2D(x=self.width / 2, y=self.height / 2)

    @property
    def as_tuple(self) -> Tuple[int, int]:
        """Return (width, height) for pygame.display.set_mode."""
        return (self.width, self.height)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Examples:
        >>> white = Color(r=255, g=255, b=255)
        >>> white.as_rgb_tuple
        (255, 255, 255)
    """
    r: int
    g: int
    b: int
    a: int = 255  # Default to fully opaque

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class Hitbox(BaseModel):
    """Immutable axis-aligned box given by its edges.

    Unlike a pygame Rect, a hitbox may have zero width or height: a margin
    larger than an entity's half extent collapses the box to its center
    line or point.

    Attributes:
        left: X of the left edge
        top: Y of the top edge
        right: X of the right edge (>= left)
        bottom: Y of the bottom edge (>= top)

    Examples:
        >>> a = Hitbox(left=0, top=0, right=10, bottom=10)
        >>> b = Hitbox(left=10, top=0, right=20, bottom=10)
        >>> a.overlaps(b)  # Touching edges do not overlap
        False
    """
    left: float
    top: float
    right: float
    bottom: float

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_edges(self) -> 'Hitbox':
        """Validate the edges are ordered."""
        if self.right < self.left or self.bottom < self.top:
            raise ValueError(
                f'Hitbox edges out of order: left={self.left}, right={self.right}, '
                f'top={self.top}, bottom={self.bottom}'
            )
        return self

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Point2D:
        return Point2D(x=(self.left + self.right) / 2, y=(self.top + self.bottom) / 2)

    def overlaps(self, other: 'Hitbox') -> bool:
        """Strict overlap test. Boxes that only share an edge do not overlap."""
        return (self.left < other.right and self.right > other.left and
                self.top < other.bottom and self.bottom > other.top)

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point lies inside the box (edges inclusive)."""
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"Hitbox(l={self.left:.1f}, t={self.top:.1f}, "
                f"r={self.right:.1f}, b={self.bottom:.1f})")
