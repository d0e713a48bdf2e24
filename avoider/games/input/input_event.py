"""
Input Event - a single raw keyboard or pointer action.

Sources translate their native events (pygame, scripted frames) into this
common format; InputState folds them into per-frame key and pointer state.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class InputEventType(Enum):
    """Kinds of raw input the game understands."""
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    POINTER_MOVE = "pointer_move"
    POINTER_DOWN = "pointer_down"
    POINTER_UP = "pointer_up"
    QUIT = "quit"


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    Attributes:
        event_type: What happened
        code: DOM-style key code for key events (e.g. "Space", "ControlLeft")
        position: Pointer position in screen coordinates for pointer events
    """
    event_type: InputEventType
    code: Optional[str] = None
    position: Optional[Tuple[float, float]] = None

    def __post_init__(self):
        """Validate that key events carry a code."""
        if self.event_type in (InputEventType.KEY_DOWN, InputEventType.KEY_UP) and not self.code:
            raise ValueError(f'{self.event_type.value} event requires a key code')

    def __str__(self) -> str:
        """String representation for debugging."""
        if self.code is not None:
            return f"InputEvent({self.event_type.value}, code={self.code})"
        if self.position is not None:
            return (f"InputEvent({self.event_type.value}, "
                    f"pos=({self.position[0]:.2f}, {self.position[1]:.2f}))")
        return f"InputEvent({self.event_type.value})"
