"""
Per-frame keyboard and pointer state.

InputState answers the three questions game logic asks about a key:
is it held (down), did it go down this frame (pressed), did it go up this
frame (released). Pressed and released are edge flags that the controller
clears at the end of every frame via clear_frame_keys().
"""

from typing import Iterable, Set, Tuple

from avoider.games.input.input_event import InputEvent, InputEventType
from avoider.logging import get_logger

log = get_logger('input_state')


class InputState:
    """Keyboard and pointer state built from InputEvents.

    Attributes:
        pointer_pos: Last known pointer position (x, y)
        pointer_down: True while the primary pointer button is held
        pointer_moved: True if the pointer moved this frame
        quit_requested: True once a QUIT event has been seen

    Examples:
        >>> state = InputState()
        >>> state.apply(InputEvent(InputEventType.KEY_DOWN, code="Space"))
        >>> state.is_key_pressed("Space"), state.is_key_down("Space")
        (True, True)
        >>> state.clear_frame_keys()
        >>> state.is_key_pressed("Space"), state.is_key_down("Space")
        (False, True)
    """

    def __init__(self):
        self._down: Set[str] = set()
        self._pressed: Set[str] = set()
        self._released: Set[str] = set()
        self.pointer_pos: Tuple[float, float] = (0.0, 0.0)
        self.pointer_down = False
        self.pointer_moved = False
        self.quit_requested = False

    def is_key_down(self, code: str) -> bool:
        """True while the key is held."""
        return code in self._down

    def is_key_pressed(self, code: str) -> bool:
        """True only on the frame the key went from up to down."""
        return code in self._pressed

    def is_key_released(self, code: str) -> bool:
        """True only on the frame the key went from down to up."""
        return code in self._released

    def apply(self, event: InputEvent) -> None:
        """Fold a single event into the state."""
        kind = event.event_type
        if kind is InputEventType.KEY_DOWN:
            # Auto-repeat keydowns don't count as a new press
            if event.code not in self._down:
                self._pressed.add(event.code)
            self._down.add(event.code)
        elif kind is InputEventType.KEY_UP:
            if event.code in self._down:
                self._released.add(event.code)
            self._down.discard(event.code)
        elif kind is InputEventType.POINTER_MOVE:
            self._set_pointer(event)
            self.pointer_moved = True
        elif kind is InputEventType.POINTER_DOWN:
            self._set_pointer(event)
            self.pointer_down = True
        elif kind is InputEventType.POINTER_UP:
            self._set_pointer(event)
            self.pointer_down = False
        elif kind is InputEventType.QUIT:
            self.quit_requested = True
        else:
            log.debug("Ignoring unknown input event %s", event)

    def apply_all(self, events: Iterable[InputEvent]) -> None:
        """Fold a batch of events into the state, in order."""
        for event in events:
            self.apply(event)

    def clear_frame_keys(self) -> None:
        """Clear per-frame edge flags. Held keys stay held."""
        self._pressed.clear()
        self._released.clear()
        self.pointer_moved = False

    def reset(self) -> None:
        """Forget everything, including held keys."""
        self._down.clear()
        self.clear_frame_keys()
        self.pointer_down = False

    def _set_pointer(self, event: InputEvent) -> None:
        if event.position is not None:
            self.pointer_pos = (float(event.position[0]), float(event.position[1]))
