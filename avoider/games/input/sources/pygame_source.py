"""
Pygame keyboard and mouse input source.

Converts pygame events into InputEvents with DOM-style key codes so game
logic can name keys the same way regardless of the source ("Space",
"ControlLeft", "Enter", "KeyP").
"""

from typing import Dict, List, Optional

import pygame

from avoider.games.input.input_event import InputEvent, InputEventType
from avoider.games.input.sources.base import InputSource


# pygame key constant -> DOM-style code
KEY_CODES: Dict[int, str] = {
    pygame.K_SPACE: "Space",
    pygame.K_LCTRL: "ControlLeft",
    pygame.K_RCTRL: "ControlRight",
    pygame.K_LSHIFT: "ShiftLeft",
    pygame.K_RSHIFT: "ShiftRight",
    pygame.K_RETURN: "Enter",
    pygame.K_KP_ENTER: "NumpadEnter",
    pygame.K_ESCAPE: "Escape",
    pygame.K_TAB: "Tab",
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}


def key_code(key: int) -> str:
    """Translate a pygame key constant into a DOM-style code.

    Letters become "KeyA".."KeyZ", digits "Digit0".."Digit9"; anything else
    not in KEY_CODES falls back to pygame's own key name.
    """
    if key in KEY_CODES:
        return KEY_CODES[key]
    name = pygame.key.name(key)
    if len(name) == 1 and name.isalpha():
        return f"Key{name.upper()}"
    if len(name) == 1 and name.isdigit():
        return f"Digit{name}"
    return name.title().replace(' ', '')


class PygameInputSource(InputSource):
    """Keyboard and mouse input from the pygame event queue.

    Only the left mouse button counts as the fire pointer. Closing the window
    or calling pygame.QUIT produces an InputEventType.QUIT event.

    Examples:
        >>> pygame.init()
        >>> source = PygameInputSource()
        >>> source.update(0.016)  # Drain pygame's event queue
        >>> events = source.poll_events()
    """

    def __init__(self):
        """Initialize the pygame input source."""
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Return events collected since the last poll and clear the queue."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Drain pygame's event queue and translate what the game cares about.

        Args:
            dt: Delta time in seconds since last update (unused)
        """
        for event in pygame.event.get():
            translated = self.translate(event)
            if translated is not None:
                self._event_queue.append(translated)

    def translate(self, event) -> Optional[InputEvent]:
        """Translate one pygame event, or return None if it is not relevant."""
        if event.type == pygame.QUIT:
            return InputEvent(InputEventType.QUIT)
        if event.type == pygame.KEYDOWN:
            return InputEvent(InputEventType.KEY_DOWN, code=key_code(event.key))
        if event.type == pygame.KEYUP:
            return InputEvent(InputEventType.KEY_UP, code=key_code(event.key))
        if event.type == pygame.MOUSEMOTION:
            return InputEvent(InputEventType.POINTER_MOVE, position=_float_pos(event.pos))
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return InputEvent(InputEventType.POINTER_DOWN, position=_float_pos(event.pos))
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return InputEvent(InputEventType.POINTER_UP, position=_float_pos(event.pos))
        return None

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()


def _float_pos(pos) -> tuple:
    # pygame gives ints
    return (float(pos[0]), float(pos[1]))
