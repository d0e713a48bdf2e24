"""
Scripted input source for headless runs and tests.

Feeds a predetermined sequence of per-frame event batches into the game,
so a whole session can be replayed without a window.
"""

from collections import deque
from typing import Iterable, List, Optional

from avoider.games.input.input_event import InputEvent, InputEventType
from avoider.games.input.sources.base import InputSource


class ScriptedInputSource(InputSource):
    """Input source that replays scripted frames.

    Each call to update() releases the next scripted frame's events. Events
    injected directly (press(), release(), move_pointer(), ...) are delivered
    on the next poll regardless of the script.

    Attributes:
        frames_consumed: Number of scripted frames released so far

    Examples:
        >>> source = ScriptedInputSource([
        ...     [InputEvent(InputEventType.KEY_DOWN, code="Space")],
        ...     [InputEvent(InputEventType.KEY_UP, code="Space")],
        ... ])
        >>> source.update(1 / 60)
        >>> [e.code for e in source.poll_events()]
        ['Space']
    """

    def __init__(self, frames: Optional[Iterable[Iterable[InputEvent]]] = None):
        self._frames = deque(list(frame) for frame in (frames or []))
        self._pending: List[InputEvent] = []
        self.frames_consumed = 0

    @property
    def exhausted(self) -> bool:
        """True once every scripted frame has been released."""
        return not self._frames

    def add_frame(self, events: Iterable[InputEvent]) -> None:
        """Append a frame of events to the end of the script."""
        self._frames.append(list(events))

    def inject(self, event: InputEvent) -> None:
        """Deliver an event on the next poll."""
        self._pending.append(event)

    def press(self, code: str) -> None:
        """Inject a key down."""
        self.inject(InputEvent(InputEventType.KEY_DOWN, code=code))

    def release(self, code: str) -> None:
        """Inject a key up."""
        self.inject(InputEvent(InputEventType.KEY_UP, code=code))

    def tap(self, code: str) -> None:
        """Inject a key down followed by a key up in the same frame."""
        self.press(code)
        self.release(code)

    def move_pointer(self, x: float, y: float) -> None:
        """Inject a pointer move."""
        self.inject(InputEvent(InputEventType.POINTER_MOVE, position=(x, y)))

    def pointer_down(self, x: float, y: float) -> None:
        """Inject a primary button press at (x, y)."""
        self.inject(InputEvent(InputEventType.POINTER_DOWN, position=(x, y)))

    def pointer_up(self, x: float, y: float) -> None:
        """Inject a primary button release at (x, y)."""
        self.inject(InputEvent(InputEventType.POINTER_UP, position=(x, y)))

    def update(self, dt: float) -> None:
        """Release the next scripted frame, if any."""
        if self._frames:
            self._pending.extend(self._frames.popleft())
            self.frames_consumed += 1

    def poll_events(self) -> List[InputEvent]:
        """Return pending events and clear them."""
        events = self._pending
        self._pending = []
        return events
