"""
Where input events come from.

An InputSource turns some backend (the pygame event queue, a scripted
replay) into InputEvents. InputManager owns exactly one source and folds
its events into an InputState once per frame.
"""

from abc import ABC, abstractmethod
from typing import List

from avoider.games.input.input_event import InputEvent


class InputSource(ABC):
    """A backend feeding keyboard, pointer and quit events into the game.

    InputManager calls update(dt) and then poll_events() exactly once per
    frame, in that order.
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Hand over the events gathered by the last update() and forget them."""
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Gather this frame's events from the backend.

        Args:
            dt: Seconds since the previous frame
        """
        pass
