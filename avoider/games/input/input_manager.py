"""
Input manager for Avoider.

This module provides the InputManager class that owns the active input source
and the InputState that game logic reads every frame.
"""

from typing import List, Optional

from avoider.games.input.input_event import InputEvent
from avoider.games.input.input_state import InputState
from avoider.games.input.sources.base import InputSource


class InputManager:
    """Manages the active input source and the per-frame input state.

    The manager allows switching between input sources (pygame for play,
    scripted for tests and demos) at runtime without changing game logic.
    Only one input source can be active at a time.

    Attributes:
        state: The InputState built from the source's events

    Examples:
        >>> from avoider.games.input.sources.scripted import ScriptedInputSource
        >>> manager = InputManager(ScriptedInputSource())
        >>> manager.update(0.016)
        >>> manager.state.is_key_pressed("Space")
        False
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize the input manager with an optional input source.

        Args:
            source: The initial input source, or None to start with no source
        """
        self._source: Optional[InputSource] = None
        self.state = InputState()
        if source is not None:
            self.set_source(source)

    def set_source(self, source: InputSource) -> None:
        """Set or change the active input source.

        Args:
            source: The new input source to use

        Raises:
            TypeError: If source is not an instance of InputSource
        """
        if not isinstance(source, InputSource):
            raise TypeError(
                f"source must be an instance of InputSource, got {type(source).__name__}"
            )
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source, or None."""
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def update(self, dt: float) -> List[InputEvent]:
        """Update the source and fold its new events into the state.

        Safe to call even if no source is active.

        Args:
            dt: Delta time in seconds since last update

        Returns:
            The events applied this frame
        """
        if self._source is None:
            return []
        self._source.update(dt)
        events = self._source.poll_events()
        self.state.apply_all(events)
        return events

    def end_frame(self) -> None:
        """Clear per-frame pressed/released flags."""
        self.state.clear_frame_keys()

    def clear_events(self) -> None:
        """Discard pending events and forget held keys.

        Useful when the window loses focus to avoid stuck keys.
        """
        if self._source is not None:
            self._source.poll_events()
        self.state.reset()
