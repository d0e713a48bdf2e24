"""
Tests for InputManager and the input sources.

Tests cover:
- Construction with and without sources
- Source switching and type checking
- Folding source events into the InputState
- ScriptedInputSource frame replay and injection
- PygameInputSource event translation and key codes
"""

import pygame
import pytest
from typing import List

from avoider.games.input.input_event import InputEvent, InputEventType
from avoider.games.input.input_manager import InputManager
from avoider.games.input.sources.base import InputSource
from avoider.games.input.sources.pygame_source import PygameInputSource, key_code
from avoider.games.input.sources.scripted import ScriptedInputSource


class MockInputSource(InputSource):
    """Mock implementation of InputSource for testing."""

    def __init__(self):
        self.events: List[InputEvent] = []
        self.update_count = 0
        self.last_dt = None

    def poll_events(self) -> List[InputEvent]:
        events = self.events.copy()
        self.events.clear()
        return events

    def update(self, dt: float) -> None:
        self.update_count += 1
        self.last_dt = dt


class NotAnInputSource:
    """Class that does not inherit from InputSource."""
    pass


class TestInputManagerSources:
    """Test InputManager source management."""

    def test_construction_without_source(self):
        """Test creating InputManager with no source."""
        manager = InputManager()
        assert manager.get_source() is None
        assert not manager.has_source()

    def test_construction_with_source(self):
        """Test creating InputManager with an initial source."""
        source = MockInputSource()
        manager = InputManager(source)
        assert manager.get_source() is source
        assert manager.has_source()

    def test_set_source_rejects_non_sources(self):
        """Test set_source raises TypeError for the wrong type."""
        manager = InputManager()
        with pytest.raises(TypeError) as exc_info:
            manager.set_source(NotAnInputSource())
        assert 'NotAnInputSource' in str(exc_info.value)

    def test_constructor_rejects_non_sources(self):
        """Test the constructor applies the same check."""
        with pytest.raises(TypeError):
            InputManager(NotAnInputSource())

    def test_switch_source(self):
        """Test switching to another source."""
        manager = InputManager(MockInputSource())
        other = MockInputSource()
        manager.set_source(other)
        assert manager.get_source() is other


class TestInputManagerUpdate:
    """Test InputManager.update and frame handling."""

    def test_update_without_source_is_safe(self):
        """Test update with no source returns no events."""
        assert InputManager().update(0.016) == []

    def test_update_delegates_and_applies(self):
        """Test update calls the source and folds events into state."""
        source = MockInputSource()
        source.events.append(InputEvent(InputEventType.KEY_DOWN, code="Space"))
        manager = InputManager(source)
        events = manager.update(0.016)
        assert source.update_count == 1
        assert source.last_dt == 0.016
        assert len(events) == 1
        assert manager.state.is_key_pressed("Space")

    def test_end_frame_clears_edges(self):
        """Test end_frame clears pressed flags only."""
        source = MockInputSource()
        source.events.append(InputEvent(InputEventType.KEY_DOWN, code="Space"))
        manager = InputManager(source)
        manager.update(0.016)
        manager.end_frame()
        assert not manager.state.is_key_pressed("Space")
        assert manager.state.is_key_down("Space")

    def test_clear_events(self):
        """Test clear_events drops pending events and held keys."""
        source = MockInputSource()
        source.events.append(InputEvent(InputEventType.KEY_DOWN, code="Space"))
        manager = InputManager(source)
        manager.update(0.016)
        source.events.append(InputEvent(InputEventType.KEY_DOWN, code="Enter"))
        manager.clear_events()
        assert source.events == []
        assert not manager.state.is_key_down("Space")


class TestScriptedInputSource:
    """Test the scripted source."""

    def test_frames_release_in_order(self):
        """Test each update releases exactly one scripted frame."""
        source = ScriptedInputSource([
            [InputEvent(InputEventType.KEY_DOWN, code="Space")],
            [],
            [InputEvent(InputEventType.KEY_UP, code="Space")],
        ])
        codes = []
        for _ in range(4):
            source.update(1 / 60)
            codes.append([e.code for e in source.poll_events()])
        assert codes == [["Space"], [], ["Space"], []]
        assert source.exhausted
        assert source.frames_consumed == 3

    def test_injected_events(self):
        """Test helper injections arrive on the next poll."""
        source = ScriptedInputSource()
        source.tap("Space")
        source.move_pointer(100, 200)
        source.pointer_down(100, 200)
        kinds = [e.event_type for e in source.poll_events()]
        assert kinds == [
            InputEventType.KEY_DOWN,
            InputEventType.KEY_UP,
            InputEventType.POINTER_MOVE,
            InputEventType.POINTER_DOWN,
        ]
        assert source.poll_events() == []

    def test_add_frame(self):
        """Test frames can be appended after construction."""
        source = ScriptedInputSource()
        source.add_frame([InputEvent(InputEventType.QUIT)])
        source.update(1 / 60)
        assert source.poll_events()[0].event_type is InputEventType.QUIT


class TestPygameInputSource:
    """Test pygame event translation (no window needed)."""

    @pytest.fixture(autouse=True)
    def pygame_init(self):
        pygame.init()
        yield
        pygame.quit()

    def test_key_codes(self):
        """Test pygame keys map to DOM-style codes."""
        assert key_code(pygame.K_SPACE) == "Space"
        assert key_code(pygame.K_LCTRL) == "ControlLeft"
        assert key_code(pygame.K_RETURN) == "Enter"
        assert key_code(pygame.K_p) == "KeyP"
        assert key_code(pygame.K_5) == "Digit5"

    def test_translate_keyboard(self):
        """Test key events translate with codes."""
        source = PygameInputSource()
        event = source.translate(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        assert event.event_type is InputEventType.KEY_DOWN
        assert event.code == "Space"

    def test_translate_mouse(self):
        """Test left mouse events translate with float positions."""
        source = PygameInputSource()
        down = source.translate(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 20)))
        assert down.event_type is InputEventType.POINTER_DOWN
        assert down.position == (10.0, 20.0)
        moved = source.translate(pygame.event.Event(pygame.MOUSEMOTION, pos=(30, 40), rel=(1, 1), buttons=(0, 0, 0)))
        assert moved.event_type is InputEventType.POINTER_MOVE

    def test_right_button_ignored(self):
        """Test only the left button fires."""
        source = PygameInputSource()
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 20))
        assert source.translate(event) is None

    def test_update_drains_queue(self):
        """Test update collects posted pygame events."""
        source = PygameInputSource()
        pygame.event.clear()
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        source.update(0.016)
        events = source.poll_events()
        assert InputEventType.QUIT in [e.event_type for e in events]
