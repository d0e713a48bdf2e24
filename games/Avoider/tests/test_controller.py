"""
Tests for the frame controller and the fixed-step loop.

Tests cover:
- FixedStepLoop step counting, capping and carry-over
- Controller.update_game() with scripted input
- Invalid frame deltas
- Pointer-driven ship movement
- Key presses consumed once per step
- Render layer failures
- Quit handling
"""

import math

import pytest

from avoider.games.game_state import GameState, PlayState
from avoider.games.input.input_event import InputEvent, InputEventType
from avoider.games.input.input_manager import InputManager
from avoider.games.input.sources.scripted import ScriptedInputSource
from games.Avoider.controller import Controller, FixedStepLoop
from games.Avoider.renderer import RenderLayer

STEP = 1 / 60


@pytest.fixture
def source():
    return ScriptedInputSource()


@pytest.fixture
def controller(session, source, audio):
    return Controller(session, InputManager(source), audio)


class FakeRenderer:
    """Renderer stand-in holding a list of layers and no surface."""

    def __init__(self, layers):
        self.layers = layers
        self.surface = None


class TestFixedStepLoop:
    """Test the fixed-step accumulator."""

    def test_invalid_construction(self):
        with pytest.raises(ValueError):
            FixedStepLoop(step=0)
        with pytest.raises(ValueError):
            FixedStepLoop(max_frame_time=-1)

    def test_counts_steps(self):
        loop = FixedStepLoop(step=STEP)
        steps = []
        assert loop.advance(3 * STEP, steps.append) == 3
        assert steps == [STEP] * 3

    def test_short_frames_carry_over(self):
        """Test partial steps accumulate across frames."""
        loop = FixedStepLoop(step=STEP)
        assert loop.advance(STEP / 2, lambda dt: None) == 0
        assert loop.alpha == pytest.approx(0.5)
        assert loop.advance(STEP / 2, lambda dt: None) == 1

    def test_long_frame_capped(self):
        loop = FixedStepLoop(step=0.1, max_frame_time=0.25)
        assert loop.advance(10.0, lambda dt: None) == 2

    def test_negative_frame_time(self):
        with pytest.raises(ValueError):
            FixedStepLoop().advance(-0.01, lambda dt: None)

    def test_reset(self):
        loop = FixedStepLoop(step=STEP)
        loop.advance(STEP / 2, lambda dt: None)
        loop.reset()
        assert loop.accumulator == 0.0


class TestUpdateGame:
    """Test single-step frames."""

    def test_space_starts_game(self, controller, source, session):
        source.press(session.consts.play_key)
        controller.update_game(STEP)
        assert session.state is GameState.PLAY
        assert controller.frames == 1

    def test_press_cleared_after_frame(self, controller, source, session):
        source.press(session.consts.play_key)
        controller.update_game(STEP)
        assert not controller.inputs.is_key_pressed(session.consts.play_key)
        assert controller.inputs.is_key_down(session.consts.play_key)

    @pytest.mark.parametrize("delta", [-1.0, 0.0, math.nan, math.inf, "fast", True])
    def test_invalid_delta_uses_fixed_step(self, controller, playing, delta, capsys):
        """Test a bad delta is replaced by the fixed step and logged."""
        controller.update_game(delta)
        assert playing.game_clock.elapsed_time == pytest.approx(playing.consts.fixed_step)
        assert "Invalid frame delta" in capsys.readouterr().out

    def test_pointer_moves_ship(self, controller, source, session):
        source.move_pointer(200, 300)
        controller.update_game(STEP)
        assert session.player.body.position.as_tuple == (200.0, 300.0)

    def test_still_pointer_leaves_ship(self, controller, source, session):
        source.move_pointer(200, 300)
        controller.update_game(STEP)
        session.player.body.move_to(50, 50)
        controller.update_game(STEP)
        assert session.player.body.position.as_tuple == (50, 50)

    def test_pointer_click_fires(self, controller, source, playing):
        playing.ammo = 2
        playing.play_state = PlayState.SHOOT
        source.pointer_down(400, 400)
        controller.update_game(STEP)
        assert playing.ammo == 1
        assert len(playing.projectiles) == 1

    def test_quit(self, controller, source):
        source.inject(InputEvent(InputEventType.QUIT))
        controller.update_game(STEP)
        assert controller.running is False


class TestTick:
    """Test frames through the fixed-step loop."""

    def test_runs_fixed_steps(self, controller, playing):
        assert controller.tick(3 * STEP) == 3
        assert playing.game_clock.elapsed_time == pytest.approx(3 * STEP)

    def test_press_seen_by_one_step_only(self, controller, source, playing):
        """Test a pause press isn't read again by the next step (which would resume)."""
        source.press(playing.consts.pause_key)
        assert controller.tick(2 * STEP) == 2
        assert playing.state is GameState.PAUSE

    def test_press_carries_to_next_frame(self, controller, source, session):
        """Test a press in a frame too short for a step isn't lost."""
        source.press(session.consts.play_key)
        assert controller.tick(STEP / 2) == 0
        assert session.state is GameState.INIT
        assert controller.tick(STEP / 2) == 1
        assert session.state is GameState.PLAY

    def test_zero_frame_time(self, controller, capsys):
        assert controller.tick(0) == 0
        assert "Invalid frame time" not in capsys.readouterr().out

    def test_invalid_frame_time_skipped(self, controller, capsys):
        assert controller.tick(math.nan) == 0
        assert "Invalid frame time" in capsys.readouterr().out


class TestRender:
    """Test layer rendering through the controller."""

    def test_failing_layer_skipped(self, session, source, capsys):
        drawn = []

        def broken(surface, s):
            raise RuntimeError("boom")

        renderer = FakeRenderer([
            RenderLayer('broken', broken),
            RenderLayer('ok', lambda surface, s: drawn.append(s)),
        ])
        controller = Controller(session, InputManager(source), renderer=renderer)
        controller.update_game(STEP)
        assert drawn == [session]
        out = capsys.readouterr().out
        assert "Render layer 'broken' failed" in out
        assert "RuntimeError: boom" in out

    def test_disabled_layer_not_drawn(self, session, source):
        drawn = []
        renderer = FakeRenderer([RenderLayer('off', lambda surface, s: drawn.append(s),
                                             enabled=False)])
        Controller(session, InputManager(source), renderer=renderer).update_game(STEP)
        assert drawn == []

    def test_headless(self, controller):
        controller.render()
