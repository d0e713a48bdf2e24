"""
Frame controller and fixed-step game loop for Avoider.

Controller.update_game() runs one complete frame: poll input, move the ship
to the pointer, step the state machine, draw every render layer and clear the
per-frame key flags. Controller.tick() does the same around a FixedStepLoop so
the simulation advances in constant steps whatever the display frame rate.
"""

import math
from typing import Callable, Optional

from avoider.games.input.input_manager import InputManager
from avoider.logging import get_logger

from games.Avoider.session import GameSession
from games.Avoider.sounds import NullAudio, SoundPlayer
from games.Avoider.state_machine import update_game_states

log = get_logger('controller')


def _valid_delta(delta) -> bool:
    return (isinstance(delta, (int, float)) and not isinstance(delta, bool)
            and math.isfinite(delta) and delta > 0)


class FixedStepLoop:
    """Accumulator that turns variable frame times into fixed steps.

    Frame times above max_frame_time are capped so a long stall (window
    drag, breakpoint) doesn't trigger a burst of catch-up steps.

    Examples:
        >>> loop = FixedStepLoop(step=1 / 60, max_frame_time=0.25)
        >>> loop.advance(1 / 30, lambda dt: None)
        2
    """

    def __init__(self, step: float = 1.0 / 60.0, max_frame_time: float = 0.25):
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        if max_frame_time <= 0:
            raise ValueError(f"max_frame_time must be positive, got {max_frame_time}")
        self.step = step
        self.max_frame_time = max_frame_time
        self.accumulator = 0.0

    @property
    def alpha(self) -> float:
        """Fraction of a step left over in the accumulator."""
        return self.accumulator / self.step

    def advance(self, frame_time: float, update: Callable[[float], None]) -> int:
        """Accumulate frame_time and run as many fixed updates as fit.

        Returns:
            Number of updates run
        """
        if frame_time < 0:
            raise ValueError(f"frame_time must be non-negative, got {frame_time}")
        self.accumulator += min(frame_time, self.max_frame_time)
        steps = 0
        # Small epsilon so 1/60 + 1/60 + 1/60 still counts as three steps
        while self.accumulator + 1e-9 >= self.step:
            update(self.step)
            self.accumulator = max(0.0, self.accumulator - self.step)
            steps += 1
        return steps

    def reset(self) -> None:
        self.accumulator = 0.0


class Controller:
    """Drives one GameSession frame by frame.

    Attributes:
        session: The game being played
        input_manager: Source of keyboard/pointer state
        audio: Sound effect sink
        renderer: Anything with a `layers` list of RenderLayers, or None for headless
        running: Becomes False once the input source reports QUIT

    Examples:
        >>> controller = Controller(session, InputManager(ScriptedInputSource()))
        >>> controller.update_game(1 / 60)
    """

    def __init__(self, session: GameSession, input_manager: InputManager,
                 audio: Optional[SoundPlayer] = None, renderer=None):
        self.session = session
        self.input_manager = input_manager
        self.audio = audio if audio is not None else NullAudio()
        self.renderer = renderer
        self.loop = FixedStepLoop(session.consts.fixed_step, session.consts.max_frame_time)
        self.running = True
        self.frames = 0

    @property
    def inputs(self):
        return self.input_manager.state

    def update_game(self, delta: float) -> None:
        """Run one frame with a single state machine step of `delta` seconds.

        A delta that is not a positive number is replaced by the fixed step.
        """
        if not _valid_delta(delta):
            log.warning("Invalid frame delta %r, using %.4f", delta, self.session.consts.fixed_step)
            delta = self.session.consts.fixed_step

        self._begin_frame(delta)
        update_game_states(self.session, self.inputs, self.audio, delta)
        self._end_frame(consumed=True)

    def tick(self, frame_time: float) -> int:
        """Run one display frame through the fixed-step loop.

        Key presses are consumed by the first step that sees them; if no step
        fits in this frame they carry over to the next.

        Returns:
            Number of state machine steps run
        """
        if frame_time != 0 and not _valid_delta(frame_time):
            log.warning("Invalid frame time %r, skipping", frame_time)
            frame_time = 0.0

        self._begin_frame(frame_time)
        steps = self.loop.advance(frame_time, self._step)
        self._end_frame(consumed=steps > 0)
        return steps

    def _step(self, dt: float) -> None:
        update_game_states(self.session, self.inputs, self.audio, dt)
        # Edges only count once per press
        self.input_manager.end_frame()

    def _begin_frame(self, delta: float) -> None:
        self.input_manager.update(delta)
        if self.inputs.quit_requested:
            self.running = False
        self.apply_pointer()

    def _end_frame(self, consumed: bool) -> None:
        self.render()
        if consumed:
            self.input_manager.end_frame()
        self.frames += 1

    def apply_pointer(self) -> None:
        """Move the ship to the pointer when it moved this frame."""
        if self.inputs.pointer_moved:
            x, y = self.inputs.pointer_pos
            self.session.player.body.move_to(x, y)

    def render(self) -> None:
        """Draw every layer. A failing layer is logged and skipped."""
        if self.renderer is None:
            return
        for layer in self.renderer.layers:
            try:
                layer.render(self.renderer.surface, self.session)
            except Exception:
                log.exception("Render layer '%s' failed", layer.name)
