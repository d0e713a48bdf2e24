"""
Tests for the frame-driven Timer.

Tests cover:
- Countdown one-shot and looping behavior
- Count-up accumulation and looping
- Start / stop / reset
- progress and formatted
- Validation of negative durations and deltas
"""

import pytest

from avoider.games.timer import Timer, TimerMode


class TestCountdown:
    """Test countdown timers."""

    def test_inactive_until_started(self):
        """Test a new timer doesn't run or signal."""
        timer = Timer("shield", 3.0)
        assert not timer.active
        assert timer.update(5.0) is False
        assert timer.time_left == 3.0

    def test_signals_once_then_deactivates(self):
        """Test a one-shot countdown signals exactly on completion."""
        timer = Timer("shield", 3.0)
        timer.start()
        assert timer.update(1.0) is False
        assert timer.update(1.0) is False
        assert timer.update(1.0) is True
        assert not timer.active
        assert timer.update(1.0) is False

    def test_time_left_never_negative(self):
        """Test overshooting clamps time_left at zero."""
        timer = Timer("shield", 1.0)
        timer.start()
        timer.update(2.5)
        assert timer.time_left == 0.0

    def test_loop_keeps_overflow(self):
        """Test a looping countdown wraps and keeps the overshoot."""
        timer = Timer("blink", 1.0, TimerMode.COUNTDOWN, loop=True)
        timer.start()
        assert timer.update(1.25) is True
        assert timer.active
        assert timer.time_left == pytest.approx(0.75)

    def test_zero_duration_fires_on_first_update(self):
        """Test a zero-length countdown completes immediately."""
        timer = Timer("cooldown")
        timer.start()
        assert timer.update(0.0) is True
        assert not timer.active

    @pytest.mark.parametrize("steps, delta", [(10, 0.1), (1, 1.0), (60, 1 / 60), (3, 1 / 3)])
    def test_chunking_keeps_completion_frame(self, steps, delta):
        """Test a countdown finishes on the last chunk however the second is split."""
        timer = Timer("shield", 1.0)
        timer.start()
        fired = [i for i in range(1, steps + 2) if timer.update(delta)]
        assert fired == [steps]
        assert timer.time_left == 0.0

    def test_loop_chunking_keeps_cycle(self):
        """Test a looping countdown completes every ten 0.1s frames."""
        timer = Timer("blink", 1.0, TimerMode.COUNTDOWN, loop=True)
        timer.start()
        fired = [i for i in range(1, 31) if timer.update(0.1)]
        assert fired == [10, 20, 30]
        assert timer.time_left >= 0.0

    def test_progress(self):
        """Test progress goes from 0 to 1 over the countdown."""
        timer = Timer("shield", 4.0)
        timer.start()
        assert timer.progress == 0.0
        timer.update(1.0)
        assert timer.progress == pytest.approx(0.25)
        timer.update(10.0)
        assert timer.progress == 1.0


class TestCountUp:
    """Test count-up timers."""

    def test_accumulates_without_signal(self):
        """Test a non-looping count-up never signals."""
        clock = Timer("clock", 0.0, TimerMode.COUNTUP)
        clock.start()
        for _ in range(10):
            assert clock.update(1.0) is False
        assert clock.elapsed_time == pytest.approx(10.0)

    def test_loop_wraps_by_subtraction(self):
        """Test a looping count-up signals and subtracts the duration."""
        timer = Timer("ramp", 2.0, TimerMode.COUNTUP, loop=True)
        timer.start()
        assert timer.update(1.5) is False
        assert timer.update(1.0) is True
        assert timer.elapsed_time == pytest.approx(0.5)

    def test_loop_chunking_keeps_cycle(self):
        """Test a looping count-up wraps on the tenth 0.1s frame, never below zero."""
        timer = Timer("ramp", 1.0, TimerMode.COUNTUP, loop=True)
        timer.start()
        fired = [i for i in range(1, 21) if timer.update(0.1)]
        assert fired == [10, 20]
        assert timer.elapsed_time >= 0.0

    def test_formatted(self):
        """Test M:SS formatting of elapsed time."""
        clock = Timer("clock", 0.0, TimerMode.COUNTUP)
        clock.start()
        assert clock.formatted == "0:00"
        clock.update(65.9)
        assert clock.formatted == "1:05"
        clock.update(600.0)
        assert clock.formatted == "11:05"


class TestControl:
    """Test start, stop and reset."""

    def test_stop_freezes(self):
        """Test stop() halts the timer and keeps its value."""
        timer = Timer("shield", 3.0)
        timer.start()
        timer.update(1.0)
        timer.stop()
        assert timer.update(1.0) is False
        assert timer.time_left == pytest.approx(2.0)

    def test_reset_reconfigures_and_starts(self):
        """Test reset() changes duration/mode/loop and starts the timer."""
        timer = Timer("cooldown")
        timer.reset(0.2, TimerMode.COUNTDOWN, False)
        assert timer.active
        assert timer.duration == 0.2
        assert timer.time_left == pytest.approx(0.2)

    def test_reset_keeps_unspecified_settings(self):
        """Test reset() with no args restarts the current configuration."""
        timer = Timer("blink", 1.0, TimerMode.COUNTDOWN, loop=True)
        timer.start()
        timer.update(0.5)
        timer.reset()
        assert timer.loop is True
        assert timer.time_left == pytest.approx(1.0)


class TestValidation:
    """Test invalid arguments."""

    def test_negative_duration(self):
        """Test a negative duration is rejected."""
        with pytest.raises(ValueError):
            Timer("bad", -1.0)

    def test_negative_delta(self):
        """Test a negative delta is rejected."""
        timer = Timer("shield", 3.0)
        timer.start()
        with pytest.raises(ValueError):
            timer.update(-0.1)
