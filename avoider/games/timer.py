"""
Frame-driven timers.

Timers never read the wall clock; they advance only by the delta passed to
update(). This keeps game logic deterministic for a given sequence of
frame deltas.

Classes:
    TimerMode: COUNTDOWN or COUNTUP
    Timer: Named timer with optional looping
"""

from enum import Enum

# Slack for float drift when deltas are summed (10 x 0.1 != 1.0)
_EPSILON = 1e-9


class TimerMode(Enum):
    """Direction a timer runs in."""
    COUNTDOWN = "countdown"
    COUNTUP = "countup"


class Timer:
    """Named countdown / count-up timer advanced by frame deltas.

    A countdown timer signals (update() returns True) on the frame its time
    runs out, then either wraps around (loop) or deactivates. A count-up timer
    accumulates elapsed time and only signals when looping with a positive
    duration.

    Timers are inactive until start() or reset() is called.

    Attributes:
        name: Identifier used in logs and lookups
        duration: Seconds for one cycle
        mode: TimerMode.COUNTDOWN or TimerMode.COUNTUP
        loop: Restart automatically when a cycle completes

    Examples:
        >>> shield = Timer("shieldTimer", 3.0)
        >>> shield.start()
        >>> shield.update(1.0)
        False
        >>> shield.time_left
        2.0
        >>> shield.update(2.5)
        True
        >>> shield.active
        False
    """

    def __init__(self, name: str, duration: float = 0.0,
                 mode: TimerMode = TimerMode.COUNTDOWN, loop: bool = False):
        if duration < 0:
            raise ValueError(f"Timer duration must be non-negative, got {duration}")
        self.name = name
        self.duration = float(duration)
        self.mode = mode
        self.loop = loop
        self._time_left = float(duration)
        self._elapsed_time = 0.0
        self._active = False

    @property
    def active(self) -> bool:
        """True while the timer is running."""
        return self._active

    @property
    def time_left(self) -> float:
        """Seconds remaining in a countdown, never negative."""
        return max(0.0, self._time_left)

    @property
    def elapsed_time(self) -> float:
        """Seconds accumulated by a count-up timer."""
        return self._elapsed_time

    @property
    def progress(self) -> float:
        """Fraction of the current cycle completed, in [0, 1]."""
        if self.mode is TimerMode.COUNTDOWN:
            if self.duration <= 0:
                return 1.0
            return min(1.0, max(0.0, 1.0 - self._time_left / self.duration))
        if self.duration <= 0:
            return 0.0
        return min(1.0, self._elapsed_time / self.duration)

    @property
    def formatted(self) -> str:
        """Elapsed time as M:SS (e.g. 2:05)."""
        total = int(self._elapsed_time)
        minutes, seconds = divmod(total, 60)
        return f"{minutes}:{seconds:02d}"

    def start(self) -> None:
        """Start the timer from the beginning of a cycle."""
        if self.mode is TimerMode.COUNTDOWN:
            self._time_left = self.duration
        else:
            self._elapsed_time = 0.0
        self._active = True

    def stop(self) -> None:
        """Stop the timer. Remaining/elapsed time is kept."""
        self._active = False

    def reset(self, duration: float = None, mode: TimerMode = None,
              loop: bool = None) -> None:
        """Re-configure the timer and start it.

        Args:
            duration: New cycle length in seconds (default: keep current)
            mode: New mode (default: keep current)
            loop: New loop flag (default: keep current)
        """
        if duration is not None:
            if duration < 0:
                raise ValueError(f"Timer duration must be non-negative, got {duration}")
            self.duration = float(duration)
        if mode is not None:
            self.mode = mode
        if loop is not None:
            self.loop = loop
        self.start()

    def update(self, delta: float) -> bool:
        """Advance the timer.

        Args:
            delta: Seconds since the last frame (must be non-negative)

        Returns:
            True exactly on the frame a cycle completes

        Raises:
            ValueError: If delta is negative
        """
        if delta < 0:
            raise ValueError(f"Timer delta must be non-negative, got {delta}")
        if not self._active:
            return False

        if self.mode is TimerMode.COUNTDOWN:
            self._time_left -= delta
            if self._time_left <= _EPSILON:
                if self.loop and self.duration > 0:
                    # Keep the overflow so looping timers don't drift
                    self._time_left = max(0.0, self._time_left + self.duration)
                else:
                    self._time_left = 0.0
                    self._active = False
                return True
            return False

        self._elapsed_time += delta
        if self.loop and self.duration > 0 and self._elapsed_time >= self.duration - _EPSILON:
            self._elapsed_time = max(0.0, self._elapsed_time - self.duration)
            return True
        return False

    def __repr__(self) -> str:
        return (f"Timer(name={self.name!r}, mode={self.mode.value}, "
                f"duration={self.duration}, active={self._active})")
