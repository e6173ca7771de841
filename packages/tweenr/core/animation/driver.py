"""Animation driver.

An ``Animation`` holds the endpoints, curve, run state and timestamps of a
single animated value. The host calls ``tick`` with a monotonic timestamp on
every frame and reads ``value``; the driver owns no clock or loop.
"""

from __future__ import annotations

import logging
import time
from typing import Generic, Self, TypeVar

from tweenr.core.animation.animatable import ensure_animatable, lerp
from tweenr.core.animation.events import AnimationEvent, Finished, SetState, Tick
from tweenr.core.animation.state import AnimationState
from tweenr.core.curves.spring import SpringCurve
from tweenr.core.curves.variant import (
    DEFAULT_CURVE,
    AnimationCurve,
    curve_duration,
    curve_progress,
)
from tweenr.core.utils.math import clamp, safe_ratio

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_monotonic_time() -> float:
    """Current monotonic time in seconds."""
    return time.monotonic()


class Animation(Generic[T]):
    """A value animated from ``start`` to ``end`` along a curve.

    Args:
        start: Value at the beginning of the animation.
        end: Value at the end of the animation.
        duration: Duration in seconds (>= 0). Replaced by the spring's own
            duration when a spring curve is set.
        now: Creation timestamp; defaults to ``get_monotonic_time()``.

    Raises:
        TypeError: If the value type cannot be interpolated.
        ValueError: If ``duration`` is negative.

    Example:
        >>> anim = Animation(0.0, 100.0, 1.0, now=0.0)
        >>> anim.tick(0.5)
        >>> anim.value
        50.0
    """

    def __init__(self, start: T, end: T, duration: float, *, now: float | None = None) -> None:
        ensure_animatable(start)
        ensure_animatable(end)
        _check_duration(duration)

        self.start = start
        self.end = end
        self._value = start
        self._state = AnimationState.RUNNING
        self._curve: AnimationCurve = DEFAULT_CURVE
        self._duration = float(duration)

        now = get_monotonic_time() if now is None else now
        self._started_at = now
        self._last_tick = now

    def __repr__(self) -> str:
        return (
            f"Animation(start={self.start!r}, end={self.end!r}, value={self._value!r}, "
            f"state={self._state.value}, duration={self._duration})"
        )

    @property
    def value(self) -> T:
        """Value computed by the most recent tick."""
        return self._value

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def curve(self) -> AnimationCurve:
        return self._curve

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def started_at(self) -> float:
        return self._started_at

    @property
    def last_tick(self) -> float:
        return self._last_tick

    def set_state(self, state: AnimationState) -> None:
        if state is not self._state:
            logger.debug("Animation %s -> %s", self._state.value, state.value)
        self._state = AnimationState(state)

    def set_duration(self, duration: float) -> None:
        """Set the duration in seconds.

        Ignored while the curve is a spring, whose duration is derived from
        its parameters.
        """
        _check_duration(duration)
        if isinstance(self._curve, SpringCurve):
            logger.debug("Ignoring duration %s for spring curve", duration)
            return
        self._duration = float(duration)

    def set_curve(self, curve: AnimationCurve) -> None:
        """Set the curve; a spring also replaces the duration with its own."""
        self._curve = curve
        self._duration = curve_duration(curve, self._duration)

    def with_state(self, state: AnimationState) -> Self:
        self.set_state(state)
        return self

    def with_duration(self, duration: float) -> Self:
        self.set_duration(duration)
        return self

    def with_curve(self, curve: AnimationCurve) -> Self:
        self.set_curve(curve)
        return self

    def restart(self, now: float | None = None) -> None:
        """Start over from ``now``; the value and state are left alone."""
        now = get_monotonic_time() if now is None else now
        self._started_at = now
        self._last_tick = now

    def tick(self, now: float) -> None:
        """Advance the animation to ``now`` (monotonic seconds).

        While paused the start time moves along with the clock, so the
        elapsed time and the value stay frozen.
        """
        if self._state is AnimationState.PAUSED:
            self._started_at += now - self._last_tick
            self._last_tick = now
            return

        elapsed = now - self._started_at
        progress = curve_progress(self._curve, elapsed, self._duration)
        self._value = lerp(self.start, self.end, progress)
        self._last_tick = now

    def is_finished(self) -> bool:
        return self._last_tick - self._started_at >= self._duration

    def time_progress(self) -> float:
        """Elapsed fraction of the duration at the last tick, in [0, 1]."""
        elapsed = self._last_tick - self._started_at
        return clamp(safe_ratio(elapsed, self._duration, default=1.0), 0.0, 1.0)

    def update(self, event: AnimationEvent) -> None:
        """Apply an event delivered by the host."""
        match event:
            case Tick(timestamp=timestamp):
                self.tick(timestamp)
            case SetState(state=state):
                self.set_state(state)
            case Finished():
                pass
            case _:
                raise TypeError(f"Unsupported animation event: {event!r}")


def _check_duration(duration: float) -> None:
    if not duration >= 0.0:
        raise ValueError(f"duration must be >= 0, got {duration}")
