"""Events that drive an animation from a host event loop.

A host (UI framework, game loop) turns its frame callbacks into ``Tick``
events and user actions into ``SetState`` events, then hands them to
``Animation.update``. When ``poll_event`` reports ``Finished`` the host can
stop requesting frames for that animation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from tweenr.core.animation.state import AnimationState

if TYPE_CHECKING:
    from tweenr.core.animation.driver import Animation


@dataclass(frozen=True)
class Tick:
    """Advance the animation to ``timestamp`` (monotonic seconds)."""

    timestamp: float


@dataclass(frozen=True)
class SetState:
    """Pause or resume the animation."""

    state: AnimationState


@dataclass(frozen=True)
class Finished:
    """The animation has run for its full duration."""


AnimationEvent: TypeAlias = Tick | SetState | Finished


def poll_event(animation: Animation[Any], now: float) -> AnimationEvent:
    """Get the next event a host should deliver to ``animation``.

    Args:
        animation: Animation being driven.
        now: Current monotonic time in seconds.

    Returns:
        ``Finished`` once the animation is complete, otherwise a ``Tick`` at
        ``now``.
    """
    if animation.is_finished():
        return Finished()
    return Tick(now)
