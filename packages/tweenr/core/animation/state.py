"""Run state of an animation."""

from __future__ import annotations

from enum import Enum


class AnimationState(str, Enum):
    """Whether an animation is advancing or frozen.

    Negating (``-state`` or ``~state``) gives the opposite state.
    """

    RUNNING = "running"
    PAUSED = "paused"

    def toggled(self) -> AnimationState:
        if self is AnimationState.RUNNING:
            return AnimationState.PAUSED
        return AnimationState.RUNNING

    def __neg__(self) -> AnimationState:
        return self.toggled()

    def __invert__(self) -> AnimationState:
        return self.toggled()
