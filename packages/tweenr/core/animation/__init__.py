"""Animation driver, run state, host events and interpolation."""

from tweenr.core.animation.animatable import Animatable, ensure_animatable, is_animatable, lerp
from tweenr.core.animation.driver import Animation, get_monotonic_time
from tweenr.core.animation.events import AnimationEvent, Finished, SetState, Tick, poll_event
from tweenr.core.animation.state import AnimationState
from tweenr.core.animation.values import (
    AnimatableModel,
    Border,
    Color,
    Padding,
    Point,
    Radius,
    Rectangle,
    Size,
    Vector,
)

__all__ = [
    "Animatable",
    "AnimatableModel",
    "Animation",
    "AnimationEvent",
    "AnimationState",
    "Border",
    "Color",
    "Finished",
    "Padding",
    "Point",
    "Radius",
    "Rectangle",
    "SetState",
    "Size",
    "Tick",
    "Vector",
    "ensure_animatable",
    "get_monotonic_time",
    "is_animatable",
    "lerp",
    "poll_event",
]
