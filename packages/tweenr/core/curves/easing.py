"""Preset easing functions.

Polynomial, sine, circular and exponential families are backed by
easing-functions. Elastic, back and bounce follow the equations published on
https://easings.net, whose constants differ from easing-functions. The plain
``ease-in``, ``ease-out`` and ``ease-in-out`` presets are the CSS cubic-bezier
keywords.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
import math
from typing import Any, Protocol, TypeGuard, cast

from easing_functions import (
    CircularEaseIn,
    CircularEaseInOut,
    CircularEaseOut,
    CubicEaseIn,
    CubicEaseInOut,
    CubicEaseOut,
    ExponentialEaseIn,
    ExponentialEaseInOut,
    ExponentialEaseOut,
    QuadEaseIn,
    QuadEaseOut,
    QuarticEaseIn,
    QuarticEaseInOut,
    QuarticEaseOut,
    QuinticEaseIn,
    QuinticEaseInOut,
    QuinticEaseOut,
    SineEaseIn,
    SineEaseInOut,
    SineEaseOut,
)

from tweenr.core.curves.cubic import EASE_IN, EASE_IN_OUT, EASE_OUT
from tweenr.core.curves.keys import kebab_key


class Easing(str, Enum):
    """Preset easing curves, named as they appear in config files."""

    EASE_IN = "ease-in"
    EASE_IN_CUBIC = "ease-in-cubic"
    EASE_IN_OUT = "ease-in-out"
    EASE_IN_OUT_CUBIC = "ease-in-out-cubic"
    EASE_IN_OUT_QUART = "ease-in-out-quart"
    EASE_IN_OUT_QUINT = "ease-in-out-quint"
    EASE_IN_QUAD = "ease-in-quad"
    EASE_IN_QUART = "ease-in-quart"
    EASE_IN_QUINT = "ease-in-quint"
    EASE_OUT = "ease-out"
    EASE_OUT_CUBIC = "ease-out-cubic"
    EASE_OUT_QUAD = "ease-out-quad"
    EASE_OUT_QUART = "ease-out-quart"
    EASE_OUT_QUINT = "ease-out-quint"
    EASE_IN_SINE = "ease-in-sine"
    EASE_OUT_SINE = "ease-out-sine"
    EASE_IN_OUT_SINE = "ease-in-out-sine"
    EASE_IN_CIRC = "ease-in-circ"
    EASE_OUT_CIRC = "ease-out-circ"
    EASE_IN_OUT_CIRC = "ease-in-out-circ"
    EASE_IN_ELASTIC = "ease-in-elastic"
    EASE_OUT_ELASTIC = "ease-out-elastic"
    EASE_IN_OUT_ELASTIC = "ease-in-out-elastic"
    EASE_IN_EXPO = "ease-in-expo"
    EASE_OUT_EXPO = "ease-out-expo"
    EASE_IN_OUT_EXPO = "ease-in-out-expo"
    EASE_IN_BACK = "ease-in-back"
    EASE_OUT_BACK = "ease-out-back"
    EASE_IN_OUT_BACK = "ease-in-out-back"
    EASE_IN_BOUNCE = "ease-in-bounce"
    EASE_OUT_BOUNCE = "ease-out-bounce"
    EASE_IN_OUT_BOUNCE = "ease-in-out-bounce"
    LINEAR = "linear"

    @classmethod
    def _missing_(cls, value: object) -> Easing | None:
        # Accept "EaseInOut", "ease_in_out", "EASE-IN-OUT", ...
        if isinstance(value, str):
            key = kebab_key(value)
            for member in cls:
                if member.value == key:
                    return member
        return None

    def y(self, x: float) -> float:
        """Get the progress for a time fraction ``x`` in [0, 1].

        Both endpoints are pinned: ``y(0) == 0.0`` and ``y(1) == 1.0``.
        """
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        return _EASING_FUNCTIONS[self](x)


class _EaseMethodEasing(Protocol):
    def ease(self, t: float) -> float: ...


def _has_ease(e: Any) -> TypeGuard[_EaseMethodEasing]:
    return hasattr(e, "ease")


_EASING_DEFAULTS: dict[str, float] = {
    "start": 0.0,
    "end": 1.0,
    "duration": 1.0,
}


def _make_easing(easing_cls: type[Any]) -> Callable[[float], float]:
    obj = easing_cls(**_EASING_DEFAULTS)

    if _has_ease(obj):
        return lambda t: float(obj.ease(t))

    if not callable(obj):
        raise TypeError(f"{type(obj).__name__} is not callable and has no .ease(t)")
    return cast(Callable[[float], float], obj)


# Elastic

_C4 = (2.0 * math.pi) / 3.0
_C5 = (2.0 * math.pi) / 4.5


def _ease_in_elastic(x: float) -> float:
    return -(2.0 ** (10.0 * x - 10.0)) * math.sin((x * 10.0 - 10.75) * _C4)


def _ease_out_elastic(x: float) -> float:
    return 2.0 ** (-10.0 * x) * math.sin((x * 10.0 - 0.75) * _C4) + 1.0


def _ease_in_out_elastic(x: float) -> float:
    if x < 0.5:
        return -(2.0 ** (20.0 * x - 10.0) * math.sin((20.0 * x - 11.125) * _C5)) / 2.0
    return (2.0 ** (-20.0 * x + 10.0) * math.sin((20.0 * x - 11.125) * _C5)) / 2.0 + 1.0


# Back

_C1 = 1.70158
_C2 = _C1 * 1.525
_C3 = _C1 + 1.0


def _ease_in_back(x: float) -> float:
    return _C3 * x**3 - _C1 * x**2


def _ease_out_back(x: float) -> float:
    return 1.0 + _C3 * (x - 1.0) ** 3 + _C1 * (x - 1.0) ** 2


def _ease_in_out_back(x: float) -> float:
    if x < 0.5:
        return ((2.0 * x) ** 2 * ((_C2 + 1.0) * 2.0 * x - _C2)) / 2.0
    return ((2.0 * x - 2.0) ** 2 * ((_C2 + 1.0) * (x * 2.0 - 2.0) + _C2) + 2.0) / 2.0


# Bounce

_N1 = 7.5625
_D1 = 2.75


def _ease_out_bounce(x: float) -> float:
    if x < 1.0 / _D1:
        return _N1 * x * x
    if x < 2.0 / _D1:
        x -= 1.5 / _D1
        return _N1 * x * x + 0.75
    if x < 2.5 / _D1:
        x -= 2.25 / _D1
        return _N1 * x * x + 0.9375
    x -= 2.625 / _D1
    return _N1 * x * x + 0.984375


def _ease_in_bounce(x: float) -> float:
    return 1.0 - _ease_out_bounce(1.0 - x)


def _ease_in_out_bounce(x: float) -> float:
    if x < 0.5:
        return (1.0 - _ease_out_bounce(1.0 - 2.0 * x)) / 2.0
    return (1.0 + _ease_out_bounce(2.0 * x - 1.0)) / 2.0


def _linear(x: float) -> float:
    return x


_EASING_FUNCTIONS: dict[Easing, Callable[[float], float]] = {
    Easing.EASE_IN: EASE_IN.y,
    Easing.EASE_IN_CUBIC: _make_easing(CubicEaseIn),
    Easing.EASE_IN_OUT: EASE_IN_OUT.y,
    Easing.EASE_IN_OUT_CUBIC: _make_easing(CubicEaseInOut),
    Easing.EASE_IN_OUT_QUART: _make_easing(QuarticEaseInOut),
    Easing.EASE_IN_OUT_QUINT: _make_easing(QuinticEaseInOut),
    Easing.EASE_IN_QUAD: _make_easing(QuadEaseIn),
    Easing.EASE_IN_QUART: _make_easing(QuarticEaseIn),
    Easing.EASE_IN_QUINT: _make_easing(QuinticEaseIn),
    Easing.EASE_OUT: EASE_OUT.y,
    Easing.EASE_OUT_CUBIC: _make_easing(CubicEaseOut),
    Easing.EASE_OUT_QUAD: _make_easing(QuadEaseOut),
    Easing.EASE_OUT_QUART: _make_easing(QuarticEaseOut),
    Easing.EASE_OUT_QUINT: _make_easing(QuinticEaseOut),
    Easing.EASE_IN_SINE: _make_easing(SineEaseIn),
    Easing.EASE_OUT_SINE: _make_easing(SineEaseOut),
    Easing.EASE_IN_OUT_SINE: _make_easing(SineEaseInOut),
    Easing.EASE_IN_CIRC: _make_easing(CircularEaseIn),
    Easing.EASE_OUT_CIRC: _make_easing(CircularEaseOut),
    Easing.EASE_IN_OUT_CIRC: _make_easing(CircularEaseInOut),
    Easing.EASE_IN_ELASTIC: _ease_in_elastic,
    Easing.EASE_OUT_ELASTIC: _ease_out_elastic,
    Easing.EASE_IN_OUT_ELASTIC: _ease_in_out_elastic,
    Easing.EASE_IN_EXPO: _make_easing(ExponentialEaseIn),
    Easing.EASE_OUT_EXPO: _make_easing(ExponentialEaseOut),
    Easing.EASE_IN_OUT_EXPO: _make_easing(ExponentialEaseInOut),
    Easing.EASE_IN_BACK: _ease_in_back,
    Easing.EASE_OUT_BACK: _ease_out_back,
    Easing.EASE_IN_OUT_BACK: _ease_in_out_back,
    Easing.EASE_IN_BOUNCE: _ease_in_bounce,
    Easing.EASE_OUT_BOUNCE: _ease_out_bounce,
    Easing.EASE_IN_OUT_BOUNCE: _ease_in_out_bounce,
    Easing.LINEAR: _linear,
}
