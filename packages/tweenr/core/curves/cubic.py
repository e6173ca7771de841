"""Cubic Bézier ease curves.

A curve is defined by two control points; the endpoints are always (0, 0)
and (1, 1) so that progress starts at 0 and ends at 1.

The Bézier is parametric in t but an animation needs y as a function of the
elapsed-time fraction x. Instead of inverting x(t), the curve is sampled once
at construction into a table of ``BAKED_POINTS`` points and ``y(x)`` is
answered by binary search over the table plus linear interpolation between
the two bracketing samples.
"""

from __future__ import annotations

import math
from typing import Any, NamedTuple

import bezier
import numpy as np
from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator, model_validator

from tweenr.core.curves.keys import normalize_keys
from tweenr.core.utils.math import clamp

# 255 samples so that the halving steps 128, 64, ..., 1 cover every index.
BAKED_POINTS = 255


class ControlPoint(NamedTuple):
    """A point of the unit square, serialized as an ``[x, y]`` pair."""

    x: float
    y: float


def bake_points(p1: ControlPoint, p2: ControlPoint) -> tuple[ControlPoint, ...]:
    """Sample the Bézier ``(0,0) p1 p2 (1,1)`` at ``t = (i + 1) / BAKED_POINTS``.

    Args:
        p1: First control point.
        p2: Second control point.

    Returns:
        ``BAKED_POINTS`` points; entry ``i`` is the curve evaluated at
        ``t = (i + 1) / BAKED_POINTS``, so the last entry is exactly (1, 1).
    """
    nodes = np.asfortranarray(
        [
            [0.0, p1.x, p2.x, 1.0],
            [0.0, p1.y, p2.y, 1.0],
        ]
    )
    curve = bezier.Curve(nodes, degree=3)

    t_grid = np.arange(1, BAKED_POINTS + 1, dtype=np.float64) / BAKED_POINTS
    evaluated = curve.evaluate_multi(t_grid)

    return tuple(
        ControlPoint(float(x), float(y))
        for x, y in zip(evaluated[0, :], evaluated[1, :], strict=True)
    )


class CubicCurve(BaseModel):
    """Cubic Bézier ease curve with two control points.

    Control points may be given positionally or by name:

    Example:
        >>> ease = CubicCurve((0.25, 0.1), (0.25, 1.0))
        >>> round(ease.y(0.5), 2)
        0.8
        >>> CubicCurve.model_validate({"p1": [0.42, 0.0], "p2": [1.0, 1.0]}).p1
        ControlPoint(x=0.42, y=0.0)

    The baked table is rebuilt on every construction and is never serialized.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    p1: ControlPoint
    p2: ControlPoint

    _baked_points: tuple[ControlPoint, ...] = PrivateAttr(default=())

    def __init__(self, p1: Any = None, p2: Any = None, /, **data: Any) -> None:
        for name, value in (("p1", p1), ("p2", p2)):
            if value is None:
                continue
            if name in data:
                raise TypeError(f"CubicCurve got multiple values for `{name}`")
            data[name] = value
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def _normalize_fields(cls, data: Any) -> Any:
        return normalize_keys(data)

    @field_validator("p1", "p2")
    @classmethod
    def _validate_finite(cls, point: ControlPoint) -> ControlPoint:
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise ValueError("control point coordinates must be finite")
        return point

    def model_post_init(self, __context: Any) -> None:
        self._baked_points = bake_points(self.p1, self.p2)

    @property
    def baked_points(self) -> tuple[ControlPoint, ...]:
        """Precomputed curve samples, ordered by parameter t."""
        return self._baked_points

    def y(self, x: float) -> float:
        """Get the progress ``y`` for a time fraction ``x`` in [0, 1].

        ``x`` outside [0, 1] is clamped. A zero-width bracket (two samples
        with the same x) yields 0.0.
        """
        baked = self._baked_points
        x = clamp(x, 0.0, 1.0)

        index = 0
        below = True
        step = (BAKED_POINTS + 1) // 2
        while step > 0:
            if below:
                index = min(index + step, BAKED_POINTS - 1)
            else:
                index -= step
            below = baked[index].x < x
            step //= 2

        lower = index - 1 if (not below or index == BAKED_POINTS - 1) else index
        lower = max(lower, 0)

        x0, y0 = baked[lower]
        x1, y1 = baked[lower + 1]
        width = x1 - x0
        if width == 0.0:
            return 0.0

        delta = (x - x0) / width
        if not math.isfinite(delta):
            return 0.0
        return y0 + (y1 - y0) * delta


# CSS timing-function keywords
EASE = CubicCurve((0.25, 0.1), (0.25, 1.0))
EASE_IN = CubicCurve((0.42, 0.0), (1.0, 1.0))
EASE_OUT = CubicCurve((0.0, 0.0), (0.58, 1.0))
EASE_IN_OUT = CubicCurve((0.42, 0.0), (0.58, 1.0))
