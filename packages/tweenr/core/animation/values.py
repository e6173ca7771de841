"""Composite value types commonly animated in user interfaces.

Each type interpolates field by field, so nested values (a ``Border`` holds a
``Color`` and a ``Radius``) animate as a whole. Fields are unconstrained:
spring curves overshoot, and so may every component.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict

from tweenr.core.animation.animatable import lerp


class AnimatableModel(BaseModel):
    """Base for frozen models that interpolate each of their fields."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def lerp(cls, start: Self, end: Self, progress: float) -> Self:
        if not isinstance(end, cls):
            raise TypeError(f"cannot animate {cls.__name__} to {type(end).__name__}")
        return cls(
            **{
                name: lerp(getattr(start, name), getattr(end, name), progress)
                for name in cls.model_fields
            }
        )


class Vector(AnimatableModel):
    x: float = 0.0
    y: float = 0.0


class Point(AnimatableModel):
    x: float = 0.0
    y: float = 0.0


class Size(AnimatableModel):
    width: float = 0.0
    height: float = 0.0


class Color(AnimatableModel):
    """RGBA color with linear components, nominally in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int, a: float = 1.0) -> Self:
        """Create a color from 8-bit channels.

        Example:
            >>> Color.from_rgb8(255, 0, 0).r
            1.0
        """
        return cls(r=r / 255.0, g=g / 255.0, b=b / 255.0, a=a)


class Padding(AnimatableModel):
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


class Radius(AnimatableModel):
    top_left: float = 0.0
    top_right: float = 0.0
    bottom_right: float = 0.0
    bottom_left: float = 0.0


class Border(AnimatableModel):
    color: Color = Color()
    width: float = 0.0
    radius: Radius = Radius()


class Rectangle(AnimatableModel):
    """Axis-aligned rectangle positioned by its top-left corner."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def position(self) -> Point:
        return Point(x=self.x, y=self.y)

    @property
    def size(self) -> Size:
        return Size(width=self.width, height=self.height)
