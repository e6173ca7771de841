"""Linear interpolation of animated values.

``lerp(start, end, progress)`` interpolates any supported value type.
Progress may fall outside [0, 1] (springs overshoot), so the result may
leave the [start, end] range too.

Supported out of the box: ``int``, ``float``, numpy signed integer and float
scalars, and element-wise ``tuple``, ``list`` and ``numpy.ndarray``. Custom
types opt in by implementing the ``Animatable`` protocol. Unsigned integers
and booleans are rejected: spring progress can go negative.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any, Protocol, Self, TypeVar, runtime_checkable

import numpy as np

T = TypeVar("T")


@runtime_checkable
class Animatable(Protocol):
    """A value type that knows how to interpolate between two of its values.

    Implementations handle their own overflow and saturation.

    Example:
        >>> class Opacity(float):
        ...     @classmethod
        ...     def lerp(cls, start, end, progress):
        ...         return cls(min(1.0, max(0.0, start + (end - start) * progress)))
    """

    @classmethod
    def lerp(cls, start: Self, end: Self, progress: float) -> Self: ...


@singledispatch
def lerp(start: Any, end: Any, progress: float) -> Any:
    """Interpolate linearly between ``start`` and ``end``.

    Args:
        start: Value at progress 0.
        end: Value at progress 1.
        progress: Interpolation factor, may overshoot [0, 1].

    Returns:
        Interpolated value of the same type as ``start``.

    Raises:
        TypeError: If the type cannot be animated.
        ValueError: If sequence lengths or array shapes differ.
    """
    if isinstance(start, Animatable):
        return type(start).lerp(start, end, progress)
    raise TypeError(f"{type(start).__name__} values cannot be animated")


@lerp.register
def _(start: bool, end: bool, progress: float) -> bool:
    raise TypeError("bool values cannot be animated")


@lerp.register
def _(start: int, end: int, progress: float) -> int:
    # Truncates toward zero
    return start + int((end - start) * progress)


@lerp.register
def _(start: float, end: float, progress: float) -> float:
    return start + (end - start) * progress


@lerp.register
def _(start: np.unsignedinteger, end: np.unsignedinteger, progress: float) -> Any:
    raise TypeError(f"unsigned {type(start).__name__} values cannot be animated")


@lerp.register
def _(start: np.signedinteger, end: np.signedinteger, progress: float) -> np.signedinteger:
    info = np.iinfo(type(start))
    value = int(start) + int((int(end) - int(start)) * progress)
    return type(start)(min(max(value, info.min), info.max))


@lerp.register
def _(start: np.floating, end: np.floating, progress: float) -> np.floating:
    dtype = type(start)
    return dtype(start + (dtype(end) - start) * dtype(progress))


@lerp.register
def _(start: np.ndarray, end: np.ndarray, progress: float) -> np.ndarray:
    end = np.asarray(end)
    if start.shape != end.shape:
        raise ValueError(f"cannot animate between shapes {start.shape} and {end.shape}")
    if np.issubdtype(start.dtype, np.unsignedinteger) or start.dtype == np.bool_:
        raise TypeError(f"{start.dtype} arrays cannot be animated")

    if np.issubdtype(start.dtype, np.signedinteger):
        info = np.iinfo(start.dtype)
        step = np.trunc((end.astype(np.float64) - start.astype(np.float64)) * progress)
        value = np.clip(start.astype(np.float64) + step, info.min, info.max)
        return value.astype(start.dtype)

    if np.issubdtype(start.dtype, np.floating):
        return start + (end.astype(start.dtype) - start) * start.dtype.type(progress)

    raise TypeError(f"{start.dtype} arrays cannot be animated")


@lerp.register
def _(start: tuple, end: tuple, progress: float) -> tuple:
    items = _lerp_items(start, end, progress)
    if hasattr(start, "_fields"):
        return type(start)(*items)
    return type(start)(items)


@lerp.register
def _(start: list, end: list, progress: float) -> list:
    return _lerp_items(start, end, progress)


def _lerp_items(start: tuple | list, end: tuple | list, progress: float) -> list[Any]:
    if len(start) != len(end):
        raise ValueError(f"cannot animate between lengths {len(start)} and {len(end)}")
    return [lerp(a, b, progress) for a, b in zip(start, end, strict=True)]


def is_animatable(value: Any) -> bool:
    """Check whether ``value`` can be passed to ``lerp``."""
    try:
        lerp(value, value, 0.0)
    except (TypeError, ValueError):
        return False
    return True


def ensure_animatable(value: T) -> T:
    """Return ``value`` unchanged, or raise if it cannot be animated.

    Raises:
        TypeError: If ``value`` (or one of its elements) cannot be animated.
    """
    if not is_animatable(value):
        raise TypeError(f"{type(value).__name__} values cannot be animated: {value!r}")
    return value
