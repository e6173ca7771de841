"""The animation curve variant and its uniform progress evaluator.

An animation curve is one of:
- ``Easing``: a preset easing, serialized as its name (``"ease-out-quad"``)
- ``CubicCurve``: a cubic Bézier, serialized as ``{"p1": [x, y], "p2": [x, y]}``
- ``SpringCurve``: a spring, serialized as its kebab-case parameters

The variants are untagged in config files and told apart by their fields. A
single-key wrapper naming the variant (``{"spring": {...}}``) is accepted too.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, TypeAlias

from pydantic import BeforeValidator, TypeAdapter

from tweenr.core.curves.cubic import CubicCurve
from tweenr.core.curves.easing import Easing
from tweenr.core.curves.keys import kebab_key
from tweenr.core.curves.spring import SpringCurve
from tweenr.core.utils.math import clamp, safe_ratio

AnimationCurve: TypeAlias = Easing | CubicCurve | SpringCurve

DEFAULT_CURVE: AnimationCurve = Easing.LINEAR


def _coerce_curve_input(data: Any) -> Any:
    """Resolve preset names and variant wrappers before union validation."""
    if isinstance(data, str):
        return Easing(data)

    if isinstance(data, Mapping) and len(data) == 1:
        ((key, value),) = data.items()
        variant = kebab_key(key) if isinstance(key, str) else None
        if variant == "simple":
            return Easing(value) if isinstance(value, str) else value
        if variant == "cubic":
            return CubicCurve.model_validate(value)
        if variant == "spring":
            return SpringCurve.model_validate(value)

    return data


# Use as a model field type to accept every supported curve spelling
CurveField = Annotated[AnimationCurve, BeforeValidator(_coerce_curve_input)]

_CURVE_ADAPTER: TypeAdapter[AnimationCurve] = TypeAdapter(CurveField)


def parse_curve(data: Any) -> AnimationCurve:
    """Build an animation curve from its config representation.

    Args:
        data: A preset name, a cubic or spring mapping, a wrapped variant, or
            an already-built curve.

    Returns:
        The curve.

    Raises:
        pydantic.ValidationError: If no variant accepts the data. Missing,
            unknown and duplicated fields are named in the error.

    Example:
        >>> parse_curve("ease-in-out-cubic")
        <Easing.EASE_IN_OUT_CUBIC: 'ease-in-out-cubic'>
        >>> parse_curve({"cubic": {"p1": [0.25, 0.1], "p2": [0.25, 1.0]}}).p2
        ControlPoint(x=0.25, y=1.0)
    """
    return _CURVE_ADAPTER.validate_python(data)


def dump_curve(curve: AnimationCurve) -> str | dict[str, Any]:
    """Serialize a curve to its untagged, JSON-compatible form.

    Baked Bézier tables are not included; they are rebuilt on load.
    """
    return _CURVE_ADAPTER.dump_python(curve, mode="json", by_alias=True)


def curve_progress(curve: AnimationCurve, elapsed: float, duration: float) -> float:
    """Map elapsed time to animation progress through a curve.

    Easing and cubic curves take the elapsed fraction of ``duration`` clamped
    to [0, 1] (a zero duration counts as complete). Springs take the elapsed
    seconds directly and their progress is not clamped, so it may overshoot.

    Args:
        curve: Curve to evaluate.
        elapsed: Seconds since the animation started.
        duration: Nominal animation duration in seconds.

    Returns:
        Progress, usually in [0, 1].
    """
    match curve:
        case SpringCurve():
            # Negative time has no meaning for the spring equations
            return curve.oscillate(max(elapsed, 0.0))
        case Easing() | CubicCurve():
            x = clamp(safe_ratio(elapsed, duration, default=1.0), 0.0, 1.0)
            return curve.y(x)

    raise TypeError(f"Unsupported animation curve: {curve!r}")


def curve_duration(curve: AnimationCurve, default: float) -> float:
    """Get the duration an animation using ``curve`` should have.

    Springs determine their own duration; other curves use ``default``.
    """
    if isinstance(curve, SpringCurve):
        return curve.duration()
    return default
