"""Animation curves: preset easings, cubic Béziers and springs."""

from tweenr.core.curves.cubic import (
    BAKED_POINTS,
    EASE,
    EASE_IN,
    EASE_IN_OUT,
    EASE_OUT,
    ControlPoint,
    CubicCurve,
)
from tweenr.core.curves.easing import Easing
from tweenr.core.curves.sampling import CurveSample, sample_curve, sample_uniform_grid
from tweenr.core.curves.spring import DEFAULT_EPSILON, SpringCurve, SpringRegime
from tweenr.core.curves.variant import (
    DEFAULT_CURVE,
    AnimationCurve,
    CurveField,
    curve_duration,
    curve_progress,
    dump_curve,
    parse_curve,
)

__all__ = [
    "BAKED_POINTS",
    "DEFAULT_CURVE",
    "DEFAULT_EPSILON",
    "EASE",
    "EASE_IN",
    "EASE_IN_OUT",
    "EASE_OUT",
    "AnimationCurve",
    "ControlPoint",
    "CubicCurve",
    "CurveField",
    "CurveSample",
    "Easing",
    "SpringCurve",
    "SpringRegime",
    "curve_duration",
    "curve_progress",
    "dump_curve",
    "parse_curve",
    "sample_curve",
    "sample_uniform_grid",
]
