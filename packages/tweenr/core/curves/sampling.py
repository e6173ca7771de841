"""Curve sampling for previews and inspection.

Evaluates a curve at evenly spaced instants of its time span, the same way an
animation driver would when ticked at those instants.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from tweenr.core.curves.variant import AnimationCurve, curve_duration, curve_progress


class CurveSample(BaseModel):
    """A single evaluated point of a curve.

    Attributes:
        t: Seconds since the start of the animation.
        v: Progress at ``t``. Springs may overshoot [0, 1].
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, description="Seconds since start")
    v: float = Field(..., description="Progress")


def sample_uniform_grid(n: int) -> list[float]:
    """Generate N evenly-spaced samples in [0, 1], both ends included.

    Args:
        n: Number of samples to generate. Must be >= 2.

    Returns:
        List of N evenly-spaced float values in [0, 1].

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [i / (n - 1) for i in range(n)]


def sample_curve(
    curve: AnimationCurve,
    n_samples: int,
    duration: float = 1.0,
) -> list[CurveSample]:
    """Evaluate a curve over its time span.

    Args:
        curve: Curve to sample.
        n_samples: Number of samples (must be >= 2).
        duration: Time span in seconds for easing and cubic curves, and the
            fallback span for springs whose own duration is infinite or zero.

    Returns:
        ``n_samples`` samples from t = 0 to the end of the span.

    Raises:
        ValueError: If n_samples < 2 or duration is not a positive finite number.
    """
    if not (math.isfinite(duration) and duration > 0.0):
        raise ValueError("duration must be a positive finite number")

    span = curve_duration(curve, duration)
    if not math.isfinite(span) or span <= 0.0:
        span = duration

    return [
        CurveSample(t=fraction * span, v=curve_progress(curve, fraction * span, span))
        for fraction in sample_uniform_grid(n_samples)
    ]
