"""Tests for curve sampling."""

from __future__ import annotations

import math

from pydantic import ValidationError
import pytest

from tweenr.core.curves import (
    CubicCurve,
    CurveSample,
    Easing,
    SpringCurve,
    sample_curve,
    sample_uniform_grid,
)


class TestSampleUniformGrid:
    """Tests for sample_uniform_grid."""

    def test_five_samples(self) -> None:
        """Five samples are evenly spaced including both ends."""
        assert sample_uniform_grid(5) == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_two_samples(self) -> None:
        """Two samples are the endpoints."""
        assert sample_uniform_grid(2) == [0.0, 1.0]

    @pytest.mark.parametrize("n", [0, 1, -3])
    def test_too_few_samples_raises(self, n: int) -> None:
        """Fewer than two samples is an error."""
        with pytest.raises(ValueError, match="n must be >= 2"):
            sample_uniform_grid(n)


class TestCurveSample:
    """Tests for the CurveSample model."""

    def test_value_may_overshoot(self) -> None:
        """Progress values outside [0, 1] are allowed."""
        assert CurveSample(t=0.1, v=1.2).v == 1.2

    def test_negative_time_raises(self) -> None:
        """Time cannot be negative."""
        with pytest.raises(ValidationError):
            CurveSample(t=-0.1, v=0.0)

    def test_sample_is_immutable(self) -> None:
        """CurveSample is frozen."""
        sample = CurveSample(t=0.0, v=0.0)
        with pytest.raises(ValidationError):
            sample.v = 1.0  # type: ignore[misc]


class TestSampleCurve:
    """Tests for sample_curve."""

    def test_linear_over_duration(self) -> None:
        """Linear samples climb evenly over the given duration."""
        samples = sample_curve(Easing.LINEAR, 5, duration=2.0)
        assert [s.t for s in samples] == [0.0, 0.5, 1.0, 1.5, 2.0]
        assert [s.v for s in samples] == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])

    def test_cubic_endpoints(self, ease_curve: CubicCurve) -> None:
        """Cubic samples run from about 0 to about 1."""
        samples = sample_curve(ease_curve, 11)
        assert samples[0].v == pytest.approx(0.0, abs=1e-3)
        assert samples[-1].v == pytest.approx(1.0, abs=1e-3)

    def test_spring_span_is_its_duration(self, critical_spring: SpringCurve) -> None:
        """Springs are sampled over their own settling time."""
        samples = sample_curve(critical_spring, 3, duration=10.0)
        assert samples[-1].t == pytest.approx(critical_spring.duration())
        assert samples[-1].v == pytest.approx(1.0, abs=2e-3)

    def test_non_settling_spring_uses_fallback(self) -> None:
        """A spring that never settles is sampled over the fallback duration."""
        spring = SpringCurve(
            initial_velocity=0.0, clamp=False, mass=1.0, damping_ratio=0.0, stiffness=100.0
        )
        samples = sample_curve(spring, 3, duration=2.0)
        assert samples[-1].t == 2.0
        assert all(math.isfinite(s.v) for s in samples)

    @pytest.mark.parametrize("duration", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_duration_raises(self, duration: float) -> None:
        """The duration must be positive and finite."""
        with pytest.raises(ValueError, match="duration"):
            sample_curve(Easing.LINEAR, 5, duration=duration)
