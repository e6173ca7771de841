"""Tests for the animation curve variant."""

from __future__ import annotations

import json

from pydantic import BaseModel, ValidationError
import pytest

from tweenr.core.curves import (
    DEFAULT_CURVE,
    EASE,
    CubicCurve,
    CurveField,
    Easing,
    SpringCurve,
    curve_duration,
    curve_progress,
    dump_curve,
    parse_curve,
)


class TestParseCurve:
    """Tests for building curves from config data."""

    def test_default_is_linear(self) -> None:
        """The default curve is linear easing."""
        assert DEFAULT_CURVE is Easing.LINEAR

    def test_preset_name(self) -> None:
        """A string selects a preset."""
        assert parse_curve("ease-out-quad") is Easing.EASE_OUT_QUAD
        assert parse_curve("EaseOutQuad") is Easing.EASE_OUT_QUAD

    def test_cubic_mapping(self) -> None:
        """A mapping with control points is a cubic curve."""
        curve = parse_curve({"p1": [0.25, 0.1], "p2": [0.25, 1.0]})
        assert curve == EASE

    def test_spring_mapping(self, spring_config: dict) -> None:
        """A mapping with spring parameters is a spring."""
        curve = parse_curve(spring_config)
        assert isinstance(curve, SpringCurve)
        assert curve.stiffness == 600.0

    @pytest.mark.parametrize(
        ("data", "expected_type"),
        [
            ({"simple": "ease-in-bounce"}, Easing),
            ({"Simple": "linear"}, Easing),
            ({"cubic": {"p1": [0.42, 0.0], "p2": [1.0, 1.0]}}, CubicCurve),
        ],
    )
    def test_wrapped_variants(self, data: dict, expected_type: type) -> None:
        """A single-key wrapper names the variant explicitly."""
        assert isinstance(parse_curve(data), expected_type)

    def test_wrapped_spring(self, spring_config: dict) -> None:
        """Springs can be wrapped too."""
        assert isinstance(parse_curve({"spring": spring_config}), SpringCurve)

    def test_built_curve_passes_through(self, ease_curve: CubicCurve) -> None:
        """Curves that are already built are returned unchanged."""
        assert parse_curve(ease_curve) is ease_curve
        assert parse_curve(Easing.LINEAR) is Easing.LINEAR

    @pytest.mark.parametrize(
        "data",
        [
            "ease-sideways",
            {"p1": [0.25, 0.1]},
            {"p1": [0.25, 0.1], "p2": [0.25, 1.0], "p3": [0, 0]},
            {"initial-velocity": 0.0, "clamp": False, "mass": 1.0},
            42,
        ],
    )
    def test_invalid_data_raises(self, data: object) -> None:
        """Data no variant accepts is rejected."""
        with pytest.raises((ValidationError, ValueError)):
            parse_curve(data)

    def test_duplicate_spring_field_rejected(self, spring_config: dict) -> None:
        """Duplicated fields are reported."""
        with pytest.raises(ValidationError, match="duplicate field"):
            parse_curve({**spring_config, "Stiffness": 10.0})

    def test_curve_field_in_model(self) -> None:
        """CurveField accepts every curve spelling as a model field."""

        class Transition(BaseModel):
            curve: CurveField = DEFAULT_CURVE

        assert Transition().curve is Easing.LINEAR
        assert Transition(curve="ease-in-sine").curve is Easing.EASE_IN_SINE
        assert Transition.model_validate({"curve": {"cubic": {"p1": [0, 0], "p2": [1, 1]}}}).curve


class TestDumpCurve:
    """Tests for serializing curves."""

    def test_dump_preset(self) -> None:
        """Presets serialize as their name."""
        assert dump_curve(Easing.EASE_IN_OUT_BACK) == "ease-in-out-back"

    def test_dump_cubic(self, ease_curve: CubicCurve) -> None:
        """Cubic curves serialize as their control points."""
        assert dump_curve(ease_curve) == {"p1": [0.25, 0.1], "p2": [0.25, 1.0]}

    def test_dump_spring(self, spring_config: dict) -> None:
        """Springs serialize with kebab-case names."""
        dumped = dump_curve(parse_curve(spring_config))
        assert dumped["damping-ratio"] == 0.8
        assert "damping_ratio" not in dumped

    @pytest.mark.parametrize(
        "curve",
        [
            Easing.EASE_OUT_ELASTIC,
            CubicCurve((0.68, -0.6), (0.32, 1.6)),
            SpringCurve(
                initial_velocity=1.5, clamp=False, mass=2.0, damping_ratio=0.4, stiffness=300.0
            ),
        ],
    )
    def test_round_trip_through_json(self, curve: object) -> None:
        """Dump, encode, decode and parse gives an identical curve."""
        restored = parse_curve(json.loads(json.dumps(dump_curve(curve))))
        assert restored == curve
        for i in range(100):
            t = i / 99
            assert curve_progress(restored, t, 1.0) == pytest.approx(
                curve_progress(curve, t, 1.0), abs=1e-12
            )


class TestCurveProgress:
    """Tests for the uniform time-to-progress mapping."""

    def test_linear_fraction(self) -> None:
        """Easing curves use the elapsed fraction of the duration."""
        assert curve_progress(Easing.LINEAR, 0.25, 1.0) == 0.25
        assert curve_progress(Easing.LINEAR, 1.0, 4.0) == 0.25

    def test_fraction_is_clamped(self, ease_curve: CubicCurve) -> None:
        """Elapsed time outside the duration saturates."""
        assert curve_progress(Easing.LINEAR, -1.0, 1.0) == 0.0
        assert curve_progress(Easing.LINEAR, 5.0, 1.0) == 1.0
        assert curve_progress(ease_curve, 5.0, 1.0) == ease_curve.y(1.0)

    def test_zero_duration_is_complete(self) -> None:
        """A zero duration jumps straight to the end."""
        assert curve_progress(Easing.EASE_IN_QUAD, 0.0, 0.0) == 1.0

    def test_spring_uses_seconds(self, critical_spring: SpringCurve) -> None:
        """Springs are evaluated at the elapsed time, not a fraction."""
        assert curve_progress(critical_spring, 0.1, 100.0) == critical_spring.oscillate(0.1)

    def test_spring_may_overshoot(self, bouncy_spring: SpringCurve) -> None:
        """Spring progress is not clamped."""
        values = [curve_progress(bouncy_spring, i / 100, 1.0) for i in range(100)]
        assert max(values) > 1.0

    def test_spring_negative_time(self, critical_spring: SpringCurve) -> None:
        """Negative elapsed time evaluates a spring at its start."""
        assert curve_progress(critical_spring, -0.5, 1.0) == pytest.approx(0.0)

    def test_unsupported_curve_raises(self) -> None:
        """Objects that are not curves are rejected."""
        with pytest.raises(TypeError):
            curve_progress("linear", 0.5, 1.0)  # type: ignore[arg-type]


class TestCurveDuration:
    """Tests for curve-driven durations."""

    def test_non_spring_uses_default(self, ease_curve: CubicCurve) -> None:
        """Easing and cubic curves keep the given duration."""
        assert curve_duration(Easing.LINEAR, 0.3) == 0.3
        assert curve_duration(ease_curve, 2.0) == 2.0

    def test_spring_uses_own_duration(self, critical_spring: SpringCurve) -> None:
        """Springs replace the duration with their settling time."""
        assert curve_duration(critical_spring, 5.0) == critical_spring.duration()
