"""Shared pytest fixtures for tweenr tests."""

from __future__ import annotations

import logging

import pytest

from tweenr.core.curves import CubicCurve, SpringCurve

# ============================================================================
# Curve Fixtures
# ============================================================================


@pytest.fixture
def ease_curve() -> CubicCurve:
    """The CSS ``ease`` timing function."""
    return CubicCurve((0.25, 0.1), (0.25, 1.0))


@pytest.fixture
def critical_spring() -> SpringCurve:
    """Critically damped spring: mass 1, stiffness 100, no initial velocity."""
    return SpringCurve(
        initial_velocity=0.0,
        clamp=False,
        mass=1.0,
        damping_ratio=1.0,
        stiffness=100.0,
    )


@pytest.fixture
def bouncy_spring() -> SpringCurve:
    """Underdamped spring that overshoots its end value."""
    return SpringCurve(
        initial_velocity=0.0,
        clamp=False,
        mass=1.0,
        damping_ratio=0.3,
        stiffness=100.0,
    )


@pytest.fixture
def spring_config() -> dict:
    """Spring curve as written in a config file."""
    return {
        "initial-velocity": 0.0,
        "clamp": False,
        "mass": 1.0,
        "damping-ratio": 0.8,
        "stiffness": 600.0,
    }


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def reset_root_logger():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
