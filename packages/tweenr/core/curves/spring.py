"""Damped spring curves.

Closed-form solution of a mass-spring-damper moving from 0 to 1, following
libadwaita's spring animation (adw-spring-animation.c / adw-spring-params.c).

The spring is configured with a damping *ratio*; the damping coefficient is
derived as ``ratio * 2 * sqrt(mass * stiffness)`` (critical damping times the
ratio) and recomputed whenever mass or stiffness change.
"""

from __future__ import annotations

from enum import Enum
import logging
import math
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tweenr.core.curves.keys import normalize_keys
from tweenr.core.utils.math import F32_EPSILON, F64_EPSILON

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-4

# Step (seconds) for the forward-difference slope and the clamp scan
DELTA = 0.001
MAX_NEWTON_ITERATIONS = 5000
# 200 s scanned in DELTA steps
FIRST_ZERO_LIMIT = 200.0

# Displacement at t = 0: start (0) minus end (1)
_X0 = -1.0
_END = 1.0


class SpringRegime(str, Enum):
    """Damping regime of a spring."""

    CRITICALLY_DAMPED = "critically_damped"
    UNDERDAMPED = "underdamped"
    OVERDAMPED = "overdamped"


class SpringCurve(BaseModel):
    """Spring-based animation curve.

    Progress starts at 0 and settles at 1; underdamped springs overshoot, so
    progress may leave [0, 1].

    Attributes:
        initial_velocity: Velocity at t = 0 (progress units per second).
        clamp: Stop at the first time the spring reaches the end value
            instead of waiting for it to settle.
        mass: Inertia of the spring; heavier springs are slower and smoother.
        damping_ratio: 0 < ratio < 1 bounces, 1 is critically damped (fastest
            without overshoot), > 1 approaches the end slowly.
        stiffness: Strength of the spring force.
        epsilon: Precision used to decide the spring has settled.

    Example:
        >>> spring = SpringCurve(
        ...     initial_velocity=0.0, clamp=False, mass=1.0, damping_ratio=1.0, stiffness=100.0
        ... )
        >>> round(spring.duration(), 3)
        0.921
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    initial_velocity: float = Field(..., alias="initial-velocity")
    clamp: bool
    mass: float = Field(..., gt=0.0)
    damping_ratio: float = Field(..., ge=0.0, alias="damping-ratio")
    stiffness: float = Field(..., gt=0.0)
    epsilon: float = Field(default=DEFAULT_EPSILON, gt=0.0)

    @model_validator(mode="before")
    @classmethod
    def _normalize_fields(cls, data: Any) -> Any:
        return normalize_keys(data)

    @classmethod
    def from_damping(
        cls,
        initial_velocity: float,
        clamp: bool,
        mass: float,
        damping: float,
        stiffness: float,
        epsilon: float = DEFAULT_EPSILON,
    ) -> Self:
        """Create a spring from a raw damping coefficient instead of a ratio."""
        critical_damping = 2.0 * math.sqrt(mass * stiffness) if mass > 0 and stiffness > 0 else 0.0
        damping_ratio = damping / critical_damping if critical_damping else math.nan
        return cls(
            initial_velocity=initial_velocity,
            clamp=clamp,
            mass=mass,
            damping_ratio=damping_ratio,
            stiffness=stiffness,
            epsilon=epsilon,
        )

    def _replace(self, **changes: Any) -> Self:
        return type(self).model_validate({**self.model_dump(), **changes})

    def with_initial_velocity(self, initial_velocity: float) -> Self:
        """Return a copy with a different initial velocity."""
        return self._replace(initial_velocity=initial_velocity)

    def with_clamp(self, clamp: bool) -> Self:
        """Return a copy that does (or does not) stop at the first zero.

        A clamped spring never overshoots; the animation ends when it first
        reaches the end value.
        """
        return self._replace(clamp=clamp)

    def with_mass(self, mass: float) -> Self:
        """Return a copy with a different mass; damping is recomputed."""
        return self._replace(mass=mass)

    def with_damping_ratio(self, damping_ratio: float) -> Self:
        """Return a copy with a different damping ratio."""
        return self._replace(damping_ratio=damping_ratio)

    def with_stiffness(self, stiffness: float) -> Self:
        """Return a copy with a different stiffness; damping is recomputed."""
        return self._replace(stiffness=stiffness)

    def with_epsilon(self, epsilon: float) -> Self:
        """Return a copy with a different settling precision.

        Too small a value makes the spring take a long time before it counts
        as settled on the end value.
        """
        return self._replace(epsilon=epsilon)

    @property
    def damping(self) -> float:
        """Damping coefficient: the ratio times the critical damping."""
        return self.damping_ratio * 2.0 * math.sqrt(self.mass * self.stiffness)

    @property
    def decay_rate(self) -> float:
        """Envelope decay rate (beta)."""
        return self.damping / (2.0 * self.mass)

    @property
    def natural_frequency(self) -> float:
        """Undamped angular frequency (omega0)."""
        return math.sqrt(self.stiffness / self.mass)

    @property
    def regime(self) -> SpringRegime:
        beta = self.decay_rate
        omega0 = self.natural_frequency
        if abs(beta - omega0) <= F32_EPSILON:
            return SpringRegime.CRITICALLY_DAMPED
        if beta < omega0:
            return SpringRegime.UNDERDAMPED
        return SpringRegime.OVERDAMPED

    def oscillate(self, t: float) -> float:
        """Get the progress ``t`` seconds after the spring started."""
        v0 = self.initial_velocity
        beta = self.decay_rate
        omega0 = self.natural_frequency

        regime = self.regime
        if regime is SpringRegime.CRITICALLY_DAMPED:
            envelope = math.exp(-beta * t)
            return _END + envelope * (_X0 + (beta * _X0 + v0) * t)

        if regime is SpringRegime.UNDERDAMPED:
            omega1 = math.sqrt(omega0**2 - beta**2)
            envelope = math.exp(-beta * t)
            return _END + envelope * (
                _X0 * math.cos(omega1 * t) + ((beta * _X0 + v0) / omega1) * math.sin(omega1 * t)
            )

        # envelope * (a*cosh(w*t) + b*sinh(w*t)) written as two exponentials,
        # cosh/sinh alone overflow long before the product does
        omega2 = math.sqrt(beta**2 - omega0**2)
        a = _X0
        b = (beta * _X0 + v0) / omega2
        slow = 0.5 * (a + b) * math.exp((omega2 - beta) * t)
        fast = 0.5 * (a - b) * math.exp((-omega2 - beta) * t)
        return _END + slow + fast

    def duration(self) -> float:
        """Get the time in seconds the spring needs to settle.

        Only overdamped springs are refined with Newton's method. Critically
        damped and underdamped springs return the envelope estimate as is.
        This is intended, so existing animation configs keep their settle times.

        Returns:
            Seconds until the displacement stays within ``epsilon`` of the end
            value (or, when clamped, until it first reaches it). ``math.inf``
            when the spring never settles, ``0.0`` when the search gives up.
        """
        beta = self.decay_rate

        if beta < 0.0 or abs(beta) <= F64_EPSILON:
            logger.debug("Spring never settles (beta=%s)", beta)
            return math.inf

        if self.clamp:
            return self.first_zero()

        # The time at which the envelope alone drops below epsilon. Exact
        # enough when the spring oscillates, and a first guess otherwise.
        x0 = -math.log(self.epsilon) / beta

        if self.regime is not SpringRegime.OVERDAMPED:
            return x0

        # Overdamped motion decays slower than the envelope, so refine on the
        # displacement itself with Newton's method.
        x1 = x0
        y1 = self.oscillate(x0)
        for _ in range(MAX_NEWTON_ITERATIONS):
            x0, y0 = x1, y1
            slope = (self.oscillate(x0 + DELTA) - y0) / DELTA
            if slope == 0.0 or not math.isfinite(slope):
                logger.debug("Spring duration search hit a flat slope at t=%s", x0)
                return 0.0

            x1 = (1.0 - y0 + slope * x0) / slope
            if not math.isfinite(x1):
                logger.debug("Spring duration search diverged from t=%s", x0)
                return 0.0

            y1 = self.oscillate(x1)
            if abs(1.0 - y1) <= self.epsilon:
                return x1

        logger.debug(
            "Spring duration search exceeded %d iterations, giving up", MAX_NEWTON_ITERATIONS
        )
        return 0.0

    def first_zero(self) -> float:
        """Get the first time (seconds) the spring reaches the end value.

        Scans forward in ``DELTA`` steps, starting one step in to skip the
        trivial zero of in-place animations. Returns ``0.0`` past
        ``FIRST_ZERO_LIMIT`` seconds. The check is one-sided on purpose:
        the first overshoot past the end value counts, not the moment the
        spring stays within ``epsilon`` of it.
        """
        x = DELTA
        y = self.oscillate(x)

        # Progress moves from 0 towards 1, so the end is reached once it is no
        # longer more than epsilon below 1, even if a step jumps past it.
        while 1.0 - y > self.epsilon:
            if x > FIRST_ZERO_LIMIT:
                logger.debug("Spring first zero not found within %ss", FIRST_ZERO_LIMIT)
                return 0.0

            x += DELTA
            y = self.oscillate(x)

        return x
