"""Configuration models for tweenr."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from tweenr.core.animation.driver import Animation
from tweenr.core.curves.variant import DEFAULT_CURVE, CurveField, curve_duration
from tweenr.core.utils.logging import DEFAULT_FORMAT

T = TypeVar("T")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = DEFAULT_FORMAT
    filename: str | None = Field(default=None, description="Log file (stdout when unset)")
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")


class AnimationConfig(BaseModel):
    """A named animation: its curve and nominal duration.

    Spring curves ignore ``duration`` and settle in their own time.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    curve: CurveField = DEFAULT_CURVE
    duration: float = Field(default=0.3, ge=0.0, allow_inf_nan=False, description="Seconds")

    @property
    def effective_duration(self) -> float:
        """Duration an animation built from this config will have."""
        return curve_duration(self.curve, self.duration)

    def build(self, start: T, end: T, now: float | None = None) -> Animation[T]:
        """Create an animation from ``start`` to ``end`` with this curve.

        Example:
            >>> AnimationConfig(curve="ease-out-quad", duration=0.15).build(0.0, 1.0).duration
            0.15
        """
        return Animation(start, end, self.duration, now=now).with_curve(self.curve)


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = LoggingConfig()
    animations: dict[str, AnimationConfig] = Field(default_factory=dict)

    def get_animation(self, name: str) -> AnimationConfig:
        """Look up a named animation.

        Raises:
            KeyError: If no animation has that name.
        """
        try:
            return self.animations[name]
        except KeyError:
            known = ", ".join(sorted(self.animations)) or "none"
            raise KeyError(f"Unknown animation {name!r} (known: {known})") from None
