"""Shared utilities for tweenr."""

from tweenr.core.utils.logging import configure_logging, get_logger
from tweenr.core.utils.math import F32_EPSILON, F64_EPSILON, clamp, safe_ratio

__all__ = [
    "F32_EPSILON",
    "F64_EPSILON",
    "clamp",
    "configure_logging",
    "get_logger",
    "safe_ratio",
]
