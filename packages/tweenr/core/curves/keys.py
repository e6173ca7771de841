"""Field-name normalization for curve mappings read from config files."""

from __future__ import annotations

from collections.abc import Mapping
import re
from typing import Any

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def kebab_key(name: str) -> str:
    """Normalize a field or preset name to lowercase kebab-case.

    Example:
        >>> kebab_key("damping_ratio")
        'damping-ratio'
        >>> kebab_key("EaseInOutCubic")
        'ease-in-out-cubic'
    """
    name = _CAMEL_BOUNDARY.sub("-", name.strip())
    return name.replace("_", "-").replace(" ", "-").lower()


def normalize_keys(data: Any) -> Any:
    """Return ``data`` with mapping keys converted to kebab-case.

    Non-mapping input is returned unchanged so model validation can report it.

    Raises:
        ValueError: If two keys normalize to the same field, e.g. both
            ``damping-ratio`` and ``damping_ratio`` are present.
    """
    if not isinstance(data, Mapping):
        return data

    normalized: dict[str, Any] = {}
    for key, value in data.items():
        if not isinstance(key, str):
            normalized[key] = value
            continue
        field = kebab_key(key)
        if field in normalized:
            raise ValueError(f"duplicate field `{field}`")
        normalized[field] = value
    return normalized
