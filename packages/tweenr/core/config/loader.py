"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

from collections.abc import Hashable
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from tweenr.core.config.models import AppConfig
from tweenr.core.curves.variant import AnimationCurve, parse_curve
from tweenr.core.utils.logging import configure_logging as _configure_root_logging

logger = logging.getLogger(__name__)

# Default app config path (can be overridden)
_DEFAULT_APP_CONFIG_PATH = Path("tweenr.yaml")


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects mappings with repeated keys."""


def _construct_unique_mapping(loader: _UniqueKeyLoader, node: yaml.MappingNode, deep: bool = False):
    loader.flatten_mapping(node)
    seen: set[Any] = set()
    for key_node, _ in node.value:
        key = loader.construct_object(key_node, deep=deep)
        if not isinstance(key, Hashable):
            raise yaml.constructor.ConstructorError(
                "while constructing a mapping",
                node.start_mark,
                "found unhashable key",
                key_node.start_mark,
            )
        if key in seen:
            raise yaml.constructor.ConstructorError(
                "while constructing a mapping",
                node.start_mark,
                f"found duplicate key {key!r}",
                key_node.start_mark,
            )
        seen.add(key)
    return loader.construct_mapping(node, deep=deep)


_UniqueKeyLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_unique_mapping
)


def _reject_duplicate_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"duplicate key {key!r}")
        result[key] = value
    return result


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("tweenr.json")
        'json'
        >>> detect_format("tweenr.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def _read_document(path: str | Path) -> Any:
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f, object_pairs_hook=_reject_duplicate_pairs)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.load(f, Loader=_UniqueKeyLoader)  # noqa: S506 - safe loader subclass
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Supports both JSON and YAML formats. Format is auto-detected from file
    extension. Keys repeated within one mapping are rejected.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary (empty for an empty YAML file)

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    content = _read_document(path)
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(content).__name__}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
            Defaults to tweenr.yaml; a missing default file yields defaults.

    Returns:
        Validated AppConfig instance with defaults for missing values

    Raises:
        FileNotFoundError: If an explicitly given file does not exist
        ValidationError: If config is invalid
    """
    if path is None:
        if not _DEFAULT_APP_CONFIG_PATH.exists():
            logger.debug("No %s found, using default config", _DEFAULT_APP_CONFIG_PATH)
            return AppConfig()
        path = _DEFAULT_APP_CONFIG_PATH

    raw_config = load_config(path)
    config = AppConfig.model_validate(raw_config)
    logger.debug("Loaded %d animation(s) from %s", len(config.animations), path)
    return config


def load_curve(path: str | Path) -> AnimationCurve:
    """Load a single animation curve from a file.

    The file holds one curve in any accepted spelling: a preset name, a cubic
    or spring mapping, or a single-key variant wrapper.

    Example:
        >>> curve = load_curve("bounce.yaml")
    """
    return parse_curve(_read_document(path))


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_root_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
