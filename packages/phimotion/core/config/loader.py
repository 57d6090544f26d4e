"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from phimotion.core.config.models import MotionConfig
from phimotion.core.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("motion.json")
        'json'
        >>> detect_format("motion.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            content = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_motion_config(path: str | Path | None = None) -> MotionConfig:
    """Load and validate motion configuration.

    Args:
        path: Path to config file; None returns the defaults.

    Returns:
        Validated MotionConfig

    Raises:
        ValidationError: If config is invalid
    """
    if path is None:
        return MotionConfig()

    raw_config = load_config(path)
    config = MotionConfig.model_validate(raw_config)
    logger.debug("Loaded motion config from %s", path)
    return config


def configure_logging_from_config(config: MotionConfig) -> None:
    """Configure Python logging from a MotionConfig."""
    configure_logging(
        level=config.logging.level,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
