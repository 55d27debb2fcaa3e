"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from opensi.core.config.models import CoreConfig
from opensi.core.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("opensi.json")
        'json'
        >>> detect_format("opensi.yml")
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
    """Load and return raw configuration dictionary.

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
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
            # safe_load returns None for empty files
            return content if content is not None else {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def load_core_config(path: str | Path | None = None) -> CoreConfig:
    """Load and validate core configuration.

    Args:
        path: Path to config file (.json, .yaml, or .yml). When None, the
              default path is used if it exists, otherwise all defaults apply.

    Returns:
        Validated CoreConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    if path is None:
        default = CoreConfig.default_path()
        if not default.exists():
            return CoreConfig()
        path = default

    logger.debug(f"Loading core config from {path}")
    return CoreConfig.model_validate(load_config(path))


def configure_logging_from_config(config: CoreConfig | None = None) -> None:
    """Configure Python logging from core config.

    Args:
        config: CoreConfig instance (loads default if None)
    """
    if config is None:
        config = load_core_config()

    configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
