"""
Configuration loader — reads targets.yml into a TargetsConfig.

Reads YAML, validates against the Pydantic schema, and returns the
typed config. Two shapes are accepted::

    targets: [web, es2020]
    merge: all

or a bare list of targets.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from targetcaps.core.models.config import TargetsConfig

logger = logging.getLogger(__name__)

# Default config filename
TARGETS_CONFIG_FILE = "targets.yml"


class ConfigError(Exception):
    """Raised when targets configuration is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for targets.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to targets.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / TARGETS_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> TargetsConfig:
    """Load and validate targets configuration.

    Args:
        path: Explicit path to targets.yml. If None, searches upward.

    Returns:
        Validated TargetsConfig.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigError(
            f"No {TARGETS_CONFIG_FILE} found. "
            "Pass targets on the command line, or specify --config."
        )

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading targets config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if isinstance(data, list):
        data = {"targets": data}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected a YAML mapping or list in {path}, got {type(data).__name__}"
        )

    try:
        config = TargetsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid targets configuration: {e}") from e

    logger.info(
        "Loaded %d target(s) from %s (merge: %s)",
        len(config.targets), path, config.merge,
    )
    return config
