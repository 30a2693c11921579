"""
Config check use case — validate targets.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from targetcaps.core.config.loader import ConfigError, find_config_file, load_config
from targetcaps.core.models.config import TargetsConfig
from targetcaps.core.targets.resolver import UnknownTargetError, resolve_target


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: TargetsConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "targets": self.config.targets if self.config else [],
            "merge": self.config.merge if self.config else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate targets configuration and report issues.

    Args:
        config_path: Optional explicit path to targets.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        result.errors.append("No targets.yml found.")
        return result

    result.config_path = config_path

    try:
        config = load_config(config_path)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    if not config.targets:
        result.warnings.append("No targets listed. Nothing will be resolved.")

    for target in config.targets:
        try:
            resolve_target(target)
        except UnknownTargetError:
            result.errors.append(f"Unknown target: {target}")

    dupes = sorted({t for t in config.targets if config.targets.count(t) > 1})
    if dupes:
        result.warnings.append(f"Duplicate targets: {', '.join(dupes)}")

    result.valid = len(result.errors) == 0
    return result
