"""
Resolve use case — targets from the CLI or targets.yml → one descriptor.

Ties together config loading, target resolution and merging.
Expected failures are captured in the result, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from targetcaps.core.config.loader import ConfigError, find_config_file, load_config
from targetcaps.core.models.capability import (
    CapabilityDescriptor,
    group_flags,
    to_plain,
)
from targetcaps.core.targets.merge import MergeMode, merge_target_properties
from targetcaps.core.targets.resolver import (
    UnknownTargetError,
    resolve_target,
    resolve_targets,
)

logger = logging.getLogger(__name__)


@dataclass
class ResolveResult:
    """Result of the resolve use case."""

    targets: list[str] = field(default_factory=list)
    mode: MergeMode = "all"
    properties: CapabilityDescriptor = field(default_factory=dict)
    config_path: Path | None = None
    error: str | None = None
    supported: list[tuple[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict:
        result: dict = {
            "targets": self.targets,
            "mode": self.mode,
            "config_path": str(self.config_path) if self.config_path else None,
        }
        if self.error:
            result["error"] = self.error
            if self.supported:
                result["supported"] = [
                    {"name": name, "description": desc}
                    for name, desc in self.supported
                ]
            return result

        result["properties"] = to_plain(self.properties)
        result["groups"] = {
            group: to_plain(flags)
            for group, flags in group_flags(self.properties).items()
        }
        return result


def run_resolve(
    targets: list[str] | None = None,
    config_path: Path | None = None,
    mode: MergeMode | None = None,
) -> ResolveResult:
    """Resolve targets into a single capability descriptor.

    Args:
        targets: Explicit target strings. When empty, targets.yml is used.
        config_path: Optional explicit path to targets.yml.
        mode: Merge policy; falls back to the config's ``merge`` (or "all").

    Returns:
        ResolveResult with the merged properties or an error.
    """
    result = ResolveResult()

    if targets:
        result.targets = list(targets)
        result.mode = mode or "all"
    else:
        if config_path is None:
            config_path = find_config_file()
        try:
            config = load_config(config_path)
        except ConfigError as e:
            result.error = str(e)
            return result
        result.config_path = config_path
        result.targets = list(config.targets)
        result.mode = mode or config.merge

    if not result.targets:
        result.error = "No targets given."
        return result

    try:
        if result.mode == "any":
            result.properties = merge_target_properties(
                [resolve_target(t) for t in result.targets], mode="any",
            )
        else:
            result.properties = resolve_targets(result.targets)
    except UnknownTargetError as e:
        result.error = str(e)
        result.supported = e.supported
        return result

    logger.info(
        "Resolved %d target(s) (%s): %d flag(s)",
        len(result.targets), result.mode, len(result.properties),
    )
    return result
