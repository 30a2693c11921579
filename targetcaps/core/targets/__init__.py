"""
Targets — registry, version gate, resolution and merging.

    from targetcaps.core.targets import resolve_target, resolve_targets
"""

from targetcaps.core.targets.merge import MergeMode, merge_target_properties
from targetcaps.core.targets.registry import (
    TARGETS,
    TargetPattern,
    find_pattern,
    supported_targets,
)
from targetcaps.core.targets.resolver import (
    UnknownTargetError,
    resolve_target,
    resolve_targets,
)
from targetcaps.core.targets.version_gate import make_gate

__all__ = [
    "MergeMode",
    "TARGETS",
    "TargetPattern",
    "UnknownTargetError",
    "find_pattern",
    "make_gate",
    "merge_target_properties",
    "resolve_target",
    "resolve_targets",
    "supported_targets",
]
