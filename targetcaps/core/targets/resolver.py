"""
Target resolution — turn target identifier strings into capabilities.

    resolve_target("node14.5")            → one descriptor
    resolve_targets(["web", "es2020"])    → descriptors merged with "all"
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from targetcaps.core.models.capability import CapabilityDescriptor
from targetcaps.core.targets.merge import merge_target_properties
from targetcaps.core.targets.registry import TARGETS, supported_targets

logger = logging.getLogger(__name__)


class UnknownTargetError(ValueError):
    """Raised when no registered pattern recognises a target string.

    Carries the offending ``target`` and the ``supported`` list of
    ``(name, description)`` pairs so callers can show what is accepted.
    """

    def __init__(self, target: str, supported: list[tuple[str, str]]):
        self.target = target
        self.supported = supported
        listing = "\n".join(f"* {name}: {desc}" for name, desc in supported)
        super().__init__(
            f"Unknown target '{target}'. "
            f"The following targets are supported:\n{listing}"
        )


def resolve_target(target: str) -> CapabilityDescriptor:
    """Resolve a single target identifier.

    Patterns are tried in registry order; the first one whose regex
    matches the whole string and whose resolver returns a non-empty
    descriptor wins.

    Raises:
        UnknownTargetError: If nothing recognises ``target``.
    """
    for entry in TARGETS:
        captures = entry.match(target)
        if captures is None:
            continue
        result = entry.resolve(*captures)
        if result:
            logger.debug("Target '%s' resolved via %s", target, entry.name)
            return result
        logger.debug("Pattern %s matched '%s' but had no opinion", entry.name, target)

    raise UnknownTargetError(target, supported_targets())


def resolve_targets(targets: Sequence[str]) -> CapabilityDescriptor:
    """Resolve several targets and combine them conjunctively.

    The first unknown target aborts the whole call. Every list goes
    through the merge, a single target included, so listing a target
    twice never changes the result.

    Raises:
        UnknownTargetError: For the first unrecognised target.
    """
    resolved = [resolve_target(t) for t in targets]
    return merge_target_properties(resolved)
