"""
Capability model — tri-state flags describing a runtime environment.

A capability descriptor maps flag names to a ``TriState``. Keys that are
missing from a descriptor are implicitly ``UNKNOWN``; a key that is present
with ``UNKNOWN`` still takes part in merging.
"""

from __future__ import annotations

from enum import Enum


class TriState(Enum):
    """Three-valued availability: yes, no, or no opinion."""

    TRUE = True
    FALSE = False
    UNKNOWN = None

    @classmethod
    def of(cls, value: bool | None) -> TriState:
        """Convert a plain ``bool`` (or ``None``) into a TriState."""
        if value is None:
            return cls.UNKNOWN
        return cls.TRUE if value else cls.FALSE

    @property
    def is_known(self) -> bool:
        return self is not TriState.UNKNOWN


CapabilityDescriptor = dict[str, TriState]


# ── Flag names ──────────────────────────────────────────────────

# Platform identity
PLATFORM_FLAGS: tuple[str, ...] = (
    "web",
    "node",
    "nwjs",
    "electronMain",
    "electronPreload",
)

# Host API availability
API_FLAGS: tuple[str, ...] = (
    "require",
    "document",
    "importScripts",
    "importScriptsInWorker",
    "fetchWasm",
    "global",
)

# Language-syntax availability
SYNTAX_FLAGS: tuple[str, ...] = (
    "globalThis",
    "bigIntLiteral",
    "const",
    "arrowFunctions",
    "forOf",
    "destructuring",
    "import",
    "module",
)

ALL_FLAGS: tuple[str, ...] = PLATFORM_FLAGS + API_FLAGS + SYNTAX_FLAGS

FLAG_GROUPS: dict[str, tuple[str, ...]] = {
    "platform": PLATFORM_FLAGS,
    "api": API_FLAGS,
    "syntax": SYNTAX_FLAGS,
}


def get_flag(descriptor: CapabilityDescriptor, name: str) -> TriState:
    """Look up a flag, treating a missing key as ``UNKNOWN``."""
    return descriptor.get(name, TriState.UNKNOWN)


def group_flags(
    descriptor: CapabilityDescriptor,
) -> dict[str, CapabilityDescriptor]:
    """Split a descriptor into platform / api / syntax / other sections.

    Only keys present in the descriptor are returned; ordering inside a
    group follows the canonical flag order.
    """
    grouped: dict[str, CapabilityDescriptor] = {}
    for group, names in FLAG_GROUPS.items():
        section = {n: descriptor[n] for n in names if n in descriptor}
        if section:
            grouped[group] = section

    other = {k: v for k, v in descriptor.items() if k not in ALL_FLAGS}
    if other:
        grouped["other"] = other
    return grouped


def to_plain(descriptor: CapabilityDescriptor) -> dict[str, bool | None]:
    """Render a descriptor as JSON-friendly ``True``/``False``/``None``."""
    return {k: v.value for k, v in descriptor.items()}
