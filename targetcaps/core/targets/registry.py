"""
Target registry — the catalogue of recognised target identifiers.

Each entry pairs a full-string regex with a resolver that turns the
captured groups into a capability descriptor. Entries are tried in
order and the first match wins, so ``TARGETS`` is an immutable tuple
built once at import time.

Resolvers are pure: no I/O, a fresh dict per call.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from targetcaps.core.models.capability import (
    PLATFORM_FLAGS,
    SYNTAX_FLAGS,
    CapabilityDescriptor,
    TriState,
)
from targetcaps.core.targets.version_gate import Gate, make_gate

T = TriState.TRUE
F = TriState.FALSE

Resolver = Callable[..., CapabilityDescriptor | None]


@dataclass(frozen=True)
class TargetPattern:
    """One recognised family of target identifiers."""

    name: str                       # display name, e.g. "electron[X[.Y]]-main"
    description: str
    pattern: re.Pattern[str]        # matched against the whole string
    resolve: Resolver

    def match(self, target: str) -> tuple[str | None, ...] | None:
        """Return the captured groups if ``target`` matches, else None."""
        m = self.pattern.fullmatch(target)
        if m is None:
            return None
        return m.groups()


# ── Feature introduction tables (major, minor) ──────────────────

# https://node.green/
NODE_SYNTAX: dict[str, tuple[int, int]] = {
    "globalThis": (12, 0),
    "const": (6, 0),
    "arrowFunctions": (6, 0),
    "forOf": (5, 0),
    "destructuring": (6, 0),
    "bigIntLiteral": (10, 4),
    "import": (12, 17),
    "module": (12, 17),
}

# https://node.green/ + https://github.com/electron/releases
ELECTRON_SYNTAX: dict[str, tuple[int, int]] = {
    "globalThis": (5, 0),
    "const": (1, 1),
    "arrowFunctions": (1, 1),
    "forOf": (0, 36),
    "destructuring": (1, 1),
    "bigIntLiteral": (4, 0),
    "import": (11, 0),
    "module": (11, 0),
}

# https://github.com/nwjs/nw.js/blob/nw48/CHANGELOG.md
NWJS_SYNTAX: dict[str, tuple[int, int]] = {
    "globalThis": (0, 43),
    "const": (0, 15),
    "arrowFunctions": (0, 15),
    "forOf": (0, 13),
    "destructuring": (0, 15),
    "bigIntLiteral": (0, 32),
    "import": (0, 43),
    "module": (0, 43),
}

# First ECMAScript edition with the whole syntax set (ES2015).
ES_SYNTAX_EDITION = 6


# ── Helpers ─────────────────────────────────────────────────────

def _platform(*enabled: str) -> CapabilityDescriptor:
    """Platform flags: the named ones TRUE, every other one FALSE."""
    return {name: T if name in enabled else F for name in PLATFORM_FLAGS}


def _gated(gate: Gate, table: dict[str, tuple[int, int]]) -> CapabilityDescriptor:
    return {flag: gate(major, minor) for flag, (major, minor) in table.items()}


# ── Resolvers ───────────────────────────────────────────────────

def _resolve_node(
    async_flag: str | None,
    major: str | None,
    minor: str | None,
) -> CapabilityDescriptor:
    gate = make_gate(major, minor)
    return {
        **_platform("node"),
        "require": TriState.of(not async_flag),
        "global": T,
        "document": F,
        "fetchWasm": F,
        "importScripts": F,
        "importScriptsInWorker": F,
        **_gated(gate, NODE_SYNTAX),
    }


def _resolve_web() -> CapabilityDescriptor:
    return {
        **_platform("web"),
        "document": T,
        "importScriptsInWorker": T,
        "fetchWasm": T,
        "importScripts": F,
        "require": F,
        "global": F,
    }


def _resolve_webworker() -> CapabilityDescriptor:
    return {
        **_platform("web"),
        "importScripts": T,
        "importScriptsInWorker": T,
        "fetchWasm": T,
        "require": F,
        "document": F,
        "global": F,
    }


def _electron_api() -> CapabilityDescriptor:
    return {
        "global": T,
        "require": F,
        "document": F,
        "fetchWasm": F,
        "importScripts": F,
        "importScriptsInWorker": F,
    }


def _resolve_electron_main(
    major: str | None,
    minor: str | None,
) -> CapabilityDescriptor:
    return {
        **_platform("node", "electronMain"),
        **_electron_api(),
        **_gated(make_gate(major, minor), ELECTRON_SYNTAX),
    }


def _resolve_electron_preload(
    major: str | None,
    minor: str | None,
) -> CapabilityDescriptor:
    return {
        **_platform("node", "web", "electronPreload"),
        **_electron_api(),
        **_gated(make_gate(major, minor), ELECTRON_SYNTAX),
    }


def _resolve_nwjs(major: str | None, minor: str | None) -> CapabilityDescriptor:
    return {
        **_platform("node", "web", "nwjs"),
        "global": T,
        "require": F,
        "document": F,
        "fetchWasm": F,
        "importScripts": F,
        "importScriptsInWorker": F,
        **_gated(make_gate(major, minor), NWJS_SYNTAX),
    }


def _resolve_es(version: str) -> CapabilityDescriptor:
    edition = int(version)
    if edition > 1000:
        # es2015 -> 6, es2020 -> 11
        edition -= 2009
    supported = TriState.of(edition >= ES_SYNTAX_EDITION)
    return {flag: supported for flag in SYNTAX_FLAGS}


# ── Registry ────────────────────────────────────────────────────

# ASCII digits only
_VERSION = r"(?:([0-9]+)(?:\.([0-9]+))?)?"

TARGETS: tuple[TargetPattern, ...] = (
    TargetPattern(
        name="[async-]node[X[.Y]]",
        description=(
            "Node.js in version X.Y. The 'async-' prefix will load chunks "
            "asynchronously via 'fs' and 'vm' instead of 'require()'. "
            "Examples: node14.5, async-node10."
        ),
        pattern=re.compile(rf"(async-)?node{_VERSION}"),
        resolve=_resolve_node,
    ),
    TargetPattern(
        name="web",
        description="Web browser.",
        pattern=re.compile(r"web"),
        resolve=_resolve_web,
    ),
    TargetPattern(
        name="webworker",
        description="Web Worker, SharedWorker or Service Worker.",
        pattern=re.compile(r"webworker"),
        resolve=_resolve_webworker,
    ),
    TargetPattern(
        name="electron[X[.Y]]-main",
        description="Electron in version X.Y. Script is running in main context.",
        pattern=re.compile(rf"electron{_VERSION}-main"),
        resolve=_resolve_electron_main,
    ),
    TargetPattern(
        name="electron[X[.Y]]-preload / electron[X[.Y]]-renderer",
        description=(
            "Electron in version X.Y. Script is running in preload or "
            "renderer context."
        ),
        pattern=re.compile(rf"electron{_VERSION}-(?:preload|renderer)"),
        resolve=_resolve_electron_preload,
    ),
    TargetPattern(
        name="nwjs[X[.Y]] / node-webkit[X[.Y]]",
        description="NW.js in version X.Y.",
        pattern=re.compile(rf"(?:nwjs|node-webkit){_VERSION}"),
        resolve=_resolve_nwjs,
    ),
    TargetPattern(
        name="esX",
        description="EcmaScript in this version. Examples: es5, es2020.",
        pattern=re.compile(r"es([0-9]+)"),
        resolve=_resolve_es,
    ),
)


def supported_targets() -> list[tuple[str, str]]:
    """``(name, description)`` for every registered target, in order."""
    return [(t.name, t.description) for t in TARGETS]


def find_pattern(target: str) -> TargetPattern | None:
    """Return the first registered pattern whose regex matches ``target``."""
    for entry in TARGETS:
        if entry.match(target) is not None:
            return entry
    return None
