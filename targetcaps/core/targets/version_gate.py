"""
Version gate — "is a feature available in this version?" (pure).

Pattern resolvers build one gate per requested version and ask it about
each feature's introduction version. No I/O, no registry knowledge.
"""

from __future__ import annotations

from collections.abc import Callable

from targetcaps.core.models.capability import TriState

Gate = Callable[..., TriState]


def _to_int(value: int | str | None) -> int:
    if value is None or value == "":
        return 0
    return int(value)


def make_gate(
    major: int | str | None,
    minor: int | str | None = None,
) -> Gate:
    """Build an availability check for a requested ``major[.minor]`` version.

    Args:
        major: Requested major version, as captured digits or an int.
            ``None`` (or ``""``) means no version was given.
        minor: Requested minor version; defaults to 0.

    Returns:
        ``available(baseline_major, baseline_minor=0)`` returning
        ``TriState.TRUE`` when the requested version is at or past the
        baseline, ``TriState.FALSE`` when it is older, and
        ``TriState.UNKNOWN`` for every baseline when no version was given.
    """
    if major is None or major == "":
        def unknown(baseline_major: int, baseline_minor: int = 0) -> TriState:
            return TriState.UNKNOWN

        return unknown

    req_major = _to_int(major)
    req_minor = _to_int(minor)

    def available(baseline_major: int, baseline_minor: int = 0) -> TriState:
        return TriState.of(
            req_major > baseline_major
            or (req_major == baseline_major and req_minor >= baseline_minor)
        )

    return available
