"""
Descriptor merging — the three-valued algebra for multiple targets.

Two policies over the union of keys present in any input:

    all (default)   FALSE if any input says FALSE, else TRUE
    any             TRUE if any input says TRUE, else FALSE

Under ``all`` an UNKNOWN or missing value never pulls a flag away from
TRUE; only an explicit FALSE does.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from targetcaps.core.models.capability import CapabilityDescriptor, TriState

MergeMode = Literal["all", "any"]


def merge_target_properties(
    descriptors: Sequence[CapabilityDescriptor],
    mode: MergeMode = "all",
) -> CapabilityDescriptor:
    """Combine descriptors into one.

    Args:
        descriptors: Already-resolved descriptors, in target order.
        mode: ``"all"`` (conjunctive) or ``"any"`` (disjunctive).

    Returns:
        A fresh descriptor holding every key seen in any input.
    """
    if mode not in ("all", "any"):
        raise ValueError(f"Unknown merge mode: {mode!r} (expected 'all' or 'any')")

    keys: dict[str, None] = {}
    for descriptor in descriptors:
        keys.update(dict.fromkeys(descriptor))

    # The value that settles a key as soon as one input states it
    decisive = TriState.TRUE if mode == "any" else TriState.FALSE
    fallback = TriState.FALSE if mode == "any" else TriState.TRUE

    result: CapabilityDescriptor = {}
    for key in keys:
        settled = any(d.get(key) is decisive for d in descriptors)
        result[key] = decisive if settled else fallback
    return result
