"""
Domain models — capability flags and configuration.

    from targetcaps.core.models import TriState, TargetsConfig
"""

from targetcaps.core.models.capability import (
    ALL_FLAGS,
    API_FLAGS,
    FLAG_GROUPS,
    PLATFORM_FLAGS,
    SYNTAX_FLAGS,
    CapabilityDescriptor,
    TriState,
    get_flag,
    group_flags,
    to_plain,
)
from targetcaps.core.models.config import TargetsConfig

__all__ = [
    # capability.py
    "ALL_FLAGS",
    "API_FLAGS",
    "CapabilityDescriptor",
    "FLAG_GROUPS",
    "PLATFORM_FLAGS",
    "SYNTAX_FLAGS",
    "TriState",
    "get_flag",
    "group_flags",
    "to_plain",
    # config.py
    "TargetsConfig",
]
