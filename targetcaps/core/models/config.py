"""
Targets configuration model — the contents of targets.yml.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class TargetsConfig(BaseModel):
    """Targets a project builds for, and how to combine them.

    ``merge`` selects the combination policy when several targets are
    listed: ``all`` keeps a flag only if no target contradicts it,
    ``any`` keeps it if at least one target has it.
    """

    targets: list[str] = Field(default_factory=list)
    merge: Literal["all", "any"] = "all"

    @field_validator("targets")
    @classmethod
    def _strip_targets(cls, value: list[str]) -> list[str]:
        cleaned = [t.strip() for t in value]
        if any(not t for t in cleaned):
            raise ValueError("target entries must be non-empty strings")
        return cleaned
