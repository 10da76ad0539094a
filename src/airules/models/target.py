# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Target descriptor models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from airules.core.constants import TargetId


class Capabilities(BaseModel):
    """Artifact kinds a target understands."""

    model_config = ConfigDict(frozen=True)

    rules: bool = True
    skills: bool = False
    settings: bool = False
    workflows: bool = False

    @property
    def accepts_skills(self) -> bool:
        """Skill documents are accepted as skills or reduced to workflows."""
        return self.skills or self.workflows


class TargetDescriptor(BaseModel):
    """Static description of a consuming tool."""

    model_config = ConfigDict(frozen=True)

    id: TargetId
    name: str
    capabilities: Capabilities
    output_file_extension: str
    output_dir: str
    rule_dir: str = "rules"
