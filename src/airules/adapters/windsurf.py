# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Windsurf adapter: trigger-based rules and skill workflows."""

from __future__ import annotations

from airules.adapters.base import BaseAdapter
from airules.adapters.registry import adapter
from airules.core.constants import (
    FIELD_DESCRIPTION,
    FIELD_GLOBS,
    FIELD_NAME,
    FIELD_TRIGGER,
    ArtifactKind,
    TargetId,
    Trigger,
)
from airules.models.artifact import TransformedArtifact
from airules.models.document import Document, Header
from airules.models.target import Capabilities, TargetDescriptor
from airules.parsers.header_codec import encode


@adapter
class WindsurfAdapter(BaseAdapter):
    """Transforms rules to Windsurf's trigger vocabulary.

    Transformations:
    * ``paths`` -> ``trigger: glob`` plus ``globs``
    * ``alwaysApply: true`` -> ``trigger: always``, merged into ``global_rules.md``
    * skills -> manual-trigger workflows
    """

    descriptor = TargetDescriptor(
        id=TargetId.WINDSURF,
        name="Windsurf",
        capabilities=Capabilities(rules=True, skills=False, settings=False, workflows=True),
        output_file_extension=".md",
        output_dir=".windsurf",
    )
    path_fields = (FIELD_GLOBS,)
    aggregate_filename = "global_rules.md"
    skill_filename = "workflow.md"
    skill_kind = ArtifactKind.WORKFLOW

    def rewrite_header(self, document: Document) -> Header:
        header: Header = {}
        if document.description:
            header[FIELD_DESCRIPTION] = document.description
        if document.always_apply:
            header[FIELD_TRIGGER] = Trigger.ALWAYS
        elif document.paths:
            header[FIELD_TRIGGER] = Trigger.GLOB
            header[FIELD_GLOBS] = document.paths
        return header

    def skill_header(self, document: Document, name: str) -> Header:
        return {
            FIELD_NAME: name,
            FIELD_DESCRIPTION: document.description or f"Workflow: {name}",
            FIELD_TRIGGER: Trigger.MANUAL,
        }

    def section_heading(self, artifact: TransformedArtifact) -> str:
        suffix = f" - {artifact.description}" if artifact.description else ""
        return f"## {artifact.base_name}{suffix}"

    def aggregate_preamble(self) -> str:
        return encode(
            {FIELD_TRIGGER: Trigger.ALWAYS},
            "# Global Rules\n\nThese rules are always applied to all files in this project.\n\n",
        )
