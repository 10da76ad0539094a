# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""GitHub Copilot adapter: path-scoped ``.instructions.md`` files."""

from __future__ import annotations

from airules.adapters.base import BaseAdapter
from airules.adapters.registry import adapter
from airules.core.constants import FIELD_APPLY_TO, FIELD_DESCRIPTION, TargetId
from airules.models.artifact import TransformedArtifact
from airules.models.document import Document, Header
from airules.models.target import Capabilities, TargetDescriptor


@adapter
class CopilotAdapter(BaseAdapter):
    """Transforms rules to Copilot custom instructions.

    Only ``applyTo`` (from ``paths``) and ``description`` are written; any other
    source field is dropped. Global rules are collected into
    ``copilot-instructions.md`` instead of carrying ``alwaysApply``.
    """

    descriptor = TargetDescriptor(
        id=TargetId.COPILOT,
        name="GitHub Copilot",
        capabilities=Capabilities(rules=True),
        output_file_extension=".instructions.md",
        output_dir=".github",
        rule_dir="instructions",
    )
    path_fields = (FIELD_APPLY_TO,)
    aggregate_filename = "copilot-instructions.md"

    def rewrite_header(self, document: Document) -> Header:
        header: Header = {}
        if document.paths:
            header[FIELD_APPLY_TO] = document.paths
        if document.description:
            header[FIELD_DESCRIPTION] = document.description
        return header

    def section_heading(self, artifact: TransformedArtifact) -> str:
        suffix = f" - {artifact.description}" if artifact.description else ""
        return f"## {artifact.base_name}{suffix}"

    def aggregate_preamble(self) -> str:
        return (
            "# Project Instructions\n\n"
            "These instructions are automatically applied to all files in this project.\n\n"
        )
