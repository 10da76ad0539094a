# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Claude Code adapter: the source vocabulary, with path globs flattened."""

from __future__ import annotations

from airules.adapters.base import BaseAdapter, rename_paths
from airules.adapters.registry import adapter
from airules.core.constants import (
    FIELD_DESCRIPTION,
    FIELD_GLOBS,
    FIELD_NAME,
    SKILL_FILENAME,
    SequenceMode,
    TargetId,
)
from airules.models.document import Document, Header
from airules.models.target import Capabilities, TargetDescriptor


@adapter
class ClaudeAdapter(BaseAdapter):
    """Passes headers through, renaming ``paths`` to a one-line ``globs`` value.

    Claude only reads ``globs`` as a comma-separated string, so sequences in
    rule headers are flattened. Unknown fields are kept. Global rules apply
    natively through ``alwaysApply``; nothing is aggregated.
    """

    descriptor = TargetDescriptor(
        id=TargetId.CLAUDE,
        name="Claude Code",
        capabilities=Capabilities(rules=True, skills=True, settings=True, workflows=False),
        output_file_extension=".md",
        output_dir=".claude",
    )
    sequence_mode = SequenceMode.FLATTENED
    path_fields = (FIELD_GLOBS,)
    skill_filename = SKILL_FILENAME

    def rewrite_header(self, document: Document) -> Header:
        return rename_paths(document, FIELD_GLOBS)

    def skill_header(self, document: Document, name: str) -> Header:
        header: Header = {
            FIELD_NAME: name,
            FIELD_DESCRIPTION: document.description or f"Skill: {name}",
        }
        for key, value in (document.header or {}).items():
            header.setdefault(key, value)
        return header
