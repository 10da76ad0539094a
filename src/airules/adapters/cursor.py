# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Cursor adapter: ``paths`` becomes a ``globs`` list in ``.mdc`` files."""

from __future__ import annotations

from airules.adapters.base import BaseAdapter, rename_paths
from airules.adapters.registry import adapter
from airules.core.constants import FIELD_GLOBS, TargetId
from airules.models.document import Document, Header
from airules.models.target import Capabilities, TargetDescriptor


@adapter
class CursorAdapter(BaseAdapter):
    """Transforms rules to Cursor's ``.mdc`` format.

    Transformations:
    * ``paths`` -> ``globs`` (kept as a list)
    * ``alwaysApply`` and unknown fields are kept as-is
    * extension ``.md`` -> ``.mdc``
    * global rules are merged into ``.cursorrules``, one ``# <description>``
      section per rule
    """

    descriptor = TargetDescriptor(
        id=TargetId.CURSOR,
        name="Cursor",
        capabilities=Capabilities(rules=True),
        output_file_extension=".mdc",
        output_dir=".cursor",
    )
    path_fields = (FIELD_GLOBS,)
    aggregate_filename = ".cursorrules"

    def rewrite_header(self, document: Document) -> Header:
        return rename_paths(document, FIELD_GLOBS)
