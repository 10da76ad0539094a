# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Source document models."""

from __future__ import annotations

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict

from airules.core.constants import (
    FIELD_ALWAYS_APPLY,
    FIELD_DESCRIPTION,
    FIELD_PATHS,
    SOURCE_EXTENSION,
)

HeaderValue = str | bool | list[str]
Header = dict[str, HeaderValue]


class SourceDocument(BaseModel):
    """Raw text of one source file, as read by discovery."""

    model_config = ConfigDict(frozen=True)

    source_id: str
    raw_text: str


class Document(BaseModel):
    """A decoded source document: optional header plus free-form body.

    source_id is an opaque, path-like identifier. It is only used for
    naming decisions (output filename, fallback headings, skill group).
    """

    model_config = ConfigDict(frozen=True)

    source_id: str
    header: Header | None = None
    body: str = ""

    @property
    def description(self) -> str | None:
        value = (self.header or {}).get(FIELD_DESCRIPTION)
        return value if isinstance(value, str) and value else None

    @property
    def paths(self) -> list[str]:
        """Path globs, tolerating a comma-separated string in place of a list."""
        value = (self.header or {}).get(FIELD_PATHS)
        if isinstance(value, str):
            return [p.strip() for p in value.split(",") if p.strip()]
        if isinstance(value, list):
            return [str(p) for p in value if str(p).strip()]
        return []

    @property
    def always_apply(self) -> bool:
        # Only a literal boolean true counts; "true" as a quoted string does not.
        return (self.header or {}).get(FIELD_ALWAYS_APPLY) is True

    @property
    def file_name(self) -> str:
        return PurePosixPath(self.source_id).name

    @property
    def base_name(self) -> str:
        return self.file_name.removesuffix(SOURCE_EXTENSION)

    @property
    def group_name(self) -> str:
        """Name of the directory that directly owns this document."""
        parent = PurePosixPath(self.source_id).parent
        return parent.name or self.base_name
