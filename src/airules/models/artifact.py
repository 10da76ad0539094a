# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Transformed artifact and aggregate models."""

from __future__ import annotations

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict

from airules.core.constants import SOURCE_EXTENSION, ArtifactKind


class TransformedArtifact(BaseModel):
    """One target-specific rendition of one source document."""

    model_config = ConfigDict(frozen=True)

    content: str
    filename: str
    is_global: bool = False
    group_dir: str | None = None
    kind: ArtifactKind = ArtifactKind.RULE

    # Provenance used by aggregation and the writer
    source_id: str
    body: str = ""
    description: str | None = None
    name: str | None = None

    @property
    def base_name(self) -> str:
        return PurePosixPath(self.source_id).name.removesuffix(SOURCE_EXTENSION)


class AggregatedDocument(BaseModel):
    """Consolidated file merging all global artifacts of one target."""

    model_config = ConfigDict(frozen=True)

    content: str
    filename: str
