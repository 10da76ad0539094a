# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pipeline run result models."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from airules.core.constants import ErrorKind, TargetId, WriteAction
from airules.models.artifact import AggregatedDocument, TransformedArtifact


class DocumentError(BaseModel):
    """A source document that could not be processed."""

    source_id: str
    kind: ErrorKind = ErrorKind.DECODE
    message: str


class TargetResult(BaseModel):
    """Everything produced for one target in one run."""

    target: TargetId
    artifacts: list[TransformedArtifact] = Field(default_factory=list)
    aggregate: AggregatedDocument | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def artifact_count(self) -> int:
        return len(self.artifacts) + (1 if self.aggregate is not None else 0)


class PipelineResult(BaseModel):
    """Complete result of a pipeline run across all requested targets."""

    targets: list[TargetResult] = Field(default_factory=list)
    errors: list[DocumentError] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return not self.errors

    def for_target(self, target: str) -> TargetResult:
        for result in self.targets:
            if result.target == target:
                return result
        raise KeyError(target)


class WriteOperation(BaseModel):
    """A single file persisted (or planned, in dry-run mode)."""

    action: WriteAction
    path: str
