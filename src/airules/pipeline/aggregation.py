# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Split a target's rule artifacts into individual files and one aggregate."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from airules.adapters.base import BaseAdapter
from airules.models.artifact import AggregatedDocument, TransformedArtifact


@dataclass(frozen=True)
class AggregationOutcome:
    """Artifacts to write one by one, plus the aggregate if any."""

    artifacts: list[TransformedArtifact] = field(default_factory=list)
    aggregate: AggregatedDocument | None = None


def partition(
    artifacts: Sequence[TransformedArtifact],
) -> tuple[list[TransformedArtifact], list[TransformedArtifact]]:
    """Return ``(global, scoped)`` artifacts, each in input order."""
    global_artifacts = [a for a in artifacts if a.is_global]
    scoped_artifacts = [a for a in artifacts if not a.is_global]
    return global_artifacts, scoped_artifacts


def aggregate(
    adapter: BaseAdapter, artifacts: Sequence[TransformedArtifact]
) -> AggregationOutcome:
    """Fold the global artifacts of one target into its aggregate document.

    If the target produces no aggregate, global artifacts are kept as
    individual files so that no rule is lost.
    """
    global_artifacts, scoped_artifacts = partition(artifacts)
    merged = adapter.aggregate_global_rules(global_artifacts)
    if merged is None:
        return AggregationOutcome(artifacts=list(artifacts))
    return AggregationOutcome(artifacts=scoped_artifacts, aggregate=merged)
