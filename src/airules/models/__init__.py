# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for airules."""

from airules.models.artifact import AggregatedDocument, TransformedArtifact
from airules.models.document import Document, Header, HeaderValue, SourceDocument
from airules.models.lint import LintFinding, LintReport
from airules.models.result import DocumentError, PipelineResult, TargetResult, WriteOperation
from airules.models.target import Capabilities, TargetDescriptor

__all__ = [
    "AggregatedDocument",
    "Capabilities",
    "Document",
    "DocumentError",
    "Header",
    "HeaderValue",
    "LintFinding",
    "LintReport",
    "PipelineResult",
    "SourceDocument",
    "TargetDescriptor",
    "TargetResult",
    "TransformedArtifact",
    "WriteOperation",
]
