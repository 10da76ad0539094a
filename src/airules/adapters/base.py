# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Abstract base class for target adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import PurePosixPath
from typing import ClassVar

from airules.core.constants import (
    FIELD_NAME,
    FIELD_PATHS,
    SECTION_SEPARATOR,
    SOURCE_EXTENSION,
    ArtifactKind,
    SequenceMode,
    TargetId,
)
from airules.core.exceptions import UnsupportedCapabilityError
from airules.models.artifact import AggregatedDocument, TransformedArtifact
from airules.models.document import Document, Header
from airules.models.target import Capabilities, TargetDescriptor
from airules.parsers.header_codec import encode


class BaseAdapter(ABC):
    """All target adapters must inherit from this class.

    Every operation is a pure function of its arguments; adapters hold no
    per-run state and a single instance can be shared freely.
    """

    descriptor: ClassVar[TargetDescriptor]
    sequence_mode: ClassVar[SequenceMode] = SequenceMode.NATIVE
    # Header fields that carry path matching for this target
    path_fields: ClassVar[tuple[str, ...]] = ()
    aggregate_filename: ClassVar[str | None] = None
    skill_filename: ClassVar[str | None] = None
    skill_kind: ClassVar[ArtifactKind] = ArtifactKind.SKILL

    @property
    def target_id(self) -> TargetId:
        return self.descriptor.id

    @property
    def capabilities(self) -> Capabilities:
        return self.descriptor.capabilities

    # -- rules ---------------------------------------------------------------

    @abstractmethod
    def rewrite_header(self, document: Document) -> Header:
        """Map the source header onto this target's field vocabulary."""
        ...

    def transform_rule(self, document: Document) -> TransformedArtifact:
        """Convert a rule document into this target's artifact."""
        filename = self.get_output_filename(document.source_id)
        if document.header is None:
            return TransformedArtifact(
                content=document.body,
                filename=filename,
                source_id=document.source_id,
                body=document.body,
            )

        is_global = document.always_apply
        header = self.rewrite_header(document)
        if is_global:
            for field in self.path_fields:
                header.pop(field, None)

        return TransformedArtifact(
            content=encode(header or None, document.body, self.sequence_mode),
            filename=filename,
            is_global=is_global,
            source_id=document.source_id,
            body=document.body,
            description=document.description,
        )

    # -- skills --------------------------------------------------------------

    def skill_header(self, document: Document, name: str) -> Header:
        """Reduced header for a skill document; overridden by skill-capable targets."""
        raise UnsupportedCapabilityError(f"{self.target_id} does not support skills")

    def transform_skill(self, document: Document) -> TransformedArtifact:
        """Convert a skill document into this target's skill or workflow artifact.

        The group name is the directory that owns the skill file, unless the
        header names the skill explicitly.
        """
        if not self.capabilities.accepts_skills or self.skill_filename is None:
            raise UnsupportedCapabilityError(f"{self.target_id} does not support skills")

        group = document.group_name
        explicit = (document.header or {}).get(FIELD_NAME)
        name = explicit if isinstance(explicit, str) and explicit else group
        header = self.skill_header(document, name)

        return TransformedArtifact(
            content=encode(header, document.body),
            filename=self.skill_filename,
            group_dir=group,
            kind=self.skill_kind,
            source_id=document.source_id,
            body=document.body,
            description=document.description,
            name=name,
        )

    # -- aggregation ---------------------------------------------------------

    def aggregate_global_rules(
        self, artifacts: Sequence[TransformedArtifact]
    ) -> AggregatedDocument | None:
        """Merge global artifacts, in the given order, into one document.

        Returns ``None`` when there is nothing to merge or the target applies
        global rules natively.
        """
        if not artifacts or self.aggregate_filename is None:
            return None

        sections = []
        for artifact in artifacts:
            if not artifact.is_global:
                raise ValueError(f"{artifact.source_id} is not a global artifact")
            sections.append(f"{self.section_heading(artifact)}\n\n{artifact.body}")

        return AggregatedDocument(
            content=self.aggregate_preamble() + SECTION_SEPARATOR.join(sections),
            filename=self.aggregate_filename,
        )

    def section_heading(self, artifact: TransformedArtifact) -> str:
        return f"# {artifact.description or artifact.base_name}"

    def aggregate_preamble(self) -> str:
        return ""

    # -- naming --------------------------------------------------------------

    def get_output_filename(self, source_id: str) -> str:
        name = PurePosixPath(source_id).name
        return name.removesuffix(SOURCE_EXTENSION) + self.get_file_extension()

    def get_file_extension(self) -> str:
        return self.descriptor.output_file_extension


def rename_paths(document: Document, target_field: str) -> Header:
    """Copy the header, moving ``paths`` to *target_field* at the same position."""
    header: Header = {}
    for key, value in (document.header or {}).items():
        if key == FIELD_PATHS:
            if document.paths:
                header[target_field] = document.paths
        else:
            header[key] = value
    return header
