# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pipeline orchestrator: source documents in, per-target artifacts out."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from airules.adapters.base import BaseAdapter
from airules.adapters.registry import get_adapter
from airules.core.config import Settings, get_settings
from airules.core.constants import ErrorKind
from airules.core.exceptions import ConfigurationError, HeaderDecodeError
from airules.models.document import Document, SourceDocument
from airules.models.result import DocumentError, PipelineResult, TargetResult
from airules.parsers.header_codec import decode_document
from airules.pipeline.aggregation import aggregate

logger = logging.getLogger("airules.pipeline.orchestrator")


class RulePipeline:
    """Runs rule and skill documents through a fixed set of target adapters.

    Sources must be given in a stable order; that order decides the section
    order of every aggregate. A document whose header cannot be decoded is
    reported in ``PipelineResult.errors`` and skipped for all targets, as is a
    skill whose group directory name was already taken by an earlier skill.
    """

    def __init__(
        self,
        targets: Sequence[str] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        requested = targets or self._settings.default_targets
        if not requested:
            raise ConfigurationError("No targets selected")
        # Preserve the requested order, drop duplicates
        self._adapters: list[BaseAdapter] = [
            get_adapter(target) for target in dict.fromkeys(requested)
        ]

    @property
    def adapters(self) -> list[BaseAdapter]:
        return list(self._adapters)

    def run(
        self,
        rules: Sequence[SourceDocument],
        skills: Sequence[SourceDocument] = (),
    ) -> PipelineResult:
        """Transform all sources for every configured target."""
        errors: list[DocumentError] = []
        rule_documents = self._decode_all(rules, errors)
        skill_documents = self._unique_groups(self._decode_all(skills, errors), errors)

        result = PipelineResult(errors=errors)
        for adapter in self._adapters:
            result.targets.append(self.run_target(adapter, rule_documents, skill_documents))

        logger.info(
            "Pipeline complete: targets=%d rules=%d skills=%d errors=%d",
            len(self._adapters),
            len(rule_documents),
            len(skill_documents),
            len(errors),
        )
        return result

    def run_target(
        self,
        adapter: BaseAdapter,
        rules: Sequence[Document],
        skills: Sequence[Document] = (),
    ) -> TargetResult:
        """Transform already-decoded documents for a single target."""
        capabilities = adapter.capabilities
        result = TargetResult(target=adapter.target_id)

        if capabilities.rules:
            outcome = aggregate(adapter, [adapter.transform_rule(doc) for doc in rules])
            result.artifacts.extend(outcome.artifacts)
            result.aggregate = outcome.aggregate

        if skills and capabilities.accepts_skills:
            result.artifacts.extend(adapter.transform_skill(doc) for doc in skills)
        elif skills:
            logger.debug(
                "Target %s does not accept skills; skipping %d", adapter.target_id, len(skills)
            )

        logger.info(
            "Target %s: %d artifacts%s",
            adapter.target_id,
            len(result.artifacts),
            f", aggregate {result.aggregate.filename}" if result.aggregate else "",
        )
        return result

    def _unique_groups(
        self, skills: Sequence[Document], errors: list[DocumentError]
    ) -> list[Document]:
        """Keep the first skill of each group; later ones would share its output path."""
        owners: dict[str, str] = {}
        unique: list[Document] = []
        for doc in skills:
            owner = owners.setdefault(doc.group_name, doc.source_id)
            if owner == doc.source_id:
                unique.append(doc)
                continue
            message = f"skill group {doc.group_name!r} is already provided by {owner}"
            logger.warning(
                "Skipping %s: %s", doc.source_id, message, extra={"source_id": doc.source_id}
            )
            errors.append(
                DocumentError(source_id=doc.source_id, kind=ErrorKind.DUPLICATE, message=message)
            )
        return unique

    def _decode_all(
        self, sources: Sequence[SourceDocument], errors: list[DocumentError]
    ) -> list[Document]:
        documents: list[Document] = []
        for source in sources:
            try:
                documents.append(decode_document(source))
            except HeaderDecodeError as exc:
                logger.warning(
                    "Skipping %s: %s", source.source_id, exc, extra={"source_id": source.source_id}
                )
                errors.append(
                    DocumentError(source_id=source.source_id, kind=ErrorKind.DECODE, message=str(exc))
                )
        return documents
