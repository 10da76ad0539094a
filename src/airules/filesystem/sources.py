# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Discover rule, skill and settings sources on disk."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from airules.core.constants import (
    SETTINGS_FILENAME,
    SKILL_FILENAME,
    SOURCE_EXTENSION,
    ErrorKind,
)
from airules.core.exceptions import ConfigurationError
from airules.models.document import SourceDocument
from airules.models.result import DocumentError

logger = logging.getLogger("airules.filesystem.sources")

RULES_DIR = "rules"
SKILLS_DIR = "skills"


@dataclass
class SourceTree:
    """Everything found under one source root, in discovery order."""

    root: Path
    rules: list[SourceDocument] = field(default_factory=list)
    skills: list[SourceDocument] = field(default_factory=list)
    settings_path: Path | None = None
    # Files that were found but could not be read as UTF-8 text
    errors: list[DocumentError] = field(default_factory=list)


def discover_sources(root: Path, *, include_skills: bool = True) -> SourceTree:
    """Collect sources below *root*.

    Layout::

        <root>/rules/**/*.md          rule documents, ids relative to rules/
        <root>/skills/**/SKILL.md     skill documents, ids relative to <root>
        <root>/settings.json          optional target settings

    Files are ordered by their POSIX relative path so that repeated runs see
    the same order. A file that is not valid UTF-8 is left out and recorded in
    ``SourceTree.errors``; the rest of the tree is still returned.
    """
    root = root.expanduser()
    if not root.is_dir():
        raise ConfigurationError(f"Source directory not found: {root}")

    tree = SourceTree(root=root)

    rules_dir = root / RULES_DIR
    if rules_dir.is_dir():
        tree.rules = _read_all(
            (p for p in rules_dir.rglob(f"*{SOURCE_EXTENSION}") if p.is_file()),
            relative_to=rules_dir,
            errors=tree.errors,
        )

    skills_dir = root / SKILLS_DIR
    if include_skills and skills_dir.is_dir():
        tree.skills = _read_all(
            (p for p in skills_dir.rglob(SKILL_FILENAME) if p.is_file()),
            relative_to=root,
            errors=tree.errors,
        )

    settings_path = root / SETTINGS_FILENAME
    if settings_path.is_file():
        tree.settings_path = settings_path

    logger.info(
        "Discovered %d rules and %d skills under %s", len(tree.rules), len(tree.skills), root
    )
    return tree


def _read_all(
    paths: Iterable[Path], relative_to: Path, errors: list[DocumentError]
) -> list[SourceDocument]:
    by_id = {path.relative_to(relative_to).as_posix(): path for path in paths}
    documents: list[SourceDocument] = []
    for source_id in sorted(by_id):
        try:
            raw_text = by_id[source_id].read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.warning(
                "Skipping %s: not valid UTF-8", source_id, extra={"source_id": source_id}
            )
            errors.append(
                DocumentError(
                    source_id=source_id,
                    kind=ErrorKind.ENCODING,
                    message=f"not valid UTF-8 at byte {exc.start}: {exc.reason}",
                )
            )
            continue
        documents.append(SourceDocument(source_id=source_id, raw_text=raw_text))
    return documents
