# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Check rule documents against the recognized header vocabulary.

Errors mark rules that would be dropped or misapplied by every target: no
header, no description, both or neither of ``paths`` and ``alwaysApply``,
and globs that match everything. Warnings cover unknown fields and globs that
only match files at the project root.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from airules.core.constants import (
    FIELD_ALWAYS_APPLY,
    FIELD_DESCRIPTION,
    FIELD_NAME,
    FIELD_PATHS,
    FIELD_VERSION,
    LintSeverity,
)
from airules.core.exceptions import HeaderDecodeError
from airules.models.document import SourceDocument
from airules.models.lint import LintFinding, LintReport
from airules.models.result import DocumentError
from airules.parsers.header_codec import decode

KNOWN_FIELDS = frozenset(
    {FIELD_DESCRIPTION, FIELD_PATHS, FIELD_ALWAYS_APPLY, FIELD_NAME, FIELD_VERSION}
)
CATCH_ALL_GLOBS = frozenset({"**/*", "**", "*"})

_ROOT_ONLY_GLOB_RE = re.compile(r"^\*\.\w+$")


def lint_rule(source: SourceDocument) -> list[LintFinding]:
    """Return the findings for a single rule document, in a fixed order."""
    findings: list[LintFinding] = []

    def error(message: str) -> None:
        findings.append(
            LintFinding(source_id=source.source_id, severity=LintSeverity.ERROR, message=message)
        )

    def warn(message: str) -> None:
        findings.append(
            LintFinding(source_id=source.source_id, severity=LintSeverity.WARNING, message=message)
        )

    try:
        header, _ = decode(source.raw_text, source_id=source.source_id)
    except HeaderDecodeError as exc:
        error(f"Invalid header: {exc.detail}")
        return findings

    if header is None:
        error("No header found")
        return findings

    for key in header:
        if key not in KNOWN_FIELDS:
            warn(f'Unknown header field "{key}"')

    description = header.get(FIELD_DESCRIPTION)
    if description is None:
        error(f'Missing "{FIELD_DESCRIPTION}" field')
    elif not isinstance(description, str):
        error(f'"{FIELD_DESCRIPTION}" must be a string')
    elif not description.strip():
        error(f'Empty "{FIELD_DESCRIPTION}" field')

    has_paths = FIELD_PATHS in header
    has_always_apply = FIELD_ALWAYS_APPLY in header
    if has_paths and has_always_apply:
        error(f'Cannot have both "{FIELD_PATHS}" and "{FIELD_ALWAYS_APPLY}"')
    elif not has_paths and not has_always_apply:
        error(f'Must have either "{FIELD_PATHS}" or "{FIELD_ALWAYS_APPLY}"')

    if has_always_apply and not isinstance(header[FIELD_ALWAYS_APPLY], bool):
        error(f'"{FIELD_ALWAYS_APPLY}" must be true or false')

    if has_paths:
        paths = header[FIELD_PATHS]
        if not isinstance(paths, list):
            error(f'"{FIELD_PATHS}" must be a list')
        elif not paths:
            error(f'"{FIELD_PATHS}" is empty (rule will never activate)')
        else:
            for pattern in paths:
                if pattern in CATCH_ALL_GLOBS:
                    error(
                        f'Catch-all pattern "{pattern}": use "{FIELD_ALWAYS_APPLY}: true" '
                        "or narrow the glob"
                    )
                elif _ROOT_ONLY_GLOB_RE.match(pattern):
                    warn(f'Root-only glob "{pattern}": did you mean "**/{pattern}"?')

    return findings


def lint_sources(
    rules: Sequence[SourceDocument], errors: Sequence[DocumentError] = ()
) -> LintReport:
    """Lint every rule; unreadable files reported by discovery count as errors."""
    report = LintReport(files_checked=len(rules) + len(errors))
    for error in errors:
        report.findings.append(
            LintFinding(source_id=error.source_id, severity=LintSeverity.ERROR, message=error.message)
        )
    for source in rules:
        report.findings.extend(lint_rule(source))
    return report
