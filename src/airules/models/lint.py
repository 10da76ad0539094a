# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rule corpus lint models."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from airules.core.constants import LintSeverity


class LintFinding(BaseModel):
    """One problem found in one rule document."""

    source_id: str
    severity: LintSeverity
    message: str


class LintReport(BaseModel):
    """Findings for a whole rule corpus."""

    files_checked: int = 0
    findings: list[LintFinding] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def error_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == LintSeverity.ERROR)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def warning_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == LintSeverity.WARNING)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return self.error_count == 0
