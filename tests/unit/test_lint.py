# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for the rule linter and the lint command."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from airules.cli.app import app
from airules.core.constants import ErrorKind, LintSeverity
from airules.models.document import SourceDocument
from airules.models.result import DocumentError
from airules.pipeline.lint import lint_rule, lint_sources

runner = CliRunner()


def _lint(raw_text: str) -> list[tuple[str, str]]:
    findings = lint_rule(SourceDocument(source_id="rule.md", raw_text=raw_text))
    return [(f.severity.value, f.message) for f in findings]


# ---------------------------------------------------------------------------
# lint_rule
# ---------------------------------------------------------------------------


class TestLintRule:
    def test_valid_scoped_rule(self):
        assert _lint('---\ndescription: API\npaths:\n  - "src/api/**/*.ts"\n---\n\nBody') == []

    def test_valid_global_rule(self):
        assert _lint("---\ndescription: Core\nalwaysApply: true\n---\n\nBody") == []

    def test_known_optional_fields(self):
        raw = "---\ndescription: Core\nalwaysApply: true\nname: core\nversion: 2\n---\n"
        assert _lint(raw) == []

    def test_no_header(self):
        assert _lint("# Just text\n") == [("error", "No header found")]

    def test_invalid_header(self):
        assert _lint("---\ndescription: never closed\n") == [
            ("error", "Invalid header: header block is never closed")
        ]

    def test_unknown_field_is_a_warning(self):
        raw = "---\ndescription: Core\nalwaysApply: true\nmodel: fast\n---\n"
        assert _lint(raw) == [("warning", 'Unknown header field "model"')]

    @pytest.mark.parametrize(
        "line, message",
        [
            ("", 'Missing "description" field'),
            ('description: "   "\n', 'Empty "description" field'),
            ("description: [a]\n", '"description" must be a string'),
        ],
    )
    def test_description(self, line, message):
        assert _lint(f"---\n{line}alwaysApply: true\n---\n") == [("error", message)]

    def test_both_paths_and_always_apply(self):
        raw = '---\ndescription: X\nalwaysApply: true\npaths:\n  - "src/**"\n---\n'
        assert _lint(raw) == [("error", 'Cannot have both "paths" and "alwaysApply"')]

    def test_neither_paths_nor_always_apply(self):
        assert _lint("---\ndescription: X\n---\n") == [
            ("error", 'Must have either "paths" or "alwaysApply"')
        ]

    def test_always_apply_must_be_boolean(self):
        assert _lint('---\ndescription: X\nalwaysApply: "yes"\n---\n') == [
            ("error", '"alwaysApply" must be true or false')
        ]

    def test_paths_must_be_list(self):
        assert _lint("---\ndescription: X\npaths: src/**\n---\n") == [
            ("error", '"paths" must be a list')
        ]

    def test_empty_paths(self):
        assert _lint("---\ndescription: X\npaths:\n---\n") == [
            ("error", '"paths" is empty (rule will never activate)')
        ]

    @pytest.mark.parametrize("pattern", ["**/*", "**", "*"])
    def test_catch_all_glob(self, pattern):
        findings = _lint(f'---\ndescription: X\npaths:\n  - "{pattern}"\n---\n')

        assert len(findings) == 1
        severity, message = findings[0]
        assert severity == "error"
        assert message.startswith(f'Catch-all pattern "{pattern}"')

    def test_root_only_glob(self):
        assert _lint('---\ndescription: X\npaths:\n  - "*.py"\n  - "src/**/*.py"\n---\n') == [
            ("warning", 'Root-only glob "*.py": did you mean "**/*.py"?')
        ]

    def test_findings_carry_source(self):
        findings = lint_rule(SourceDocument(source_id="dir/a.md", raw_text="text"))
        assert findings[0].source_id == "dir/a.md"


class TestLintSources:
    def test_report_counts(self):
        rules = [
            SourceDocument(source_id="good.md", raw_text="---\ndescription: G\nalwaysApply: true\n---\n"),
            SourceDocument(source_id="plain.md", raw_text="no header"),
            SourceDocument(
                source_id="odd.md",
                raw_text="---\ndescription: O\nalwaysApply: true\nteam: web\n---\n",
            ),
        ]
        report = lint_sources(rules)

        assert report.files_checked == 3
        assert report.error_count == 1
        assert report.warning_count == 1
        assert report.ok is False

    def test_unreadable_files_are_errors(self):
        unreadable = DocumentError(
            source_id="bad.md", kind=ErrorKind.ENCODING, message="not valid UTF-8"
        )
        report = lint_sources([], [unreadable])

        assert report.files_checked == 1
        assert report.findings[0].severity == LintSeverity.ERROR
        assert report.findings[0].source_id == "bad.md"

    def test_empty_corpus_is_ok(self):
        report = lint_sources([])
        assert report.ok is True
        assert report.findings == []


# ---------------------------------------------------------------------------
# lint command
# ---------------------------------------------------------------------------


class TestLintCommand:
    """Test the lint CLI command."""

    def test_clean_corpus(self, tmp_path):
        rules = tmp_path / "rules"
        rules.mkdir()
        (rules / "core.md").write_text("---\ndescription: Core\nalwaysApply: true\n---\n\nBody\n")

        result = runner.invoke(app, ["lint", str(tmp_path)])

        assert result.exit_code == 0
        assert "Files checked: 1" in result.output
        assert "All rules are valid" in result.output

    def test_errors_exit_non_zero(self, corpus_dir):
        # rules/plain.md has no header
        result = runner.invoke(app, ["lint", str(corpus_dir)])

        assert result.exit_code == 1
        assert "Lint findings" in result.output
        assert "Errors: 1" in result.output

    def test_warnings_only_exit_zero(self, tmp_path):
        rules = tmp_path / "rules"
        rules.mkdir()
        (rules / "a.md").write_text('---\ndescription: A\npaths:\n  - "*.ts"\n---\n')

        result = runner.invoke(app, ["lint", str(tmp_path)])

        assert result.exit_code == 0
        assert "Warnings: 1" in result.output

    def test_json_output(self, corpus_dir, monkeypatch):
        monkeypatch.setenv("AIRULES_LOG_LEVEL", "WARNING")

        result = runner.invoke(app, ["lint", str(corpus_dir), "--format", "json"])

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["files_checked"] == 3
        assert data["ok"] is False
        assert data["findings"] == [
            {"source_id": "plain.md", "severity": "error", "message": "No header found"}
        ]

    def test_missing_source(self, tmp_path):
        result = runner.invoke(app, ["lint", str(tmp_path / "missing"), "-f", "json"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["ok"] is False
