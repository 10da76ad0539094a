# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for the CLI commands: targets, version, argument errors."""

from __future__ import annotations

from typer.testing import CliRunner

from airules import __version__
from airules.cli.app import app

runner = CliRunner()


# ---------------------------------------------------------------------------
# version / targets
# ---------------------------------------------------------------------------


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"airules v{__version__}" in result.output


class TestTargets:
    """Test the targets listing command."""

    def test_lists_every_target(self):
        result = runner.invoke(app, ["targets"])

        assert result.exit_code == 0
        for target in ("claude", "cursor", "copilot", "windsurf"):
            assert target in result.output

    def test_shows_extensions(self):
        result = runner.invoke(app, ["targets"])
        assert ".mdc" in result.output


# ---------------------------------------------------------------------------
# build argument handling
# ---------------------------------------------------------------------------


class TestBuildArguments:
    def test_missing_source_directory(self, tmp_path):
        result = runner.invoke(app, ["build", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Source directory not found" in result.output

    def test_unknown_target(self, tmp_path):
        result = runner.invoke(app, ["build", str(tmp_path), "--target", "vim"])

        assert result.exit_code == 1
        assert "Unknown target: vim" in result.output

    def test_invalid_format(self, tmp_path):
        result = runner.invoke(app, ["build", str(tmp_path), "--format", "xml"])
        assert result.exit_code != 0

    def test_empty_source_builds_nothing(self, tmp_path):
        result = runner.invoke(app, ["build", str(tmp_path), "--dest", str(tmp_path)])

        assert result.exit_code == 0
        assert "Summary: 0 files written, 0 errors" in result.output
