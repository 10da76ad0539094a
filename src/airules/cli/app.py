# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

app = typer.Typer(
    name="airules",
    help="Generate AI coding assistant rule files from a shared corpus",
    no_args_is_help=True,
)


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"


def _report_error(exc: Exception, fmt: OutputFormat) -> None:
    """Print an error that stops a command, keeping JSON output parseable."""
    from airules.cli.formatters.console import console
    from airules.cli.formatters.json_fmt import format_json_error

    if fmt == OutputFormat.JSON:
        sys.stdout.write(format_json_error(exc) + "\n")
    else:
        console.print(f"Error: {exc}", style="red")


@app.command()
def build(
    source: Annotated[
        Path | None,
        typer.Argument(help="Source directory holding rules/, skills/ and settings.json"),
    ] = None,
    targets: Annotated[
        list[str] | None,
        typer.Option("--target", "-t", help="Target to generate for (repeatable)"),
    ] = None,
    dest: Annotated[
        Path | None,
        typer.Option("--dest", "-d", help="Project directory to write into"),
    ] = None,
    skills: Annotated[
        bool, typer.Option("--skills/--no-skills", help="Include skill documents")
    ] = True,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Report what would be written")
    ] = False,
    backup: Annotated[
        bool, typer.Option("--backup", help="Back up files before overwriting them")
    ] = False,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
) -> None:
    """Transform the source corpus into rule files for each target."""
    from airules.cli.formatters.console import format_build_result
    from airules.cli.formatters.json_fmt import format_json
    from airules.core.config import get_settings
    from airules.core.exceptions import AirulesError
    from airules.core.logging import setup_logging
    from airules.filesystem.sources import discover_sources
    from airules.filesystem.writer import ArtifactWriter
    from airules.models.result import WriteOperation
    from airules.pipeline.orchestrator import RulePipeline

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    include_skills = skills and settings.include_skills
    operations: list[WriteOperation] = []

    try:
        tree = discover_sources(source or settings.source_dir, include_skills=include_skills)
        pipeline = RulePipeline(targets=targets, settings=settings)
        result = pipeline.run(tree.rules, tree.skills)
        result.errors[:0] = tree.errors

        writer = ArtifactWriter(
            dest or settings.dest_dir,
            dry_run=dry_run,
            backup=backup or settings.backup,
        )
        for adapter, target_result in zip(pipeline.adapters, result.targets):
            operations.extend(writer.write_target(adapter, target_result))
            if tree.settings_path is not None:
                operation = writer.write_settings(adapter, tree.settings_path)
                if operation is not None:
                    operations.append(operation)
    except AirulesError as exc:
        _report_error(exc, fmt)
        raise typer.Exit(1) from exc

    if fmt == OutputFormat.JSON:
        sys.stdout.write(format_json(result, operations) + "\n")
    else:
        format_build_result(result, operations, dry_run=dry_run)

    if result.errors:
        raise typer.Exit(1)


@app.command()
def lint(
    source: Annotated[
        Path | None,
        typer.Argument(help="Source directory holding rules/"),
    ] = None,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
) -> None:
    """Check rule headers for missing, conflicting or unknown fields."""
    from airules.cli.formatters.console import format_lint_report
    from airules.cli.formatters.json_fmt import format_lint_json
    from airules.core.config import get_settings
    from airules.core.exceptions import AirulesError
    from airules.core.logging import setup_logging
    from airules.filesystem.sources import discover_sources
    from airules.pipeline.lint import lint_sources

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    try:
        tree = discover_sources(source or settings.source_dir, include_skills=False)
    except AirulesError as exc:
        _report_error(exc, fmt)
        raise typer.Exit(1) from exc

    report = lint_sources(tree.rules, tree.errors)
    if fmt == OutputFormat.JSON:
        sys.stdout.write(format_lint_json(report) + "\n")
    else:
        format_lint_report(report)

    if not report.ok:
        raise typer.Exit(1)


@app.command()
def targets() -> None:
    """List the available targets and what they support."""
    from airules.adapters.registry import AdapterRegistry
    from airules.cli.formatters.console import format_targets

    format_targets(AdapterRegistry.get_all())


@app.command()
def version() -> None:
    """Show version information."""
    from airules import __version__

    typer.echo(f"airules v{__version__}")
