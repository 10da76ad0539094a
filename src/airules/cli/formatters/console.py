# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output for build, lint and target listings."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from airules import __version__
from airules.adapters.base import BaseAdapter
from airules.core.constants import LintSeverity, WriteAction
from airules.models.lint import LintReport
from airules.models.result import PipelineResult, WriteOperation

console = Console()

ACTION_COLORS = {
    WriteAction.CREATE: "green",
    WriteAction.OVERWRITE: "yellow",
    WriteAction.MERGE: "cyan",
}


def format_build_result(
    result: PipelineResult,
    operations: Sequence[WriteOperation],
    *,
    dry_run: bool = False,
) -> None:
    """Print a build result to the console with Rich formatting."""
    console.print()
    console.print(f"[bold]airules v{__version__}[/bold] - AI rule generator")
    console.print()

    summary = Table(title="Targets")
    summary.add_column("Target", style="bold")
    summary.add_column("Artifacts", justify="right")
    summary.add_column("Aggregate")
    for target in result.targets:
        summary.add_row(
            str(target.target),
            str(target.artifact_count),
            target.aggregate.filename if target.aggregate else "-",
        )
    console.print(summary)
    console.print()

    verb = "would" if dry_run else ""
    for operation in operations:
        color = ACTION_COLORS.get(operation.action, "white")
        label = f"{verb} {operation.action}".strip()
        console.print(f"  [{color}]{label.ljust(15)}[/{color}] {operation.path}", highlight=False)

    if result.errors:
        console.print()
        console.print(f"  Skipped {len(result.errors)} document(s):", style="red")
        for error in result.errors:
            console.print(f"    {error.source_id}: {error.message}", style="red", highlight=False)

    console.print()
    written = "planned" if dry_run else "written"
    console.print(f"  Summary: {len(operations)} files {written}, {len(result.errors)} errors")
    console.print()


def format_targets(adapters: Sequence[BaseAdapter]) -> None:
    """Print the target table."""
    table = Table(title="Targets")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Extension")
    table.add_column("Output")
    table.add_column("Rules")
    table.add_column("Skills")
    table.add_column("Settings")
    table.add_column("Workflows")

    for adapter in adapters:
        descriptor = adapter.descriptor
        caps = descriptor.capabilities
        table.add_row(
            descriptor.id,
            descriptor.name,
            descriptor.output_file_extension,
            descriptor.output_dir,
            "yes" if caps.rules else "no",
            "yes" if caps.skills else "no",
            "yes" if caps.settings else "no",
            "yes" if caps.workflows else "no",
        )

    console.print(table)


SEVERITY_COLORS = {
    LintSeverity.ERROR: "red",
    LintSeverity.WARNING: "yellow",
}


def format_lint_report(report: LintReport) -> None:
    """Print lint findings as a table followed by totals."""
    console.print()
    if report.findings:
        table = Table(title="Lint findings")
        table.add_column("Severity", no_wrap=True)
        table.add_column("Rule", style="bold")
        table.add_column("Message")
        for finding in report.findings:
            color = SEVERITY_COLORS[finding.severity]
            table.add_row(
                f"[{color}]{finding.severity}[/{color}]",
                escape(finding.source_id),
                escape(finding.message),
            )
        console.print(table)
        console.print()

    console.print(f"  Files checked: {report.files_checked}")
    if report.error_count:
        console.print(f"  Errors: {report.error_count}", style="red")
    if report.warning_count:
        console.print(f"  Warnings: {report.warning_count}", style="yellow")
    if not report.findings:
        console.print("  All rules are valid", style="green")
    console.print()
