# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

import json
from collections.abc import Sequence

from airules.models.lint import LintReport
from airules.models.result import PipelineResult, WriteOperation


def format_json(result: PipelineResult, operations: Sequence[WriteOperation]) -> str:
    """Return the build result and file operations as a JSON string."""
    data = {
        "ok": result.ok,
        "targets": [
            {
                "target": target.target,
                "artifacts": [
                    {
                        "source_id": artifact.source_id,
                        "filename": artifact.filename,
                        "kind": artifact.kind,
                        "is_global": artifact.is_global,
                        "group_dir": artifact.group_dir,
                    }
                    for artifact in target.artifacts
                ],
                "aggregate": target.aggregate.filename if target.aggregate else None,
            }
            for target in result.targets
        ],
        "errors": [error.model_dump(mode="json") for error in result.errors],
        "operations": [operation.model_dump(mode="json") for operation in operations],
    }
    return json.dumps(data, indent=2)


def format_lint_json(report: LintReport) -> str:
    return json.dumps(report.model_dump(mode="json"), indent=2)


def format_json_error(exc: Exception) -> str:
    """Machine-readable failure for errors that stop a command early."""
    return json.dumps({"ok": False, "error": str(exc)}, indent=2)
