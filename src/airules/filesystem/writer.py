# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Persist pipeline results under each target's output directory."""

from __future__ import annotations

import json
import logging
import shutil
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path, PurePosixPath

from airules.adapters.base import BaseAdapter
from airules.core.constants import SETTINGS_FILENAME, ArtifactKind, WriteAction
from airules.core.exceptions import ConfigurationError, WriteError
from airules.models.artifact import TransformedArtifact
from airules.models.result import TargetResult, WriteOperation
from airules.pipeline.settings import merge_settings

logger = logging.getLogger("airules.filesystem.writer")

BACKUP_DIR = Path(".airules") / "backups"

_GROUP_DIRS = {
    ArtifactKind.SKILL: "skills",
    ArtifactKind.WORKFLOW: "workflows",
}


class ArtifactWriter:
    """Writes artifacts below *dest*, optionally as a dry run or with backups."""

    def __init__(
        self,
        dest: Path,
        *,
        dry_run: bool = False,
        backup: bool = False,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._dest = dest
        self._dry_run = dry_run
        self._backup = backup
        self._clock = clock or (lambda: datetime.now(UTC))

    def artifact_path(self, adapter: BaseAdapter, artifact: TransformedArtifact) -> Path:
        """Destination of *artifact* relative to the destination root."""
        root = Path(adapter.descriptor.output_dir)
        if artifact.kind in _GROUP_DIRS:
            return root / _GROUP_DIRS[artifact.kind] / (artifact.group_dir or "") / artifact.filename
        parent = PurePosixPath(artifact.source_id).parent
        return root / adapter.descriptor.rule_dir / Path(*parent.parts) / artifact.filename

    def write_target(self, adapter: BaseAdapter, result: TargetResult) -> list[WriteOperation]:
        """Write every artifact and the aggregate of one target."""
        operations = [
            self._write(self.artifact_path(adapter, artifact), artifact.content)
            for artifact in result.artifacts
        ]
        if result.aggregate is not None:
            path = Path(adapter.descriptor.output_dir) / result.aggregate.filename
            operations.append(self._write(path, result.aggregate.content))
        return operations

    def write_settings(self, adapter: BaseAdapter, source: Path) -> WriteOperation | None:
        """Merge *source* settings into the target's settings file."""
        if not adapter.capabilities.settings:
            return None

        relative = Path(adapter.descriptor.output_dir) / SETTINGS_FILENAME
        destination = self._dest / relative
        try:
            incoming = json.loads(source.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Invalid settings file {source}: {exc}") from exc

        if not destination.exists():
            return self._write(relative, json.dumps(incoming, indent=2) + "\n")

        try:
            existing = json.loads(destination.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not merge %s, overwriting: %s", relative, exc)
            return self._write(relative, json.dumps(incoming, indent=2) + "\n")

        merged = merge_settings(existing, incoming)
        operation = self._write(relative, json.dumps(merged, indent=2) + "\n")
        return WriteOperation(action=WriteAction.MERGE, path=operation.path)

    def _write(self, relative: Path, content: str) -> WriteOperation:
        destination = self._dest / relative
        exists = destination.exists()
        action = WriteAction.OVERWRITE if exists else WriteAction.CREATE
        operation = WriteOperation(action=action, path=relative.as_posix())

        if self._dry_run:
            return operation

        try:
            if exists and self._backup:
                self._backup_file(relative)
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise WriteError(f"Cannot write {relative.as_posix()}: {exc}") from exc

        logger.debug("%s %s", action, operation.path)
        return operation

    def _backup_file(self, relative: Path) -> Path:
        timestamp = self._clock().strftime("%Y-%m-%dT%H-%M-%S")
        backup_path = self._dest / BACKUP_DIR / f"{relative.as_posix()}.{timestamp}"
        backup_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(self._dest / relative, backup_path)
        return backup_path
