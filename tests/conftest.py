# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import json
import logging
import os
from pathlib import Path

import pytest

CORE_RULE = """\
---
description: Core conventions
alwaysApply: true
---

Use type hints everywhere.
"""

COMPONENTS_RULE = """\
---
description: Component rules
paths:
  - "src/components/**/*.tsx"
  - "src/ui/**/*.tsx"
---

Prefer function components.
"""

PLAIN_RULE = "# Plain\n\nNo header here.\n"

REVIEW_SKILL = """\
---
description: Review a pull request
---

# Review

Read the diff first.
"""

SETTINGS = {
    "permissions": {"allow": ["Bash(npm test)"], "deny": ["Read(.env)"]},
    "env": {"NODE_ENV": "test"},
}


def write_corpus(root: Path) -> Path:
    """Lay out a small source corpus under *root*."""
    files = {
        "rules/core.md": CORE_RULE,
        "rules/frontend/components.md": COMPONENTS_RULE,
        "rules/plain.md": PLAIN_RULE,
        "skills/review/SKILL.md": REVIEW_SKILL,
    }
    for relative, text in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    (root / "settings.json").write_text(json.dumps(SETTINGS), encoding="utf-8")
    return root


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    return write_corpus(tmp_path / "source")


@pytest.fixture
def dest_dir(tmp_path: Path) -> Path:
    dest = tmp_path / "project"
    dest.mkdir()
    return dest


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    """Keep AIRULES_* variables and a stray .env out of every test."""
    for key in list(os.environ):
        if key.startswith("AIRULES_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_airules_logger():
    """Drop handlers installed by setup_logging during a test."""
    logger = logging.getLogger("airules")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
