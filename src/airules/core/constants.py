# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, header field names, and separator constants."""

from enum import StrEnum


class TargetId(StrEnum):
    CLAUDE = "claude"
    CURSOR = "cursor"
    COPILOT = "copilot"
    WINDSURF = "windsurf"


class ArtifactKind(StrEnum):
    RULE = "rule"
    SKILL = "skill"
    WORKFLOW = "workflow"


class SequenceMode(StrEnum):
    NATIVE = "native"
    FLATTENED = "flattened"


class WriteAction(StrEnum):
    CREATE = "create"
    OVERWRITE = "overwrite"
    MERGE = "merge"


class LintSeverity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


class ErrorKind(StrEnum):
    DECODE = "decode"
    ENCODING = "encoding"
    DUPLICATE = "duplicate"


class Trigger(StrEnum):
    GLOB = "glob"
    ALWAYS = "always"
    MANUAL = "manual"


# Recognized source header fields
FIELD_DESCRIPTION = "description"
FIELD_PATHS = "paths"
FIELD_ALWAYS_APPLY = "alwaysApply"
FIELD_NAME = "name"
FIELD_VERSION = "version"

HEADER_DELIMITER = "---"
FLATTENED_SEPARATOR = ", "
SECTION_SEPARATOR = "\n\n---\n\n"

SOURCE_EXTENSION = ".md"
SKILL_FILENAME = "SKILL.md"
SETTINGS_FILENAME = "settings.json"

DEFAULT_TARGETS: list[str] = [TargetId.CLAUDE]

# Target header fields
FIELD_GLOBS = "globs"
FIELD_APPLY_TO = "applyTo"
FIELD_TRIGGER = "trigger"
