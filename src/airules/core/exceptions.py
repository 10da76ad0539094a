# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for airules."""


class AirulesError(Exception):
    """Base exception for all airules errors."""


class ConfigurationError(AirulesError):
    """Invalid or missing configuration."""


class HeaderDecodeError(AirulesError):
    """A document header block could not be decoded."""

    def __init__(self, message: str, source_id: str | None = None) -> None:
        self.source_id = source_id
        self.detail = message
        prefix = f"{source_id}: " if source_id else ""
        super().__init__(f"{prefix}{message}")


class UnknownTargetError(AirulesError):
    """Requested target identifier is not registered."""


class UnsupportedCapabilityError(AirulesError):
    """An operation was invoked on a target that does not declare it."""


class WriteError(AirulesError):
    """Failed to persist an artifact."""
