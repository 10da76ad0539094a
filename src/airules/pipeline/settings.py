# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Merge a source settings.json into an existing target settings file."""

from __future__ import annotations

from typing import Any


def _union(*lists: list[Any]) -> list[Any]:
    """Order-preserving, de-duplicated concatenation."""
    seen: list[Any] = []
    for values in lists:
        for value in values:
            if value not in seen:
                seen.append(value)
    return seen


def merge_settings(existing: dict[str, Any], incoming: dict[str, Any]) -> dict[str, Any]:
    """Combine permission lists and environment overrides.

    ``permissions.allow`` and ``permissions.deny`` become unions (existing
    entries first), ``env`` is overlaid with incoming values winning, and every
    other top-level key of *existing* is kept untouched.
    """
    existing_perms = existing.get("permissions") or {}
    incoming_perms = incoming.get("permissions") or {}

    merged = dict(existing)
    merged["permissions"] = {
        **existing_perms,
        "allow": _union(existing_perms.get("allow") or [], incoming_perms.get("allow") or []),
        "deny": _union(existing_perms.get("deny") or [], incoming_perms.get("deny") or []),
    }

    if incoming.get("env"):
        merged["env"] = {**(existing.get("env") or {}), **incoming["env"]}

    return merged
