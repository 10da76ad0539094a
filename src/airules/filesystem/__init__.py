# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Filesystem collaborators: source discovery and artifact writing."""

from airules.filesystem.sources import SourceTree, discover_sources
from airules.filesystem.writer import ArtifactWriter

__all__ = [
    "ArtifactWriter",
    "SourceTree",
    "discover_sources",
]
