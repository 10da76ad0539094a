# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Target adapters, one per consuming tool."""

from airules.adapters.base import BaseAdapter
from airules.adapters.claude import ClaudeAdapter
from airules.adapters.copilot import CopilotAdapter
from airules.adapters.cursor import CursorAdapter
from airules.adapters.registry import AdapterRegistry, adapter, get_adapter
from airules.adapters.windsurf import WindsurfAdapter

__all__ = [
    "AdapterRegistry",
    "BaseAdapter",
    "ClaudeAdapter",
    "CopilotAdapter",
    "CursorAdapter",
    "WindsurfAdapter",
    "adapter",
    "get_adapter",
]
