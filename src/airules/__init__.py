# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""airules - Generate AI coding assistant rule files from a shared corpus."""

__version__ = "0.1.0"

from airules.adapters import get_adapter
from airules.parsers.header_codec import decode, encode
from airules.pipeline.orchestrator import RulePipeline

__all__ = [
    "RulePipeline",
    "__version__",
    "decode",
    "encode",
    "get_adapter",
]
