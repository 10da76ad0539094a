# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rule document parsing utilities."""

from airules.parsers.header_codec import decode, decode_document, encode

__all__ = [
    "decode",
    "decode_document",
    "encode",
]
