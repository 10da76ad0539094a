# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Decode and encode the header block at the top of a rule document.

The header is a ``---`` delimited block of ``key: value`` lines. Only a small
vocabulary is understood: string and boolean scalars, and sequences of strings
written either as indented ``- item`` lines or as an inline ``[a, b]`` list.
Anything else (nested mappings, block scalars) is a decode error.

Sequences can be encoded in two ways, chosen by the caller:

* ``SequenceMode.NATIVE`` writes one quoted ``- item`` line per element.
* ``SequenceMode.FLATTENED`` joins elements with ``", "`` on a single line.
  Flattened values decode back as a plain string.
"""

from __future__ import annotations

import re
from typing import Any

import frontmatter
from frontmatter.default_handlers import BaseHandler

from airules.core.constants import FLATTENED_SEPARATOR, HEADER_DELIMITER, SequenceMode
from airules.core.exceptions import HeaderDecodeError
from airules.models.document import Document, Header, HeaderValue, SourceDocument

_KEY_RE = re.compile(r"^(?P<key>[A-Za-z_][\w.-]*):(?P<value>.*)$")
_ITEM_RE = re.compile(r"^\s*-(?:\s+(?P<value>.*))?$")
# End of the closing delimiter line plus the one blank line encode() writes
_BODY_SEPARATOR_RE = re.compile(r"\A\r?\n(?:\r?\n)?")
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

_UNESCAPES = {"n": "\n", "t": "\t", "r": "\r"}
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}

# Characters that change meaning when they open an unquoted value
_INDICATORS = frozenset("-[]{}&!|>%@`")
_SPECIAL = frozenset(":#\"'\n\t\r")


class RuleHeaderHandler(BaseHandler):
    """python-frontmatter handler for the rule header vocabulary."""

    FM_BOUNDARY = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)
    START_DELIMITER = HEADER_DELIMITER
    END_DELIMITER = HEADER_DELIMITER

    def load(self, fm: str, **kwargs: Any) -> Header:
        return _parse_header(fm, kwargs.get("source_id"))

    def export(self, metadata: dict[str, object], **kwargs: Any) -> str:
        mode = SequenceMode(kwargs.get("sequence_mode", SequenceMode.NATIVE))
        return _serialize_header(metadata, mode)

    def format(self, post: frontmatter.Post, **kwargs: Any) -> str:
        # Unlike the stock handlers the body is emitted verbatim, not stripped.
        metadata = self.export(post.metadata, **kwargs)
        lines = [self.START_DELIMITER]
        if metadata:
            lines.append(metadata)
        lines.append(self.END_DELIMITER)
        return "\n".join(lines) + "\n\n" + post.content


_HANDLER = RuleHeaderHandler()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def decode(raw_text: str, source_id: str | None = None) -> tuple[Header | None, str]:
    """Split *raw_text* into its header mapping and body.

    Text that does not open with a delimiter line has no header: ``None`` is
    returned together with the unchanged text. Otherwise the body starts after
    the closing delimiter line and at most one blank line; any further leading
    blank lines belong to the body.

    Raises
    ------
    HeaderDecodeError
        If the header block is never closed or holds an unsupported value shape.
    """
    if not _HANDLER.detect(raw_text):
        return None, raw_text

    try:
        fm, content = _HANDLER.split(raw_text)
    except ValueError:
        raise HeaderDecodeError("header block is never closed", source_id) from None

    header = _HANDLER.load(fm, source_id=source_id)
    return header, _BODY_SEPARATOR_RE.sub("", content, count=1)


def decode_document(source: SourceDocument) -> Document:
    """Decode a discovered source file into a :class:`Document`."""
    header, body = decode(source.raw_text, source_id=source.source_id)
    return Document(source_id=source.source_id, header=header, body=body)


def encode(
    header: dict[str, object] | None,
    body: str,
    sequence_mode: SequenceMode = SequenceMode.NATIVE,
) -> str:
    """Render *header* and *body* back into document text.

    ``None`` means "no header" and yields *body* unchanged. An empty mapping
    still produces an (empty) header block.
    """
    if header is None:
        return body

    post = frontmatter.Post(body)
    post.metadata.update(header)
    return frontmatter.dumps(post, handler=_HANDLER, sequence_mode=sequence_mode)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _parse_header(block: str, source_id: str | None = None) -> Header:
    header: Header = {}
    items: list[str] | None = None

    # The block starts right after the opening delimiter, so line 1 is the
    # remainder of the delimiter line itself.
    for lineno, raw_line in enumerate(block.splitlines(), 1):
        line = raw_line.rstrip()
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        item = _ITEM_RE.match(line)
        if item:
            if items is None:
                raise HeaderDecodeError(
                    f"line {lineno}: list item without an owning key", source_id
                )
            items.append(_parse_item(item.group("value") or "", lineno, source_id))
            continue

        if line[0].isspace():
            raise HeaderDecodeError(
                f"line {lineno}: nested values are not supported", source_id
            )

        match = _KEY_RE.match(line)
        if match is None:
            raise HeaderDecodeError(
                f"line {lineno}: expected 'key: value', got {stripped!r}", source_id
            )

        key = match.group("key")
        raw_value = match.group("value").strip()
        if key in header:
            raise HeaderDecodeError(f"line {lineno}: duplicate key {key!r}", source_id)

        if raw_value:
            header[key] = _parse_value(raw_value, lineno, source_id)
            items = None
        else:
            items = []
            header[key] = items

    return header


def _parse_value(raw: str, lineno: int, source_id: str | None) -> HeaderValue:
    if raw.startswith("["):
        if not raw.endswith("]"):
            raise HeaderDecodeError(f"line {lineno}: unterminated inline list", source_id)
        return [_parse_item(part, lineno, source_id) for part in _split_inline(raw[1:-1])]
    if raw.startswith("{"):
        raise HeaderDecodeError(f"line {lineno}: mappings are not supported", source_id)
    if raw[0] in "|>":
        raise HeaderDecodeError(f"line {lineno}: block scalars are not supported", source_id)

    text = _unquote(raw, lineno, source_id)
    if text is None:
        if raw == "true":
            return True
        if raw == "false":
            return False
        return raw
    return text


def _parse_item(raw: str, lineno: int, source_id: str | None) -> str:
    raw = raw.strip()
    text = _unquote(raw, lineno, source_id)
    return raw if text is None else text


def _unquote(raw: str, lineno: int, source_id: str | None) -> str | None:
    """Return the unquoted text, or ``None`` if *raw* is not a quoted scalar."""
    if not raw or raw[0] not in "\"'":
        return None
    quote = raw[0]
    if len(raw) < 2 or raw[-1] != quote:
        raise HeaderDecodeError(f"line {lineno}: unterminated quoted string", source_id)
    inner = raw[1:-1]
    if quote == "'":
        return inner.replace("''", "'")
    return _ESCAPE_RE.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(1)), inner)


def _split_inline(inner: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    in_quote: str | None = None
    for char in inner:
        if char in {'"', "'"}:
            if in_quote == char:
                in_quote = None
            elif in_quote is None:
                in_quote = char
        elif char == "," and in_quote is None:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _serialize_header(header: dict[str, object], mode: SequenceMode) -> str:
    lines: list[str] = []
    for key, value in header.items():
        if value is None:
            continue
        if isinstance(value, bool):
            lines.append(f"{key}: {'true' if value else 'false'}")
        elif isinstance(value, (list, tuple)):
            items = [str(item) for item in value]
            if mode is SequenceMode.FLATTENED:
                lines.append(f"{key}: {_format_scalar(FLATTENED_SEPARATOR.join(items))}")
            else:
                lines.append(f"{key}:")
                lines.extend(f"  - {_quote(item)}" for item in items)
        elif isinstance(value, (str, int, float)):
            lines.append(f"{key}: {_format_scalar(str(value))}")
        else:
            raise TypeError(f"Unsupported header value for {key!r}: {type(value).__name__}")
    return "\n".join(lines)


def _format_scalar(value: str) -> str:
    if _needs_quotes(value):
        return _quote(value)
    return value


def _needs_quotes(value: str) -> bool:
    if not value or value in ("true", "false"):
        return True
    if value != value.strip():
        return True
    if value[0] in _INDICATORS:
        return True
    return any(char in _SPECIAL for char in value)


def _quote(value: str) -> str:
    return '"' + "".join(_ESCAPES.get(char, char) for char in value) + '"'
