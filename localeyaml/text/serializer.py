"""Serializer for nested mappings into canonical translation YAML.

Responsibilities:
- Walk a nested mapping depth-first and emit one `key: value` line per scalar.
- Write multi-line strings as literal block scalars with indent and chomping indicators.
- Route every key and inline value through the shared quoting rules.
"""

from __future__ import annotations

import re
from typing import Mapping

from ..models.datatypes import CHOMP_CLIP, CHOMP_KEEP, CHOMP_STRIP, BlockScalarHeader
from .quoting import (
    DOUBLE_QUOTE,
    ESCAPED_NEWLINE,
    INDENT_SIZE,
    NEWLINE,
    NULL_TOKEN,
    SPACE,
    quote_key,
    quote_value,
)


class YamlSerializer:
    """Dump nested mappings as canonical dialect text."""

    _LINE_BREAK_RE = re.compile(r"\\n|\n")

    def __init__(self, indent_size: int = INDENT_SIZE) -> None:
        """Initialize with the number of spaces per nesting level."""

        self.indent_size = indent_size

    def dump(self, mapping: Mapping[str, object]) -> str:
        """Return canonical text for `mapping`, ending with a newline unless empty.

        Raises:
            TypeError: If a value is neither `None`, a scalar, nor a mapping.
        """

        lines: list[str] = []
        self._dump_mapping(mapping, lines, 0)
        lines.append("")
        return NEWLINE.join(line if line.strip() else "" for line in lines)

    def _dump_mapping(self, mapping: Mapping[str, object], lines: list[str], indent: int) -> None:
        """Append lines for one mapping level at `indent` spaces."""

        for key, value in mapping.items():
            line = f"{SPACE * indent}{quote_key(key)}:"
            if value is None:
                lines.append(f"{line} {NULL_TOKEN}")
            elif isinstance(value, Mapping):
                lines.append(line)
                self._dump_mapping(value, lines, indent + self.indent_size)
            elif isinstance(value, (list, tuple, set)):
                raise TypeError(f"Key `{key}` holds a sequence; only mappings and scalars are supported.")
            else:
                text = str(value)
                if NEWLINE in text or ESCAPED_NEWLINE in text:
                    self._dump_block(line, text, lines, indent + self.indent_size)
                else:
                    lines.append(f"{line} {self._inline_value(text)}")

    def _dump_block(self, line: str, text: str, lines: list[str], body_indent: int) -> None:
        """Append a literal block header and one body line per logical line."""

        leading_spaces = len(text) - len(text.lstrip(SPACE))
        if not text.endswith(NEWLINE):
            chomping, body = CHOMP_STRIP, text
        elif text.endswith(NEWLINE * 2):
            chomping, body = CHOMP_KEEP, text[:-1]
        else:
            chomping, body = CHOMP_CLIP, text[:-1]

        header = BlockScalarHeader(
            explicit_indent=leading_spaces + self.indent_size if leading_spaces else None,
            chomping=chomping,
        )
        lines.append(f"{line} {header.render()}")
        for subline in self._LINE_BREAK_RE.split(body):
            lines.append(f"{SPACE * body_indent}{subline}")

    def _inline_value(self, text: str) -> str:
        """Quote an inline scalar, keeping the string `null` distinct from `None`."""

        if text == NULL_TOKEN:
            return f"{DOUBLE_QUOTE}{text}{DOUBLE_QUOTE}"
        return quote_value(text)
