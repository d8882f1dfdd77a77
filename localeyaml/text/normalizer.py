"""Canonical rewriting of hand-edited translation YAML.

Responsibilities:
- Re-flow soft-wrapped plain scalars and erroneously wrapped quoted values onto one line.
- Rewrite block scalars: folded bodies become one literal line, literal bodies are re-indented.
- Quote keys and values through the shared quoting rules and fill bare trailing keys with `null`.

The scan is a single forward pass over physical lines. Open block scalars and
weird blocks are buffered as pending regions and only converted into output
lines once a later line (or the end of input) closes them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re

from ..models.datatypes import CHOMP_KEEP, BlockScalarHeader
from .quoting import (
    DOUBLE_QUOTE,
    INDENT_SIZE,
    NEWLINE,
    NULL_TOKEN,
    SINGLE_QUOTE,
    SPACE,
    quote_key,
    quote_value,
    scrub_value,
)

_MODE_NORMAL = "normal"
_MODE_IN_BLOCK = "in_block"
_MODE_IN_WEIRD_BLOCK = "in_weird_block"
_QUOTED_NULLS = (
    f"{DOUBLE_QUOTE}{NULL_TOKEN}{DOUBLE_QUOTE}",
    f"{SINGLE_QUOTE}{NULL_TOKEN}{SINGLE_QUOTE}",
)


@dataclass(slots=True)
class _PendingBlock:
    """Block scalar whose body is still being read."""

    indent: int
    prefix: str
    header: BlockScalarHeader
    header_index: int
    body: list[str] = field(default_factory=list)


@dataclass(slots=True)
class _PendingWeirdBlock:
    """Quoted value hard-wrapped over several physical lines."""

    indent: int
    prefix: str
    parts: list[str] = field(default_factory=list)


@dataclass(slots=True)
class _KeyValueLine:
    """Last emitted `key: value` line, kept so continuations can re-render it."""

    index: int
    indent: int
    prefix: str
    value: str | None


@dataclass(slots=True)
class _ScanState:
    """Mutable state of one normalization pass."""

    lines: list[str] = field(default_factory=list)
    mode: str = _MODE_NORMAL
    block: _PendingBlock | None = None
    weird_block: _PendingWeirdBlock | None = None
    last_entry: _KeyValueLine | None = None


def _indentation(line: str) -> int:
    """Return the count of leading spaces."""

    return len(line) - len(line.lstrip(SPACE))


class YamlNormalizer:
    """Normalize raw dialect text into its canonical, diff-friendly form."""

    _WHITESPACE_RUN_RE = re.compile(r"(?<=\S)[ \t\r\n\f\v]+")
    _BLOCK_HEADER_RE = re.compile(r"^\s*(\S.*?): ([>|]\d*[-+]?)$")

    def __init__(self, indent_size: int = INDENT_SIZE) -> None:
        """Initialize with the number of spaces per nesting level."""

        self.indent_size = indent_size

    def normalize(self, text: str) -> str:
        """Return the canonical text for `text`, ending with exactly one newline.

        A `|+` block that closes the file keeps its trailing blank lines.
        """

        return NEWLINE.join(self.normalize_lines(text.split(NEWLINE)))

    def normalize_lines(self, raw_lines: list[str]) -> list[str]:
        """Normalize physical lines and return canonical lines plus a final empty line.

        Raises:
            ValueError: If a key-less continuation line has nothing to continue.
        """

        state = _ScanState()
        lines = self._trim_trailing_blank_lines(raw_lines)
        trailing_blank_count = max(len(raw_lines) - len(lines) - 1, 0)
        for line_number, raw_line in enumerate(lines, 1):
            line = self._WHITESPACE_RUN_RE.sub(SPACE, raw_line).rstrip()
            blank_line = not line
            if blank_line and state.mode != _MODE_IN_BLOCK:
                continue

            indent = _indentation(line)
            if state.mode == _MODE_IN_BLOCK and not blank_line and indent <= state.block.indent:
                self._close_block(state)
            if state.mode == _MODE_IN_WEIRD_BLOCK and indent <= state.weird_block.indent:
                self._close_weird_block(state)

            self._apply_implicit_null(state, indent)
            self._consume_line(state, line, indent, line_number)

        if state.mode == _MODE_IN_BLOCK:
            self._keep_trailing_blank_lines(state.block, trailing_blank_count)
            self._close_block(state)
        if state.mode == _MODE_IN_WEIRD_BLOCK:
            self._close_weird_block(state)
        self._apply_implicit_null(state, 0)
        return self._finalize(state.lines)

    def _trim_trailing_blank_lines(self, raw_lines: list[str]) -> list[str]:
        """Drop blank lines at the end of input."""

        lines = list(raw_lines)
        while lines and not lines[-1].strip():
            lines.pop()
        return lines

    def _keep_trailing_blank_lines(self, block: _PendingBlock, count: int) -> None:
        """Give a final literal `|+` block back the blank lines trimmed from the end of input.

        This is the only case where canonical text ends with more than one newline.
        """

        if block.header.chomping == CHOMP_KEEP and not block.header.is_folded:
            block.body.extend([""] * count)

    def _consume_line(self, state: _ScanState, line: str, indent: int, line_number: int) -> None:
        """Route one cleaned physical line according to the current scan mode."""

        if state.mode == _MODE_IN_BLOCK:
            state.block.body.append(line.strip())
            return
        if state.mode == _MODE_IN_WEIRD_BLOCK:
            state.weird_block.parts.append(line.strip())
            return

        if line.lstrip().startswith("#"):
            self._emit(state, line)
            return

        header_match = self._BLOCK_HEADER_RE.match(line)
        header = BlockScalarHeader.parse(header_match.group(2)) if header_match else None
        if header is not None:
            self._open_block(state, header_match.group(1), header, indent)
            return

        key, separator, value = line.strip().partition(":")
        if not separator:
            self._continue_previous_line(state, line.strip(), line_number)
            return
        self._emit_key_value(state, key.strip(), value, indent)

    def _open_block(
        self, state: _ScanState, key: str, header: BlockScalarHeader, indent: int
    ) -> None:
        """Emit a block-scalar header line and start buffering its body."""

        prefix = f"{SPACE * indent}{quote_key(key)}:"
        state.block = _PendingBlock(
            indent=indent,
            prefix=prefix,
            header=header,
            header_index=len(state.lines),
        )
        self._emit(state, f"{prefix} {header.render()}")
        state.mode = _MODE_IN_BLOCK

    def _close_block(self, state: _ScanState) -> None:
        """Convert the buffered block body into canonical output lines."""

        block = state.block
        state.block = None
        state.mode = _MODE_NORMAL
        header = block.header.as_literal(self.indent_size) if block.header.is_folded else block.header
        body_indent = SPACE * (
            block.indent + self.indent_size + header.indent_supplement(self.indent_size)
        )

        if block.header.is_folded:
            state.lines[block.header_index] = f"{block.prefix} {header.render()}"
            folded = scrub_value(SPACE.join(block.body))
            if folded:
                state.lines.append(f"{body_indent}{folded}")
            return

        for row in self._clean_literal_body(block.body):
            state.lines.append(f"{body_indent}{row}" if row else "")

    def _clean_literal_body(self, body: list[str]) -> list[str]:
        """Scrub a literal body as one text, keeping its leading and trailing blank lines."""

        start = 0
        while start < len(body) and not body[start]:
            start += 1
        end = len(body)
        while end > start and not body[end - 1]:
            end -= 1
        if start == end:
            return list(body)

        cleaned = scrub_value(NEWLINE.join(body[start:end])).split(NEWLINE)
        return body[:start] + cleaned + body[end:]

    def _close_weird_block(self, state: _ScanState) -> None:
        """Merge a wrapped quoted value back into one `key: value` line."""

        weird_block = state.weird_block
        state.weird_block = None
        state.mode = _MODE_NORMAL
        self._emit_entry(
            state,
            indent=weird_block.indent,
            prefix=weird_block.prefix,
            value=SPACE.join(weird_block.parts),
        )

    def _apply_implicit_null(self, state: _ScanState, indent: int) -> None:
        """Fill a trailing bare `key:` with `null` when the next line is not its child."""

        entry = state.last_entry
        if state.mode != _MODE_NORMAL or entry is None or entry.value is not None:
            return
        if entry.index != len(state.lines) - 1 or entry.indent < indent:
            return
        entry.value = NULL_TOKEN
        state.lines[entry.index] = f"{entry.prefix} {NULL_TOKEN}"

    def _continue_previous_line(self, state: _ScanState, content: str, line_number: int) -> None:
        """Join a soft-wrapped plain-text line onto the previous emitted line."""

        entry = state.last_entry
        if entry is not None and entry.index == len(state.lines) - 1:
            entry.value = content if entry.value is None else f"{entry.value} {content}"
            state.lines[entry.index] = self._render_entry(entry)
            return
        if not state.lines:
            raise ValueError(f"Line {line_number} has no key and nothing to continue: `{content}`.")
        state.lines[-1] = f"{state.lines[-1]} {content}"

    def _emit_key_value(self, state: _ScanState, key: str, value: str, indent: int) -> None:
        """Emit a `key: value` or bare `key:` line, or start a weird block."""

        prefix = f"{SPACE * indent}{quote_key(key)}:"
        stripped = value.strip()
        if not stripped:
            self._emit_entry(state, indent=indent, prefix=prefix, value=None)
            return

        if self._opens_weird_block(stripped):
            state.weird_block = _PendingWeirdBlock(indent=indent, prefix=prefix, parts=[stripped])
            state.mode = _MODE_IN_WEIRD_BLOCK
            return
        self._emit_entry(state, indent=indent, prefix=prefix, value=value)

    def _opens_weird_block(self, value: str) -> bool:
        """Return whether a value starts a quoted string left unterminated on its line."""

        for quote in (DOUBLE_QUOTE, SINGLE_QUOTE):
            if value.startswith(quote) and value.count(quote) % 2 == 1:
                return True
        return False

    def _emit_entry(self, state: _ScanState, *, indent: int, prefix: str, value: str | None) -> None:
        """Emit a key line and remember it for continuation and null filling."""

        entry = _KeyValueLine(index=len(state.lines), indent=indent, prefix=prefix, value=value)
        self._emit(state, self._render_entry(entry))
        state.last_entry = entry

    def _render_entry(self, entry: _KeyValueLine) -> str:
        """Render a remembered key line."""

        if entry.value is None:
            return entry.prefix
        if entry.value.strip() in _QUOTED_NULLS:
            return f"{entry.prefix} {_QUOTED_NULLS[0]}"
        return f"{entry.prefix} {quote_value(entry.value)}"

    def _emit(self, state: _ScanState, line: str) -> None:
        """Append one output line; any earlier key line is no longer the last one."""

        state.lines.append(line)
        state.last_entry = None

    def _finalize(self, lines: list[str]) -> list[str]:
        """Blank whitespace-only lines, collapse stray double spaces, add the final newline."""

        return [
            self._WHITESPACE_RUN_RE.sub(SPACE, line) if line.strip() else ""
            for line in [*lines, ""]
        ]
