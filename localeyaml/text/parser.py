"""Parser for canonical translation YAML.

Responsibilities:
- Build an insertion-ordered nested mapping from normalized dialect text.
- Track nesting through indentation and accumulate block-scalar bodies.
- Resolve block bodies into final strings according to their chomping rule.

The parser expects text produced by `YamlNormalizer`; it does not try to
recover from other malformed input beyond reporting the offending line.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models.datatypes import BlockScalarHeader, YamlMapping
from .quoting import INDENT_SIZE, NEWLINE, NULL_TOKEN, SPACE, unquote_scalar


@dataclass(slots=True)
class _BlockAccumulator:
    """Body lines collected for one block scalar before resolution."""

    header: BlockScalarHeader
    indent: int
    lines: list[str] = field(default_factory=list)


class YamlParser:
    """Parse normalized dialect text into nested `dict` mappings."""

    def __init__(self, indent_size: int = INDENT_SIZE) -> None:
        """Initialize with the number of spaces per nesting level."""

        self.indent_size = indent_size

    def parse(self, text: str) -> YamlMapping:
        """Parse dialect text and return the resolved mapping.

        Raises:
            ValueError: If a line has no key, nests under a scalar, or carries
                an unrecognized block header.
        """

        root: YamlMapping = {}
        last_keys: list[str] = []
        block: _BlockAccumulator | None = None
        lines = text.split(NEWLINE)
        if lines and not lines[-1]:
            lines.pop()

        for line_number, line in enumerate(lines, 1):
            indent = len(line) - len(line.lstrip(SPACE))
            blank_line = not line.strip()
            if block is not None and not blank_line and indent <= block.indent:
                block = None

            if block is not None:
                block.lines.append(line.strip())
                continue
            if blank_line or line.lstrip().startswith("#"):
                continue

            last_keys = last_keys[: indent // self.indent_size]
            key_text, separator, value_text = line.strip().partition(":")
            if not separator:
                raise ValueError(f"Line {line_number} is not a `key: value` entry: `{line.strip()}`.")

            key = unquote_scalar(key_text.strip())
            value = value_text.strip()
            parent = self._resolve_parent(root, last_keys, line_number)

            if value.startswith("|"):
                header = BlockScalarHeader.parse(value)
                if header is None:
                    raise ValueError(f"Line {line_number} has an invalid block header `{value}`.")
                block = _BlockAccumulator(header=header, indent=indent)
                parent[key] = block
                last_keys.append(key)
            elif not value:
                parent[key] = {}
                last_keys.append(key)
            elif value == NULL_TOKEN:
                parent[key] = None
            else:
                parent[key] = unquote_scalar(value)

        return self._resolve_blocks(root)

    def _resolve_parent(
        self, root: YamlMapping, last_keys: list[str], line_number: int
    ) -> YamlMapping:
        """Walk `last_keys` from the root and return the mapping to insert into."""

        current = root
        for key in last_keys:
            child = current.get(key)
            if not isinstance(child, dict):
                raise ValueError(
                    f"Line {line_number} is nested under `{key}`, which is not a mapping."
                )
            current = child
        return current

    def _resolve_blocks(self, mapping: YamlMapping) -> YamlMapping:
        """Return a copy of `mapping` with every block accumulator resolved to a string."""

        resolved: YamlMapping = {}
        for key, value in mapping.items():
            if isinstance(value, _BlockAccumulator):
                resolved[key] = value.header.resolve(value.lines, self.indent_size)
            elif isinstance(value, dict):
                resolved[key] = self._resolve_blocks(value)
            else:
                resolved[key] = value
        return resolved
