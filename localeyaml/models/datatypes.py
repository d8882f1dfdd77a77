"""Core datatypes shared across localeyaml modules.

Responsibilities:
- Name the node shapes exchanged between parser, sorter, and serializer.
- Describe block-scalar headers (`|`, `>`, explicit indent, chomping) in one place.

Key types:
- `YamlNode`: `None`, a `str` scalar, or a nested `YamlMapping`.
- `YamlMapping`: insertion-ordered `dict` from string keys to nodes.
- `BlockScalarHeader`: transient descriptor of a block-scalar header token.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Union

YamlNode = Union[None, str, "dict[str, YamlNode]"]
YamlMapping = dict[str, YamlNode]

LITERAL_STYLE = "|"
FOLDED_STYLE = ">"

CHOMP_CLIP = "clip"
CHOMP_STRIP = "strip"
CHOMP_KEEP = "keep"

_CHOMP_BY_INDICATOR = {"": CHOMP_CLIP, "-": CHOMP_STRIP, "+": CHOMP_KEEP}
_INDICATOR_BY_CHOMP = {value: key for key, value in _CHOMP_BY_INDICATOR.items()}
_HEADER_TOKEN_RE = re.compile(r"^([|>])(\d*)([-+]?)$")


@dataclass(frozen=True, slots=True)
class BlockScalarHeader:
    """Parsed block-scalar header token such as `|`, `>-`, or `|4+`.

    Attributes:
        style: `|` (literal) or `>` (folded).
        explicit_indent: Optional indentation indicator digit(s).
        chomping: `clip` (no indicator), `strip` (`-`), or `keep` (`+`).
    """

    style: str = LITERAL_STYLE
    explicit_indent: int | None = None
    chomping: str = CHOMP_CLIP

    @classmethod
    def parse(cls, token: str) -> BlockScalarHeader | None:
        """Return the header described by `token`, or `None` when it is not a header."""

        match = _HEADER_TOKEN_RE.match(token.strip())
        if match is None:
            return None
        style, digits, indicator = match.groups()
        return cls(
            style=style,
            explicit_indent=int(digits) if digits else None,
            chomping=_CHOMP_BY_INDICATOR[indicator],
        )

    @property
    def is_folded(self) -> bool:
        """Return whether body lines fold into a single line."""

        return self.style == FOLDED_STYLE

    def as_literal(self, indent_size: int) -> BlockScalarHeader:
        """Return the literal header used once a folded body is joined into one line.

        The explicit indent, when present, loses one indent unit; it is dropped
        when nothing is left.
        """

        explicit_indent = None
        if self.explicit_indent and self.explicit_indent > indent_size:
            explicit_indent = self.explicit_indent - indent_size
        return BlockScalarHeader(
            style=LITERAL_STYLE,
            explicit_indent=explicit_indent,
            chomping=self.chomping,
        )

    def render(self) -> str:
        """Render the header token back to text."""

        digits = "" if self.explicit_indent is None else str(self.explicit_indent)
        return f"{self.style}{digits}{_INDICATOR_BY_CHOMP[self.chomping]}"

    def indent_supplement(self, indent_size: int) -> int:
        """Return extra body indentation implied by the explicit indent indicator."""

        if not self.explicit_indent:
            return 0
        return max(self.explicit_indent - indent_size, 0)

    def resolve(self, body_lines: list[str], indent_size: int) -> str:
        """Join accumulated body lines into the final string value.

        Each non-empty line is re-indented by the indent supplement, lines are
        joined with newlines, and the chomping rule fixes the trailing newlines:
        `clip` keeps exactly one, `strip` removes all, `keep` keeps every
        trailing empty line as a newline.
        """

        padding = " " * self.indent_supplement(indent_size)
        text = "\n".join(f"{padding}{line}" if line else line for line in body_lines)
        if self.chomping == CHOMP_KEEP:
            return f"{text}\n"
        text = text.rstrip("\n")
        if self.chomping == CHOMP_STRIP:
            return text
        return f"{text}\n"
