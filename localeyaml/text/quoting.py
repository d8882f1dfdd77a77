"""Quoting rules shared by the normalizer, parser, and serializer.

Responsibilities:
- Decide when a scalar value must be wrapped in double quotes to survive a round trip.
- Escape mapping keys that a YAML reader would otherwise coerce (booleans, integers).
- Scrub hand-edited values (control characters, doubled spaces, exotic quote glyphs).

All functions are pure and total: they never raise, they only transform text.
"""

from __future__ import annotations

import re


INDENT_SIZE = 2
SPACE = " "
NEWLINE = "\n"
ESCAPED_NEWLINE = "\\n"
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
NULL_TOKEN = "null"

SPECIAL_LEADING_CHARS = (
    "-", "`", "{", "}", "|", "[", "]", ">", ":", '"', "'",
    "*", "=", "%", ",", "!", "?", "&", "#", "@",
)
RESERVED_WORDS = frozenset(
    {
        "yes", "no", "on", "off", "true", "false",
        "Yes", "No", "On", "Off", "True", "False",
        "YES", "NO", "ON", "OFF", "TRUE", "FALSE",
    }
)

_CONTROL_CHARS_RE = re.compile(r"[\t\r\f\v]+")
_MULTIPLE_SPACES_RE = re.compile(r" {2,}")
_WEIRD_QUOTES_RE = re.compile("‘|’|“|”|‛|‚|„|‟|''")
_UNICODE_ESCAPE_RE = re.compile(r"\\U([0-9A-Fa-f]{8})")
_INTEGER_KEY_RE = re.compile(r"^[+-]?\d+$")
_MATCHING_QUOTE_PAIRS = {
    '"': '"',
    "'": "'",
    "“": "”",
    "”": "”",
    "‘": "’",
    "’": "’",
}


def _decode_unicode_escape(match: re.Match[str]) -> str:
    """Return the literal code point for one `\\UXXXXXXXX` escape."""

    code_point = int(match.group(1), 16)
    if code_point > 0x10FFFF:
        return match.group(0)
    return chr(code_point)


def scrub_value(raw: object) -> str:
    """Clean a raw value without deciding on quoting.

    Drops one trailing newline, removes tab/CR/FF/VT characters, collapses
    runs of spaces, trims, maps exotic quote glyphs to `'`, strips one layer
    of matching surrounding quotes, and decodes `\\U` escapes.
    """

    value = str(raw)
    if value.endswith(NEWLINE):
        value = value[:-1]
    value = _CONTROL_CHARS_RE.sub("", value)
    value = _MULTIPLE_SPACES_RE.sub(SPACE, value)
    value = value.strip(" \n\0")
    value = _WEIRD_QUOTES_RE.sub(SINGLE_QUOTE, value)
    if len(value) >= 1 and (
        (value.startswith(DOUBLE_QUOTE) and value.endswith(DOUBLE_QUOTE))
        or (value.startswith(SINGLE_QUOTE) and value.endswith(SINGLE_QUOTE))
    ):
        value = value[1:-1]
    return _UNICODE_ESCAPE_RE.sub(_decode_unicode_escape, value)


def needs_quotes(value: str) -> bool:
    """Return whether a scrubbed value is ambiguous when written bare."""

    return (
        ": " in value
        or " #" in value
        or NEWLINE in value
        or ESCAPED_NEWLINE in value
        or value.startswith(SPECIAL_LEADING_CHARS)
        or value.endswith(":")
        or value in RESERVED_WORDS
        or value.startswith(SPACE)
        or value.endswith(SPACE)
    )


def quote_value(raw: object, *, with_quotes: bool = True) -> str:
    """Return a value ready to be written after `key: `.

    Args:
        raw: Value text as found in the source, possibly already quoted.
        with_quotes: `False` when the value is block-scalar body text, which is
            scrubbed but never wrapped in quotes.

    Returns:
        The scrubbed value, double-quoted when any ambiguity trigger holds.
        The empty string is always written as `""`.
    """

    value = scrub_value(raw)
    if not value:
        return f"{DOUBLE_QUOTE}{DOUBLE_QUOTE}"
    if with_quotes and needs_quotes(value):
        return f"{DOUBLE_QUOTE}{value}{DOUBLE_QUOTE}"
    return value


def strip_key_quotes(raw: str) -> str:
    """Remove one layer of surrounding quote glyphs from a key."""

    if len(raw) >= 2:
        closing = _MATCHING_QUOTE_PAIRS.get(raw[0])
        if closing is not None and raw[-1] == closing:
            return raw[1:-1]
    return raw


def quote_key(raw: object) -> str:
    """Return a mapping key, double-quoted only when bare text would be coerced."""

    key = strip_key_quotes(str(raw))
    if key in RESERVED_WORDS or _INTEGER_KEY_RE.match(key):
        return f"{DOUBLE_QUOTE}{key}{DOUBLE_QUOTE}"
    return key


def unquote_scalar(text: str) -> str:
    """Remove the double quotes the writer adds around an ambiguous key or value."""

    if len(text) >= 2 and text.startswith(DOUBLE_QUOTE) and text.endswith(DOUBLE_QUOTE):
        return text[1:-1]
    return text
