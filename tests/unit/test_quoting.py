"""Unit tests for value scrubbing and quoting rules."""

from __future__ import annotations

import pytest

from localeyaml.text.quoting import (
    needs_quotes,
    quote_key,
    quote_value,
    scrub_value,
    strip_key_quotes,
    unquote_scalar,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a: b", '"a: b"'),
        ("see #3", '"see #3"'),
        ("line\\nbreak", '"line\\nbreak"'),
        ("line\nbreak", '"line\nbreak"'),
        ("-dash", '"-dash"'),
        ("@user", '"@user"'),
        ("%{count} items", '"%{count} items"'),
        ("ends with colon:", '"ends with colon:"'),
        ("yes", '"yes"'),
        ("OFF", '"OFF"'),
        ("True", '"True"'),
        ('" padded"', '" padded"'),
    ],
)
def test_quote_value_wraps_ambiguous_values(raw: str, expected: str) -> None:
    """Every ambiguity trigger should produce a double-quoted value."""

    assert quote_value(raw) == expected


@pytest.mark.parametrize(
    "leading_char",
    ["-", "`", "{", "}", "|", "[", "]", ">", ":", '"', "'",
     "*", "=", "%", ",", "!", "?", "&", "#", "@"],
)
def test_quote_value_wraps_values_with_special_leading_char(leading_char: str) -> None:
    """A value opening with a YAML indicator character must be quoted."""

    assert needs_quotes(f"{leading_char}value")
    assert quote_value(f"{leading_char}value") == f'"{leading_char}value"'


@pytest.mark.parametrize("raw", ["hello world", "it's fine", "100%", "a:b", "Mayo"])
def test_quote_value_leaves_plain_values_bare(raw: str) -> None:
    """Values without any trigger should be written as-is."""

    assert quote_value(raw) == raw


def test_quote_value_writes_empty_and_blank_values_as_empty_quotes() -> None:
    """Empty input and whitespace-only input should both become `""`."""

    assert quote_value("") == '""'
    assert quote_value("   ") == '""'


def test_quote_value_scrubs_hand_edited_text() -> None:
    """Control characters, doubled spaces, and exotic quotes should be cleaned."""

    assert quote_value("a\tb") == "ab"
    assert quote_value("too    many   spaces") == "too many spaces"
    assert quote_value("it’s") == "it's"
    assert quote_value("it''s") == "it's"
    assert quote_value("“smart”") == "smart"
    assert quote_value("trailing newline\n") == "trailing newline"


def test_quote_value_strips_one_layer_of_matching_quotes() -> None:
    """Existing quotes are removed and only re-added when a trigger holds."""

    assert quote_value("'single'") == "single"
    assert quote_value('"double"') == "double"
    assert quote_value('"yes"') == '"yes"'
    assert quote_value("\"'nested'\"") == "\"'nested'\""


def test_quote_value_decodes_unicode_escapes() -> None:
    """`\\U` escapes with eight hex digits should become literal code points."""

    assert quote_value("\\U0001F600 smile") == "\U0001F600 smile"
    assert scrub_value("\\UFFFFFFFF") == "\\UFFFFFFFF"


def test_quote_value_without_quotes_only_scrubs() -> None:
    """Block-body text is scrubbed but never wrapped."""

    assert quote_value("a: b", with_quotes=False) == "a: b"
    assert quote_value("  spaced  out  ", with_quotes=False) == "spaced out"


def test_quote_value_is_idempotent() -> None:
    """Quoting an already quoted value should not change it."""

    for raw in ["a: b", "yes", "plain", "-x", ""]:
        once = quote_value(raw)
        assert quote_value(once) == once


def test_needs_quotes_detects_surrounding_spaces() -> None:
    """Leading or trailing spaces are ambiguous when written bare."""

    assert needs_quotes(" lead")
    assert needs_quotes("trail ")
    assert not needs_quotes("inner space")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("hello", "hello"),
        ("yes", '"yes"'),
        ("No", '"No"'),
        ("TRUE", '"TRUE"'),
        ("42", '"42"'),
        ("-7", '"-7"'),
        ('"42"', '"42"'),
        ("'off'", '"off"'),
        ('"title"', "title"),
        ("“title”", "title"),
        ("4x", "4x"),
        (42, '"42"'),
    ],
)
def test_quote_key_escapes_coercible_keys(raw: object, expected: str) -> None:
    """Reserved words and integers should be quoted; other quotes are dropped."""

    assert quote_key(raw) == expected


def test_strip_key_quotes_requires_matching_pair() -> None:
    """Only a matching pair of surrounding quotes should be removed."""

    assert strip_key_quotes("'key'") == "key"
    assert strip_key_quotes("‘key’") == "key"
    assert strip_key_quotes("'key\"") == "'key\""
    assert strip_key_quotes('"') == '"'


def test_unquote_scalar_removes_writer_quotes_only() -> None:
    """Unquoting should drop one surrounding double-quote layer and nothing else."""

    assert unquote_scalar('"yes"') == "yes"
    assert unquote_scalar('""') == ""
    assert unquote_scalar("'single'") == "'single'"
    assert unquote_scalar('"') == '"'
    assert unquote_scalar("plain") == "plain"
