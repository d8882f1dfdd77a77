"""Unit tests for block-scalar header parsing and body resolution."""

from __future__ import annotations

import pytest

from localeyaml.models.datatypes import (
    CHOMP_CLIP,
    CHOMP_KEEP,
    CHOMP_STRIP,
    BlockScalarHeader,
)


@pytest.mark.parametrize(
    ("token", "style", "explicit_indent", "chomping"),
    [
        ("|", "|", None, CHOMP_CLIP),
        ("|-", "|", None, CHOMP_STRIP),
        ("|+", "|", None, CHOMP_KEEP),
        (">", ">", None, CHOMP_CLIP),
        ("|4", "|", 4, CHOMP_CLIP),
        (">2-", ">", 2, CHOMP_STRIP),
    ],
)
def test_parse_reads_style_indent_and_chomping(
    token: str, style: str, explicit_indent: int | None, chomping: str
) -> None:
    """Header tokens should map to style, explicit indent, and chomping mode."""

    header = BlockScalarHeader.parse(token)

    assert header == BlockScalarHeader(
        style=style, explicit_indent=explicit_indent, chomping=chomping
    )
    assert header.render() == token


@pytest.mark.parametrize("token", ["", "text", "|x", "-|", ">>"])
def test_parse_returns_none_for_non_headers(token: str) -> None:
    """Anything other than a header token should not parse."""

    assert BlockScalarHeader.parse(token) is None


def test_as_literal_keeps_chomping_and_drops_one_indent_level() -> None:
    """Folded headers should convert to literal style with one indent unit less."""

    header = BlockScalarHeader.parse(">4-")

    assert header.is_folded
    assert header.as_literal(2).render() == "|2-"
    assert not header.as_literal(2).is_folded
    assert BlockScalarHeader.parse(">2").as_literal(2).render() == "|"
    assert BlockScalarHeader.parse(">+").as_literal(2).render() == "|+"


def test_indent_supplement_never_goes_negative() -> None:
    """Only explicit indents beyond one level should add body padding."""

    assert BlockScalarHeader().indent_supplement(2) == 0
    assert BlockScalarHeader(explicit_indent=1).indent_supplement(2) == 0
    assert BlockScalarHeader(explicit_indent=2).indent_supplement(2) == 0
    assert BlockScalarHeader(explicit_indent=5).indent_supplement(2) == 3


def test_resolve_applies_chomping_rules() -> None:
    """Clip keeps one newline, strip keeps none, keep keeps every trailing blank."""

    body = ["first", "second", "", ""]

    assert BlockScalarHeader(chomping=CHOMP_CLIP).resolve(body, 2) == "first\nsecond\n"
    assert BlockScalarHeader(chomping=CHOMP_STRIP).resolve(body, 2) == "first\nsecond"
    assert BlockScalarHeader(chomping=CHOMP_KEEP).resolve(body, 2) == "first\nsecond\n\n\n"


def test_resolve_pads_non_empty_lines_by_explicit_indent() -> None:
    """Explicit indentation should survive as leading spaces in the value."""

    header = BlockScalarHeader(explicit_indent=4)

    assert header.resolve(["a", "", "b"], 2) == "  a\n\n  b\n"
