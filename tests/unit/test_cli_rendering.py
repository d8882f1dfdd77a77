"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer

from localeyaml.cli_rendering import echo_cleaned, echo_mapping_json, exit_with_command_error
from localeyaml.errors import YamlStageError


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = YamlStageError(
        stage="read",
        detail="File not found: `missing.yml`.",
        hint="Verify the path exists and is a readable UTF-8 file.",
        path=Path("missing.yml"),
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("clean", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "clean failed at stage `read` for `missing.yml`" in captured.err
    assert "Hint: Verify the path exists and is a readable UTF-8 file." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("dump", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "dump failed: unexpected failure" in captured.err
    assert "Hint:" not in captured.err


def test_echo_cleaned_names_output_only_when_it_differs(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """In-place cleans print one path; redirected cleans print both."""

    echo_cleaned(Path("en.yml"), Path("en.yml"))
    echo_cleaned(Path("en.yml"), Path("out.yml"))

    assert capsys.readouterr().out.splitlines() == [
        "Cleaned: en.yml",
        "Cleaned: en.yml -> out.yml",
    ]


def test_echo_mapping_json_preserves_order_and_unicode(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """JSON output keeps key order, `null`, and non-ASCII text."""

    echo_mapping_json({"z": "ça", "a": None})

    output = capsys.readouterr().out
    assert '"ça"' in output
    assert list(json.loads(output)) == ["z", "a"]


def test_exit_with_command_error_omits_hint_line_when_stage_error_has_none(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A stage error without a hint should render a single diagnostic line."""

    error = YamlStageError(stage="parse", detail="Bad indentation.")

    with pytest.raises(typer.Exit):
        exit_with_command_error("parse", error)

    assert capsys.readouterr().err.splitlines() == [
        "parse failed at stage `parse`: Bad indentation."
    ]
