"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and the JSON view of parsed mappings.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, NoReturn

import typer

from .errors import YamlStageError


def _diagnostic_lines(command_name: str, exc: Exception) -> list[tuple[str, str]]:
    """Return `(text, colour)` pairs describing a failed command."""

    if not isinstance(exc, YamlStageError):
        return [(f"{command_name} failed: {exc}", typer.colors.RED)]
    lines = [(f"{command_name} failed at {exc.describe()}", typer.colors.RED)]
    if exc.hint:
        lines.append((f"Hint: {exc.hint}", typer.colors.YELLOW))
    return lines


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Write the failure diagnostics to stderr and stop with exit code 1."""

    for text, colour in _diagnostic_lines(command_name, exc):
        typer.secho(text, fg=colour, err=True)
    raise typer.Exit(code=1) from exc


def echo_cleaned(path: Path, target: Path) -> None:
    """Print one line per cleaned file, naming the output when it differs."""

    if target == path:
        typer.echo(f"Cleaned: {path}")
    else:
        typer.echo(f"Cleaned: {path} -> {target}")


def echo_mapping_json(mapping: Mapping[str, object]) -> None:
    """Print a parsed mapping as pretty, order-preserving JSON."""

    typer.echo(json.dumps(mapping, ensure_ascii=False, indent=2))
