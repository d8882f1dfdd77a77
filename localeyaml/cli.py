"""Command-line interface for localeyaml.

Responsibilities:
- Expose `clean`, `parse`, and `dump` commands over the pipeline workflows.
- Resolve effective settings from `--config`, `LOCALEYAML_*` variables, and CLI flags.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_cleaned, echo_mapping_json, exit_with_command_error
from .config import ConfigLoader, LocaleYamlConfig
from .errors import YamlStageError
from .io.storage import YamlFileStore
from .pipeline import LocaleYamlPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="localeyaml",
    no_args_is_help=True,
    help="Normalize, parse, and dump translation YAML files.",
)

_SortOption = Annotated[
    bool | None,
    typer.Option("--sort/--no-sort", help="Sort keys recursively (default: on)."),
]
_IndentOption = Annotated[
    int | None,
    typer.Option("--indent", help="Spaces per nesting level (default: 2)."),
]
_ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to a YAML settings file."),
]
_VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Print stage-level progress logs to stderr."),
]


def _load_config(config_path: Path | None) -> LocaleYamlConfig:
    """Load settings from `--config` or the environment and map failures to stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise YamlStageError(
                stage="config",
                detail=f"Invalid environment settings: {exc}",
                hint="Fix or unset the LOCALEYAML_* variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise YamlStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <settings.yml>`.",
        ) from exc
    except ValueError as exc:
        raise YamlStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc


def _run_logger(verbose: bool) -> RunLogger | None:
    """Return a stderr logger for `--verbose`, otherwise no stage logging."""

    if not verbose:
        return None
    return RunLogger(sink=typer.get_text_stream("stderr"))


def _load_json_mapping(path: Path) -> dict[str, object]:
    """Read a JSON object from `path` for the `dump` command."""

    try:
        payload = json.loads(YamlFileStore().read_text(path))
    except FileNotFoundError as exc:
        raise YamlStageError(stage="read", detail=str(exc), path=path) from exc
    except json.JSONDecodeError as exc:
        raise YamlStageError(
            stage="read",
            detail=f"Invalid JSON: {exc}",
            hint="Provide a JSON object such as the output of `localeyaml parse`.",
            path=path,
        ) from exc
    if not isinstance(payload, dict):
        raise YamlStageError(
            stage="read",
            detail="JSON root must be an object.",
            hint="Provide a JSON object such as the output of `localeyaml parse`.",
            path=path,
        )
    return payload


@app.command("clean")
def clean_command(
    paths: Annotated[list[Path], typer.Argument(help="Translation YAML file(s) to canonicalize.")],
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write to this file instead of rewriting the source."),
    ] = None,
    sort: _SortOption = None,
    indent: _IndentOption = None,
    config_file: _ConfigOption = None,
    verbose: _VerboseOption = False,
) -> None:
    """Canonicalize files in place (or into `--output`)."""

    try:
        config = _load_config(config_file).with_overrides(
            sort=sort, indent_size=indent, output_path=output
        )
        if config.output_path is not None and len(paths) != 1:
            raise YamlStageError(
                stage="config",
                detail="An output path requires exactly one input path.",
                hint="Run one `clean --output` per file, or unset LOCALEYAML_OUTPUT_PATH / `output_path`.",
            )
        pipeline = LocaleYamlPipeline(config, _run_logger(verbose))
        for path in paths:
            target = pipeline.clean_file(path)
            echo_cleaned(path, target)
    except Exception as exc:
        exit_with_command_error("clean", exc)


@app.command("parse")
def parse_command(
    path: Annotated[Path, typer.Argument(help="Translation YAML file to parse.")],
    sort: _SortOption = None,
    indent: _IndentOption = None,
    config_file: _ConfigOption = None,
    verbose: _VerboseOption = False,
) -> None:
    """Print the parsed mapping as JSON. The source file is not modified."""

    try:
        config = _load_config(config_file).with_overrides(sort=sort, indent_size=indent)
        mapping = LocaleYamlPipeline(config, _run_logger(verbose)).parse_file(path)
    except Exception as exc:
        exit_with_command_error("parse", exc)

    echo_mapping_json(mapping)


@app.command("dump")
def dump_command(
    json_path: Annotated[Path, typer.Argument(help="JSON object file to serialize.")],
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write the YAML to this file instead of stdout."),
    ] = None,
    indent: _IndentOption = None,
    config_file: _ConfigOption = None,
    verbose: _VerboseOption = False,
) -> None:
    """Serialize a JSON object into canonical translation YAML."""

    try:
        config = _load_config(config_file).with_overrides(indent_size=indent)
        pipeline = LocaleYamlPipeline(config, _run_logger(verbose))
        text = pipeline.dump_mapping(_load_json_mapping(json_path))
        if output is not None:
            YamlFileStore(atomic_write=config.atomic_write).write_text(output, text)
    except Exception as exc:
        exit_with_command_error("dump", exc)

    if output is None:
        typer.echo(text, nl=False)
    else:
        typer.echo(f"Dumped: {json_path} -> {output}")


def main() -> None:
    """Run the localeyaml Typer CLI application."""

    app()
