"""Workflow orchestration for cleaning, parsing, and dumping translation YAML.

Responsibilities:
- Chain normalizer, parser, sorter, and serializer into the `clean` and `parse` workflows.
- Run each step as a named stage with structured start/complete/failure logs.
- Map low-level failures to `YamlStageError` and expose the boolean-result entry points.

Key public API:
- `LocaleYamlPipeline`: stage-aware workflows that raise `YamlStageError`.
- `clean`, `parse`, `dump`: module-level entry points; `clean` and `parse`
  report failures and return `False` instead of raising.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Literal, Mapping, TypeVar

from .config import LocaleYamlConfig
from .errors import YamlStageError
from .io.storage import YamlFileStore
from .models.datatypes import YamlMapping
from .telemetry.logger import RunLogger
from .text.normalizer import YamlNormalizer
from .text.parser import YamlParser
from .text.serializer import YamlSerializer
from .text.sorting import sort_by_key

_StageResult = TypeVar("_StageResult")

_STAGE_HINTS = {
    "read": "Verify the path exists and is a readable UTF-8 file.",
    "normalize": "Check for text lines without a `key:` prefix at the top of the file.",
    "parse": "Check indentation: a nested key may sit under a scalar value.",
    "serialize": "Only nested mappings, strings, and `None` values can be dumped.",
    "write": "Verify the target directory is writable.",
}


class LocaleYamlPipeline:
    """Coordinate the text stages for one file or one in-memory mapping."""

    def __init__(
        self,
        config: LocaleYamlConfig | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize with explicit settings and an optional structured logger."""

        self.config = config if config is not None else LocaleYamlConfig()
        self._run_logger = run_logger
        self._store = YamlFileStore(atomic_write=self.config.atomic_write)
        self._normalizer = YamlNormalizer(self.config.indent_size)
        self._parser = YamlParser(self.config.indent_size)
        self._serializer = YamlSerializer(self.config.indent_size)

    def clean_file(self, path: Path) -> Path:
        """Canonicalize `path` and return the file that received the output.

        The whole workflow runs in memory; the destination is written once at
        the end, so a failure in any stage leaves every file untouched.
        """

        self._validate_config()
        raw_text = self._run_stage("read", path, lambda: self._store.read_text(path))
        mapping = self._normalize_and_parse(raw_text, path)
        canonical = self._run_stage("serialize", path, lambda: self._serializer.dump(mapping))
        target = self.config.output_path or path
        return self._run_stage("write", path, lambda: self._store.write_text(target, canonical))

    def parse_file(self, path: Path) -> YamlMapping:
        """Normalize and parse `path` without writing anything."""

        self._validate_config()
        raw_text = self._run_stage("read", path, lambda: self._store.read_text(path))
        return self._normalize_and_parse(raw_text, path)

    def normalize_text(self, text: str) -> str:
        """Return the canonical normalizer output for raw text."""

        self._validate_config()
        return self._run_stage("normalize", None, lambda: self._normalizer.normalize(text))

    def dump_mapping(self, mapping: Mapping[str, object]) -> str:
        """Serialize a mapping to canonical text."""

        self._validate_config()
        return self._run_stage("serialize", None, lambda: self._serializer.dump(mapping))

    def _normalize_and_parse(self, raw_text: str, path: Path | None) -> YamlMapping:
        """Run the normalize, parse, and optional sort stages on raw text."""

        normalized = self._run_stage("normalize", path, lambda: self._normalizer.normalize(raw_text))
        mapping = self._run_stage("parse", path, lambda: self._parser.parse(normalized))
        if self.config.sort:
            mapping = self._run_stage("sort", path, lambda: sort_by_key(mapping, True))
        return mapping

    def _validate_config(self) -> None:
        """Validate settings and map failures to a stage-aware error."""

        try:
            self.config.validate()
        except ValueError as exc:
            raise YamlStageError(
                stage="config",
                detail=str(exc),
                hint="Pass a positive `--indent` value or fix LOCALEYAML_* settings.",
            ) from exc

    def _run_stage(
        self,
        stage_name: str,
        path: Path | None,
        action: Callable[[], _StageResult],
    ) -> _StageResult:
        """Run one named stage, log its events, and wrap failures as `YamlStageError`."""

        context = {} if path is None else {"path": path}
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name, **context)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__, **context)
            raise YamlStageError(
                stage=stage_name,
                detail=str(exc) or type(exc).__name__,
                hint=_STAGE_HINTS.get(stage_name),
                path=path,
            ) from exc
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name, **context)
        return result


def _report_failure(run_logger: RunLogger, command: str, exc: Exception) -> Literal[False]:
    """Log a failed workflow and return the `False` result of the public API."""

    if isinstance(exc, YamlStageError):
        run_logger.log_message("ERROR", f"{command} failed at {exc.describe()}")
    else:
        run_logger.log_message("ERROR", f"{command} failed: {exc}")
    return False


def clean(
    path: str | Path,
    sort: bool = True,
    *,
    output: str | Path | None = None,
    indent_size: int | None = None,
    run_logger: RunLogger | None = None,
) -> bool:
    """Canonicalize a translation file in place (or into `output`).

    Returns:
        `True` on success; `False` when the file is missing or any stage fails,
        in which case a message is logged and no file is modified.
    """

    logger = run_logger or RunLogger()
    config = LocaleYamlConfig(sort=sort).with_overrides(
        indent_size=indent_size,
        output_path=Path(output) if output is not None else None,
    )
    try:
        LocaleYamlPipeline(config, logger).clean_file(Path(path))
    except Exception as exc:
        return _report_failure(logger, "clean", exc)
    return True


def parse(
    path: str | Path,
    sort: bool = True,
    *,
    indent_size: int | None = None,
    run_logger: RunLogger | None = None,
) -> YamlMapping | Literal[False]:
    """Normalize and parse a translation file into a nested mapping.

    Returns:
        The parsed mapping, or `False` when the file is missing or any stage fails.
    """

    logger = run_logger or RunLogger()
    config = LocaleYamlConfig(sort=sort).with_overrides(indent_size=indent_size)
    try:
        return LocaleYamlPipeline(config, logger).parse_file(Path(path))
    except Exception as exc:
        return _report_failure(logger, "parse", exc)


def dump(mapping: Mapping[str, object], indent_size: int | None = None) -> str:
    """Serialize a nested mapping into canonical dialect text.

    Raises:
        TypeError: If the mapping holds a value outside the node model.
    """

    return YamlSerializer(indent_size or LocaleYamlConfig().indent_size).dump(mapping)
