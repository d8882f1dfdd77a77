"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level logs for clean, parse, and dump runs.
- Route every line through `loguru`, optionally redirected to a dedicated sink.
"""

from __future__ import annotations

import re
from typing import Mapping, TextIO

from loguru import logger as _loguru_logger

_UNSAFE_TOKEN_CHAR_RE = re.compile(r"[^\w\-.:/]")


def _context_token(value: object) -> str:
    """Render one context value as a single space-free token; blanks read `none`."""

    return _UNSAFE_TOKEN_CHAR_RE.sub("_", str(value).strip()) or "none"


def _context_suffix(context: Mapping[str, object]) -> str:
    """Return ` key=value ...` for the context, keys sorted, or `""` when empty."""

    return "".join(f" {key}={_context_token(value)}" for key, value in sorted(context.items()))


class RunLogger:
    """Emit deterministic stage logs for library and CLI workflows.

    Without a sink, lines go through loguru's current handlers and global
    configuration is left alone. With a sink, loguru is reconfigured to write
    plain messages to that sink only, which is what the CLI and tests use.
    """

    def __init__(self, sink: TextIO | None = None) -> None:
        """Initialize the logger and configure a dedicated sink when given."""

        self._logger = _loguru_logger.bind(component="localeyaml")
        if sink is not None:
            _loguru_logger.remove()
            _loguru_logger.add(sink, format="{message}", level="INFO", colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[phase] level={level} stage={stage} event={event}{_context_suffix(context)}"
        self._logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start runtime event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete runtime event."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str, **context: object) -> None:
        """Emit a stage-failure runtime event without payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type, **context)

    def log_message(self, level: str, message: str) -> None:
        """Emit a free-form message, used for user-facing failure reports."""

        self._logger.log(level, message)
