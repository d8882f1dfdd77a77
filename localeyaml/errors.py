"""Domain exceptions for pipeline and CLI diagnostics."""

from __future__ import annotations

from pathlib import Path


class YamlStageError(RuntimeError):
    """Raised when one stage of a clean, parse, or dump workflow fails.

    Attributes:
        stage: Failing stage (`read`, `normalize`, `parse`, `sort`, `serialize`, `write`).
        detail: Human-readable failure description.
        hint: Optional remediation hint for CLI output.
        path: File the workflow was operating on, when there is one.
    """

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
        path: Path | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
        self.path = path

    def describe(self) -> str:
        """Return a one-line summary naming the stage and, if known, the file."""

        location = f" for `{self.path}`" if self.path is not None else ""
        return f"stage `{self.stage}`{location}: {self.detail}"
