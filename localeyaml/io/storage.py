"""Filesystem access for translation YAML files.

Responsibilities:
- Read source files as UTF-8 text.
- Write canonical output in one step, atomically when requested.
"""

from __future__ import annotations

import os
from pathlib import Path
import tempfile


class YamlFileStore:
    """Read and write dialect files on the local filesystem."""

    def __init__(self, atomic_write: bool = True) -> None:
        """Initialize the store with the write strategy."""

        self.atomic_write = atomic_write

    def exists(self, path: Path) -> bool:
        """Return whether `path` is an existing file."""

        return path.is_file()

    def read_text(self, path: Path) -> str:
        """Load UTF-8 text, raising `FileNotFoundError` for missing files."""

        if not self.exists(path):
            raise FileNotFoundError(f"File not found: `{path}`.")
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> Path:
        """Write `content` to `path` and return the path.

        With `atomic_write`, content is written to a temporary file in the
        same directory and moved over the target, so readers see either the
        old or the new file and never a partial one.
        """

        path.parent.mkdir(parents=True, exist_ok=True)
        if not self.atomic_write:
            path.write_text(content, encoding="utf-8")
            return path

        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.tmp-")
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(content)
            os.replace(tmp_path, path)
            tmp_path = None
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
        return path
