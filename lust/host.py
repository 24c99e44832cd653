"""File access used by the `load` builtin.

The engine never touches the filesystem itself; it asks its root state's host.
Tests swap in an in-memory host.
"""

from __future__ import annotations

from pathlib import Path


class FileHost:
    """Filesystem-backed host."""

    def __init__(self, base_dir: str | Path | None = None):
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def _resolve(self, path: str) -> Path:
        p = Path(path)
        if self.base_dir is not None and not p.is_absolute():
            return self.base_dir / p
        return p

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def is_file(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def read_text(self, path: str) -> str:
        return self._resolve(path).read_text(encoding="utf-8")
