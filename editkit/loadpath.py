"""Ordered, duplicate-free list of library directories."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from editkit.exceptions import DirectoryNotFoundError, SchemaError
from editkit.history.store import JsonListStore
from editkit.utils.logging import get_logger

log = get_logger(__name__, component="loadpath")


def _resolve_directory(directory: str | Path) -> Path:
    path = Path(directory).expanduser().resolve()
    if not path.is_dir():
        raise DirectoryNotFoundError(f"Directory not found: {path}")
    return path


class LoadPath:
    """Load-path entries persisted in a :class:`JsonListStore`.

    New directories go to the front unless ``append`` is requested, so lookups
    that scan the list in order see the most recently added directory first.
    """

    def __init__(self, path: Path) -> None:
        self.store = JsonListStore(path)

    def entries(self) -> List[str]:
        raw = self.store.load()
        if not all(isinstance(item, str) for item in raw):
            raise SchemaError(f"{self.store.path} must contain an array of directory strings")
        return raw

    def add(self, directory: str | Path, *, append: bool = False, subdirs: bool = False) -> List[str]:
        """Add ``directory`` (and optionally its subdirectories); return what was added."""

        root = _resolve_directory(directory)
        wanted = [root]
        if subdirs:
            wanted.extend(
                sorted(child for child in root.iterdir() if child.is_dir() and not child.name.startswith("."))
            )

        current = self.entries()
        added = [str(p) for p in wanted if str(p) not in current]
        if not added:
            return []

        updated = current + added if append else added + current
        self.store.save(updated)
        log.info(f"Added {len(added)} load-path entries", extra={"path": str(root)})
        return added

    def remove(self, directory: str | Path) -> bool:
        target = str(Path(directory).expanduser().resolve())
        current = self.entries()
        if target not in current:
            return False
        self.store.save([entry for entry in current if entry != target])
        log.info("Removed load-path entry", extra={"path": target})
        return True

    def export(self) -> str:
        """Entries joined with ``os.pathsep``, suitable for ``PYTHONPATH``."""
        return os.pathsep.join(self.entries())


__all__ = ["LoadPath"]
