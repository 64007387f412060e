"""Mark ring of previously visited file positions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from editkit.exceptions import SchemaError
from editkit.history.store import JsonListStore
from editkit.utils.logging import get_logger

log = get_logger(__name__, component="marks")


@dataclass(frozen=True, slots=True)
class Position:
    """A line in a file; ``line`` is 1-based."""

    path: str
    line: int

    def __post_init__(self) -> None:
        if not self.path:
            raise SchemaError("position path must not be empty")
        if self.line < 1:
            raise SchemaError("position line must be >= 1")

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"

    def to_dict(self) -> dict:
        return {"path": self.path, "line": self.line}

    @classmethod
    def from_dict(cls, raw: Any) -> "Position":
        if not isinstance(raw, dict):
            raise SchemaError(f"mark entries must be objects: {raw!r}")
        path = raw.get("path")
        line = raw.get("line")
        if not isinstance(path, str) or not isinstance(line, int) or isinstance(line, bool):
            raise SchemaError(f"mark entries need a string path and integer line: {raw!r}")
        return cls(path=path, line=line)


class MarkRing:
    """Most-recent-first ring of positions, capped at ``limit`` entries."""

    def __init__(self, path: Path, limit: int = 16) -> None:
        self.store = JsonListStore(path, limit)

    def entries(self, path: Optional[str | Path] = None) -> List[Position]:
        """All marks, or only those in ``path`` when given."""
        positions: List[Position] = []
        for raw in self.store.load():
            try:
                positions.append(Position.from_dict(raw))
            except SchemaError as exc:
                log.warning(f"Skipping mark: {exc}", extra={"path": str(self.store.path)})
        if path is None:
            return positions
        wanted = str(Path(path).expanduser().resolve())
        return [p for p in positions if p.path == wanted]

    def push(self, path: str | Path, line: int) -> Position:
        target = Path(path).expanduser().resolve()
        if not target.is_file():
            raise FileNotFoundError(f"File not found: {target}")
        position = Position(path=str(target), line=line)
        self.store.push(position.to_dict())
        log.info("Mark set", extra={"path": str(position)})
        return position

    def clear(self) -> None:
        self.store.clear()

    @staticmethod
    def line_text(position: Position) -> str:
        """Stripped text of the marked line; empty when it no longer exists."""
        try:
            with open(position.path, encoding="utf-8", errors="replace") as handle:
                for number, text in enumerate(handle, start=1):
                    if number == position.line:
                        return text.strip()
        except OSError:
            log.debug("Marked file unreadable", extra={"path": position.path})
        return ""


__all__ = ["MarkRing", "Position"]
