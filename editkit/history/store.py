"""JSON-backed, most-recent-first history logs."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Generic, List, Optional, Sequence, TypeVar

from editkit.exceptions import SchemaError
from editkit.utils.logging import get_logger

log = get_logger(__name__, component="history")

T = TypeVar("T")

# commands that are never worth replaying
NON_RECORDED = {"repeat"}
HELP_FLAGS = {"--help", "-h", "--version", "--install-completion", "--show-completion"}


class JsonListStore:
    """A JSON array on disk, newest entry first.

    ``limit`` caps the number of entries kept on ``push``; ``None`` means
    unbounded. Duplicates are allowed.
    """

    def __init__(self, path: Path, limit: Optional[int] = None) -> None:
        if limit is not None and limit <= 0:
            raise ValueError("limit must be positive when set")
        self.path = Path(path)
        self.limit = limit

    def load(self) -> List[Any]:
        if not self.path.exists():
            return []
        text = self.path.read_text()
        if not text.strip():
            return []
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, list):
            raise SchemaError(f"{self.path} must contain a JSON array")
        return raw

    def save(self, items: Sequence[Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(list(items), indent=2))

    def push(self, item: Any) -> List[Any]:
        items = [item, *self.load()]
        if self.limit is not None:
            items = items[: self.limit]
        self.save(items)
        log.debug("Recorded history entry", extra={"path": str(self.path)})
        return items

    def clear(self) -> None:
        self.save([])


class _TypedHistory(ABC, Generic[T]):
    def __init__(self, store: JsonListStore) -> None:
        self.store = store

    @abstractmethod
    def _decode(self, raw: Any) -> T:
        """Convert one stored item; raise SchemaError when it is malformed."""

    def _encode(self, entry: T) -> Any:
        return entry

    def entries(self) -> List[T]:
        """Decoded entries; malformed items are skipped with a warning."""
        decoded: List[T] = []
        for raw in self.store.load():
            try:
                decoded.append(self._decode(raw))
            except SchemaError as exc:
                log.warning(f"Skipping history entry: {exc}", extra={"path": str(self.store.path)})
        return decoded

    def record(self, entry: T) -> None:
        self.store.push(self._encode(entry))

    def clear(self) -> None:
        self.store.clear()


class CommandHistory(_TypedHistory[List[str]]):
    """Argv lists of past editkit invocations."""

    def __init__(self, path: Path, limit: int = 100) -> None:
        super().__init__(JsonListStore(path, limit))

    def _decode(self, raw: Any) -> List[str]:
        if not isinstance(raw, list) or not all(isinstance(part, str) for part in raw):
            raise SchemaError(f"command history entries must be string arrays: {raw!r}")
        return list(raw)

    def _encode(self, entry: List[str]) -> Any:
        return [str(part) for part in entry]


class CompileHistory(_TypedHistory[str]):
    """Command lines previously passed to ``compile``."""

    def __init__(self, path: Path, limit: int = 100) -> None:
        super().__init__(JsonListStore(path, limit))

    def _decode(self, raw: Any) -> str:
        if not isinstance(raw, str):
            raise SchemaError(f"compile history entries must be strings: {raw!r}")
        return raw


def _command_name(argv: Sequence[str]) -> Optional[str]:
    args = iter(argv)
    for part in args:
        if part == "--config":
            next(args, None)
        elif not part.startswith("-"):
            return part
    return None


def should_record(argv: Sequence[str]) -> bool:
    """Whether an invocation belongs in command history."""
    if any(part in HELP_FLAGS for part in argv):
        return False
    return _command_name(argv) not in {None, "", *NON_RECORDED}


__all__ = ["CommandHistory", "CompileHistory", "JsonListStore", "should_record"]
