"""Persistent history logs: command history, compile history and the mark ring."""

from editkit.history.marks import MarkRing, Position
from editkit.history.store import CommandHistory, CompileHistory, JsonListStore, should_record

__all__ = ["CommandHistory", "CompileHistory", "JsonListStore", "MarkRing", "Position", "should_record"]
