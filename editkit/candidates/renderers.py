"""Label renderers and exclusion predicates used with ``build_candidates``."""

from __future__ import annotations

import shlex
from typing import Callable, Sequence

Predicate = Callable[[str], bool]


def render_command(argv: Sequence[str]) -> str:
    """Render an argv list the way a shell user would type it."""
    return shlex.join(str(part) for part in argv)


def render_position(line: int, text: str) -> str:
    """Render a buffer position as ``"<line>: <text>"``."""
    return f"{line}: {text}"


def exclude_blank(label: str) -> bool:
    return not label.strip()


def exclude_non_command(label: str) -> bool:
    # parenthesized list literals are data, not invocable commands
    return exclude_blank(label) or label.startswith("((")


def any_of(*predicates: Predicate) -> Predicate:
    """Combine predicates; the result excludes a label if any predicate does."""

    def _combined(label: str) -> bool:
        return any(predicate(label) for predicate in predicates)

    return _combined


__all__ = ["any_of", "exclude_blank", "exclude_non_command", "render_command", "render_position"]
