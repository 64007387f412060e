"""Deduplicating candidate collection.

A history log (most recent first) is turned into an ordered set of
``(label, value)`` pairs. Labels are unique within one result; when two
entries render to the same label the earlier one is kept, so the ordering the
log already provides is preserved. Results are recomputed on every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

from editkit.exceptions import EmptyCandidateSet

T = TypeVar("T")

PromptFn = Callable[[Sequence[str]], Optional[str]]


@dataclass(frozen=True)
class Candidate(Generic[T]):
    label: str
    value: T


class CandidateSet(Generic[T]):
    """Ordered, immutable collection of candidates with unique labels."""

    __slots__ = ("_candidates", "_by_label")

    def __init__(self, candidates: Iterable[Candidate[T]] = ()) -> None:
        self._candidates: Tuple[Candidate[T], ...] = tuple(candidates)
        self._by_label: Dict[str, Candidate[T]] = {c.label: c for c in self._candidates}
        if len(self._by_label) != len(self._candidates):
            raise ValueError("candidate labels must be unique")

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[Candidate[T]]:
        return iter(self._candidates)

    def __getitem__(self, index: int) -> Candidate[T]:
        return self._candidates[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return self._candidates == other._candidates

    def __repr__(self) -> str:
        return f"CandidateSet({list(self._candidates)!r})"

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(c.label for c in self._candidates)

    def lookup(self, label: Optional[str]) -> Optional[T]:
        """Return the value rendered as ``label`` or ``None`` when unknown."""
        if not label:
            return None
        candidate = self._by_label.get(label)
        return candidate.value if candidate is not None else None

    def pairs(self) -> list[tuple[str, T]]:
        return [(c.label, c.value) for c in self._candidates]


def build_candidates(
    entries: Iterable[T],
    render: Callable[[T], str],
    exclude: Callable[[str], bool],
) -> CandidateSet[T]:
    """Render, filter and deduplicate ``entries`` into a :class:`CandidateSet`.

    Entries whose label satisfies ``exclude`` are dropped; of several entries
    sharing a label only the first one is kept. Input order is preserved.
    """

    seen: set[str] = set()
    candidates: list[Candidate[T]] = []
    for entry in entries:
        label = render(entry)
        if exclude(label) or label in seen:
            continue
        seen.add(label)
        candidates.append(Candidate(label=label, value=entry))
    return CandidateSet(candidates)


def select_candidate(candidates: CandidateSet[T], prompt_fn: PromptFn) -> Optional[T]:
    """Ask ``prompt_fn`` to choose among the labels and return the chosen value.

    Raises:
        EmptyCandidateSet: when there is nothing to choose from; ``prompt_fn``
            is not called in that case.

    Returns ``None`` when the answer is empty or matches no label.
    """

    if len(candidates) == 0:
        raise EmptyCandidateSet("no candidates to select from")
    answer = prompt_fn(candidates.labels)
    return candidates.lookup(answer)


__all__ = ["Candidate", "CandidateSet", "PromptFn", "build_candidates", "select_candidate"]
