from __future__ import annotations

import pytest

from editkit.candidates import (
    Candidate,
    CandidateSet,
    build_candidates,
    exclude_non_command,
    select_candidate,
)
from editkit.exceptions import EmptyCandidateSet


def _identity(entry: str) -> str:
    return entry


def test_dedup_and_exclusion_scenario():
    entries = ["(foo 1)", "", "(bar 2)", "(foo 1)"]

    result = build_candidates(entries, _identity, exclude_non_command)

    assert result.pairs() == [("(foo 1)", "(foo 1)"), ("(bar 2)", "(bar 2)")]


def test_empty_entries_give_empty_set_and_selection_signals():
    result = build_candidates([], _identity, exclude_non_command)
    calls = []

    assert len(result) == 0
    with pytest.raises(EmptyCandidateSet):
        select_candidate(result, lambda labels: calls.append(labels) or "x")
    assert calls == []


def test_first_occurrence_wins_for_equal_labels():
    entries = [("a", 1), ("b", 2), ("a", 3), ("c", 4), ("b", 5)]

    result = build_candidates(entries, lambda e: e[0], lambda label: False)

    assert result.labels == ("a", "b", "c")
    assert [c.value for c in result] == [("a", 1), ("b", 2), ("c", 4)]


def test_excluded_labels_never_appear_regardless_of_position():
    entries = ["((x))", "keep", "((x))", "  ", "keep", "other"]

    result = build_candidates(entries, _identity, exclude_non_command)

    assert result.labels == ("keep", "other")
    assert len(result) <= len(entries)


def test_build_is_pure_and_repeatable():
    entries = [["make"], ["make", "test"], ["make"]]
    render = " ".join

    first = build_candidates(entries, render, lambda label: False)
    second = build_candidates(entries, render, lambda label: False)

    assert first == second
    assert entries == [["make"], ["make", "test"], ["make"]]


def test_render_is_applied_before_dedup():
    entries = [1, 2, 11, 3]

    result = build_candidates(entries, lambda n: str(n % 10), lambda label: False)

    assert result.pairs() == [("1", 1), ("2", 2), ("3", 3)]


def test_select_maps_label_back_to_value():
    candidates = build_candidates([("x", 10), ("y", 20)], lambda e: e[0], lambda label: False)
    seen = []

    def prompt(labels):
        seen.append(tuple(labels))
        return "y"

    assert select_candidate(candidates, prompt) == ("y", 20)
    assert seen == [("x", "y")]


@pytest.mark.parametrize("answer", [None, "", "not-offered"])
def test_cancel_or_free_text_is_no_selection(answer):
    candidates = build_candidates(["a", "b"], _identity, lambda label: False)

    assert select_candidate(candidates, lambda labels: answer) is None


def test_candidate_set_rejects_duplicate_labels():
    with pytest.raises(ValueError):
        CandidateSet([Candidate("a", 1), Candidate("a", 2)])
