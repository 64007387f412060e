"""Candidate collection and selection over host-maintained history logs."""

from editkit.candidates.collector import (
    Candidate,
    CandidateSet,
    PromptFn,
    build_candidates,
    select_candidate,
)
from editkit.candidates.renderers import (
    any_of,
    exclude_blank,
    exclude_non_command,
    render_command,
    render_position,
)

__all__ = [
    "Candidate",
    "CandidateSet",
    "PromptFn",
    "build_candidates",
    "select_candidate",
    "any_of",
    "exclude_blank",
    "exclude_non_command",
    "render_command",
    "render_position",
]
