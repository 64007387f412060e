"""Selection interfaces: present an ordered label list, return one label."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table


def resolve_answer(answer: Optional[str], labels: Sequence[str]) -> Optional[str]:
    """Map a 1-based index to its label; any other text is returned unchanged."""

    if answer is None or not answer.strip():
        return None
    stripped = answer.strip()
    if stripped.isdigit() and answer not in labels:
        index = int(stripped)
        if 1 <= index <= len(labels):
            return labels[index - 1]
    return answer


class Selector(ABC):
    """Chooses one label; ``None`` signals cancellation."""

    @abstractmethod
    def __call__(self, labels: Sequence[str]) -> Optional[str]:
        """Return the chosen label, free text, or ``None``."""


class StaticSelector(Selector):
    """Answers with a preset choice, for non-interactive use."""

    def __init__(self, answer: Optional[str]) -> None:
        self.answer = answer

    def __call__(self, labels: Sequence[str]) -> Optional[str]:
        return resolve_answer(self.answer, labels)


class PromptSelector(Selector):
    """Numbered Rich table followed by a prompt."""

    def __init__(self, console: Console, prompt: str = "Select", title: Optional[str] = None) -> None:
        self.console = console
        self.prompt = prompt
        self.title = title

    def __call__(self, labels: Sequence[str]) -> Optional[str]:
        table = Table(title=self.title, show_header=False, box=None)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Candidate")
        for idx, label in enumerate(labels, start=1):
            table.add_row(str(idx), escape(label))
        self.console.print(table)
        answer = Prompt.ask(self.prompt, console=self.console, default="", show_default=False)
        return resolve_answer(answer, labels)


__all__ = ["PromptSelector", "Selector", "StaticSelector", "resolve_answer"]
