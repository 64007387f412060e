"""Interfaces for collaborators the commands talk to."""

from editkit.interfaces.selector import PromptSelector, Selector, StaticSelector

__all__ = ["PromptSelector", "Selector", "StaticSelector"]
