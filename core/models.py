#!/usr/bin/env python3
"""Data containers passed between the glossary walk stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class DefinitionLink:
    """One candidate hit on a search results page."""

    title: str
    href: str


@dataclass(frozen=True, slots=True)
class Definition:
    """A glossary entry: trimmed heading and first paragraph of body text."""

    title: str
    text: str


@dataclass(slots=True)
class TermWalkState:
    """Progress through the term list.

    ``total_count`` is fixed when the state is built from the remaining terms;
    only ``current_index`` moves, and only the walk loop moves it.
    """

    terms: List[str]
    start_index: int
    current_index: int = field(init=False)
    total_count: int = field(init=False)

    def __post_init__(self):
        self.current_index = self.start_index
        self.total_count = self.start_index + len(self.terms) - 1

    @property
    def processed(self) -> int:
        return self.current_index - self.start_index

    def advance(self) -> None:
        self.current_index += 1
