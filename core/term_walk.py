#!/usr/bin/env python3
"""
Term Walk Controller
Resumable, operator-paced traversal of a term list.

The walk is a plain blocking loop: show the term with its position, show each
definition as it is fetched, then wait for one line of operator input before
moving on. The first error from any stage ends the walk.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from core.errors import ArgumentError, IoError
from core.models import TermWalkState
from core.term_resolver import TermResolver

logger = logging.getLogger(__name__)


def load_terms(path) -> List[Optional[str]]:
    """Read one term per line.

    Lines end at LF only and a trailing CR is stripped, so a stray CR inside
    a line never shifts later positions. Lines that are not valid UTF-8 come
    back as ``None`` so they still occupy their line number when a start
    offset is applied.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise IoError(f"I/O error: {e}") from e

    lines = raw.split(b"\n")
    if lines[-1] == b"":
        lines.pop()

    terms: List[Optional[str]] = []
    for line in lines:
        if line.endswith(b"\r"):
            line = line[:-1]
        try:
            terms.append(line.decode('utf-8'))
        except UnicodeDecodeError:
            logger.debug(f"Dropping undecodable line {len(terms) + 1} of {path}")
            terms.append(None)
    return terms


def remaining_terms(terms: Sequence[Optional[str]], start_index: int) -> List[str]:
    """Skip the first ``start_index - 1`` entries, then drop unreadable ones"""
    return [term for term in terms[start_index - 1:] if term is not None]


class TermWalkController:
    """Drive one definition lookup and display per term.

    ``display`` is any object with ``show_term(term, index, total)``,
    ``show_definition(definition)`` and ``wait_for_advance()``.
    """

    def __init__(self, resolver: TermResolver, display):
        self.resolver = resolver
        self.display = display

    def run(self, terms: Sequence[Optional[str]], start_index: int = 1) -> TermWalkState:
        if start_index < 1:
            raise ArgumentError(f"Start position must be 1 or greater, got {start_index}")

        state = TermWalkState(terms=remaining_terms(terms, start_index), start_index=start_index)
        logger.info(f"Walking terms {state.start_index}..{state.total_count}")

        for term in state.terms:
            self.display.show_term(term, state.current_index, state.total_count)
            for definition in self.resolver.iter_definitions(term):
                self.display.show_definition(definition)
            self.display.wait_for_advance()
            state.advance()

        return state
