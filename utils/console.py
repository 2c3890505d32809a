#!/usr/bin/env python3
"""
Console display for the glossary walk
"""

import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text

from core.errors import IoError
from core.models import Definition


def setup_console():
    """
    Make sure definitions containing non-ASCII text never crash printing on Windows consoles
    """
    if sys.platform.startswith('win') and hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')


class ConsoleDisplay:
    """Print terms and definitions and block on the operator between terms"""

    def __init__(self, console: Optional[Console] = None, stdin: Optional[TextIO] = None):
        self.console = console or Console(highlight=False)
        self.stdin = stdin or sys.stdin

    def show_term(self, term: str, index: int, total: int) -> None:
        line = Text(term, style="yellow italic underline")
        line.append(f" ({index}/{total})")
        self.console.print(line)

    def show_definition(self, definition: Definition) -> None:
        # Scraped text goes through Text so square brackets are never read as markup
        self.console.print(Text(f"{definition.title}:", style="bold"))
        self.console.print(Text(definition.text))
        self.console.print()

    def wait_for_advance(self) -> None:
        """Prompt and block for one line. End of input still advances."""
        self.console.print(">")
        try:
            self.stdin.readline()
        except OSError as e:
            raise IoError(f"I/O error: {e}") from e
