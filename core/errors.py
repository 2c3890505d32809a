#!/usr/bin/env python3
"""
Error hierarchy for the glossary walk.

Every failure is terminal: nothing here is retried or downgraded, and the CLI
is the only place that catches ``ProgramError``.
"""


class ProgramError(Exception):
    """Base class for every error the glossary walk can surface"""

    description = "Program error"

    def __init__(self, message: str = None):
        self.message = message or self.description
        super().__init__(self.message)


class ArgumentError(ProgramError):
    """Bad or missing command-line input (start offset, terms file path)"""

    description = "Invalid arguments"


class IoError(ProgramError):
    """Term file or console I/O failed"""

    description = "I/O error"


class FetchError(ProgramError):
    """A page could not be retrieved from the glossary site"""

    description = "Url fetch error"

    def __init__(self, url: str, reason: str = None):
        self.url = url
        message = f"{self.description}: {url}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ParseError(ProgramError):
    """Expected page structure (results container, article, h1, p) is missing"""

    description = "Error parsing document"
