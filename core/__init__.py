"""
Core glossary walk components.

This package contains the building blocks of the glossary walk:
- Configuration and error types
- Definition data containers
- Term resolution and the resumable term walk
"""

from .config import GlossaryConfig, get_config, setup_logging
from .errors import ProgramError, ArgumentError, IoError, FetchError, ParseError
from .models import Definition, DefinitionLink, TermWalkState

__all__ = [
    'GlossaryConfig',
    'get_config',
    'setup_logging',
    'ProgramError',
    'ArgumentError',
    'IoError',
    'FetchError',
    'ParseError',
    'Definition',
    'DefinitionLink',
    'TermWalkState',
]
