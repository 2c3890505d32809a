"""
Utility helpers.

- Console display and operator prompt
"""

from .console import ConsoleDisplay, setup_console

__all__ = [
    'ConsoleDisplay',
    'setup_console',
]
