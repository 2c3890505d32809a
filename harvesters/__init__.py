"""
Glossary page harvesting.

This package contains the components that talk to the glossary site:
- Page fetching into a parsed document
- Search results and definition page parsing
"""

from .page_fetcher import fetch_document, fetch_html
from .glossary_parser import extract_definition, extract_definition_links

__all__ = [
    'fetch_document',
    'fetch_html',
    'extract_definition',
    'extract_definition_links',
]
