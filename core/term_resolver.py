#!/usr/bin/env python3
"""
Term Resolver
Turns a raw term into the glossary definitions the search site knows for it
"""

import logging
from typing import Callable, Iterator, List, Optional

import requests
from bs4 import BeautifulSoup

from core.config import GlossaryConfig
from core.models import Definition, DefinitionLink
from harvesters.glossary_parser import extract_definition, extract_definition_links
from harvesters.page_fetcher import fetch_document

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], BeautifulSoup]


class TermResolver:
    """Search the glossary site for a term and fetch its top glossary entries"""

    def __init__(self, config: GlossaryConfig = None,
                 session: Optional[requests.Session] = None,
                 fetch: Optional[Fetcher] = None):
        self.config = config or GlossaryConfig()
        self.session = session
        self.fetch = fetch or self._fetch_with_session

    def _fetch_with_session(self, url: str) -> BeautifulSoup:
        return fetch_document(url, session=self.session, timeout=self.config.REQUEST_TIMEOUT)

    def build_search_url(self, term: str) -> str:
        return self.config.search_url(term)

    def find_glossary_links(self, term: str) -> List[DefinitionLink]:
        """Search for ``term`` and keep at most MAX_DEFINITIONS glossary-tagged links"""
        document = self.fetch(self.build_search_url(term))
        links = extract_definition_links(
            document,
            container_class=self.config.RESULTS_CONTAINER_CLASS,
            base_url=self.config.BASE_URL,
        )
        glossary_links = [link for link in links if self.config.GLOSSARY_MARKER in link.title]
        logger.debug(f"'{term}': {len(glossary_links)} of {len(links)} links are glossary entries")
        return glossary_links[:self.config.MAX_DEFINITIONS]

    def iter_definitions(self, term: str) -> Iterator[Definition]:
        """Yield definitions one at a time, fetching each page only when asked.

        The first fetch or parse failure propagates and later links are never
        requested.
        """
        for link in self.find_glossary_links(term):
            yield extract_definition(self.fetch(link.href))

    def resolve(self, term: str) -> List[Definition]:
        definitions = list(self.iter_definitions(term))
        logger.info(f"Resolved {len(definitions)} definition(s) for '{term}'")
        return definitions
