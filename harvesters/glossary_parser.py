#!/usr/bin/env python3
"""
Glossary page parsers.

Two page shapes from the glossary site are understood here:

- the search results page, where candidate definitions are anchors inside a
  single results container, followed by a "are we missing a definition?"
  prompt and unrelated links;
- the definition page, where the entry is the first ``h1`` and first ``p``
  inside the page's ``article``.

A missing results container, article, heading or paragraph raises
``ParseError``.
"""

from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from core.config import GlossaryConfig
from core.errors import ParseError
from core.models import Definition, DefinitionLink

logger = logging.getLogger(__name__)


def extract_definition_links(
    document: BeautifulSoup,
    container_class: str = GlossaryConfig.RESULTS_CONTAINER_CLASS,
    base_url: Optional[str] = None,
) -> List[DefinitionLink]:
    """Return candidate definition links from a search results page, in page order."""
    container = document.find(class_=container_class)
    if container is None:
        raise ParseError(f"No '{container_class}' container on search results page")

    links: List[DefinitionLink] = []
    for anchor in container.find_all("a"):
        title = anchor.get_text()
        if title.startswith(GlossaryConfig.STOP_MARKER):
            break
        href = anchor.get("href")
        if href is None:
            continue
        if base_url:
            href = urljoin(base_url, href)
        links.append(DefinitionLink(title=title, href=href))

    logger.debug(f"Found {len(links)} candidate links")
    return links


def extract_definition(document: BeautifulSoup) -> Definition:
    """Extract the heading and first paragraph of a definition page."""
    article = document.find("article")
    if article is None:
        raise ParseError("No article on definition page")

    heading = article.find("h1")
    if heading is None:
        raise ParseError("No h1 heading in definition article")

    paragraph = article.find("p")
    if paragraph is None:
        raise ParseError("No paragraph in definition article")

    return Definition(
        title=heading.get_text().strip(),
        text=paragraph.get_text().strip(),
    )
