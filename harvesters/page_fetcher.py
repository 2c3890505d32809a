#!/usr/bin/env python3
"""
Page Fetcher - retrieve a glossary page and parse it into a document tree
"""

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from core.errors import FetchError

logger = logging.getLogger(__name__)


def fetch_html(url: str, session: Optional[requests.Session] = None,
               timeout: Optional[float] = None) -> str:
    """Fetch a page body as text, replacing any invalid UTF-8 byte sequences."""
    http = session or requests
    logger.debug(f"Fetching {url}")

    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        body = response.content
    except requests.RequestException as e:
        raise FetchError(url, str(e)) from e

    return body.decode('utf-8', errors='replace')


def fetch_document(url: str, session: Optional[requests.Session] = None,
                   timeout: Optional[float] = None) -> BeautifulSoup:
    """Fetch ``url`` and return the parsed document.

    A single blocking GET with no retries; transport failures and non-success
    statuses raise ``FetchError`` straight away.
    """
    html = fetch_html(url, session=session, timeout=timeout)
    return BeautifulSoup(html, "html.parser")
