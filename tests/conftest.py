from __future__ import annotations

import sys
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

# Make the top-level packages importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.errors import FetchError  # noqa: E402


SEARCH_URL = "https://www.alleydog.com/search-results.php?q={term}"


def search_page(*anchors: str, container_class: str = "results") -> str:
    """Build a search results page; each anchor is raw ``<a ...>`` markup."""
    return (
        "<html><body><div class='header'><a href='/home'>Home</a></div>"
        f"<div class='{container_class}'>{''.join(anchors)}</div>"
        "</body></html>"
    )


def definition_page(title: str, text: str) -> str:
    return (
        "<html><body><h1>AlleyDog.com</h1><p>Site banner</p>"
        f"<article><h1>{title}</h1><p>{text}</p><p>Second paragraph</p></article>"
        "</body></html>"
    )


class FakeSite:
    """Serves canned pages by URL and records every request."""

    def __init__(self, pages: dict[str, str]):
        self.pages = pages
        self.requested: list[str] = []

    def __call__(self, url: str) -> BeautifulSoup:
        self.requested.append(url)
        if url not in self.pages:
            raise FetchError(url, "host unreachable")
        return BeautifulSoup(self.pages[url], "html.parser")


@pytest.fixture
def soup():
    return lambda html: BeautifulSoup(html, "html.parser")
