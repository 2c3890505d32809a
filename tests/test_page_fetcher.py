"""Tests for the page fetcher (no network: requests is replaced with dummies)."""

import pytest
import requests

import harvesters.page_fetcher as page_fetcher
from core.errors import FetchError


class DummyResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class DummySession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_fetch_document_parses_body():
    session = DummySession(DummyResponse(b"<article><h1>Bias</h1></article>"))

    document = page_fetcher.fetch_document("https://a.example/bias", session=session)

    assert document.find("h1").get_text() == "Bias"
    assert session.calls == [("https://a.example/bias", {"timeout": None})]


def test_invalid_utf8_is_replaced_not_fatal():
    session = DummySession(DummyResponse(b"<p>caf\xe9 \xff ok</p>"))

    html = page_fetcher.fetch_html("https://a.example/", session=session)

    assert "�" in html
    assert html.endswith("ok</p>")


def test_connection_failure_raises_fetch_error():
    session = DummySession(error=requests.ConnectionError("Name or service not known"))

    with pytest.raises(FetchError) as exc_info:
        page_fetcher.fetch_document("https://unreachable.example/", session=session)

    assert exc_info.value.url == "https://unreachable.example/"
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_error_status_raises_fetch_error():
    session = DummySession(DummyResponse(b"missing", status_code=404))

    with pytest.raises(FetchError, match="404"):
        page_fetcher.fetch_document("https://a.example/missing", session=session)


def test_no_retry_after_failure():
    session = DummySession(error=requests.Timeout("read timed out"))

    with pytest.raises(FetchError):
        page_fetcher.fetch_document("https://a.example/slow", session=session, timeout=2.5)

    assert session.calls == [("https://a.example/slow", {"timeout": 2.5})]


def test_without_session_uses_requests_module(monkeypatch):
    captured = {}

    def fake_get(url, **kwargs):
        captured["url"] = url
        return DummyResponse(b"<p>ok</p>")

    monkeypatch.setattr(page_fetcher.requests, "get", fake_get)

    document = page_fetcher.fetch_document("https://a.example/ok")

    assert captured["url"] == "https://a.example/ok"
    assert document.find("p").get_text() == "ok"
