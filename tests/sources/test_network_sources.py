"""Tests for the GitHub and npm registry lookups."""

from __future__ import annotations

import asyncio
import io
import json
from http.client import IncompleteRead
from urllib.error import HTTPError, URLError

import pytest

from readmegen.sources.github import GithubClient, GithubLookupError
from readmegen.sources.registry import NpmRegistry


class FakeResponse:
    def __init__(self, payload=None, status: int = 200) -> None:
        self._payload = payload
        self.status = status

    def read(self):
        if isinstance(self._payload, bytes):
            return self._payload
        return json.dumps(self._payload).encode("utf-8")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


@pytest.fixture(autouse=True)
def _no_tokens(monkeypatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GH_TOKEN", raising=False)


def test_fetch_user_requests_profile(monkeypatch) -> None:
    captured = {}

    def fake_urlopen(request, timeout=None):
        captured["url"] = request.full_url
        captured["headers"] = {k.lower(): v for k, v in request.header_items()}
        captured["timeout"] = timeout
        return FakeResponse({"login": "bob", "blog": "https://bob.dev"})

    monkeypatch.setattr("readmegen.sources.github.urlopen", fake_urlopen)

    client = GithubClient("https://api.github.example/", token="secret", request_timeout=5.0)
    profile = client.fetch_user("bob")

    assert profile["blog"] == "https://bob.dev"
    assert captured["url"] == "https://api.github.example/users/bob"
    assert captured["headers"]["authorization"] == "Bearer secret"
    assert captured["timeout"] == 5.0


def test_token_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("GH_TOKEN", " env-token ")
    captured = {}

    def fake_urlopen(request, timeout=None):
        captured["headers"] = {k.lower(): v for k, v in request.header_items()}
        return FakeResponse({})

    monkeypatch.setattr("readmegen.sources.github.urlopen", fake_urlopen)

    GithubClient().fetch_user("bob")

    assert captured["headers"]["authorization"] == "Bearer env-token"


def test_author_website_returns_blog(monkeypatch) -> None:
    monkeypatch.setattr(
        "readmegen.sources.github.urlopen",
        lambda request, timeout=None: FakeResponse({"blog": " https://bob.dev "}),
    )

    assert asyncio.run(GithubClient().author_website("bob")) == "https://bob.dev"


def test_author_website_empty_blog_is_none(monkeypatch) -> None:
    monkeypatch.setattr(
        "readmegen.sources.github.urlopen",
        lambda request, timeout=None: FakeResponse({"blog": ""}),
    )

    assert asyncio.run(GithubClient().author_website("bob")) is None


@pytest.mark.parametrize(
    "error",
    [
        HTTPError("https://api.github.com/users/ghost", 404, "Not Found", {}, io.BytesIO(b"")),
        URLError("offline"),
    ],
)
def test_author_website_swallows_lookup_failures(monkeypatch, error) -> None:
    def fake_urlopen(request, timeout=None):
        raise error

    monkeypatch.setattr("readmegen.sources.github.urlopen", fake_urlopen)

    with pytest.raises(GithubLookupError):
        GithubClient().fetch_user("ghost")
    assert asyncio.run(GithubClient().author_website("ghost")) is None


def test_author_website_rejects_invalid_json(monkeypatch) -> None:
    monkeypatch.setattr(
        "readmegen.sources.github.urlopen",
        lambda request, timeout=None: FakeResponse(b"<html>"),
    )

    assert asyncio.run(GithubClient().author_website("bob")) is None


def test_author_website_without_handle_skips_request(monkeypatch) -> None:
    def fake_urlopen(request, timeout=None):
        raise AssertionError("no request expected")

    monkeypatch.setattr("readmegen.sources.github.urlopen", fake_urlopen)

    assert asyncio.run(GithubClient().author_website("")) is None


def test_registry_reports_published_package(monkeypatch) -> None:
    captured = {}

    def fake_urlopen(request, timeout=None):
        captured["url"] = request.full_url
        captured["method"] = request.get_method()
        return FakeResponse({}, status=200)

    monkeypatch.setattr("readmegen.sources.registry.urlopen", fake_urlopen)

    assert asyncio.run(NpmRegistry().is_published("@scope/tool")) is True
    assert captured["url"] == "https://registry.npmjs.org/@scope%2Ftool"
    assert captured["method"] == "HEAD"


def test_registry_missing_package_is_unpublished(monkeypatch) -> None:
    def fake_urlopen(request, timeout=None):
        raise HTTPError(request.full_url, 404, "Not Found", {}, io.BytesIO(b""))

    monkeypatch.setattr("readmegen.sources.registry.urlopen", fake_urlopen)

    assert asyncio.run(NpmRegistry().is_published("definitely-not-here")) is False
    assert asyncio.run(NpmRegistry().is_published(None)) is False


def test_fetch_user_rejects_scheme_less_api_url() -> None:
    with pytest.raises(GithubLookupError, match="Invalid GitHub API url"):
        GithubClient("api.github.com").fetch_user("alice")
    assert asyncio.run(GithubClient("api.github.com").author_website("alice")) is None


def test_fetch_user_maps_truncated_body(monkeypatch) -> None:
    class TruncatedResponse(FakeResponse):
        def read(self):
            raise IncompleteRead(b"{")

    monkeypatch.setattr(
        "readmegen.sources.github.urlopen", lambda request, timeout=None: TruncatedResponse()
    )

    with pytest.raises(GithubLookupError):
        GithubClient().fetch_user("bob")


def test_registry_with_scheme_less_url_is_unpublished() -> None:
    assert asyncio.run(NpmRegistry("registry.npmjs.org").is_published("tool")) is False


def test_registry_truncated_response_is_unpublished(monkeypatch) -> None:
    def fake_urlopen(request, timeout=None):
        raise IncompleteRead(b"")

    monkeypatch.setattr("readmegen.sources.registry.urlopen", fake_urlopen)

    assert asyncio.run(NpmRegistry().is_published("tool")) is False
