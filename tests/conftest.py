"""Pytest fixtures shared across the dictionary test suite."""

from __future__ import annotations

import json
import urllib.error
from collections.abc import Sequence
from typing import Any

import pytest

from dictionary.api_client import DictionaryApiClient

TEST_BASE_URL = "https://dictionary.example.test/api/v2/entries/en"


class FakeResponse:
    """Stand-in for the object returned by `urllib.request.urlopen`."""

    def __init__(self, body: bytes, *, content_type: str = "application/json; charset=utf-8") -> None:
        self.body = body
        self.headers = {"Content-Type": content_type}

    def read(self) -> bytes:
        return self.body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None


class FakeUrlopen:
    """Record requests and replay a canned body, status, or exception."""

    def __init__(self) -> None:
        self.requests: list[Any] = []
        self.timeouts: list[float] = []
        self.body = b"[]"
        self.status: int | None = None
        self.error: Exception | None = None
        self.content_type = "application/json; charset=utf-8"

    def respond_json(self, payload: Any) -> None:
        self.body = json.dumps(payload).encode("utf-8")

    def __call__(self, request, timeout=None) -> FakeResponse:
        self.requests.append(request)
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        if self.status is not None:
            raise urllib.error.HTTPError(request.full_url, self.status, "error", {}, None)
        return FakeResponse(self.body, content_type=self.content_type)


class FakeApiClient:
    """Scripted API client that records how it was called."""

    def __init__(self, word_data: dict[str, Any] | None = None, definitions: str = "") -> None:
        self.word_data = word_data
        self.definitions = definitions
        self.error: Exception | None = None
        self.content_type = "application/json; charset=utf-8"
        self.fetch_calls: list[str] = []
        self.transform_calls: list[dict[str, Any]] = []

    def fetch_word(self, word: str) -> dict[str, Any] | None:
        self.fetch_calls.append(word)
        if self.error is not None:
            raise self.error
        return self.word_data

    def transform_definitions(self, word_data: dict[str, Any]) -> str:
        self.transform_calls.append(word_data)
        return self.definitions


@pytest.fixture
def fake_urlopen() -> FakeUrlopen:
    """Return a fake transport for the dictionary API client."""

    return FakeUrlopen()


@pytest.fixture
def api_client(fake_urlopen: FakeUrlopen) -> DictionaryApiClient:
    """Return an API client wired to the fake transport."""

    return DictionaryApiClient(TEST_BASE_URL, timeout=5, urlopen=fake_urlopen)


@pytest.fixture
def hello_data() -> dict[str, Any]:
    """Return a lookup result for "hello" with one noun and one verb meaning."""

    return {
        "word": "hello",
        "meanings": [
            {"partOfSpeech": "noun", "definitions": [{"definition": "A greeting"}]},
            {"partOfSpeech": "verb", "definitions": [{"definition": "To greet someone"}]},
        ],
    }


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, database, commands, or IO.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )


@pytest.fixture
def fake_api_client() -> FakeApiClient:
    """Return a scripted API client with no data configured."""

    return FakeApiClient()
