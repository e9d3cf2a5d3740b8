"""Client for the public dictionary API.

The client performs exactly one HTTP request per lookup and never retries.
A 404 from the API is an expected "word not found" outcome and is returned as
`None`; every other failure is raised as `LookupFailure`.
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Callable, Mapping

from django.conf import settings

logger = logging.getLogger(__name__)

RawLookupResult = dict[str, Any]

DEFAULT_PART_OF_SPEECH = "unknown"


class LookupFailure(Exception):
    """Raised when the dictionary API fails for a reason other than a 404.

    Attributes:
        word: The word being looked up when the failure occurred.
    """

    def __init__(self, message: str, *, word: str) -> None:
        super().__init__(message)
        self.word = word


class DictionaryApiClient:
    """Fetch word data from the dictionary API and format its definitions.

    Args:
        base_url: Endpoint the URL-encoded word is appended to. Defaults to
            `settings.DICTIONARY_API_BASE_URL`.
        timeout: Socket timeout in seconds. Defaults to
            `settings.DICTIONARY_API_TIMEOUT`.
        urlopen: Transport callable with the `urllib.request.urlopen`
            signature.
    """

    USER_AGENT = "dictionarySite/1.0 (dictionary import)"

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        urlopen: Callable[..., Any] | None = None,
    ) -> None:
        self.base_url = (base_url or settings.DICTIONARY_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.DICTIONARY_API_TIMEOUT
        self._urlopen = urlopen or urllib.request.urlopen

    def build_url(self, word: str) -> str:
        """Return the lookup URL for a word."""

        return f"{self.base_url}/{urllib.parse.quote(word, safe='')}"

    def fetch_word(self, word: str) -> RawLookupResult | None:
        """Fetch the first API entry for a word.

        Args:
            word: The word to look up.

        Returns:
            The first lookup object returned by the API, or None when the word
            is unknown (HTTP 404) or the body is not a non-empty JSON array of
            objects.

        Raises:
            LookupFailure: When the request fails for any other reason.
        """

        request = urllib.request.Request(
            self.build_url(word),
            headers={
                "User-Agent": self.USER_AGENT,
                "Accept": "application/json",
            },
        )
        try:
            with self._urlopen(request, timeout=self.timeout) as response:
                body = _read_text(response)
        except urllib.error.HTTPError as exc:
            if exc.code == 404:
                logger.info("Word not found in external API: %s", word)
                return None
            raise self._failure(word, exc) from exc
        except (urllib.error.URLError, http.client.HTTPException, OSError, LookupError) as exc:
            # LookupError: unknown charset in the Content-Type header.
            raise self._failure(word, exc) from exc

        return _first_entry(body)

    def transform_definitions(self, word_data: Mapping[str, Any]) -> str:
        """Build a display string from a lookup result.

        Each definition becomes one `"<part of speech>: <definition>"` line, in
        meaning order and then definition order. Lines are separated by a blank
        line. Definitions without text are skipped.

        Args:
            word_data: A lookup object as returned by `fetch_word`.

        Returns:
            The formatted definitions, or an empty string when there is nothing
            usable.
        """

        lines: list[str] = []
        for meaning in _as_list(word_data.get("meanings")):
            if not isinstance(meaning, Mapping):
                continue
            part_of_speech = meaning.get("partOfSpeech") or DEFAULT_PART_OF_SPEECH
            for definition in _as_list(meaning.get("definitions")):
                if not isinstance(definition, Mapping):
                    continue
                text = definition.get("definition") or ""
                if text:
                    lines.append(f"{part_of_speech}: {text}")
        return "\n\n".join(lines)

    def _failure(self, word: str, exc: Exception) -> LookupFailure:
        """Log a failed request and wrap it as a LookupFailure."""

        logger.error("Failed to fetch word from API: %s. Error: %s", word, exc)
        return LookupFailure(f"External API request failed: {exc}", word=word)


def _as_list(value: Any) -> list[Any]:
    """Return `value` when it is a list, otherwise an empty list."""

    return value if isinstance(value, list) else []


def _read_text(response: Any) -> str:
    """Decode a response body using the charset from its Content-Type."""

    content_type = response.headers.get("Content-Type", "") or ""
    charset = "utf-8"
    if "charset=" in content_type:
        charset = content_type.split("charset=", 1)[1].split(";", 1)[0].strip() or "utf-8"
    return response.read().decode(charset, errors="replace")


def _first_entry(body: str) -> RawLookupResult | None:
    """Return the first object of a JSON array body, if there is one."""

    if not body.strip():
        return None
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, list) or not data:
        return None
    first = data[0]
    if not isinstance(first, dict):
        return None
    return first
