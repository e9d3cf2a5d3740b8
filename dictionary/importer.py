"""Import dictionary words into `DictionaryEntry` records.

An import is a single linear pass: fetch the word from the dictionary API,
format its definitions, then create or update the entry for that word.
"Not found" and "no usable definitions" are reported as a False result;
`LookupFailure` from the API client propagates to the caller unchanged.
"""

from __future__ import annotations

import logging

from django.db import transaction

from dictionary.api_client import DictionaryApiClient
from dictionary.storage import DjangoEntryStore, EntryStore

logger = logging.getLogger(__name__)


class DictionaryImporter:
    """Create or update dictionary entries from API lookups.

    Args:
        api_client: Client used for the lookup and formatting steps.
        store: Storage the entries are read from and written to.
    """

    def __init__(self, api_client: DictionaryApiClient, store: EntryStore) -> None:
        self.api_client = api_client
        self.store = store

    def import_word(self, word: str) -> bool:
        """Import one word.

        Args:
            word: The word to look up and store.

        Returns:
            True when an entry was created or updated, False when the word was
            not found or had no usable definitions.

        Raises:
            LookupFailure: When the API request fails unexpectedly.
        """

        word_data = self.api_client.fetch_word(word)
        if word_data is None:
            logger.warning("Cannot import word - not found in external API: %s", word)
            return False

        definitions = self.api_client.transform_definitions(word_data)
        if not definitions:
            logger.warning("No definitions found for word: %s", word)
            return False

        with transaction.atomic():
            entry = self.store.find_one(word=word)
            if entry is not None:
                entry.definitions = definitions
                self.store.save(entry)
                logger.info("Updated existing dictionary entry: %s", word)
            else:
                entry = self.store.create(
                    word=word,
                    title=word,
                    definitions=definitions,
                    published=True,
                )
                self.store.save(entry)
                logger.info("Created new dictionary entry: %s", word)
        return True


def default_importer() -> DictionaryImporter:
    """Build an importer wired to the configured API and the ORM store."""

    return DictionaryImporter(DictionaryApiClient(), DjangoEntryStore())
