"""Record storage used by the dictionary importer.

The importer only needs three operations (look up, build, persist). They are
expressed as the `EntryStore` protocol so the importer never reaches the ORM
through global state and can run against an in-memory store in unit tests.
"""

from __future__ import annotations

from typing import Any, Protocol

from django.db import transaction

from dictionary.models import DictionaryEntry


class EntryStore(Protocol):
    """Minimal storage interface for dictionary entries."""

    def find_one(self, **filters: Any) -> Any | None:
        """Return the first entry matching every filter exactly, or None."""

    def create(self, **attributes: Any) -> Any:
        """Build a new, unsaved entry from attributes."""

    def save(self, entry: Any) -> None:
        """Persist a new or modified entry."""


class DjangoEntryStore:
    """ORM-backed `EntryStore` over `DictionaryEntry` rows."""

    def __init__(self, model: type[DictionaryEntry] = DictionaryEntry) -> None:
        self.model = model

    def find_one(self, **filters: Any) -> DictionaryEntry | None:
        """Return the lowest-pk entry matching `filters`.

        Lookups are exact and case-sensitive. When duplicates exist, the oldest
        row wins. Inside `transaction.atomic()` the matching row is locked until
        the transaction ends, on backends that support row locks; outside a
        transaction no lock is taken.
        """

        queryset = self.model.objects.all()
        if transaction.get_connection(queryset.db).in_atomic_block:
            queryset = queryset.select_for_update()
        return queryset.filter(**filters).order_by("pk").first()

    def create(self, **attributes: Any) -> DictionaryEntry:
        """Build an unsaved entry."""

        return self.model(**attributes)

    def save(self, entry: DictionaryEntry) -> None:
        """Save an entry."""

        entry.save()
