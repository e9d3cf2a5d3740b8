"""Database models for imported dictionary entries."""

from __future__ import annotations

from django.db import models
from django.utils import timezone


class DictionaryEntry(models.Model):
    """A dictionary word and its formatted definitions.

    Entries are keyed by `word`. At most one entry exists per word: the
    importer looks an entry up before creating one, and there is deliberately
    no database uniqueness constraint on the column. Imports replace
    `definitions` on an existing entry and never delete entries.
    """

    word = models.CharField(max_length=255, db_index=True)
    title = models.CharField(max_length=255, blank=True)
    definitions = models.TextField(blank=True)
    published = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["word", "pk"]
        verbose_name = "Dictionary Entry"
        verbose_name_plural = "Dictionary Entries"

    def save(self, *args, **kwargs) -> None:
        """Save the entry, defaulting the title to the word."""

        if not self.title:
            self.title = self.word
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        """Return the entry title for display contexts."""

        return self.title or self.word
