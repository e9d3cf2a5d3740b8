"""Short alias for `dictionary_import`."""

from __future__ import annotations

from dictionary.management.commands.dictionary_import import Command as ImportCommand


class Command(ImportCommand):
    """Alias of `dictionary_import`."""
