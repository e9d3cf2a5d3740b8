"""Short alias for `dictionary_setup`."""

from __future__ import annotations

from dictionary.management.commands.dictionary_setup import Command as SetupCommand


class Command(SetupCommand):
    """Alias of `dictionary_setup`."""
