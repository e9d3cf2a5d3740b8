"""Import a single word from the external dictionary API.

The word is looked up once and stored as a `dictionary.DictionaryEntry`,
updating the existing entry for the word when there is one. A word that the
API does not know is reported but is not an error; unexpected API failures
exit non-zero.
"""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from dictionary.api_client import LookupFailure
from dictionary.importer import default_importer


class Command(BaseCommand):
    """Import a word and create or update its dictionary entry."""

    help = "Import a word from the external dictionary API."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("word", help='The word to import, for example "hello".')

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        word: str = options["word"]
        importer = default_importer()

        self.stdout.write(f"Importing word: {word}")
        try:
            success = importer.import_word(word)
        except LookupFailure as exc:
            self.stderr.write(self.style.ERROR(f"Error importing word: {exc}"))
            raise CommandError(f"Import failed for {word!r}: {exc}") from exc

        if success:
            self.stdout.write(self.style.SUCCESS(f"Successfully imported: {word}"))
        else:
            self.stdout.write(self.style.ERROR(f"Failed to import: {word} (word not found in external API)"))
        return None
