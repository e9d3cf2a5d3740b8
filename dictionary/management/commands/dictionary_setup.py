"""Provision the dictionary entry content type.

Applies any pending `dictionary` migrations and then checks that the entry
table carries the fields the importer writes. Safe to run repeatedly.
"""

from __future__ import annotations

from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS, connections
from django.db.migrations.executor import MigrationExecutor

from dictionary.models import DictionaryEntry

APP_LABEL = "dictionary"
REQUIRED_FIELDS: tuple[str, ...] = ("word", "definitions")


class Command(BaseCommand):
    """Create the Dictionary Entry table and verify its fields."""

    help = "Create the Dictionary Entry content type and required fields."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "--database",
            default=DEFAULT_DB_ALIAS,
            help="Database alias to provision (defaults to the default database).",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        database: str = options["database"]
        self.stdout.write("Setting up Dictionary Entry content type and fields...")
        try:
            self._apply_migrations(database)
            self._verify_fields(database)
        except Exception as exc:  # noqa: BLE001 - user-visible error wrapper
            self.stderr.write(self.style.ERROR(f"Error during setup: {exc}"))
            if isinstance(exc, CommandError):
                raise
            raise CommandError(f"Setup failed: {exc}") from exc

        self.stdout.write(self.style.SUCCESS("Setup complete!"))
        return None

    def _apply_migrations(self, database: str) -> None:
        """Apply pending dictionary migrations, if any."""

        executor = MigrationExecutor(connections[database])
        targets = [node for node in executor.loader.graph.leaf_nodes() if node[0] == APP_LABEL]
        plan = executor.migration_plan(targets)
        if not plan:
            self.stdout.write("Dictionary Entry content type already exists")
            return

        call_command("migrate", APP_LABEL, database=database, interactive=False, verbosity=0)
        self.stdout.write(
            self.style.SUCCESS(f"Created Dictionary Entry content type ({len(plan)} migration(s) applied)")
        )

    def _verify_fields(self, database: str) -> None:
        """Check that every required field has a column in the entry table."""

        connection = connections[database]
        table = DictionaryEntry._meta.db_table
        with connection.cursor() as cursor:
            if table not in connection.introspection.table_names(cursor):
                raise CommandError(f"Table {table!r} is missing after migrating.")
            columns = {column.name for column in connection.introspection.get_table_description(cursor, table)}

        for field_name in REQUIRED_FIELDS:
            column = DictionaryEntry._meta.get_field(field_name).column
            if column not in columns:
                raise CommandError(f"Field {field_name!r} is missing from {table!r}.")
            self.stdout.write(f"{field_name} field present")
