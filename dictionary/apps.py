"""Django app configuration for dictionary imports."""

from __future__ import annotations

from django.apps import AppConfig


class DictionaryConfig(AppConfig):
    """AppConfig for imported dictionary entries."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "dictionary"
    verbose_name = "Dictionary"
