"""Admin registrations for dictionary models."""

from __future__ import annotations

from django.contrib import admin

from dictionary.models import DictionaryEntry


@admin.register(DictionaryEntry)
class DictionaryEntryAdmin(admin.ModelAdmin):
    """Admin configuration for DictionaryEntry."""

    list_display = ("word", "title", "published", "updated_at")
    list_filter = ("published",)
    search_fields = ("word", "title", "definitions")
    readonly_fields = ("created_at", "updated_at")
