"""Dictionary import app.

This package holds the dictionary entry content type along with:
- a lookup client for the public dictionary API (`api_client`),
- an injectable record store (`storage`),
- the fetch/transform/upsert orchestration (`importer`).
"""
