"""Service layer package housing core business logic.

Contains the JSON-backed inventory store that owns the item list and
the uploaded photo files. Routes reach it through ``get_store()``.
"""
