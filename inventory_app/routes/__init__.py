"""Route blueprints package for API endpoints.

One blueprint per route group: inventory CRUD and photos, search,
the static HTML forms, and the API docs.
"""
