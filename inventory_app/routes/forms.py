"""Form routes: GET /RegisterForm.html and /SearchForm.html

Serves the two static HTML forms bundled in ``inventory_app/static``.
The register form posts multipart data to /register; the search form
posts urlencoded data (with an ``includePhoto`` checkbox) to /search.
"""

from __future__ import annotations

import os

from flask import Blueprint, Response, send_from_directory


forms_bp = Blueprint("forms", __name__)

STATIC_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "static")


@forms_bp.get("/RegisterForm.html")
def register_form() -> Response:
    return send_from_directory(STATIC_DIR, "RegisterForm.html", mimetype="text/html")


@forms_bp.get("/SearchForm.html")
def search_form() -> Response:
    return send_from_directory(STATIC_DIR, "SearchForm.html", mimetype="text/html")
