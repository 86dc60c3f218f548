"""Docs routes: GET /docs (Swagger UI) and /openapi.yaml (spec)

Serves the OpenAPI YAML describing the inventory API from the repository
docs folder, and a minimal Swagger UI page that renders it.
"""

from __future__ import annotations

import os
from flask import Blueprint, Response


docs_bp = Blueprint("docs", __name__)

SWAGGER_UI_HTML = """
<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Inventory API | Swagger UI</title>
    <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css" />
    <style>
      body { margin: 0; padding: 0; }
      #swagger-ui { width: 100%; height: 100vh; }
    </style>
  </head>
  <body>
    <div id="swagger-ui"></div>
    <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
    <script>
      window.onload = () => {
        window.ui = SwaggerUIBundle({
          url: '/openapi.yaml',
          dom_id: '#swagger-ui',
          presets: [SwaggerUIBundle.presets.apis],
          deepLinking: true,
          docExpansion: 'list',
        });
      };
    </script>
  </body>
</html>
""".strip()


def _openapi_path() -> str:
    # inventory_app/routes/docs.py → repo root/docs/openapi.yaml
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    return os.path.join(root, "docs", "openapi.yaml")


@docs_bp.get("/openapi.yaml")
def openapi_yaml() -> Response:
    path = _openapi_path()
    if not os.path.exists(path):
        return Response("openapi.yaml not found", status=404)
    with open(path, "rb") as f:
        return Response(f.read(), mimetype="text/yaml")


@docs_bp.get("/docs")
def swagger_ui() -> Response:
    return Response(SWAGGER_UI_HTML, mimetype="text/html")
