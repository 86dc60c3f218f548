"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
open the inventory store on the cache directory, enable CORS, register
route blueprints, and render API errors as JSON.
"""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS
from pydantic import ValidationError
from werkzeug.exceptions import MethodNotAllowed as WerkzeugMethodNotAllowed

from inventory_app.config import Config, ensure_cache_dirs
from inventory_app.errors import InventoryError, MethodNotAllowed
from inventory_app.routes.docs import docs_bp
from inventory_app.routes.forms import forms_bp
from inventory_app.routes.inventory import inventory_bp
from inventory_app.routes.search import search_bp
from inventory_app.services.inventory_store import InventoryStore

logger = logging.getLogger(__name__)

CATCH_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def create_app(cache_dir: Optional[str] = None) -> Flask:
    # Forms are served by forms_bp; no generic /static route
    app = Flask(__name__, static_folder=None)
    # Basic config
    app.config.from_object(Config)
    cache_dir = cache_dir or app.config.get("CACHE_DIR")
    if not cache_dir:
        raise RuntimeError("Cache directory is not configured (use --cache or INVENTORY_CACHE_DIR).")
    app.config["CACHE_DIR"] = cache_dir
    ensure_cache_dirs(cache_dir)

    store = InventoryStore(cache_dir)
    store.load()
    app.extensions["inventory_store"] = store

    # Allow all origins for local development, including preflight for file upload
    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        supports_credentials=False,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    # Blueprints
    app.register_blueprint(inventory_bp)
    app.register_blueprint(search_bp)
    app.register_blueprint(forms_bp)
    app.register_blueprint(docs_bp)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.route("/", defaults={"path": ""}, methods=CATCH_ALL_METHODS)
    @app.route("/<path:path>", methods=CATCH_ALL_METHODS)
    def catch_all(path: str):
        raise MethodNotAllowed("Method not allowed")

    @app.errorhandler(InventoryError)
    def handle_inventory_error(e: InventoryError):
        if e.status >= 500:
            logger.error("Request failed: %s", e.message)
        return jsonify(e.to_dict()), e.status

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"error": "Invalid request body.", "details": e.errors(include_url=False, include_context=False)}), 400

    @app.errorhandler(WerkzeugMethodNotAllowed)
    def handle_method_not_allowed(e: WerkzeugMethodNotAllowed):
        return jsonify({"error": "Method not allowed"}), 405

    return app
