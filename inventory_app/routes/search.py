"""Search route: POST /search

Looks up a single item by id and returns a reduced projection
``{id, inventory_name, description}``. The photo URL is added only when
``includePhoto`` is "on" (the HTML checkbox value) and the item has one.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, jsonify, request

from inventory_app.errors import MissingRequiredField
from inventory_app.schemas import SearchRequest, search_response
from inventory_app.services.inventory_store import get_store


search_bp = Blueprint("search", __name__)


@search_bp.route("/search", methods=["POST"])
def search():
    payload: Dict[str, Any] = request.form.to_dict() or request.get_json(silent=True) or {}
    body = SearchRequest.model_validate(payload)
    if not body.id:
        raise MissingRequiredField("id")

    item = get_store().get(body.id)
    return jsonify(search_response(item, body.wants_photo()))
