"""Inventory routes: POST /register and /inventory/<id>[/photo]

Register, list, fetch, update and delete inventory items, and serve or
replace their photos. Items are returned with ``photo`` rewritten to its
retrieval URL (``/inventory/<id>/photo``) or null.
"""

from __future__ import annotations

import mimetypes
import os
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request, send_file
from werkzeug.datastructures import FileStorage

from inventory_app.errors import MissingRequiredField, NotFound
from inventory_app.schemas import ItemUpdate, RegisterRequest, item_response
from inventory_app.services.inventory_store import get_store


inventory_bp = Blueprint("inventory", __name__)


def _payload() -> Dict[str, Any]:
    # HTML forms post multipart/urlencoded; API clients may send JSON
    if request.form:
        return request.form.to_dict()
    return request.get_json(silent=True) or {}


def _uploaded_photo() -> Optional[FileStorage]:
    f = request.files.get("photo")
    # Browsers send an empty part when no file was chosen
    if not f or not f.filename:
        return None
    return f


@inventory_bp.route("/register", methods=["POST"])
def register():
    body = RegisterRequest.model_validate(_payload())
    if not body.inventory_name:
        raise MissingRequiredField("inventory_name")

    store = get_store()
    photo = _uploaded_photo()
    photo_path = store.save_upload(photo) if photo else None
    item = store.create(body.inventory_name, body.description, photo_path)
    return jsonify(item_response(item)), 201


@inventory_bp.get("/inventory")
def list_inventory():
    return jsonify([item_response(it) for it in get_store().all()])


@inventory_bp.get("/inventory/<item_id>")
def get_item(item_id: str):
    return jsonify(item_response(get_store().get(item_id)))


@inventory_bp.get("/inventory/<item_id>/photo")
def get_photo(item_id: str):
    item = get_store().get(item_id)
    if not item.photo:
        raise NotFound(f"Inventory item {item_id} has no photo")
    if not os.path.isfile(item.photo):
        raise NotFound(f"Photo file for inventory item {item_id} is missing")
    mime, _ = mimetypes.guess_type(item.photo)
    if not mime or not mime.startswith("image/"):
        mime = current_app.config["DEFAULT_PHOTO_MIME"]
    return send_file(os.path.abspath(item.photo), mimetype=mime)


@inventory_bp.put("/inventory/<item_id>/photo")
def update_photo(item_id: str):
    store = get_store()
    store.get(item_id)
    photo = _uploaded_photo()
    if photo is None:
        raise MissingRequiredField("photo", "photo file is required")

    path = store.save_upload(photo)
    try:
        item = store.replace_photo(item_id, path)
    except NotFound:
        # Item was deleted while the upload was being written
        store.delete_file(path)
        raise
    return jsonify(item_response(item))


@inventory_bp.put("/inventory/<item_id>")
def update_item(item_id: str):
    update = ItemUpdate.model_validate(_payload())
    item = get_store().update(item_id, update)
    return jsonify(item_response(item))


@inventory_bp.delete("/inventory/<item_id>")
def delete_item(item_id: str):
    get_store().delete(item_id)
    return "", 200
