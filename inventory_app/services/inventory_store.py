"""InventoryStore: JSON-backed registry of inventory items and their photos.

The store owns the in-memory item list for the life of the process and
rewrites ``<cache>/inventory.json`` in full after every mutation. Uploaded
photos live under ``<cache>/uploads/``; the JSON keeps their paths.

- load(): read the JSON file at startup; a corrupt file leaves an empty list
- persist(): pretty-printed full rewrite; raises StorageWriteFailure
- delete_file(path): best-effort photo removal, failures only logged
- save_upload(file): store an uploaded file under a fresh name

Mutations hold ``self._lock`` from the in-memory change through persist(),
so parallel requests cannot drop each other's writes. There is no rollback:
if persist() fails the in-memory change stays and disk is behind memory.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import List, Optional

from flask import current_app
from pydantic import ValidationError
from werkzeug.datastructures import FileStorage

from inventory_app.config import ensure_cache_dirs, inventory_path, uploads_dir
from inventory_app.errors import MissingRequiredField, NotFound, StorageWriteFailure
from inventory_app.schemas import InventoryItem, ItemUpdate
from inventory_app.utils.ids import new_id, upload_name
from inventory_app.utils.io_utils import read_json, remove_file, write_json

logger = logging.getLogger(__name__)


class InventoryStore:
    def __init__(self, cache_dir: str):
        self.cache_dir = cache_dir
        self.inventory_path = inventory_path(cache_dir)
        self.uploads_dir = uploads_dir(cache_dir)
        self.items: List[InventoryItem] = []
        self._lock = threading.Lock()

    # -------- Disk --------

    def load(self) -> None:
        ensure_cache_dirs(self.cache_dir)
        try:
            data = read_json(self.inventory_path, default=[])
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            self.items = [InventoryItem.model_validate(rec) for rec in data]
        except (OSError, ValueError, ValidationError):
            logger.exception("Error reading %s; starting with an empty inventory", self.inventory_path)
            self.items = []
        logger.info("Loaded %d inventory items from %s", len(self.items), self.inventory_path)

    def persist(self) -> None:
        try:
            write_json(self.inventory_path, [it.model_dump() for it in self.items])
        except OSError as e:
            logger.exception("Error writing %s", self.inventory_path)
            raise StorageWriteFailure(f"Failed to write inventory: {e}") from e

    def delete_file(self, path: Optional[str]) -> None:
        if not path:
            return
        try:
            if not remove_file(path):
                logger.warning("Photo file already gone: %s", path)
        except OSError:
            logger.exception("Could not delete photo file %s", path)

    def save_upload(self, file: FileStorage) -> str:
        os.makedirs(self.uploads_dir, exist_ok=True)
        dest = os.path.join(self.uploads_dir, upload_name(file.filename))
        file.save(dest)
        logger.info("Stored upload %r as %s", file.filename, dest)
        return dest

    # -------- Items --------

    def all(self) -> List[InventoryItem]:
        return list(self.items)

    def _index(self, item_id: str) -> int:
        for i, it in enumerate(self.items):
            if it.id == item_id:
                return i
        raise NotFound(f"Inventory item {item_id} not found")

    def get(self, item_id: str) -> InventoryItem:
        return self.items[self._index(item_id)]

    def create(
        self,
        inventory_name: str,
        description: Optional[str] = None,
        photo: Optional[str] = None,
    ) -> InventoryItem:
        item = InventoryItem(
            id=new_id("item"),
            inventory_name=inventory_name,
            description=description,
            photo=photo,
        )
        with self._lock:
            self.items.append(item)
            self.persist()
        logger.info("Registered item %s (%s)", item.id, item.inventory_name)
        return item

    def update(self, item_id: str, update: ItemUpdate) -> InventoryItem:
        changes = update.changes()
        with self._lock:
            idx = self._index(item_id)
            if "inventory_name" in changes and changes["inventory_name"] is None:
                raise MissingRequiredField("inventory_name", "inventory_name cannot be null")
            item = self.items[idx].model_copy(update=changes)
            self.items[idx] = item
            self.persist()
        logger.info("Updated item %s fields %s", item_id, sorted(changes))
        return item

    def replace_photo(self, item_id: str, photo: str) -> InventoryItem:
        with self._lock:
            idx = self._index(item_id)
            old = self.items[idx].photo
            self.delete_file(old)
            item = self.items[idx].model_copy(update={"photo": photo})
            self.items[idx] = item
            self.persist()
        logger.info("Replaced photo of item %s", item_id)
        return item

    def delete(self, item_id: str) -> InventoryItem:
        with self._lock:
            idx = self._index(item_id)
            item = self.items[idx]
            self.delete_file(item.photo)
            del self.items[idx]
            self.persist()
        logger.info("Deleted item %s", item_id)
        return item


def get_store() -> InventoryStore:
    """Return the store bound to the current Flask app."""
    return current_app.extensions["inventory_store"]
