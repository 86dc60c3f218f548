"""Disk helpers behind the inventory store.

``inventory.json`` is always rewritten whole: ``write_json`` dumps the item
list with two-space indentation into a temp file in the cache directory and
swaps it into place, so a reader never sees a half-written inventory.
``read_json`` hands back ``default`` when no inventory has been saved yet and
lets malformed JSON raise, so the store can log it and start empty.
``remove_file`` reports whether a photo was actually there to delete.
"""

from __future__ import annotations

import json
import os
import tempfile
from typing import Any


def read_json(path: str, default: Any = None) -> Any:
    if not os.path.exists(path):
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: str, data: Any) -> None:
    folder = os.path.dirname(path) or "."
    os.makedirs(folder, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".inventory_", suffix=".json", dir=folder)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.write("\n")
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


def remove_file(path: str) -> bool:
    try:
        os.remove(path)
    except FileNotFoundError:
        return False
    return True
