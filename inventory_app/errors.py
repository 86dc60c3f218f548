"""Error taxonomy for the inventory API.

Each error carries the HTTP status it maps to; ``create_app`` registers a
single handler that renders them with ``to_dict()``: ``{"error": message}``, plus
``field`` for a missing required field.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class InventoryError(Exception):
    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class MissingRequiredField(InventoryError):
    status = 400

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"{field} is required")
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "field": self.field}


class NotFound(InventoryError):
    status = 404


class StorageWriteFailure(InventoryError):
    status = 500


class MethodNotAllowed(InventoryError):
    status = 405
