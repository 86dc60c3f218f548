"""Request/response schemas for API endpoints.

Holds Pydantic models for the stored inventory item and for the payloads
of /register, PUT /inventory/<id> and /search, plus the helpers that shape
an item for a response (photo path rewritten to its retrieval URL).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

PHOTO_ON_VALUES = {"on", "true"}


class InventoryItem(BaseModel):
    id: str
    inventory_name: str
    description: Optional[str] = None
    # Filesystem path of the stored photo, never a URL
    photo: Optional[str] = None


class RegisterRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    inventory_name: Optional[str] = None
    description: Optional[str] = None


class ItemUpdate(BaseModel):
    """Partial update: only keys present in the payload are applied.

    ``model_fields_set`` distinguishes an absent key from one sent with a
    value (including an empty string or null).
    """

    model_config = ConfigDict(extra="ignore")

    inventory_name: Optional[str] = None
    description: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.model_fields_set}


class SearchRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    includePhoto: Optional[Any] = None

    def wants_photo(self) -> bool:
        flag = self.includePhoto
        if isinstance(flag, bool):
            return flag
        return isinstance(flag, str) and flag.strip().lower() in PHOTO_ON_VALUES


def photo_url(item_id: str) -> str:
    return f"/inventory/{item_id}/photo"


def item_response(item: InventoryItem) -> Dict[str, Any]:
    out = item.model_dump()
    out["photo"] = photo_url(item.id) if item.photo else None
    return out


def search_response(item: InventoryItem, include_photo: bool) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "id": item.id,
        "inventory_name": item.inventory_name,
        "description": item.description,
    }
    if include_photo and item.photo:
        out["photo"] = photo_url(item.id)
    return out
