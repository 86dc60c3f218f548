"""Configuration for environment variables and runtime knobs.

Provides a simple config object with the listener address and the cache
directory layout. Command-line flags in ``inventory_app.main`` override
the environment values below.
"""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

# Load .env from the working directory before Config reads os.environ
load_dotenv(find_dotenv(usecwd=True))


class Config:
    # Listener
    HOST = os.getenv("INVENTORY_HOST")
    PORT = os.getenv("INVENTORY_PORT")

    # Cache directory holding inventory.json and uploads/
    CACHE_DIR = os.getenv("INVENTORY_CACHE_DIR")

    INVENTORY_FILENAME = "inventory.json"
    UPLOADS_SUBDIR = "uploads"

    # Fallback content type for stored photos with no recognizable extension
    DEFAULT_PHOTO_MIME = "image/jpeg"


def inventory_path(cache_dir: str) -> str:
    return os.path.join(cache_dir, Config.INVENTORY_FILENAME)


def uploads_dir(cache_dir: str) -> str:
    return os.path.join(cache_dir, Config.UPLOADS_SUBDIR)


def ensure_cache_dirs(cache_dir: str) -> None:
    """Ensure the cache directory and its uploads folder exist."""
    for p in [cache_dir, uploads_dir(cache_dir)]:
        os.makedirs(p, exist_ok=True)
