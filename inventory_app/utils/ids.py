"""Names for inventory items and stored photo files.

Item ids look like ``item_0001695400000-3f2a9c1d0b7e4a55``: a millisecond
timestamp, so ids sort in registration order, plus 16 random hex digits so
two items registered in the same millisecond still get distinct ids.

Uploaded photos are stored under a random name; only a sanitized extension
survives from the client's filename, so it can drive the content type when
the photo is served back.
"""

from __future__ import annotations

import os
import time
import uuid
from typing import Optional

from werkzeug.utils import secure_filename


def new_id(prefix: str) -> str:
    stamp = int(time.time() * 1000)
    return f"{prefix}_{stamp:013d}-{uuid.uuid4().hex[:16]}"


def upload_name(filename: Optional[str]) -> str:
    ext = os.path.splitext(secure_filename(filename or ""))[1].lower()
    return f"{uuid.uuid4().hex}{ext}"
