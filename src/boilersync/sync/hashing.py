"""Content digests used for change detection."""

from __future__ import annotations

import hashlib
from typing import Union


def digest(content: Union[bytes, str]) -> str:
    """Return the SHA-256 hex digest of ``content`` (text is UTF-8 encoded)."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha256(content).hexdigest()
