"""Read-only probing of the local target directory."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import LocalScanError
from ..utils.filesystem import resolve_under_root
from .models import LocalFileState

logger = logging.getLogger(__name__)


def stat(target_root: Path, relative_path: str) -> LocalFileState:
    """Report whether ``relative_path`` exists under ``target_root`` and its bytes.

    A single read attempt decides existence, so there is no window between
    an existence check and the read. Absence is a normal result; every other
    failure raises LocalScanError.
    """
    try:
        path = resolve_under_root(target_root, relative_path)
    except ValueError as e:
        raise LocalScanError(relative_path, str(e)) from e

    try:
        content = path.read_bytes()
    except FileNotFoundError:
        logger.debug("No local file at %s", relative_path)
        return LocalFileState(exists=False)
    except OSError as e:
        raise LocalScanError(relative_path, e.strerror or str(e)) from e

    return LocalFileState(exists=True, content=content)
