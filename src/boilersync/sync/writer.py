"""Materialization of the write set into the target directory."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence

from ..errors import WriteError
from ..utils.filesystem import atomic_write_bytes, resolve_under_root
from .models import RemoteFile

logger = logging.getLogger(__name__)


def write_file(remote_file: RemoteFile, target_root: Path) -> str:
    """Write one file, replacing any previous content in a single step."""
    try:
        path = resolve_under_root(target_root, remote_file.relative_path)
        atomic_write_bytes(path, remote_file.content)
    except (OSError, ValueError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise WriteError(remote_file.relative_path, reason) from e
    logger.debug("Wrote %s", remote_file.relative_path)
    return remote_file.relative_path


def write(
    write_set: Sequence[RemoteFile],
    target_root: Path,
    max_workers: Optional[int] = None,
) -> List[str]:
    """Write every file in ``write_set`` under ``target_root``.

    Stops at the first failure and raises WriteError; files already written
    stay in place. Returns the written paths in write-set order.
    """
    if max_workers and max_workers > 1 and len(write_set) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [pool.submit(write_file, f, target_root) for f in write_set]
            written: List[str] = []
            for future in futures:
                try:
                    written.append(future.result())
                except WriteError:
                    for pending in futures:
                        pending.cancel()
                    raise
            return written

    return [write_file(f, target_root) for f in write_set]
