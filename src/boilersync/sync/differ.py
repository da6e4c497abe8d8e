"""Classification of a remote manifest against the local target directory."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from . import scanner
from .hashing import digest
from .models import (
    Classification,
    ClassificationResult,
    RemoteFile,
    RemoteManifest,
)

logger = logging.getLogger(__name__)


def classify_file(remote_file: RemoteFile, target_root: Path) -> Classification:
    """Classify one remote file by comparing content digests, never metadata."""
    local = scanner.stat(target_root, remote_file.relative_path)
    if not local.exists:
        return Classification.NEW
    assert local.content is not None
    if digest(remote_file.content) == digest(local.content):
        return Classification.IDENTICAL
    return Classification.CHANGED


def classify(
    manifest: RemoteManifest,
    target_root: Path,
    max_workers: Optional[int] = None,
) -> ClassificationResult:
    """Partition ``manifest`` into new, identical and changed files.

    Any scan error propagates before a result is built, so callers never see
    a partial classification. With ``max_workers`` above one, files are
    scanned and hashed concurrently; buckets keep manifest order.
    """
    files = list(manifest)
    if max_workers and max_workers > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            kinds: List[Classification] = list(
                pool.map(lambda f: classify_file(f, target_root), files)
            )
    else:
        kinds = [classify_file(f, target_root) for f in files]

    result = ClassificationResult()
    for remote_file, kind in zip(files, kinds):
        logger.debug("%s: %s", remote_file.relative_path, kind.value)
        result.add(remote_file, kind)

    logger.info(
        "Classified %d files: %d new, %d identical, %d changed",
        len(files),
        len(result.new),
        len(result.identical),
        len(result.changed),
    )
    return result
