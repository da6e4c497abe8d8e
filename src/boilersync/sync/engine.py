"""One reconciliation run: classify, resolve, write, report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .differ import classify
from .models import (
    ClassificationResult,
    RemoteManifest,
    ResolutionDecision,
    StatusLine,
    SyncMode,
    build_write_set,
)
from .reporter import report
from .resolver import DefaultSelector, SelectionPrompt, prompt_document_selector, resolve
from .writer import write

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    classification: ClassificationResult
    decisions: Dict[str, ResolutionDecision]
    written: List[str]
    lines: List[StatusLine]


def synchronize(
    manifest: RemoteManifest,
    target_root: Path,
    mode: SyncMode,
    default_selector: DefaultSelector = prompt_document_selector,
    prompt: Optional[SelectionPrompt] = None,
    max_workers: Optional[int] = None,
) -> SyncResult:
    """Reconcile ``manifest`` into ``target_root``.

    Scan errors and operator cancellation surface before anything is
    written. A write error leaves earlier writes in place.
    """
    classification = classify(manifest, target_root, max_workers=max_workers)
    decisions = resolve(
        classification.changed, mode, default_selector=default_selector, prompt=prompt
    )
    write_set = build_write_set(classification, decisions)
    logger.info("Writing %d of %d files into %s", len(write_set), len(manifest), target_root)
    written = write(write_set, target_root, max_workers=max_workers)
    return SyncResult(
        classification=classification,
        decisions=decisions,
        written=written,
        lines=report(manifest, classification, decisions),
    )
