"""Per-file outcome of a sync run."""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional

from .models import (
    Classification,
    ClassificationResult,
    FileStatus,
    RemoteManifest,
    ResolutionDecision,
    StatusLine,
)


def status_for(
    classification: Classification, decision: Optional[ResolutionDecision]
) -> FileStatus:
    if classification is Classification.IDENTICAL:
        return FileStatus.UNCHANGED
    if classification is Classification.NEW:
        return FileStatus.WRITTEN
    if decision is not None and decision.overwrite:
        return FileStatus.WRITTEN
    return FileStatus.SKIPPED


def report(
    manifest: RemoteManifest,
    classification: ClassificationResult,
    decisions: Dict[str, ResolutionDecision],
) -> List[StatusLine]:
    """One status line per manifest entry, in manifest order."""
    kinds = classification.by_path()
    return [
        StatusLine(
            f.relative_path,
            status_for(kinds[f.relative_path], decisions.get(f.relative_path)),
        )
        for f in manifest
    ]


def summarize(lines: List[StatusLine]) -> Dict[FileStatus, int]:
    counts = Counter(line.status for line in lines)
    return {status: counts.get(status, 0) for status in FileStatus}
