"""Overwrite decisions for files that differ locally."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set

from ..errors import OperatorCancelled
from .models import RemoteFile, ResolutionDecision, SyncMode

logger = logging.getLogger(__name__)

DefaultSelector = Callable[[RemoteFile], bool]
# Receives the changed files and the paths to pre-select; returns the chosen
# paths, or None when the operator cancels.
SelectionPrompt = Callable[[List[RemoteFile], Set[str]], Optional[Iterable[str]]]

PROMPT_DOCUMENT_SUFFIX = "PROMPT.md"


def suffix_selector(suffixes: Sequence[str]) -> DefaultSelector:
    """Build a selector that pre-selects files whose path ends with a suffix."""
    frozen = tuple(suffixes)

    def _select(remote_file: RemoteFile) -> bool:
        return bool(frozen) and remote_file.relative_path.endswith(frozen)

    return _select


def prompt_document_selector(remote_file: RemoteFile) -> bool:
    """Pre-select prompt/instruction documents; everything else defaults to skip."""
    return remote_file.relative_path.endswith(PROMPT_DOCUMENT_SUFFIX)


def resolve(
    changed: Sequence[RemoteFile],
    mode: SyncMode,
    default_selector: DefaultSelector = prompt_document_selector,
    prompt: Optional[SelectionPrompt] = None,
) -> Dict[str, ResolutionDecision]:
    """Decide, for every changed file, whether it should be overwritten.

    Non-interactive runs never overwrite. Interactive runs ask ``prompt``
    once for the whole set; cancelling there raises OperatorCancelled.
    """
    if not changed:
        return {}

    if mode is SyncMode.NON_INTERACTIVE:
        logger.info("Skipping %d changed files (non-interactive)", len(changed))
        return {
            f.relative_path: ResolutionDecision(f.relative_path, overwrite=False)
            for f in changed
        }

    if prompt is None:
        raise ValueError("Interactive resolution requires a selection prompt")

    files = list(changed)
    preselected = {f.relative_path for f in files if default_selector(f)}
    selected = prompt(files, preselected)
    if selected is None:
        raise OperatorCancelled()

    chosen = set(selected)
    unknown = chosen - {f.relative_path for f in files}
    if unknown:
        logger.warning("Ignoring selections outside the changed set: %s", sorted(unknown))

    return {
        f.relative_path: ResolutionDecision(
            f.relative_path, overwrite=f.relative_path in chosen
        )
        for f in files
    }
