"""Reconciliation of remote boilerplate files with a local directory."""

from .differ import classify
from .engine import SyncResult, synchronize
from .hashing import digest
from .models import (
    Classification,
    ClassificationResult,
    FileStatus,
    LocalFileState,
    RemoteFile,
    RemoteManifest,
    ResolutionDecision,
    StatusLine,
    SyncMode,
    build_write_set,
)
from .reporter import report, summarize
from .resolver import prompt_document_selector, resolve, suffix_selector
from .scanner import stat
from .writer import write

__all__ = [
    "Classification",
    "ClassificationResult",
    "FileStatus",
    "LocalFileState",
    "RemoteFile",
    "RemoteManifest",
    "ResolutionDecision",
    "StatusLine",
    "SyncMode",
    "SyncResult",
    "build_write_set",
    "classify",
    "digest",
    "prompt_document_selector",
    "report",
    "resolve",
    "stat",
    "suffix_selector",
    "summarize",
    "synchronize",
    "write",
]
