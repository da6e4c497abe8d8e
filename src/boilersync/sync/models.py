"""Data types shared by the reconciliation stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple


@dataclass(frozen=True)
class RemoteFile:
    """One file of a boilerplate, addressed relative to the boilerplate root."""

    relative_path: str
    content: bytes


class RemoteManifest:
    """Files of one boilerplate in discovery order, unique by relative path."""

    def __init__(self, files: Iterable[RemoteFile] = ()) -> None:
        self._files: Tuple[RemoteFile, ...] = tuple(files)
        seen: Set[str] = set()
        for remote_file in self._files:
            if remote_file.relative_path in seen:
                raise ValueError(
                    f"Duplicate path in manifest: {remote_file.relative_path}"
                )
            seen.add(remote_file.relative_path)

    def __iter__(self) -> Iterator[RemoteFile]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __getitem__(self, index: int) -> RemoteFile:
        return self._files[index]

    def __repr__(self) -> str:
        return f"RemoteManifest({list(self._files)!r})"

    @property
    def paths(self) -> List[str]:
        return [f.relative_path for f in self._files]


@dataclass(frozen=True)
class LocalFileState:
    exists: bool
    content: Optional[bytes] = None


class Classification(str, Enum):
    NEW = "new"
    IDENTICAL = "identical"
    CHANGED = "changed"


@dataclass
class ClassificationResult:
    """Partition of a manifest into new, identical and changed files."""

    new: List[RemoteFile] = field(default_factory=list)
    identical: List[RemoteFile] = field(default_factory=list)
    changed: List[RemoteFile] = field(default_factory=list)

    def add(self, remote_file: RemoteFile, classification: Classification) -> None:
        if classification is Classification.NEW:
            self.new.append(remote_file)
        elif classification is Classification.IDENTICAL:
            self.identical.append(remote_file)
        else:
            self.changed.append(remote_file)

    def by_path(self) -> Dict[str, Classification]:
        out: Dict[str, Classification] = {}
        for f in self.new:
            out[f.relative_path] = Classification.NEW
        for f in self.identical:
            out[f.relative_path] = Classification.IDENTICAL
        for f in self.changed:
            out[f.relative_path] = Classification.CHANGED
        return out

    def __len__(self) -> int:
        return len(self.new) + len(self.identical) + len(self.changed)


@dataclass(frozen=True)
class ResolutionDecision:
    relative_path: str
    overwrite: bool


class SyncMode(str, Enum):
    INTERACTIVE = "interactive"
    NON_INTERACTIVE = "non-interactive"


class FileStatus(str, Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class StatusLine:
    relative_path: str
    status: FileStatus


def build_write_set(
    classification: ClassificationResult,
    decisions: Dict[str, ResolutionDecision],
) -> List[RemoteFile]:
    """New files plus the changed files approved for overwrite."""
    approved = [
        f
        for f in classification.changed
        if f.relative_path in decisions and decisions[f.relative_path].overwrite
    ]
    return [*classification.new, *approved]
