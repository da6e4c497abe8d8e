"""File system utilities."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path, PurePosixPath


def resolve_under_root(root: Path, relative_path: str) -> Path:
    """Join a slash-separated relative path onto ``root``, refusing escapes.

    Raises ValueError for absolute paths, empty paths, and paths whose
    ``..`` segments would leave ``root``.
    """
    posix = PurePosixPath(relative_path)
    if not relative_path or posix.is_absolute() or Path(relative_path).is_absolute():
        raise ValueError(f"path must be relative: {relative_path!r}")
    if any(part == ".." for part in posix.parts):
        raise ValueError(f"path escapes target root: {relative_path!r}")

    base = root.resolve()
    candidate = base.joinpath(*posix.parts)
    # Symlinked parents can still point elsewhere
    resolved = candidate.resolve()
    if resolved != base and base not in resolved.parents:
        raise ValueError(f"path escapes target root: {relative_path!r}")
    return candidate


def _read_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


# Read once; os.umask is process-wide and not safe to toggle while writer threads run
_UMASK = _read_umask()


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def atomic_write_bytes(path: Path, content: bytes) -> None:
    """Write ``content`` to ``path`` via a temporary sibling and ``os.replace``."""
    ensure_dir(path.parent)
    fd, temp_name = tempfile.mkstemp(prefix=".tmp-", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(content)
        try:
            mode = stat.S_IMODE(os.stat(path).st_mode)
        except FileNotFoundError:
            mode = 0o666 & ~_UMASK
        # mkstemp creates 0600; keep the replaced file's mode or follow the umask
        os.chmod(temp_name, mode)
        os.replace(temp_name, path)
    finally:
        if os.path.exists(temp_name):
            os.unlink(temp_name)
