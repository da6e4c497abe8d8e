from __future__ import annotations

from pathlib import Path
from typing import Dict

import pytest

from boilersync.sync import RemoteFile, RemoteManifest


def make_manifest(files: Dict[str, str]) -> RemoteManifest:
    return RemoteManifest(
        RemoteFile(path, content.encode("utf-8")) for path, content in files.items()
    )


def write_tree(root: Path, files: Dict[str, str]) -> None:
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")


@pytest.fixture
def abc_manifest() -> RemoteManifest:
    return make_manifest({"a.txt": "X", "b.txt": "Y", "c.txt": "Z"})
