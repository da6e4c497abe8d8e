from __future__ import annotations

import stat
from pathlib import Path

import pytest

import boilersync.sync.writer as writer_mod
import boilersync.utils.filesystem as filesystem_mod
from boilersync.errors import WriteError
from boilersync.sync import (
    ClassificationResult,
    FileStatus,
    RemoteFile,
    ResolutionDecision,
    build_write_set,
    report,
    summarize,
    write,
)

from conftest import make_manifest


def test_write_creates_intermediate_directories(tmp_path: Path) -> None:
    files = [RemoteFile("a/b/c.txt", b"deep"), RemoteFile("a/d.txt", b"shallow")]
    written = write(files, tmp_path)

    assert written == ["a/b/c.txt", "a/d.txt"]
    assert (tmp_path / "a" / "b" / "c.txt").read_bytes() == b"deep"
    assert (tmp_path / "a" / "d.txt").read_bytes() == b"shallow"


def test_write_replaces_existing_content(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a much longer old body")
    write([RemoteFile("a.txt", b"new")], tmp_path)
    assert (tmp_path / "a.txt").read_bytes() == b"new"
    assert [p.name for p in tmp_path.iterdir()] == ["a.txt"]


def test_write_parallel_shares_parent_directories(tmp_path: Path) -> None:
    files = [RemoteFile(f"shared/dir/f{i}.txt", str(i).encode()) for i in range(20)]
    written = write(files, tmp_path, max_workers=8)
    assert written == [f.relative_path for f in files]
    assert len(list((tmp_path / "shared" / "dir").iterdir())) == 20


@pytest.mark.parametrize("workers", [None, 4])
def test_write_failure_stops_and_keeps_earlier_files(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, workers
) -> None:
    real = filesystem_mod.atomic_write_bytes

    def flaky(path: Path, content: bytes) -> None:
        if path.name == "b.txt":
            raise PermissionError(13, "Permission denied")
        real(path, content)

    monkeypatch.setattr(writer_mod, "atomic_write_bytes", flaky)
    names = ["a.txt", "b.txt"] + [f"later{i}.txt" for i in range(20)]
    files = [RemoteFile(n, b"x") for n in names]

    with pytest.raises(WriteError, match="b.txt"):
        write(files, tmp_path, max_workers=workers)
    assert (tmp_path / "a.txt").read_bytes() == b"x"
    assert not (tmp_path / "b.txt").exists()
    assert list(tmp_path.glob(".tmp-*")) == []
    if workers is None:
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.txt"]


def test_failed_atomic_write_leaves_no_partial_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "a.txt").write_bytes(b"original")

    def boom(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(filesystem_mod.os, "replace", boom)
    with pytest.raises(WriteError):
        write([RemoteFile("a.txt", b"replacement")], tmp_path)
    assert (tmp_path / "a.txt").read_bytes() == b"original"
    assert [p.name for p in tmp_path.iterdir()] == ["a.txt"]


def test_write_rejects_escaping_paths(tmp_path: Path) -> None:
    with pytest.raises(WriteError):
        write([RemoteFile("../evil.txt", b"x")], tmp_path / "root")
    assert not (tmp_path / "evil.txt").exists()


def test_report_follows_manifest_order() -> None:
    manifest = make_manifest({"a.txt": "X", "b.txt": "Y", "c.txt": "Z", "d.txt": "W"})
    files = list(manifest)
    classification = ClassificationResult(
        new=[files[2]], identical=[files[0]], changed=[files[1], files[3]]
    )
    decisions = {
        "b.txt": ResolutionDecision("b.txt", overwrite=False),
        "d.txt": ResolutionDecision("d.txt", overwrite=True),
    }

    lines = report(manifest, classification, decisions)

    assert [(line.relative_path, line.status) for line in lines] == [
        ("a.txt", FileStatus.UNCHANGED),
        ("b.txt", FileStatus.SKIPPED),
        ("c.txt", FileStatus.WRITTEN),
        ("d.txt", FileStatus.WRITTEN),
    ]
    assert summarize(lines) == {
        FileStatus.WRITTEN: 2,
        FileStatus.SKIPPED: 1,
        FileStatus.UNCHANGED: 1,
    }
    assert [f.relative_path for f in build_write_set(classification, decisions)] == [
        "c.txt",
        "d.txt",
    ]


def _umask_mode() -> int:
    return 0o666 & ~filesystem_mod._UMASK


def test_new_file_mode_follows_umask(tmp_path: Path) -> None:
    write([RemoteFile("a.txt", b"x"), RemoteFile("nested/b.txt", b"y")], tmp_path)
    assert stat.S_IMODE((tmp_path / "a.txt").stat().st_mode) == _umask_mode()
    assert stat.S_IMODE((tmp_path / "nested" / "b.txt").stat().st_mode) == _umask_mode()


def test_overwrite_keeps_existing_mode(tmp_path: Path) -> None:
    script = tmp_path / "run.sh"
    script.write_text("echo old\n")
    script.chmod(0o755)

    write([RemoteFile("run.sh", b"echo new\n")], tmp_path)

    assert script.read_bytes() == b"echo new\n"
    assert stat.S_IMODE(script.stat().st_mode) == 0o755
