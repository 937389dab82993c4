from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from numer.errors import FilesystemError
from numer.io.adapters.memory import MemoryFileSystem


def test_make_dirs_creates_parents() -> None:
    fs = MemoryFileSystem()
    fs.make_dirs("/work/a/b")
    assert fs.is_dir("/work")
    assert fs.is_dir(PurePosixPath("/work/a"))
    assert fs.list_dir("/work") == ["a"]


def test_write_requires_existing_parent() -> None:
    fs = MemoryFileSystem()
    with pytest.raises(FilesystemError):
        fs.write_bytes("/missing/file.txt", b"x")

    fs.make_dirs("/work")
    fs.write_text("/work/file.txt", "hello")
    assert fs.read_text("/work/file.txt") == "hello"
    assert fs.exists("/work/file.txt")
    assert not fs.is_dir("/work/file.txt")


def test_file_in_the_way_of_directory() -> None:
    fs = MemoryFileSystem()
    fs.make_dirs("/work")
    fs.write_bytes("/work/taken", b"")
    with pytest.raises(FilesystemError):
        fs.make_dirs("/work/taken/child")
    with pytest.raises(FilesystemError):
        fs.write_bytes("/work", b"")


def test_remove_tree_drops_descendants_only() -> None:
    fs = MemoryFileSystem()
    fs.make_dirs("/work/keep")
    fs.make_dirs("/work/drop/inner")
    fs.write_bytes("/work/drop/inner/file.txt", b"x")
    fs.write_bytes("/work/keep/file.txt", b"y")
    fs.write_bytes("/work/drop-sibling.txt", b"z")

    fs.remove_tree("/work/drop")

    assert fs.list_dir("/work") == ["drop-sibling.txt", "keep"]
    assert fs.files() == {
        "/work/drop-sibling.txt": b"z",
        "/work/keep/file.txt": b"y",
    }


def test_missing_paths_raise() -> None:
    fs = MemoryFileSystem()
    with pytest.raises(FilesystemError):
        fs.read_bytes("/nope")
    with pytest.raises(FilesystemError):
        fs.list_dir("/nope")
