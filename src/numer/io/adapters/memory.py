"""In-memory filesystem adapter for deterministic tests."""

from __future__ import annotations

from pathlib import PurePath, PurePosixPath

from ...errors import FilesystemError
from ..interfaces import FileSystem, PathLike

_ROOTS = (PurePosixPath("/"), PurePosixPath("."))


def _normalize(path: PathLike) -> PurePosixPath:
    return PurePosixPath(PurePath(path).as_posix())


class MemoryFileSystem(FileSystem):
    """Keep files and directories in dictionaries instead of on disk."""

    def __init__(self) -> None:
        self._files: dict[PurePosixPath, bytes] = {}
        self._dirs: set[PurePosixPath] = set(_ROOTS)

    def exists(self, path: PathLike) -> bool:
        key = _normalize(path)
        return key in self._files or key in self._dirs

    def is_dir(self, path: PathLike) -> bool:
        return _normalize(path) in self._dirs

    def list_dir(self, path: PathLike) -> list[str]:
        key = _normalize(path)
        if key not in self._dirs:
            raise FilesystemError("list", path, "no such directory")
        names = {
            entry.name
            for entry in (*self._files, *self._dirs)
            if entry.parent == key and entry != key
        }
        return sorted(names)

    def read_bytes(self, path: PathLike) -> bytes:
        try:
            return self._files[_normalize(path)]
        except KeyError:
            raise FilesystemError("read", path, "no such file") from None

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        key = _normalize(path)
        if key in self._dirs:
            raise FilesystemError("write", path, "is a directory")
        if key.parent not in self._dirs:
            raise FilesystemError("write", path, "parent directory does not exist")
        self._files[key] = bytes(data)

    def make_dirs(self, path: PathLike) -> None:
        key = _normalize(path)
        for candidate in (*reversed(key.parents), key):
            if candidate in self._files:
                raise FilesystemError("create directory", path, "a file is in the way")
            self._dirs.add(candidate)

    def remove_tree(self, path: PathLike) -> None:
        key = _normalize(path)
        self._files.pop(key, None)
        if key in _ROOTS:
            return
        self._dirs = {entry for entry in self._dirs if entry != key and key not in entry.parents}
        self._files = {
            entry: data for entry, data in self._files.items() if key not in entry.parents
        }

    def files(self) -> dict[str, bytes]:
        """Return a snapshot of every stored file keyed by its posix path."""

        return {str(path): data for path, data in sorted(self._files.items())}


__all__ = ["MemoryFileSystem"]
