"""Filesystem adapter backed by the operating system."""

from __future__ import annotations

import logging
import os
import shutil
import stat
from pathlib import Path

from ...errors import FilesystemError
from ..interfaces import FileSystem, PathLike

LOGGER = logging.getLogger(__name__)


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


class LocalFileSystem(FileSystem):
    """Read and write real files through :mod:`pathlib` and :mod:`shutil`."""

    def _stat(self, path: PathLike) -> os.stat_result | None:
        try:
            return os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return None
        except OSError as exc:
            raise FilesystemError("stat", path, _describe(exc)) from exc

    def exists(self, path: PathLike) -> bool:
        return self._stat(path) is not None

    def is_dir(self, path: PathLike) -> bool:
        result = self._stat(path)
        return result is not None and stat.S_ISDIR(result.st_mode)

    def list_dir(self, path: PathLike) -> list[str]:
        try:
            return sorted(entry.name for entry in Path(path).iterdir())
        except OSError as exc:
            raise FilesystemError("list", path, _describe(exc)) from exc

    def read_bytes(self, path: PathLike) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as exc:
            raise FilesystemError("read", path, _describe(exc)) from exc

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        LOGGER.debug("write %s (%d bytes)", path, len(data))
        try:
            Path(path).write_bytes(data)
        except OSError as exc:
            raise FilesystemError("write", path, _describe(exc)) from exc

    def make_dirs(self, path: PathLike) -> None:
        LOGGER.debug("mkdir %s", path)
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError("create directory", path, _describe(exc)) from exc

    def remove_tree(self, path: PathLike) -> None:
        target = Path(path)
        LOGGER.debug("remove %s", target)
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink(missing_ok=True)
        except OSError as exc:
            raise FilesystemError("remove", path, _describe(exc)) from exc

    def copy_file(self, source: PathLike, destination: PathLike) -> None:
        LOGGER.debug("copy %s -> %s", source, destination)
        try:
            shutil.copyfile(source, destination)
            shutil.copymode(source, destination)
        except OSError as exc:
            raise FilesystemError("copy", source, _describe(exc)) from exc


__all__ = ["LocalFileSystem"]
