"""Abstract filesystem interface used by the directory merge helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import Union

PathLike = Union[str, PurePath]


class FileSystem(ABC):
    """Operations on the single path a caller owns at a time.

    Implementations raise :class:`numer.errors.FilesystemError` for every
    underlying failure so callers only deal with one error type.
    """

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Return whether ``path`` names an existing file or directory."""

    @abstractmethod
    def is_dir(self, path: PathLike) -> bool:
        """Return whether ``path`` is an existing directory."""

    @abstractmethod
    def list_dir(self, path: PathLike) -> list[str]:
        """Return the sorted entry names of the directory at ``path``."""

    @abstractmethod
    def read_bytes(self, path: PathLike) -> bytes:
        """Return the contents of the file at ``path``."""

    @abstractmethod
    def write_bytes(self, path: PathLike, data: bytes) -> None:
        """Create or replace the file at ``path``. The parent must exist."""

    @abstractmethod
    def make_dirs(self, path: PathLike) -> None:
        """Create ``path`` and any missing parents. Existing directories are fine."""

    @abstractmethod
    def remove_tree(self, path: PathLike) -> None:
        """Remove the file or directory at ``path`` including all its contents."""

    def copy_file(self, source: PathLike, destination: PathLike) -> None:
        """Copy a single file. Adapters may override this with a native copy."""

        self.write_bytes(destination, self.read_bytes(source))

    def read_text(self, path: PathLike, encoding: str = "utf-8") -> str:
        return self.read_bytes(path).decode(encoding)

    def write_text(self, path: PathLike, text: str, encoding: str = "utf-8") -> None:
        self.write_bytes(path, text.encode(encoding))


__all__ = ["FileSystem", "PathLike"]
