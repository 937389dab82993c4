"""Helpers that inspect, fill and clear project directories."""

from __future__ import annotations

import logging
from pathlib import PurePath

from .io import FileSystem, PathLike

__all__ = ["PRESERVED_ENTRIES", "clear_directory", "copy_tree", "is_empty"]

LOGGER = logging.getLogger(__name__)

PRESERVED_ENTRIES = frozenset({".git"})


def is_empty(fs: FileSystem, path: PathLike) -> bool:
    """Return ``True`` when the existing directory ``path`` has no entries."""

    return not fs.list_dir(path)


def copy_tree(fs: FileSystem, source: PathLike, destination: PathLike) -> None:
    """Copy the file or directory ``source`` to ``destination`` recursively.

    Directories are created (including parents) before their children are
    copied, so the relative layout of ``source`` is reproduced exactly.
    """

    if fs.is_dir(source):
        fs.make_dirs(destination)
        for name in fs.list_dir(source):
            copy_tree(fs, PurePath(source) / name, PurePath(destination) / name)
        return

    fs.copy_file(source, destination)


def clear_directory(fs: FileSystem, path: PathLike) -> None:
    """Remove every entry of ``path`` except version control metadata.

    Missing directories are left alone.
    """

    if not fs.exists(path):
        return

    for name in fs.list_dir(path):
        if name in PRESERVED_ENTRIES:
            LOGGER.debug("keeping %s in %s", name, path)
            continue
        fs.remove_tree(PurePath(path) / name)
