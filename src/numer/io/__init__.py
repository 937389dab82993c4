"""Filesystem interface and adapters used by the scaffolder."""

from .interfaces import FileSystem, PathLike

__all__ = ["FileSystem", "PathLike"]
