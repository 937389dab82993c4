"""Concrete filesystem adapter implementations."""

from .local import LocalFileSystem
from .memory import MemoryFileSystem

__all__ = ["LocalFileSystem", "MemoryFileSystem"]
