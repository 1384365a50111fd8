"""InMemoryDisk: dict-based disk for development and testing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mediares.errors import DiskFileNotFoundError
from mediares.storage._disk import normalize_relative_path

if TYPE_CHECKING:
    from collections.abc import Mapping


class InMemoryDisk:
    """In-memory disk for development and testing."""

    def __init__(self, *, name: str = "memory") -> None:
        """Initialize an empty in-memory disk."""
        self._files: dict[str, bytes] = {}
        self._name = name

    @classmethod
    def from_preloaded(cls, files: Mapping[str, bytes], *, name: str = "memory") -> InMemoryDisk:
        """Build a disk from preloaded ``path -> bytes`` data."""
        disk = cls(name=name)
        for path, data in files.items():
            disk._files[normalize_relative_path(path)] = bytes(data)
        return disk

    @property
    def name(self) -> str:
        """Return the disk name used in error messages."""
        return self._name

    def put(self, path: str, data: bytes) -> bool:
        """Store bytes at the relative path."""
        self._files[normalize_relative_path(path)] = bytes(data)
        return True

    def get(self, path: str) -> bytes:
        """Retrieve bytes stored at the relative path."""
        data = self._files.get(normalize_relative_path(path))
        if data is None:
            raise DiskFileNotFoundError(self._name, path)
        return data

    def exists(self, path: str) -> bool:
        """Check whether a file exists."""
        return normalize_relative_path(path) in self._files

    def delete(self, path: str) -> bool:
        """Delete a file by relative path."""
        return self._files.pop(normalize_relative_path(path), None) is not None

    def paths(self) -> tuple[str, ...]:
        """Return all stored paths in sorted order."""
        return tuple(sorted(self._files))
