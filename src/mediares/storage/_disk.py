"""Disk: protocol for storage backends."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Protocol, runtime_checkable


def normalize_relative_path(path: str) -> str:
    """Normalize a disk-relative path into POSIX form without a leading slash."""
    normalized = str(path).replace("\\", "/").strip()
    parts = [part for part in PurePosixPath(normalized).parts if part not in ("/", ".")]
    if not parts:
        msg = f"Relative path must not be empty: {path!r}"
        raise ValueError(msg)
    if ".." in parts:
        msg = f"Relative path must not contain '..': {path!r}"
        raise ValueError(msg)
    return "/".join(parts)


@runtime_checkable
class Disk(Protocol):
    """Storage disk protocol.

    Implementations address files by a path relative to the disk. I/O errors
    raised by the backend propagate to the caller.
    """

    def put(self, path: str, data: bytes) -> bool:
        """Write bytes at the relative path. Return ``True`` when written."""
        ...

    def get(self, path: str) -> bytes:
        """Read bytes stored at the relative path."""
        ...

    def exists(self, path: str) -> bool:
        """Check whether a file exists at the relative path."""
        ...

    def delete(self, path: str) -> bool:
        """Delete the file at the relative path. Return ``True`` when deleted."""
        ...
