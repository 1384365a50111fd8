"""LocalDisk: file-system-based disk."""

import logging
from pathlib import Path

from mediares.errors import DiskFileNotFoundError
from mediares.storage._disk import normalize_relative_path

logger = logging.getLogger(__name__)


class LocalDisk:
    """File-system disk rooted at a directory.

    Every path is resolved under the root; paths that escape it are rejected.
    """

    def __init__(self, root: str | Path, *, name: str = "local") -> None:
        """Initialize with a root directory, creating it if needed."""
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)
        self._name = name

    @property
    def root(self) -> Path:
        """Return the root directory path."""
        return self._root

    @property
    def name(self) -> str:
        """Return the disk name used in error messages."""
        return self._name

    def path(self, path: str) -> Path:
        """Resolve a relative path to an absolute path under the disk root."""
        root = self._root.resolve()
        candidate = (self._root / normalize_relative_path(path)).resolve()
        try:
            candidate.relative_to(root)
        except ValueError:
            msg = f"Path {path!r} resolves outside disk root."
            raise ValueError(msg) from None
        return candidate

    def put(self, path: str, data: bytes) -> bool:
        """Write bytes to a file, creating parent directories as needed."""
        target = self.path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.debug("Wrote %d bytes to %s", len(data), target)
        return True

    def get(self, path: str) -> bytes:
        """Read a file from the disk."""
        target = self.path(path)
        if not target.is_file():
            raise DiskFileNotFoundError(self._name, path)
        return target.read_bytes()

    def exists(self, path: str) -> bool:
        """Check whether a file exists on the disk."""
        return self.path(path).is_file()

    def delete(self, path: str) -> bool:
        """Delete a file from the disk."""
        target = self.path(path)
        if not target.is_file():
            return False
        target.unlink()
        return True
