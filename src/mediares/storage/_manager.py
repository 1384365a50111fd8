"""DiskManager: named disk lookup for resource persistence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mediares.errors import DiskNotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mediares.storage._disk import Disk


class DiskManager:
    """Resolve disk names (as carried by a persistence target) to Disk instances."""

    def __init__(self, disks: Mapping[str, Disk] | None = None, *, default: str | None = None) -> None:
        """Initialize with named disks and an optional default disk name."""
        self._disks: dict[str, Disk] = {}
        for name, disk in (disks or {}).items():
            self.register(name, disk)
        if default is not None and default not in self._disks:
            raise DiskNotFoundError(default)
        self._default = default

    def register(self, name: str, disk: Disk, *, replace: bool = False) -> None:
        """Register a disk under a name."""
        if name in self._disks and not replace:
            msg = f"Disk already registered under {name!r}. Pass replace=True to overwrite."
            raise ValueError(msg)
        self._disks[name] = disk

    def disk(self, name: str | None = None) -> Disk:
        """Return the disk registered under a name, or the default disk."""
        resolved = name if name is not None else self._default
        if resolved is None:
            msg = "No disk name given and no default disk configured."
            raise ValueError(msg)
        disk = self._disks.get(resolved)
        if disk is None:
            raise DiskNotFoundError(resolved)
        return disk

    def names(self) -> tuple[str, ...]:
        """Return registered disk names in registration order."""
        return tuple(self._disks)
