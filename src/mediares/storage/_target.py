"""StorageTarget: where a resource's encoded bytes are written."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StorageTarget:
    """Immutable persistence target: a disk name and a path relative to that disk."""

    disk: str
    relative_path: str
