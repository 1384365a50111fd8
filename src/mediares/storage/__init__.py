"""Disks and persistence targets for storing resources."""

from mediares.storage._disk import Disk
from mediares.storage._local import LocalDisk
from mediares.storage._manager import DiskManager
from mediares.storage._memory import InMemoryDisk
from mediares.storage._target import StorageTarget

__all__ = [
    "Disk",
    "DiskManager",
    "InMemoryDisk",
    "LocalDisk",
    "StorageTarget",
]
