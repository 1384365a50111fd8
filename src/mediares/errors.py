"""Typed errors for mediares."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class MediaresError(Exception):
    """Base exception for all mediares errors."""


class InvalidResourceError(MediaresError):
    """Raised by a resource type when the input is not of that type.

    ResourceFactory treats this error as "try the next type".
    """


class UnresolvableInputError(MediaresError):
    """Raised when no configured resource type accepts the input."""

    def __init__(
        self,
        msg: str = "A resource cannot be created from the given input.",
        *,
        rejections: Sequence[tuple[str, InvalidResourceError]] = (),
    ) -> None:
        """Initialize with the per-key rejections collected during dispatch."""
        self.rejections = tuple(rejections)
        super().__init__(msg)

    @property
    def tried(self) -> tuple[str, ...]:
        """Return the resource keys that rejected the input, in trial order."""
        return tuple(key for key, _ in self.rejections)


class ResourceConfigurationError(MediaresError):
    """Raised for an invalid resource registry or a missing collaborator."""


class UndefinedAttributeError(MediaresError, AttributeError):
    """Raised when a resource has no attribute with the requested name."""

    def __init__(self, name: str, owner: str) -> None:
        """Initialize with the missing attribute name and the owning resource type."""
        super().__init__(f"Undefined attribute {name!r} on {owner}.")
        self.name = name
        self.owner = owner


class UndefinedMethodError(MediaresError, AttributeError):
    """Raised when a forwarded method exists neither on the resource nor its delegate."""

    def __init__(self, name: str, owner: str) -> None:
        """Initialize with the missing method name and the owning resource type."""
        super().__init__(f"Undefined method {name!r} on {owner}.")
        self.name = name
        self.owner = owner


class DiskNotFoundError(MediaresError):
    """Raised when a DiskManager has no disk registered under a name."""

    def __init__(self, disk: str) -> None:
        """Initialize with the unknown disk name."""
        self.disk = disk
        super().__init__(f"Disk not configured: {disk}")


class DiskFileNotFoundError(MediaresError):
    """Raised when a path cannot be read from a disk."""

    def __init__(self, disk: str, path: str) -> None:
        """Initialize with the disk name and the missing relative path."""
        self.disk = disk
        self.path = path
        super().__init__(f"File not found on disk {disk!r}: {path}")
