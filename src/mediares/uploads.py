"""UploadSource: explicit access to request-provided input values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping


@runtime_checkable
class UploadSource(Protocol):
    """Protocol for objects that hand out uploaded values by input key."""

    def get_uploaded_value(self, key: str) -> object | None:
        """Return the raw uploaded value for a key, or ``None`` when absent."""
        ...


class MappingUploadSource:
    """Adapt any mapping of uploads (for example ``request.files``) to UploadSource."""

    def __init__(self, uploads: Mapping[str, object]) -> None:
        """Initialize with a mapping of input keys to uploaded values."""
        self._uploads = uploads

    def get_uploaded_value(self, key: str) -> object | None:
        """Return the uploaded value for a key."""
        return self._uploads.get(key)
