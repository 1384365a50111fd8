"""Resource base contract and capability protocols."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from mediares.errors import UndefinedAttributeError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from PIL import Image as PILImage

    from mediares.color import Area, Color, Quantizer
    from mediares.storage import DiskManager

ResourceT = TypeVar("ResourceT", bound="Resource")


@runtime_checkable
class PersistenceTarget(Protocol):
    """Anything that names a disk and a path on it (StorageTarget, ORM records, ...)."""

    disk: str
    relative_path: str


class Resource(ABC):
    """A decoded media item with uniform metadata and persistence.

    Instances are only produced by ``make``. Construction either completes or
    raises, so callers never see a partially initialized resource.
    """

    def __init__(
        self,
        *,
        filename: str | None,
        size: int,
        mime: str | None,
        extension: str | None,
    ) -> None:
        """Initialize the metadata shared by every resource type."""
        self._filename = filename
        self._size = size
        self._mime = mime
        self._extension = extension

    @classmethod
    @abstractmethod
    def make(cls: type[ResourceT], data: object) -> ResourceT:
        """Build a resource from raw input.

        Raise InvalidResourceError when the input is not of this type. Any
        other error (I/O, corrupt data) must propagate unchanged.
        """

    @property
    def filename(self) -> str | None:
        """Return the resource filename."""
        return self._filename

    @property
    def size(self) -> int:
        """Return the source size in bytes."""
        return self._size

    @property
    def mime(self) -> str | None:
        """Return the MIME type."""
        return self._mime

    @property
    def extension(self) -> str | None:
        """Return the file extension without a leading dot."""
        return self._extension

    def set_filename(self: ResourceT, filename: str | None) -> ResourceT:
        """Override the filename and return the resource."""
        self._filename = filename
        return self

    def set_extension(self: ResourceT, extension: str | None) -> ResourceT:
        """Override the extension (and default encode format) and return the resource."""
        self._extension = extension.lstrip(".").lower() if extension else None
        return self

    def extra_attributes(self) -> Mapping[str, object]:
        """Return type-specific attributes. Subclasses extend this."""
        return {}

    def attributes(self) -> dict[str, object]:
        """Return a snapshot of all public metadata fields.

        Type-specific attributes never replace the base keys.
        """
        base: dict[str, object] = {
            "filename": self._filename,
            "size": self._size,
            "mime": self._mime,
            "extension": self._extension,
        }
        extra = {key: value for key, value in self.extra_attributes().items() if key not in base}
        return {**base, **extra}

    def get(self, name: str) -> object:
        """Return one attribute by name."""
        attributes = self.attributes()
        if name not in attributes:
            raise UndefinedAttributeError(name, type(self).__name__)
        return attributes[name]

    @abstractmethod
    def encode(self, format: str | None = None) -> bytes:  # noqa: A002
        """Encode the payload into bytes."""

    def store(self, target: PersistenceTarget, disks: DiskManager) -> bool:
        """Encode the payload and write it to ``target.relative_path`` on ``target.disk``."""
        return disks.disk(target.disk).put(target.relative_path, self.encode())

    def __repr__(self) -> str:
        """Return a short debug representation."""
        return f"{type(self).__name__}(filename={self._filename!r}, mime={self._mime!r}, size={self._size})"


@runtime_checkable
class ColorSource(Protocol):
    """Resources that can report dominant colors."""

    def color(
        self,
        quality: int = 10,
        area: Area | Mapping[str, int] | tuple[int, int, int, int] | None = None,
        output_format: str = "obj",
        quantizer: Quantizer | None = None,
    ) -> Color | int | str | list[int]:
        """Return the dominant color."""
        ...

    def palette(
        self,
        color_count: int = 10,
        quality: int = 10,
        area: Area | Mapping[str, int] | tuple[int, int, int, int] | None = None,
        output_format: str = "obj",
        quantizer: Quantizer | None = None,
    ) -> list[Any]:
        """Return a palette of the most representative colors."""
        ...


@runtime_checkable
class ImageSource(Protocol):
    """Resources backed by a Pillow image."""

    def image(self) -> PILImage.Image:
        """Return the wrapped Pillow image."""
        ...

    def core(self) -> PILImage.Image:
        """Return an independent copy of the pixel buffer."""
        ...

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Forward one named operation to the wrapped Pillow image."""
        ...
