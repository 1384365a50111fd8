"""Image: Pillow-backed resource type."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from mediares.color import dominant_color, extract_palette
from mediares.contracts import Resource
from mediares.errors import InvalidResourceError, UndefinedMethodError
from mediares.exif import ExifData
from mediares.resources._inputs import read_source

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mediares.color import Area, Color, Quantizer

_FORMAT_EXTENSIONS = {
    "JPEG": "jpg",
    "TIFF": "tif",
}
_JPEG_MODES = frozenset({"RGB", "L", "CMYK"})


def _extension_for(pillow_format: str | None) -> str | None:
    """Return the conventional file extension for a Pillow format name."""
    if pillow_format is None:
        return None
    return _FORMAT_EXTENSIONS.get(pillow_format, pillow_format.lower())


def _writable_format(value: str) -> str | None:
    """Resolve an extension or format name (``jpg``, ``JPEG``, ``.png``) to a Pillow save format."""
    candidate = value.lstrip(".")
    if candidate.upper() in PILImage.SAVE:
        return candidate.upper()
    pillow_format = PILImage.registered_extensions().get(f".{candidate.lower()}")
    if pillow_format is None or pillow_format not in PILImage.SAVE:
        return None
    return pillow_format


def _pillow_format(value: str) -> str:
    """Resolve a requested format, raising ValueError when Pillow cannot write it."""
    pillow_format = _writable_format(value)
    if pillow_format is None:
        msg = f"Pillow cannot encode images as {value!r}."
        raise ValueError(msg)
    return pillow_format


class Image(Resource):
    """Resource wrapping a decoded Pillow image."""

    def __init__(
        self,
        image: PILImage.Image,
        *,
        filename: str | None,
        size: int,
        extension: str | None,
        exif: ExifData | None = None,
    ) -> None:
        """Initialize from an already decoded Pillow image."""
        self._image = image
        self._format = image.format
        super().__init__(
            filename=filename,
            size=size,
            mime=PILImage.MIME.get(image.format) if image.format else None,
            extension=extension or _extension_for(image.format),
        )
        self._exif = exif if exif is not None else ExifData.from_image(image)

    @classmethod
    def make(cls, data: object) -> Image:
        """Decode raw input as an image.

        Unidentifiable data is rejected with InvalidResourceError; read errors
        and truncated image data propagate.
        """
        source = read_source(data)
        try:
            decoded = PILImage.open(io.BytesIO(source.data))
        except UnidentifiedImageError as exc:
            raise InvalidResourceError(str(exc)) from exc
        decoded.load()
        return cls(
            decoded,
            filename=source.filename,
            size=len(source.data),
            extension=source.suffix,
        )

    @property
    def exif(self) -> ExifData:
        """Return the EXIF snapshot."""
        return self._exif

    @property
    def width(self) -> int:
        """Return the current image width in pixels."""
        return self._image.width

    @property
    def height(self) -> int:
        """Return the current image height in pixels."""
        return self._image.height

    @property
    def format(self) -> str | None:
        """Return the Pillow format name the source was decoded from."""
        return self._format

    def set_exif(self, exif: ExifData) -> Image:
        """Replace the EXIF snapshot and return the resource."""
        self._exif = exif
        return self

    def extra_attributes(self) -> Mapping[str, object]:
        """Return image-specific attributes."""
        return {
            "exif": self._exif,
            "width": self.width,
            "height": self.height,
            "format": self._format,
        }

    def image(self) -> PILImage.Image:
        """Return the wrapped Pillow image."""
        return self._image

    def core(self) -> PILImage.Image:
        """Return an independent copy of the pixel buffer."""
        return self._image.copy()

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Forward an operation to the wrapped Pillow image.

        Operations returning a new Pillow image (``rotate``, ``resize``, ...)
        or nothing (``thumbnail``) update the wrapped image and return the
        resource; other results are returned as is.
        """
        method = None if name.startswith("_") else getattr(self._image, name, None)
        if not callable(method):
            raise UndefinedMethodError(name, type(self).__name__)
        result = method(*args, **kwargs)
        if isinstance(result, PILImage.Image):
            self._image = result
            return self
        if result is None:
            return self
        return result

    def color(
        self,
        quality: int = 10,
        area: Area | Mapping[str, int] | tuple[int, int, int, int] | None = None,
        output_format: str = "obj",
        quantizer: Quantizer | None = None,
    ) -> Color | int | str | list[int] | None:
        """Return the dominant color of the image."""
        return dominant_color(self._image, quality, area, output_format, quantizer)

    def palette(
        self,
        color_count: int = 10,
        quality: int = 10,
        area: Area | Mapping[str, int] | tuple[int, int, int, int] | None = None,
        output_format: str = "obj",
        quantizer: Quantizer | None = None,
    ) -> list[Color | int | str | list[int]]:
        """Return the color palette of the image."""
        return extract_palette(self._image, color_count, quality, area, output_format, quantizer)

    def _default_format(self) -> str:
        """Return the save format implied by the extension, else the decoded format."""
        for candidate in (self._extension, self._format):
            pillow_format = _writable_format(candidate) if candidate else None
            if pillow_format is not None:
                return pillow_format
        msg = f"Cannot encode image: no format requested and Pillow cannot write {self._extension or self._format!r}."
        raise ValueError(msg)

    def encode(self, format: str | None = None, quality: int | None = None) -> bytes:  # noqa: A002
        """Encode the image in the requested format, else its extension or decoded format."""
        pillow_format = _pillow_format(format) if format else self._default_format()

        image = self._image
        if pillow_format == "JPEG" and image.mode not in _JPEG_MODES:
            image = image.convert("RGB")

        options: dict[str, object] = {}
        if quality is not None:
            options["quality"] = quality

        buffer = io.BytesIO()
        image.save(buffer, format=pillow_format, **options)
        return buffer.getvalue()
