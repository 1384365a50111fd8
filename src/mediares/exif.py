"""ExifData: immutable snapshot of an image's EXIF tags."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING

from PIL import ExifTags
from PIL.TiffImagePlugin import IFDRational

if TYPE_CHECKING:
    from collections.abc import Iterator

    from PIL import Image as PILImage

_EXIF_DATETIME_FORMAT = "%Y:%m:%d %H:%M:%S"


def _plain_value(value: object) -> object:
    """Normalize EXIF values (rationals, bytes, nested tuples) to plain Python types."""
    if isinstance(value, IFDRational):
        return float(value) if value.denominator else None
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace").rstrip("\x00")
    if isinstance(value, (tuple, list)):
        return tuple(_plain_value(item) for item in value)
    if isinstance(value, Mapping):
        return MappingProxyType({str(key): _plain_value(item) for key, item in value.items()})
    return value


def _tag_name(tag: int, names: Mapping[int, str]) -> str:
    return names.get(tag, f"Tag{tag:#06x}")


class ExifData(Mapping[str, object]):
    """Read-only mapping of EXIF tag names to plain values."""

    __slots__ = ("_tags",)

    def __init__(self, tags: Mapping[str, object] | None = None) -> None:
        """Initialize from a ``tag name -> value`` mapping."""
        self._tags = MappingProxyType({str(key): _plain_value(value) for key, value in (tags or {}).items()})

    @classmethod
    def from_image(cls, image: PILImage.Image) -> ExifData:
        """Read EXIF tags (including the Exif and GPS sub-IFDs) from a Pillow image."""
        exif = image.getexif()
        tags: dict[str, object] = {_tag_name(tag, ExifTags.TAGS): value for tag, value in exif.items()}

        sub_ifd = exif.get_ifd(ExifTags.IFD.Exif)
        for tag, value in sub_ifd.items():
            tags.setdefault(_tag_name(tag, ExifTags.TAGS), value)

        gps_ifd = exif.get_ifd(ExifTags.IFD.GPSInfo)
        if gps_ifd:
            tags["GPSInfo"] = {_tag_name(tag, ExifTags.GPSTAGS): value for tag, value in gps_ifd.items()}

        return cls(tags)

    def __getitem__(self, key: str) -> object:
        """Return one tag value by name."""
        return self._tags[key]

    def __iter__(self) -> Iterator[str]:
        """Iterate over tag names."""
        return iter(self._tags)

    def __len__(self) -> int:
        """Return the number of tags."""
        return len(self._tags)

    def __repr__(self) -> str:
        """Return a short debug representation."""
        return f"ExifData({len(self._tags)} tags)"

    def to_dict(self) -> dict[str, object]:
        """Return tags as a plain, JSON-friendly dictionary."""
        return {key: _to_plain(value) for key, value in self._tags.items()}

    @property
    def make(self) -> str | None:
        """Return the camera manufacturer."""
        value = self._tags.get("Make")
        return value if isinstance(value, str) else None

    @property
    def model(self) -> str | None:
        """Return the camera model."""
        value = self._tags.get("Model")
        return value if isinstance(value, str) else None

    @property
    def orientation(self) -> int | None:
        """Return the EXIF orientation flag (1-8)."""
        value = self._tags.get("Orientation")
        return value if isinstance(value, int) else None

    @property
    def taken_at(self) -> datetime | None:
        """Return the capture timestamp from DateTimeOriginal, falling back to DateTime."""
        for name in ("DateTimeOriginal", "DateTime"):
            value = self._tags.get(name)
            if not isinstance(value, str):
                continue
            try:
                return datetime.strptime(value.strip(), _EXIF_DATETIME_FORMAT)  # noqa: DTZ007
            except ValueError:
                continue
        return None


def _to_plain(value: object) -> object:
    if isinstance(value, Mapping):
        return {str(key): _to_plain(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_to_plain(item) for item in value]
    return value
