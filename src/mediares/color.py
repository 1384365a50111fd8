"""Dominant color and palette extraction over Pillow images."""

from __future__ import annotations

import io
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from colorthief import ColorThief

if TYPE_CHECKING:
    from PIL import Image as PILImage

RGB = tuple[int, int, int]
OUTPUT_FORMATS = frozenset({"obj", "rgb", "hex", "int", "array"})
_MIN_COLORS = 2
_MAX_COLORS = 256
_CHANNEL_MAX = 255
_AREA_FIELDS = 4
_MIN_ALPHA = 125
_NEAR_WHITE = 250


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB color value."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        """Validate channel ranges."""
        for channel in (self.red, self.green, self.blue):
            if not isinstance(channel, int) or isinstance(channel, bool) or not 0 <= channel <= _CHANNEL_MAX:
                msg = f"Color channels must be ints in 0..255; got {channel!r}."
                raise ValueError(msg)

    @property
    def rgb(self) -> RGB:
        """Return the color as an ``(r, g, b)`` tuple."""
        return self.red, self.green, self.blue

    @property
    def hex(self) -> str:
        """Return the color as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @property
    def integer(self) -> int:
        """Return the color packed into a single ``0xRRGGBB`` integer."""
        return (self.red << 16) | (self.green << 8) | self.blue

    def format(self, output_format: str) -> Color | int | str | list[int]:
        """Render the color in one of the supported output formats."""
        if output_format == "obj":
            return self
        if output_format == "rgb":
            return f"rgb({self.red},{self.green},{self.blue})"
        if output_format == "hex":
            return self.hex
        if output_format == "int":
            return self.integer
        if output_format == "array":
            return list(self.rgb)
        msg = f"Unsupported color output format {output_format!r}. Expected one of {sorted(OUTPUT_FORMATS)}."
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Area:
    """A rectangular region of an image, in pixels."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def coerce(cls, value: Area | Mapping[str, int] | tuple[int, int, int, int]) -> Area:
        """Build an Area from an Area, a ``{x, y, w, h}`` mapping or a 4-tuple."""
        if isinstance(value, Area):
            return value
        if isinstance(value, Mapping):
            try:
                return cls(x=int(value["x"]), y=int(value["y"]), width=int(value["w"]), height=int(value["h"]))
            except KeyError as exc:
                msg = f"Area mapping is missing key {exc.args[0]!r}; expected x, y, w and h."
                raise ValueError(msg) from exc
        if isinstance(value, tuple) and len(value) == _AREA_FIELDS:
            x, y, width, height = value
            return cls(x=int(x), y=int(y), width=int(width), height=int(height))
        msg = f"Unsupported area value: {value!r}."
        raise TypeError(msg)

    def box(self) -> tuple[int, int, int, int]:
        """Return the Pillow crop box ``(left, upper, right, lower)``."""
        return self.x, self.y, self.x + self.width, self.y + self.height

    def validate_within(self, width: int, height: int) -> None:
        """Raise ValueError unless the area is non-empty and inside a ``width x height`` image."""
        if self.x < 0 or self.y < 0 or self.width <= 0 or self.height <= 0:
            msg = f"Area must have a non-negative origin and positive size; got {self}."
            raise ValueError(msg)
        if self.x + self.width > width or self.y + self.height > height:
            msg = f"Area {self} exceeds image bounds {width}x{height}."
            raise ValueError(msg)


@runtime_checkable
class Quantizer(Protocol):
    """Color quantization strategy."""

    def quantize(self, image: PILImage.Image, color_count: int, quality: int) -> list[RGB]:
        """Return up to ``color_count`` representative colors, most dominant first."""
        ...


class ColorThiefQuantizer:
    """Quantizer backed by colorthief's modified median cut.

    colorthief skips transparent (alpha < 125) and near-white (every channel
    above 250) pixels; an image with nothing left to sample yields no colors.
    """

    def quantize(self, image: PILImage.Image, color_count: int, quality: int) -> list[RGB]:
        """Run colorthief over the image pixels."""
        rgba = image.convert("RGBA")
        if not _has_samplable_pixels(rgba, quality):
            return []
        buffer = io.BytesIO()
        rgba.save(buffer, format="PNG")
        buffer.seek(0)
        palette = ColorThief(buffer).get_palette(color_count=color_count, quality=quality)
        # Empty median-cut boxes can average to 256.
        return [(_clamp(r), _clamp(g), _clamp(b)) for r, g, b in palette or ()]


def _has_samplable_pixels(rgba: PILImage.Image, quality: int) -> bool:
    """Return whether colorthief would keep any of the pixels it samples."""
    pixels = list(rgba.getdata())
    return any(
        alpha >= _MIN_ALPHA and not (red > _NEAR_WHITE and green > _NEAR_WHITE and blue > _NEAR_WHITE)
        for red, green, blue, alpha in pixels[::quality]
    )


def _clamp(channel: float) -> int:
    return max(0, min(_CHANNEL_MAX, int(channel)))


DEFAULT_QUANTIZER = ColorThiefQuantizer()


def _validate_quality(quality: int) -> None:
    if not isinstance(quality, int) or isinstance(quality, bool) or quality < 1:
        msg = f"quality must be an int >= 1; got {quality!r}."
        raise ValueError(msg)


def _validate_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        msg = f"Unsupported color output format {output_format!r}. Expected one of {sorted(OUTPUT_FORMATS)}."
        raise ValueError(msg)


def _region(
    image: PILImage.Image,
    area: Area | Mapping[str, int] | tuple[int, int, int, int] | None,
) -> PILImage.Image:
    """Crop the image to the requested area, if any."""
    if area is None:
        return image
    region = Area.coerce(area)
    region.validate_within(*image.size)
    return image.crop(region.box())


def _quantize(
    image: PILImage.Image,
    color_count: int,
    quality: int,
    area: Area | Mapping[str, int] | tuple[int, int, int, int] | None,
    quantizer: Quantizer | None,
) -> list[Color]:
    engine = quantizer if quantizer is not None else DEFAULT_QUANTIZER
    swatches = engine.quantize(_region(image, area), color_count, quality)
    return [Color(*swatch) for swatch in swatches]


def dominant_color(
    image: PILImage.Image,
    quality: int = 10,
    area: Area | Mapping[str, int] | tuple[int, int, int, int] | None = None,
    output_format: str = "obj",
    quantizer: Quantizer | None = None,
) -> Color | int | str | list[int] | None:
    """Return the dominant color of an image, or ``None`` when no color can be sampled.

    - `quality`: sample every n-th pixel (1 is the most precise)
    - `area`: restrict sampling to a region
    - `output_format`: obj / rgb / hex / int / array
    - `quantizer`: custom quantization strategy
    """
    _validate_quality(quality)
    _validate_format(output_format)
    palette = _quantize(image, 5, quality, area, quantizer)
    if not palette:
        return None
    return palette[0].format(output_format)


def extract_palette(
    image: PILImage.Image,
    color_count: int = 10,
    quality: int = 10,
    area: Area | Mapping[str, int] | tuple[int, int, int, int] | None = None,
    output_format: str = "obj",
    quantizer: Quantizer | None = None,
) -> list[Color | int | str | list[int]]:
    """Return a palette of representative colors, most dominant first."""
    if not isinstance(color_count, int) or not _MIN_COLORS <= color_count <= _MAX_COLORS:
        msg = f"color_count must be an int in {_MIN_COLORS}..{_MAX_COLORS}; got {color_count!r}."
        raise ValueError(msg)
    _validate_quality(quality)
    _validate_format(output_format)
    return [color.format(output_format) for color in _quantize(image, color_count, quality, area, quantizer)]
