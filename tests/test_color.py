"""Tests for color extraction helpers."""

import pytest
from PIL import Image as PILImage

from mediares.color import (
    Area,
    Color,
    ColorThiefQuantizer,
    Quantizer,
    dominant_color,
    extract_palette,
)


class _ListQuantizer:
    def __init__(self, swatches: list[tuple[int, int, int]]) -> None:
        self.swatches = swatches

    def quantize(self, image: PILImage.Image, color_count: int, quality: int) -> list[tuple[int, int, int]]:
        return self.swatches[:color_count]


def _image(size: tuple[int, int] = (8, 8)) -> PILImage.Image:
    return PILImage.new("RGB", size, (0, 0, 0))


def test_color_views() -> None:
    color = Color(255, 128, 0)
    assert color.rgb == (255, 128, 0)
    assert color.hex == "#ff8000"
    assert color.integer == 0xFF8000


@pytest.mark.parametrize(
    ("output_format", "expected"),
    [
        ("obj", Color(1, 2, 3)),
        ("rgb", "rgb(1,2,3)"),
        ("hex", "#010203"),
        ("int", 0x010203),
        ("array", [1, 2, 3]),
    ],
)
def test_color_formats(output_format: str, expected: object) -> None:
    assert Color(1, 2, 3).format(output_format) == expected


@pytest.mark.parametrize("channels", [(256, 0, 0), (-1, 0, 0), (True, 0, 0)])
def test_color_rejects_invalid_channels(channels: tuple[int, int, int]) -> None:
    with pytest.raises(ValueError, match="0..255"):
        Color(*channels)


def test_area_coercion() -> None:
    expected = Area(x=1, y=2, width=3, height=4)
    assert Area.coerce(expected) is expected
    assert Area.coerce({"x": 1, "y": 2, "w": 3, "h": 4}) == expected
    assert Area.coerce((1, 2, 3, 4)) == expected
    assert expected.box() == (1, 2, 4, 6)


def test_area_coercion_errors() -> None:
    with pytest.raises(ValueError, match="missing key 'h'"):
        Area.coerce({"x": 1, "y": 2, "w": 3})
    with pytest.raises(TypeError, match="Unsupported area"):
        Area.coerce([1, 2, 3, 4])  # type: ignore[arg-type]


@pytest.mark.parametrize("area", [(0, 0, 0, 4), (-1, 0, 2, 2), (6, 6, 4, 4)])
def test_area_outside_image_is_rejected(area: tuple[int, int, int, int]) -> None:
    with pytest.raises(ValueError, match="Area"):
        dominant_color(_image(), area=area, quantizer=_ListQuantizer([(1, 1, 1)]))


def test_dominant_color_returns_first_swatch() -> None:
    quantizer = _ListQuantizer([(9, 9, 9), (1, 1, 1)])
    assert dominant_color(_image(), quantizer=quantizer) == Color(9, 9, 9)
    assert dominant_color(_image(), output_format="int", quantizer=quantizer) == 0x090909


def test_dominant_color_none_when_nothing_sampled() -> None:
    assert dominant_color(_image(), quantizer=_ListQuantizer([])) is None


def test_extract_palette_formats_each_swatch() -> None:
    quantizer = _ListQuantizer([(255, 0, 0), (0, 255, 0), (0, 0, 255)])
    assert extract_palette(_image(), color_count=3, output_format="hex", quantizer=quantizer) == [
        "#ff0000",
        "#00ff00",
        "#0000ff",
    ]


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"color_count": 1}, "color_count"),
        ({"color_count": 257}, "color_count"),
        ({"quality": 0}, "quality"),
        ({"output_format": "cmyk"}, "output format"),
    ],
)
def test_extract_palette_validates_arguments(kwargs: dict[str, object], match: str) -> None:
    with pytest.raises(ValueError, match=match):
        extract_palette(_image(), quantizer=_ListQuantizer([(1, 1, 1)]), **kwargs)  # type: ignore[arg-type]


def test_colorthief_quantizer_finds_dominant_region() -> None:
    image = PILImage.new("RGB", (20, 20), (20, 40, 200))
    image.paste((220, 30, 30), (0, 0, 20, 18))
    image.paste((30, 200, 40), (0, 18, 20, 20))

    swatches = ColorThiefQuantizer().quantize(image, 4, 1)

    assert isinstance(ColorThiefQuantizer(), Quantizer)
    assert swatches
    assert all(len(swatch) == 3 for swatch in swatches)
    reds = [swatch for swatch in swatches if swatch[0] > 180 and swatch[1] < 80 and swatch[2] < 80]
    assert reds


@pytest.mark.parametrize(
    "image",
    [
        PILImage.new("RGB", (8, 8), (255, 255, 255)),
        PILImage.new("RGBA", (8, 8), (0, 0, 0, 0)),
    ],
    ids=["white", "transparent"],
)
def test_default_quantizer_yields_nothing_for_unsampled_images(image: PILImage.Image) -> None:
    assert ColorThiefQuantizer().quantize(image, 5, 1) == []
    assert dominant_color(image) is None
    assert extract_palette(image, color_count=3) == []


def test_default_quantizer_skips_only_unsampled_pixels() -> None:
    image = PILImage.new("RGBA", (10, 10), (0, 0, 0, 0))
    image.paste((10, 120, 30, 255), (0, 0, 10, 5))

    color = dominant_color(image, quality=1)

    assert isinstance(color, Color)
    assert color.green > color.red
    assert color.green > color.blue
