"""Output image types and the settings that control rendering."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass

Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)

_HEX_DIGITS = frozenset(string.hexdigits)


class ImageType(enum.Enum):
    """The kinds of image a symbol can be rendered to."""

    PNG = "PNG"
    PNG32 = "PNG32"
    EPS = "EPS"
    SVG = "SVG"
    XPM = "XPM"
    ANSI = "ANSI"
    ANSI256 = "ANSI256"
    ASCII = "ASCII"
    ASCII_INVERTED = "ASCIIi"
    UTF8 = "UTF8"
    ANSIUTF8 = "ANSIUTF8"
    ANSI256UTF8 = "ANSI256UTF8"
    UTF8_INVERTED = "UTF8i"
    ANSIUTF8_INVERTED = "ANSIUTF8i"

    @classmethod
    def parse(cls, name: str) -> ImageType:
        """Return the image type called ``name``, ignoring case."""
        wanted = name.lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(f"Invalid image type: {name}")


def parse_color(value: str) -> Color:
    """Parse ``RRGGBB`` or ``RRGGBBAA`` hexadecimal notation into RGBA."""
    if len(value) not in (6, 8) or not set(value) <= _HEX_DIGITS:
        raise ValueError(f"Invalid color value: {value!r}")
    channels = [int(value[pos:pos + 2], 16) for pos in range(0, len(value), 2)]
    if len(channels) == 3:
        channels.append(255)
    return (channels[0], channels[1], channels[2], channels[3])


def _check_color(name: str, color: Color) -> None:
    if len(color) != 4 or any(not 0 <= channel <= 255 for channel in color):
        raise ValueError(f"Invalid {name} color: {color!r}")


@dataclass(frozen=True)
class RenderOptions:
    """Geometry, colours and SVG switches shared by every renderer."""

    size: int = 3
    margin: int = 4
    dpi: int = 72
    foreground: Color = BLACK
    background: Color = WHITE
    rle: bool = False
    svg_path: bool = False
    inline_svg: bool = False

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Invalid size: {self.size}")
        if self.margin < 0:
            raise ValueError(f"Invalid margin: {self.margin}")
        if self.dpi < 0:
            raise ValueError(f"Invalid DPI: {self.dpi}")
        _check_color("foreground", self.foreground)
        _check_color("background", self.background)