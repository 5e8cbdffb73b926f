"""Pixel-based renderers: PNG (palette or RGBA) and XPM."""

from __future__ import annotations

import struct
import zlib

from qrimage.options import RenderOptions
from qrimage.symbol import Symbol

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
INCHES_PER_METER = 100.0 / 2.54

_COLOR_TYPE_PALETTE = 3
_COLOR_TYPE_RGBA = 6
_RESOLUTION_METER = 1


def _chunk(tag: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(tag + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + tag + payload + struct.pack(">I", crc)


def _palette_rows(symbol: Symbol, options: RenderOptions) -> list[bytes]:
    size, margin = options.size, options.margin
    realwidth = (symbol.width + margin * 2) * size
    row_bytes = (realwidth + 7) // 8
    blank = b"\xff" * row_bytes
    padding = "1" * (row_bytes * 8 - realwidth)
    side = "1" * (margin * size)

    rows = [blank] * (margin * size)
    for modules in symbol.rows():
        body = "".join(("0" if dark else "1") * size for dark in modules)
        bits = side + body + side + padding
        line = int(bits, 2).to_bytes(row_bytes, "big")
        rows.extend([line] * size)
    rows.extend([blank] * (margin * size))
    return rows


def _rgba_rows(symbol: Symbol, options: RenderOptions) -> list[bytes]:
    size, margin = options.size, options.margin
    realwidth = (symbol.width + margin * 2) * size
    fg = bytes(options.foreground) * size
    bg = bytes(options.background) * size
    blank = bytes(options.background) * realwidth
    side = bg * margin

    rows = [blank] * (margin * size)
    for modules in symbol.rows():
        line = side + b"".join(fg if dark else bg for dark in modules) + side
        rows.extend([line] * size)
    rows.extend([blank] * (margin * size))
    return rows


def render_png(symbol: Symbol, options: RenderOptions, truecolor: bool) -> bytes:
    """Encode the symbol as a PNG: 1-bit palette, or 8-bit RGBA when ``truecolor``."""
    realwidth = (symbol.width + options.margin * 2) * options.size
    if truecolor:
        ihdr = struct.pack(">IIBBBBB", realwidth, realwidth, 8, _COLOR_TYPE_RGBA, 0, 0, 0)
        rows = _rgba_rows(symbol, options)
    else:
        ihdr = struct.pack(">IIBBBBB", realwidth, realwidth, 1, _COLOR_TYPE_PALETTE, 0, 0, 0)
        rows = _palette_rows(symbol, options)

    chunks = [_chunk(b"IHDR", ihdr)]
    if not truecolor:
        fg, bg = options.foreground, options.background
        chunks.append(_chunk(b"PLTE", bytes(fg[:3]) + bytes(bg[:3])))
        chunks.append(_chunk(b"tRNS", bytes((fg[3], bg[3]))))
    ppm = int(options.dpi * INCHES_PER_METER)
    chunks.append(_chunk(b"pHYs", struct.pack(">IIB", ppm, ppm, _RESOLUTION_METER)))
    raw = b"".join(b"\x00" + row for row in rows)
    chunks.append(_chunk(b"IDAT", zlib.compress(raw)))
    chunks.append(_chunk(b"IEND", b""))
    return PNG_SIGNATURE + b"".join(chunks)


def _hex_rgb(color: tuple[int, int, int, int]) -> str:
    return "{:02x}{:02x}{:02x}".format(*color[:3])


def render_xpm(symbol: Symbol, options: RenderOptions) -> str:
    """Render the symbol as XPM text with the colours F and B."""
    size, margin = options.size, options.margin
    realwidth = (symbol.width + margin * 2) * size
    realmargin = margin * size

    lines = [
        "/* XPM */",
        "static const char *const qrcode_xpm[] = {",
        "/* width height ncolors chars_per_pixel */",
        f'"{realwidth} {realwidth} 2 1",',
        "/* colors */",
        f'"F c #{_hex_rgb(options.foreground)}",',
        f'"B c #{_hex_rgb(options.background)}",',
        "/* pixels */",
    ]
    margin_row = "B" * realwidth
    lines.extend([f'"{margin_row}",'] * realmargin)

    side = "B" * realmargin
    for modules in symbol.rows():
        body = "".join(("F" if dark else "B") * size for dark in modules)
        lines.extend([f'"{side}{body}{side}",'] * size)

    lines.extend(
        f'"{margin_row}"' + ("," if y < size - 1 else "};") for y in range(realmargin)
    )
    return "\n".join(lines) + "\n"