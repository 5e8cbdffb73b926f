"""Vector renderers: Encapsulated PostScript and SVG."""

from __future__ import annotations

import struct
from itertools import groupby

from qrimage.options import Color, RenderOptions
from qrimage.raster import INCHES_PER_METER
from qrimage.symbol import Symbol

_SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _single(value: float) -> float:
    """Round ``value`` to single precision, the precision the measurements use."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _fraction(channel: int) -> str:
    return f"{_single(channel / 255):f}"


def _hex_rgb(color: Color) -> str:
    return "{:02x}{:02x}{:02x}".format(*color[:3])


def render_eps(symbol: Symbol, options: RenderOptions) -> str:
    """Render the symbol as an EPS document drawing one square per dark module."""
    size, margin, width = options.size, options.margin, symbol.width
    realwidth = (width + margin * 2) * size
    bg, fg = options.background, options.foreground

    parts = [
        "%!PS-Adobe-2.0 EPSF-1.2\n",
        f"%%BoundingBox: 0 0 {realwidth} {realwidth}\n",
        "%%Pages: 1 1\n",
        "%%EndComments\n",
        "/p { moveto 0 1 rlineto 1 0 rlineto 0 -1 rlineto fill } bind def\n",
        "gsave\n",
        f"{_fraction(bg[0])} {_fraction(bg[1])} {_fraction(bg[2])} setrgbcolor\n",
        f"{realwidth} {realwidth} scale\n",
        "0 0 p\ngrestore\n",
        f"{_fraction(fg[0])} {_fraction(fg[1])} {_fraction(fg[2])} setrgbcolor\n",
        f"{size} {size} scale\n",
    ]
    for y, modules in enumerate(symbol.rows()):
        yy = margin + width - y - 1
        parts.extend(f"{margin + x} {yy} p " for x, dark in enumerate(modules) if dark)
    parts.append("\n%%EOF\n")
    return "".join(parts)


def _dark_runs(modules: tuple[bool, ...], rle: bool) -> list[tuple[int, int]]:
    """Return (start, length) for each dark stretch of a row."""
    if not rle:
        return [(x, 1) for x, dark in enumerate(modules) if dark]
    runs = []
    position = 0
    for dark, group in groupby(modules):
        length = len(list(group))
        if dark:
            runs.append((position, length))
        position += length
    return runs


def render_svg(symbol: Symbol, options: RenderOptions) -> str:
    """Render the symbol as an SVG document."""
    margin, width = options.margin, symbol.width
    fg_color, bg_color = options.foreground, options.background
    symwidth = width + margin * 2
    realwidth = symwidth * options.size
    scale = _single(options.dpi * INCHES_PER_METER / 100.0)
    if scale == 0:
        physical = "inf"
    else:
        physical = f"{_single(realwidth / scale):.2f}"

    fg, bg = _hex_rgb(fg_color), _hex_rgb(bg_color)
    fg_opacity = f"{_single(fg_color[3] / 255):f}"
    bg_opacity = f"{_single(bg_color[3] / 255):f}"

    parts = []
    if not options.inline_svg:
        parts.append('<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n')
    parts.append("<!-- Created with qrimage -->\n")
    parts.append(
        f'<svg width="{physical}cm" height="{physical}cm" '
        f'viewBox="0 0 {symwidth} {symwidth}" preserveAspectRatio="none" '
        f'version="1.1" xmlns="{_SVG_NAMESPACE}">\n'
    )
    parts.append('\t<g id="QRcode">\n')

    if bg_color[3] != 255:
        parts.append(
            f'\t\t<rect x="0" y="0" width="{symwidth}" height="{symwidth}" '
            f'fill="#{bg}" fill-opacity="{bg_opacity}"/>\n'
        )
    else:
        parts.append(
            f'\t\t<rect x="0" y="0" width="{symwidth}" height="{symwidth}" fill="#{bg}"/>\n'
        )

    if options.svg_path:
        if fg_color[3] != 255:
            style = f"stroke:#{fg};stroke-opacity:{fg_opacity}"
        else:
            style = f"stroke:#{fg}"
        parts.append(
            f'\t\t<path style="{style}" transform="translate({margin},{margin}.5)" d="'
        )
    else:
        parts.append(f'\t\t<g id="Pattern" transform="translate({margin},{margin})">\n')

    for y, modules in enumerate(symbol.rows()):
        for x, run in _dark_runs(modules, options.rle):
            if options.svg_path:
                parts.append(f"M{x},{y}h{run}")
            elif fg_color[3] != 255:
                parts.append(
                    f'\t\t\t<rect x="{x}" y="{y}" width="{run}" height="1" '
                    f'fill="#{fg}" fill-opacity="{fg_opacity}"/>\n'
                )
            else:
                parts.append(
                    f'\t\t\t<rect x="{x}" y="{y}" width="{run}" height="1" fill="#{fg}"/>\n'
                )

    parts.append('"/>\n' if options.svg_path else "\t\t</g>\n")
    parts.append("\t</g>\n")
    parts.append("</svg>\n")
    return "".join(parts)