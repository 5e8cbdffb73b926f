"""Terminal and plain-text renderers: ANSI colours, ASCII art and UTF-8 blocks."""

from __future__ import annotations

from qrimage.options import RenderOptions
from qrimage.symbol import Symbol

RESET = "\033[0m"

_EMPTY = " "
_LOWER_HALF = "\u2584"
_UPPER_HALF = "\u2580"
_FULL = "\u2588"


def render_ansi(symbol: Symbol, options: RenderOptions, use_256: bool) -> str:
    """Render with terminal background colours, two spaces per module.

    The module size is always one cell; ``options.size`` is ignored.
    """
    if use_256:
        white, black = "\033[48;5;231m", "\033[48;5;16m"
    else:
        white, black = "\033[47m", "\033[40m"
    margin = options.margin
    realwidth = symbol.width + margin * 2

    margin_line = white + " " * (realwidth * 2) + RESET + "\n"
    side = "  " * margin
    lines = [margin_line] * margin
    for modules in symbol.rows():
        parts = [white, side]
        dark_pen = False
        for dark in modules:
            if dark != dark_pen:
                parts.append(black if dark else white)
                dark_pen = dark
            parts.append("  ")
        if dark_pen:
            parts.append(white)
        parts.append(side)
        parts.append(RESET + "\n")
        lines.append("".join(parts))
    lines.extend([margin_line] * margin)
    return "".join(lines)


def render_ascii(symbol: Symbol, options: RenderOptions, invert: bool) -> str:
    """Render with ``#`` and spaces, two characters per module."""
    black, white = (" ", "#") if invert else ("#", " ")
    margin = options.margin
    realwidth = (symbol.width + margin * 2) * 2

    margin_line = white * realwidth + "\n"
    side = white * (margin * 2)
    lines = [margin_line] * margin
    for modules in symbol.rows():
        body = "".join((black if dark else white) * 2 for dark in modules)
        lines.append(side + body + side + "\n")
    lines.extend([margin_line] * margin)
    return "".join(lines)


def render_utf8(symbol: Symbol, options: RenderOptions, ansi: int, invert: bool) -> str:
    """Render with half-block characters, two module rows per line.

    ``ansi`` is 0 for no colour codes, 1 for basic colours, 2 for 256 colours.
    """
    empty, lower, upper, full = _EMPTY, _LOWER_HALF, _UPPER_HALF, _FULL
    if invert:
        empty, full = full, empty
        lower, upper = upper, lower

    if ansi == 0:
        white, reset = "", ""
    elif ansi == 1:
        white, reset = "\033[40;37;1m", RESET
    elif ansi == 2:
        white, reset = "\033[38;5;231m\033[48;5;16m", RESET
    else:
        raise ValueError(f"Invalid ANSI colour mode: {ansi}")

    margin = options.margin
    width = symbol.width
    realwidth = width + margin * 2
    margin_line = white + full * realwidth + reset + "\n"
    side = full * margin

    rows = list(symbol.rows())
    blank_row = (False,) * width
    lines = [margin_line] * (margin // 2)
    for y in range(0, width, 2):
        top = rows[y]
        bottom = rows[y + 1] if y + 1 < width else blank_row
        cells = []
        for upper_dark, lower_dark in zip(top, bottom):
            if upper_dark:
                cells.append(empty if lower_dark else lower)
            else:
                cells.append(upper if lower_dark else full)
        lines.append(white + side + "".join(cells) + side + reset + "\n")
    lines.extend([margin_line] * (margin // 2))
    return "".join(lines)