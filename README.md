# qrimage

`qrimage` turns an already encoded QR Code module matrix into an image.
It uses only the standard library and writes:

- raster images: 1-bit palette PNG, 8-bit RGBA PNG, XPM
- vector images: EPS and SVG (one rectangle per module, run-length
  rectangles, or a single path; with or without the XML declaration)
- terminal text: ANSI background colours (basic or 256-colour), ASCII art
  (normal or inverted) and UTF-8 half blocks (plain, ANSI-coloured,
  inverted)

## What it does not do

`qrimage` does not encode text or data into a QR Code. You supply the
finished module matrix, for example from another encoder. There is no
command-line program; everything is done through the Python API below.

## Building a symbol

A `Symbol` (in `qrimage.symbol`) holds a version number and a square grid
of modules. `Symbol.from_rows` takes rows of integer-like cell values; a
cell is dark when its lowest bit is set. The grid must be square and non-empty,
otherwise `ValueError` is raised.

```python
from qrimage.symbol import Symbol

symbol = Symbol.from_rows(1, rows)   # rows: 21 sequences of 21 cells
symbol.is_dark(0, 0)                 # True if the top-left module is dark
for row in symbol.rows():            # tuples of booleans, top to bottom
    ...
```

`is_dark` raises `IndexError` for coordinates outside the symbol.

## Options

`RenderOptions` (in `qrimage.options`) is a frozen dataclass:

| field        | default              | meaning                                   |
|--------------|----------------------|-------------------------------------------|
| `size`       | 3                    | module size in pixels (must be > 0)       |
| `margin`     | 4                    | quiet zone in modules (must be >= 0)      |
| `dpi`        | 72                   | resolution for PNG and SVG (must be >= 0) |
| `foreground` | `(0, 0, 0, 255)`     | RGBA colour of dark modules               |
| `background` | `(255, 255, 255, 255)` | RGBA colour of light modules            |
| `rle`        | `False`              | SVG: merge horizontal runs of dark modules |
| `svg_path`   | `False`              | SVG: draw all modules as one path         |
| `inline_svg` | `False`              | SVG: leave out the XML declaration        |

Invalid values raise `ValueError`. For Micro QR symbols pass `margin=2`
yourself; the default is 4 for every symbol.

`parse_color` reads `RRGGBB` or `RRGGBBAA` hexadecimal strings into an RGBA
tuple (alpha 255 when omitted) and raises `ValueError` on anything else.

## Rendering

`ImageType.parse` accepts `PNG`, `PNG32`, `EPS`, `SVG`, `XPM`, `ANSI`,
`ANSI256`, `ASCII`, `ASCIIi`, `UTF8`, `UTF8i`, `ANSIUTF8`, `ANSIUTF8i` and
`ANSI256UTF8`, ignoring case; unknown names raise `ValueError`.

```python
from qrimage.options import ImageType, RenderOptions, parse_color
from qrimage.output import render, write_output

options = RenderOptions(foreground=parse_color("003366"))
data = render(symbol, ImageType.parse("svg"), options)   # bytes
write_output(data, "code.svg")     # "-" or None writes to standard output
```

`render` returns the file contents as bytes; text formats are UTF-8
encoded. `write_output` accepts bytes or text and raises `OSError` when the
file cannot be created.

The renderers can also be called directly:

```python
from qrimage.raster import render_png, render_xpm
from qrimage.vector import render_eps, render_svg
from qrimage.text import render_ansi, render_ascii, render_utf8

png = render_png(symbol, options, truecolor=False)   # bytes
xpm = render_xpm(symbol, options)                    # str
art = render_ascii(symbol, options, invert=True)     # str
ansi = render_ansi(symbol, options, use_256=True)    # str
blocks = render_utf8(symbol, options, ansi=0, invert=False)  # str
```

The text renderers ignore `size`: ANSI and ASCII output use two characters
per module, UTF-8 output packs two module rows into each line (and so uses
`margin // 2` margin lines above and below). `render_utf8` takes `ansi` as
0 (no colour codes), 1 (basic colours) or 2 (256 colours).

## Structured append

When a message is split across several symbols, `structured_filenames`
produces the output names. If the name ends in the type's suffix (in any
case), that suffix is moved after the number; otherwise the names carry no
suffix.

```python
from qrimage.output import structured_filenames

structured_filenames("out.png", ImageType.parse("png"), 3)
# ['out-01.png', 'out-02.png', 'out-03.png']
```

PNG, EPS, SVG and XPM use `.png`, `.eps`, `.svg` and `.xpm`; ANSI, ANSI256,
ASCII, UTF8, ANSIUTF8, UTF8i and ANSIUTF8i use `.txt`. PNG32, ASCIIi and
ANSI256UTF8 are not supported for structured output, and a missing file
name (`None`) is refused; both raise `ValueError`.