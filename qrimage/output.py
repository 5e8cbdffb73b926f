"""Choosing a renderer for an image type and writing the result out."""

from __future__ import annotations

import sys

from qrimage.options import ImageType, RenderOptions
from qrimage.raster import render_png, render_xpm
from qrimage.symbol import Symbol
from qrimage.text import render_ansi, render_ascii, render_utf8
from qrimage.vector import render_eps, render_svg

_STRUCTURED_SUFFIXES = {
    ImageType.PNG: ".png",
    ImageType.EPS: ".eps",
    ImageType.SVG: ".svg",
    ImageType.XPM: ".xpm",
    ImageType.ANSI: ".txt",
    ImageType.ANSI256: ".txt",
    ImageType.ASCII: ".txt",
    ImageType.UTF8: ".txt",
    ImageType.ANSIUTF8: ".txt",
    ImageType.UTF8_INVERTED: ".txt",
    ImageType.ANSIUTF8_INVERTED: ".txt",
}


def _render_text(symbol: Symbol, image_type: ImageType, options: RenderOptions) -> str:
    if image_type is ImageType.EPS:
        return render_eps(symbol, options)
    if image_type is ImageType.SVG:
        return render_svg(symbol, options)
    if image_type is ImageType.XPM:
        return render_xpm(symbol, options)
    if image_type is ImageType.ANSI:
        return render_ansi(symbol, options, False)
    if image_type is ImageType.ANSI256:
        return render_ansi(symbol, options, True)
    if image_type is ImageType.ASCII:
        return render_ascii(symbol, options, False)
    if image_type is ImageType.ASCII_INVERTED:
        return render_ascii(symbol, options, True)
    if image_type is ImageType.UTF8:
        return render_utf8(symbol, options, 0, False)
    if image_type is ImageType.ANSIUTF8:
        return render_utf8(symbol, options, 1, False)
    if image_type is ImageType.ANSI256UTF8:
        return render_utf8(symbol, options, 2, False)
    if image_type is ImageType.UTF8_INVERTED:
        return render_utf8(symbol, options, 0, True)
    if image_type is ImageType.ANSIUTF8_INVERTED:
        return render_utf8(symbol, options, 1, True)
    raise ValueError("Unknown image type.")


def render(symbol: Symbol, image_type: ImageType, options: RenderOptions) -> bytes:
    """Render ``symbol`` as ``image_type`` and return the file contents."""
    if not isinstance(image_type, ImageType):
        raise ValueError("Unknown image type.")
    if image_type is ImageType.PNG:
        return render_png(symbol, options, False)
    if image_type is ImageType.PNG32:
        return render_png(symbol, options, True)
    return _render_text(symbol, image_type, options).encode("utf-8")


def structured_filenames(outfile: str | None, image_type: ImageType, count: int) -> list[str]:
    """Name the files of a structured-append series: ``BASE-01.ext``, ``BASE-02.ext``, ...

    A type suffix already on ``outfile`` (in any case) is moved after the number;
    otherwise the names carry no suffix.
    """
    type_suffix = _STRUCTURED_SUFFIXES.get(image_type)
    if type_suffix is None:
        raise ValueError("Unknown image type.")
    if outfile is None:
        raise ValueError(
            "An output filename must be specified to store the structured images."
        )
    if count < 0:
        raise ValueError(f"Invalid number of symbols: {count}")

    base, suffix = outfile, ""
    if len(outfile) > len(type_suffix):
        tail = outfile[-len(type_suffix):]
        if tail.lower() == type_suffix:
            base, suffix = outfile[:-len(type_suffix)], tail
    return [f"{base}-{index:02d}{suffix}" for index in range(1, count + 1)]


def write_output(data: bytes | str, outfile: str | None) -> None:
    """Write ``data`` to ``outfile``, or to standard output when it is None or ``-``."""
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if outfile is None or outfile == "-":
        stream = sys.stdout.buffer
        stream.write(payload)
        stream.flush()
        return
    try:
        with open(outfile, "wb") as handle:
            handle.write(payload)
    except OSError as exc:
        raise OSError(f"Failed to create file: {outfile}: {exc.strerror or exc}") from exc