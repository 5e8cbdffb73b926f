import pytest

from qrimage.options import ImageType, RenderOptions
from qrimage.output import render, structured_filenames, write_output
from qrimage.raster import PNG_SIGNATURE
from qrimage.symbol import Symbol
from qrimage.text import render_ascii, render_utf8
from qrimage.vector import render_svg


@pytest.fixture
def symbol():
    return Symbol.from_rows(1, [[1, 0, 1], [0, 1, 0], [1, 1, 0]])


@pytest.fixture
def options():
    return RenderOptions(size=2, margin=1)


@pytest.mark.parametrize("image_type", [ImageType.PNG, ImageType.PNG32])
def test_render_png_has_signature(symbol, options, image_type):
    data = render(symbol, image_type, options)
    assert data.startswith(PNG_SIGNATURE)
    assert data[12:16] == b"IHDR"


def test_render_png_and_png32_differ(symbol, options):
    assert render(symbol, ImageType.PNG, options) != render(symbol, ImageType.PNG32, options)


def test_render_ascii_matches_renderer(symbol, options):
    assert render(symbol, ImageType.ASCII, options) == render_ascii(symbol, options, False).encode()
    assert render(symbol, ImageType.ASCII_INVERTED, options) == render_ascii(
        symbol, options, True
    ).encode()


def test_render_utf8_variants(symbol, options):
    assert render(symbol, ImageType.ANSI256UTF8, options) == render_utf8(
        symbol, options, 2, False
    ).encode("utf-8")
    assert render(symbol, ImageType.ANSIUTF8_INVERTED, options) == render_utf8(
        symbol, options, 1, True
    ).encode("utf-8")


def test_render_svg_matches_renderer(symbol, options):
    assert render(symbol, ImageType.SVG, options) == render_svg(symbol, options).encode()


def test_render_eps_header(symbol, options):
    data = render(symbol, ImageType.EPS, options)
    assert data.startswith(b"%!PS-Adobe-2.0 EPSF-1.2\n")
    assert data.endswith(b"\n%%EOF\n")


def test_render_xpm_header(symbol, options):
    assert render(symbol, ImageType.XPM, options).startswith(b"/* XPM */\n")


@pytest.mark.parametrize("image_type", list(ImageType))
def test_every_type_renders_nonempty_bytes(symbol, options, image_type):
    assert len(render(symbol, image_type, options)) > 0


def test_render_rejects_unknown_type(symbol, options):
    with pytest.raises(ValueError):
        render(symbol, "PNG", options)


def test_structured_filenames_strip_suffix():
    assert structured_filenames("out.png", ImageType.PNG, 2) == ["out-01.png", "out-02.png"]


def test_structured_filenames_keep_suffix_case():
    assert structured_filenames("OUT.SVG", ImageType.SVG, 1) == ["OUT-01.SVG"]


def test_structured_filenames_without_suffix():
    names = structured_filenames("out", ImageType.EPS, 3)
    assert names == ["out-01", "out-02", "out-03"]


def test_structured_filenames_name_equal_to_suffix_is_kept():
    assert structured_filenames(".txt", ImageType.ASCII, 1) == [".txt-01"]


def test_structured_filenames_other_suffix_not_stripped():
    assert structured_filenames("out.eps", ImageType.PNG, 1) == ["out.eps-01"]


@pytest.mark.parametrize(
    "image_type", [ImageType.PNG32, ImageType.ASCII_INVERTED, ImageType.ANSI256UTF8]
)
def test_structured_filenames_unsupported_types(image_type):
    with pytest.raises(ValueError):
        structured_filenames("out.png", image_type, 2)


def test_structured_filenames_requires_outfile():
    with pytest.raises(ValueError):
        structured_filenames(None, ImageType.PNG, 2)


def test_write_output_file_round_trip(tmp_path, symbol, options):
    target = tmp_path / "code.png"
    data = render(symbol, ImageType.PNG, options)
    write_output(data, str(target))
    assert target.read_bytes() == data


def test_write_output_text(tmp_path):
    target = tmp_path / "code.txt"
    write_output("\u2588 \u2584", str(target))
    assert target.read_text(encoding="utf-8") == "\u2588 \u2584"


@pytest.mark.parametrize("outfile", [None, "-"])
def test_write_output_stdout(capsysbinary, outfile):
    write_output(b"abc\n", outfile)
    assert capsysbinary.readouterr().out == b"abc\n"


def test_write_output_unwritable(tmp_path):
    with pytest.raises(OSError):
        write_output(b"x", str(tmp_path / "missing" / "code.png"))