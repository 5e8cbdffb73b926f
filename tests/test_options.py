import dataclasses

import pytest

from qrimage.options import ImageType, RenderOptions, parse_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("png", ImageType.PNG),
        ("PNG32", ImageType.PNG32),
        ("Svg", ImageType.SVG),
        ("ascii", ImageType.ASCII),
        ("asciii", ImageType.ASCII_INVERTED),
        ("ASCIII", ImageType.ASCII_INVERTED),
        ("utf8i", ImageType.UTF8_INVERTED),
        ("ansi256utf8", ImageType.ANSI256UTF8),
        ("ansiutf8i", ImageType.ANSIUTF8_INVERTED),
    ],
)
def test_parse_image_type_is_case_insensitive(name, expected):
    assert ImageType.parse(name) is expected


def test_every_type_parses_from_its_own_name():
    for member in ImageType:
        assert ImageType.parse(member.value) is member
        assert ImageType.parse(member.value.upper()) is member


def test_unknown_image_type_raises():
    with pytest.raises(ValueError, match="Invalid image type: gif"):
        ImageType.parse("gif")


def test_parse_color_six_digits_is_opaque():
    assert parse_color("ff8000") == (255, 128, 0, 255)


def test_parse_color_eight_digits_keeps_alpha():
    assert parse_color("10203040") == (16, 32, 48, 64)


def test_parse_color_accepts_upper_case():
    assert parse_color("ABCDEF") == parse_color("abcdef")


@pytest.mark.parametrize("value", ["", "fff", "fffff", "fffffff", "fffffffff", "gg0000", "12 456"])
def test_parse_color_rejects_bad_values(value):
    with pytest.raises(ValueError):
        parse_color(value)


def test_default_options_follow_command_defaults():
    options = RenderOptions()
    assert options.size == 3
    assert options.dpi == 72
    assert options.foreground == (0, 0, 0, 255)
    assert options.background == (255, 255, 255, 255)
    assert not options.rle and not options.svg_path and not options.inline_svg


@pytest.mark.parametrize(
    "field, value, message",
    [("size", 0, "Invalid size"), ("size", -2, "Invalid size"),
     ("margin", -1, "Invalid margin"), ("dpi", -1, "Invalid DPI")],
)
def test_invalid_geometry_raises(field, value, message):
    with pytest.raises(ValueError, match=message):
        RenderOptions(**{field: value})


def test_invalid_color_raises():
    with pytest.raises(ValueError):
        RenderOptions(foreground=(0, 0, 300, 255))


def test_options_are_immutable_but_replaceable():
    options = RenderOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.size = 5
    bigger = dataclasses.replace(options, size=5)
    assert bigger.size == 5
    assert options.size == 3