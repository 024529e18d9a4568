import pytest

from fdfview.colours import average_colour, hex_to_int, line_colour, rgb_int

COLOURS = ["FFFFFF", "000000", "FF0000", "00ff00", "0000Ff", "123abc"]


@pytest.mark.parametrize("colour", COLOURS)
def test_hex_to_int_is_opaque(colour):
    assert hex_to_int(colour) & 0xFF == 255


@pytest.mark.parametrize("colour", COLOURS)
def test_hex_to_int_matches_standard_parse(colour):
    assert hex_to_int(colour) >> 8 == int(colour, 16)


def test_hex_to_int_case_insensitive():
    assert hex_to_int("abcdef") == hex_to_int("ABCDEF")


def test_hex_to_int_reads_six_characters_only():
    assert hex_to_int("FFFFFF00") == hex_to_int("FFFFFF")


def test_hex_to_int_skips_non_hex():
    assert hex_to_int("0xFF") == hex_to_int("FF")


def test_rgb_int_values():
    assert rgb_int("ff") == 255
    assert rgb_int("FF") == rgb_int("ff")
    assert rgb_int("") == 0
    assert rgb_int("zz") == 0


@pytest.mark.parametrize("colour", COLOURS)
def test_average_of_same_colour(colour):
    assert average_colour(colour, colour) == hex_to_int(colour)


@pytest.mark.parametrize("a,b", [("FF0000", "00FF00"), ("123456", "ABCDEF")])
def test_average_is_symmetric(a, b):
    assert average_colour(a, b) == average_colour(b, a)


def test_average_midpoint():
    assert average_colour("000000", "FEFEFE") == hex_to_int("7F7F7F")


def test_average_rounds_down():
    assert average_colour("000000", "010101") == hex_to_int("000000")


def test_average_short_strings():
    assert average_colour("FF", "FF") == hex_to_int("FF")


def test_line_colour_equal():
    assert line_colour("FF0000", "FF0000") == hex_to_int("FF0000")


def test_line_colour_different():
    assert line_colour("000000", "FEFEFE") == average_colour("000000", "FEFEFE")
    assert line_colour("FF0000", "0000FF") == line_colour("0000FF", "FF0000")