import string

import pytest

from mcukit.font import CHAR_HEIGHT, CHAR_WIDTH, glyph


def test_capital_a_columns():
    assert glyph("A") == bytes([0x7C, 0x24, 0x24, 0x24, 0x7C, 0x00])


def test_space_is_blank():
    assert glyph(" ") == bytes(CHAR_WIDTH)


def test_underscore_fills_last_column():
    assert glyph("_") == bytes([0x40] * 6)


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_lowercase_shares_uppercase_shape(letter):
    assert glyph(letter) == glyph(letter.upper())


@pytest.mark.parametrize("character", [chr(c) for c in range(0x20, 0x80)])
def test_every_glyph_has_full_width_and_fits_height(character):
    columns = glyph(character)
    assert len(columns) == CHAR_WIDTH
    assert all(column < (1 << CHAR_HEIGHT) for column in columns)


def test_control_character_indexes_table_directly():
    assert glyph("\n") == glyph("*")


def test_character_outside_table_rejected():
    with pytest.raises(ValueError):
        glyph("\x80")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        glyph("AB")