import pytest

from knightsquest.font import LETTERS, DIGITS, digit_glyph, glyph_for, glyph_index


def test_letter_indices_follow_alphabet():
    assert glyph_index("A") == 0
    assert glyph_index("Z") == 25
    assert [glyph_index(c) for c in "ABC"] == [0, 1, 2]


def test_punctuation_indices():
    assert glyph_index(",") == 31
    assert glyph_index(")") == 30
    assert glyph_index("(") == 29
    assert glyph_index(".") == 28
    assert glyph_index(":") == 27
    assert glyph_index(" ") == 26


def test_glyph_for_letter_matches_table():
    assert glyph_for("A") == bytes([255, 223, 119, 119, 87, 119, 119, 119])
    assert glyph_for("Q") == LETTERS[glyph_index("Q")]


def test_glyph_for_digit_uses_digit_table():
    assert glyph_for("7") == digit_glyph(7)
    assert digit_glyph(1) == bytes([255, 223, 223, 223, 223, 223, 223, 223])


def test_every_printable_glyph_is_eight_rows():
    printable = "ABCDEFGHIJKLMNOPQRSTUVWXYZ :.(),"
    glyphs = [glyph_for(ch) for ch in printable]
    assert all(len(g) == 8 for g in glyphs)
    assert sorted(glyph_index(ch) for ch in printable) == list(range(len(LETTERS)))
    digits = [digit_glyph(d) for d in range(10)]
    assert all(len(g) == 8 for g in digits)
    assert digits == list(DIGITS)


@pytest.mark.parametrize("ch", ["a", "!", "", "AB", "@"])
def test_unknown_characters_raise(ch):
    with pytest.raises(ValueError):
        glyph_for(ch)


@pytest.mark.parametrize("digit", [-1, 10])
def test_digit_out_of_range(digit):
    with pytest.raises(ValueError):
        digit_glyph(digit)