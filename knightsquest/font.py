"""The bitmap font used for on-screen text: letters, punctuation and digits.

Each glyph is eight bytes, one per pixel row of a character cell.
"""

from __future__ import annotations

GLYPH_HEIGHT = 8

_DIGIT_ROWS = (
    (255, 223, 119, 119, 119, 119, 119, 223),
    (255, 223, 223, 223, 223, 223, 223, 223),
    (255, 223, 119, 247, 223, 127, 127, 87),
    (255, 223, 119, 247, 223, 247, 119, 223),
    (255, 247, 119, 119, 87, 247, 247, 247),
    (255, 87, 127, 127, 95, 247, 119, 223),
    (255, 223, 119, 127, 95, 119, 119, 223),
    (255, 87, 247, 247, 247, 223, 223, 223),
    (255, 223, 119, 119, 223, 119, 119, 223),
    (255, 223, 119, 119, 215, 247, 247, 247),
)

_LETTER_ROWS = (
    (255, 223, 119, 119, 87, 119, 119, 119),  # A
    (255, 95, 119, 119, 95, 119, 119, 95),  # B
    (255, 223, 119, 127, 127, 127, 119, 223),  # C
    (255, 95, 119, 119, 119, 119, 119, 95),  # D
    (255, 87, 127, 127, 95, 127, 127, 87),  # E
    (255, 87, 127, 127, 95, 127, 127, 127),  # F
    (255, 223, 119, 127, 87, 119, 119, 223),  # G
    (255, 119, 119, 119, 87, 119, 119, 119),  # H
    (255, 87, 223, 223, 223, 223, 223, 87),  # I
    (255, 247, 247, 247, 119, 119, 119, 223),  # J
    (255, 119, 119, 95, 119, 119, 119, 119),  # K
    (255, 127, 127, 127, 127, 127, 127, 87),  # L
    (255, 119, 87, 87, 119, 119, 119, 119),  # M
    (255, 255, 255, 127, 87, 119, 119, 119),  # N
    (255, 223, 119, 119, 119, 119, 119, 223),  # O
    (255, 95, 119, 119, 95, 127, 127, 127),  # P
    (255, 223, 119, 119, 119, 119, 119, 221),  # Q
    (255, 95, 119, 119, 95, 119, 119, 119),  # R
    (255, 223, 119, 127, 223, 247, 119, 223),  # S
    (255, 87, 223, 223, 223, 223, 223, 223),  # T
    (255, 119, 119, 119, 119, 119, 119, 223),  # U
    (255, 119, 119, 119, 119, 119, 223, 223),  # V
    (255, 119, 119, 119, 87, 87, 119, 119),  # W
    (255, 119, 119, 119, 223, 119, 119, 119),  # X
    (255, 119, 119, 119, 223, 223, 223, 223),  # Y
    (255, 87, 247, 247, 223, 127, 127, 87),  # Z
    (255, 255, 255, 255, 255, 255, 255, 255),  # space
    (255, 255, 223, 223, 255, 223, 223, 255),  # colon
    (255, 255, 255, 255, 255, 255, 127, 127),  # period
    (247, 223, 223, 223, 223, 223, 223, 247),  # (
    (223, 247, 247, 247, 247, 247, 247, 223),  # )
    (255, 255, 255, 255, 255, 255, 223, 127),  # comma
)

DIGITS: tuple[bytes, ...] = tuple(bytes(rows) for rows in _DIGIT_ROWS)
LETTERS: tuple[bytes, ...] = tuple(bytes(rows) for rows in _LETTER_ROWS)
SPACE: bytes = bytes([255] * GLYPH_HEIGHT)

_PUNCTUATION = {",": 31, ")": 30, "(": 29, ".": 28, ":": 27, " ": 26}


def glyph_index(ch: str) -> int:
    """Return the position of a letter or punctuation mark in the letter table."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch in _PUNCTUATION:
        return _PUNCTUATION[ch]
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A")
    raise ValueError(f"no glyph for character {ch!r}")


def digit_glyph(digit: int) -> bytes:
    """Return the glyph for a decimal digit 0-9."""
    if not 0 <= digit <= 9:
        raise ValueError(f"digit out of range: {digit}")
    return DIGITS[digit]


def glyph_for(ch: str) -> bytes:
    """Return the glyph for any printable character: a letter, digit or punctuation."""
    if len(ch) == 1 and ch.isdigit() and ch.isascii():
        return digit_glyph(int(ch))
    return LETTERS[glyph_index(ch)]