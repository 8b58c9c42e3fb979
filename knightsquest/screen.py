"""A multicolour bitmap screen of 40x25 character cells."""

from __future__ import annotations

from .font import GLYPH_HEIGHT, digit_glyph, glyph_for

WIDTH = 40
HEIGHT = 25
CELLS = WIDTH * HEIGHT
BITMAP_SIZE = CELLS * GLYPH_HEIGHT
CLEAR_COLOUR = 0x06
_CLEARED_BITMAP_BYTES = 0x1FF8


class Screen:
    """Bitmap, screen memory (colours 01/10) and colour memory (colour 11)."""

    def __init__(self) -> None:
        self.bitmap = bytearray(BITMAP_SIZE)
        self.screen_ram = bytearray(CELLS)
        self.colour_ram = bytearray(CELLS)

    @staticmethod
    def _offset(x: int, y: int, width: int = 1) -> int:
        if not (0 <= y < HEIGHT and 0 <= x):
            raise ValueError(f"cell ({x}, {y}) is off the screen")
        offset = x + y * WIDTH
        if offset + width > CELLS:
            raise ValueError(f"cell ({x}, {y}) is off the screen")
        return offset

    def clear(self) -> None:
        """Set every cell's colour 11 to blue and blank the bitmap."""
        self.colour_ram[:] = bytes([CLEAR_COLOUR]) * CELLS
        self.bitmap[:_CLEARED_BITMAP_BYTES] = bytes(_CLEARED_BITMAP_BYTES)

    def plot_shape(self, shape, x, y, size, colour11, colour0110) -> None:
        """Draw a shape of `size` consecutive cells starting at cell (x, y)."""
        data = bytes(shape)
        if size < 0 or len(data) < size * GLYPH_HEIGHT:
            raise ValueError("shape data is shorter than the requested size")
        offset = self._offset(x, y, size)
        self.colour_ram[offset:offset + size] = bytes([colour11 & 0xFF]) * size
        self.screen_ram[offset:offset + size] = bytes([colour0110 & 0xFF]) * size
        start = offset * GLYPH_HEIGHT
        self.bitmap[start:start + size * GLYPH_HEIGHT] = data[: size * GLYPH_HEIGHT]

    def plot_glyph(self, glyph, x, y, text_colour, background) -> None:
        """Draw one eight-byte glyph in the given text and background colours."""
        data = bytes(glyph)
        if len(data) != GLYPH_HEIGHT:
            raise ValueError("a glyph must be eight bytes")
        offset = self._offset(x, y)
        self.colour_ram[offset] = background & 0xFF
        self.screen_ram[offset] = (text_colour << 4) & 0xFF
        start = offset * GLYPH_HEIGHT
        self.bitmap[start:start + GLYPH_HEIGHT] = data

    def print_text(self, text, x, y, text_colour, background) -> int:
        """Print text left to right from (x, y); return the column after it."""
        for column, ch in enumerate(text, start=x):
            self.plot_glyph(glyph_for(ch), column, y, text_colour, background)
        return x + len(text)

    def print_number(self, value, x, y, text_colour, background) -> int:
        """Print a number right-aligned so its last digit is at column x.

        Returns the column of the leftmost digit.
        """
        if value < 0:
            raise ValueError("only non-negative numbers can be printed")
        value &= 0xFFFF
        if value == 0:
            self.plot_glyph(digit_glyph(0), x, y, text_colour, background)
            return x
        column = x
        while value:
            value, digit = divmod(value, 10)
            self.plot_glyph(digit_glyph(digit), column, y, text_colour, background)
            column -= 1
        return column + 1

    def cell_colours(self, x, y) -> tuple[int, int]:
        """Return (colour 11, colours 01/10) for a cell."""
        offset = self._offset(x, y)
        return self.colour_ram[offset], self.screen_ram[offset]

    def cell_pixels(self, x, y) -> bytes:
        """Return the eight bitmap bytes of a cell."""
        start = self._offset(x, y) * GLYPH_HEIGHT
        return bytes(self.bitmap[start:start + GLYPH_HEIGHT])