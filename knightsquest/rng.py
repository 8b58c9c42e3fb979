"""A table of pre-drawn random bytes handed out in turn."""

from __future__ import annotations

TABLE_SIZE = 64


class RandomTable:
    """Sixty-four random bytes, returned one after another and then repeated."""

    def __init__(self, values=None) -> None:
        table = [0] * TABLE_SIZE if values is None else list(values)
        if len(table) != TABLE_SIZE:
            raise ValueError(f"a random table holds {TABLE_SIZE} values, got {len(table)}")
        for value in table:
            if not 0 <= value <= 0xFF:
                raise ValueError(f"random values must fit in a byte, got {value}")
        self.values: tuple[int, ...] = tuple(table)
        self.index = 0

    @classmethod
    def seeded(cls, source) -> RandomTable:
        """Fill a table by calling `source` once per entry; each call returns a byte."""
        return cls(source() & 0xFF for _ in range(TABLE_SIZE))

    def next(self) -> int:
        """Return the next value, wrapping to the start after the last one."""
        value = self.values[self.index]
        self.index = (self.index + 1) % TABLE_SIZE
        return value