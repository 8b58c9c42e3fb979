"""Level sprite files and the files that hold a level's data on disk.

A sprite file starts with an eleven-byte header:

    multicolour mask, shared colour 1, shared colour 2, eight sprite colours

The sprite frames follow, 64 bytes each. The game loads them so that the first
frame has sprite pointer 0x20. A level's files are named SPRITES<n> and
WORLD<n>, where <n> is the character whose code is 0x30 plus the level.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .world import World

SPRITE_COLOURS = 8
HEADER_SIZE = 3 + SPRITE_COLOURS
FRAME_SIZE = 64
FIRST_POINTER = 0x20
_LEVEL_CHAR_BASE = 0x30
_LAST_LEVEL_CHAR = 0x7E


def _byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in a byte, got {value}")
    return value


@dataclass
class SpriteSet:
    """The sprite colours and frames of one level."""

    multicolour: int
    shared_colours: tuple[int, int]
    colours: tuple[int, ...]
    data: bytes = b""

    def __post_init__(self) -> None:
        _byte("multicolour mask", self.multicolour)
        self.shared_colours = tuple(self.shared_colours)
        if len(self.shared_colours) != 2:
            raise ValueError("there are two shared sprite colours")
        for colour in self.shared_colours:
            _byte("shared colour", colour)
        self.colours = tuple(self.colours)
        if len(self.colours) != SPRITE_COLOURS:
            raise ValueError(f"there are {SPRITE_COLOURS} sprite colours, got {len(self.colours)}")
        for colour in self.colours:
            _byte("sprite colour", colour)
        self.data = bytes(self.data)

    @classmethod
    def from_bytes(cls, data) -> SpriteSet:
        """Parse the contents of a sprite file."""
        raw = bytes(data)
        if len(raw) < HEADER_SIZE:
            raise ValueError(f"a sprite file starts with a {HEADER_SIZE}-byte header")
        return cls(
            multicolour=raw[0],
            shared_colours=(raw[1], raw[2]),
            colours=tuple(raw[3:HEADER_SIZE]),
            data=raw[HEADER_SIZE:],
        )

    def to_bytes(self) -> bytes:
        """Return the contents of the sprite file."""
        header = bytes([self.multicolour, *self.shared_colours, *self.colours])
        return header + self.data

    @property
    def frame_count(self) -> int:
        """How many frames the data holds, counting a frame cut short."""
        return -(-len(self.data) // FRAME_SIZE)

    def frame(self, pointer: int) -> bytes:
        """Return the 64 bytes of the frame with the given sprite pointer.

        A frame cut short by the end of the data is padded with zero bytes.
        """
        index = pointer - FIRST_POINTER
        if not 0 <= index < self.frame_count:
            raise IndexError(f"no sprite frame with pointer {pointer}")
        chunk = self.data[index * FRAME_SIZE:(index + 1) * FRAME_SIZE]
        return chunk.ljust(FRAME_SIZE, b"\x00")


def _file_name(kind: str, level: int) -> str:
    code = _LEVEL_CHAR_BASE + level
    if level < 0 or code > _LAST_LEVEL_CHAR:
        raise ValueError(f"level out of range: {level}")
    return f"{kind}{chr(code)}"


def _paths(directory, level: int) -> tuple[Path, Path]:
    base = Path(directory)
    return base / _file_name("SPRITES", level), base / _file_name("WORLD", level)


def write_level_files(directory, level, sprites, world) -> tuple[Path, Path]:
    """Write a level's sprite and world files; return their paths."""
    sprites_path, world_path = _paths(directory, level)
    world_bytes = world.to_bytes() if isinstance(world, World) else bytes(world)
    World.from_bytes(world_bytes)
    sprites_path.write_bytes(sprites.to_bytes())
    world_path.write_bytes(world_bytes)
    return sprites_path, world_path


def read_level_files(directory, level) -> tuple[SpriteSet, World]:
    """Read a level's sprite and world files."""
    sprites_path, world_path = _paths(directory, level)
    return (SpriteSet.from_bytes(sprites_path.read_bytes()),
            World.from_bytes(world_path.read_bytes()))