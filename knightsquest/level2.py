"""The sprites and castle layout of level two, where a ghost haunts the halls."""

from __future__ import annotations

from . import level1
from .spritefile import FIRST_POINTER, FRAME_SIZE, SpriteSet
from .world import Room, World

SPRITE_FILE_SIZE = 0x0840

_HEADER = (0x37, 0x0F, 0x00, 0x09, 0x09, 0x09, 0x07, 0x02, 0x0A, 0x0C, 0x00)

# The knight's frames (32-48) are shared with level one.
_KNIGHT_POINTERS = range(FIRST_POINTER, 49)
_TREASURE_POINTER = 61
_HEALTHPACK_POINTER = 62

_BLANK = bytes(FRAME_SIZE)

_GHOST = bytes((
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 16, 0, 0, 100, 0, 1, 169, 0, 1, 169, 0,
    0, 32, 0, 1, 69, 0, 4, 84, 64, 16, 84, 16, 128, 252, 8, 1, 85, 0,
    5, 85, 64, 5, 85, 64, 21, 85, 80, 0, 0, 0, 48, 192, 192, 12, 48, 48,
    48, 48, 192, 0, 12, 0, 0,
))

_GHOST_STEP = bytes((
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 16, 0, 0, 100, 0, 1, 169, 0, 1, 169, 0,
    0, 32, 0, 1, 69, 0, 4, 84, 64, 16, 84, 16, 128, 252, 8, 1, 85, 0,
    5, 85, 64, 5, 85, 64, 21, 85, 80, 0, 0, 0, 48, 192, 192, 48, 195, 0,
    12, 204, 0, 48, 3, 0, 0,
))

_GHOST_ATTACK = bytes((
    0, 0, 0, 0, 0, 0, 0, 0, 0, 32, 16, 32, 16, 100, 16, 17, 169, 16,
    17, 169, 16, 16, 32, 16, 5, 69, 64, 0, 84, 0, 0, 84, 0, 0, 252, 0,
    1, 85, 0, 5, 85, 64, 5, 85, 64, 21, 85, 80, 0, 0, 0, 48, 192, 192,
    48, 195, 0, 12, 204, 0, 48, 3, 0, 0,
))

_ORB = bytes((
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 85, 0, 6, 149, 160, 21, 101, 148,
    45, 93, 124, 117, 90, 121, 107, 106, 149, 109, 106, 85, 122, 89, 117,
    47, 235, 236, 42, 235, 184, 10, 235, 240, 0, 85, 0,
)) + bytes(16)

_KEY = bytes((48, 0, 0, 72, 0, 0, 135, 255, 128, 133, 85, 0, 72, 81, 0,
              49, 219, 128)) + bytes(46)

_ROOMS = (
    # N   E   S   W    walls                    south door  flags
    (0, 2, 0, 4, 3, 11, 0x0F, 7, 3, 0, 0x08),  # 1
    (0, 3, 0, 1, 0, 4, 0, 2, 18, 0, 0x41),  # 2
    (0, 4, 0, 6, 0, 3, 3, 3, 0, 0, 0x40),  # 3
    (0, 1, 0, 3, 0, 0, 2, 0, 0, 0, 0x40),  # 4
    (0, 6, 0, 8, 3, 7, 0x0F, 11, 3, 0, 0x00),  # 5
    (0, 7, 0, 5, 0, 4, 2, 0, 0, 0, 0x40),  # 6
    (0, 8, 0, 6, 0, 3, 0, 3, 0, 0, 0x48),  # 7
    (0, 5, 0, 11, 0, 0, 2, 0, 0, 0, 0x40),  # 8
    (0, 2, 13, 12, 0, 11, 0x0F, 7, 0, 3, 0x00),  # 9
    (0, 11, 0, 9, 0, 2, 0, 4, 0, 0, 0x40),  # 10
    (0, 12, 0, 10, 3, 0, 3, 0, 3, 0, 0x40),  # 11
    (20, 9, 0, 11, 0, 0, 2, 0, 0, 0, 0x40),  # 12
    (9, 0, 0, 16, 12, 3, 0x01, 3, 12, 0, 0x40),  # 13
    (0, 0, 18, 0, 14, 14, 14, 14, 14, 1, 0x41),  # 14
    (0, 14, 19, 0, 0, 0, 0, 0, 0, 0, 0x40),  # 15
    (0, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0x40),  # 16
    (0, 0, 0, 20, 0, 0, 0, 0, 0, 0, 0xC0),  # 17
    (14, 19, 0, 0, 2, 2, 0x0F, 2, 2, 0, 0x40),  # 18
    (15, 20, 0, 18, 0, 0, 0, 0, 0, 0, 0x40),  # 19
    (0, 17, 13, 19, 0, 0, 0, 0, 0, 0, 0x40),  # 20
    (0, 23, 0, 0, 2, 1, 2, 0, 0, 0, 0xD0),  # 21, unused
    (0, 23, 0, 21, 2, 3, 2, 3, 2, 0, 0xE0),  # 22, unused
    (0, 0, 0, 22, 3, 2, 3, 2, 3, 0, 0xFF),  # 23, unused
)


def _frames() -> list[bytes]:
    shared = level1.sprite_set()
    frames = [shared.frame(pointer) for pointer in _KNIGHT_POINTERS]
    frames += [
        _GHOST, _BLANK, _GHOST_STEP,  # ghost moving left (49-51)
        _GHOST, _BLANK, _GHOST_STEP,  # ghost moving right (52-54)
        _GHOST, _BLANK,  # ghost moving up (55-56)
        _GHOST, _BLANK,  # ghost moving down (57-58)
        _GHOST_ATTACK, _GHOST_ATTACK,  # ghost attacking left and right (59-60)
        shared.frame(_TREASURE_POINTER),
        shared.frame(_HEALTHPACK_POINTER),
        _ORB,  # the objective (63)
        _KEY,  # single colour key (64)
    ]
    return frames


def _sprite_bytes() -> bytes:
    raw = bytes(_HEADER) + b"".join(_frames())
    return raw[:SPRITE_FILE_SIZE]


def sprite_set() -> SpriteSet:
    """Return the level two sprite set as it is stored in its file."""
    return SpriteSet.from_bytes(_sprite_bytes())


def world() -> World:
    """Return a fresh copy of the level two castle."""
    return World(Room.from_bytes(bytes(record)) for record in _ROOMS)