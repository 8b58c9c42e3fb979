"""The room layout of a level: exits, wall decorations and per-room flags.

A world file is a sequence of eleven-byte room records::

    N, E, S, W, wall0..wall4, south-door slot, flags

Exits hold room numbers starting at 1, and 0 means no exit. The south-door slot
is 1-based. The flags byte records what the room still holds.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

ROOM_SIZE = 11
WALL_SLOTS = 5
ROOM_COUNT = 23
WORLD_SIZE = ROOM_COUNT * ROOM_SIZE
ESCAPE_ROOMS = 20
LEVEL_EXIT = 0xFF
OPEN_DOOR = 0x01
LOCKED_DOOR = 0x0F


class RoomFlag(enum.IntFlag):
    """Bits of the last byte of a room record."""

    NONE = 0x00
    PRINCESS = 0x01
    SPARE1 = 0x02
    SPARE2 = 0x04
    KEY = 0x08
    HEALTHPACK = 0x10
    TREASURE = 0x20
    MONSTER = 0x40
    UNVISITED = 0x80


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in a byte, got {value}")
    return value


@dataclass
class Room:
    """One room: its four exits, five wall slots, south door and flags."""

    north: int = 0
    east: int = 0
    south: int = 0
    west: int = 0
    walls: list[int] = field(default_factory=lambda: [0] * WALL_SLOTS)
    south_door: int = 0
    flags: RoomFlag = RoomFlag.NONE

    def __post_init__(self) -> None:
        self.walls = list(self.walls)
        if len(self.walls) != WALL_SLOTS:
            raise ValueError(f"a room has {WALL_SLOTS} wall slots, got {len(self.walls)}")
        self.flags = RoomFlag(self.flags)

    @classmethod
    def from_bytes(cls, data) -> Room:
        """Build a room from its eleven-byte record."""
        raw = bytes(data)
        if len(raw) != ROOM_SIZE:
            raise ValueError(f"a room record is {ROOM_SIZE} bytes, got {len(raw)}")
        north, east, south, west = raw[:4]
        return cls(
            north=north,
            east=east,
            south=south,
            west=west,
            walls=list(raw[4:4 + WALL_SLOTS]),
            south_door=raw[9],
            flags=RoomFlag(raw[10]),
        )

    def to_bytes(self) -> bytes:
        """Return the eleven-byte record of this room."""
        values = [self.north, self.east, self.south, self.west, *self.walls,
                  self.south_door, int(self.flags)]
        return bytes(_check_byte("room field", v) for v in values)


class World:
    """All rooms of a level, addressed by room number starting at 1."""

    def __init__(self, rooms) -> None:
        self.rooms: list[Room] = list(rooms)
        if not self.rooms:
            raise ValueError("a world needs at least one room")

    @classmethod
    def from_bytes(cls, data) -> World:
        """Parse a world file made of whole room records."""
        raw = bytes(data)
        if not raw or len(raw) % ROOM_SIZE:
            raise ValueError(
                f"world data must be a non-empty multiple of {ROOM_SIZE} bytes, got {len(raw)}"
            )
        return cls(Room.from_bytes(raw[i:i + ROOM_SIZE]) for i in range(0, len(raw), ROOM_SIZE))

    def to_bytes(self) -> bytes:
        """Return the world file contents."""
        return b"".join(room.to_bytes() for room in self.rooms)

    def room(self, number: int) -> Room:
        """Return the room with the given number (1-based)."""
        if not 1 <= number <= len(self.rooms):
            raise IndexError(f"no room number {number}")
        return self.rooms[number - 1]

    def set_flag(self, number: int, flag: RoomFlag) -> None:
        """Turn a flag on in a room."""
        room = self.room(number)
        room.flags |= RoomFlag(flag)

    def clear_flag(self, number: int, flag: RoomFlag) -> None:
        """Turn a flag off in a room."""
        room = self.room(number)
        room.flags &= ~RoomFlag(flag)

    def unlock_door(self, number: int) -> int:
        """Turn every locked door in a room into an open one; return how many."""
        room = self.room(number)
        unlocked = 0
        for slot, thing in enumerate(room.walls):
            if thing == LOCKED_DOOR:
                room.walls[slot] = OPEN_DOOR
                unlocked += 1
        return unlocked

    def start_escape(self) -> None:
        """Open the way out of the level and fill the castle with monsters.

        Room 1's north exit leads out of the level through a door in its middle
        wall slot. Every one of the first twenty rooms gains a monster and loses
        its health pack.
        """
        first = self.room(1)
        first.north = LEVEL_EXIT
        first.walls[2] = OPEN_DOOR
        for room in self.rooms[:ESCAPE_ROOMS]:
            room.flags = (room.flags | RoomFlag.MONSTER) & ~RoomFlag.HEALTHPACK