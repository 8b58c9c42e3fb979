import pytest

from knightsquest.world import (
    LEVEL_EXIT,
    ROOM_SIZE,
    Room,
    RoomFlag,
    World,
)

ROOM1 = bytes([0, 2, 0, 0, 4, 3, 15, 3, 16, 0, 0x18])
ROOM2 = bytes([0, 3, 6, 1, 4, 3, 6, 3, 14, 1, 0xF0])
ROOM3 = bytes([0, 5, 7, 2, 3, 4, 3, 14, 3, 3, 0xC0])


def make_world():
    return World.from_bytes(ROOM1 + ROOM2 + ROOM3)


def test_room_parses_fields():
    room = Room.from_bytes(ROOM1)
    assert room.east == 2
    assert room.walls == [4, 3, 15, 3, 16]
    assert room.flags == RoomFlag.KEY | RoomFlag.HEALTHPACK


def test_room_round_trip():
    assert Room.from_bytes(ROOM2).to_bytes() == ROOM2


def test_room_wrong_length():
    with pytest.raises(ValueError):
        Room.from_bytes(ROOM1[:-1])


def test_room_wrong_wall_count():
    with pytest.raises(ValueError):
        Room(walls=[1, 2])


def test_room_to_bytes_rejects_big_values():
    room = Room(north=300)
    with pytest.raises(ValueError):
        room.to_bytes()


def test_world_round_trip():
    data = ROOM1 + ROOM2 + ROOM3
    world = World.from_bytes(data)
    assert world.to_bytes() == data
    assert len(world.rooms) == len(data) // ROOM_SIZE


def test_world_rejects_partial_record():
    with pytest.raises(ValueError):
        World.from_bytes(ROOM1 + b"\x00")


def test_world_rejects_empty():
    with pytest.raises(ValueError):
        World.from_bytes(b"")


def test_room_lookup_is_one_based():
    world = make_world()
    assert world.room(2).to_bytes() == ROOM2
    with pytest.raises(IndexError):
        world.room(0)
    with pytest.raises(IndexError):
        world.room(4)


def test_set_and_clear_flag():
    world = make_world()
    world.clear_flag(1, RoomFlag.KEY)
    assert RoomFlag.KEY not in world.room(1).flags
    assert RoomFlag.HEALTHPACK in world.room(1).flags
    world.set_flag(1, RoomFlag.PRINCESS)
    assert RoomFlag.PRINCESS in world.room(1).flags


def test_unlock_door():
    world = make_world()
    assert world.unlock_door(1) == 1
    assert world.room(1).walls == [4, 3, 1, 3, 16]
    assert world.unlock_door(1) == 0


def test_start_escape():
    world = make_world()
    world.start_escape()
    first = world.room(1)
    assert first.north == LEVEL_EXIT
    assert first.walls[2] == 1
    for room in world.rooms:
        assert RoomFlag.MONSTER in room.flags
        assert RoomFlag.HEALTHPACK not in room.flags
    assert RoomFlag.KEY in first.flags