import pytest

from knightsquest import level1
from knightsquest.spritefile import FRAME_SIZE, SpriteSet
from knightsquest.world import RoomFlag, World


def test_sprite_file_size_matches_written_length():
    assert len(level1.sprite_set().to_bytes()) == 0x0840


def test_sprite_header():
    sprites = level1.sprite_set()
    assert sprites.multicolour == 0x37
    assert sprites.shared_colours == (0x0F, 0x00)
    assert sprites.colours == (0x09, 0x09, 0x09, 0x07, 0x02, 0x0A, 0x0C, 0x00)


def test_every_full_frame_ends_with_padding_byte():
    sprites = level1.sprite_set()
    for pointer in range(32, 64):
        frame = sprites.frame(pointer)
        assert len(frame) == FRAME_SIZE
        assert frame[-1] == 0


def test_standing_frame_start():
    frame = level1.sprite_set().frame(32)
    assert frame[:3] == bytes([0, 204, 192])


def test_healthpack_frame_is_framed():
    frame = level1.sprite_set().frame(62)
    assert frame[:3] == bytes([63, 255, 252])
    assert frame[60:63] == bytes([63, 255, 252])


def test_key_frame_is_cut_short_but_readable():
    frame = level1.sprite_set().frame(64)
    assert frame[:3] == bytes([48, 0, 0])
    assert len(frame) == FRAME_SIZE
    with pytest.raises(IndexError):
        level1.sprite_set().frame(65)


def test_sprite_set_round_trip():
    sprites = level1.sprite_set()
    assert SpriteSet.from_bytes(sprites.to_bytes()) == sprites


def test_world_size_matches_written_length():
    assert len(level1.world().to_bytes()) == 0x00FD


def test_world_round_trip():
    data = level1.world().to_bytes()
    assert World.from_bytes(data).to_bytes() == data


def test_home_room():
    room = level1.world().room(1)
    assert room.east == 2
    assert room.walls == [4, 3, 15, 3, 16]
    assert room.flags == RoomFlag.KEY | RoomFlag.HEALTHPACK


def test_princess_room():
    castle = level1.world()
    holding = [n for n in range(1, 21) if RoomFlag.PRINCESS in castle.room(n).flags]
    assert holding == [20]
    assert 14 in castle.room(20).walls


def test_exits_point_at_rooms():
    castle = level1.world()
    for room in castle.rooms:
        for exit_ in (room.north, room.east, room.south, room.west):
            assert 0 <= exit_ <= len(castle.rooms)


def test_world_copies_are_independent():
    first = level1.world()
    first.clear_flag(1, RoomFlag.KEY)
    assert RoomFlag.KEY in level1.world().room(1).flags
    assert RoomFlag.KEY not in first.room(1).flags