import pytest

from knightsquest.spritefile import (
    FIRST_POINTER,
    FRAME_SIZE,
    HEADER_SIZE,
    SpriteSet,
    read_level_files,
    write_level_files,
)
from knightsquest.world import Room, RoomFlag, World


def _sample_set(data=None):
    if data is None:
        data = bytes(range(FRAME_SIZE)) + bytes(reversed(range(FRAME_SIZE)))
    return SpriteSet(
        multicolour=0x37,
        shared_colours=(0x0F, 0x00),
        colours=(0x09, 0x09, 0x09, 0x07, 0x02, 0x0A, 0x0C, 0x00),
        data=data,
    )


def _sample_world():
    return World([
        Room(east=2, walls=[4, 3, 15, 3, 16], flags=RoomFlag.KEY | RoomFlag.HEALTHPACK),
        Room(west=1, walls=[0, 0, 1, 0, 0], south_door=1, flags=RoomFlag.MONSTER),
    ])


def test_header_layout():
    raw = _sample_set().to_bytes()
    assert raw[:HEADER_SIZE] == bytes([0x37, 0x0F, 0x00, 0x09, 0x09, 0x09, 0x07,
                                       0x02, 0x0A, 0x0C, 0x00])


def test_round_trip():
    original = _sample_set()
    parsed = SpriteSet.from_bytes(original.to_bytes())
    assert parsed == original
    assert parsed.to_bytes() == original.to_bytes()


def test_from_bytes_short_header_raises():
    with pytest.raises(ValueError):
        SpriteSet.from_bytes(bytes(HEADER_SIZE - 1))


def test_bad_colour_count_raises():
    with pytest.raises(ValueError):
        SpriteSet(multicolour=0, shared_colours=(0, 0), colours=(1, 2, 3))


def test_colour_out_of_byte_range_raises():
    with pytest.raises(ValueError):
        SpriteSet(multicolour=0x100, shared_colours=(0, 0), colours=(0,) * 8)


def test_frames_by_pointer():
    sprites = _sample_set()
    assert sprites.frame(FIRST_POINTER) == bytes(range(FRAME_SIZE))
    assert sprites.frame(FIRST_POINTER + 1) == bytes(reversed(range(FRAME_SIZE)))
    assert sprites.frame_count == 2


def test_frame_out_of_range_raises():
    sprites = _sample_set()
    with pytest.raises(IndexError):
        sprites.frame(FIRST_POINTER - 1)
    with pytest.raises(IndexError):
        sprites.frame(FIRST_POINTER + 2)


def test_short_frame_is_padded():
    data = bytes(range(FRAME_SIZE)) + b"\x05\x06\x07"
    sprites = _sample_set(data)
    frame = sprites.frame(FIRST_POINTER + 1)
    assert len(frame) == FRAME_SIZE
    assert frame[:3] == b"\x05\x06\x07"
    assert set(frame[3:]) == {0}


def test_write_and_read_level_files(tmp_path):
    sprites = _sample_set()
    world = _sample_world()
    sprites_path, world_path = write_level_files(tmp_path, 1, sprites, world)
    assert sprites_path.name == "SPRITES1"
    assert world_path.name == "WORLD1"
    read_sprites, read_world = read_level_files(tmp_path, 1)
    assert read_sprites == sprites
    assert read_world.to_bytes() == world.to_bytes()


def test_write_accepts_world_bytes(tmp_path):
    world = _sample_world()
    _, world_path = write_level_files(tmp_path, 2, _sample_set(), world.to_bytes())
    assert world_path.read_bytes() == world.to_bytes()


def test_write_rejects_malformed_world(tmp_path):
    with pytest.raises(ValueError):
        write_level_files(tmp_path, 1, _sample_set(), b"\x00\x01\x02")


def test_invalid_level_raises(tmp_path):
    with pytest.raises(ValueError):
        write_level_files(tmp_path, -1, _sample_set(), _sample_world())


def test_read_missing_files_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_level_files(tmp_path, 3)