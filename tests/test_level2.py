from knightsquest import level1, level2
from knightsquest.spritefile import HEADER_SIZE, SpriteSet
from knightsquest.world import ROOM_COUNT, WORLD_SIZE, RoomFlag, World


def test_sprite_file_size():
    assert len(level2.sprite_set().to_bytes()) == level2.SPRITE_FILE_SIZE


def test_sprite_header():
    sprites = level2.sprite_set()
    assert sprites.multicolour == 0x37
    assert sprites.shared_colours == (0x0F, 0x00)
    assert sprites.colours == (0x09, 0x09, 0x09, 0x07, 0x02, 0x0A, 0x0C, 0x00)


def test_knight_frames_match_level_one():
    one = level1.sprite_set()
    two = level2.sprite_set()
    for pointer in range(32, 49):
        assert two.frame(pointer) == one.frame(pointer)


def test_treasure_and_healthpack_match_level_one():
    one = level1.sprite_set()
    two = level2.sprite_set()
    assert two.frame(61) == one.frame(61)
    assert two.frame(62) == one.frame(62)


def test_ghost_frames():
    sprites = level2.sprite_set()
    assert sprites.frame(49) == sprites.frame(52)
    assert sprites.frame(51) == sprites.frame(54)
    assert sprites.frame(50) == bytes(64)
    assert sprites.frame(59) == sprites.frame(60)
    assert sprites.frame(49) != sprites.frame(51)


def test_key_frame_starts_with_key_shape():
    key = level2.sprite_set().frame(64)
    assert key[:3] == bytes([48, 0, 0])
    assert len(key) == 64


def test_sprite_round_trip():
    raw = level2.sprite_set().to_bytes()
    assert SpriteSet.from_bytes(raw).to_bytes() == raw
    assert len(SpriteSet.from_bytes(raw).data) == len(raw) - HEADER_SIZE


def test_world_shape():
    castle = level2.world()
    assert len(castle.rooms) == ROOM_COUNT
    assert len(castle.to_bytes()) == WORLD_SIZE


def test_first_room():
    room = level2.world().room(1)
    assert room.to_bytes() == bytes([0, 2, 0, 4, 3, 11, 0x0F, 7, 3, 0, 0x08])
    assert room.flags == RoomFlag.KEY


def test_princess_rooms():
    castle = level2.world()
    with_princess = [n for n in range(1, ROOM_COUNT + 1)
                     if RoomFlag.PRINCESS in castle.room(n).flags]
    assert with_princess == [2, 14, 23]


def test_world_round_trip():
    raw = level2.world().to_bytes()
    assert World.from_bytes(raw).to_bytes() == raw


def test_worlds_are_independent_copies():
    first = level2.world()
    first.clear_flag(1, RoomFlag.KEY)
    assert RoomFlag.KEY in level2.world().room(1).flags