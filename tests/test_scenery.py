import pytest

from knightsquest import scenery
from knightsquest.font import glyph_for
from knightsquest.scenery import Placement, Thing, draw_room_background, put_thing
from knightsquest.screen import Screen


def _snapshot(screen):
    return bytes(screen.bitmap), bytes(screen.screen_ram), bytes(screen.colour_ram)


def test_thing_values_follow_world_codes():
    assert Thing(0x0F) is Thing.CLOSED_DOOR
    assert Thing(0xA0) is Thing.LOSE_KEY
    assert Thing(0x15) is Thing.TREE


def test_nothing_draws_nothing():
    screen = Screen()
    before = _snapshot(screen)
    assert put_thing(screen, Thing.NOTHING, 2) == Placement()
    assert _snapshot(screen) == before


def test_unknown_value_draws_nothing():
    screen = Screen()
    before = _snapshot(screen)
    assert put_thing(screen, 0x42, 1) == Placement()
    assert _snapshot(screen) == before


def test_curse_markers_draw_nothing():
    screen = Screen()
    before = _snapshot(screen)
    put_thing(screen, Thing.CURSE_ON, 0)
    put_thing(screen, Thing.CURSE_OFF, 0)
    assert _snapshot(screen) == before


@pytest.mark.parametrize("slot", [-1, 5, 9])
def test_slot_out_of_range(slot):
    with pytest.raises(ValueError):
        put_thing(Screen(), Thing.ARMOUR, slot)


def test_armour_drawn_in_slot():
    screen = Screen()
    put_thing(screen, Thing.ARMOUR, 1)
    x = 1 * scenery.SLOT_WIDTH + 2
    assert screen.cell_colours(x, 5) == (0x00, 0xBC)
    assert screen.cell_pixels(x, 5) == scenery.ARMOUR0[:8]
    assert screen.cell_pixels(x + 3, 9) == scenery.ARMOUR4[24:32]


def test_torches_two_columns():
    screen = Screen()
    put_thing(screen, Thing.TORCHES, 0)
    assert screen.cell_pixels(1, 6) == scenery.TORCH0[:8]
    assert screen.cell_pixels(5, 6) == scenery.TORCH0[8:]
    assert screen.cell_pixels(4, 7) == scenery.TORCH1
    assert screen.cell_colours(4, 6) == (0x00, 0x72)


def test_north_door_has_open_panes():
    screen = Screen()
    put_thing(screen, Thing.NORTH_DOOR, 2)
    x = 2 * scenery.SLOT_WIDTH + 2
    for row in range(7, 10):
        assert screen.cell_pixels(x, row) == scenery.WINDOW1L
        assert screen.cell_pixels(x + 1, row) == scenery.EMPTY2
        assert screen.cell_pixels(x + 3, row) == scenery.WINDOW1R


def test_south_door_at_bottom():
    screen = Screen()
    put_thing(screen, Thing.SOUTH_DOOR, 3)
    x = 3 * scenery.SLOT_WIDTH + 2
    assert screen.cell_pixels(x + 2, 22) == scenery.SDOOR[16:24]
    assert screen.cell_colours(x, 22) == (0x00, 0xBB)


def test_side_walls():
    screen = Screen()
    put_thing(screen, Thing.RIGHT_WALL, 0)
    put_thing(screen, Thing.LEFT_WALL, 0)
    assert screen.cell_pixels(39, 10) == scenery.RIGHT_WALL_TOP
    assert screen.cell_pixels(39, 15) == scenery.RIGHT_WALL_MID
    assert screen.cell_pixels(39, 21) == scenery.RIGHT_WALL_BOT
    assert screen.cell_pixels(0, 10) == scenery.LEFT_WALL_TOP
    assert screen.cell_pixels(0, 21) == scenery.LEFT_WALL_BOT


def test_key_icon_and_lose_key():
    screen = Screen()
    put_thing(screen, Thing.KEY_ICON, 0)
    assert screen.cell_colours(*scenery.KEY_ICON_CELL) == (0x00, 0x77)
    assert screen.cell_pixels(*scenery.KEY_ICON_CELL) == scenery.KEY_ON_WALL
    put_thing(screen, Thing.LOSE_KEY, 0)
    assert screen.cell_colours(*scenery.KEY_ICON_CELL) == (0x00, 0x00)


def test_cuffs_and_objective_fix_princess_position():
    screen = Screen()
    cuffs = put_thing(screen, Thing.CUFFS, 2)
    objective = put_thing(Screen(), Thing.OBJECTIVE, 2)
    assert cuffs.princess_x == 169
    assert objective.princess_x == cuffs.princess_x
    assert cuffs.map_x is None
    assert screen.cell_pixels(18, 7) == scenery.CUFF1[:8]


def test_princess_position_increases_with_slot():
    xs = [put_thing(Screen(), Thing.OBJECTIVE, slot).princess_x for slot in range(5)]
    assert xs == sorted(xs)
    assert all(b - a == 64 for a, b in zip(xs, xs[1:]))


def test_map_and_tree_fix_map_position():
    screen = Screen()
    placement = put_thing(screen, Thing.MAP, 2)
    assert placement.map_x == 144
    assert placement.princess_x is None
    assert put_thing(Screen(), Thing.TREE, 2).map_x == placement.map_x
    assert screen.cell_colours(18, 7) == (0x00, 0xFB)


def test_shop_prints_its_name():
    screen = Screen()
    put_thing(screen, Thing.SHOP, 1)
    x = 1 * scenery.SLOT_WIDTH + 2
    assert screen.cell_pixels(x, 6) == glyph_for("S")
    assert screen.cell_pixels(x + 3, 6) == glyph_for("P")
    assert screen.cell_colours(x, 6) == (0x00, scenery.SHOP_TEXT_COLOUR << 4)
    assert screen.cell_colours(x + 1, 7) == (0x00, 0x79)
    assert screen.cell_pixels(x, 8) == scenery.SHOP03[:8]


def test_closed_door_rows():
    screen = Screen()
    put_thing(screen, Thing.CLOSED_DOOR, 4)
    x = 4 * scenery.SLOT_WIDTH + 2
    for row, shape in enumerate(scenery.CLOSED_DOOR, start=6):
        assert screen.cell_pixels(x, row) == shape[:8]
        assert screen.cell_colours(x + 3, row) == (0x00, 0xB9)


def test_room_background_bands():
    screen = Screen()
    draw_room_background(screen)
    assert screen.cell_colours(0, 0) == (0x00, 0x12)
    assert screen.cell_colours(20, 15) == (0x0B, 0x12)
    assert screen.cell_colours(39, 24) == (0x00, 0x12)
    assert screen.cell_pixels(20, 15) == scenery.ALL_THREES


def test_room_background_brick_wall():
    screen = Screen()
    draw_room_background(screen)
    for row in range(3, 10):
        assert screen.cell_pixels(0, row) == scenery.WALL2[:8]
        assert screen.cell_pixels(39, row) == scenery.WALL2[8:]
        assert screen.cell_colours(10, row) == (0x00, 0xBC)


def test_room_background_is_repeatable():
    first = Screen()
    draw_room_background(first)
    second = Screen()
    put_thing(second, Thing.ARMOUR, 0)
    draw_room_background(second)
    assert _snapshot(first) == _snapshot(second)