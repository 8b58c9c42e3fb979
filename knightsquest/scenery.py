"""Room scenery: the ceiling, floor and brick wall, and the things on the walls.

Coordinates are character cells on the 40x25 multicolour screen. A wall holds
five slots, each eight cells wide. A thing in a slot is drawn two cells in from
the slot's left edge.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .screen import HEIGHT, WIDTH, Screen

WALL_SLOTS = 5
SLOT_WIDTH = 8
SHOP_TEXT_COLOUR = 0x02

ALL_THREES = bytes([255] * 8)
EMPTY2 = bytes([170] * 8)
WALL2 = bytes([106, 106, 106, 106, 106, 106, 106, 85,
               170, 170, 170, 170, 170, 170, 170, 85])

SDOOR = bytes([213, 213, 253, 255, 255, 255, 255, 255, 85, 85, 85, 245, 255, 255, 255, 255,
               85, 85, 85, 95, 255, 255, 255, 255, 87, 87, 127, 255, 255, 255, 255, 255])

STEAL1 = bytes([0, 0, 0, 1, 1, 7, 7, 23, 0, 63, 122, 234, 234, 170, 170, 170,
                0, 252, 174, 151, 183, 181, 253, 245, 0, 0, 0, 128, 128, 224, 224, 232])
STEAL3 = bytes([30, 30, 94, 94, 94, 94, 94, 94, 171, 171, 171, 171, 175, 191, 175, 191,
                253, 245, 245, 245, 245, 213, 245, 213, 120, 122, 122, 122, 122, 122, 122, 122])
STEAL5 = bytes([95, 87, 87, 87, 87, 87, 23, 23, 175, 175, 173, 253, 213, 245, 255, 235,
                85, 85, 85, 87, 87, 95, 255, 235, 250, 234, 234, 234, 234, 234, 232, 232])
STEAL7 = bytes([21, 5, 5, 1, 1, 0, 0, 0, 255, 255, 127, 95, 95, 95, 23, 0,
                255, 255, 254, 250, 250, 250, 232, 0, 168, 160, 160, 128, 128, 0, 0, 0])

ARMOUR0 = bytes([0, 0, 0, 0, 3, 3, 3, 3, 63, 255, 255, 255, 255, 255, 255, 255,
                 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0])
ARMOUR1 = bytes([3, 3, 3, 3, 3, 3, 3, 3, 255, 255, 255, 255, 255, 255, 255, 255,
                 192, 0, 0, 0, 0, 0, 0, 255, 3, 3, 3, 3, 3, 3, 3, 255])
ARMOUR2 = bytes([63, 255, 195, 195, 195, 195, 195, 255, 255, 255, 255, 255, 255, 255, 255, 255,
                 0, 0, 0, 0, 0, 0, 0, 0, 3, 3, 3, 3, 3, 3, 3, 3])
ARMOUR3 = bytes([3, 3, 3, 3, 3, 3, 3, 3, 0, 0, 0, 0, 0, 0, 0, 0,
                 192, 192, 192, 192, 192, 192, 192, 192, 3, 3, 3, 3, 3, 3, 3, 3])
ARMOUR4 = bytes([3, 3, 3, 3, 3, 3, 255, 255, 0, 0, 0, 0, 0, 0, 0, 0,
                 192, 192, 192, 192, 192, 192, 255, 255, 3, 3, 3, 3, 3, 3, 3, 3])

TORCH0 = bytes([1, 5, 26, 25, 6, 6, 63, 15, 0, 128, 144, 96, 64, 128, 240, 192])
TORCH1 = bytes([3, 3, 3, 3, 3, 3, 3, 3])

MAP_ON_WALL_TOP = bytes([255, 192, 197, 198, 205, 205, 205, 205,
                         255, 0, 85, 170, 151, 151, 191, 93,
                         255, 0, 85, 170, 93, 93, 255, 117,
                         255, 3, 87, 167, 103, 83, 147, 167])
MAP_ON_WALL_BOT = bytes([198, 198, 198, 218, 213, 192, 192, 255,
                         93, 181, 181, 170, 85, 0, 15, 255,
                         117, 255, 215, 150, 85, 0, 240, 255,
                         167, 167, 167, 167, 83, 3, 3, 255])

CUFF0 = bytes([149, 157, 157, 140, 140, 176, 176, 186, 1, 1, 1, 0, 0, 0, 0, 170,
               80, 208, 208, 192, 192, 48, 48, 186])
CUFF1 = bytes([176, 192, 192, 192, 192, 240, 192, 170, 0, 0, 0, 0, 0, 0, 0, 170,
               48, 12, 12, 12, 12, 51, 12, 170])

WINDOW0 = bytes([64, 64, 64, 67, 78, 78, 122, 122, 0, 0, 255, 170, 170, 170, 170, 170,
                 64, 64, 255, 170, 170, 170, 170, 170, 0, 0, 192, 176, 172, 172, 171, 171])
WINDOW1L = bytes([122] * 8)
WINDOW1R = bytes([171] * 8)
WINDOW3L = bytes([122, 122, 122, 122, 122, 122, 122, 127])
WINDOW3M = bytes([170, 170, 170, 170, 170, 170, 170, 255])
WINDOW3R = bytes([171, 171, 171, 171, 171, 171, 171, 255])

PAINTING_TOP = bytes([10, 8, 8, 8, 11, 8, 10, 10, 170, 255, 255, 255, 255, 165, 151, 149,
                      170, 0, 0, 0, 240, 0, 64, 80, 160, 32, 32, 32, 32, 32, 32, 32])
PAINTING_BOT = bytes([8, 8, 8, 11, 11, 11, 11, 10, 93, 23, 253, 255, 255, 255, 255, 170,
                      1, 1, 67, 255, 252, 192, 192, 170, 96, 96, 224, 224, 32, 32, 32, 160])
PAINTING2_TOP = bytes([170, 128, 128, 128, 128, 128, 128, 128, 170, 0, 0, 63, 253, 245, 246, 245,
                       170, 0, 0, 240, 112, 92, 108, 156, 170, 2, 2, 2, 2, 2, 2, 2])
PAINTING2_BOT = bytes([128, 128, 128, 130, 130, 130, 138, 170, 245, 253, 250, 250, 186, 186, 250, 170,
                       80, 64, 168, 106, 170, 110, 174, 170, 2, 2, 2, 2, 130, 130, 130, 170])

CLOSED_DOOR = (
    bytes([64, 64, 64, 67, 78, 122, 122, 122, 0, 0, 63, 234, 170, 170, 255, 204,
           64, 64, 255, 170, 170, 170, 255, 204, 0, 0, 0, 240, 172, 171, 235, 235]),
    bytes([122, 122, 122, 122, 122, 122, 122, 122, 204, 204, 204, 204, 204, 255, 170, 170,
           204, 204, 204, 204, 204, 255, 170, 170, 235, 235, 235, 235, 235, 235, 171, 171]),
    bytes([122, 122, 122, 122, 122, 122, 122, 122, 170, 170, 170, 170, 170, 170, 170, 170,
           170, 170, 170, 170, 170, 170, 170, 170, 171, 171, 171, 171, 75, 27, 171, 171]),
    bytes([122, 122, 122, 122, 122, 122, 122, 127, 170, 170, 170, 170, 170, 170, 170, 255,
           170, 170, 170, 170, 170, 170, 170, 255, 171, 171, 171, 171, 171, 171, 171, 255]),
)

SHOP01 = bytes([67, 76, 112, 192, 192, 192, 192, 192])
SHOP02 = bytes([255, 0, 15, 63, 61, 55, 53, 2, 255, 0, 192, 240, 240, 112, 112, 0,
                192, 48, 12, 3, 3, 3, 3, 3])
SHOP03 = bytes([192, 192, 255, 79, 79, 79, 64, 85, 42, 170, 191, 191, 239, 250, 0, 85,
                160, 168, 251, 251, 175, 255, 64, 85, 3, 3, 255, 240, 240, 240, 0, 85])

LEFT_WALL_TOP = bytes([253, 245, 213, 213, 213, 213, 213, 213])
LEFT_WALL_MID = bytes([213] * 8)
LEFT_WALL_BOT = bytes([213, 213, 213, 213, 213, 213, 245, 253])
RIGHT_WALL_TOP = bytes([127, 95, 87, 87, 87, 87, 87, 87])
RIGHT_WALL_MID = bytes([87] * 8)
RIGHT_WALL_BOT = bytes([87, 87, 87, 87, 87, 87, 95, 127])

FLEUR_DE_LIS_TOP = bytes([255, 234, 234, 234, 234, 214, 214, 213, 255, 150, 150, 85, 85, 85, 85, 150,
                          255, 171, 171, 171, 171, 151, 151, 87])
FLEUR_DE_LIS_BOT = bytes([217, 218, 234, 234, 234, 234, 234, 255, 85, 85, 150, 150, 150, 105, 170, 255,
                          103, 167, 171, 171, 171, 171, 171, 255])

SHIELD_TOP = bytes([192, 255, 192, 192, 200, 194, 200, 192, 48, 207, 168, 32, 32, 170, 32, 32,
                    76, 252, 12, 12, 140, 12, 140, 12])
SHIELD_BOT = bytes([112, 112, 112, 76, 76, 67, 64, 85, 32, 32, 32, 32, 168, 3, 204, 117,
                    48, 48, 48, 192, 192, 64, 64, 85])

KEY_ON_WALL = bytes([215, 125, 125, 215, 247, 215, 247, 215])

TREE = (
    bytes([0, 0, 0, 0, 3, 51, 221, 213, 0, 0, 15, 245, 85, 85, 85, 85,
           3, 13, 53, 213, 85, 85, 85, 85, 192, 112, 92, 92, 87, 87, 87, 92]),
    bytes([213, 213, 213, 213, 53, 53, 53, 13, 85, 85, 85, 85, 85, 85, 85, 85,
           85, 85, 85, 85, 85, 85, 85, 85, 92, 87, 92, 87, 87, 87, 92, 92]),
    bytes([13, 13, 3, 3, 13, 13, 13, 3, 85, 85, 85, 85, 85, 85, 85, 85,
           85, 85, 85, 85, 85, 85, 93, 123, 92, 112, 112, 92, 92, 92, 92, 92]),
    bytes([0, 0, 0, 0, 0, 0, 0, 0, 255, 32, 10, 0, 2, 2, 10, 10,
           232, 168, 186, 168, 160, 160, 160, 168, 240, 128, 0, 0, 0, 0, 0, 0]),
)

KEY_ICON_CELL = (149, 20)


class Thing(enum.IntEnum):
    """What a wall slot (or the screen edge) can hold."""

    NOTHING = 0x00
    NORTH_DOOR = 0x01
    ARMOUR = 0x02
    TORCHES = 0x03
    WINDOW = 0x04
    SOUTH_DOOR = 0x05
    STEAL_YOUR_FACE = 0x06
    PAINTING = 0x07
    RIGHT_WALL = 0x08
    LEFT_WALL = 0x09
    KEY_ICON = 0x0A
    PAINTING2 = 0x0B
    FLEUR_DE_LIS = 0x0C
    SHIELD = 0x0D
    CUFFS = 0x0E
    CLOSED_DOOR = 0x0F
    MAP = 0x10
    SHOP = 0x11
    OBJECTIVE = 0x12
    CURSE_ON = 0x13
    CURSE_OFF = 0x14
    TREE = 0x15
    LOSE_KEY = 0xA0


@dataclass(frozen=True)
class Placement:
    """Positions a drawn thing fixes for the game: where the princess stands
    and where the map hangs (sprite x coordinates)."""

    princess_x: int | None = None
    map_x: int | None = None


def _side_wall(screen: Screen, column: int, top: bytes, mid: bytes, bot: bytes) -> None:
    screen.plot_shape(top, column, 10, 1, 0x00, 0xBB)
    for row in range(11, 21):
        screen.plot_shape(mid, column, row, 1, 0x00, 0xBB)
    screen.plot_shape(bot, column, 21, 1, 0x00, 0xBB)


def _window_pane_row(screen: Screen, x: int, row: int, left: bytes, middle: bytes,
                     right: bytes) -> None:
    screen.plot_shape(left, x, row, 1, 0x00, 0xBB)
    screen.plot_shape(middle, x + 1, row, 1, 0x00, 0xBB)
    screen.plot_shape(middle, x + 2, row, 1, 0x00, 0xBB)
    screen.plot_shape(right, x + 3, row, 1, 0x00, 0xBB)


def _princess_x(start: int) -> int:
    return (start + 5) * 8 + 1


def put_thing(screen: Screen, thing: int, slot: int) -> Placement:
    """Draw a thing in a wall slot (0-4) and return what it fixes for the game.

    Values that are not drawable things draw nothing.
    """
    if not 0 <= slot < WALL_SLOTS:
        raise ValueError(f"wall slot must be 0-{WALL_SLOTS - 1}, got {slot}")
    start = slot * SLOT_WIDTH
    x = start + 2
    try:
        kind = Thing(thing)
    except ValueError:
        return Placement()

    if kind is Thing.RIGHT_WALL:
        _side_wall(screen, WIDTH - 1, RIGHT_WALL_TOP, RIGHT_WALL_MID, RIGHT_WALL_BOT)
    elif kind is Thing.LEFT_WALL:
        _side_wall(screen, 0, LEFT_WALL_TOP, LEFT_WALL_MID, LEFT_WALL_BOT)
    elif kind is Thing.PAINTING:
        screen.plot_shape(PAINTING_TOP, x, 5, 4, 0x00, 0x79)
        screen.plot_shape(PAINTING_BOT, x, 6, 4, 0x00, 0x79)
    elif kind is Thing.PAINTING2:
        screen.plot_shape(PAINTING2_TOP, x, 5, 4, 0x00, 0x79)
        screen.plot_shape(PAINTING2_BOT, x, 6, 4, 0x00, 0x79)
    elif kind is Thing.STEAL_YOUR_FACE:
        for row, shape in enumerate((STEAL1, STEAL3, STEAL5, STEAL7), start=4):
            screen.plot_shape(shape, x, row, 4, 0x01, 0x62)
    elif kind is Thing.NORTH_DOOR:
        screen.plot_shape(WINDOW0, x, 6, 4, 0x00, 0xBB)
        for row in range(7, 10):
            _window_pane_row(screen, x, row, WINDOW1L, EMPTY2, WINDOW1R)
    elif kind is Thing.SOUTH_DOOR:
        screen.plot_shape(SDOOR, x, 22, 4, 0x00, 0xBB)
    elif kind is Thing.ARMOUR:
        for row, shape in enumerate((ARMOUR0, ARMOUR1, ARMOUR2, ARMOUR3, ARMOUR4), start=5):
            screen.plot_shape(shape, x, row, 4, 0x00, 0xBC)
    elif kind is Thing.TORCHES:
        for column in (start + 1, start + 4):
            screen.plot_shape(TORCH0, column, 6, 2, 0x00, 0x72)
            screen.plot_shape(TORCH1, column, 7, 1, 0x00, 0x72)
    elif kind is Thing.WINDOW:
        screen.plot_shape(WINDOW0, x, 4, 4, 0x00, 0xBB)
        _window_pane_row(screen, x, 5, WINDOW1L, EMPTY2, WINDOW1R)
        _window_pane_row(screen, x, 6, WINDOW1L, EMPTY2, WINDOW1R)
        _window_pane_row(screen, x, 7, WINDOW3L, WINDOW3M, WINDOW3R)
    elif kind is Thing.KEY_ICON:
        screen.plot_shape(KEY_ON_WALL, *KEY_ICON_CELL, 1, 0x00, 0x77)
    elif kind is Thing.LOSE_KEY:
        screen.plot_shape(KEY_ON_WALL, *KEY_ICON_CELL, 1, 0x00, 0x00)
    elif kind is Thing.FLEUR_DE_LIS:
        screen.plot_shape(FLEUR_DE_LIS_TOP, x, 4, 3, 0x00, 0x72)
        screen.plot_shape(FLEUR_DE_LIS_BOT, x, 5, 3, 0x00, 0x72)
    elif kind is Thing.SHIELD:
        screen.plot_shape(SHIELD_TOP, x, 6, 3, 0x00, 0xB2)
        screen.plot_shape(SHIELD_BOT, x, 7, 3, 0x00, 0xB2)
    elif kind is Thing.CUFFS:
        screen.plot_shape(CUFF0, x, 6, 3, 0x00, 0x9B)
        screen.plot_shape(CUFF1, x, 7, 3, 0x00, 0x9B)
        return Placement(princess_x=_princess_x(start))
    elif kind is Thing.OBJECTIVE:
        return Placement(princess_x=_princess_x(start))
    elif kind is Thing.CLOSED_DOOR:
        for row, shape in enumerate(CLOSED_DOOR, start=6):
            screen.plot_shape(shape, x, row, 4, 0x00, 0xB9)
    elif kind is Thing.SHOP:
        screen.plot_shape(SHOP01, x, 7, 1, 0x00, 0xB9)
        screen.plot_shape(SHOP02, x + 1, 7, 3, 0x00, 0x79)
        screen.plot_shape(SHOP03, x, 8, 4, 0x00, 0xB9)
        screen.print_text("SHOP", x, 6, SHOP_TEXT_COLOUR, 0x00)
    elif kind is Thing.MAP:
        screen.plot_shape(MAP_ON_WALL_TOP, x, 7, 4, 0x00, 0xFB)
        screen.plot_shape(MAP_ON_WALL_BOT, x, 8, 4, 0x00, 0xFB)
        return Placement(map_x=start * 9)
    elif kind is Thing.TREE:
        for row, shape in enumerate(TREE, start=6):
            screen.plot_shape(shape, x, row, 4, 0x00, 0x59)
        return Placement(map_x=start * 9)
    return Placement()


def draw_room_background(screen: Screen) -> None:
    """Clear the screen and draw the ceiling, floor, bottom band and brick wall."""
    screen.clear()
    for column in range(WIDTH):
        for row in range(0, 4):
            screen.plot_shape(ALL_THREES, column, row, 1, 0x00, 0x12)
        for row in range(10, 22):
            screen.plot_shape(ALL_THREES, column, row, 1, 0x0B, 0x12)
        for row in range(22, HEIGHT):
            screen.plot_shape(ALL_THREES, column, row, 1, 0x00, 0x12)
    for row in range(3, 10):
        for column in range(0, WIDTH, 2):
            screen.plot_shape(WALL2, column, row, 2, 0x00, 0xBC)