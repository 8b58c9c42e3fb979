"""The game itself: the knight, the monster, the items and the rooms they share.

One call to `Game.tick` is one game step. The step reads the controls, moves
the knight and the monster, picks up items, fights, and walks through doors.
Between steps the main loop makes `LOOP_PASSES` idle passes, and the slow
health regeneration timer counts those passes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

from .rng import RandomTable
from .scenery import Placement, Thing, draw_room_background, put_thing
from .screen import WIDTH, Screen
from .world import LEVEL_EXIT, RoomFlag, World

LOOP_PASSES = 0x80
START_X = 0x0020
START_Y = 0x80
START_LIVES = 3
START_MAX_HP = 0x14
BASE_HP = 13
TOUCH_DISTANCE = 0x000A

LEFT_EDGE = 0x0018
RIGHT_EDGE = 0x0142
WEST_ENTRY_X = 0x0140
EAST_ENTRY_X = 0x0020
NORTH_WALL_Y = 113
SOUTH_WALL_Y = 204
NORTH_ENTRY_Y = 202
SOUTH_ENTRY_Y = 116
STEP = 3
NORTH_DOOR_WIDTH = 0x0040
SOUTH_DOOR_WIDTH = 0x0020
PRINCESS_Y = 0x70
RESCUE_EXPERIENCE = 0x0100

WHITE = 0x01
RED = 0x02
GREEN = 0x05
YELLOW = 0x07
DARK_GREY = 0x0B
BRIGHT_GREEN = 0x0D
MESSAGE_BACKGROUND = 0xBB
LEVEL_UP_BACKGROUND = 0xCC

STANDING_FRAME = 32
LUNGE_RIGHT_FRAME = 47
LUNGE_LEFT_FRAME = 48
MONSTER_LUNGE_LEFT_FRAME = 59
MONSTER_LUNGE_RIGHT_FRAME = 60

_TORCH_ROW = 6
_TORCH_CELLS = (1, 2, 4, 5)
_TORCH_COLOURS = (0x72, 0x27)


class Direction(enum.IntEnum):
    """Which way the knight or the monster is moving or facing."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3
    STANDING = 5
    LUNGE_LEFT = 6
    LUNGE_RIGHT = 7


_PLAYER_WALK = {
    Direction.NORTH: (33, 34, 35, 36, 35, 34),
    Direction.EAST: (44, 45, 46, 45),
    Direction.SOUTH: (37, 38, 39, 40, 39, 38),
    Direction.WEST: (41, 42, 43, 42),
}
_PLAYER_POSE = {
    Direction.STANDING: STANDING_FRAME,
    Direction.LUNGE_LEFT: LUNGE_LEFT_FRAME,
    Direction.LUNGE_RIGHT: LUNGE_RIGHT_FRAME,
}
_MONSTER_WALK = {
    Direction.NORTH: (55, 56),
    Direction.SOUTH: (57, 58),
    Direction.EAST: (49, 50, 51, 50),
    Direction.WEST: (52, 53, 54, 53),
}


@dataclass(frozen=True)
class Controls:
    """What the player is pressing during one step."""

    north: bool = False
    south: bool = False
    east: bool = False
    west: bool = False
    fire: bool = False
    level_up: bool = False
    quit: bool = False


class Game:
    """The state of a game in progress and the rules that move it on."""

    def __init__(self, load_world: Callable[[int], World], rng: RandomTable,
                 level: int = 1, screen: Screen | None = None) -> None:
        self._load_world = load_world
        self.rng = rng
        self.screen = screen if screen is not None else Screen()
        self.start_level = level
        self.level = 1

        self.playing = True
        self.game_over = False
        self.direction = Direction.NORTH
        self.prev_direction = Direction.NORTH
        self.monster_direction = Direction.NORTH
        self.player_frame = STANDING_FRAME
        self.monster_frame = _MONSTER_WALK[Direction.NORTH][0]
        self._player_steps = {d: 0 for d in _PLAYER_WALK}
        self._monster_steps = {d: 0 for d in _MONSTER_WALK}

        self.go_n = self.go_e = self.go_s = self.go_w = 0
        self.n_door = 0
        self.s_door = 0
        self.door_locked = False
        self.cursed = False
        self.uncurse_timer = 0
        self.hp_timer = 0
        self.attack_sound = 0
        self.map_x = 0
        self.map_in_room = False
        self.map_views = 0
        self.torches = [False] * 5

        self.has_key = 0
        self.monster_in_room = False
        self.treasure_in_room = False
        self.healthpack_in_room = False
        self.key_in_room = False
        self.princess_in_room = False
        self.monster_x = 0x0064
        self.monster_y = 0xC8
        self.treasure_x = self.treasure_y = 0
        self.healthpack_x = self.healthpack_y = 0
        self.key_x = self.key_y = 0
        self.princess_x = 0
        self.princess_y = 0

        # The opening rolls: player hit points and armour, monster hit points and armour.
        self.player_hp = rng.next() & 0x03
        self.player_ac = (rng.next() & 0x03) + BASE_HP
        self.monster_hp = rng.next() & 0x03
        self.monster_ac = rng.next() & 0x03
        self.player_hp += BASE_HP

        self._init_game()
        self.world = load_world(self.level)
        self.enter_room()

    def _init_game(self) -> None:
        self.home_room = 1
        self.current_room = self.home_room
        rolled = (self.player_hp + self.rng.next() + self.level * 2) & 0xFF
        self.player_hp = (rolled & 0x03) + BASE_HP
        self.level = self.start_level
        self.lives = START_LIVES
        self.exp = 0
        self.gold = 0
        self.player_x = START_X
        self.player_y = START_Y
        self.max_hp = START_MAX_HP

    # ------------------------------------------------------------------ rules

    def proximity(self, x: int, y: int, limit: int) -> bool:
        """True if the knight is closer than `limit` to (x, y) on both axes."""
        xdist = abs(self.player_x - x)
        ydist = abs(self.player_y - y)
        return xdist < limit and ydist < (limit & 0xFF)

    def update_max_hp(self) -> int:
        """Raise the hit-point ceiling as experience grows; return it."""
        if self.exp >= 0x0019:
            self.max_hp = 25
        if self.exp >= 0x001E:
            self.max_hp = 30
        if self.exp >= 0x0032:
            self.max_hp = 35
        return self.max_hp

    def health_colour(self) -> int:
        """The colour the knight's hit points are shown in."""
        colour = GREEN
        if self.player_hp < 0x0A:
            colour = YELLOW
        if self.player_hp < 0x07:
            colour = RED
        if self.player_hp == self.max_hp:
            colour = BRIGHT_GREEN
        return colour

    def _gain(self, points: int) -> None:
        self.exp = (self.exp + points) & 0xFFFF

    def _random_x(self) -> int:
        return self.rng.next() + 0x0021

    def _random_y(self, base: int) -> int:
        return (self.rng.next() >> 2) + base

    def _apply_placement(self, placement: Placement) -> None:
        if placement.princess_x is not None:
            self.princess_x = placement.princess_x
        if placement.map_x is not None:
            self.map_x = placement.map_x
            self.map_in_room = True

    def enter_room(self) -> None:
        """Draw the current room and place what it holds."""
        if self.current_room == LEVEL_EXIT:
            self.level_up()

        draw_room_background(self.screen)
        self.map_x = 0
        self.map_in_room = False
        self.door_locked = False

        room = self.world.room(self.current_room)
        self.go_n, self.go_e, self.go_s, self.go_w = room.north, room.east, room.south, room.west
        if not self.go_e:
            put_thing(self.screen, Thing.RIGHT_WALL, 0)
        if not self.go_w:
            put_thing(self.screen, Thing.LEFT_WALL, 0)

        for slot, thing in enumerate(room.walls):
            self._apply_placement(put_thing(self.screen, thing, slot))
            if thing == Thing.NORTH_DOOR:
                self.door_locked = False
                self.n_door = slot * 64
            elif thing == Thing.CLOSED_DOOR:
                self.door_locked = True
                self.n_door = slot * 64
            elif thing == Thing.CURSE_ON:
                self.cursed = True
            elif thing == Thing.CURSE_OFF:
                self.cursed = False
            self.torches[slot] = thing == Thing.TORCHES

        if self.go_s and room.south_door:
            slot = room.south_door - 1
            put_thing(self.screen, Thing.SOUTH_DOOR, slot)
            self.s_door = slot * 64 + 16

        flags = room.flags
        if RoomFlag.UNVISITED in flags:
            self._gain(1)
            self.world.clear_flag(self.current_room, RoomFlag.UNVISITED)

        if RoomFlag.MONSTER in flags:
            self.monster_x = self._random_x()
            self.monster_y = self._random_y(143)
            self.monster_in_room = True
            self.monster_hp = (self.monster_hp & 0x03) + 7
            self._update_monster_health()
        else:
            self.monster_in_room = False

        self.treasure_in_room = RoomFlag.TREASURE in flags
        if self.treasure_in_room:
            self.treasure_x = self._random_x()
            self.treasure_y = self._random_y(140)

        self.healthpack_in_room = RoomFlag.HEALTHPACK in flags
        if self.healthpack_in_room:
            self.healthpack_x = self._random_x()
            self.healthpack_y = self._random_y(140)

        self.key_in_room = RoomFlag.KEY in flags
        if self.key_in_room:
            self.key_x = self._random_x()
            self.key_y = self._random_y(143)

        self.princess_in_room = RoomFlag.PRINCESS in flags
        if self.princess_in_room:
            self.princess_y = PRINCESS_Y

        self._draw_hud()
        if self.has_key:
            put_thing(self.screen, Thing.KEY_ICON, 0)

    def player_attack(self) -> bool:
        """Swing at the monster; return True if the blow landed."""
        roll = self.rng.next()
        if roll <= 100:
            return False
        self.monster_hp = (self.monster_hp - (roll & 0x07)) & 0xFF
        if self.monster_hp > 0x40:
            self.monster_hp = 0
        if self.monster_hp == 0:
            self._gain(2)
            self.world.clear_flag(self.current_room, RoomFlag.MONSTER)
            self.monster_in_room = False
        self._gain(1)
        self._update_score()
        self._update_monster_health()
        return True

    def monster_attack(self) -> bool:
        """Let the monster strike; return True if it landed."""
        roll = self.rng.next()
        if roll <= 200:
            return False
        if self.monster_direction < Direction.WEST:
            self.monster_frame = MONSTER_LUNGE_RIGHT_FRAME
        else:
            self.monster_frame = MONSTER_LUNGE_LEFT_FRAME
        self.player_hp = (self.player_hp - (roll & 0x07)) & 0xFF
        if self.player_hp > 0x40:
            self.player_hp = 0
        if self.player_hp == 0:
            self.lives = (self.lives - 1) & 0xFF
            if self.lives:
                self.lose_life()
            else:
                self._end_game()
        self._update_health()
        return True

    def move_monster(self) -> None:
        """Step the monster one pixel toward the knight on each axis."""
        if self.monster_y < self.player_y:
            self.monster_direction = Direction.SOUTH
            self.monster_y = (self.monster_y + 1) & 0xFF
        else:
            self.monster_direction = Direction.NORTH
            self.monster_y = (self.monster_y - 1) & 0xFF
        if self.monster_x < self.player_x:
            self.monster_direction = Direction.EAST
            self.monster_x = (self.monster_x + 1) & 0xFFFF
        else:
            self.monster_direction = Direction.WEST
            self.monster_x = (self.monster_x - 1) & 0xFFFF

    def collect_items(self) -> None:
        """Pick up whatever item the knight is touching."""
        if self.treasure_in_room and self.proximity(self.treasure_x, self.treasure_y,
                                                    TOUCH_DISTANCE):
            self.treasure_in_room = False
            self.gold = (self.gold + self.rng.next()) & 0xFFFF
            self._gain(1)
            self.world.clear_flag(self.current_room, RoomFlag.TREASURE)
            self._update_gold()
            self._update_score()

        if self.healthpack_in_room and self.proximity(self.healthpack_x, self.healthpack_y,
                                                      TOUCH_DISTANCE):
            self.healthpack_in_room = False
            self.player_hp = (self.player_hp + 5) & 0xFF
            self.world.clear_flag(self.current_room, RoomFlag.HEALTHPACK)
            self._update_health()
            self.uncurse_timer = 0x00FF

        if self.key_in_room and self.proximity(self.key_x, self.key_y, TOUCH_DISTANCE):
            self.key_in_room = False
            self._gain(5)
            self.world.clear_flag(self.current_room, RoomFlag.KEY)
            self._update_score()
            self.has_key += 1
            put_thing(self.screen, Thing.KEY_ICON, 0)

    def tick(self, controls: Controls | None = None) -> None:
        """Run one game step with the given controls."""
        if not self.playing:
            return
        pressed = controls if controls is not None else Controls()
        self._animate()

        if pressed.level_up:
            self.level_up()
            self.enter_room()

        north, south, east, west = pressed.north, pressed.south, pressed.east, pressed.west
        self.direction = Direction.STANDING

        if pressed.fire:
            self.attack_sound = 1
            if self.prev_direction == Direction.WEST:
                self.direction = Direction.LUNGE_LEFT
            else:
                self.direction = Direction.LUNGE_RIGHT
            north = south = east = west = False

        if self.cursed:
            if self.uncurse_timer == 0:
                west, east = east, west
                north, south = south, north
            else:
                self.uncurse_timer -= 1

        if west:
            self.direction = Direction.WEST
            self.prev_direction = Direction.WEST
            if self.player_x > LEFT_EDGE - 1:
                self.player_x -= STEP
        if self.player_x < LEFT_EDGE and self.go_w:
            self.current_room = self.go_w
            self.player_x = WEST_ENTRY_X
            self.enter_room()
        if self.player_x > RIGHT_EDGE and self.go_e:
            self.current_room = self.go_e
            self.player_x = EAST_ENTRY_X
            self.enter_room()

        if east:
            self.prev_direction = Direction.EAST
            if self.player_x < RIGHT_EDGE + 1:
                self.player_x += STEP
            self.direction = Direction.EAST

        if north:
            self._walk_north()
        if south:
            self._walk_south()

        if pressed.quit:
            self.playing = False

        if self.princess_in_room and self.has_key and self.proximity(
                self.princess_x, self.princess_y, TOUCH_DISTANCE):
            self._rescue_princess()

        if self.monster_in_room and self.proximity(self.monster_x, self.monster_y,
                                                   TOUCH_DISTANCE):
            if pressed.fire:
                self.player_attack()
                if self.monster_hp > 0:
                    self.monster_attack()
            else:
                self.monster_attack()

        self.hp_timer += LOOP_PASSES
        if self.hp_timer > 0xFFFF:
            self.hp_timer &= 0xFFFF
            self.player_hp = (self.player_hp + 1) & 0xFF
            self._update_health()

    def _walk_north(self) -> None:
        self.direction = Direction.NORTH
        if self.player_y >= NORTH_WALL_Y:
            self.player_y -= STEP
        if self.player_y >= NORTH_WALL_Y:
            return
        if self.go_n and self.n_door < self.player_x <= self.n_door + NORTH_DOOR_WIDTH:
            if self.door_locked:
                if self.has_key:
                    self.has_key -= 1
                    self.world.unlock_door(self.current_room)
                    self._gain(2)
                    self.current_room = self.go_n
                    self.player_y = NORTH_ENTRY_Y
                    self.door_locked = False
                    self.enter_room()
            else:
                self.current_room = self.go_n
                self.player_y = NORTH_ENTRY_Y
                self.enter_room()
        if self.map_x and self.map_x < self.player_x < self.map_x + 40:
            self.map_views += 1
            self.enter_room()

    def _walk_south(self) -> None:
        self.direction = Direction.SOUTH
        if self.player_y < SOUTH_WALL_Y:
            self.player_y += STEP
        if (self.player_y >= SOUTH_WALL_Y and self.go_s
                and self.s_door < self.player_x <= self.s_door + SOUTH_DOOR_WIDTH):
            self.current_room = self.go_s
            self.player_y = SOUTH_ENTRY_Y
            self.enter_room()

    def _rescue_princess(self) -> None:
        self.princess_in_room = False
        self.world.clear_flag(self.current_room, RoomFlag.PRINCESS)
        self.world.clear_flag(self.current_room, RoomFlag.UNVISITED)
        self._gain(RESCUE_EXPERIENCE)
        self._update_score()
        self.has_key -= 1
        put_thing(self.screen, Thing.LOSE_KEY, 0)
        self.world.start_escape()
        self.home_room = self.current_room

    def level_up(self) -> None:
        """Move on to the next level: new world, a bonus life, more hit points."""
        self.home_room = 1
        self.current_room = 1
        self.level += 1
        self._draw_level_up_screen()
        self.world = self._load_world(self.level)
        self.cursed = False
        self.current_room = self.home_room
        self.player_hp = (self.player_hp + self.level * 2) & 0xFF
        self.player_x = START_X
        self.player_y = START_Y
        self.lives = (self.lives + 1) & 0xFF

    def lose_life(self) -> None:
        """Send the knight back to the home room with fresh hit points."""
        self.player_x = START_X
        self.player_y = START_Y
        self.hp_timer = 0x0001
        self.current_room = self.home_room
        self.player_hp = (self.player_hp & 0x03) + BASE_HP
        self.screen.print_text("YOU HAVE PERISHED", 12, 11, WHITE, MESSAGE_BACKGROUND)
        self.screen.print_text("PRESS ANY KEY TO CONTINUE", 8, 13, WHITE, MESSAGE_BACKGROUND)
        self.enter_room()

    def _end_game(self) -> None:
        self.playing = False
        self.game_over = True
        self._update_lives()
        self._update_health()
        self.screen.print_text("YOU HAVE PERISHED", 12, 11, WHITE, MESSAGE_BACKGROUND)
        self.screen.print_text("FOR THE LAST TIME", 12, 13, WHITE, MESSAGE_BACKGROUND)
        self.screen.print_text("PRESS Y TO PLAY AGAIN", 10, 15, WHITE, MESSAGE_BACKGROUND)

    # -------------------------------------------------------------- animation

    def _animate(self) -> None:
        if self.monster_in_room:
            self.move_monster()
            frames = _MONSTER_WALK[self.monster_direction]
            step = self._monster_steps[self.monster_direction]
            self.monster_frame = frames[step]
            self._monster_steps[self.monster_direction] = (step + 1) % len(frames)

        if self.direction in _PLAYER_WALK:
            frames = _PLAYER_WALK[self.direction]
            step = self._player_steps[self.direction]
            self.player_frame = frames[step]
            self._player_steps[self.direction] = (step + 1) % len(frames)
        elif self.direction in _PLAYER_POSE:
            self.player_frame = _PLAYER_POSE[self.direction]

        self.collect_items()
        self._flicker_torches()

    def _flicker_torches(self) -> None:
        for slot, lit in enumerate(self.torches):
            if not lit:
                continue
            first = _TORCH_ROW * WIDTH + slot * 8 + _TORCH_CELLS[0]
            colour = _TORCH_COLOURS[1] if self.screen.screen_ram[first] == _TORCH_COLOURS[0] \
                else _TORCH_COLOURS[0]
            for cell in _TORCH_CELLS:
                self.screen.screen_ram[_TORCH_ROW * WIDTH + slot * 8 + cell] = colour

    # -------------------------------------------------------------------- HUD

    def _draw_hud(self) -> None:
        self.screen.print_text("EXP:", 1, 1, WHITE, 0x00)
        self._update_score()
        self.screen.print_text("GOLD:", 14, 23, WHITE, 0x00)
        self._update_gold()
        self.screen.print_text("HEALTH:", 29, 1, WHITE, 0x00)
        self._update_health()
        self.screen.print_text("LIVES:", 31, 23, WHITE, 0x00)
        self.screen.print_text("ENEMY:", 1, 23, RED, 0x00)
        self._update_lives()

    def _update_score(self) -> None:
        self.screen.print_number(self.exp, 9, 1, WHITE, 0x00)
        self.update_max_hp()

    def _update_gold(self) -> None:
        self.screen.print_number(self.gold, 23, 23, WHITE, 0x00)

    def _update_lives(self) -> None:
        self.screen.print_number(self.lives, 38, 23, WHITE, 0x00)

    def _update_health(self) -> None:
        self.screen.print_text("   ", 37, 1, WHITE, 0x00)
        if self.player_hp > self.max_hp:
            self.player_hp = self.max_hp
        self.screen.print_number(self.player_hp, 38, 1, self.health_colour(), 0x00)

    def _update_monster_health(self) -> None:
        self.screen.print_text("     ", 7, 23, WHITE, 0x00)
        self.screen.print_number(self.monster_hp, 8, 23, RED, 0x00)

    def _draw_level_up_screen(self) -> None:
        self.screen.clear()
        self.screen.print_text("CONGRATULATIONS", 12, 2, WHITE, LEVEL_UP_BACKGROUND)
        self.screen.print_text("YOU HAVE COMPLETED THE LEVEL", 6, 4, WHITE, LEVEL_UP_BACKGROUND)
        self.screen.print_text("PRESS ANY KEY TO CONTINUE", 8, 24, DARK_GREY,
                               LEVEL_UP_BACKGROUND)