# knightsquest

The rules and data of a small dungeon-crawling role-playing game drawn on a
40×25 cell multicolour bitmap screen. The knight walks from room to room,
collects treasure, health packs and keys, fights monsters, rescues the
prisoner and escapes to the next level.

## Modules

- `knightsquest.font` – the eight-byte glyphs for letters, digits and
  punctuation: `glyph_for`, `glyph_index`, `digit_glyph`.
- `knightsquest.screen` – `Screen`, an in-memory bitmap with screen and
  colour memory. `plot_shape`, `plot_glyph`, `print_text` and
  `print_number` draw into it; `cell_colours` and `cell_pixels` read a cell
  back.
- `knightsquest.world` – `World`, `Room` and `RoomFlag`. A world file is a
  run of eleven-byte room records (exits, five wall slots, south door slot,
  flags); `World.from_bytes` and `World.to_bytes` read and write it.
  `unlock_door` opens locked doors in a room and `start_escape` opens the
  way out of the level.
- `knightsquest.rng` – `RandomTable`, 64 random bytes handed out in turn;
  `RandomTable.seeded(source)` fills one by calling `source` 64 times.
- `knightsquest.scenery` – `Thing` (what a wall slot can hold),
  `put_thing` to draw one into a slot and `draw_room_background` for the
  ceiling, floor and brick wall. `put_thing` returns a `Placement` with the
  positions a thing fixes (where the princess stands, where a map hangs).
- `knightsquest.game` – `Game`, driven one step at a time by
  `Game.tick(Controls(...))`. It moves the knight and the monster, picks up
  items, fights, walks through doors, levels up and takes lives.
- `knightsquest.spritefile` – `SpriteSet`, the sprite file format (an
  eleven-byte colour header then 64-byte frames, the first with sprite
  pointer 0x20), and `write_level_files` / `read_level_files` for a level's
  `SPRITES<n>` and `WORLD<n>` files.
- `knightsquest.level1`, `knightsquest.level2` – the built-in sprites and
  castle of the first two levels: `sprite_set()` and `world()`.
- `knightsquest.hexdump` – a hex listing of data files, with
  `format_address`, `dump_lines` and the `knightsquest-hexdump` command.

## Installing

```
pip install .
```

## Writing level files

```python
from pathlib import Path
from knightsquest import level1, spritefile

disk = Path("disk")
disk.mkdir(exist_ok=True)
spritefile.write_level_files(disk, 1, level1.sprite_set(), level1.world())
sprites, world = spritefile.read_level_files(disk, 1)
print(world.room(1))
```

## Playing a few steps

```python
import random

from knightsquest import level1, level2
from knightsquest.game import Controls, Game
from knightsquest.rng import RandomTable

levels = {1: level1.world, 2: level2.world}
dice = random.Random(7)
game = Game(load_world=lambda level: levels[level](),
            rng=RandomTable.seeded(lambda: dice.randrange(256)))

game.tick(Controls(east=True))
game.tick(Controls(fire=True))
print(game.current_room, game.player_x, game.player_hp, game.exp)
```

The constructor loads the starting level's world and draws the first room
into `game.screen`. `Controls` has `north`, `south`, `east`, `west`, `fire`,
`level_up` and `quit`; after `quit`, or when the last life is lost,
`game.playing` is false and further ticks do nothing.

## Dumping a file

```
knightsquest-hexdump SPRITES1
knightsquest-hexdump --program SOMEFILE
```

Prints the file as rows of eleven hexadecimal bytes, each row led by its
address. With `-p` / `--program` the first two bytes are taken as the load
address, printed as `*=$XXXX`, and the rows start there.

## What the package does not do

It draws into memory only: there is no window or display, no keyboard or
joystick input, no music or sound, and no loading of splash, synopsis or map
pictures. Stepping onto a wall map only counts a view in `Game.map_views`.
A program that shows the game and reads the player's keys has to be built
on top of `Game` and `Screen`.