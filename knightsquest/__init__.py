"""Game rules, room data and level file tools for a bitmap dungeon crawler."""

__version__ = "0.1.0"
__all__ = [
    "font",
    "screen",
    "world",
    "rng",
    "scenery",
    "game",
    "spritefile",
    "level1",
    "level2",
    "hexdump",
]