"""A terminal roguelike: generated dungeons, pathfinding monsters, a Fibonacci-heap turn queue, dice, monster description files and a binary dungeon format."""

__version__ = "0.7.0"