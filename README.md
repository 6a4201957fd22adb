# dungeoncrawl

A small terminal roguelike. Each level is a generated dungeon of six to nine
rooms, joined by corridors, with one to three up and down staircases. The player
(`@`) and the monsters share one turn queue, ordered by move time. Monsters
come in three kinds:

- `1`: steps right and/or down toward the player when the player lies that way
- `3`: follows the shortest path through open floor
- `7`: follows the shortest path through rock, wearing it down as it goes

A monster that walks into another monster kills it. You win when no monsters
are left. You lose when a monster reaches you.

The game draws with the standard library's `curses` module, so it needs a
terminal that `curses` supports (POSIX systems). It has no other dependencies.

## Installing

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Playing

    dungeoncrawl

Command-line options:

| Option         | Effect                                                                    |
|----------------|---------------------------------------------------------------------------|
| `--load`, `-l` | load the dungeon from `~/.rlg327/Dungeon`                                 |
| `-lt NAME`     | load the dungeon from `~/.rlg327/saved_Dungeons/NAME`                     |
| `--save`, `-s` | save the dungeon to `~/.rlg327/Dungeon`                                   |
| `--pathfind`   | print the floor and tunnelling distance maps before the game starts       |
| `--nummon N`   | start with `N` monsters (if `N` is 0 or omitted, a random count is used)  |
| `--parse`      | read `~/.rlg327/monster_desc.txt` and page through its monster templates  |

Without `--load` or `-lt`, a new dungeon is generated. If a dungeon file cannot
be read or written, the command prints an error and exits with status 1.
Unknown arguments are ignored.

Keys during play:

- `k j h l` or `8 2 4 6`: move up, down, left or right. Moving into a monster kills it
- `u n` or `9 3`: move diagonally up-right or down-right. Moving into a monster kills it
- `y` or `7`: move diagonally up-left. This key never attacks
- `b` or `1`: needs the down-left cell to be open, then moves straight down
  (attacking a monster in the down-left cell)
- `5`, `.` or space: rest for one turn
- `>` / `<`: on an up or down staircase, go to a newly generated level
- `m`: list the monsters and where they lie relative to you. If there are more
  than 16, the arrow keys page through the list. Escape closes it
- `f`: reveal the whole dungeon. Press `f` again to return
- `t`: teleport. Move the `*` cursor with the direction keys and press `t`, or
  press `r` to jump to a random open cell
- `Q`: quit

The normal view shows only what you have seen. Cells within two steps of you are
revealed as you move.

## Using the library

The parts of the game also work on their own:

- `dungeoncrawl.dungeon.Dungeon`: generates a level (`generate`), places
  characters (`place_characters`), computes distance maps (`update_distances`)
  and draws the player's view (`update_output`)
- `dungeoncrawl.pathfinder.Pathfinder`: Dijkstra distance maps over open floor
  (`dijkstra_floor`) or through rock (`dijkstra_all`), with `cost` and `render`
- `dungeoncrawl.heap.FibonacciHeap`: a min-heap ordered by a key function, with
  `insert`, `remove_min`, `peek_min`, `meld`, `decrease_key` and `sift_decreased`
- `dungeoncrawl.dice.Dice`: parses and rolls dice such as `"10+2d6"`
- `dungeoncrawl.monster_template`: `parse_monster_descriptions` and
  `load_monster_descriptions` read `RLG327 MONSTER DESCRIPTION 1` files into
  `MonsterTemplate` objects. Incomplete or duplicated entries are dropped
- `dungeoncrawl.dungeon_file`: `encode_dungeon`, `decode_dungeon`,
  `save_dungeon` and `load_dungeon` for the binary `RLG327-S2019` format. On
  loading, the terrain is rebuilt from hardness, rooms and stairs
- `dungeoncrawl.display.Display`: draws the screens on any object with the
  `addstr`, `getch` and `clear` methods of a `curses` window

```python
import random

from dungeoncrawl.dice import Dice
from dungeoncrawl.dungeon import Dungeon

dungeon = Dungeon(random.Random(1))
dungeon.generate()
dungeon.update_distances()
print(dungeon.render_cost_floor())

print(Dice.parse("10+2d6").roll(random.Random(3)))
```

## What it does not do

- Monster templates from `--parse` can only be browsed. The monsters in play do
  not use them: their kind and speed are chosen at random, and their hit points,
  damage, colours and abilities are not used.
- There is no combat beyond one-hit kills, and there are no items.
- The game does not save during play. `--save` writes the dungeon only once, at
  start-up.