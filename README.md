# sewerfrog

A small tile-based puzzle game played in a pygame window. The frog starts
somewhere in the sewer, has to pick up every egg, and then reach the exit.
Walls are water; the frog cannot cross them.

## Installing

```
pip install .
```

## Playing

```
sewerfrog maps/level1.ber
sewerfrog --bonus maps/level1.ber
```

The command takes exactly one map path (a file with a `.ber` extension) and,
optionally, the `--bonus` flag.

Controls:

| Key   | Action     |
|-------|------------|
| W     | move up    |
| A     | move left  |
| S     | move down  |
| D     | move right |
| Esc   | quit       |

Closing the window also quits.

The view shows 13 × 5 tiles and scrolls when the frog gets close to its edge.
Every successful move is counted. In normal mode the count is printed as
`Moves: N` after each move. Once all eggs are collected, stepping onto the
exit prints a `YOU WIN!` banner and ends the game. Before that, the frog can
walk over the exit like floor.

With `--bonus` the map may also hold snakes (`X`). Walking into a snake loses
the game and the level restarts from the same file. In this mode the move
counter is drawn in the top-left corner of the window instead of being
printed.

## Map files

A map is a rectangle of characters, one row per line:

| Char | Meaning              |
|------|----------------------|
| `1`  | wall                 |
| `0`  | empty floor          |
| `P`  | player start         |
| `C`  | collectible egg      |
| `E`  | exit                 |
| `X`  | snake (`--bonus` only) |

The map is checked before the window opens:

- the file must exist and be readable, and its name must have a `.ber` extension;
- every row must have the same length, and the map must not be square;
- only the characters above may appear;
- there must be exactly one `P` and one `E`, counted together;
- there must be at least one `C`;
- the border must be walls only;
- the exit and every egg must be reachable from the start.

When a check fails, the command prints `Error` and the reason on standard error
and exits with status 1. A wrong number of arguments is reported the same way.

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

## Using it from Python

```python
from sewerfrog.cli import load_game
from sewerfrog.game import Direction, MoveResult

game = load_game("maps/level1.ber", bonus=False)
result = game.move(Direction.RIGHT)
if result is MoveResult.WON:
    ...
```

- `sewerfrog.mapfile.read_map(path, allow_enemies)` reads and parses a map
  into a `GameMap`. `parse_map(lines, allow_enemies)` does the same from lines
  of text. `validate_map(game_map)` runs the checks above and returns the start
  position `(x, y)`. Failures raise `MapError`.
- `sewerfrog.pathfinding.find_start` and `has_valid_path` can be used on their
  own.
- `sewerfrog.game.Game` holds the map, the `Player` and the camera.
  `Game.move` returns a `MoveResult`: `BLOCKED`, `MOVED`, `WON` or `LOST`.
  `Game.visible_tiles()` yields the tiles inside the current view.
- `sewerfrog.window.GameWindow` draws a `Game` onto a pygame surface and
  handles key presses.

## Textures

Sprites are loaded from a `textures/` directory relative to the current
working directory. The files looked for are `rock.xpm`, `water.xpm`,
`frog_rock.xpm`, `egg_rock.xpm`, `exit.xpm` and `frog_exit.xpm`. In bonus mode
`snake.xpm` is also loaded.

The package does not ship these images. An image that cannot be loaded is
skipped when drawing, so the game can still be played with some or all of
them missing, but the window will show nothing for those tiles.

## Running the tests

```
pip install .[test]
pytest
```