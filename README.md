# babinski

A small top-down puzzle game played on a grid of 64×64 pixel tiles. Walk
around the map, pick up every collectible, keep clear of the guards, and
leave through the exit once it opens. The window is drawn with pygame.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
babinski path/to/level.ber
```

The command takes exactly one argument, the path of a map file. If it gets
any other number of arguments it prints `Map not found` and exits with
status 0.

The map is checked first (see below). If it passes, `Chemin valide !` is
printed and a window titled `BABINSKI` opens. It is sized to the map at
64 pixels per tile.

### Sprites

Sprite images are loaded from a `sprites` directory in the current working
directory. It must hold these files:

| File                     | Used for                  |
|--------------------------|---------------------------|
| `sprite_murs.xpm`        | wall                      |
| `sprite_sol.xpm`         | floor                     |
| `sprite_ballon.xpm`      | collectible               |
| `sprite_closed_door.xpm` | closed exit               |
| `sprite_open_door.xpm`   | open exit                 |
| `sprite_secu.xpm`        | guard                     |
| `sprite_dos.xpm`         | player facing up          |
| `sprite_face.xpm`        | player facing down        |
| `sprite_droite.xpm`      | player facing right       |
| `sprite_gauche.xpm`      | player facing left        |

If any of them cannot be loaded, `Error` and `Erreur de chargement des
images` are printed and the command exits with status 1.

### Controls

| Key      | Action     |
|----------|------------|
| `w`      | move up    |
| `a`      | move left  |
| `s`      | move down  |
| `d`      | move right |
| `Escape` | quit       |

Closing the window also quits. After each step that keeps the game going,
the running move count is printed to the terminal as `Moves: <n>` and shown
in the top-left corner of the window.

### Rules

- Walls (`1`) cannot be walked through. Bumping into one is not a move.
- Stepping on a collectible (`C`) picks it up.
- Once every collectible has been picked up, the exit (`E`) opens. Stepping
  on the open exit wins the game and prints `Vous êtes sorti du Babinski`.
  A closed exit can be walked over.
- Stepping on a guard (`N`) ends the game and prints
  `Game Over : Le Jarl vous a eu`.

## Map format

A map is a plain-text file with one row of tiles per line. Only these
characters are allowed:

| Char | Tile         |
|------|--------------|
| `0`  | floor        |
| `1`  | wall         |
| `P`  | player start |
| `E`  | exit         |
| `C`  | collectible  |
| `N`  | guard        |

Before the game starts, a map is checked in this order. It must be:

1. readable,
2. rectangular, with every line the same length,
3. made only of the characters above,
4. holding exactly one `P`, exactly one `E` and at least one `C`,
5. closed in by walls along its whole border,
6. playable. The exit and every collectible must be reachable from the
   player's start without passing through a wall or a guard.

If any check fails, `Error` and the reason are printed and the command
exits with status 1.

Example:

```
1111111111
1P0C00N0C1
1011110101
1C0000E001
1111111111
```

## Using it as a library

The map and game logic work without opening a window:

```python
from babinski.gamemap import load_map, check_playable
from babinski.game import Game, Direction

game_map = load_map("level.ber")
check_playable(game_map)

game = Game(game_map)
result = game.move(Direction.RIGHT)
print(result.outcome, result.moves, game.tile_at(2, 1))
```

- `babinski.gamemap` has `load_map`, `read_map_lines`, `GameMap.from_lines`,
  the separate checks `check_rectangular`, `check_characters` and
  `check_walls`, and `explore` and `check_playable` for reachability.
  `MapError` is raised for any map that fails a check.
- `babinski.game.Game` holds the state of a game in progress. `move` takes
  a `Direction`, and `handle_key` takes a key character or key code. Both
  return a `MoveResult` with its `outcome` (`Outcome.PLAYING`, `CAUGHT`,
  `ESCAPED` or `QUIT`).
- `babinski.display` has `load_sprites`, `draw_map` and `run`, which opens
  the window for a `Game`.
- `babinski.cformat.format_printf` is a small printf-style formatter. It
  supports `%c %s %d %i %u %p %x %X %%` with 32-bit integer semantics.

## What it does not include

No sprite images come with the package. You have to supply the `sprites`
directory yourself. There are no bundled levels either.