"""Loading, validating and exploring the tile maps the game is played on.

A map is a rectangle of single-character tiles:

``0`` floor, ``1`` wall, ``P`` player start, ``E`` exit, ``C`` collectible
and ``N`` enemy. A valid map has exactly one player and one exit, at least
one collectible, only these characters, and walls along its whole border.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from os import PathLike

FLOOR = "0"
WALL = "1"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "N"
OPEN_EXIT = "O"

TILES = frozenset({FLOOR, WALL, PLAYER, EXIT, COLLECTIBLE, ENEMY})


class MapError(ValueError):
    """Raised when a map cannot be read or is not a valid game map."""


@dataclass
class PathCheck:
    """What a flood fill from the player's start was able to reach."""

    collect_found: int = 0
    exit_found: bool = False
    enemy_found: bool = False


@dataclass
class GameMap:
    """A validated map with the positions of its player and exit."""

    grid: list[str]
    player: tuple[int, int]
    exit: tuple[int, int]
    collectibles: int
    width: int = field(init=False)
    height: int = field(init=False)

    def __post_init__(self) -> None:
        self.grid = list(self.grid)
        self.height = len(self.grid)
        self.width = len(self.grid[0]) if self.grid else 0

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> GameMap:
        """Build a map from its rows, raising :class:`MapError` if it is invalid."""
        rows = list(lines)
        check_rectangular(rows)

        players: list[tuple[int, int]] = []
        exits: list[tuple[int, int]] = []
        collectibles = 0
        for y, row in enumerate(rows):
            for x, tile in enumerate(row):
                if tile == PLAYER:
                    players.append((x, y))
                elif tile == EXIT:
                    exits.append((x, y))
                elif tile == COLLECTIBLE:
                    collectibles += 1

        check_characters(rows)
        if len(players) != 1:
            raise MapError("Need exactly 1 player (P)")
        if len(exits) != 1:
            raise MapError("Need exactly 1 exit (E)")
        if collectibles < 1:
            raise MapError("Need at least 1 collectible (C)")
        check_walls(rows)

        return cls(
            grid=rows,
            player=players[0],
            exit=exits[0],
            collectibles=collectibles,
        )

    def copy_grid(self) -> list[list[str]]:
        """Return an independent, mutable copy of the tiles, row by row."""
        return [list(row) for row in self.grid]


def read_map_lines(path: str | PathLike[str]) -> list[str]:
    """Read a map file and return its lines without line terminators."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError("Can't open map") from exc
    text = data.decode("latin-1")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read and validate the map stored at ``path``."""
    return GameMap.from_lines(read_map_lines(path))


def check_rectangular(lines: Sequence[str]) -> int:
    """Return the common width of ``lines``; raise if they differ or are absent."""
    widths = {len(line) for line in lines}
    if len(widths) != 1:
        raise MapError("Map is not rectangular")
    return widths.pop()


def check_characters(grid: Iterable[Iterable[str]]) -> None:
    """Raise :class:`MapError` if any tile is not a known map character."""
    if any(tile not in TILES for row in grid for tile in row):
        raise MapError("Not a possible character")


def check_walls(grid: Sequence[Sequence[str]]) -> None:
    """Raise :class:`MapError` unless every border tile is a wall."""
    height = len(grid)
    for y, row in enumerate(grid):
        on_edge_row = y in (0, height - 1)
        last = len(row) - 1
        for x, tile in enumerate(row):
            if (on_edge_row or x in (0, last)) and tile != WALL:
                raise MapError("Invalid walls")


def explore(
    grid: Sequence[Sequence[str]], start: tuple[int, int]
) -> PathCheck:
    """Flood-fill from ``start`` through non-wall tiles.

    Enemies are noted but block the way; the exit is walked through.
    The grid itself is left unchanged.
    """
    check = PathCheck()
    visited: set[tuple[int, int]] = set()
    stack = [start]
    while stack:
        x, y = stack.pop()
        if y < 0 or x < 0 or y >= len(grid) or x >= len(grid[y]):
            continue
        if (x, y) in visited:
            continue
        tile = grid[y][x]
        if tile == WALL:
            continue
        if tile == ENEMY:
            check.enemy_found = True
            continue
        if tile == COLLECTIBLE:
            check.collect_found += 1
        elif tile == EXIT:
            check.exit_found = True
        visited.add((x, y))
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    return check


def check_playable(game_map: GameMap) -> PathCheck:
    """Ensure the exit and every collectible can be reached from the start."""
    check = explore(game_map.grid, game_map.player)
    if not check.exit_found:
        raise MapError("La sortie n'est pas atteignable.")
    if check.collect_found != game_map.collectibles:
        raise MapError("Il reste des collectibles inaccessibles.")
    return check