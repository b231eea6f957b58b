"""Game state and the rules that apply when the player moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from babinski.gamemap import (
    COLLECTIBLE,
    ENEMY,
    FLOOR,
    OPEN_EXIT,
    WALL,
    GameMap,
)

ESCAPE_KEY = 65307

CAUGHT_MESSAGE = "Game Over : Le Jarl vous a eu"
ESCAPED_MESSAGE = "Vous êtes sorti du Babinski"


class Direction(Enum):
    """A step on the grid, as an ``(dx, dy)`` offset."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_KEY_DIRECTIONS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def direction_for_key(key: int | str) -> Direction | None:
    """Return the direction bound to ``key`` (a character or key code), if any."""
    if isinstance(key, int):
        if not 0 <= key < 0x110000:
            return None
        key = chr(key)
    return _KEY_DIRECTIONS.get(key)


class Outcome(Enum):
    """The state of the game after an input."""

    PLAYING = "playing"
    CAUGHT = "caught"
    ESCAPED = "escaped"
    QUIT = "quit"


_MESSAGES = {
    Outcome.CAUGHT: CAUGHT_MESSAGE,
    Outcome.ESCAPED: ESCAPED_MESSAGE,
}


@dataclass(frozen=True)
class MoveResult:
    """What a single input did to the game."""

    moved: bool
    outcome: Outcome
    position: tuple[int, int]
    previous: tuple[int, int]
    moves: int
    exit_open: bool = False

    @property
    def finished(self) -> bool:
        return self.outcome is not Outcome.PLAYING

    @property
    def message(self) -> str | None:
        return _MESSAGES.get(self.outcome)


class Game:
    """A game in progress on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.grid = game_map.copy_grid()
        self.player = game_map.player
        self.facing = Direction.DOWN
        self.moves = 0
        self.collected = 0
        self.outcome = Outcome.PLAYING

    @property
    def finished(self) -> bool:
        return self.outcome is not Outcome.PLAYING

    @property
    def exit_open(self) -> bool:
        return self.tile_at(*self.map.exit) == OPEN_EXIT

    def tile_at(self, x: int, y: int) -> str:
        """Return the current tile at column ``x``, row ``y``."""
        if not (0 <= y < len(self.grid) and 0 <= x < len(self.grid[y])):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def _result(self, moved: bool, previous: tuple[int, int]) -> MoveResult:
        return MoveResult(
            moved=moved,
            outcome=self.outcome,
            position=self.player,
            previous=previous,
            moves=self.moves,
            exit_open=self.exit_open,
        )

    def move(self, direction: Direction) -> MoveResult:
        """Try to step one tile in ``direction`` and apply what is found there."""
        if self.finished:
            raise RuntimeError("the game is over")
        previous = self.player
        x, y = previous[0] + direction.dx, previous[1] + direction.dy
        tile = self.tile_at(x, y)
        if tile == WALL:
            return self._result(False, previous)

        self.player = (x, y)
        self.facing = direction
        if tile == ENEMY:
            self.outcome = Outcome.CAUGHT
            return self._result(True, previous)
        if tile == OPEN_EXIT:
            self.outcome = Outcome.ESCAPED
            return self._result(True, previous)
        if tile == COLLECTIBLE:
            self.grid[y][x] = FLOOR
            self.collected += 1
        if self.collected == self.map.collectibles:
            ex, ey = self.map.exit
            self.grid[ey][ex] = OPEN_EXIT
        self.moves += 1
        return self._result(True, previous)

    def handle_key(self, key: int | str) -> MoveResult:
        """Apply a key press: escape quits, ``w``/``a``/``s``/``d`` move."""
        if key == ESCAPE_KEY or key == "escape":
            self.outcome = Outcome.QUIT
            return self._result(False, self.player)
        direction = direction_for_key(key)
        if direction is None:
            return self._result(False, self.player)
        return self.move(direction)