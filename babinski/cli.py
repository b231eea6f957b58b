"""Command-line entry point: validate a map file and play it."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from babinski.display import run
from babinski.game import Game
from babinski.gamemap import GameMap, MapError, check_playable, load_map

SPRITE_DIR = Path("sprites")


def prepare_map(path: str | PathLike[str]) -> GameMap:
    """Load a map, check it can be completed, and return it."""
    game_map = load_map(path)
    check_playable(game_map)
    print("Chemin valide !")
    return game_map


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file given as the only argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Map not found", end="")
        return 0
    try:
        game_map = prepare_map(args[0])
    except MapError as exc:
        print(f"Error\n{exc}")
        return 1
    return run(Game(game_map), SPRITE_DIR)


if __name__ == "__main__":
    sys.exit(main())