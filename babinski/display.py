"""Drawing the game with pygame and running its window."""

from __future__ import annotations

from dataclasses import dataclass, fields
from os import PathLike
from pathlib import Path

import pygame

from babinski.game import ESCAPE_KEY, Direction, Game, MoveResult, Outcome
from babinski.gamemap import (
    COLLECTIBLE,
    ENEMY,
    EXIT,
    FLOOR,
    OPEN_EXIT,
    PLAYER,
    WALL,
)

TILE_SIZE = 64
WINDOW_TITLE = "BABINSKI"
TEXT_COLOR = (255, 255, 255)

_SPRITE_FILES = {
    "wall": "sprite_murs.xpm",
    "floor": "sprite_sol.xpm",
    "collectible": "sprite_ballon.xpm",
    "closed_exit": "sprite_closed_door.xpm",
    "open_exit": "sprite_open_door.xpm",
    "enemy": "sprite_secu.xpm",
    "player_up": "sprite_dos.xpm",
    "player_down": "sprite_face.xpm",
    "player_right": "sprite_droite.xpm",
    "player_left": "sprite_gauche.xpm",
}


class SpriteError(RuntimeError):
    """Raised when a sprite image cannot be loaded."""


@dataclass
class Sprites:
    """The images used to draw every tile and the player's four poses."""

    wall: pygame.Surface
    floor: pygame.Surface
    collectible: pygame.Surface
    closed_exit: pygame.Surface
    open_exit: pygame.Surface
    enemy: pygame.Surface
    player_up: pygame.Surface
    player_down: pygame.Surface
    player_right: pygame.Surface
    player_left: pygame.Surface

    def player(self, facing: Direction) -> pygame.Surface:
        return {
            Direction.UP: self.player_up,
            Direction.DOWN: self.player_down,
            Direction.LEFT: self.player_left,
            Direction.RIGHT: self.player_right,
        }[facing]


def sprite_paths(directory: str | PathLike[str]) -> dict[str, Path]:
    """Map each sprite name to the file it is loaded from."""
    base = Path(directory)
    return {name: base / filename for name, filename in _SPRITE_FILES.items()}


def load_sprites(directory: str | PathLike[str]) -> Sprites:
    """Load every sprite from ``directory``."""
    images = {}
    for name, path in sprite_paths(directory).items():
        try:
            images[name] = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise SpriteError("Erreur de chargement des images") from exc
    return Sprites(**images)


def tile_sprite(sprites: Sprites, tile: str) -> pygame.Surface | None:
    """Return the image drawn over the floor for ``tile``; ``None`` for bare floor."""
    overlays = {
        FLOOR: None,
        WALL: sprites.wall,
        PLAYER: sprites.player_down,
        COLLECTIBLE: sprites.collectible,
        EXIT: sprites.closed_exit,
        OPEN_EXIT: sprites.open_exit,
        ENEMY: sprites.enemy,
    }
    try:
        return overlays[tile]
    except KeyError:
        raise ValueError(f"unknown tile {tile!r}") from None


def _at(x: int, y: int) -> tuple[int, int]:
    return x * TILE_SIZE, y * TILE_SIZE


def draw_map(surface: pygame.Surface, grid, sprites: Sprites) -> None:
    """Draw every tile of ``grid`` onto ``surface``."""
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            surface.blit(sprites.floor, _at(x, y))
            overlay = tile_sprite(sprites, tile)
            if overlay is not None:
                surface.blit(overlay, _at(x, y))


def _draw_move(
    surface: pygame.Surface, game: Game, result: MoveResult, sprites: Sprites
) -> None:
    left = result.previous
    behind = sprites.closed_exit if game.tile_at(*left) == EXIT else sprites.floor
    surface.blit(behind, _at(*left))
    surface.blit(sprites.player(game.facing), _at(*result.position))
    if result.exit_open and not result.finished:
        surface.blit(sprites.open_exit, _at(*game.map.exit))


def _draw_counter(
    surface: pygame.Surface, font: pygame.font.Font, moves: int, sprites: Sprites
) -> None:
    surface.blit(sprites.wall, (0, 0))
    surface.blit(font.render("Moves:", True, TEXT_COLOR), (10, 10))
    surface.blit(font.render(str(moves), True, TEXT_COLOR), (30, 30))


def run(game: Game, sprite_dir: str | PathLike[str] = "sprites") -> int:
    """Open the game window and play until the game ends; return an exit code."""
    pygame.init()
    try:
        try:
            sprites = load_sprites(sprite_dir)
        except SpriteError as exc:
            print(f"Error\n{exc}")
            return 1
        try:
            screen = pygame.display.set_mode(
                (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
            )
        except pygame.error:
            print("Error\nÉchec de l'initialisation de la fenêtre")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        draw_map(screen, game.grid, sprites)
        pygame.display.flip()
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                key = ESCAPE_KEY if event.key == pygame.K_ESCAPE else event.key
                result = game.handle_key(key)
                if result.outcome is Outcome.QUIT:
                    return 0
                if result.moved:
                    _draw_move(screen, game, result, sprites)
                if result.finished:
                    print(result.message)
                    return 0
                if result.moved:
                    print(f"Moves: {result.moves}")
                    _draw_counter(screen, font, result.moves, sprites)
                pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()