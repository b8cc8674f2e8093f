"""Drawing the map with pygame and running the game window."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .fmt import printf  # noqa: E402
from .game import (  # noqa: E402
    COLLECTABLE,
    EXIT,
    FLOOR,
    KEY_DOWN,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    PLAYER,
    TILE_SIZE,
    WALL,
    Game,
    MapError,
    MoveOutcome,
    direction_for_key,
)
from .mapfile import read_map  # noqa: E402
from .validate import check_map  # noqa: E402

DEFAULT_TEXTURE_DIR = Path("textures")

# Loaded in this order; the first one missing stops loading.
_TEXTURES = (
    ("ground", "ground.xpm"),
    ("tree", "tree.xpm"),
    ("player", "player.xpm"),
    ("exit", "exit.xpm"),
    ("collectable", "collectable.xpm"),
)

_TILE_TEXTURES = {
    WALL: "tree",
    COLLECTABLE: "collectable",
    PLAYER: "player",
    EXIT: "exit",
    FLOOR: "ground",
}

_PYGAME_KEYS = {
    pygame.K_ESCAPE: KEY_ESC,
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
}


class _TextureError(MapError):
    """A texture file could not be loaded."""


class Renderer:
    """Draws a game onto a surface and applies key presses to it."""

    def __init__(self, game: Game, texture_dir: Union[str, os.PathLike]) -> None:
        self.game = game
        self.surface = pygame.Surface(
            (game.width * TILE_SIZE, game.height * TILE_SIZE)
        )
        directory = Path(texture_dir)
        self.textures: dict[str, pygame.Surface] = {}
        for name, filename in _TEXTURES:
            try:
                self.textures[name] = pygame.image.load(str(directory / filename))
            except (OSError, pygame.error) as exc:
                raise _TextureError(f"Error loading {name} image.") from exc

    def draw(self) -> None:
        """Draw every tile, recounting collectables and locating the player."""
        game = self.game
        game.collectable_count = 0
        self.surface.fill((0, 0, 0))
        for y, row in enumerate(game.rows):
            for x, tile in enumerate(row):
                texture = _TILE_TEXTURES.get(tile)
                if texture is None:
                    continue
                self.surface.blit(
                    self.textures[texture], (x * TILE_SIZE, y * TILE_SIZE)
                )
                if tile == COLLECTABLE:
                    game.collectable_count += 1
                elif tile == PLAYER:
                    game.x, game.y = x, y

    def handle_key(self, keycode: int) -> bool:
        """Apply a key press; return False once the game is over."""
        if keycode == KEY_ESC:
            printf("Exited game before finishing level.\n")
            return False
        direction = direction_for_key(keycode)
        if direction is None:
            return True
        outcome = self.game.move(direction)
        if outcome is MoveOutcome.WON:
            printf("CONGRATULATIONS, YOU WON!\n")
            printf("It took you %d moves to win.", self.game.steps_taken)
            printf("Can you beat this score!!\n")
            return False
        if outcome is MoveOutcome.MOVED:
            printf("Steps Taken: %i\n", self.game.steps_taken)
            self.draw()
        return True


def run(game: Game, texture_dir: Union[str, os.PathLike]) -> None:
    """Open a window for ``game`` and play until it is closed or won."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game.width * TILE_SIZE, game.height * TILE_SIZE)
        )
        pygame.display.set_caption("so_long")
        renderer = Renderer(game, texture_dir)
        renderer.draw()
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    keycode = _PYGAME_KEYS.get(event.key, event.key)
                    if not renderer.handle_key(keycode):
                        running = False
                if not running:
                    break
            screen.blit(renderer.surface, (0, 0))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Error\n")
        printf("Usage: ./so_long <map file>\n")
        return 0
    name = args[0]
    try:
        rows = read_map(name)
        check_map(name, rows)
    except MapError as exc:
        printf("Error\n%s\n", str(exc))
        return 1
    game = Game(rows, name)
    try:
        run(game, DEFAULT_TEXTURE_DIR)
    except _TextureError as exc:
        printf("%s\n", str(exc))
    return 0