"""Command line entry point: load a map and play it."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import pygame

from .game import Game, Player
from .mapfile import MapError, read_map, validate_map
from .window import (
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
    GameWindow,
    load_sprites,
)

TEXTURE_DIRECTORY = Path("textures")
BONUS_FLAG = "--bonus"


def load_game(filename: str | Path, bonus: bool = False) -> Game:
    """Read and validate a map file and place the frog on its start."""
    game_map = read_map(filename, allow_enemies=bonus)
    start_x, start_y = validate_map(game_map)
    return Game(game_map, Player(start_x, start_y))


def start_game(filename: str | Path, bonus: bool = False) -> None:
    """Open the window and play; in bonus mode a loss restarts the map."""
    game = load_game(filename, bonus)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        sprites = load_sprites(TEXTURE_DIRECTORY, bonus)
        while GameWindow(game, screen, sprites, bonus).run():
            game = load_game(filename, bonus)
    finally:
        pygame.quit()


def _report(message: str) -> int:
    print(f"Error\n{message}", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = BONUS_FLAG in args
    paths = [arg for arg in args if arg != BONUS_FLAG]
    if len(paths) != 1:
        return _report("There must be only 1 argument")
    try:
        start_game(paths[0], bonus)
    except MapError as exc:
        return _report(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())