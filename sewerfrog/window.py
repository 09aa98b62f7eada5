"""Drawing the game with pygame and turning key presses into moves."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pygame

from .game import (
    FLOOR_SPRITE,
    FROG_ON_EXIT_SPRITE,
    FROG_SPRITE,
    SPRITE_SIZE,
    Direction,
    Game,
    MoveResult,
    sprite_index,
)
from .mapfile import EXIT, FLOOR, PLAYER

WINDOW_WIDTH = 1660
WINDOW_HEIGHT = 640
WINDOW_TITLE = "Sewer frog"

TEXTURE_NAMES = (
    "rock.xpm",
    "water.xpm",
    "frog_rock.xpm",
    "egg_rock.xpm",
    "exit.xpm",
    "frog_exit.xpm",
)
BONUS_TEXTURE_NAMES = TEXTURE_NAMES + ("snake.xpm",)

WIN_BANNER = "************\n* YOU WIN! *\n************"

COUNTER_POSITION = (10, 20)
COUNTER_COLOR = (255, 255, 255)

_KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_a: Direction.LEFT,
    pygame.K_s: Direction.DOWN,
    pygame.K_d: Direction.RIGHT,
}


def direction_for_key(key: int) -> Direction | None:
    """Return the direction bound to a key, or None for any other key."""
    return _KEY_DIRECTIONS.get(key)


def load_sprites(
    directory: str | Path, bonus: bool = False
) -> list[pygame.Surface | None]:
    """Load the tile images; a slot is None where its image cannot be loaded."""
    names = BONUS_TEXTURE_NAMES if bonus else TEXTURE_NAMES
    base = Path(directory)
    can_convert = pygame.display.get_init() and pygame.display.get_surface() is not None
    sprites: list[pygame.Surface | None] = []
    for name in names:
        try:
            image = pygame.image.load(str(base / name))
        except (pygame.error, OSError):
            sprites.append(None)
            continue
        sprites.append(image.convert_alpha() if can_convert else image)
    return sprites


class GameWindow:
    """Renders a game onto a surface and reacts to the player's keys."""

    def __init__(
        self,
        game: Game,
        screen: pygame.Surface,
        sprites: Sequence[pygame.Surface | None],
        bonus: bool = False,
    ) -> None:
        self.game = game
        self.screen = screen
        self.sprites = list(sprites)
        self.bonus = bonus
        self.closed = False
        self.lost = False
        self._font: pygame.font.Font | None = None

    def _blit(self, index: int, position: tuple[int, int]) -> None:
        sprite = self.sprites[index] if 0 <= index < len(self.sprites) else None
        if sprite is not None:
            self.screen.blit(sprite, position)

    def _draw_frog(self) -> None:
        player = self.game.player
        under = self.game.game_map.tile(player.x, player.y)
        frog = FROG_ON_EXIT_SPRITE if under == EXIT else FROG_SPRITE
        position = (
            (player.x - self.game.camera_x) * SPRITE_SIZE,
            (player.y - self.game.camera_y) * SPRITE_SIZE,
        )
        self._blit(frog, position)
        if self.bonus:
            self._draw_move_counter()

    def _draw_move_counter(self) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 24)
        text = self._font.render(
            f"Moves: {self.game.player.moves}", True, COUNTER_COLOR
        )
        self.screen.blit(text, COUNTER_POSITION)

    def draw(self) -> None:
        """Paint the visible part of the map and the frog."""
        for column, row, tile in self.game.visible_tiles():
            position = (column * SPRITE_SIZE, row * SPRITE_SIZE)
            self._blit(FLOOR_SPRITE, position)
            index = sprite_index(tile, self.bonus)
            if index is not None and tile not in (FLOOR, PLAYER):
                self._blit(index, position)
        self._draw_frog()

    def _close(self) -> None:
        self.closed = True

    def handle_key(self, key: int) -> MoveResult | None:
        """Act on one key press; return the move's outcome, if a move was tried."""
        if key == pygame.K_ESCAPE:
            self._close()
            return None
        direction = direction_for_key(key)
        if direction is None:
            return None
        result = self.game.move(direction)
        if result is MoveResult.MOVED:
            if not self.bonus:
                print(f"Moves: {self.game.player.moves}")
            self.draw()
        elif result is MoveResult.WON:
            print(WIN_BANNER)
            self._close()
        elif result is MoveResult.LOST:
            self.lost = True
            self._close()
        return result

    def run(self) -> bool:
        """Run the event loop until the window closes; return True if the frog lost."""
        self.draw()
        pygame.display.flip()
        while not self.closed:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                self._close()
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)
                pygame.display.flip()
        return self.lost