"""Game state: the frog, its moves and the scrolling camera."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from .mapfile import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL, GameMap

VIEW_WIDTH = 13
VIEW_HEIGHT = 5
SPRITE_SIZE = 128

FLOOR_SPRITE = 0
FROG_SPRITE = 2
FROG_ON_EXIT_SPRITE = 5

_SPRITES = {FLOOR: 0, WALL: 1, PLAYER: 2, COLLECTIBLE: 3, EXIT: 4}
_BONUS_SPRITES = {**_SPRITES, ENEMY: 6}


class MoveResult(Enum):
    """Outcome of trying to move the frog one step."""

    BLOCKED = 0
    MOVED = 1
    WON = 2
    LOST = 3


class Direction(Enum):
    """A step on the grid as (dx, dy)."""

    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass
class Player:
    """The frog's position and how many moves it has made."""

    x: int
    y: int
    moves: int = 0


@dataclass
class Game:
    """A map, the frog on it and the top-left corner of the visible view."""

    game_map: GameMap
    player: Player
    camera_x: int = 0
    camera_y: int = 0

    def __post_init__(self) -> None:
        self.center_camera()

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the frog one step and report what happened."""
        target_x = self.player.x + direction.dx
        target_y = self.player.y + direction.dy
        game_map = self.game_map
        if not game_map.in_bounds(target_x, target_y):
            return MoveResult.BLOCKED
        tile = game_map.tile(target_x, target_y)
        if tile == WALL:
            return MoveResult.BLOCKED
        if tile == COLLECTIBLE:
            game_map.eggs -= 1
            game_map.set_tile(target_x, target_y, FLOOR)
            tile = FLOOR
        if tile == EXIT and game_map.eggs == 0:
            return MoveResult.WON
        if tile == ENEMY:
            return MoveResult.LOST
        self.player.x = target_x
        self.player.y = target_y
        self.player.moves += 1
        self.update_camera(direction.dx, direction.dy)
        return MoveResult.MOVED

    def center_camera(self) -> None:
        """Place the view around the frog, kept inside the map."""
        max_x = self.game_map.width - VIEW_WIDTH
        max_y = self.game_map.height - VIEW_HEIGHT
        self.camera_x = self.player.x - VIEW_WIDTH // 2
        self.camera_y = self.player.y - VIEW_HEIGHT // 2
        if self.camera_x < 0:
            self.camera_x = 0
        elif max_x >= 0 and self.camera_x > max_x:
            self.camera_x = max_x
        if self.camera_y < 0:
            self.camera_y = 0
        elif max_y >= 0 and self.camera_y > max_y:
            self.camera_y = max_y

    def update_camera(self, dx: int, dy: int) -> None:
        """Scroll the view by one tile when the frog nears its edge."""
        max_x = self.game_map.width - VIEW_WIDTH
        max_y = self.game_map.height - VIEW_HEIGHT
        if max_x < 0:
            self.camera_x = 0
        elif dx != 0:
            offset = self.player.x - self.camera_x
            if offset < 2 and self.camera_x > 0:
                self.camera_x -= 1
            elif offset >= VIEW_WIDTH - 2 and self.camera_x < max_x:
                self.camera_x += 1
        if max_y < 0:
            self.camera_y = 0
        elif dy != 0:
            offset = self.player.y - self.camera_y
            if offset < 2 and self.camera_y > 0:
                self.camera_y -= 1
            elif offset >= VIEW_HEIGHT - 2 and self.camera_y < max_y:
                self.camera_y += 1

    def visible_tiles(self) -> Iterator[tuple[int, int, str]]:
        """Yield (column, row, tile) for every map tile inside the view."""
        for row in range(VIEW_HEIGHT):
            map_y = row + self.camera_y
            if map_y >= self.game_map.height:
                continue
            for column in range(VIEW_WIDTH):
                map_x = column + self.camera_x
                if map_x >= self.game_map.width:
                    continue
                yield column, row, self.game_map.rows[map_y][map_x]


def sprite_index(tile: str, bonus: bool = False) -> int | None:
    """Return the sprite slot for a tile, or None if it has no sprite."""
    table = _BONUS_SPRITES if bonus else _SPRITES
    return table.get(tile)