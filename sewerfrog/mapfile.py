"""Reading, parsing and validating ``.ber`` map files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .pathfinding import find_start, has_valid_path

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "X"

_MARKERS = frozenset({PLAYER, EXIT})
_BASE_TILES = frozenset({WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE})


class MapError(Exception):
    """Raised when a map file is missing, malformed or unplayable."""


@dataclass
class GameMap:
    """A rectangular grid of tiles together with its collectible count."""

    rows: list[list[str]] = field(default_factory=list)
    eggs: int = 0
    markers: int = 0
    filename: str | None = None

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> str:
        if not self.in_bounds(x, y):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def set_tile(self, x: int, y: int, tile: str) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        self.rows[y][x] = tile


def parse_map(lines: Iterable[str], allow_enemies: bool = False) -> GameMap:
    """Build a map from lines of text, each optionally ending in a newline."""
    allowed = _BASE_TILES | {ENEMY} if allow_enemies else _BASE_TILES
    game_map = GameMap()
    width = 0
    for index, line in enumerate(lines):
        row_text = line[:-1] if line.endswith("\n") else line
        if index == 0:
            width = len(row_text)
        elif len(row_text) != width:
            raise MapError("Map is not a rectangle")
        for char in row_text:
            if char in _MARKERS:
                game_map.markers += 1
            elif char == COLLECTIBLE:
                game_map.eggs += 1
            elif char not in allowed:
                raise MapError("Forbidden characters found")
        game_map.rows.append(list(row_text))
    return game_map


def _split_lines(text: str) -> Iterator[str]:
    pieces = text.split("\n")
    for piece in pieces[:-1]:
        yield piece + "\n"
    if pieces[-1]:
        yield pieces[-1]


def check_file_format(name: str) -> None:
    """Raise MapError unless the file name has a ``.ber`` extension."""
    if len(name) < 5:
        raise MapError("Map file format must be .ber")
    parts = [part for part in name.split(".") if part]
    if not parts or not parts[-1].startswith("ber"):
        raise MapError("Map file format must be .ber")


def read_map(path: str | Path, allow_enemies: bool = False) -> GameMap:
    """Open, check the name of, and parse a map file."""
    name = str(path)
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("File doesn't exist or no permissions") from exc
    check_file_format(name)
    game_map = parse_map(_split_lines(text), allow_enemies)
    game_map.filename = name
    return game_map


def check_enclosed(game_map: GameMap) -> bool:
    """Return True if the map is surrounded by walls."""
    last = game_map.height - 1
    for y, row in enumerate(game_map.rows):
        if y in (0, last):
            if any(tile != WALL for tile in row):
                return False
        elif row[:1] != [WALL] or row[-1:] != [WALL]:
            return False
    return True


def validate_map(game_map: GameMap) -> tuple[int, int]:
    """Check that the map is playable and return the player's start position."""
    if game_map.width == game_map.height:
        raise MapError("Map is not a rectangle")
    if game_map.markers > 2:
        raise MapError("There must be only 1 exit and 1 player")
    if game_map.markers < 2:
        raise MapError("There must be at least 1 exit and 1 player")
    if game_map.eggs < 1:
        raise MapError("There must be at least one collectible")
    if not check_enclosed(game_map):
        raise MapError("Map must be surrounded by walls («1»)")
    start = find_start(game_map)
    if start is None or not has_valid_path(game_map):
        raise MapError("Map must have reacheable exit/collectibles")
    return start