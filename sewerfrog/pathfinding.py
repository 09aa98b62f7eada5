"""Reachability checks for the player's start, the collectibles and the exit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .mapfile import GameMap


def find_start(game_map: GameMap) -> tuple[int, int] | None:
    """Return the (x, y) of the first player tile in row order, or None."""
    for y, row in enumerate(game_map.rows):
        for x, tile in enumerate(row):
            if tile == "P":
                return x, y
    return None


def has_valid_path(game_map: GameMap) -> bool:
    """Return True if the exit and every collectible are reachable from the start."""
    start = find_start(game_map)
    if start is None:
        return False
    seen: set[tuple[int, int]] = set()
    stack = [start]
    eggs_found = 0
    exit_found = False
    while stack:
        x, y = stack.pop()
        if (x, y) in seen or not game_map.in_bounds(x, y):
            continue
        tile = game_map.rows[y][x]
        if tile == "1":
            continue
        seen.add((x, y))
        if tile == "C":
            eggs_found += 1
        elif tile == "E":
            exit_found = True
        stack.extend(((x + 1, y), (x, y + 1), (x, y - 1), (x - 1, y)))
    return exit_found and eggs_found == game_map.eggs