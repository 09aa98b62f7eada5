import pytest

from sewerfrog.game import (
    VIEW_HEIGHT,
    VIEW_WIDTH,
    Direction,
    Game,
    MoveResult,
    Player,
    sprite_index,
)
from sewerfrog.mapfile import parse_map
from sewerfrog.pathfinding import find_start


def make_game(lines, allow_enemies=False):
    game_map = parse_map(lines, allow_enemies)
    x, y = find_start(game_map)
    return Game(game_map, Player(x, y))


SMALL = ["1111111", "1PC0E01", "1111111"]
CORRIDOR = ["1" * 30, "1P" + "0" * 25 + "CE1", "1" * 30]


def test_collect_then_win():
    game = make_game(SMALL)
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.game_map.eggs == 0
    assert game.game_map.tile(2, 1) == "0"
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.move(Direction.RIGHT) is MoveResult.WON
    assert (game.player.x, game.player.y) == (3, 1)
    assert game.player.moves == 2


def test_wall_blocks_without_counting():
    game = make_game(SMALL)
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.move(Direction.LEFT) is MoveResult.BLOCKED
    assert (game.player.x, game.player.y) == (1, 1)
    assert game.player.moves == 0


def test_out_of_bounds_is_blocked():
    game_map = parse_map(["P0E", "C00"])
    game = Game(game_map, Player(0, 0))
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.move(Direction.LEFT) is MoveResult.BLOCKED
    assert game.player.moves == 0


def test_exit_with_eggs_left_is_walkable():
    game = make_game(["11111", "1PEC1", "11111"])
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.game_map.tile(game.player.x, game.player.y) == "E"
    assert game.game_map.eggs == 1
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.move(Direction.LEFT) is MoveResult.WON


def test_enemy_loses_without_moving():
    game = make_game(["111111", "1PXCE1", "111111"], allow_enemies=True)
    assert game.move(Direction.RIGHT) is MoveResult.LOST
    assert (game.player.x, game.player.y) == (1, 1)
    assert game.player.moves == 0


def test_small_map_camera_stays_at_origin():
    game = make_game(SMALL)
    assert (game.camera_x, game.camera_y) == (0, 0)
    game.move(Direction.RIGHT)
    assert (game.camera_x, game.camera_y) == (0, 0)


def test_corridor_scrolls_and_keeps_frog_visible():
    game = make_game(CORRIDOR)
    max_x = game.game_map.width - VIEW_WIDTH
    previous = game.camera_x
    results = []
    for _ in range(27):
        results.append(game.move(Direction.RIGHT))
        assert 0 <= game.player.x - game.camera_x < VIEW_WIDTH
        assert previous <= game.camera_x <= max_x
        previous = game.camera_x
    assert results[:-1] == [MoveResult.MOVED] * 26
    assert results[-1] is MoveResult.WON
    assert game.camera_x > 0


def test_center_camera_clamps_to_map():
    game_map = parse_map(CORRIDOR)
    game = Game(game_map, Player(game_map.width - 2, 1))
    assert game.camera_x == game_map.width - VIEW_WIDTH
    game.player.x = 1
    game.center_camera()
    assert game.camera_x == 0


def test_visible_tiles_small_map_covers_everything():
    game = make_game(SMALL)
    tiles = list(game.visible_tiles())
    assert len(tiles) == game.game_map.width * game.game_map.height
    for column, row, tile in tiles:
        assert game.game_map.tile(column, row) == tile


def test_visible_tiles_limited_to_view():
    game_map = parse_map(CORRIDOR)
    game = Game(game_map, Player(20, 1))
    tiles = list(game.visible_tiles())
    assert len(tiles) == VIEW_WIDTH * min(VIEW_HEIGHT, game_map.height)
    for column, row, tile in tiles:
        assert 0 <= column < VIEW_WIDTH and 0 <= row < VIEW_HEIGHT
        assert game_map.tile(column + game.camera_x, row + game.camera_y) == tile


@pytest.mark.parametrize(
    "tile, expected",
    [("0", 0), ("1", 1), ("P", 2), ("C", 3), ("E", 4)],
)
def test_sprite_index_base(tile, expected):
    assert sprite_index(tile) == expected
    assert sprite_index(tile, True) == expected


def test_sprite_index_enemy_only_in_bonus():
    assert sprite_index("X") is None
    assert sprite_index("X", True) == 6
    assert sprite_index("Z", True) is None