import pytest

from sewerfrog.cli import load_game, main
from sewerfrog.mapfile import MapError

VALID = "1111111\n1P0C0E1\n1111111\n"
WITH_ENEMY = "1111111\n1P0XCE1\n1111111\n"


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_game_places_player(tmp_path):
    path = _write(tmp_path, "level.ber", VALID)
    game = load_game(path)
    assert (game.player.x, game.player.y) == (1, 1)
    assert game.player.moves == 0
    assert game.game_map.eggs == 1
    assert game.game_map.filename == str(path)


def test_load_game_rejects_wrong_extension(tmp_path):
    path = _write(tmp_path, "level.txt", VALID)
    with pytest.raises(MapError, match="Map file format must be .ber"):
        load_game(path)


def test_load_game_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_game(tmp_path / "absent.ber")


def test_enemy_forbidden_without_bonus(tmp_path):
    path = _write(tmp_path, "level.ber", WITH_ENEMY)
    with pytest.raises(MapError, match="Forbidden characters found"):
        load_game(path)


def test_enemy_allowed_in_bonus(tmp_path):
    path = _write(tmp_path, "level.ber", WITH_ENEMY)
    game = load_game(path, bonus=True)
    assert game.game_map.tile(3, 1) == "X"


def test_load_game_unreachable_exit(tmp_path):
    path = _write(tmp_path, "level.ber", "1111111\n1PC1E01\n1111111\n")
    with pytest.raises(MapError, match="reacheable"):
        load_game(path)


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"], ["--bonus"]])
def test_main_argument_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err == "Error\nThere must be only 1 argument\n"


def test_main_reports_map_error(tmp_path, capsys):
    path = _write(tmp_path, "level.ber", "1111111\n1P0C0C1\n1111111\n")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert err == "Error\nThere must be at least 1 exit and 1 player\n"


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_main_bonus_flag_still_validates(tmp_path, capsys):
    path = _write(tmp_path, "level.ber", "111\n1P1\n1E1\n1C1\n111\n1X1\n")
    assert main(["--bonus", str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error\n")