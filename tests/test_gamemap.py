import pytest

from sollong.gamemap import (
    GameMap,
    MapError,
    Position,
    Tile,
    load_map,
    path_is_valid,
    validate_filename,
    validate_map,
)

VALID = "111111\n1P0CE1\n111111"


def test_from_text_round_trip_drops_empty_lines():
    game_map = GameMap.from_text(VALID + "\n\n")
    assert str(game_map) == VALID
    assert game_map.height == len(VALID.split("\n"))
    assert game_map.width == len("111111")


def test_tile_at_and_set_tile():
    game_map = GameMap.from_text(VALID)
    assert game_map.tile_at(Position(1, 1)) == Tile.PLAYER
    game_map.set_tile(Position(2, 1), Tile.COIN)
    assert game_map.tile_at(Position(2, 1)) == "C"


def test_tile_at_outside_raises():
    game_map = GameMap.from_text(VALID)
    with pytest.raises(IndexError):
        game_map.tile_at(Position(-1, 0))
    with pytest.raises(IndexError):
        game_map.tile_at(Position(0, game_map.height))


def test_set_tile_rejects_unknown_tile():
    game_map = GameMap.from_text(VALID)
    with pytest.raises(ValueError):
        game_map.set_tile(Position(1, 1), "X")


def test_validate_filename_accepts_ber():
    assert validate_filename("maps/level.ber") == "maps/level.ber"


@pytest.mark.parametrize(
    "name, message",
    [(".ber", "Invalid filename"), ("map.txt", "Invalid file extension"), ("a.bert", "Invalid file extension")],
)
def test_validate_filename_errors(name, message):
    with pytest.raises(MapError) as exc:
        validate_filename(name)
    assert str(exc.value) == message


def test_load_map_reads_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID + "\n")
    assert str(load_map(path)) == VALID


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError) as exc:
        load_map(tmp_path / "absent.ber")
    assert str(exc.value) == "Cannot open map file"


def test_load_map_directory(tmp_path):
    with pytest.raises(MapError) as exc:
        load_map(tmp_path)
    assert str(exc.value) == "Failed to read file"


def test_validate_map_returns_player_position():
    game_map = GameMap.from_text(VALID)
    start = validate_map(game_map)
    assert game_map.tile_at(start) == Tile.PLAYER


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "Map is empty"),
        ("\n\n", "Map is empty"),
        ("111\n11\n111", "Map must be rectangular"),
        ("1111\n0PCE\n1111", "Map must be surrounded by walls"),
        ("111111\n1PCE01\n111101", "Map must be surrounded by walls"),
        ("1111111\n1PXCE01\n1111111", "Invalid map tiles or object count"),
        ("111111\n1PPCE1\n111111", "Invalid map tiles or object count"),
        ("1111\n1PE1\n1111", "Invalid map tiles or object count"),
        ("1111111\n1PCEE01\n1111111", "Invalid map tiles or object count"),
        ("111111\n1P1CE1\n111111", "No valid path to exit"),
        ("1111111\n1PE01C1\n1111111", "No valid path to exit"),
    ],
)
def test_validate_map_errors(text, message):
    with pytest.raises(MapError) as exc:
        validate_map(GameMap.from_text(text))
    assert str(exc.value) == message


def test_path_is_valid_through_exit():
    game_map = GameMap.from_text("111111\n1PEC01\n111111")
    assert path_is_valid(game_map, Position(1, 1)) is True


def test_path_is_valid_from_wall_is_false():
    game_map = GameMap.from_text(VALID)
    assert path_is_valid(game_map, Position(0, 0)) is False


def test_path_check_does_not_modify_map():
    game_map = GameMap.from_text(VALID)
    validate_map(game_map)
    assert str(game_map) == VALID