import pytest

from babinski.gamemap import (
    GameMap,
    MapError,
    PathCheck,
    check_characters,
    check_playable,
    check_rectangular,
    check_walls,
    explore,
    load_map,
    read_map_lines,
)

VALID = [
    "1111111",
    "1P0C0E1",
    "1000C01",
    "1111111",
]


def test_from_lines_finds_elements():
    game_map = GameMap.from_lines(VALID)
    assert game_map.player == (1, 1)
    assert game_map.exit == (5, 1)
    assert game_map.collectibles == 2
    assert game_map.width == len(VALID[0])
    assert game_map.height == len(VALID)
    assert game_map.grid == VALID


def test_copy_grid_is_independent():
    game_map = GameMap.from_lines(VALID)
    copy = game_map.copy_grid()
    assert ["".join(row) for row in copy] == VALID
    copy[1][2] = "C"
    assert game_map.grid[1][2] == "0"


def test_not_rectangular():
    with pytest.raises(MapError, match="Map is not rectangular"):
        GameMap.from_lines(["1111", "1PCE1", "1111"])


def test_empty_map_is_not_rectangular():
    with pytest.raises(MapError, match="Map is not rectangular"):
        check_rectangular([])


def test_check_rectangular_returns_width():
    assert check_rectangular(["abc", "def"]) == len("abc")


def test_bad_character_reported_first():
    with pytest.raises(MapError, match="Not a possible character"):
        GameMap.from_lines(["11111", "1X0C1", "11111"])


def test_check_characters_accepts_all_tiles():
    check_characters(["01PECN"])
    with pytest.raises(MapError):
        check_characters(["01 "])


@pytest.mark.parametrize(
    "lines, message",
    [
        (["111111", "100CE1", "111111"], r"Need exactly 1 player \(P\)"),
        (["111111", "1PPCE1", "111111"], r"Need exactly 1 player \(P\)"),
        (["111111", "1P0C01", "111111"], r"Need exactly 1 exit \(E\)"),
        (["111111", "1PECE1", "111111"], r"Need exactly 1 exit \(E\)"),
        (["111111", "1P00E1", "111111"], r"Need at least 1 collectible \(C\)"),
    ],
)
def test_element_counts(lines, message):
    with pytest.raises(MapError, match=message):
        GameMap.from_lines(lines)


@pytest.mark.parametrize(
    "lines",
    [
        ["1110111", "1P0C0E1", "1111111"],
        ["1111111", "0P0C0E1", "1111111"],
        ["1111111", "1P0C0E0", "1111111"],
        ["1111111", "1P0C0E1", "1111101"],
    ],
)
def test_walls_must_surround(lines):
    with pytest.raises(MapError, match="Invalid walls"):
        GameMap.from_lines(lines)


def test_check_walls_accepts_closed_map():
    check_walls(VALID)
    with pytest.raises(MapError):
        check_walls(["111", "101", "110"])


def test_explore_reaches_everything():
    check = explore(VALID, (1, 1))
    assert check == PathCheck(collect_found=2, exit_found=True, enemy_found=False)


def test_explore_does_not_modify_grid():
    grid = [list(row) for row in VALID]
    explore(grid, (1, 1))
    assert ["".join(row) for row in grid] == VALID


def test_enemy_blocks_path():
    lines = ["1111111", "1P0N0E1", "1C11111", "1111111"]
    check = explore(lines, (1, 1))
    assert check.enemy_found is True
    assert check.exit_found is False
    assert check.collect_found == 1


def test_explore_passes_through_exit():
    lines = ["111111", "1PEC01", "111111"]
    check = explore(lines, (1, 1))
    assert check.exit_found is True
    assert check.collect_found == 1


def test_check_playable_success():
    game_map = GameMap.from_lines(VALID)
    check = check_playable(game_map)
    assert check.collect_found == game_map.collectibles
    assert check.exit_found is True


def test_unreachable_exit():
    game_map = GameMap.from_lines(["1111111", "1PC1001", "1111E01", "1111111"])
    with pytest.raises(MapError, match="La sortie n'est pas atteignable."):
        check_playable(game_map)


def test_unreachable_collectible():
    game_map = GameMap.from_lines(["1111111", "1PE1C01", "1111111"])
    with pytest.raises(MapError, match="Il reste des collectibles inaccessibles."):
        check_playable(game_map)


def test_read_map_lines_strips_newlines(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("\n".join(VALID) + "\n")
    assert read_map_lines(path) == VALID


def test_read_map_lines_keeps_blank_trailing_line(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("\n".join(VALID) + "\n\n")
    lines = read_map_lines(path)
    assert lines == VALID + [""]
    with pytest.raises(MapError, match="Map is not rectangular"):
        load_map(path)


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("\n".join(VALID))
    game_map = load_map(path)
    assert game_map.grid == VALID
    assert game_map.player == (1, 1)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="Can't open map"):
        load_map(tmp_path / "absent.ber")