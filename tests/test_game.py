import pytest

from solong.game import (
    BONUS_GOODBYE,
    COIN_FRAMES,
    ENEMY_FRAMES,
    GOODBYE,
    SPEED,
    Game,
    GameOver,
    Key,
    Rect,
    overlaps,
    tile_shape,
)
from solong.mapfile import TILE_SIZE, TileMap
from solong.validation import MapSummary, parse_map

SIMPLE = ["11111", "1PCE1", "11111"]
WITH_ENEMY = ["111111", "1PN0C1", "1000E1", "111111"]


def _game(rows, bonus=False):
    tilemap = TileMap(list(rows))
    summary = parse_map(tilemap, bonus)
    return Game(tilemap, summary, bonus)


def test_touching_boxes_do_not_overlap():
    a = Rect(0, 0, 10, 10)
    assert overlaps(a, Rect(10, 0, 10, 10)) is False
    assert overlaps(a, Rect(0, 10, 10, 10)) is False


def test_overlap_is_symmetric():
    a = Rect(0, 0, 10, 10)
    b = Rect(9, 9, 5, 5)
    assert overlaps(a, b) is True
    assert overlaps(b, a) is True


def test_wall_shape_fills_tile():
    assert tile_shape("1", 2, 3) == Rect(2 * TILE_SIZE, 3 * TILE_SIZE, TILE_SIZE, TILE_SIZE)


def test_floor_and_player_have_no_shape():
    assert tile_shape("0", 1, 1) is None
    assert tile_shape("P", 1, 1) is None


def test_enemy_has_shape_only_in_bonus():
    assert tile_shape("N", 1, 1, bonus=False) is None
    shape = tile_shape("N", 1, 1, bonus=True)
    assert overlaps(shape, tile_shape("1", 1, 1))


def test_shapes_stay_inside_their_tile():
    wall = tile_shape("1", 4, 2)
    for tile in "ECN":
        for bonus in (False, True):
            shape = tile_shape(tile, 4, 2, bonus)
            if shape is None:
                continue
            assert shape.x >= wall.x and shape.y >= wall.y
            assert shape.x + shape.w <= wall.x + wall.w
            assert shape.y + shape.h <= wall.y + wall.h


def test_start_position_is_free():
    game = _game(SIMPLE)
    assert (game.x, game.y) == (TILE_SIZE, TILE_SIZE)
    assert game.check_collision(game.x, game.y) is False
    assert game.check_collision(0, 0) is True


def test_move_into_wall_is_blocked():
    game = _game(SIMPLE)
    assert game.press(Key.UP) is None
    assert (game.x, game.y) == (TILE_SIZE, TILE_SIZE)
    assert game.moves == 0


def test_blocked_left_still_turns_player():
    game = _game(SIMPLE)
    game.press(Key.LEFT)
    assert game.facing_left is True
    assert game.x == TILE_SIZE


def test_move_reports_count():
    game = _game(SIMPLE)
    message = game.press(Key.RIGHT)
    assert message == "\r\033[KTotal moves: 1"
    assert game.x == TILE_SIZE + SPEED
    assert game.facing_left is False


def test_bonus_move_prints_nothing_but_counts():
    game = _game(WITH_ENEMY, bonus=True)
    assert game.press(Key.DOWN) is None
    assert game.moves == 1


def test_other_key_does_not_move_or_count():
    game = _game(SIMPLE)
    game.press(Key.OTHER)
    assert (game.x, game.y, game.moves) == (TILE_SIZE, TILE_SIZE, 0)


def test_collect_then_win():
    game = _game(SIMPLE)
    with pytest.raises(GameOver) as info:
        for _ in range(30):
            game.press(Key.RIGHT)
    assert info.value.status == 0
    assert "Congratulations! YOU HAVE WON!" in info.value.message
    assert f"Total moves: {game.moves}" in info.value.message
    assert game.collected == game.total_collectibles
    assert "C" not in "".join(game.tilemap.rows)


def test_closed_exit_blocks():
    tilemap = TileMap(["111111", "1PE0C1", "111111"])
    game = Game(tilemap, MapSummary(player=(1, 1), collectibles=1))
    for _ in range(10):
        game.press(Key.RIGHT)
    assert game.moves < 10
    assert game.check_collision(game.x + SPEED, game.y) is True
    assert game.exit_open is False


def test_enemy_ends_game():
    game = _game(WITH_ENEMY, bonus=True)
    with pytest.raises(GameOver) as info:
        for _ in range(10):
            game.press(Key.RIGHT)
    assert info.value.status == 1
    assert "GAME OVER!" in info.value.message


def test_escape_and_close_messages():
    with pytest.raises(GameOver) as info:
        _game(SIMPLE).press(Key.ESCAPE)
    assert info.value.status == 0
    assert info.value.message == GOODBYE
    with pytest.raises(GameOver) as info:
        _game(WITH_ENEMY, bonus=True).close()
    assert info.value.message == BONUS_GOODBYE
    assert not BONUS_GOODBYE.startswith("\033[1;33m\n")


def test_first_tick_advances_frames():
    game = _game(WITH_ENEMY, bonus=True)
    game.tick()
    assert game.coin_frame == 1
    assert game.enemy_frame == 1


def test_ticks_cycle_through_all_frames():
    game = _game(WITH_ENEMY, bonus=True)
    coins, enemies = set(), set()
    for _ in range(200):
        game.tick()
        coins.add(game.coin_frame)
        enemies.add(game.enemy_frame)
    assert coins == set(range(COIN_FRAMES))
    assert enemies == set(range(ENEMY_FRAMES))


def test_mandatory_tick_does_not_animate():
    game = _game(SIMPLE)
    for _ in range(25):
        game.tick()
    assert (game.coin_frame, game.enemy_frame) == (0, 0)