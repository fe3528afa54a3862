import math

import pygame
import pytest

from meatball_chase.config import PLAYER_SIZE, PLAYER_SPEED, TILE_SIZE
from meatball_chase.game import (
    facing_angle,
    find_start_tile,
    main,
    move_player,
    place_player,
)
from meatball_chase.level import Level, Rect


def _open_level(width, height):
    inner = "#" + "." * (width - 2) + "#"
    return Level.from_rows(["#" * width] + [inner] * (height - 2) + ["#" * width])


def test_start_tile_is_center_when_open():
    level = _open_level(11, 9)
    assert find_start_tile(level) == (11 // 2, 9 // 2)


def test_start_tile_is_nearest_open_tile():
    rows = ["#########"] * 3 + ["###.#####", "#########", "#########"] + ["#.......#"]
    level = Level.from_rows(rows)
    tx, ty = find_start_tile(level)
    assert not level.is_wall_at(tx, ty)
    cx, cy = level.width // 2, level.height // 2
    best = (tx - cx) ** 2 + (ty - cy) ** 2
    assert all((x - cx) ** 2 + (y - cy) ** 2 >= best for x, y in level.open_tiles())


def test_place_player_centres_on_start_tile():
    level = _open_level(11, 9)
    player = place_player(level)
    tx, ty = find_start_tile(level)
    assert player.center() == (
        tx * TILE_SIZE + TILE_SIZE / 2,
        ty * TILE_SIZE + TILE_SIZE / 2,
    )
    assert player.width == PLAYER_SIZE and player.height == PLAYER_SIZE
    assert not level.collides(player)


def test_move_player_free():
    level = _open_level(11, 9)
    player = place_player(level)
    assert move_player(level, player, PLAYER_SPEED, -PLAYER_SPEED) == player.moved(
        PLAYER_SPEED, -PLAYER_SPEED
    )


def test_move_player_slides_along_wall():
    level = Level.from_rows(["####", "#.##", "#.##", "####"])
    player = Rect(2 * TILE_SIZE - PLAYER_SIZE, TILE_SIZE + 1, PLAYER_SIZE, PLAYER_SIZE)
    moved = move_player(level, player, PLAYER_SPEED, PLAYER_SPEED)
    assert moved == player.moved(0, PLAYER_SPEED)


def test_move_player_blocked_in_corner():
    level = Level.from_rows(["####", "#.##", "#.##", "####"])
    player = Rect(TILE_SIZE, TILE_SIZE, PLAYER_SIZE, PLAYER_SIZE)
    assert move_player(level, player, -PLAYER_SPEED, -PLAYER_SPEED) == player


def test_facing_angle():
    assert facing_angle(0, 1) == pytest.approx(0.0)
    assert facing_angle(1, 0) == pytest.approx(-90.0)
    assert facing_angle(0, -1) == pytest.approx(-180.0)
    assert math.isclose(facing_angle(-1, 0) - facing_angle(1, 0), 180.0)


def test_main_fails_on_missing_level(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    result = main(
        ["--level", str(tmp_path / "missing.png"), "--pug", str(tmp_path / "none.png")]
    )
    assert result == 1


def test_main_fails_on_wrong_size_level(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    path = tmp_path / "small.bmp"
    pygame.image.save(pygame.Surface((4, 4)), str(path))
    result = main(["--level", str(path), "--pug", str(tmp_path / "none.png")])
    assert result == 1
    assert "Level image must be" in capsys.readouterr().out