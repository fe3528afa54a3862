"""Fleeing meatballs: spawning, steering, eating and drawing."""

from __future__ import annotations

import math
import random
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

import pygame

from .config import DOT_SPEED, MAX_DOTS, PLAYER_SIZE, TILE_SIZE
from .level import Level, Rect

FREEZE_DISTANCE = 400.0
DOT_SIZE = 24.0

_SPAWN_CLEARANCE = TILE_SIZE * 4
_REPULSE_RANGE = 60.0
_STUCK_LIMIT = 20
_PANIC_DISTANCE = 200.0
_LOOKAHEAD_DEPTH = 2
_LOOKAHEAD_RADIUS = 20.0

_STEPS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass
class Dot:
    """One meatball and its steering memory."""

    rect: Rect
    alive: bool = True
    last_pos: tuple[float, float] = (0.0, 0.0)
    stuck_frames: int = 0
    corner_frames: int = 0
    last_dir: tuple[float, float] = (0.0, 0.0)


def _tile_center(tx: int, ty: int) -> tuple[float, float]:
    return (tx * TILE_SIZE + TILE_SIZE / 2.0, ty * TILE_SIZE + TILE_SIZE / 2.0)


def flood_fill_open_area(level: Level, x: float, y: float, radius: float) -> int:
    """Count open tiles reachable from (x, y) whose centres lie within radius."""
    tile_radius = int(radius / TILE_SIZE) + 1
    cx, cy = int(x / TILE_SIZE), int(y / TILE_SIZE)
    visited = {(cx, cy)}
    queue = deque([(cx, cy)])
    open_count = 0
    while queue:
        tx, ty = queue.popleft()
        if math.dist(_tile_center(tx, ty), (x, y)) > radius:
            continue
        if not (0 <= tx < level.width and 0 <= ty < level.height):
            continue
        if level.is_wall_at(tx, ty):
            continue
        open_count += 1
        for dx, dy in _NEIGHBOURS:
            nx, ny = tx + dx, ty + dy
            if abs(nx - cx) > tile_radius or abs(ny - cy) > tile_radius:
                continue
            if (nx, ny) not in visited:
                visited.add((nx, ny))
                queue.append((nx, ny))
    return open_count


def simulate_open_area(
    level: Level, x: float, y: float, depth: int, radius: float
) -> int:
    """Smallest open area found by looking up to depth steps ahead."""
    best = flood_fill_open_area(level, x, y, radius)
    if depth <= 0:
        return best
    for dx, dy in _STEPS:
        nx, ny = x + dx * DOT_SPEED, y + dy * DOT_SPEED
        if level.collides(Rect(nx - 0.5, ny - 0.5, 1, 1)):
            continue
        best = min(best, simulate_open_area(level, nx, ny, depth - 1, radius))
    return best


def spawn_dots(
    level: Level, player: Rect, rng: random.Random, count: int = MAX_DOTS
) -> list[Dot]:
    """Place dots on random open tiles away from the player."""
    px = player.x + PLAYER_SIZE / 2.0
    py = player.y + PLAYER_SIZE / 2.0

    def far_enough(tx: int, ty: int) -> bool:
        return math.dist((px, py), _tile_center(tx, ty)) >= _SPAWN_CLEARANCE

    if count > 0 and not any(far_enough(tx, ty) for tx, ty in level.open_tiles()):
        raise ValueError("no open tile is far enough from the player to spawn dots")

    dots: list[Dot] = []
    offset = (TILE_SIZE - DOT_SIZE) / 2.0
    while len(dots) < count:
        gx = rng.randrange(level.width)
        gy = rng.randrange(level.height)
        if level.is_wall_at(gx, gy) or not far_enough(gx, gy):
            continue
        dots.append(
            Dot(
                rect=Rect(
                    gx * TILE_SIZE + offset, gy * TILE_SIZE + offset, DOT_SIZE, DOT_SIZE
                ),
                last_pos=_tile_center(gx, gy),
            )
        )
    return dots


def _scored_moves(
    dot: Dot,
    dots: Sequence[Dot],
    level: Level,
    player_center: tuple[float, float],
    player_dist: float,
    skip_reverse: bool,
) -> list[tuple[float, tuple[float, float]]]:
    moves = []
    for dx, dy in _STEPS:
        move = (dx * DOT_SPEED, dy * DOT_SPEED)
        if skip_reverse and dot.last_dir == (-move[0], -move[1]):
            continue
        test = dot.rect.moved(*move)
        if level.collides(test):
            continue
        tx, ty = test.center()
        d_player = math.dist((tx, ty), player_center)
        future_open = simulate_open_area(
            level, tx, ty, _LOOKAHEAD_DEPTH, _LOOKAHEAD_RADIUS
        )
        repulse = 0.0
        for other in dots:
            if other is dot or not other.alive:
                continue
            d = math.dist((test.x, test.y), (other.rect.x, other.rect.y))
            if d < _REPULSE_RANGE:
                repulse += _REPULSE_RANGE - d
        weight = 2.0 if player_dist < FREEZE_DISTANCE else 0.1
        score = future_open - repulse * 0.5 + d_player * weight
        moves.append((score, move))
    return moves


def update_dots(
    dots: Sequence[Dot], level: Level, player: Rect, rng: random.Random
) -> None:
    """Advance every living dot by one step away from the player."""
    player_center = player.center()
    for dot in dots:
        if not dot.alive:
            continue

        moved = math.dist((dot.rect.x, dot.rect.y), dot.last_pos)
        dot.stuck_frames = dot.stuck_frames + 1 if moved < 1.0 else 0
        dot.last_pos = (dot.rect.x, dot.rect.y)

        player_dist = math.dist(dot.rect.center(), player_center)
        if player_dist > FREEZE_DISTANCE:
            continue

        stuck = dot.stuck_frames > _STUCK_LIMIT
        random_chance = 0.5 if stuck else 0.1
        force_random = stuck and player_dist < _PANIC_DISTANCE
        do_random = force_random or rng.random() < random_chance

        moves = _scored_moves(dot, dots, level, player_center, player_dist, True)
        if moves:
            best_move = max(moves, key=lambda item: item[0])[1]
            if do_random:
                best_move = rng.choice([move for _, move in moves])
        else:
            fallback = _scored_moves(
                dot, dots, level, player_center, player_dist, False
            )
            best_move = (
                max(fallback, key=lambda item: item[0])[1] if fallback else (0.0, 0.0)
            )

        if best_move != (0.0, 0.0):
            dot.rect = dot.rect.moved(*best_move)
            dot.last_dir = best_move


def check_dot_collision(dots: Sequence[Dot], player: Rect) -> int:
    """Mark dots touched by the player as eaten and return how many."""
    eaten = 0
    for dot in dots:
        if dot.alive and player.intersects(dot.rect):
            dot.alive = False
            eaten += 1
    return eaten


def draw_dots(
    surface: pygame.Surface,
    dots: Sequence[Dot],
    texture: pygame.Surface,
    offset: tuple[int, int] = (0, 0),
) -> None:
    """Blit the texture at every living dot, shifted by the camera offset."""
    ox, oy = offset
    for dot in dots:
        if dot.alive:
            surface.blit(texture, (int(dot.rect.x) - ox, int(dot.rect.y) - oy))