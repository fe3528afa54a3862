"""The playable game: a pug chasing meatballs through a maze."""

from __future__ import annotations

import argparse
import math
import random

import pygame

from .config import PLAYER_SIZE, PLAYER_SPEED, SCREEN_H, SCREEN_W, TILE_SIZE
from .dots import DOT_SIZE, check_dot_collision, draw_dots, spawn_dots, update_dots
from .level import Level, LevelError, Rect

_BACKGROUND = (245, 245, 245)
_TEXT_COLOR = (230, 41, 55)
_FPS = 60


def find_start_tile(level: Level) -> tuple[int, int]:
    """The open tile nearest the centre; ties go to the first in row order."""
    center_x, center_y = level.width // 2, level.height // 2
    best = (center_x, center_y)
    best_dist = level.width * level.width + level.height * level.height
    for x, y in level.open_tiles():
        d = (x - center_x) ** 2 + (y - center_y) ** 2
        if d < best_dist:
            best_dist = d
            best = (x, y)
    return best


def place_player(level: Level) -> Rect:
    """The player rectangle centred on the start tile."""
    tx, ty = find_start_tile(level)
    margin = (TILE_SIZE - PLAYER_SIZE) / 2.0
    return Rect(tx * TILE_SIZE + margin, ty * TILE_SIZE + margin, PLAYER_SIZE, PLAYER_SIZE)


def move_player(level: Level, player: Rect, vx: float, vy: float) -> Rect:
    """Try the full move, then X only, then Y only; stay put if all collide."""
    for dx, dy in ((vx, vy), (vx, 0), (0, vy)):
        candidate = player.moved(dx, dy)
        if not level.collides(candidate):
            return candidate
    return player


def facing_angle(dx: float, dy: float) -> float:
    """Clockwise sprite rotation in degrees for a sprite drawn facing down."""
    return math.degrees(math.atan2(dy, dx)) - 90.0


def _read_velocity(keys) -> tuple[int, int]:
    vx = vy = 0
    if keys[pygame.K_w] or keys[pygame.K_UP]:
        vy = -PLAYER_SPEED
    if keys[pygame.K_s] or keys[pygame.K_DOWN]:
        vy = PLAYER_SPEED
    if keys[pygame.K_a] or keys[pygame.K_LEFT]:
        vx = -PLAYER_SPEED
    if keys[pygame.K_d] or keys[pygame.K_RIGHT]:
        vx = PLAYER_SPEED
    return vx, vy


def _load_texture(path: str, fallback: pygame.Surface) -> pygame.Surface:
    try:
        return pygame.image.load(path).convert_alpha()
    except (pygame.error, OSError):
        return fallback


def _meatball_placeholder() -> pygame.Surface:
    size = int(DOT_SIZE)
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(surface, (150, 75, 40), (size // 2, size // 2), size // 2)
    return surface


def _pug_placeholder() -> pygame.Surface:
    surface = pygame.Surface((PLAYER_SIZE, PLAYER_SIZE), pygame.SRCALPHA)
    surface.fill((210, 180, 140))
    pygame.draw.rect(surface, (60, 40, 30), (0, PLAYER_SIZE - 4, PLAYER_SIZE, 4))
    return surface


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Chase the meatballs through the maze.")
    parser.add_argument("--level", default="generated_maze.png", help="maze image")
    parser.add_argument("--pug", default="pug.png", help="player sprite")
    parser.add_argument("--meatball", default="meatball.png", help="meatball sprite")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        pygame.display.set_caption("Top-down Platformer")
        pug = _load_texture(args.pug, _pug_placeholder())

        try:
            level = Level.load(args.level)
        except LevelError as exc:
            print(exc)
            return 1

        rng = random.Random(args.seed)
        meatball = _load_texture(args.meatball, _meatball_placeholder())
        initial = Rect(TILE_SIZE + 4, TILE_SIZE + 4, PLAYER_SIZE, PLAYER_SIZE)
        dots = spawn_dots(level, initial, rng)
        player = place_player(level)
        last_dir: tuple[float, float] = (1, 0)
        score = 0

        pygame.font.init()
        font = pygame.font.Font(None, 24)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            if not running:
                break

            vx, vy = _read_velocity(pygame.key.get_pressed())
            if vx or vy:
                last_dir = (vx, vy)
            player = move_player(level, player, vx, vy)

            update_dots(dots, level, player, rng)
            score += check_dot_collision(dots, player)

            cx, cy = player.center()
            offset = (round(cx - SCREEN_W / 2.0), round(cy - SCREEN_H / 2.0))
            screen.fill(_BACKGROUND)
            level.draw(screen, offset)
            rotated = pygame.transform.rotate(pug, -facing_angle(*last_dir))
            screen.blit(
                rotated, rotated.get_rect(center=(cx - offset[0], cy - offset[1]))
            )
            draw_dots(screen, dots, meatball, offset)
            label = font.render(f"Klopsiki zjedzone: {score}", True, _TEXT_COLOR)
            screen.blit(label, (2, 2))
            pygame.display.flip()
            clock.tick(_FPS)
        return 0
    finally:
        pygame.quit()