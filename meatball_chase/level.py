"""Tile map read from an image, with axis-aligned wall collision."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from os import PathLike

import pygame

from .config import LEVEL_H, LEVEL_W, TILE_SIZE

WALL_COLOR = (80, 80, 80)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in world pixels."""

    x: float
    y: float
    width: float
    height: float

    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def moved(self, dx: float, dy: float) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def intersects(self, other: Rect) -> bool:
        """True when the rectangles overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


class LevelError(Exception):
    """Raised when a level cannot be built or loaded."""


def is_wall(color: Sequence[int]) -> bool:
    """A pure black pixel (alpha ignored) marks a wall."""
    return color[0] == 0 and color[1] == 0 and color[2] == 0


def _tile_index(coord: float) -> int:
    """Truncate to an integer, then divide by the tile size toward zero."""
    value = int(coord)
    quotient = abs(value) // TILE_SIZE
    return quotient if value >= 0 else -quotient


class Level:
    """A grid of wall and open tiles."""

    def __init__(self, walls: Iterable[bool], width: int, height: int) -> None:
        cells = tuple(bool(wall) for wall in walls)
        if width <= 0 or height <= 0:
            raise LevelError("level must have a positive size")
        if len(cells) != width * height:
            raise LevelError(f"expected {width * height} tiles, got {len(cells)}")
        self.width = width
        self.height = height
        self._walls = cells

    @classmethod
    def from_pixels(
        cls, pixels: Iterable[Sequence[int]], width: int, height: int
    ) -> Level:
        """Build a level from row-major pixel colours."""
        colors = list(pixels)
        if len(colors) != width * height:
            raise LevelError(
                f"expected {width * height} pixels, got {len(colors)}"
            )
        return cls((is_wall(color) for color in colors), width, height)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Level:
        """Build a level from text rows where '#' is a wall."""
        lines = list(rows)
        if not lines or not lines[0]:
            raise LevelError("level must have at least one tile")
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise LevelError("all rows must have the same length")
        return cls((char == "#" for line in lines for char in line), width, len(lines))

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Level:
        """Load a level image that must be exactly LEVEL_W x LEVEL_H pixels."""
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise LevelError(
                f"Level image must be {LEVEL_W}x{LEVEL_H} (cannot read {path})"
            ) from exc
        if image.get_size() != (LEVEL_W, LEVEL_H):
            raise LevelError(f"Level image must be {LEVEL_W}x{LEVEL_H}")
        pixels = (
            tuple(image.get_at((x, y))) for y in range(LEVEL_H) for x in range(LEVEL_W)
        )
        return cls.from_pixels(pixels, LEVEL_W, LEVEL_H)

    def is_wall_at(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside the level")
        return self._walls[y * self.width + x]

    def collides(self, rect: Rect) -> bool:
        """True when the rectangle overlaps any wall tile."""
        min_x = max(_tile_index(rect.x), 0)
        min_y = max(_tile_index(rect.y), 0)
        max_x = min(_tile_index(rect.x + rect.width), self.width - 1)
        max_y = min(_tile_index(rect.y + rect.height), self.height - 1)
        return any(
            self._walls[y * self.width + x]
            and rect.intersects(
                Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
            )
            for y in range(min_y, max_y + 1)
            for x in range(min_x, max_x + 1)
        )

    def open_tiles(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) of every open tile in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                if not self._walls[y * self.width + x]:
                    yield (x, y)

    def draw(self, surface: pygame.Surface, offset: tuple[int, int] = (0, 0)) -> None:
        """Paint the walls, shifted by the camera offset."""
        ox, oy = offset
        for y in range(self.height):
            for x in range(self.width):
                if self._walls[y * self.width + x]:
                    pygame.draw.rect(
                        surface,
                        WALL_COLOR,
                        (x * TILE_SIZE - ox, y * TILE_SIZE - oy, TILE_SIZE, TILE_SIZE),
                    )