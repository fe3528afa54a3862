"""Screen, map and movement constants."""

SCREEN_W = 1200
SCREEN_H = 800

TILE_SIZE = 25
LEVEL_W = 100
LEVEL_H = 52

PLAYER_SIZE = 18
PLAYER_SPEED = 3
DOT_SPEED = 3.6
MAX_DOTS = 50