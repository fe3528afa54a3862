# meatball-chase

A small top-down maze game. You steer a pug through a maze. Fifty meatballs
are scattered around it, and they run from you once you come near. Each
meatball you catch adds one to the counter in the top-left corner
("Klopsiki zjedzone").

## Installing

```
pip install .
```

This installs the `meatball-chase` command and its one dependency, pygame.

## Playing

By default the game looks for these files in the directory you start it from:

- `generated_maze.png`: the maze. It must be exactly 100 × 52 pixels. Every
  pure black pixel (`0, 0, 0`, alpha ignored) is a wall. Any other colour is
  floor. Each pixel becomes a 25 × 25 tile.
- `pug.png`: the player sprite. If it cannot be read, a plain drawn square is
  used instead.
- `meatball.png`: the meatball sprite. If it cannot be read, a brown circle is
  used instead.

Then run:

```
meatball-chase
```

Options:

- `--level PATH`: the maze image (default `generated_maze.png`).
- `--pug PATH`: the player sprite (default `pug.png`).
- `--meatball PATH`: the meatball sprite (default `meatball.png`).
- `--seed N`: seed for the random numbers that place and steer the meatballs.

If the maze image cannot be read or is the wrong size, the game prints an
error and exits with status 1.

Controls:

- Move with **W A S D** or the **arrow keys**. If a diagonal move is blocked,
  the pug tries the horizontal part alone, then the vertical part, so it
  slides along walls.
- Press **Escape** or close the window to quit.

The pug starts on the floor tile nearest the centre of the maze and turns to
face the way it last moved. The camera follows it. Meatballs are placed on
random floor tiles at least four tiles away from the top-left corner start
area. Meatballs farther than 400 pixels from the pug stay where they are.
Closer ones move away from it, prefer open space, keep apart from each other,
and now and then pick a random direction, more often when they are stuck.

## Using the pieces

The game logic runs without a window, so you can use it from code:

```python
import random

from meatball_chase.level import Level
from meatball_chase.dots import spawn_dots, update_dots, check_dot_collision
from meatball_chase.game import place_player, move_player

level = Level.load("generated_maze.png")
player = place_player(level)
rng = random.Random(1)
dots = spawn_dots(level, player, rng, 50)

player = move_player(level, player, 3, 0)
update_dots(dots, level, player, rng)
eaten = check_dot_collision(dots, player)
```

- `meatball_chase.level`: `Rect` (with `center`, `moved`, `intersects`),
  `Level` (built with `Level.load`, `Level.from_pixels` or `Level.from_rows`,
  where `#` is a wall in text rows), `LevelError`, and `is_wall`.
- `meatball_chase.dots`: `Dot`, `spawn_dots`, `update_dots`,
  `check_dot_collision`, `draw_dots`, and the look-ahead helpers
  `flood_fill_open_area` and `simulate_open_area`.
- `meatball_chase.game`: `find_start_tile`, `place_player`, `move_player`,
  `facing_angle`, and `main`, which runs the game.
- `meatball_chase.config`: screen, tile, speed and meatball-count constants.

`spawn_dots` raises `ValueError` when no floor tile is far enough from the
player to place a meatball.

## What it does not do

The game has no maze generator: you supply the maze image yourself. It keeps
no high scores and has no end screen; the counter simply goes up until you
quit.

## Running the tests

```
pip install ".[test]"
pytest
```