# consnake

A snake game that runs in a terminal. Steer the snake with `w`, `a`, `s` and `d`.
Eat the food (`*`). Avoid the walls (`#`), the obstacles (`X`) and your own body (`O`).
Each time the snake eats, it grows by one segment. When its length becomes even, the
game speeds up.

## Installing

```
pip install .
```

## Playing

```
consnake
```

The game first asks for your name and then starts straight away. A key that would
turn the snake back onto itself is ignored. The game ends when the snake runs into a
wall, an obstacle or its own body.

When the game ends, your score is saved. The score is the snake's length, and it
starts at 1. The game prints `Game Over!` and asks whether you want to see the top
scores. Answer `y` or `Y` to have the score table printed.

The game needs a POSIX terminal, because it reads keys one at a time without waiting
for Enter. While the game runs, line buffering and echo are turned off. They are
restored when the game ends.

### Options

- `--field PATH` is the field size file. The default is `field_size.txt`.
- `--obstacles PATH` is the obstacle file. The default is `obstacles.txt`.
- `--scores PATH` is the high score file. The default is `scores.txt`.

## Files

Every file is optional. Relative paths are taken from the working directory.

- **Field size file.** It holds two integers: the width and the height of the field,
  borders included. If the file is missing, the field is 20 by 20. If it has only one
  value, only that value is used. Each side must be at least 3, or the game refuses to
  start.
- **Obstacle file.** It holds pairs of integers `x y`, one obstacle per pair.
  - Positions on the border are ignored, and so are positions outside it.
  - At most 100 obstacles are kept.
  - Reading stops at the first token that is not an integer.
- **Score file.** It keeps one `name score` per line, highest score first, with at
  most 100 entries.
  - The file is created when the first game ends.
  - Names are cut to 49 characters.
  - Once the table holds 100 entries, no new scores are added to it.

## Using it as a library

You can drive the game logic without a terminal:

```python
import random
from consnake.game import Game
from consnake.obstacles import parse_obstacles

obstacles = parse_obstacles("3 3\n4 4\n", 20, 20)
game = Game(20, 20, obstacles, random.Random(1))
game.steer("d")
alive = game.step()
print(game.render())
print(game.length, game.food, game.delay())
```

### `consnake.game`

- `Game.step()` advances one frame. It returns `False` once the game is over, and
  from then on `game.over` is true.
- `Game.steer(key)` turns the snake and returns the current `Direction`.
- `Game.generate_food()` places new food at a random cell inside the walls.
- `Game.render()` returns the field as text.
- `Game.delay()` returns the pause between frames in seconds: the speed, which starts
  at 10, times 0.05.

### `consnake.obstacles`

This module has `Point`, `parse_obstacles(text, width, height)` and
`load_obstacles(path, width, height)`. If the file is missing, `load_obstacles`
returns an empty list.

### `consnake.score`

This module has the following:

- `ScoreEntry`
- `read_scores(path)`
- `save_score(name, score, path)`, which returns the table it wrote
- `format_scores(path)`, which returns the printable table. If there is no score file,
  it returns `No scores available.`

### `consnake.terminal`

This module has the following:

- `clear_screen(stream)`
- `raw_mode(stream)`, a context manager
- `read_key(stream)`, which returns a waiting key or `None`

### `consnake.cli`

This module has `read_field_size(path, default)` and `main(argv)`.

## Running the tests

```
pip install .[test]
pytest
```