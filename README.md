# gridquest

A small tile-based game. A level is a plain text file in which every
character is one tile:

| Character | Tile    |
|-----------|---------|
| `*`       | wall    |
| `P`       | player  |
| `M`       | monster |
| `G`       | goal    |
| space     | floor   |

Every character of a line, whatever it is, also gets a floor tile under it.
Only the first 99 characters of each line are read. Tiles are drawn 30 pixels
square in an 800×600 window, in layers by render order: floors first, then
walls, then the player, and monsters and goals last, on top.

## Installing

```
pip install .
```

To run the tests as well, install the test extra:

```
pip install .[test]
pytest
```

## Playing

```
gridquest
```

This loads `level01.map` from the current directory. To load another level,
give its path:

```
gridquest mylevel.map
```

A missing map file raises `FileNotFoundError`.

Move the player one cell per key press with the arrow keys or with W, A, S
and D. Close the window to quit.

The tile images are read from a `data/` directory under the directory you
start the game from: `wall.bmp`, `floor.bmp`, `goal.bmp`, `monster.bmp` and
`player.bmp`. A missing image raises `FileNotFoundError`. The colour key (the
colour shown as transparent) is white for the tile images and magenta for the
player image.

The player image is a sprite sheet divided into a 5×5 grid; the five frames
of its top row are played in turn, each for about a quarter of a second.

## What the game does not do

The player moves freely: walls do not block it, reaching a goal does not end
or win the level, and monsters neither move nor harm the player. There is no
score, no sound and no level progression.

## Using the pieces

The game is built from a few parts that can also be used on their own:

- `gridquest.world.World` holds the actors. `World.load_lines` builds a level
  from lines of text and `World.load` builds one from a file; both take an
  optional `Renderer` used to load the tile images. `spawn_actor`,
  `destroy_actor`, `tick` and `render` manage and drive the actors.
- `gridquest.actors` defines `Actor` and the tiles `Player`, `Wall`, `Floor`,
  `Goal` and `Monster`. Each tile carries a `PaperFlipbookComponent`
  (from `gridquest.components`) that draws it.
- `gridquest.renderer.Renderer` draws textures onto a pygame surface.
- `gridquest.timer.Timer` measures the seconds between ticks given in
  milliseconds.
- `gridquest.vector.Vector2D` is an immutable pair of integer grid
  coordinates that can be added together.
- `gridquest.engine.Engine` ties them together. It can be given a surface to
  draw on instead of opening a window. `Engine.step` runs one frame for a
  given list of events and a given time in milliseconds and returns whether
  the game is still running, which makes the game loop easy to drive from a
  script or a test.