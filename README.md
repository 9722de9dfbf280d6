# snesjam

A small top-down delivery game. The player walks across a 512×512 pixel
world made of 16-pixel tiles (a 32×32 grid). Roads are fast (speed 5),
grass is slower (2), trees slower still (1), and water cannot be entered.
Five cities lie on the map: Aenra, Bear, Soorn, Dekrak and Trek Vaek.
Stepping onto a city tile opens a menu where you can pick up a package,
see which city it has to go to, or leave.

The game runs headless. Instead of drawing to a screen it keeps a 32×32
text console that records what would be shown, plus the camera scroll
and a table of sprite positions. It can be driven from a terminal, a
script or a test.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing from the command line

```
snesjam [--trace] [SCRIPT]
```

The command reads pad states from `SCRIPT`, or from standard input when no
file is given, and advances the world one frame per line. Each line names
the buttons held during that frame: `up`, `down`, `left`, `right` and `a`,
in any case, separated by spaces, commas or `+`. An empty line is a frame
with no button held, and anything after `#` is a comment. The first frame
always places the camera, even with no button held.

```
# walk north for three frames, then press A
up
up
up
a
```

When the script ends, the console text is printed (trailing blank rows and
blanks at line ends are dropped). With `--trace` the console is printed
after every frame instead, under a `-- frame N` heading.

An unknown button name or an unreadable script is reported on standard
error and the command exits with status 2.

## Using it as a library

- `snesjam.entities.City` – a named city at a tile position, with
  `available_packages` (1 by default) and a `welcome_text()` greeting
  such as `"Welcome in Bear"`.
- `snesjam.entities.Entity` – a sprite with an `id` and a screen
  position; `draw(sprites)` stores `(x, y)` under its id in a mapping.
- `snesjam.entities.Package` – a frozen record of a delivery, holding the
  `source` and `destination` city indexes.
- `snesjam.world.Keys` – the pad buttons as an `IntFlag`: `A`, `RIGHT`,
  `LEFT`, `DOWN`, `UP`.
- `snesjam.world.Console` – the text grid; `draw_text(x, y, text)` writes
  text from a cell rightwards, cut at the right edge, and `text_at(x, y)`
  reads from a cell to the end of its row. Both raise `ValueError` for a
  cell outside the grid.
- `snesjam.world.get_speed(arr_x, arr_y)` – the walking speed on a tile:
  `0` for tiles that cannot be entered and `255` for city tiles. Raises
  `ValueError` outside the 32×32 grid.
- `snesjam.world.World` – the game state. Call `set_scroll(pad,
  force_render=False)` once per frame with the buttons held. Outside a
  city it moves the player, keeps them off blocked tiles, updates the
  camera in `scroll` and the player sprite in `sprites`, and writes
  position lines to the console. On a city it opens that city's menu;
  while the menu is open, `UP`/`DOWN` move the cursor and `A` chooses an
  entry.
- `snesjam.main.parse_pad(line)` – turns a line such as `"left+down"`
  into `Keys`; raises `ValueError` for an unknown button.
- `snesjam.main.main(argv=None)` – the command above; returns the exit
  status.

A short session:

```python
from snesjam.world import Keys, World

world = World()
world.set_scroll(Keys(0), True)      # first frame: place the camera
for _ in range(10):
    world.set_scroll(Keys.UP)
print(world.player_x, world.player_y, world.scroll)
print(world.console.text_at(1, 20))
```

## What it does not do

There is no graphical display, sound or real-time input: the world only
advances when `set_scroll` is called, and what would be on screen is only
the text console, the scroll offsets and the sprite table. A package can
be picked up and the menu shows where it has to go, but choosing
"Deliver a package" does nothing yet, so a package is never handed over
and a city's package count never changes.