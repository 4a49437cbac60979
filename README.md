# raymaze

These are the building blocks of a grid-based, first-person raycasting maze game:

- `raymaze.scene` reads the scene elements: the wall textures and the floor and ceiling colours.
- `raymaze.grid` checks a map grid. It needs exactly one start position and walls closed all round.
- `raymaze.xpm` and `raymaze.image` load XPM texture files into an in-memory pixel image.
- `raymaze.colors` provides named colours and converts colours for displays of low depth.
- `raymaze.player` handles player movement and turning. It keeps a small margin between the player and the walls.
- `raymaze.minimap` builds a minimap of the area around the player and draws it into an image.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Scene elements

A scene description has six elements, in any order. Blank lines may come between them:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

`read_elements(lines)` reads lines until all six elements have been seen and returns a `SceneConfig`. Its members are:

- `textures`: a dict keyed by `"NO"`, `"SO"`, `"WE"` and `"EA"`;
- `floor` and `ceiling`: colours packed as `0xRRGGBB`;
- `lines_read`: the number of lines read.

If you pass an iterator, you can go on reading the lines that follow the elements. `SceneConfig.feed_line(line)` applies a single element line. `SceneConfig.complete()` tells you whether all six elements are known.

A texture line must end in `.xpm`, and its path must name a readable file. A colour is three values of at most three digits, from 0 to 255, separated by commas. `parse_colour("255,0,0")` returns `0xFF0000`.

Any of the following raises `SceneError`:

- an unknown element;
- a duplicate element;
- a bad colour;
- a missing or unreadable texture;
- input that ends before every element has been seen.

## Map validation

```python
from raymaze.grid import validate_map, MapError

rows = [
    "111111",
    "100001",
    "10N001",
    "111111",
]
padded, start = validate_map(rows)   # start == (2, 2)
```

`validate_map` works in three steps:

1. It pads short rows with spaces (`pad_rows`).
2. It finds the single `N`/`S`/`E`/`W` start cell (`find_start`).
3. It checks that every `0` floor cell is closed in by walls and that the start is not on the edge of the map (`check_edges`, `has_hole`).

It returns the padded rows and the `(x, y)` start cell. A problem raises `MapError`. `is_path(cell)` is true for floor and start cells.

## Images and textures

`Image(width, height, bpp=32, byte_order=0)` holds pixels packed into a `bytearray` (`data`). Each row takes `size_line` bytes, padded to 32 bits. It has these methods:

- `put_pixel(x, y, color)` stores a value at a pixel.
- `get_pixel(x, y)` reads the value back.
- `clear()` zeroes the image.

A coordinate outside the image raises `IndexError`.

The XPM readers are:

- `load_xpm_file(path)` reads an XPM file, which may contain C-style comments, and returns an `Image`.
- `xpm_to_image(lines)` builds an image from a list of XPM strings.
- `parse_xpm(lines)` returns the pixel rows as `0xRRGGBB` values. Transparent (`None`) pixels become `0xFF000000`.

Colours may be given as `#RRGGBB` or by name. Names are looked up with `raymaze.colors.lookup_color`, and an unknown name gives 0. Malformed data raises `XpmError`.

`get_good_color(color, depth, decrgb)` converts a colour for a display. On displays of depth 24 or more the colour comes back unchanged. Otherwise the channel shifts and widths in `decrgb` are used.

## Movement

`Player(position, direction, camera)` holds three `Vector`s: the position, the view direction and the camera plane. Its methods are:

- `press(key, grid)` and `release(key, grid)` take a key code, such as a `Key` member. They update the set of held keys and then apply the held keys once. `Key.ESCAPE` sets `quit_requested`.
- `update(grid)` moves and turns according to every held key.
- `move(grid, sign, heading)` steps along one axis at a time. It does not step into a `"1"` wall cell. It also refuses a step that would come closer than `bubble` to a wall in the next cell (`near_wall`).
- `rotate(angle)` turns the direction and the camera plane together.
- `mouse_look(x, center)` turns a quarter of a rotation step towards the side the pointer is on. It returns the angle it turned.

## Minimap

`build_minimap(rows, cell_x, cell_y, size=11)` returns a square of `Cell` values (`VOID`, `WALL`, `FLOOR`, `PLAYER`) centred on the player's cell.

`render_minimap(image, grid, origin_y, cell_pixels=8)` draws that square at the left edge of an image, starting at row `origin_y`. Each cell is drawn as a square by `draw_square`.

## What the package does not do

- It opens no window and handles no display events.
- It has no raycasting renderer and no game loop.
- It provides no command to start a game.
- It has no function that reads a whole map file. You split the file yourself: the element lines go to `read_elements`, and the grid rows go to `validate_map`.