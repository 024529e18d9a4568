# fdfview

A small viewer for `.fdf` height maps. It reads a grid of heights, projects it
isometrically, scales it to fit a 1100×1100 area and draws the wireframe on a
1200×1200 image. It then shows that image in a window. Each line takes its
colour from the points at its two ends. If the two colours are the same, the
line uses that colour. If they differ, the line uses their channel-by-channel
average.

## Installing

```
pip install .
```

The window is drawn with `pygame`, which is installed as a dependency.

## Running

```
fdfview maps/42.fdf
```

Press Escape or close the window to quit.

The program takes exactly one argument. Everything from the first dot in the
path onward must be exactly `.fdf`. This means that a path such as
`./maps/42.fdf`, or one with a dot in a directory name, is rejected. The
program prints a message and exits with a non-zero status in these cases:

- the file is missing or cannot be opened
- the file is empty
- the rows of the map hold different numbers of values
- the display cannot be set up

## The map format

Each line of the file is a row of the map. Values on a row are separated by
spaces. Each value is an integer height, with an optional colour after a
comma:

```
0 0 0 0
0 10,0xFF0000 10,0xFF0000 0
0 0 0 0
```

A point with no colour is drawn in white (`FFFFFF`). A colour shorter than six
hex digits is padded on the left with zeros, so `0xFF` is `0000FF`. A colour
longer than six digits is cut to its first six.

## Using it as a library

```python
from fdfview.grid import load_grid
from fdfview.render import draw_image

grid = load_grid("maps/42.fdf", 1200)
canvas = draw_image(grid, 1200)
print(canvas.get_pixel(600, 600))
```

The modules that do the work:

- `fdfview.grid`
  - `load_grid(path, window_size)` reads a map file into a `Grid` of `Point`s.
  - `parse_map(lines, window_size)` builds a `Grid` from lines you already have.
  - Both raise `MapError` for a badly formed map.
  - `isometric`, `parse_colour` and `width_count` are the pieces they use.
- `fdfview.render`
  - `draw_image(grid, window_size)` returns a `Canvas` of packed `0xRRGGBBAA` pixels.
  - A `Canvas` has `put_pixel`, `get_pixel` and `rgba_bytes`.
  - `line_pixels` lists the pixels of one connecting line.
- `fdfview.lines`
  - `make_line` describes the line between two neighbouring points.
  - `up_x_pixels`, `up_y_pixels`, `down_x_pixels` and `down_y_pixels` yield the pixels along it.
- `fdfview.colours`
  - `hex_to_int` and `rgb_int` convert colour strings.
  - `average_colour` and `line_colour` combine the colours of two points.
- `fdfview.cli`
  - `check_arguments(argv)` validates the command-line arguments.
  - `show(canvas, title)` opens the window.
  - `main(argv)` runs the whole program and returns the exit status.
- `fdfview.linereader`
  - `LineReader` and `read_lines` read a text or binary stream line by line, through a fixed-size buffer.

The package also carries small general helpers:

- `fdfview.chars`: character classes, `atoi` and `itoa`.
- `fdfview.strings`: C-style searching, comparing and bounded copying of text.
- `fdfview.textops`: `split`, `strjoin`, `strtrim`, `substr`, `strmapi` and `striteri`.
- `fdfview.memory`: byte-buffer fill, copy, search and compare.
- `fdfview.linkedlist`: a singly linked `LinkedList` of `Node`s.
- `fdfview.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` for writing to a text stream.

## What it does not do

The window shows one fixed image. There is no zooming, panning, rotation or
change of projection, and the rendered image cannot be saved to a file.

## Running the tests

```
pip install .[test]
pytest
```