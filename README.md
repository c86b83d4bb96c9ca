# fdfview

A library for reading `.fdf` height maps and colouring their points by
height, together with the small text, byte and list helpers it is built on.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library.

## Map files

A map file is plain text. Each line is one row of the grid and holds
space-separated integer heights:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

```python
from fdfview.mapfile import read_map_file, MapError

try:
    height_map = read_map_file("map.fdf")
except MapError as exc:
    print(exc)
else:
    print(height_map.width, height_map.height)
    print(height_map.depth_range())
```

- `read_map_file(file_name)` reads a file and returns a `HeightMap`.
  Failure to open or read the file is reported as `MapError`.
- `parse_map_lines(lines)` builds a `HeightMap` from any iterable of lines.
  The map's width is taken from the last line. A line that starts with a
  newline, a value that is not an optional `-` followed by digits, or a row
  with fewer columns than that width raises `MapError`.
- `HeightMap.rows` is a list of rows of `Point3D(x, y, z)`, where `x` is the
  column, `y` the row and `z` the height. `HeightMap.width` is the number of
  columns per row and `HeightMap.height` the number of rows.
- `HeightMap.depth_range()` returns `(min, max)` of the heights, each
  clamped so that the range always includes 0.
- `get_width(line)`, `parse_line(line, row, width)` and `str_is_valid(text)`
  are the per-line pieces used above.

## Colours

`fdfview.colour.get_colour(z, min_z, max_z)` places `z` within the range
and splits it into fifths, returning, from the bottom up, `RED4`,
`FOREST_GREEN`, `GOLD`, `CORAL` and `LIGHT_BLUE`. `pixel(r, g, b, a)` packs
four channels into one 32-bit RGBA value. The module also defines the
window size `WIDTH` × `HEIGHT` (1920 × 1080) and further colour constants.

## Helpers

- `fdfview.lines` — `LineReader` reads lines, newline included, from a file
  descriptor or binary stream in fixed-size chunks; `FdLineReaders` keeps a
  reader per file descriptor.
- `fdfview.printf` — `format_printf(fmt, *args)` and `printf(fmt, *args)`
  for `%c %s %p %d %i %u %x %X %%`, plus `format_hex` and `format_pointer`.
- `fdfview.strings` — `split`, `count_words`, `strchr`, `strrchr`,
  `strnstr`, `strncmp`, `strlcpy`, `strlcat`, `strjoin`, `strtrim`,
  `substr`, `strmapi`, `striteri`.
- `fdfview.numbers` — `atoi` (returns 0 outside the 32-bit signed range)
  and `itoa`.
- `fdfview.chars` — `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`.
- `fdfview.memory` — `bzero`, `calloc`, `realloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove`, `memset` on `bytearray` buffers.
- `fdfview.linked_list` — `LinkedList` of `Node`s with `add_front`,
  `add_back`, `last`, `clear`, `for_each`, `map`, `nth_from_end`, `len()`
  and iteration.
- `fdfview.output` — `put_char`, `put_str`, `put_endl`, `put_nbr` on a text
  stream (standard output by default).

## What it does not do

The package does not draw anything. It has no window, no rotation or
isometric projection of the map, no line drawing and no command to run;
it stops at a parsed `HeightMap` and a colour for each height.

## Tests

```
pip install ".[test]"
pytest
```