# rastercut

Classic raster-graphics algorithms as a small pure-Python library: polygon
filling by scan lines, seed filling of pixel outlines, rasterisation of
segments, circles and ellipses, and clipping of segments and polygons.
Some of the algorithms come with a state class that drives them from clicks
and text fields.

Points are plain `(x, y)` tuples of floats; colours are `(r, g, b)` tuples.
There are no dependencies beyond the standard library.

## Modules

| Module | Contents |
| --- | --- |
| `rastercut.errors` | `GraphicsError` (with `title` and `description`), `InvalidValueError`, `parse_unsigned(text, bits)` |
| `rastercut.scanline` | `ScanlineCanvas`: closed polylines filled row by row with an ordered edge table (`EdgeInfo`) |
| `rastercut.raster` | `dda`, `circle_pixels`, `ellipse_pixels` |
| `rastercut.seedfill` | `SeedCanvas` pixel canvas; span seed fills `fill_ordinary` (explicit stack) and `fill_recursive` |
| `rastercut.rectclip` | Segment clipping by an upright rectangle with region codes: `outcode`, `find_boundary_point`, `clip_segments` |
| `rastercut.polygon` | `Polygon`: vertices pushed one by one, then closed by repeating the first vertex |
| `rastercut.convexclip` | Segment clipping by a convex polygon: `is_convex`, `clip_segment`, `clip_segments`, `NotConvexError` |
| `rastercut.polyclip` | Polygon clipping by a convex polygon: `visibility`, `segments_cross`, `cross_point`, `clip_polygon_by`, `clip_polygon` |
| `rastercut.scanline_app` | `ScanlineApp` and `are_collinear` |
| `rastercut.seedfill_app` | `SeedFillApp` and `DrawMode` |
| `rastercut.rect_app` | `RectClipApp` |

### State classes

- `ScanlineApp` adds vertices by `click(position, shift)` (snapping to nearby
  vertices and closing when the first vertex is hit) or by
  `add_point(x_text, y_text)`, and fills with `fill_figure(delay_text)`.
  It raises `GraphicsError` for a degenerate (collinear) polygon, for
  closing with too few vertices, and for filling while a figure is still
  being drawn.
- `SeedFillApp` draws polylines, circles or ellipses depending on its
  `mode` (`DrawMode.LINE`, `DrawMode.CIRCLE`, `DrawMode.ELLIPSE`), takes a
  seed with `set_seed`, `set_seed_pos` or `middle_click`, and fills with
  `fill_figure(delay_text)`, recursively if `recursive` is set. A seed on a
  border pixel, or filling without a seed, raises `GraphicsError`.
- `RectClipApp` sets the rectangle with two `primary_click` calls or with
  `set_cutter`, adds segments with two `secondary_click` calls or with
  `add_line`, and stores the visible parts in `cut_lines` on `cut()`.

Text fields are parsed with `parse_unsigned`, which raises
`InvalidValueError` (a `GraphicsError` and a `ValueError`) for anything but
an unsigned integer that fits the field.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

Clip segments by a rectangle:

```python
from rastercut.rectclip import clip_segments

rect = ((10.0, 10.0), (100.0, 80.0))
lines = [((0.0, 50.0), (200.0, 50.0))]
print(clip_segments(rect, lines))
```

Clip by a convex polygon; the last vertex repeats the first:

```python
from rastercut.convexclip import clip_segments, NotConvexError

square = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0)]
print(clip_segments(square, [((-5.0, 5.0), (15.0, 5.0))]))
```

Clip one polygon by another:

```python
from rastercut.polyclip import clip_polygon

cutter = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
triangle = [(5.0, -5.0), (15.0, 5.0), (5.0, 15.0)]
print(clip_polygon(cutter, triangle))
```

Seed-fill a closed outline:

```python
from rastercut.seedfill import SeedCanvas

canvas = SeedCanvas()
black, red = (0, 0, 0), (255, 0, 0)
for point in [(10.0, 10.0), (40.0, 10.0), (40.0, 40.0), (10.0, 40.0)]:
    canvas.add_point(point, black)
canvas.close()
canvas.fill((20.0, 20.0), red, black, 0, False, None)
print(canvas.at(20, 20))
```

Drive the rectangle clipping state:

```python
from rastercut.rect_app import RectClipApp

app = RectClipApp()
app.primary_click((10, 10))
app.primary_click((100, 80))
app.secondary_click((0, 50))
app.secondary_click((200, 50))
app.cut()
print(app.cut_lines)
```

## What it does not do

- There is no window, screen or drawing surface, and no command to run:
  the state classes keep shapes, pixels and results as data, and drawing
  them is left to the caller.
- Clipping by a convex polygon (`rastercut.convexclip`) and clipping of one
  polygon by another (`rastercut.polyclip`) come as functions only; there
  is no state class that builds their cutters and figures from clicks.