# rastersvg

A small software rasterizer and the pieces around it: colors, vectors and
4x4 matrices, a pixel rasterizer with a sample buffer, a drawing renderer
that keeps a pan-and-zoom view per drawing and can save its framebuffer as
PNG, and a headless viewer that forwards window-style events to a renderer
and keeps an on-screen status display.

The package has no runtime dependencies outside the standard library.

## Building blocks

### Colors (`rastersvg.color`)

`Color` is a frozen dataclass with red, green and blue channels, nominally
in `[0, 1]`. Colors add and multiply component-wise, scale by a number,
index and iterate as `(r, g, b)`, and convert to and from `#rrggbb`
strings. `Color.WHITE` and `Color.BLACK` are provided.

```python
from rastersvg.color import Color

orange = Color.from_hex("#ff8000")
print(orange.to_hex())          # "#ff8000"
dimmer = orange * 0.5
mixed = orange + Color(0, 0, 1)
red, green, blue = orange
print(Color.from_bytes(b"\xff\x00\x00"))   # (1,0,0)
```

`from_hex` raises `ValueError` for anything other than six hex digits
(with or without a leading `#`); `to_hex` clamps each channel to `[0, 1]`.

### Vectors and matrices (`rastersvg.vectors`, `rastersvg.matrix4x4`)

`Vector2D`, `Vector3D` and `Vector4D` are small dataclasses with
component-wise addition, subtraction, negation, scaling and `dot()`.
`Vector4D.to_3d()` drops the `w` component; `Vector4D.project_to_3d()`
divides by it.

`Matrix4x4` is built from four rows of four values (or sixteen values in
row order). `m[i, j]` is row `i`, column `j`; `m[i]` and `m.column(i)` give
column `i` as a `Vector4D`. It offers `det()`, `norm()` (Frobenius),
`transpose()`, `inverse()` (raising `ValueError` when singular), `zero()`,
`identity()`, and the usual arithmetic with numbers, matrices and
`Vector4D`. `outer(u, v)` builds the outer product of two 4-vectors.

```python
from rastersvg.matrix4x4 import Matrix4x4

m = Matrix4x4.identity()
print(m.det())                  # 1.0
print((2 * m).inverse()[0, 0])  # 0.5
```

### Timer and base64 (`rastersvg.timer`, `rastersvg.codec`)

`Timer` measures the time between `start()` and `stop()`; `duration()`
raises `RuntimeError` until both have been called. The clock can be
passed in, which makes it easy to test.

`base64_encode(data)` returns padded base64 text. `base64_decode(text)`
stops at padding or the first character outside the base64 alphabet and
tolerates missing padding.

### Rasterizer (`rastersvg.rasterizer`)

`Rasterizer` draws points and lines into a sample buffer and resolves it
into an 8-bit RGB framebuffer of `3 * width * height` bytes, row by row.
The pixel and level sampling methods are recorded as `PixelSampleMethod`
and `LevelSampleMethod` values.

```python
from rastersvg.color import Color
from rastersvg.rasterizer import Rasterizer

width, height = 64, 48
framebuffer = bytearray(3 * width * height)

raster = Rasterizer(width=width, height=height)
raster.set_framebuffer_target(framebuffer, width, height)
raster.clear_buffers()
raster.rasterize_line(2, 2, 60, 40, Color.BLACK)
raster.rasterize_point(10.5, 20.5, Color(1, 0, 0))
raster.resolve_to_framebuffer()
```

Points outside the buffer are ignored; `fill_pixel` raises `IndexError`
for pixels outside it. Lines are drawn by stepping one pixel along their
major axis.

### Renderer interface and drawing renderer (`rastersvg.renderer`, `rastersvg.drawrend`)

`Renderer` is an abstract base class with `init`, `render`, `resize`,
`name` and `info`, plus optional cursor, scroll, mouse and keyboard event
handlers.

`DrawRend` is a `Renderer` for a list of drawings. A drawing is any object
with `width` and `height` attributes and a `draw(rasterizer, transform)`
method; `transform @ Vector2D(x, y)` maps a point of the drawing to screen
pixels. Call `init()` and then `resize(width, height)` before use. Each
redraw rasterizes the current drawing and a black outline around its
canvas.

Holding the left mouse button (`mouse_event(0, 1, 0)`) and moving the
cursor pans the view; scrolling zooms it. Key presses
(`keyboard_event(ord(key), 1, 0)`) do the following:

| key     | effect                                              |
|---------|-----------------------------------------------------|
| `1`–`9` | switch to the n-th drawing                          |
| space   | reset the view                                      |
| `=`/`-` | raise or lower the supersample rate (1, 4, 9, 16)   |
| `P`     | toggle the pixel sampling method                    |
| `L`     | cycle the level sampling method                     |
| `Z`     | toggle the zoom window                              |
| `S`     | save the displayed frame as `screenshot_<date>.png` in the working directory |

`render()` returns the displayed RGB frame, with the magnified zoom window
in the top-right corner when it is shown; `zoom_pixels()` returns that
window on its own. `info()` describes the resolution, sampling methods and
sample rate. `write_framebuffer(path)` saves the framebuffer (default
`test.png`) as a PNG, and `encode_png(path, rgba, width, height)` writes
any top-down RGBA pixel data the same way.

### On-screen text and viewer (`rastersvg.osdtext`, `rastersvg.viewer`)

`OSDText` keeps lines of status text (`OSDLine`) addressed by id, with
anchor, text, size and color; setters ignore unknown ids.

`Viewer` drives a renderer without opening a window. `init()` sets up the
renderer and two status lines, `update(now)` renders one frame and returns
it, updating the frame-rate line once a second and the renderer's info line
every frame. The callbacks forward resize, cursor (doubled on high-DPI
framebuffers), scroll, mouse and key events; Escape sets `should_close` and
the grave accent toggles the status display.

## What the package does not do

- It does not read SVG files. `DrawRend` draws whatever drawing objects it
  is given; parsing files into such objects is up to the caller.
- It does not open a window or draw to the screen. The viewer and renderer
  produce frames and status text as data; showing them is left to the
  caller.
- The rasterizer draws points and lines only; it has no triangle filling,
  color interpolation or texturing, and the supersample rate changes the
  recorded setting without producing antialiased output.
- There is no command-line program.

## Running the tests

Install the `test` extra and run pytest from the project root.