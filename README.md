# fractol

An interactive explorer for the Mandelbrot set and Julia sets. It opens a
1080×1080 window and draws the chosen fractal. You can zoom with the scroll
wheel and reshape Julia sets with the mouse.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```
fractol mandelbrot
fractol julia <real> <imaginary>
```

Examples:

```
fractol mandelbrot
fractol julia -0.8 0.156
```

The two Julia values may contain digits and the characters `-`, `+` and `.`.
Each of those three characters must be followed by a digit or by the end of
the value. Commas are rejected. The values are read by
`fractol.parsing.parse_double`. That function accepts an optional leading
`-` but not `+`, so a value written with a leading `+` is read as 0.

Any other input prints "Invalid Input" and a usage line, and the command
exits with status 1. If the window cannot be opened, the error is printed and
the status is also 1.

## Controls

| Input                              | Effect                                          |
|------------------------------------|-------------------------------------------------|
| scroll                             | zoom in (up) or out (down) around the cursor    |
| hold space + move mouse            | the Julia constant follows the mouse            |
| press 9                            | switch to the mouse-driven colour palette       |
| esc, or closing the window         | quit                                            |

Each zoom step scales the view by a factor of 1.5. Points are iterated at
most 30 times.

While space is held, the Julia constant is the mouse position divided by
1000. The constant stays mouse-driven after space is released. Once the
colour palette has been switched with 9, it stays switched. The alternate
palette shifts each channel by the mouse position, so it changes as the mouse
moves with space held.

Mandelbrot points that never escape are drawn black. Julia points that never
escape are given the colour value 30 (`0x00001E`), which is a very dark blue.
The four control hints are drawn in the top-left corner of the window.

## Library use

The building blocks can be used on their own:

```python
from fractol.formula import mandelbrot_iterations, julia_iterations
from fractol.colours import colour
from fractol.parsing import parse_arguments, parse_double

mandelbrot_iterations(0.0, 0.0)         # 30: the point never escapes
julia_iterations(0.0, 0.0, -0.8, 0.156)
colour(5, 0, 0, False)                  # 0xA05028
parse_double("  -1.25")                 # -1.25
parse_arguments(["julia", "-0.8", "0.156"])
```

`mandelbrot_iterations`, `julia_iterations` and `colour` accept numpy arrays
as well as plain numbers.

- `fractol.view.Viewport` maps pixels to the complex plane and zooms around
  a pixel.
- `fractol.view.FractalState` holds the viewport, the mouse position and the
  mode flags.
- `fractol.render.pixel_colour` gives the colour of a single pixel.
- `fractol.render.render_image` builds a full frame as a (1080, 1080) array
  of packed `0xRRGGBB` values.
- `fractol.app.FractolApp` drives the window. It has `handle_key`,
  `handle_scroll`, `handle_motion`, `redraw` and `run`.

The package also ships small general-purpose helpers:

- `fractol.chars`: ASCII classification and case conversion.
- `fractol.memory`: byte-buffer fill, copy, move, search and compare.
- `fractol.numbers`: `atoi` and `itoa` for 32-bit integers.
- `fractol.text_search`: `strlen`, `strchr`, `strrchr`, `strncmp` and `strnstr`.
- `fractol.text_transform`: copy, join, trim, split and map text.
- `fractol.linked_list`: a singly linked `LinkedList` of `Node`s.
- `fractol.fdio`: writing characters, text and integers to a stream.
- `fractol.printf`: `format_message` and `print_formatted`. They handle the
  conversions `c s p d i u x X %%`.

## Limitations

The window size (1080×1080) and the iteration limit (30) are fixed. There is
no option to change them. Frames cannot be saved as image files. Only the
Mandelbrot set and Julia sets are available.