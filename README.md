# sdfvolume

Sample signed distance functions (SDFs) onto a cubic voxel grid, combine
grids voxel by voxel, preview slices as ASCII art in the terminal, and export
the grid as a raw block of unsigned bytes.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install .[test]
pytest
```

## Command line

```
sdfvolume OUTPUT_FILE
```

The same command is available as `python -m sdfvolume.cli OUTPUT_FILE`.

It samples the built-in `repeating_transform_sdf` shape onto a
256 × 256 × 256 grid, clamps every value to at most 0 and negates the grid, so
the inside of the shape becomes positive. It then:

1. prints a coarse numeric summary of the grid (see `str(volume)` below);
2. plays back every slice along the first axis as ASCII art (`#` where the
   value is above 0), pausing about 3 seconds in total over all frames and
   running the `clear` command between frames (if `clear` cannot be started,
   the screen is simply not cleared);
3. writes the grid to `OUTPUT_FILE` in the raw format described below.

Without exactly one argument it prints a usage line to standard error and
exits with status 1. The shape, grid size and threshold are fixed; the command
has no options.

## Output format

The file holds `size ** 3` bytes and no header. The first index varies
slowest and the last index fastest. Each voxel value is multiplied by 255,
clamped to the range 0–255 and truncated to an unsigned byte, so values of
1.0 and above become 255 and values of 0.0 and below become 0.

## Library

### Distance functions

`sdfvolume.sdflib` provides functions of `(x, y, z)`, negative inside the
shape. They accept plain floats or NumPy arrays of matching shape and work
element-wise:

- `sphere_sdf` (a squared-radius field, `x² + y² + z² - 0.5`), `box_sdf`,
  `round_box_sdf`, `box_frame_sdf`
- `torus_sdf`, `capped_torus_sdf`, `link_sdf`, `cylinder_sdf`
- `repeating_shape_sdf`, `repeating_transform_sdf` — space-folding shapes

Two helpers are used by the folding shapes:

- `rot(angle)` returns a 2 × 2 rotation matrix, applied as `rot(angle) @ v`;
- `pmod(p, size)` wraps 2D coordinates into the cell `[-size/2, size/2)`.

### Volumes

```python
from sdfvolume.sdflib import torus_sdf, box_frame_sdf
from sdfvolume.volume import Volume

torus = Volume(64)
torus.set_sdf(torus_sdf)

frame = Volume(64)
frame.set_sdf(box_frame_sdf)

# Clamp both to the inside, add them, and flip the sign.
combined = -(torus.minimum(0) | frame.minimum(0))

print(combined.render_slice(32))
with open("shape.raw", "wb") as handle:
    combined.write_binary(handle)
```

`Volume(size)` is a `size × size × size` grid of `float32` zeros, held in the
NumPy array `volume.data` and indexed as `data[i, j, k]`. A negative size
raises `ValueError`.

`set_sdf(sdf, value_scale=1.0, coord_scale=1.0)` fills the grid by evaluating
`sdf` at coordinates `(index / size - 0.5) * 2 * coord_scale` along each axis
and multiplying the result by `value_scale`; with scales of 1 the grid spans
−1 to just under 1. The function is called once per slice of the first axis
with three 2D arrays, so any callable used here must work element-wise on
NumPy arrays, as the functions in `sdfvolume.sdflib` do (a result that
broadcasts to the slice, such as a constant, is also accepted).

Voxel-wise operations between volumes of the same size:

| Expression | Result            |
|------------|-------------------|
| `a \| b`   | `a + b`           |
| `a - b`    | `a - b`           |
| `a & b`    | `a * b`           |
| `a \|= b`  | `a + b`, in place |
| `a -= b`   | `a - b`, in place |
| `-a`       | negation          |

Combining volumes of different sizes raises `ValueError`; combining a volume
with anything other than a `Volume` raises `TypeError`.
`minimum(value)` and `maximum(value)` return a new volume with each voxel
clamped against `value`.

For output:

- `str(volume)` gives a coarse numeric dump, taking every
  `size // 10 + 1`-th voxel along each axis;
- `render_slice(depth=0, threshold=0.0)` returns the slice `data[depth]`,
  sampled every `size // 30 + 1` voxels, as lines of `#` (value above the
  threshold) and space characters; a depth outside the grid raises
  `IndexError`;
- `write_slice(stream, depth=0, threshold=0.0)` writes that text to a text
  stream and returns the stream;
- `to_bytes()` and `write_binary(stream)` produce the raw format described
  above.

## What it does not do

There is no 3D viewer or window: previews are ASCII slices in the terminal
only. The exported file carries no header, so the grid size must be known to
whoever reads it back, and there is no function for reading such a file.