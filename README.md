# animodeler

Building blocks for a small keyframe animation and modeling tool. The package
holds state and arithmetic only. It does no drawing of its own.

## Modules

- `animodeler.vecmath`: `Vec` is a mutable vector of any length. It supports
  `+`, `-`, unary `-`, and `*` as a dot product between vectors or as scaling
  by a number. It also supports `/` by a number, `==`, `length`, `length2`,
  `normalize`, `is_zero`, `zero_elements` and `resize`. The module-level
  functions `minimum`, `maximum` and `prod` work element by element. Combining
  vectors of different sizes raises `VectorSizeMismatch`, which is a
  `ValueError`. Normalising a zero vector raises `ZeroDivisionError`.
- `animodeler.vectors`: fixed-size `Vec2`, `Vec3` and `Vec4` with the same
  arithmetic.
  - `Vec3 ^ Vec3` is the cross product.
  - `Vec3.clamp()` clamps every element into `[0, 1]`.
  - `Vec3 * Vec4` and `Vec4 * Vec3` use `dot_affine`, which adds the fourth
    element as is.
  - `vec4to3` drops the fourth element.
  - `parse_vec3` and `parse_vec4` read whitespace-separated numbers from a
    string.
- `animodeler.geometry`: the `Point` dataclass. `Point.write` writes a point
  to a text stream and `read_point` reads one back. The module also has the
  comparisons `smaller_x` and `larger_x`, and `Rect`, an axis-aligned
  rectangle whose `validate` orders its edges.
- `animodeler.curves`: `LinearCurveEvaluator.evaluate_curve(control_points,
  ani_length, wrap, default_value)`. It returns the control points followed by
  a start point at time 0 and an end point at `ani_length`.
  - Without wrapping, the curve is flat at both ends.
  - With wrapping, both end values lie on the straight line across the
    wrap-around.
- `animodeler.viewport`: `CurveDomain` (a value range) and `Viewport`, a
  normalised view over a window of a given pixel size.
  - Viewing: zoom, pan, `zoom_all`, and a rubber-band selection that
    `zoom_to_selection` zooms to.
  - Mapping between curve coordinates and window pixels: `curve_to_window` and
    `window_to_curve`.
- `animodeler.graph`: `GraphView`, the state of a curve editor.
  - Curves: added with `add_curve`, each with its `CurveType` and its domain.
  - Selection: which curves are active, and which one is current.
  - Time: the current time and the end time.
  - View: zoom selection, and curve/window mapping.
  - Grid: `window_to_grid`, `grid_to_window`, and `grid_points`, which gives
    grid dot positions in normalised device coordinates.
- `animodeler.indicator`: `IndicatorTrack`, a horizontal track over a given
  pixel width. It holds sorted time markers and a floating marker that snaps
  when it sits on a marker. It also has a range marker and pixel/value
  conversion. `find_indicator` returns the nearest marker within the pick
  window, or `None`.
- `animodeler.particles`: `ParticleSystem`, a pool of 500 particles moved by
  Euler steps under gravity and air drag. Particles take their slots in turn
  and overwrite the oldest once the pool is full. `spawn_particles(point)`
  emits five particles at a point with a small random sideways velocity. An
  optional `rng` with a `random()` method makes the runs repeatable.
  `bake_particles` records positions per time and `clear_baked` drops them.
- `animodeler.controls`: `ModelerControl` (a named slider) and `ControlSet`.
  A `ControlSet` holds the model's controls followed by ten camera controls:
  Azimuth, Elevation, Dolly, Twist, LookAt X/Y/Z, FOV, and the near and far
  clipping planes. `set_value` calls the set's optional `callback`.
  `sync_simulation` brings a particle system and a "simulate" switch into
  agreement and returns the switch's new state.
- `animodeler.drawstate`: `DrawState` holds the draw mode, quality, material
  colours and shininess, and a model-view matrix. Primitives go one of two
  ways:
  - With a `.ray` file open (`open_ray_file`), `draw_sphere`, `draw_box`,
    `draw_cylinder` and `draw_triangle` write scene text to it.
  - Otherwise they are recorded in `DrawState.primitives`.

  `triangle_normal` gives the unnormalised normal of a triangle.
- `animodeler.imageio`: `load_image` and `save_image` handle packed RGB bytes
  stored bottom row first. `save_image` writes `.png` or `.jpg` through Pillow.

## Installation

```
pip install .
```

## Example

```python
from animodeler.curves import LinearCurveEvaluator
from animodeler.geometry import Point
from animodeler.drawstate import DrawState

points = LinearCurveEvaluator().evaluate_curve(
    [Point(1.0, 2.0), Point(5.0, 4.0)], 20.0, False, 0.0
)

with DrawState() as state:
    state.open_ray_file("scene.ray")
    state.set_diffuse_color(0.8, 0.2, 0.2, 1.0)
    state.draw_sphere(1.0)
```

Leaving the `with` block closes the `.ray` file.

## What it does not do

- It has no window, no user interface, no command to run and no OpenGL
  rendering. Primitives drawn without a `.ray` file are only recorded.
- `GraphView` keeps curve types, domains and the view. It does not store or
  edit control points, and it cannot save or load animation scripts.
- The only curve evaluator is the linear one. Every `CurveType` uses it.
- There is no camera. `spawn_particles` takes a world-space point directly.

## Tests

```
pip install .[test]
pytest
```