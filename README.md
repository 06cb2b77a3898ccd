# ferriswheel

An animated Ferris wheel in 3D. It has ten coloured cabins with translucent
windows that sway gently on their pivots. The wheel also has metallic rims,
spokes, a central axle and a base with two feet and four slanted columns. It
turns slowly in front of a camera that you can move around it. One white light
and a metallic material light the scene.

## Installing

```
pip install .
```

The window needs a display and OpenGL. The package uses pyglet for both.

## Running

```
ferriswheel
```

This opens a resizable 1000×800 window titled "Roda Gigante". The animation
advances one frame every 16 ms, which is about 60 frames per second. The command
has no options other than `--help`.

## Controls

Keys work in lower case and in upper case.

| Key            | Action                                           |
|----------------|--------------------------------------------------|
| `a` / `d`      | orbit the camera left / right                    |
| `w` / `s`      | tilt the camera up / down (limited to ±1.5 rad)  |
| `e` or `=`     | move the camera closer (no nearer than 2.0)      |
| `q` or `-`     | move the camera away                             |
| `l`            | stop or restart the wheel                        |

When the wheel stops, the cabins keep swaying for a while. The sway slows down
a little on each frame until it comes to rest. When the wheel starts again, the
sway goes back to its normal speed.

## Using the pieces

The simulation state does not need a window, so you can use it on its own:

```python
from ferriswheel.state import WheelState

state = WheelState()
state.press("l")   # pause the wheel
state.tick()       # advance one frame
print(state.wheel_angle, state.sway_angle)
```

The other modules:

- `ferriswheel.camera` has `camera_position`, `perspective`, `look_at` and
  `viewport_projection`. They return plain row-major 4×4 matrices.
- `ferriswheel.geometry` has the matrix helpers `identity`, `translation`,
  `rotation`, `scaling` and `compose`. It also builds `Mesh` objects with
  `cube`, `cylinder`, `disk`, `torus` and `quad`.
- `ferriswheel.scene` has `scene_parts(state)`, which turns a `WheelState` into
  a list of `Part` objects (mesh, colour, transform). It also has
  `wheel_parts`, `base_parts`, `cabin_parts`, `metallic_material` and
  `default_light`.
- `ferriswheel.app` has `WheelWindow`, which connects pyglet window events to
  the state, and `main`, which is the entry point of the `ferriswheel` command.

## Tests

```
pip install .[test]
pytest
```