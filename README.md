# wireframe3d

A small wireframe 3D renderer. Objects are made of labelled points joined by
edges. Every frame, each point is rotated by its object's yaw, pitch and roll
(in degrees), moved into world space, turned into camera space (camera angles
in radians) and projected with a simple perspective divide. Points behind the
near plane are dropped, as are edges with either end behind it. Objects are
drawn farthest from the camera first.

The demo scene holds a yellow tetrahedron, two cubes (red and blue) and a green
ground grid. The red cube drifts around inside a 200 × 200 area, bouncing off
its edges, and reverses direction when it touches the blue cube.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window, draws the lines and plays the
bounce sound.

## Running the demo

```
wireframe3d
```

Options:

| Option      | Default              | Meaning                                  |
|-------------|----------------------|------------------------------------------|
| `--width`   | 1920                 | window width in pixels                   |
| `--height`  | 1080                 | window height in pixels                  |
| `--sound`   | `./Audio/boing.ogg`  | sound played when the red cube bounces   |
| `--seed`    | none                 | seed for the red cube's random path      |
| `--fps`     | 60                   | frame-rate limit                         |

If the sound file cannot be loaded, the demo runs silently.

Controls:

| Key            | Action                               |
|----------------|--------------------------------------|
| W / S          | move forward / backward              |
| A / D          | strafe left / right                  |
| Left Ctrl      | move the camera's y up               |
| Space          | move the camera's y down             |
| ← / →          | turn left / right                    |
| ↑ / ↓          | look up / down                       |
| I / K / J / L  | push the blue cube along +z / −z / −x / +x |
| = / -          | spin the tetrahedron faster / slower |
| Esc            | quit                                 |

## Using the library

- `wireframe3d.types` has the dataclasses `Rotation` (pitch, roll, yaw),
  `Position` (x, y, z and a rotation; `Position.shifted` returns a new position
  with another added) and `Camera` (position, `fov` scale of 600 and
  `near_plane` of 3 by default).
- `wireframe3d.hitbox` has `Hitbox` (x, y, z extents, a `HitboxType` kind and
  optional outline points set with `set_points`) and `HitboxType`.
- `wireframe3d.point` has `Point`, a vertex with a position and an ordered set
  of connection labels (`add_connection`, `add_connections`), and
  `PointRegistry`, which keeps labels unique. A point registers itself on
  creation: in the registry passed as `registry=`, or else in one shared
  registry. An empty label, a label already registered, or a repeated
  connection raises `PointError`.
- `wireframe3d.object` has `Object`, with `move`, `collides_with`,
  `set_color`, `project_points`, `project_edges` and `draw`, plus the helpers
  `degrees_to_radians`, `transform_point` and `project`.
- `wireframe3d.shapes` builds the demo geometry (`tetrahedron_points`,
  `cube_points`, `plane_points`, each using a fresh registry unless one is
  given) and the whole scene (`build_scene`, a dict keyed `"tetrahedron"`,
  `"cube1"`, `"cube2"` and `"plane"`).
- `wireframe3d.app` has `Simulation`, whose `step` advances the scene one frame
  and `handle_keys` applies a set of held pygame key codes, along with
  `calculate_distance`, `sort_for_drawing`, `draw_objects` and `main`.

Projection needs no window: `Object.project_points` and `Object.project_edges`
take a camera and a `(width, height)` size and return screen coordinates, so
scenes can be checked or drawn with any backend.

```python
from wireframe3d.shapes import cube_points
from wireframe3d.object import Object
from wireframe3d.types import Camera, Position

cube = Object(cube_points(), Position(0, 0, 20))
segments = cube.project_edges(Camera(), (800, 600))
```

## What it does not do

Only edges and vertices are drawn: there are no filled faces, no lighting and
no hidden-line removal beyond drawing farther objects first. Collisions always
compare axis-aligned boxes from the hitbox extents and ignore rotation. The
`SPHERE` and `CUSTOM` hitbox kinds, and hitbox outline points, are stored but
do not change how collisions are tested.

## Running the tests

```
pip install .[test]
pytest
```